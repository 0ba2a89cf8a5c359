"""
Aggregation of transaction records into totals, a daily series and months.
"""

import logging
import re
from collections.abc import Iterable
from datetime import datetime

import pandas as pd

from .locales import month_from_name
from .models import (
    ALL_MONTHS,
    ZERO,
    AggregationResult,
    DailyBucket,
    DailyProfit,
    FilteredView,
    MonthSelection,
    ReceiptKind,
    TransactionRecord,
)

logger = logging.getLogger(__name__)

_SLASH_DATE_FORMATS = (
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %I:%M:%S %p",
)

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_date_key(date_key: str) -> datetime | None:
    """
    Parse a raw date string into a naive datetime.

    US-style MM/DD/YYYY strings are tried first; anything else goes through
    pandas' generic parser.

    Returns:
        Parsed datetime, or None if the string is not a date
    """
    text = date_key.strip()
    if not text:
        return None

    for fmt in _SLASH_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        parsed = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(parsed):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.tz_convert(None)
    return parsed.to_pydatetime()


def month_from_date_key(date_key: str) -> int | None:
    """
    Derive the month number (1-12) of a raw date string.

    For MM/DD/YYYY-shaped strings the month is read from the first component
    without building a full date. Other strings fall back to generic parsing.
    """
    parts = date_key.split("/")
    if len(parts) >= 3:
        match = _LEADING_INT_RE.match(parts[0])
        if not match:
            return None
        month = int(match.group(1))
        return month if 1 <= month <= 12 else None

    parsed = parse_date_key(date_key)
    if parsed is None:
        return None
    return parsed.month


class Aggregator:
    """Aggregates transaction records into an AggregationResult."""

    def aggregate(self, records: Iterable[TransactionRecord]) -> AggregationResult:
        """
        Aggregate records into running totals, daily series and months.

        Args:
            records: Normalized transaction records

        Returns:
            AggregationResult object
        """
        retail_total = ZERO
        club_total = ZERO
        buckets: dict[str, DailyBucket] = {}

        for record in records:
            if record.kind is ReceiptKind.RETAIL:
                retail_total += record.amount
            elif record.kind is ReceiptKind.CLUB:
                club_total += record.amount

            if record.date_key:
                bucket = buckets.get(record.date_key)
                if bucket is None:
                    bucket = DailyBucket(date_key=record.date_key)
                    buckets[record.date_key] = bucket
                bucket.add(record)

        dated = [
            (bucket, parse_date_key(bucket.date_key)) for bucket in buckets.values()
        ]
        daily_series = self._build_series(dated)
        available_months = self._collect_months(dated)

        logger.debug(
            f"Aggregated {len(daily_series)} days across {len(available_months)} months",
        )

        return AggregationResult(
            retail_total=retail_total,
            club_total=club_total,
            daily_series=daily_series,
            available_months=available_months,
        )

    def _build_series(
        self,
        dated: list[tuple[DailyBucket, datetime | None]],
    ) -> tuple[DailyProfit, ...]:
        """Sort buckets chronologically; unparseable dates go last."""
        ordered = sorted(
            dated,
            key=lambda item: (item[1] is None, item[1] or datetime.min),
        )
        return tuple(
            DailyProfit(
                date=bucket.date_key,
                retail=bucket.retail_total,
                club=bucket.club_total,
                total=bucket.retail_total + bucket.club_total,
                month=month_from_date_key(bucket.date_key),
            )
            for bucket, _ in ordered
        )

    def _collect_months(
        self,
        dated: list[tuple[DailyBucket, datetime | None]],
    ) -> tuple[int, ...]:
        """Distinct months, the one holding the latest date first."""
        latest: dict[int, datetime | None] = {}

        for bucket, parsed in dated:
            month = month_from_date_key(bucket.date_key)
            if month is None:
                continue
            current = latest.get(month)
            if month not in latest or (
                parsed is not None and (current is None or parsed > current)
            ):
                latest[month] = parsed

        with_dates = [month for month, parsed in latest.items() if parsed is not None]
        without_dates = [month for month, parsed in latest.items() if parsed is None]
        with_dates.sort(key=lambda month: latest[month], reverse=True)
        return tuple(with_dates + without_dates)


def default_month_selection(result: AggregationResult) -> MonthSelection:
    """
    Determine the default month filter for a result.

    A single month is selected and cannot be turned off. With several months
    the most recent one is selected and an "all months" option is offered.
    Without months, everything is shown.
    """
    months = result.available_months
    if not months:
        return MonthSelection(
            default=ALL_MONTHS,
            options=(),
            allow_all=False,
            togglable=False,
        )
    if len(months) == 1:
        return MonthSelection(
            default=months[0],
            options=months,
            allow_all=False,
            togglable=False,
        )
    return MonthSelection(
        default=months[0],
        options=(*months, ALL_MONTHS),
        allow_all=True,
        togglable=True,
    )


def filter_by_month(result: AggregationResult, month: int | str) -> FilteredView:
    """
    Restrict the daily series to one month and recompute totals over it.

    Args:
        result: Aggregation result to filter (left untouched)
        month: Month number (1-12) or ALL_MONTHS

    Returns:
        FilteredView object
    """
    if month == ALL_MONTHS:
        series = result.daily_series
    else:
        series = tuple(day for day in result.daily_series if day.month == month)

    return FilteredView(
        month=month,
        daily_series=series,
        retail_total=sum((day.retail for day in series), ZERO),
        club_total=sum((day.club for day in series), ZERO),
    )


def resolve_month(value: str | int) -> int | str:
    """
    Turn a user-supplied month into a month number or ALL_MONTHS.

    Accepts "all", a month number, or a month name in any supported language.

    Raises:
        ValueError: If the value does not name a month
    """
    if isinstance(value, int):
        if 1 <= value <= 12:
            return value
        raise ValueError(f"Unknown month: {value}")

    text = value.strip()
    if text.upper() == ALL_MONTHS:
        return ALL_MONTHS
    if text.isdigit():
        return resolve_month(int(text))

    month = month_from_name(text)
    if month is None:
        raise ValueError(f"Unknown month: {value}")
    return month
