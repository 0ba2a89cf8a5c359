"""
Data models for sales aggregation.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

# A decoded spreadsheet/CSV row: column name -> cell value.
RawRow = dict[str, Any]

# Sentinel for "no month filter".
ALL_MONTHS = "ALL"

ZERO = Decimal("0")


class Language(Enum):
    """Display language enumeration."""

    EN = "en"
    ES = "es"


class ReceiptKind(Enum):
    """Receipt type enumeration."""

    RETAIL = "retail"
    CLUB = "club"
    UNRECOGNIZED = "unrecognized"


class SkipReason(Enum):
    """Why a raw row did not produce a transaction record."""

    EXCLUDED_CUSTOMER = "excluded_customer"
    MISSING_RECEIPT_TYPE = "missing_receipt_type"
    MISSING_PROFIT = "missing_profit"
    INVALID_AMOUNT = "invalid_amount"


@dataclass(frozen=True)
class TransactionRecord:
    """A single normalized sales row."""

    kind: ReceiptKind
    amount: Decimal
    date_key: str
    customer_name: str | None = None


@dataclass
class DailyBucket:
    """Running retail and club totals for one date string."""

    date_key: str
    retail_total: Decimal = ZERO
    club_total: Decimal = ZERO

    def add(self, record: TransactionRecord) -> None:
        if record.kind is ReceiptKind.RETAIL:
            self.retail_total += record.amount
        elif record.kind is ReceiptKind.CLUB:
            self.club_total += record.amount


@dataclass(frozen=True)
class DailyProfit:
    """One entry of the daily series."""

    date: str
    retail: Decimal
    club: Decimal
    total: Decimal
    month: int | None = None


@dataclass(frozen=True)
class AggregationResult:
    """Result of aggregating transaction records."""

    retail_total: Decimal
    club_total: Decimal
    daily_series: tuple[DailyProfit, ...]
    available_months: tuple[int, ...]

    @property
    def grand_total(self) -> Decimal:
        return self.retail_total + self.club_total


@dataclass(frozen=True)
class MonthSelection:
    """Default month filter and the options offered to the user."""

    default: int | str
    options: tuple[int | str, ...]
    allow_all: bool
    togglable: bool


@dataclass(frozen=True)
class FilteredView:
    """Daily series and totals restricted to one month (or all)."""

    month: int | str
    daily_series: tuple[DailyProfit, ...]
    retail_total: Decimal
    club_total: Decimal

    @property
    def total(self) -> Decimal:
        return self.retail_total + self.club_total


@dataclass
class SkipReport:
    """Counts of rows skipped during normalization, by reason."""

    counts: dict[SkipReason, int] = field(default_factory=dict)

    def record(self, reason: SkipReason) -> None:
        self.counts[reason] = self.counts.get(reason, 0) + 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())


@dataclass(frozen=True)
class SalesReport:
    """Aggregation result together with the file it came from."""

    file_name: str
    result: AggregationResult
