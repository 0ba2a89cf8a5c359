"""
Row normalization: raw export rows to typed transaction records.
"""

import logging
import math
import re
from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from .locales import COLUMN_ALIASES, EXCLUDED_CUSTOMER, RECEIPT_KINDS
from .models import RawRow, ReceiptKind, SkipReason, SkipReport, TransactionRecord

logger = logging.getLogger(__name__)

_CURRENCY_PREFIX_RE = re.compile(r"^([+-]?)\s*\$")


def _as_text(value: Any) -> str | None:
    """Convert a cell value to text, treating None/NaN/empty as absent."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = value if isinstance(value, str) else str(value)
    if text == "":
        return None
    return text


def parse_amount(value: str) -> Decimal | None:
    """
    Parse a profit string such as "$1,234.50" into a Decimal.

    Args:
        value: Raw profit text

    Returns:
        Parsed amount, or None if the text is not a finite number
    """
    cleaned = _CURRENCY_PREFIX_RE.sub(r"\1", value.strip()).replace(",", "")
    # Decimal would read "1_000" as a digit-grouped number.
    if "_" in cleaned:
        return None
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


class RowNormalizer:
    """Maps raw rows to transaction records, resolving locale variants."""

    def __init__(
        self,
        column_aliases: Mapping[str, tuple[str, ...]] | None = None,
        receipt_kinds: Mapping[str, ReceiptKind] | None = None,
        excluded_customer: str = EXCLUDED_CUSTOMER,
    ):
        self.column_aliases = dict(column_aliases or COLUMN_ALIASES)
        self.receipt_kinds = dict(receipt_kinds or RECEIPT_KINDS)
        self.excluded_customer = excluded_customer.strip().lower()

    def resolve_field(self, row: RawRow, field_name: str) -> str | None:
        """Return the first present value among the aliases of a field."""
        for column in self.column_aliases.get(field_name, ()):
            text = _as_text(row.get(column))
            if text is not None:
                return text
        return None

    def classify(self, receipt_type: str) -> ReceiptKind:
        return self.receipt_kinds.get(receipt_type, ReceiptKind.UNRECOGNIZED)

    def normalize(
        self,
        row: RawRow,
        report: SkipReport | None = None,
    ) -> TransactionRecord | None:
        """
        Normalize a single raw row.

        Args:
            row: Raw row from the decoder
            report: Optional report that collects skip reasons

        Returns:
            TransactionRecord, or None if the row is skipped
        """
        customer_name = self.resolve_field(row, "customer_name")
        if (
            customer_name is not None
            and customer_name.strip().lower() == self.excluded_customer
        ):
            return self._skip(SkipReason.EXCLUDED_CUSTOMER, report)

        receipt_type = self.resolve_field(row, "receipt_type")
        if receipt_type is None:
            return self._skip(SkipReason.MISSING_RECEIPT_TYPE, report)

        profit = self.resolve_field(row, "profit")
        if profit is None:
            return self._skip(SkipReason.MISSING_PROFIT, report)

        amount = parse_amount(profit)
        if amount is None:
            return self._skip(SkipReason.INVALID_AMOUNT, report)

        return TransactionRecord(
            kind=self.classify(receipt_type),
            amount=amount,
            date_key=self.resolve_field(row, "date_created") or "",
            customer_name=customer_name,
        )

    def normalize_rows(
        self,
        rows: Iterable[RawRow],
        report: SkipReport | None = None,
    ) -> list[TransactionRecord]:
        """Normalize a sequence of rows, dropping skipped ones."""
        records = []
        for row in rows:
            record = self.normalize(row, report)
            if record is not None:
                records.append(record)
        return records

    @staticmethod
    def _skip(reason: SkipReason, report: SkipReport | None) -> None:
        logger.debug(f"Skipping row: {reason.value}")
        if report is not None:
            report.record(reason)
        return None
