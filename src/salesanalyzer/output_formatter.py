"""
Text output for aggregation results.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from .locales import month_name
from .models import (
    ALL_MONTHS,
    AggregationResult,
    FilteredView,
    Language,
    MonthSelection,
    SkipReport,
)

_CENTS = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Format an amount with exactly two decimals and no thousands separator."""
    with localcontext() as ctx:
        # Room for every integer digit plus the two decimals.
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return str(rounded)


def format_currency(amount: Decimal) -> str:
    """Format an amount as dollars, e.g. "$1234.50"."""
    return f"${format_amount(amount)}"


def format_month(month: int | str, language: Language = Language.EN) -> str:
    if month == ALL_MONTHS:
        return "All months"
    return month_name(month, language)


class SummaryFormatter:
    """Formats the totals summary."""

    @staticmethod
    def format_summary(
        view: FilteredView,
        language: Language = Language.EN,
        file_name: str | None = None,
        skip_report: SkipReport | None = None,
    ) -> str:
        """Format retail, club and grand totals for a filtered view.

        Args:
            view: FilteredView object
            language: Language used for the month name
            file_name: Optional name of the analyzed file
            skip_report: Optional skip counts to list at the end
        """
        lines = []
        lines.append("=== Sales Summary ===")
        if file_name:
            lines.append(f"File: {file_name}")
        lines.append(f"Month: {format_month(view.month, language)}")
        lines.append(f"Days: {len(view.daily_series)}")
        lines.append(f"Retail Sales: {format_currency(view.retail_total)}")
        lines.append(f"Club Visit/Sale: {format_currency(view.club_total)}")
        lines.append(f"Total Profit: {format_currency(view.total)}")

        if skip_report is not None:
            lines.append("")
            lines.append(f"Skipped rows: {skip_report.total}")
            for reason, count in sorted(
                skip_report.counts.items(),
                key=lambda item: item[0].value,
            ):
                lines.append(f"  {reason.value}: {count}")

        return "\n".join(lines)


class DailyFormatter:
    """Formats the day-by-day breakdown."""

    def format_daily(self, view: FilteredView) -> str:
        lines = ["Date | Retail | Club | Total"]
        for day in view.daily_series:
            lines.append(
                f"{day.date} | {format_currency(day.retail)} | "
                f"{format_currency(day.club)} | {format_currency(day.total)}",
            )
        if not view.daily_series:
            lines.append("(no dated transactions)")
        return "\n".join(lines)


class ExcelFormatter:
    """Formats the daily breakdown as tab-separated values for pasting."""

    def __init__(self, include_header: bool = True):
        self.include_header = include_header

    def format_for_excel(self, view: FilteredView) -> str:
        """
        Format a filtered view for spreadsheet pasting.

        Args:
            view: FilteredView object

        Returns:
            Tab-separated rows with plain two-decimal amounts
        """
        lines = []
        if self.include_header:
            lines.append("\t".join(("Date", "Retail", "Club", "Total")))

        for day in view.daily_series:
            lines.append(
                "\t".join(
                    (
                        day.date,
                        format_amount(day.retail),
                        format_amount(day.club),
                        format_amount(day.total),
                    ),
                ),
            )

        lines.append(
            "\t".join(
                (
                    "Total",
                    format_amount(view.retail_total),
                    format_amount(view.club_total),
                    format_amount(view.total),
                ),
            ),
        )
        return "\n".join(lines)


def format_months(
    result: AggregationResult,
    selection: MonthSelection,
    language: Language = Language.EN,
    selected: int | str | None = None,
) -> str:
    """List the month filter options, marking the selected one."""
    if not result.available_months:
        return "Months: none (showing all data)"

    current = selection.default if selected is None else selected
    labels = []
    for option in selection.options:
        label = format_month(option, language)
        labels.append(f"[{label}]" if option == current else label)
    return "Months: " + ", ".join(labels)
