"""
Main analyzer class that orchestrates loading, normalization and aggregation.
"""

from collections.abc import Iterable
from pathlib import Path

from .aggregator import Aggregator, default_month_selection, filter_by_month
from .loader import SalesFileLoader
from .locales import month_labels
from .models import (
    AggregationResult,
    FilteredView,
    Language,
    MonthSelection,
    RawRow,
    SalesReport,
    SkipReport,
)
from .normalizer import RowNormalizer
from .output_formatter import (
    DailyFormatter,
    ExcelFormatter,
    SummaryFormatter,
    format_months,
)


class SalesAnalyzer:
    """Main analyzer class for sales exports."""

    def __init__(
        self,
        language: Language = Language.EN,
        loader: SalesFileLoader | None = None,
    ):
        self.language = language
        self.loader = loader or SalesFileLoader()
        self.normalizer = RowNormalizer()
        self.aggregator = Aggregator()
        self.summary_formatter = SummaryFormatter()
        self.daily_formatter = DailyFormatter()
        self.excel_formatter = ExcelFormatter()

    def analyze_rows(
        self,
        rows: Iterable[RawRow],
        report: SkipReport | None = None,
    ) -> AggregationResult:
        """Normalize and aggregate already decoded rows."""
        records = self.normalizer.normalize_rows(rows, report)
        return self.aggregator.aggregate(records)

    def analyze_file(
        self,
        file_path: str | Path,
        content_type: str | None = None,
        report: SkipReport | None = None,
    ) -> SalesReport:
        """
        Load a sales export and aggregate it.

        Args:
            file_path: Path to a .csv, .xlsx or .xls file
            content_type: Optional MIME type of the file
            report: Optional SkipReport collecting skipped rows

        Returns:
            SalesReport object
        """
        rows = self.loader.load_rows(file_path, content_type)
        result = self.analyze_rows(rows, report)
        return SalesReport(file_name=Path(file_path).name, result=result)

    def set_language(self, language: Language) -> None:
        """Switch the display language; results need no re-aggregation."""
        self.language = language

    def month_labels(self, result: AggregationResult) -> list[str]:
        return month_labels(result.available_months, self.language)

    def default_selection(self, result: AggregationResult) -> MonthSelection:
        return default_month_selection(result)

    def filter(self, result: AggregationResult, month: int | str) -> FilteredView:
        return filter_by_month(result, month)

    def format_summary(
        self,
        view: FilteredView,
        file_name: str | None = None,
        skip_report: SkipReport | None = None,
    ) -> str:
        return self.summary_formatter.format_summary(
            view,
            self.language,
            file_name,
            skip_report,
        )

    def format_daily(self, view: FilteredView) -> str:
        return self.daily_formatter.format_daily(view)

    def format_for_excel(self, view: FilteredView) -> str:
        return self.excel_formatter.format_for_excel(view)

    def format_months(
        self,
        result: AggregationResult,
        selected: int | str | None = None,
    ) -> str:
        return format_months(
            result,
            default_month_selection(result),
            self.language,
            selected,
        )
