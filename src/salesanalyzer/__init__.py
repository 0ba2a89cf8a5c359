"""
Sales Analyzer - retail and club profit totals from sales exports.

This package provides tools to load CSV and spreadsheet sales exports,
classify each row by receipt type, and build daily and monthly totals.
"""

from .aggregator import Aggregator, default_month_selection, filter_by_month
from .analyzer import SalesAnalyzer
from .loader import FileDecodeError, SalesFileLoader, UnsupportedFileTypeError
from .models import (
    ALL_MONTHS,
    AggregationResult,
    DailyProfit,
    FilteredView,
    Language,
    ReceiptKind,
    SalesReport,
    SkipReport,
    TransactionRecord,
)
from .locales import month_labels
from .normalizer import RowNormalizer
from .output_formatter import ExcelFormatter, SummaryFormatter, format_currency

__version__ = "0.1.0"
__all__ = [
    "ALL_MONTHS",
    "AggregationResult",
    "Aggregator",
    "DailyProfit",
    "ExcelFormatter",
    "FileDecodeError",
    "FilteredView",
    "Language",
    "ReceiptKind",
    "RowNormalizer",
    "SalesAnalyzer",
    "SalesFileLoader",
    "SalesReport",
    "SkipReport",
    "SummaryFormatter",
    "TransactionRecord",
    "UnsupportedFileTypeError",
    "default_month_selection",
    "filter_by_month",
    "format_currency",
    "month_labels",
]
