"""
Command-line interface for sales analysis.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .aggregator import resolve_month
from .analyzer import SalesAnalyzer
from .loader import FileDecodeError, SalesFileLoader, UnsupportedFileTypeError
from .models import Language, SkipReport

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("summary", "daily", "excel", "all")


def load_config(config_file: str | None) -> dict:
    """Load CLI configuration from JSON file."""
    if not config_file:
        return {}

    config_path = Path(config_file)
    if not config_path.exists():
        logger.debug(f"CLI config file {config_file} does not exist")
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
        logger.debug(f"Loaded CLI config from {config_file}")
        return config
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON in CLI config file {config_file}: {e}")
        return {}
    except OSError as e:
        logger.warning(f"Failed to load CLI config from {config_file}: {e}")
        return {}


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Total retail and club profit from a sales export",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    parser.add_argument(
        "--config",
        help="Path to CLI configuration file (contains defaults for language, month, output_format)",
    )

    parser.add_argument(
        "sales_file",
        help="Path to the sales export (.csv, .xlsx or .xls)",
    )

    parser.add_argument(
        "--language",
        choices=[language.value for language in Language],
        help="Display language for month names",
    )

    parser.add_argument(
        "--month",
        help="Month to show (name, number 1-12, or 'all'). Defaults to the most recent month",
    )

    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Output format",
    )

    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Report rows that were skipped during normalization",
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(args.config)

    language_value = args.language or config.get("language", Language.EN.value)
    output_format = args.output_format or config.get("output_format", "summary")
    month_value = args.month or config.get("month")

    try:
        language = Language(language_value)
    except ValueError:
        logger.error(f"Error: unsupported language '{language_value}'")
        sys.exit(1)

    if output_format not in OUTPUT_FORMATS:
        logger.error(f"Error: unsupported output_format '{output_format}'")
        sys.exit(1)

    loader = SalesFileLoader(
        encoding=config.get("csv_encoding", "utf-8-sig"),
        delimiter=config.get("csv_delimiter", ","),
    )
    analyzer = SalesAnalyzer(language=language, loader=loader)
    skip_report = SkipReport() if args.diagnostics else None

    try:
        report = analyzer.analyze_file(args.sales_file, report=skip_report)
    except (UnsupportedFileTypeError, FileDecodeError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    result = report.result
    month = analyzer.default_selection(result).default
    if month_value is not None:
        try:
            month = resolve_month(month_value)
        except ValueError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)

    view = analyzer.filter(result, month)

    outputs = []
    if output_format in ("summary", "all"):
        outputs.append(
            analyzer.format_summary(view, report.file_name, skip_report),
        )
        outputs.append(analyzer.format_months(result, month))
    if output_format in ("daily", "all"):
        outputs.append(analyzer.format_daily(view))
    if output_format in ("excel", "all"):
        outputs.append(analyzer.format_for_excel(view))

    # Output to stdout for user to copy/paste
    logger.info(("\n" + "=" * 50 + "\n").join(outputs))


if __name__ == "__main__":
    main()
