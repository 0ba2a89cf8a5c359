"""
Decoding of sales export files (CSV and spreadsheets) into raw rows.
"""

import logging
from enum import Enum
from pathlib import Path

import pandas as pd

from .models import RawRow

logger = logging.getLogger(__name__)

EXCEL_CONTENT_TYPES = {
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-excel",
}


class UnsupportedFileTypeError(Exception):
    """Exception raised when a file is neither CSV nor a spreadsheet."""


class FileDecodeError(Exception):
    """Exception raised when a file cannot be decoded in its claimed format."""


class FileType(Enum):
    """Supported upload formats."""

    CSV = "csv"
    EXCEL = "excel"


def detect_file_type(file_name: str, content_type: str | None = None) -> FileType:
    """
    Determine the file format from its extension or MIME type.

    Args:
        file_name: Name or path of the file
        content_type: Optional MIME type reported alongside the file

    Returns:
        FileType of the file

    Raises:
        UnsupportedFileTypeError: If neither extension nor MIME type match
    """
    extension = Path(file_name).suffix.lower().lstrip(".")

    if extension == "csv" or content_type == "text/csv":
        return FileType.CSV
    if extension in ("xlsx", "xls") or content_type in EXCEL_CONTENT_TYPES:
        return FileType.EXCEL

    raise UnsupportedFileTypeError(
        f"Unsupported file type for {file_name}: please upload a .xlsx or .csv file",
    )


class SalesFileLoader:
    """Loads sales exports into a list of raw rows."""

    def __init__(
        self,
        encoding: str = "utf-8-sig",
        delimiter: str = ",",
    ):
        self.encoding = encoding
        self.delimiter = delimiter

    def load_rows(
        self,
        file_path: str | Path,
        content_type: str | None = None,
    ) -> list[RawRow]:
        """
        Decode a CSV or spreadsheet file into raw rows.

        Args:
            file_path: Path to the file
            content_type: Optional MIME type used when the extension is unknown

        Returns:
            List of rows, each mapping column name to cell value
        """
        file_type = detect_file_type(str(file_path), content_type)
        logger.debug(f"Loading {file_path} as {file_type.value}")

        if file_type is FileType.CSV:
            df = self._read_csv(file_path)
        else:
            df = self._read_excel(file_path)

        df.columns = [str(column).strip() for column in df.columns]
        rows = df.to_dict("records")
        logger.info(f"Loaded {len(rows)} rows from {Path(file_path).name}")
        return rows

    def _read_csv(self, file_path: str | Path) -> pd.DataFrame:
        try:
            return pd.read_csv(
                file_path,
                delimiter=self.delimiter,
                encoding=self.encoding,
                dtype=str,
                keep_default_na=False,
            )
        except Exception as e:
            raise FileDecodeError(f"Error parsing CSV file: {e}") from e

    def _read_excel(self, file_path: str | Path) -> pd.DataFrame:
        """Read the first sheet of a workbook."""
        try:
            df = pd.read_excel(file_path, sheet_name=0, dtype=str)
        except Exception as e:
            raise FileDecodeError(f"Error parsing Excel file: {e}") from e
        return df.fillna("")
