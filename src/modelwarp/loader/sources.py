"""
Row sources - feed header and data rows to the guesser.

Every source is re-iterable: each iteration starts again at the header row.
Fields are strings, or None for an empty cell.
"""
import csv
import logging
import os
from typing import Any, Iterator, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)

CSV_EXTENSIONS = ('.csv', '.txt')
TSV_EXTENSIONS = ('.tsv', '.tab')
EXCEL_EXTENSIONS = ('.xlsx', '.xlsm')


class CsvRowSource:
    """
    Rows of a delimited text file, exactly as wide as they were written.

    Empty fields become None. A blank line yields an empty row, which the
    guesser treats as the end of the data.
    """

    def __init__(self, path: str, delimiter: str = ',', encoding: str = 'utf-8'):
        if not os.path.exists(path):
            raise FileNotFoundError(f"File not found: {path}")
        self.path = path
        self.delimiter = delimiter
        # utf-8-sig drops a leading byte order mark
        self.encoding = 'utf-8-sig' if encoding.lower().replace('_', '-') == 'utf-8' else encoding

    def __iter__(self) -> Iterator[List[Optional[str]]]:
        with open(self.path, newline='', encoding=self.encoding) as f:
            for row in csv.reader(f, delimiter=self.delimiter):
                yield [value if value != '' else None for value in row]

    def __repr__(self) -> str:
        return f"CsvRowSource({self.path!r})"


def _as_field(value: Any) -> Optional[str]:
    if pd.isna(value):
        return None
    return str(value)


class DataFrameRowSource:
    """Column labels of a DataFrame, then its rows with missing values as None."""

    def __init__(self, df: pd.DataFrame):
        self.df = df

    def __iter__(self) -> Iterator[List[Optional[str]]]:
        yield [str(c) for c in self.df.columns]
        for values in self.df.itertuples(index=False, name=None):
            yield [_as_field(v) for v in values]

    def __repr__(self) -> str:
        return f"DataFrameRowSource({len(self.df)} rows x {len(self.df.columns)} cols)"


def get_sheet_names(file_path: str) -> List[str]:
    """Get list of sheet names from an Excel file."""
    xl = pd.ExcelFile(file_path)
    return xl.sheet_names


def read_sheet(file_path: str, sheet_name: Optional[str] = None) -> DataFrameRowSource:
    """Read one Excel sheet (the first when no name is given) as strings."""
    df = pd.read_excel(file_path, sheet_name=sheet_name or 0, dtype=str)
    logger.debug(f"Read sheet {sheet_name or 0!r} of {os.path.basename(file_path)}: {len(df)} rows")
    return DataFrameRowSource(df)


def open_row_source(file_path: str, sheet_name: Optional[str] = None, encoding: str = 'utf-8'):
    """Pick a row source for a file by its extension."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    ext = os.path.splitext(file_path)[1].lower()

    if ext in CSV_EXTENSIONS:
        return CsvRowSource(file_path, encoding=encoding)
    if ext in TSV_EXTENSIONS:
        return CsvRowSource(file_path, delimiter='\t', encoding=encoding)
    if ext in EXCEL_EXTENSIONS:
        return read_sheet(file_path, sheet_name)
    raise ValueError(f"Unsupported file type: {ext}")
