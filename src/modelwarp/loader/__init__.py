"""Row sources for CSV and Excel files"""
from .sources import (
    CsvRowSource,
    DataFrameRowSource,
    get_sheet_names,
    read_sheet,
    open_row_source,
)
