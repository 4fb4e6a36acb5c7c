"""Tests for CSV and DataFrame row sources."""
import pandas as pd
import pytest

from modelwarp.guesser import ColumnType, Guesser
from modelwarp.loader import CsvRowSource, DataFrameRowSource, get_sheet_names, open_row_source

CP = ColumnType.CONNECTION_POINT
FACT = ColumnType.FACT
DATE = ColumnType.DATE
ATTR = ColumnType.ATTRIBUTE


class TestCsvRowSource:
    """Delimited text files."""

    def test_rows_with_empty_fields_as_none(self, write_csv):
        path = write_csv("id,name\n1,alpha\n2,\n")

        assert list(CsvRowSource(path)) == [["id", "name"], ["1", "alpha"], ["2", None]]

    def test_ragged_rows_keep_their_width(self, write_csv):
        path = write_csv("a,b,c\n1,2\n")
        assert list(CsvRowSource(path))[1] == ["1", "2"]

    def test_byte_order_mark_stripped(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes("\ufeffid,name\n1,alpha\n".encode("utf-8"))

        assert next(iter(CsvRowSource(str(path)))) == ["id", "name"]

    def test_empty_header_cell_names_column_empty(self, write_csv):
        guesser = Guesser(CsvRowSource(write_csv("id,,name\n1,x,a\n")))

        assert guesser.headers == ["id", "", "name"]
        assert list(guesser.guess(10)) == ["id", "", "name"]

    def test_blank_line_ends_guess(self, write_csv):
        path = write_csv("qty\n1\n\nhello\n")
        assert Guesser(CsvRowSource(path)).guess(100)["qty"] == [CP, FACT, ATTR]

    def test_re_iterable(self, write_csv):
        source = CsvRowSource(write_csv("id\n1\n2\n"))
        assert list(source) == list(source)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CsvRowSource(str(tmp_path / "missing.csv"))


class TestDataFrameRowSource:
    """DataFrames, as read from Excel sheets."""

    def test_rows_as_strings_with_nulls(self):
        df = pd.DataFrame({"id": [1, 2], "name": ["alpha", None]})

        assert list(DataFrameRowSource(df)) == [["id", "name"], ["1", "alpha"], ["2", None]]

    def test_guess(self):
        df = pd.DataFrame({
            "id": ["1", "2", "3"],
            "region": ["north", "south", "north"],
            "amount": ["10.5", "20", "20"],
        })

        result = Guesser(DataFrameRowSource(df)).guess(1000)

        assert result == {
            "id": [CP, FACT, ATTR],
            "region": [ATTR],
            "amount": [FACT, ATTR],
        }


class TestOpenRowSource:
    """Choosing a source by file extension."""

    def test_csv(self, write_csv):
        assert isinstance(open_row_source(write_csv("a\n1\n")), CsvRowSource)

    def test_tsv(self, write_csv):
        source = open_row_source(write_csv("a\tb\n1\t2\n", name="data.tsv"))
        assert list(source)[1] == ["1", "2"]

    def test_excel(self, tmp_path):
        path = str(tmp_path / "orders.xlsx")
        pd.DataFrame({"id": [1, 2, 3], "region": ["north", "south", "north"]}).to_excel(path, index=False)

        source = open_row_source(path)

        assert get_sheet_names(path) == ["Sheet1"]
        assert Guesser(source).guess(10) == {"id": [CP, FACT, ATTR], "region": [ATTR]}

    def test_unsupported_extension(self, write_csv):
        with pytest.raises(ValueError, match="Unsupported file type"):
            open_row_source(write_csv("{}", name="data.json"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            open_row_source(str(tmp_path / "missing.csv"))
