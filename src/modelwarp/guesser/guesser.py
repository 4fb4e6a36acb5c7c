"""
Guesser - guess logical model types of a data stream from its first rows.

Usage:
    guesser = Guesser(CsvRowSource('orders.csv'))
    guess = guesser.guess(1000)
    guess['order_id']   # [ColumnType.CONNECTION_POINT, ColumnType.FACT, ...]
"""
import logging
from typing import Any, Iterable, Iterator, List, Optional, Sequence

from ..exceptions import EmptyDatasetError
from .ledger import EvidenceLedger, header_name
from .resolver import GuessResult, finalize

logger = logging.getLogger(__name__)

Row = Sequence[Optional[Any]]


class Guesser:
    """
    Guesses candidate types for every column of a row source.

    The first row of the source is the header row. Re-iterable sources
    (lists, the loader's row sources) are re-read from the top on every
    guess, so repeated guesses agree. A one-shot iterator is read once:
    each guess continues where the previous one stopped.
    """

    def __init__(self, source: Iterable[Row]):
        self._source = source
        rows = iter(source)
        self._reader: Optional[Iterator[Row]] = rows if rows is source else None

        header = next(rows, None)
        if not header:
            raise EmptyDatasetError()
        self.headers: List[str] = [header_name(h) for h in header]

    def _data_rows(self) -> Iterator[Row]:
        if self._reader is not None:
            return self._reader
        rows = iter(self._source)
        next(rows, None)
        return rows

    def guess(self, limit: int) -> GuessResult:
        """
        Scan at most `limit` data rows and rank candidate types per column.

        An empty row ends the sample early. Raises RowWidthMismatchError if
        a sampled row is wider or narrower than the header.
        """
        ledger = EvidenceLedger(self.headers)
        rows = self._data_rows()

        while ledger.rows_observed < limit:
            row = next(rows, None)
            if not row:
                break
            ledger.observe_row(row)

        count = ledger.rows_observed
        logger.debug(f"Scanned {count} rows (limit {limit}) across {len(self.headers)} columns")
        return finalize(ledger, count)
