"""Guess resolution - turn a filled ledger into ranked candidate types per column"""
import logging
from typing import Dict, List

from .ledger import EvidenceLedger
from .types import ColumnType

logger = logging.getLogger(__name__)

GuessResult = Dict[str, List[ColumnType]]


def mark_connection_points(ledger: EvidenceLedger, rows_scanned: int) -> List[str]:
    """
    Support connection_point for every column whose sampled values were all distinct.

    Runs once, after the whole sample has been observed. With no rows
    scanned every column trivially qualifies.

    Returns the headers that were marked.
    """
    marked = []
    for header, column in ledger.columns.items():
        if column.distinct_values == rows_scanned:
            column.support(ColumnType.CONNECTION_POINT)
            marked.append(header)
    return marked


def finalize(ledger: EvidenceLedger, rows_scanned: int) -> GuessResult:
    """Resolve the ledger into {header: [types, most preferred first]}, in header order."""
    marked = mark_connection_points(ledger, rows_scanned)
    logger.debug(f"Connection point candidates after {rows_scanned} rows: {marked}")

    result: GuessResult = {}
    for header in ledger.headers:
        if header in result:
            continue
        candidates = ledger[header].candidates()
        if not candidates:
            logger.debug(f"No candidate type survived for column '{header}'")
        result[header] = candidates
    return result
