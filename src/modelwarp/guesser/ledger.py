"""
Evidence ledger - per-column pros/cons counts gathered while scanning a sample.

One ledger lives for exactly one guess. Rows are classified independently,
so ledgers filled from different slices of a sample can be merged before
the uniqueness pass runs over the combined state.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..exceptions import EmptyDatasetError, RowWidthMismatchError
from .classifiers import CLASSIFIERS, Evidence
from .types import ColumnType, sort_types


@dataclass
class ColumnEvidence:
    """Evidence for a single column."""
    pros: Counter = field(default_factory=Counter)
    cons: Counter = field(default_factory=Counter)
    seen: Counter = field(default_factory=Counter)

    def record(self, evidence: Evidence) -> bool:
        """Add a classifier's evidence. Returns True if it supported any type."""
        self.pros.update(evidence.pros)
        self.cons.update(evidence.cons)
        return evidence.supports

    def support(self, *types: ColumnType) -> None:
        self.pros.update(types)

    def observe(self, value: Optional[str]) -> None:
        self.seen[value] += 1

    @property
    def distinct_values(self) -> int:
        return len(self.seen)

    def candidates(self) -> List[ColumnType]:
        """Supported types with no opposing evidence, most preferred first."""
        return sort_types(t for t in self.pros if self.cons[t] == 0)

    def merge(self, other: 'ColumnEvidence') -> None:
        self.pros.update(other.pros)
        self.cons.update(other.cons)
        self.seen.update(other.seen)


def header_name(value: Any) -> str:
    """Column name for a header cell; an empty cell names the column ''."""
    return '' if value is None else str(value)


def _as_field(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


class EvidenceLedger:
    """Accumulates evidence for every column named in the header row."""

    def __init__(self, headers: Optional[Sequence[Any]]):
        if not headers:
            raise EmptyDatasetError()
        self.headers: List[str] = [header_name(h) for h in headers]
        # Duplicate headers share one entry
        self.columns: Dict[str, ColumnEvidence] = {h: ColumnEvidence() for h in self.headers}
        self.rows_observed = 0

    def __getitem__(self, header: str) -> ColumnEvidence:
        return self.columns[header]

    def observe_row(self, row: Sequence[Any]) -> None:
        """Classify every field of a data row."""
        row_index = self.rows_observed + 1
        if len(row) != len(self.headers):
            raise RowWidthMismatchError(len(self.headers), len(row), row_index)

        for header, raw in zip(self.headers, row):
            value = _as_field(raw)
            column = self.columns[header]
            supported = False
            for classify in CLASSIFIERS:
                # every classifier runs, even after one has supported a type
                supported = column.record(classify(header, value)) or supported
            if not supported:
                column.support(ColumnType.ATTRIBUTE)
            column.observe(value)

        self.rows_observed = row_index

    def observe_rows(self, rows: Iterable[Sequence[Any]]) -> None:
        for row in rows:
            self.observe_row(row)

    def merge(self, other: 'EvidenceLedger') -> None:
        """Fold another ledger over the same headers into this one."""
        if other.headers != self.headers:
            raise ValueError(f"Cannot merge ledgers with different headers: {other.headers} != {self.headers}")
        for header, column in other.columns.items():
            self.columns[header].merge(column)
        self.rows_observed += other.rows_observed
