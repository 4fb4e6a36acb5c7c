"""Candidate logical model types and their fixed priority"""
from enum import Enum
from typing import Dict, Iterable, List


class ColumnType(str, Enum):
    CONNECTION_POINT = 'connection_point'
    FACT = 'fact'
    DATE = 'date'
    ATTRIBUTE = 'attribute'

    def __str__(self) -> str:
        return self.value


# Most preferred first
TYPES_PRIORITY = (
    ColumnType.CONNECTION_POINT,
    ColumnType.FACT,
    ColumnType.DATE,
    ColumnType.ATTRIBUTE,
)

PRIORITY_RANK: Dict[ColumnType, int] = {t: i for i, t in enumerate(TYPES_PRIORITY)}


def rank(a: ColumnType, b: ColumnType) -> int:
    """Compare two types by priority: negative if `a` is preferred over `b`."""
    return PRIORITY_RANK[a] - PRIORITY_RANK[b]


def sort_types(types: Iterable[ColumnType]) -> List[ColumnType]:
    """Order types by priority, most preferred first."""
    return sorted(types, key=PRIORITY_RANK.__getitem__)
