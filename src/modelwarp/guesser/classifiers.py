"""
Field classifiers - inspect one raw value and emit evidence for or against types.

Classifiers never raise. A value they cannot make sense of becomes opposing
evidence, which the resolver treats as a veto.
"""
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from dateutil import parser as date_parser

from .types import ColumnType

# Also matches '', '+', '.' and '-.'
NUMBER_PATTERN = re.compile(r'^[+-]?[0-9]*(\.[0-9]*)?$')

# Compact calendar date, YYYYMMDD
COMPACT_DATE_PATTERN = re.compile(r'^[0-9]{8}$')

# Placeholder some exports use for a missing date
MISSING_DATE = '0000-00-00'


@dataclass(frozen=True)
class Evidence:
    """Types a single value supports (pros) and opposes (cons)."""
    pros: Tuple[ColumnType, ...] = ()
    cons: Tuple[ColumnType, ...] = ()

    @property
    def supports(self) -> bool:
        return bool(self.pros)


def looks_numeric(value: Optional[str]) -> bool:
    return value is None or NUMBER_PATTERN.fullmatch(value) is not None


def looks_like_date(value: str) -> bool:
    """
    True if the value parses as a calendar date.

    Bare numbers ("1", "20", "10.5") are never dates, even though the date
    parser would happily read them as a day of the current month. Eight
    digit values are the exception and parse as YYYYMMDD. Time zone names
    are ignored.
    """
    if looks_numeric(value) and not COMPACT_DATE_PATTERN.fullmatch(value):
        return False
    try:
        date_parser.parse(value, ignoretz=True)
    except (date_parser.ParserError, ValueError, OverflowError):
        return False
    return True


def check_number(header: str, value: Optional[str]) -> Evidence:
    """Null or numeric-looking values support fact and attribute; anything else opposes fact."""
    if looks_numeric(value):
        return Evidence(pros=(ColumnType.FACT, ColumnType.ATTRIBUTE))
    return Evidence(cons=(ColumnType.FACT,))


def check_date(header: str, value: Optional[str]) -> Evidence:
    """Missing dates support date, attribute and fact; parsable dates support date and attribute."""
    if value is None or value == MISSING_DATE:
        return Evidence(pros=(ColumnType.DATE, ColumnType.ATTRIBUTE, ColumnType.FACT))
    if looks_like_date(value):
        return Evidence(pros=(ColumnType.DATE, ColumnType.ATTRIBUTE))
    return Evidence(cons=(ColumnType.DATE,))


CLASSIFIERS = (check_number, check_date)
