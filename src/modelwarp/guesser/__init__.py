"""Column type guessing from a bounded sample of rows"""
from .types import ColumnType, TYPES_PRIORITY, rank, sort_types
from .classifiers import Evidence, check_number, check_date, looks_numeric, looks_like_date
from .ledger import ColumnEvidence, EvidenceLedger
from .resolver import GuessResult, finalize, mark_connection_points
from .guesser import Guesser
