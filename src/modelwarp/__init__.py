"""modelwarp - guess logical data model types from tabular data"""
from .exceptions import GuessError, EmptyDatasetError, RowWidthMismatchError, ModelDescriptionError
from .guesser import ColumnType, Guesser, GuessResult

__version__ = '0.1.0'
