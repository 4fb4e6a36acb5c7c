"""Errors raised while guessing column types and reading model descriptions"""
from typing import Optional


class GuessError(ValueError):
    """Malformed input that stops a guess."""


class EmptyDatasetError(GuessError):
    """The data source has no header row, or the header row has no fields."""

    def __init__(self, message: str = "Empty data set"):
        super().__init__(message)


class RowWidthMismatchError(GuessError):
    """A sampled row does not have as many fields as the header row."""

    def __init__(self, expected: int, actual: int, row_index: int):
        self.expected = expected
        self.actual = actual
        self.row_index = row_index
        super().__init__(f"{actual} fields in row {row_index}, {expected} expected")


class ModelDescriptionError(ValueError):
    """A model description file could not be read."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        message = f"Error reading dataset config file '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
