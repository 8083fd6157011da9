"""Exceptions raised by the record model and the records store."""

from typing import Dict

from .constants import DATE_FORMAT_HINT


class WofError(Exception):
    """Base class for recoverable, user-facing failures."""


class RecordValidationError(WofError):
    """One or more record fields break the record invariants."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("Invalid vehicle record: " + "; ".join(self.errors.values()))


class InvalidDateError(WofError, ValueError):
    """Text could not be read as a real DD/MM/YYYY calendar date."""

    def __init__(self, text, message: str = f"Invalid date format. Use {DATE_FORMAT_HINT}"):
        self.text = text
        self.message = message
        super().__init__(message)


class RecordFormatError(WofError):
    """A stored record could not be read back from the records file."""


class UnauthorizedError(WofError):
    """A mutation was attempted without a caller identity."""


class RecordNotFoundError(WofError):
    """The record id is unknown or belongs to another owner."""
