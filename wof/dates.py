"""Parsing and formatting of DD/MM/YYYY dates typed by users."""

import re
from datetime import date
from typing import Optional

from .calculations import DateLike, to_local_date
from .errors import InvalidDateError

_DIGITS = re.compile(r"[0-9]+")

MIN_YEAR = 1900
MAX_YEAR = 2100


def parse_date(text: str) -> date:
    """
    Parse a DD/MM/YYYY string into a calendar date.

    Rejects anything that is not three /-separated integers in range, and
    any combination that is not a real calendar day (31/04, 29/02 outside a
    leap year). Raises InvalidDateError on failure.
    """
    if text is None or not text.strip():
        raise InvalidDateError(text, "Expiry date is required")

    parts = text.strip().split("/")
    if len(parts) != 3:
        raise InvalidDateError(text)

    fields = [p.strip() for p in parts]
    if not all(_DIGITS.fullmatch(f) for f in fields):
        raise InvalidDateError(text)
    day, month, year = (int(f) for f in fields)

    if not (1 <= day <= 31 and 1 <= month <= 12 and MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidDateError(text)

    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDateError(text) from None


def try_parse_date(text: str) -> Optional[date]:
    """Parse a DD/MM/YYYY string, returning None when it is not a valid date."""
    try:
        return parse_date(text)
    except InvalidDateError:
        return None


def format_date(value: DateLike) -> str:
    """Format a date as DD/MM/YYYY."""
    d = to_local_date(value)
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"
