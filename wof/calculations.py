"""Helper functions for WOF expiry and reminder calculations."""

from datetime import date, datetime, timedelta
from dateutil.relativedelta import relativedelta
from typing import Iterable, List, Optional, Union

from .constants import EXPIRING_SOON_DAYS, REMINDER_INTERVALS, REMINDER_LEAD_MONTHS
from .derived_status import DerivedStatus
from .status import DateValidation, ExpiryStatus

DateLike = Union[date, datetime, int, float]


def to_local_date(value: DateLike) -> date:
    """
    Truncate a point in time to its local calendar date (midnight).

    Accepts a date, a datetime (aware values are converted to local time
    first) or an epoch timestamp in milliseconds.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000).date()
    raise TypeError(f"Cannot read a date from {value!r}")


def days_until_expiry(expiry: DateLike, today: DateLike) -> int:
    """Whole days from today to expiry. Negative = days past expiry."""
    return (to_local_date(expiry) - to_local_date(today)).days


def check_expiry_status(days_remaining: int) -> ExpiryStatus:
    """Classify days remaining into an urgency status."""
    if days_remaining < 0:
        return ExpiryStatus.EXPIRED
    if days_remaining <= EXPIRING_SOON_DAYS:
        return ExpiryStatus.EXPIRING_SOON
    return ExpiryStatus.ROADWORTHY


def get_status(expiry: DateLike, today: DateLike) -> DerivedStatus:
    """Derive the status of an expiry date as seen from today."""
    days = days_until_expiry(expiry, today)
    return DerivedStatus(status=check_expiry_status(days), days_remaining=days)


def get_date_validation(expiry: DateLike, today: DateLike) -> DateValidation:
    """Feedback state for a date being entered into a form."""
    days = days_until_expiry(expiry, today)
    if days < 0:
        return DateValidation.PAST
    if days <= EXPIRING_SOON_DAYS:
        return DateValidation.WARNING
    return DateValidation.VALID


def quick_preset_date(days: int, today: DateLike) -> date:
    """Date a fixed number of days after today."""
    return to_local_date(today) + timedelta(days=days)


# =============================================================================
# Reminder cadence
# =============================================================================


def _check_interval(interval: int) -> None:
    if interval not in REMINDER_INTERVALS:
        raise ValueError(
            f"Reminder interval must be one of {REMINDER_INTERVALS}, got {interval!r}"
        )


def reminder_start(expiry: DateLike) -> date:
    """First reminder date: one calendar month before expiry."""
    return to_local_date(expiry) - relativedelta(months=REMINDER_LEAD_MONTHS)


def reminder_dates(expiry: DateLike, interval: int) -> List[date]:
    """
    All reminder dates for an expiry: every `interval` days from
    reminder_start up to and including the expiry date itself.
    """
    _check_interval(interval)
    end = to_local_date(expiry)
    current = reminder_start(end)
    dates = []
    while current <= end:
        dates.append(current)
        current += timedelta(days=interval)
    return dates


def next_reminder(expiry: DateLike, interval: int, today: DateLike) -> Optional[date]:
    """The next reminder on or after today, or None once all have passed."""
    today = to_local_date(today)
    for reminder in reminder_dates(expiry, interval):
        if reminder >= today:
            return reminder
    return None


def is_reminder_due(expiry: DateLike, interval: int, today: DateLike) -> bool:
    """Check if a reminder falls on today."""
    return to_local_date(today) in reminder_dates(expiry, interval)


def reminders_due(records: Iterable, today: DateLike) -> list:
    """Records whose reminder falls on today, in input order."""
    return [
        r
        for r in records
        if is_reminder_due(r.expiry_date, r.reminder_interval, today)
    ]
