"""Status enums for WOF expiry urgency."""

from enum import Enum


class Severity(Enum):
    """Visual treatment for a status badge."""

    SUCCESS = "success"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"


class ExpiryStatus(Enum):
    """WOF status categories. Lower value = more urgent."""

    EXPIRED = 1
    EXPIRING_SOON = 2
    ROADWORTHY = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def severity(self) -> Severity:
        return _SEVERITIES[self]

    @property
    def icon(self) -> str:
        return _ICONS[self]


_LABELS = {
    ExpiryStatus.EXPIRED: "Expired",
    ExpiryStatus.EXPIRING_SOON: "Expiring Soon",
    ExpiryStatus.ROADWORTHY: "Roadworthy",
}

_SEVERITIES = {
    ExpiryStatus.EXPIRED: Severity.DESTRUCTIVE,
    ExpiryStatus.EXPIRING_SOON: Severity.WARNING,
    ExpiryStatus.ROADWORTHY: Severity.SUCCESS,
}

_ICONS = {
    ExpiryStatus.EXPIRED: "cancel-circle",
    ExpiryStatus.EXPIRING_SOON: "clock",
    ExpiryStatus.ROADWORTHY: "checkmark-circle",
}


class DateValidation(Enum):
    """Feedback state for an expiry date typed into a form."""

    PAST = "past"
    WARNING = "warning"
    VALID = "valid"

    def message(self, days_remaining: int) -> str:
        """Inline hint shown under the date field."""
        if self is DateValidation.PAST:
            return "This date has passed"
        if self is DateValidation.WARNING:
            return f"Expires in {days_remaining} days"
        return "Valid expiry date"
