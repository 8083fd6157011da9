"""DerivedStatus dataclass for a record's calculated WOF status."""

from dataclasses import dataclass

from .status import ExpiryStatus, Severity


@dataclass(frozen=True)
class DerivedStatus:
    """Status of one record relative to a reference date. Never stored."""

    status: ExpiryStatus
    days_remaining: int

    @property
    def label(self) -> str:
        return self.status.label

    @property
    def severity(self) -> Severity:
        return self.status.severity

    @property
    def needs_attention(self) -> bool:
        return self.status in (ExpiryStatus.EXPIRED, ExpiryStatus.EXPIRING_SOON)
