"""
Vehicle WOF expiry tracking models.

This package provides the data model for tracking WOF certificates:
- VehicleRecord: a client's vehicle and its expiry date
- ExpiryStatus / DerivedStatus: urgency of an expiry (Expired, Expiring Soon, Roadworthy)
- parse_date / format_date: DD/MM/YYYY handling for user input
- project: search, sort and de-duplication of record lists
- loader functions: owner-scoped YAML persistence
"""

from .constants import VEHICLE_MAKES, REMINDER_INTERVALS, QUICK_PRESETS, DATE_FORMAT_HINT
from .errors import (
    WofError,
    RecordValidationError,
    InvalidDateError,
    UnauthorizedError,
    RecordNotFoundError,
    RecordFormatError,
)
from .status import Severity, ExpiryStatus, DateValidation
from .derived_status import DerivedStatus
from .calculations import (
    to_local_date,
    days_until_expiry,
    check_expiry_status,
    get_status,
    get_date_validation,
    quick_preset_date,
    reminder_start,
    reminder_dates,
    next_reminder,
    is_reminder_due,
    reminders_due,
)
from .dates import parse_date, try_parse_date, format_date
from .vehicle_record import VehicleRecord, migrate_legacy_record
from .projection import (
    SORT_COLUMNS,
    SortState,
    toggle_sort,
    dedupe_records,
    filter_records,
    sort_records,
    project,
)
from .loader import (
    load_records,
    get_record,
    create_record,
    update_record,
    delete_record,
)

__all__ = [
    "VEHICLE_MAKES",
    "REMINDER_INTERVALS",
    "QUICK_PRESETS",
    "DATE_FORMAT_HINT",
    "WofError",
    "RecordValidationError",
    "InvalidDateError",
    "UnauthorizedError",
    "RecordNotFoundError",
    "RecordFormatError",
    "Severity",
    "ExpiryStatus",
    "DateValidation",
    "DerivedStatus",
    "to_local_date",
    "days_until_expiry",
    "check_expiry_status",
    "get_status",
    "get_date_validation",
    "quick_preset_date",
    "reminder_start",
    "reminder_dates",
    "next_reminder",
    "is_reminder_due",
    "reminders_due",
    "parse_date",
    "try_parse_date",
    "format_date",
    "VehicleRecord",
    "migrate_legacy_record",
    "SORT_COLUMNS",
    "SortState",
    "toggle_sort",
    "dedupe_records",
    "filter_records",
    "sort_records",
    "project",
    "load_records",
    "get_record",
    "create_record",
    "update_record",
    "delete_record",
]
