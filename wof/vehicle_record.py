"""VehicleRecord class - one client's vehicle and its WOF expiry."""

from datetime import date
from typing import Any, Dict, Optional

from .calculations import to_local_date
from .constants import DATE_FORMAT_HINT, REMINDER_INTERVALS, VEHICLE_MAKES
from .dates import parse_date
from .errors import InvalidDateError

MIN_PLATE_LENGTH = 3
DEFAULT_REMINDER_INTERVAL = 30

# Filled in for fields the five-field record shape never had
LEGACY_PHONE_PLACEHOLDER = "unknown"


class VehicleRecord:
    """A client's vehicle with the date its WOF lapses."""

    def __init__(
        self,
        client_name: str,
        client_phone_number: str,
        plate_number: str,
        make: str,
        expiry_date: Optional[date],
        reminder_interval: int = DEFAULT_REMINDER_INTERVAL,
        id: Optional[str] = None,
    ):
        self.id = id
        self.client_name = client_name
        self.client_phone_number = client_phone_number
        self.plate_number = plate_number
        self.make = make
        self.expiry_date = expiry_date
        self.reminder_interval = reminder_interval

    def __repr__(self) -> str:
        return (
            f"VehicleRecord(id={self.id!r}, client_name={self.client_name!r}, "
            f"plate_number={self.plate_number!r}, expiry_date={self.expiry_date!r})"
        )

    @property
    def vehicle_name(self) -> str:
        """Human-readable vehicle name."""
        return f"{self.make} {self.plate_number}"

    def validate(self) -> Dict[str, str]:
        """Check the record invariants. Returns field name -> message."""
        errors = {}
        if not (self.client_name or "").strip():
            errors["client_name"] = "Client name is required"
        if not (self.client_phone_number or "").strip():
            errors["client_phone_number"] = "Phone number is required"

        plate = self.plate_number or ""
        if not plate.strip():
            errors["plate_number"] = "License plate is required"
        elif len(plate) < MIN_PLATE_LENGTH:
            errors["plate_number"] = "License plate must be at least 3 characters"

        if not self.make:
            errors["make"] = "Vehicle make is required"
        elif self.make not in VEHICLE_MAKES:
            errors["make"] = f"Unknown vehicle make: {self.make}"

        if self.expiry_date is None:
            errors["expiry_date"] = "Expiry date is required"
        elif not isinstance(self.expiry_date, date):
            errors["expiry_date"] = f"Invalid date format. Use {DATE_FORMAT_HINT}"

        if self.reminder_interval not in REMINDER_INTERVALS:
            options = ", ".join(str(i) for i in REMINDER_INTERVALS)
            errors["reminder_interval"] = f"Reminder interval must be one of {options} days"
        return errors

    @property
    def is_valid(self) -> bool:
        return not self.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored dict format (camelCase keys)."""
        d: Dict[str, Any] = {}
        if self.id is not None:
            d["id"] = self.id
        d["clientName"] = self.client_name
        d["clientPhoneNumber"] = self.client_phone_number
        d["plateNumber"] = self.plate_number
        d["make"] = self.make
        d["expiryDate"] = self.expiry_date.isoformat() if self.expiry_date else None
        d["reminderInterval"] = self.reminder_interval
        return d

    @classmethod
    def from_dict(cls, dct: Dict[str, Any]) -> "VehicleRecord":
        """Build a record from the stored dict format."""
        return cls(
            client_name=dct["clientName"],
            client_phone_number=dct["clientPhoneNumber"],
            plate_number=dct["plateNumber"],
            make=dct["make"],
            expiry_date=read_expiry_date(dct.get("expiryDate")),
            reminder_interval=dct.get("reminderInterval", DEFAULT_REMINDER_INTERVAL),
            id=dct.get("id"),
        )


def read_expiry_date(value: Any) -> Optional[date]:
    """
    Read a stored expiry date.

    Stored files hold ISO strings; YAML may already have turned those into
    dates. DD/MM/YYYY text and epoch-millisecond numbers are accepted too.
    """
    if value is None:
        return None
    if isinstance(value, str):
        if "/" in value:
            return parse_date(value)
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise InvalidDateError(value, f"Invalid stored date {value!r}, expected YYYY-MM-DD") from None
    return to_local_date(value)


def is_legacy_record(dct: Dict[str, Any]) -> bool:
    """Check if a stored dict uses the old five-field shape."""
    return "licensePlate" in dct and "plateNumber" not in dct


def migrate_legacy_record(dct: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map the five-field record shape onto the current one.

    name -> clientName, licensePlate -> plateNumber, vehicleMake -> make.
    Phone number and reminder interval did not exist and get defaults.
    Dicts already in the current shape are returned unchanged.
    """
    if not is_legacy_record(dct):
        return dct
    migrated = {k: v for k, v in dct.items() if k not in ("name", "licensePlate", "vehicleMake")}
    migrated["clientName"] = dct.get("name")
    migrated["clientPhoneNumber"] = dct.get("clientPhoneNumber") or LEGACY_PHONE_PLACEHOLDER
    migrated["plateNumber"] = dct["licensePlate"]
    migrated["make"] = dct.get("vehicleMake")
    migrated["expiryDate"] = dct.get("expiryDate")
    migrated["reminderInterval"] = dct.get("reminderInterval", DEFAULT_REMINDER_INTERVAL)
    return migrated
