#!/usr/bin/env python3
"""Tests for VehicleRecord class and legacy record migration."""

import pytest
from datetime import date, datetime

from wof import InvalidDateError, VehicleRecord, migrate_legacy_record
from wof.vehicle_record import is_legacy_record, read_expiry_date


def make_record(**overrides):
    fields = dict(
        client_name="John Smith",
        client_phone_number="021 555 1234",
        plate_number="ABC123",
        make="Toyota",
        expiry_date=date(2026, 3, 15),
        reminder_interval=14,
    )
    fields.update(overrides)
    return VehicleRecord(**fields)


class TestVehicleRecord:
    """Tests for VehicleRecord attributes."""

    def test_attributes(self):
        record = make_record(id="abc")
        assert record.id == "abc"
        assert record.client_name == "John Smith"
        assert record.client_phone_number == "021 555 1234"
        assert record.plate_number == "ABC123"
        assert record.make == "Toyota"
        assert record.expiry_date == date(2026, 3, 15)
        assert record.reminder_interval == 14

    def test_defaults(self):
        record = VehicleRecord("Ann", "021", "XYZ789", "Honda", date(2026, 1, 1))
        assert record.id is None
        assert record.reminder_interval == 30

    def test_vehicle_name(self):
        assert make_record().vehicle_name == "Toyota ABC123"


class TestValidate:
    """Tests for VehicleRecord.validate."""

    def test_valid_record_has_no_errors(self):
        record = make_record()
        assert record.validate() == {}
        assert record.is_valid

    def test_missing_client_name(self):
        assert make_record(client_name="  ").validate() == {
            "client_name": "Client name is required"
        }

    def test_missing_phone(self):
        assert make_record(client_phone_number="").validate() == {
            "client_phone_number": "Phone number is required"
        }

    def test_missing_plate(self):
        assert make_record(plate_number="").validate()["plate_number"] == "License plate is required"

    def test_short_plate(self):
        errors = make_record(plate_number="AB").validate()
        assert errors["plate_number"] == "License plate must be at least 3 characters"

    def test_three_character_plate_ok(self):
        assert make_record(plate_number="ab1").validate() == {}

    def test_missing_make(self):
        assert make_record(make="").validate()["make"] == "Vehicle make is required"

    def test_unknown_make(self):
        assert make_record(make="Lada").validate()["make"] == "Unknown vehicle make: Lada"

    def test_make_is_case_sensitive(self):
        assert "make" in make_record(make="toyota").validate()

    def test_missing_expiry(self):
        assert make_record(expiry_date=None).validate()["expiry_date"] == "Expiry date is required"

    def test_expiry_must_be_a_date(self):
        assert "expiry_date" in make_record(expiry_date="15/03/2026").validate()

    @pytest.mark.parametrize("interval", [7, 14, 21, 30])
    def test_allowed_intervals(self, interval):
        assert make_record(reminder_interval=interval).validate() == {}

    @pytest.mark.parametrize("interval", [0, 1, 10, 31, None])
    def test_rejected_intervals(self, interval):
        errors = make_record(reminder_interval=interval).validate()
        assert errors["reminder_interval"] == "Reminder interval must be one of 7, 14, 21, 30 days"

    def test_reports_every_broken_field(self):
        record = VehicleRecord("", "", "A", "Nope", None, 3)
        assert set(record.validate()) == {
            "client_name",
            "client_phone_number",
            "plate_number",
            "make",
            "expiry_date",
            "reminder_interval",
        }


class TestSerialization:
    """Tests for to_dict / from_dict."""

    def test_to_dict_uses_camel_case(self):
        assert make_record(id="r1").to_dict() == {
            "id": "r1",
            "clientName": "John Smith",
            "clientPhoneNumber": "021 555 1234",
            "plateNumber": "ABC123",
            "make": "Toyota",
            "expiryDate": "2026-03-15",
            "reminderInterval": 14,
        }

    def test_to_dict_omits_missing_id(self):
        assert "id" not in make_record().to_dict()

    def test_from_dict(self):
        record = VehicleRecord.from_dict(make_record(id="r1").to_dict())
        assert record.id == "r1"
        assert record.plate_number == "ABC123"
        assert record.expiry_date == date(2026, 3, 15)
        assert record.reminder_interval == 14


class TestReadExpiryDate:
    """Tests for read_expiry_date."""

    def test_iso_string(self):
        assert read_expiry_date("2026-03-15") == date(2026, 3, 15)

    def test_display_string(self):
        assert read_expiry_date("15/03/2026") == date(2026, 3, 15)

    def test_date_from_yaml(self):
        assert read_expiry_date(date(2026, 3, 15)) == date(2026, 3, 15)

    def test_epoch_milliseconds(self):
        ms = datetime(2026, 3, 15, 9, 30).timestamp() * 1000
        assert read_expiry_date(ms) == date(2026, 3, 15)

    def test_none(self):
        assert read_expiry_date(None) is None

    def test_garbage_string(self):
        with pytest.raises(InvalidDateError, match="expected YYYY-MM-DD"):
            read_expiry_date("next tuesday")


class TestMigrateLegacyRecord:
    """Tests for the five-field to six-field shape migration."""

    LEGACY = {
        "id": "1",
        "name": "John Smith",
        "licensePlate": "ABC123",
        "vehicleMake": "Toyota",
        "expiryDate": "2026-03-15",
    }

    def test_detects_legacy_shape(self):
        assert is_legacy_record(self.LEGACY)
        assert not is_legacy_record(make_record(id="1").to_dict())

    def test_maps_renamed_fields(self):
        migrated = migrate_legacy_record(self.LEGACY)
        assert migrated["clientName"] == "John Smith"
        assert migrated["plateNumber"] == "ABC123"
        assert migrated["make"] == "Toyota"
        assert migrated["expiryDate"] == "2026-03-15"
        assert migrated["id"] == "1"
        assert "name" not in migrated
        assert "licensePlate" not in migrated
        assert "vehicleMake" not in migrated

    def test_fills_new_fields(self):
        migrated = migrate_legacy_record(self.LEGACY)
        assert migrated["clientPhoneNumber"] == "unknown"
        assert migrated["reminderInterval"] == 30

    def test_migrated_record_is_valid(self):
        record = VehicleRecord.from_dict(migrate_legacy_record(self.LEGACY))
        assert record.validate() == {}

    def test_current_shape_unchanged(self):
        current = make_record(id="1").to_dict()
        assert migrate_legacy_record(current) is current

    def test_does_not_mutate_input(self):
        legacy = dict(self.LEGACY)
        migrate_legacy_record(legacy)
        assert legacy == self.LEGACY
