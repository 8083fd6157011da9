"""YAML loading and saving of vehicle records, scoped by owner."""

import logging
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .errors import RecordFormatError, RecordNotFoundError, RecordValidationError, UnauthorizedError
from .vehicle_record import VehicleRecord, is_legacy_record, migrate_legacy_record

logger = logging.getLogger(__name__)


def _read_data(filename: Union[str, Path]) -> Dict[str, Any]:
    """Load the raw YAML data, or an empty records file if it doesn't exist."""
    path = Path(filename)
    if not path.exists():
        return {"records": []}
    with open(path, "r") as fp:
        try:
            data = yaml.load(fp, Loader=yaml.SafeLoader) or {}
        except yaml.YAMLError as e:
            raise RecordFormatError(f"Could not parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise RecordFormatError(f"{path} does not hold a records mapping")
    if data.get("records") is None:
        data["records"] = []
    elif not isinstance(data["records"], list):
        raise RecordFormatError(f"{path} does not hold a records list")
    return data


def _write_data(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def _require_owner(owner: Optional[str]) -> str:
    if not owner:
        raise UnauthorizedError("Unauthorised")
    return owner


def _check_valid(record: VehicleRecord) -> None:
    errors = record.validate()
    if errors:
        raise RecordValidationError(errors)


def _find_index(records: List[Dict[str, Any]], owner: str, record_id: str) -> int:
    """Position of an owned record in the raw list."""
    for index, raw in enumerate(records):
        if raw.get("id") == record_id and raw.get("owner") == owner:
            return index
    raise RecordNotFoundError("Vehicle not found or unauthorized")


def _record_to_raw(owner: str, record_id: str, record: VehicleRecord) -> Dict[str, Any]:
    raw = {"owner": owner, "id": record_id}
    raw.update({k: v for k, v in record.to_dict().items() if k != "id"})
    return raw


def load_records(filename: Union[str, Path], owner: Optional[str]) -> List[VehicleRecord]:
    """
    Load the records belonging to owner.

    No owner means nobody is signed in, which yields an empty list rather
    than an error. Entries in the old five-field shape are migrated.
    Entries that cannot be read raise RecordFormatError naming the record
    and the file.
    """
    if not owner:
        return []
    records = []
    for raw in _read_data(filename)["records"]:
        if not isinstance(raw, dict):
            raise RecordFormatError(f"Entry {raw!r} in {filename} is not a record")
        if raw.get("owner") != owner:
            continue
        try:
            if is_legacy_record(raw):
                logger.debug("Migrating legacy record %s", raw.get("id"))
                raw = migrate_legacy_record(raw)
            records.append(VehicleRecord.from_dict(raw))
        except KeyError as e:
            raise RecordFormatError(f"Record {raw.get('id')} in {filename} is missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise RecordFormatError(f"Record {raw.get('id')} in {filename} is malformed: {e}") from e
    return records


def get_record(filename: Union[str, Path], owner: Optional[str], record_id: str) -> VehicleRecord:
    """Load a single owned record by id."""
    for record in load_records(filename, owner):
        if record.id == record_id:
            return record
    raise RecordNotFoundError("Vehicle not found or unauthorized")


def create_record(filename: Union[str, Path], owner: Optional[str], record: VehicleRecord) -> str:
    """
    Append a new record to a records file and return its id.

    The id is always freshly generated; any id on the passed record is ignored.
    """
    owner = _require_owner(owner)
    _check_valid(record)

    data = _read_data(filename)
    record_id = uuid.uuid4().hex
    data["records"].append(_record_to_raw(owner, record_id, record))
    _write_data(filename, data)

    logger.info("Created record %s (%s) for %s", record_id, record.plate_number, owner)
    return record_id


def update_record(
    filename: Union[str, Path], owner: Optional[str], record_id: str, record: VehicleRecord
) -> None:
    """Replace every field of an owned record except its id."""
    owner = _require_owner(owner)
    _check_valid(record)

    data = _read_data(filename)
    index = _find_index(data["records"], owner, record_id)
    data["records"][index] = _record_to_raw(owner, record_id, record)
    _write_data(filename, data)

    logger.info("Updated record %s for %s", record_id, owner)


def delete_record(filename: Union[str, Path], owner: Optional[str], record_id: str) -> None:
    """Remove an owned record from a records file."""
    owner = _require_owner(owner)

    data = _read_data(filename)
    index = _find_index(data["records"], owner, record_id)
    del data["records"][index]
    _write_data(filename, data)

    logger.info("Deleted record %s for %s", record_id, owner)
