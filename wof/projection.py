"""Search, sort and de-duplication of record lists for display."""

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Iterable, List, Sequence

from pyuca import Collator

from .calculations import to_local_date
from .vehicle_record import VehicleRecord

SORT_COLUMNS = ("clientName", "plateNumber", "expiryDate")
SORT_ORDERS = ("asc", "desc")

_TEXT_COLUMNS = {
    "clientName": "client_name",
    "plateNumber": "plate_number",
}


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the collation table is slow; build it once
    return Collator()


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction of a record table."""

    column: str = "expiryDate"
    order: str = "asc"

    @property
    def descending(self) -> bool:
        return self.order == "desc"


def toggle_sort(state: SortState, column: str) -> SortState:
    """
    Sort state after a click on a column header.

    Clicking the active column flips the direction; clicking another
    column switches to it, ascending.
    """
    if column not in SORT_COLUMNS:
        raise ValueError(f"Unsupported sort column: {column!r}")
    if state.column == column:
        return replace(state, order="asc" if state.descending else "desc")
    return SortState(column=column, order="asc")


def dedupe_records(records: Iterable[VehicleRecord]) -> List[VehicleRecord]:
    """Drop repeated ids, keeping the first occurrence. Unsaved records are kept."""
    seen = set()
    result = []
    for record in records:
        if record.id is not None:
            if record.id in seen:
                continue
            seen.add(record.id)
        result.append(record)
    return result


def matches_query(record: VehicleRecord, query: str) -> bool:
    """Check if the query appears in the client name or plate, ignoring case."""
    needle = query.lower()
    return needle in record.client_name.lower() or needle in record.plate_number.lower()


def filter_records(records: Sequence[VehicleRecord], query: str) -> List[VehicleRecord]:
    """Records matching a free-text search. Empty query keeps everything."""
    if not query:
        return list(records)
    return [r for r in records if matches_query(r, query)]


def sort_key(record: VehicleRecord, column: str):
    """Comparable key for one record under a sort column."""
    if column == "expiryDate":
        return to_local_date(record.expiry_date)
    if column in _TEXT_COLUMNS:
        return _collator().sort_key(getattr(record, _TEXT_COLUMNS[column]))
    raise ValueError(f"Unsupported sort column: {column!r}")


def sort_records(
    records: Sequence[VehicleRecord], column: str, order: str = "asc"
) -> List[VehicleRecord]:
    """
    Sort records by column, returning a new list.

    Text columns use Unicode collation rather than code-point order. The
    sort is stable in both directions: records with equal keys keep their
    input order.

    Args:
        column: "clientName", "plateNumber" or "expiryDate"
        order: "asc" or "desc"
    """
    if column not in SORT_COLUMNS:
        raise ValueError(f"Unsupported sort column: {column!r}")
    if order not in SORT_ORDERS:
        raise ValueError(f"Unsupported sort order: {order!r}")
    return sorted(records, key=lambda r: sort_key(r, column), reverse=order == "desc")


def project(
    records: Sequence[VehicleRecord], query: str = "", sort: SortState = SortState()
) -> List[VehicleRecord]:
    """Visible rows for a table: de-duplicated, searched, then sorted."""
    visible = filter_records(dedupe_records(records), query)
    return sort_records(visible, sort.column, sort.order)
