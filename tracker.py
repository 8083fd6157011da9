#!/usr/bin/env python3
"""
Unified CLI for WOF expiry tracking.

Commands:
  list       - List records, with search and sorting
  status     - Show which WOFs are expired, expiring soon, or roadworthy
  add        - Add a new vehicle record
  edit       - Change an existing record
  delete     - Remove a record
  reminders  - Show reminders due today and the next reminder per record
  makes      - List vehicle makes and reminder intervals
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from wof import (
    DATE_FORMAT_HINT,
    REMINDER_INTERVALS,
    SORT_COLUMNS,
    VEHICLE_MAKES,
    ExpiryStatus,
    InvalidDateError,
    RecordValidationError,
    SortState,
    VehicleRecord,
    WofError,
    create_record,
    delete_record,
    format_date,
    get_record,
    get_status,
    load_records,
    next_reminder,
    parse_date,
    project,
    reminders_due,
    update_record,
)
from wof import config

logger = logging.getLogger("tracker")

# =============================================================================
# Formatting helpers
# =============================================================================


def format_days_remaining(days: Optional[int]) -> str:
    """Format days until expiry for display (e.g., '3mo 15d' or '-5d')."""
    if days is None:
        return "-"
    sign = "-" if days < 0 else ""
    days = abs(days)
    months = days // 30
    remaining_days = days % 30
    if months > 0:
        return f"{sign}{months}mo {remaining_days}d"
    return f"{sign}{days}d"


def format_optional_date(value: Optional[date]) -> str:
    """Format a date that may be missing."""
    return format_date(value) if value is not None else "-"


def print_field_errors(errors: dict) -> None:
    for field, message in errors.items():
        print(f"  {field}: {message}")


# =============================================================================
# List and status commands
# =============================================================================


def make_record_table(records: List[VehicleRecord], today: date) -> List[List[str]]:
    """Convert records to table rows."""
    rows = []
    for record in records:
        status = get_status(record.expiry_date, today)
        rows.append(
            [
                record.id or "-",
                record.client_name,
                record.plate_number,
                record.make,
                format_date(record.expiry_date),
                status.label,
                format_days_remaining(status.days_remaining),
            ]
        )
    return rows


RECORD_HEADERS = ["ID", "Name", "License Plate", "Make", "Expiry Date", "Status", "Remaining"]


def cmd_list(args, today: date):
    """List records, filtered and sorted."""
    records = load_records(args.records_file, args.owner)
    sort = SortState(column=args.sort, order="desc" if args.desc else "asc")
    visible = project(records, args.search or "", sort)

    print(f"Records: {len(records)}")
    if args.search:
        print(f"Showing: {len(visible)} (filtered)")
    print()

    if not visible:
        print("No Results Found" if records else "No Vehicles Added")
        return 0

    print(tabulate(make_record_table(visible, today), headers=RECORD_HEADERS, tablefmt="simple"))
    return 0


def cmd_status(args, today: date):
    """Show records grouped by WOF status."""
    records = load_records(args.records_file, args.owner)
    ordered = project(records, sort=SortState("expiryDate", "asc"))

    print(f"As of: {format_date(today)}")
    print(f"Records: {len(records)}")
    print()

    groups = [
        (ExpiryStatus.EXPIRED, "EXPIRED:"),
        (ExpiryStatus.EXPIRING_SOON, "EXPIRING SOON:"),
        (ExpiryStatus.ROADWORTHY, "ROADWORTHY:"),
    ]
    for status, title in groups:
        group = [r for r in ordered if get_status(r.expiry_date, today).status == status]
        if group:
            print(title)
            print(tabulate(make_record_table(group, today), headers=RECORD_HEADERS, tablefmt="simple"))
            print()

    return 0


# =============================================================================
# Add, edit and delete commands
# =============================================================================


def show_record(record: VehicleRecord) -> None:
    print(f"  Name:     {record.client_name}")
    print(f"  Phone:    {record.client_phone_number}")
    print(f"  Plate:    {record.plate_number}")
    print(f"  Make:     {record.make}")
    print(f"  Expiry:   {format_optional_date(record.expiry_date)}")
    print(f"  Reminder: every {record.reminder_interval} days")


def cmd_add(args, today: date):
    """Add a new vehicle record."""
    try:
        expiry = parse_date(args.expiry)
    except InvalidDateError as e:
        print(f"Error: {e.message}")
        return 1

    record = VehicleRecord(
        client_name=args.name,
        client_phone_number=args.phone,
        plate_number=args.plate,
        make=args.make,
        expiry_date=expiry,
        reminder_interval=args.interval,
    )

    errors = record.validate()
    if errors:
        print("Error: Invalid vehicle record")
        print_field_errors(errors)
        return 1

    print(f"Adding record to {args.records_file}:")
    show_record(record)
    print(f"  Status:   {get_status(record.expiry_date, today).label}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    record_id = create_record(args.records_file, args.owner, record)
    print(f"Record saved (id {record_id}).")
    return 0


def cmd_edit(args, today: date):
    """Replace the fields of an existing record."""
    existing = get_record(args.records_file, args.owner, args.record_id)

    expiry = existing.expiry_date
    if args.expiry is not None:
        try:
            expiry = parse_date(args.expiry)
        except InvalidDateError as e:
            print(f"Error: {e.message}")
            return 1

    record = VehicleRecord(
        client_name=args.name if args.name is not None else existing.client_name,
        client_phone_number=args.phone if args.phone is not None else existing.client_phone_number,
        plate_number=args.plate if args.plate is not None else existing.plate_number,
        make=args.make if args.make is not None else existing.make,
        expiry_date=expiry,
        reminder_interval=args.interval if args.interval is not None else existing.reminder_interval,
        id=existing.id,
    )

    errors = record.validate()
    if errors:
        print("Error: Invalid vehicle record")
        print_field_errors(errors)
        return 1

    print(f"Updating record {existing.id}:")
    show_record(record)
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    update_record(args.records_file, args.owner, existing.id, record)
    print("Record updated.")
    return 0


def cmd_delete(args, today: date):
    """Remove a record."""
    existing = get_record(args.records_file, args.owner, args.record_id)

    print(f"Deleting record {existing.id}:")
    show_record(existing)
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    delete_record(args.records_file, args.owner, existing.id)
    print("Record deleted.")
    return 0


# =============================================================================
# Reminders and makes commands
# =============================================================================


def cmd_reminders(args, today: date):
    """Show reminders due today and the next reminder for every record."""
    records = load_records(args.records_file, args.owner)
    ordered = project(records, sort=SortState("expiryDate", "asc"))

    due = reminders_due(ordered, today)
    print(f"As of: {format_date(today)}")
    if due:
        print(f"Reminders due today: {len(due)}")
        for record in due:
            print(f"  {record.client_name} ({record.client_phone_number}) - {record.plate_number}")
    else:
        print("No reminders due today.")
    print()

    if not ordered:
        return 0

    rows = []
    for record in ordered:
        rows.append(
            [
                record.client_name,
                record.plate_number,
                format_date(record.expiry_date),
                f"{record.reminder_interval}d",
                format_optional_date(
                    next_reminder(record.expiry_date, record.reminder_interval, today)
                ),
            ]
        )
    headers = ["Name", "License Plate", "Expiry Date", "Every", "Next Reminder"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))
    return 0


def cmd_makes(args, today: date):
    """List vehicle makes and reminder intervals."""
    print(f"Vehicle makes ({len(VEHICLE_MAKES)}):")
    for make in VEHICLE_MAKES:
        print(f"  {make}")
    print()
    print("Reminder intervals: " + ", ".join(f"{i} days" for i in REMINDER_INTERVALS))
    return 0


COMMANDS = {
    "list": cmd_list,
    "status": cmd_status,
    "add": cmd_add,
    "edit": cmd_edit,
    "delete": cmd_delete,
    "reminders": cmd_reminders,
    "makes": cmd_makes,
}

# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vehicle WOF expiry tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s records.yaml list --search abc --sort plateNumber
  %(prog)s records.yaml status --as-of 01/03/2026
  %(prog)s records.yaml add --name "John Smith" --phone 021555123 \\
      --plate ABC123 --make Toyota --expiry 15/03/2026 --interval 14
  %(prog)s records.yaml edit 3f2a... --expiry 15/03/2027
  %(prog)s records.yaml delete 3f2a...
  %(prog)s records.yaml reminders
""",
    )
    parser.add_argument(
        "records_file",
        type=Path,
        help="Path to records YAML file",
    )
    parser.add_argument(
        "--owner",
        type=str,
        default=None,
        help="Identity whose records to use (default: $WOF_OWNER)",
    )
    parser.add_argument(
        "--as-of",
        type=str,
        help=f"Reference date in {DATE_FORMAT_HINT} format (default: today)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # List subcommand
    list_parser = subparsers.add_parser("list", help="List records")
    list_parser.add_argument(
        "--search",
        type=str,
        help="Filter by name or license plate (case-insensitive)",
    )
    list_parser.add_argument(
        "--sort",
        choices=SORT_COLUMNS,
        default="expiryDate",
        help="Sort column (default: expiryDate)",
    )
    list_parser.add_argument(
        "--desc",
        action="store_true",
        help="Sort descending instead of ascending",
    )

    # Status subcommand
    subparsers.add_parser("status", help="Show records grouped by WOF status")

    # Add subcommand
    add_parser = subparsers.add_parser("add", help="Add a new vehicle record")
    add_parser.add_argument("--name", type=str, required=True, help="Client name")
    add_parser.add_argument("--phone", type=str, required=True, help="Client phone number")
    add_parser.add_argument("--plate", type=str, required=True, help="License plate")
    add_parser.add_argument("--make", type=str, required=True, help="Vehicle make (see 'makes')")
    add_parser.add_argument(
        "--expiry", type=str, required=True, help=f"WOF expiry date in {DATE_FORMAT_HINT} format"
    )
    add_parser.add_argument(
        "--interval",
        type=int,
        default=30,
        help="Remind every N days (7, 14, 21 or 30; default: 30)",
    )
    add_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be added without saving",
    )

    # Edit subcommand
    edit_parser = subparsers.add_parser("edit", help="Change an existing record")
    edit_parser.add_argument("record_id", type=str, help="Record id")
    edit_parser.add_argument("--name", type=str, help="Client name")
    edit_parser.add_argument("--phone", type=str, help="Client phone number")
    edit_parser.add_argument("--plate", type=str, help="License plate")
    edit_parser.add_argument("--make", type=str, help="Vehicle make")
    edit_parser.add_argument("--expiry", type=str, help=f"WOF expiry date in {DATE_FORMAT_HINT} format")
    edit_parser.add_argument("--interval", type=int, help="Remind every N days")
    edit_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be updated without saving",
    )

    # Delete subcommand
    delete_parser = subparsers.add_parser("delete", help="Remove a record")
    delete_parser.add_argument("record_id", type=str, help="Record id")
    delete_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without saving",
    )

    # Reminders subcommand
    subparsers.add_parser("reminders", help="Show reminder schedule")

    # Makes subcommand
    subparsers.add_parser("makes", help="List vehicle makes and reminder intervals")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config.configure_logging("DEBUG" if args.verbose else None)

    if args.owner is None:
        args.owner = config.current_owner()

    if args.as_of:
        try:
            today = parse_date(args.as_of)
        except InvalidDateError as e:
            print(f"Error: --as-of: {e.message}")
            return 1
    else:
        today = date.today()

    # Validate records file exists (add creates it)
    if args.command not in ("add", "makes") and not args.records_file.exists():
        print(f"Error: File not found: {args.records_file}")
        return 1

    try:
        return COMMANDS[args.command](args, today)
    except RecordValidationError as e:
        print("Error: Invalid vehicle record")
        print_field_errors(e.errors)
        return 1
    except WofError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
