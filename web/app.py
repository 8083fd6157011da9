"""Flask web application for WOF expiry tracking."""

import logging
from datetime import date

from flask import Flask, render_template, request, redirect, url_for, flash

from wof import config
from wof import (
    DATE_FORMAT_HINT,
    QUICK_PRESETS,
    REMINDER_INTERVALS,
    SORT_COLUMNS,
    VEHICLE_MAKES,
    InvalidDateError,
    RecordValidationError,
    Severity,
    SortState,
    VehicleRecord,
    WofError,
    create_record,
    delete_record,
    format_date,
    get_date_validation,
    get_record,
    get_status,
    load_records,
    parse_date,
    project,
    quick_preset_date,
    toggle_sort,
    update_record,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.secret_key()


def data_file():
    return app.config.get("WOF_DATA_FILE") or config.data_file()


def current_owner():
    return app.config.get("WOF_OWNER") or config.current_owner()


def severity_color(severity: Severity) -> str:
    """Get Tailwind color classes for a status badge."""
    colors = {
        Severity.DESTRUCTIVE: "bg-red-100 text-red-800 border-red-200",
        Severity.WARNING: "bg-yellow-100 text-yellow-800 border-yellow-200",
        Severity.SUCCESS: "bg-green-100 text-green-800 border-green-200",
    }
    return colors.get(severity, "bg-gray-100 text-gray-800")


# Register template filters
app.jinja_env.filters["format_date"] = format_date
app.jinja_env.filters["severity_color"] = severity_color
app.jinja_env.globals["date_format_hint"] = DATE_FORMAT_HINT


def sort_from_args(args) -> SortState:
    """Sort state from query args, falling back to the default for unknown values."""
    column = args.get("sort", "")
    order = args.get("order", "")
    if column not in SORT_COLUMNS:
        return SortState()
    return SortState(column=column, order="desc" if order == "desc" else "asc")


def record_from_form(form, record_id=None):
    """
    Build a record from submitted form fields.

    Returns (record, errors) where errors maps field name -> message.
    """
    errors = {}

    expiry = None
    try:
        expiry = parse_date(form.get("expiry_date", ""))
    except InvalidDateError as e:
        errors["expiry_date"] = e.message

    interval_text = form.get("reminder_interval", "")
    try:
        interval = int(interval_text)
    except ValueError:
        interval = None

    record = VehicleRecord(
        client_name=form.get("client_name", "").strip(),
        client_phone_number=form.get("client_phone_number", "").strip(),
        plate_number=form.get("plate_number", "").strip(),
        make=form.get("make", ""),
        expiry_date=expiry,
        reminder_interval=interval,
        id=record_id,
    )
    for field, message in record.validate().items():
        errors.setdefault(field, message)
    return record, errors


def render_form(mode, record=None, errors=None, record_id=None, status=400):
    today = date.today()
    expiry_hint = None
    if record is not None and record.expiry_date is not None:
        validation = get_date_validation(record.expiry_date, today)
        days = get_status(record.expiry_date, today).days_remaining
        expiry_hint = (validation.value, validation.message(days))
    presets = [(label, format_date(quick_preset_date(days, today))) for label, days in QUICK_PRESETS.items()]
    return (
        render_template(
            "record_form.html",
            mode=mode,
            record=record,
            record_id=record_id,
            errors=errors or {},
            expiry_hint=expiry_hint,
            makes=VEHICLE_MAKES,
            intervals=REMINDER_INTERVALS,
            presets=presets,
        ),
        status,
    )


@app.route("/")
def index():
    """Dashboard listing records with search and sortable columns."""
    try:
        records = load_records(data_file(), current_owner())
    except WofError as e:
        logger.warning("Could not load records: %s", e)
        flash(str(e), "error")
        records = []
    query = request.args.get("q", "")
    sort = sort_from_args(request.args)
    today = date.today()

    rows = [
        {"record": r, "status": get_status(r.expiry_date, today)}
        for r in project(records, query, sort)
    ]
    sort_links = {
        column: url_for("index", q=query or None, sort=toggled.column, order=toggled.order)
        for column, toggled in ((c, toggle_sort(sort, c)) for c in SORT_COLUMNS)
    }

    return render_template(
        "index.html",
        rows=rows,
        query=query,
        sort=sort,
        sort_links=sort_links,
        has_any_records=bool(records),
        signed_in=current_owner() is not None,
    )


@app.route("/records/new", methods=["GET"])
def new_record_form():
    return render_form("add", status=200)


@app.route("/records/new", methods=["POST"])
def add_record():
    """Handle add form submission."""
    record, errors = record_from_form(request.form)
    if errors:
        return render_form("add", record, errors)

    try:
        create_record(data_file(), current_owner(), record)
    except RecordValidationError as e:
        return render_form("add", record, e.errors)
    except WofError as e:
        logger.warning("Add failed: %s", e)
        flash(str(e), "error")
        return redirect(url_for("index"))

    flash(f"Added WOF record for {record.client_name}", "success")
    return redirect(url_for("index"))


@app.route("/records/<record_id>/edit", methods=["GET"])
def edit_record_form(record_id: str):
    try:
        record = get_record(data_file(), current_owner(), record_id)
    except WofError as e:
        flash(str(e), "error")
        return redirect(url_for("index"))
    return render_form("edit", record, record_id=record_id, status=200)


@app.route("/records/<record_id>/edit", methods=["POST"])
def edit_record(record_id: str):
    """Handle edit form submission."""
    record, errors = record_from_form(request.form, record_id)
    if errors:
        return render_form("edit", record, errors, record_id=record_id)

    try:
        update_record(data_file(), current_owner(), record_id, record)
    except RecordValidationError as e:
        return render_form("edit", record, e.errors, record_id=record_id)
    except WofError as e:
        logger.warning("Edit of %s failed: %s", record_id, e)
        flash(str(e), "error")
        return redirect(url_for("index"))

    flash(f"Updated WOF record for {record.client_name}", "success")
    return redirect(url_for("index"))


@app.route("/records/<record_id>/delete", methods=["POST"])
def remove_record(record_id: str):
    try:
        delete_record(data_file(), current_owner(), record_id)
    except WofError as e:
        logger.warning("Delete of %s failed: %s", record_id, e)
        flash(str(e), "error")
        return redirect(url_for("index"))

    flash("Record deleted", "success")
    return redirect(url_for("index"))


if __name__ == "__main__":
    config.configure_logging()
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
