from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..common.validators import require_int, require_list, require_non_empty
from ..core.enums import CalendarType
from ..core.exceptions import ValidationError
from .model import AttendanceRecord

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

_TIMESTAMP_FIELDS = (
    "clock_in",
    "clock_out",
    "original_clock_in",
    "original_clock_out",
    "altx_overtime_in",
    "altx_overtime_out",
    "private_out_time",
    "private_return_time",
)

_TEXT_FIELDS = (
    "employee_name",
    "department",
    "position",
    "day_of_week",
    "calendar_raw",
    "application_content",
    "night_break_modification",
    "night_work_minutes",
    "actual_work_hours",
    "overtime_hours",
    "late_minutes",
    "early_leave_minutes",
    "remarks",
    "sheet_name",
)


def _parse_timestamp(value: Any, *, day: date, field_name: str) -> Optional[datetime]:
    """Accept an ISO timestamp or a bare "H:MM" on the record's date."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    match = _CLOCK_RE.match(value.strip())
    try:
        if match:
            return datetime.combine(day, time(int(match.group(1)), int(match.group(2))))
        return parse_iso_datetime(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid time: {value!r}") from None


def record_from_dict(data: Any) -> AttendanceRecord:
    """Build an AttendanceRecord from a JSON object."""
    if not isinstance(data, dict):
        raise ValidationError("record must be an object")

    employee_id = require_non_empty(str(data.get("employee_id") or ""), "employee_id")
    try:
        day = parse_iso_date(require_non_empty(str(data.get("date") or ""), "date"))
    except ValueError:
        raise ValidationError(f"date is not YYYY-MM-DD: {data.get('date')!r}") from None

    try:
        calendar_type = CalendarType(data.get("calendar_type") or CalendarType.WEEKDAY.value)
    except ValueError:
        raise ValidationError(f"unknown calendar_type: {data.get('calendar_type')!r}") from None

    kwargs: dict[str, Any] = {name: str(data.get(name) or "") for name in _TEXT_FIELDS}
    for name in _TIMESTAMP_FIELDS:
        kwargs[name] = _parse_timestamp(data.get(name), day=day, field_name=name)

    return AttendanceRecord(
        employee_id=employee_id,
        date=day,
        calendar_type=calendar_type,
        early_start_flag=bool(data.get("early_start_flag", False)),
        break_minutes=require_int(data.get("break_minutes", 0) or 0, "break_minutes"),
        **kwargs,
    )


def records_from_payload(payload: Any) -> list[AttendanceRecord]:
    if not isinstance(payload, dict):
        raise ValidationError("request body must be a JSON object")
    items = require_list(payload.get("records"), "records")
    return [record_from_dict(item) for item in items]
