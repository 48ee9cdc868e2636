from __future__ import annotations

from datetime import date, datetime

import pytest

from attendance_compliance.attendance.model import AttendanceRecord
from attendance_compliance.core.enums import CalendarType


def _at(day: date, value):
    if value is None or isinstance(value, datetime):
        return value
    hour, minute = map(int, value.split(":"))
    return datetime(day.year, day.month, day.day, hour, minute)


@pytest.fixture
def make_record():
    """Build an AttendanceRecord; punch fields accept "H:MM" on the record date."""

    def _make(
        *,
        day: date = date(2026, 1, 6),
        employee_id: str = "E001",
        employee_name: str = "山田 太郎",
        department: str = "開発部",
        calendar_type: CalendarType = CalendarType.WEEKDAY,
        clock_in="9:00",
        clock_out="17:45",
        actual_work_hours: str = "7:45",
        break_minutes: int = 60,
        **kwargs,
    ) -> AttendanceRecord:
        for name in (
            "original_clock_in",
            "original_clock_out",
            "altx_overtime_in",
            "altx_overtime_out",
            "private_out_time",
            "private_return_time",
        ):
            if name in kwargs:
                kwargs[name] = _at(day, kwargs[name])
        return AttendanceRecord(
            employee_id=employee_id,
            employee_name=employee_name,
            department=department,
            date=day,
            calendar_type=calendar_type,
            clock_in=_at(day, clock_in),
            clock_out=_at(day, clock_out),
            actual_work_hours=actual_work_hours,
            break_minutes=break_minutes,
            **kwargs,
        )

    return _make


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 2, 1)
