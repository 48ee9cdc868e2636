"""Carve-outs for quirks of the legacy roster.

Sheets built on the 8:00 calendar keep employees whose real schedule is 9:00
without a per-day schedule. For them the export reports exactly one hour of
lateness on every normal 9:00 arrival, which is not real lateness.
"""

from __future__ import annotations

import re

from .model import AttendanceRecord

_EIGHT_OCLOCK_SHEET_RE = re.compile(r"[_-]800[-_～]|[_-]8:00[-_～]|_8時")

LEGACY_8AM_LATE_MINUTES = 60
LEGACY_8AM_ARRIVAL_HOUR = 9


def is_8am_schedule_sheet(sheet_label: str) -> bool:
    return bool(sheet_label) and _EIGHT_OCLOCK_SHEET_RE.search(sheet_label) is not None


def should_exclude_legacy_8am_late(record: AttendanceRecord, late_minutes: int) -> bool:
    """True when the 60 late minutes come from the 8:00 calendar, not the employee.

    A filled original clock-in column means no schedule was set for the day.
    """
    if not is_8am_schedule_sheet(record.sheet_name):
        return False
    if record.original_clock_in is None or record.clock_in is None:
        return False
    return late_minutes == LEGACY_8AM_LATE_MINUTES and record.clock_in.hour == LEGACY_8AM_ARRIVAL_HOUR
