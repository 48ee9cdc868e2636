from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.classifier import missing_clock_type
from ..attendance.leave import classify_leave
from ..attendance.model import AttendanceRecord
from ..core.constants import CONSECUTIVE_DAY_GAP, MISSING_HIGH_URGENCY_DAYS, MISSING_MEDIUM_URGENCY_DAYS
from ..core.enums import LeaveType, MissingEntryType, Urgency
from .model import EmployeeMissingEntries, MissingEntry

_URGENCY_RANK = {Urgency.HIGH: 0, Urgency.MEDIUM: 1, Urgency.LOW: 2}


def check_altx_overtime_missing(record: AttendanceRecord) -> Optional[MissingEntryType]:
    """Only one side of the alternate-overtime pair entered."""
    has_in = record.altx_overtime_in is not None
    has_out = record.altx_overtime_out is not None
    if has_in and not has_out:
        return MissingEntryType.ALTX_OVERTIME_OUT
    if has_out and not has_in:
        return MissingEntryType.ALTX_OVERTIME_IN
    return None


def longest_consecutive_run(dates: Sequence[date], gap_days: int = CONSECUTIVE_DAY_GAP) -> int:
    """Longest run of dates at most ``gap_days`` apart (weekends do not break a run)."""
    if not dates:
        return 0
    longest = current = 1
    for prev, curr in zip(dates, dates[1:]):
        if (curr - prev).days <= gap_days:
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest


def urgency_for_consecutive_days(days: int) -> Urgency:
    if days >= MISSING_HIGH_URGENCY_DAYS:
        return Urgency.HIGH
    if days >= MISSING_MEDIUM_URGENCY_DAYS:
        return Urgency.MEDIUM
    return Urgency.LOW


def _entry(record: AttendanceRecord, kind: MissingEntryType) -> MissingEntry:
    return MissingEntry(
        employee_id=record.employee_id,
        employee_name=record.employee_name,
        department=record.department,
        date=record.date,
        type=kind,
        sheet_name=record.sheet_name,
    )


def _entries_for(record: AttendanceRecord) -> list[MissingEntry]:
    found = []
    if record.is_weekday and classify_leave(record.application_content) == LeaveType.NONE:
        kind = missing_clock_type(record)
        if kind is not None:
            found.append(_entry(record, kind))
    altx = check_altx_overtime_missing(record)
    if altx is not None:
        found.append(_entry(record, altx))
    return found


def detect_missing_entries(records: Iterable[AttendanceRecord], *, today: date) -> list[EmployeeMissingEntries]:
    """Per-employee missing punches before ``today``, most urgent first."""
    by_employee: dict[str, list[AttendanceRecord]] = defaultdict(list)
    for record in records:
        by_employee[record.employee_id].append(record)

    results = []
    for employee_id, employee_records in by_employee.items():
        entries = sorted(
            (entry for record in employee_records if record.date < today for entry in _entries_for(record)),
            key=lambda e: e.date,
        )
        if not entries:
            continue
        consecutive = longest_consecutive_run([e.date for e in entries])
        first = employee_records[0]
        results.append(
            EmployeeMissingEntries(
                employee_id=employee_id,
                employee_name=first.employee_name,
                department=first.department,
                sheet_name=first.sheet_name,
                missing_entries=tuple(entries),
                urgency=urgency_for_consecutive_days(consecutive),
                consecutive_missing_days=consecutive,
            )
        )

    results.sort(key=lambda r: (_URGENCY_RANK[r.urgency], -r.total_missing_days))
    return results
