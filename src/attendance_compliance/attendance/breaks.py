from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import parse_duration_minutes
from ..common.phrases import has_application_phrase
from ..core.constants import (
    BREAK_THRESHOLD_6H_MINUTES,
    BREAK_THRESHOLD_8H_MINUTES,
    REQUIRED_BREAK_OVER_6H_MINUTES,
    REQUIRED_BREAK_OVER_8H_MINUTES,
)
from ..core.enums import LeaveType
from ..core.keywords import BREAK_MODIFICATION_PHRASES
from ..core.policy import DEFAULT_POLICY, AnalysisPolicy
from .model import AttendanceRecord


@dataclass(frozen=True)
class BreakCheck:
    """Break evaluation of one day.

    ``worked_minutes`` has the auto-inserted break added back and
    ``actual_break_minutes`` has it removed; ``adjustment_minutes`` is the
    amount moved between the two.
    """

    worked_minutes: int
    actual_break_minutes: int
    required_break_minutes: int
    has_violation: bool
    adjustment_minutes: int = 0


def required_break_minutes(worked_minutes: int) -> int:
    """Minimum break for a working time (Labor Standards Act art. 34)."""
    if worked_minutes > BREAK_THRESHOLD_8H_MINUTES:
        return REQUIRED_BREAK_OVER_8H_MINUTES
    if worked_minutes > BREAK_THRESHOLD_6H_MINUTES:
        return REQUIRED_BREAK_OVER_6H_MINUTES
    return 0


def has_break_violation(worked_minutes: int, actual_break_minutes: int) -> bool:
    return worked_minutes > BREAK_THRESHOLD_6H_MINUTES and actual_break_minutes < required_break_minutes(worked_minutes)


def has_break_modification_application(record: AttendanceRecord) -> bool:
    return has_application_phrase(record.application_content, BREAK_MODIFICATION_PHRASES)


def break_adjustment_minutes(
    record: AttendanceRecord,
    leave_type: LeaveType,
    policy: AnalysisPolicy = DEFAULT_POLICY,
) -> int:
    """Break minutes the time-clock vendor inserted on its own.

    Above the cap the excess is automatic; on a half day a small break is
    automatic in full. A break-correction application means the recorded
    break was entered by hand and nothing is adjusted.
    """
    if has_break_modification_application(record):
        return 0
    recorded = max(record.break_minutes, 0)
    if leave_type in (LeaveType.HALF_DAY_AM, LeaveType.HALF_DAY_PM) and 0 < recorded <= policy.half_day_auto_break_minutes:
        return recorded
    if recorded > policy.auto_break_cap_minutes:
        return recorded - policy.auto_break_cap_minutes
    return 0


def evaluate_break(
    record: AttendanceRecord,
    leave_type: LeaveType,
    policy: AnalysisPolicy = DEFAULT_POLICY,
) -> BreakCheck:
    adjustment = break_adjustment_minutes(record, leave_type, policy)
    worked = parse_duration_minutes(record.actual_work_hours) + adjustment
    actual_break = max(record.break_minutes, 0) - adjustment

    return BreakCheck(
        worked_minutes=worked,
        actual_break_minutes=actual_break,
        required_break_minutes=required_break_minutes(worked),
        has_violation=has_break_violation(worked, actual_break),
        adjustment_minutes=adjustment,
    )
