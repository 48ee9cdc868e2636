from __future__ import annotations

from ...attendance.breaks import break_adjustment_minutes
from ...attendance.leave import classify_leave, is_substitute_work
from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import parse_duration_minutes
from ...core.constants import LEGAL_WORK_MINUTES, STANDARD_WORK_MINUTES
from ...core.policy import DEFAULT_POLICY, AnalysisPolicy
from ..model import OvertimeDetails
from .base import OvertimeCalculator


def is_holiday_work(record: AttendanceRecord) -> bool:
    """Punched work on a calendar holiday that was not swapped with a weekday."""
    return not record.is_weekday and record.has_any_punch and not is_substitute_work(record)


class StandardOvertimeCalculator(OvertimeCalculator):
    """Standard rule: worked minutes beyond 7h45m (contract) and beyond 8h (statute).

    On weekdays the break the time clock inserted on its own is counted as
    worked time first. Holiday work counts entirely as overtime for both
    figures.
    """

    def __init__(self, policy: AnalysisPolicy = DEFAULT_POLICY):
        self._policy = policy

    def details(self, record: AttendanceRecord) -> OvertimeDetails:
        worked = parse_duration_minutes(record.actual_work_hours)
        if is_holiday_work(record):
            return OvertimeDetails(overtime_minutes=worked, legal_overtime_minutes=worked)

        worked += break_adjustment_minutes(record, classify_leave(record.application_content), self._policy)
        return OvertimeDetails(
            overtime_minutes=max(worked - STANDARD_WORK_MINUTES, 0),
            legal_overtime_minutes=max(worked - LEGAL_WORK_MINUTES, 0),
        )
