from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import minutes_of_day, parse_duration_minutes
from ..common.phrases import has_application_phrase, has_exact_application_phrase
from ..core.constants import (
    EMPTY_NIGHT_BREAK_MODIFICATION,
    NIGHT_WORK_END_HOUR,
    NIGHT_WORK_START_HOUR,
    TIMELY_DEPARTURE_HOUR,
    TIMELY_DEPARTURE_MINUTE,
)
from ..core.enums import LeaveType, MissingEntryType, ViolationType
from ..core.keywords import (
    EARLY_LEAVE_APPLICATION_PHRASES,
    EARLY_START_APPLICATION_PHRASES,
    FLEXTIME_EXACT_PHRASES,
    FLEXTIME_PHRASES,
    HALF_DAY_APPLICATION_PHRASES,
    HOURLY_LEAVE_PHRASES,
    LATE_APPLICATION_PHRASES,
    TRAIN_DELAY_PHRASES,
)
from ..core.policy import DEFAULT_POLICY, AnalysisPolicy
from ..overtime.calculator.base import OvertimeCalculator
from ..overtime.calculator.standard_calculator import StandardOvertimeCalculator, is_holiday_work
from ..schedules.resolver import ScheduleResolver
from .breaks import BreakCheck, evaluate_break, has_break_modification_application
from .leave import classify_leave
from .legacy import should_exclude_legacy_8am_late
from .model import AttendanceRecord, DailyAttendanceAnalysis

LATE_EXCUSE_PHRASES = LATE_APPLICATION_PHRASES | TRAIN_DELAY_PHRASES | HALF_DAY_APPLICATION_PHRASES
EARLY_LEAVE_EXCUSE_PHRASES = EARLY_LEAVE_APPLICATION_PHRASES | HALF_DAY_APPLICATION_PHRASES


def has_flextime_application(record: AttendanceRecord) -> bool:
    """Flextime is recorded either by its formal name or as a bare "時差出勤" item."""
    text = record.application_content
    return has_application_phrase(text, FLEXTIME_PHRASES) or has_exact_application_phrase(text, FLEXTIME_EXACT_PHRASES)


def is_night_work(record: AttendanceRecord) -> bool:
    """Clock-out after 22:00 or in the small hours (22:00 itself excluded)."""
    if record.clock_out is None:
        return False
    hour, minute = record.clock_out.hour, record.clock_out.minute
    if hour == NIGHT_WORK_START_HOUR:
        return minute > 0
    return hour > NIGHT_WORK_START_HOUR or hour < NIGHT_WORK_END_HOUR


def is_timely_departure(record: AttendanceRecord, leave_type: LeaveType, late_minutes: int) -> bool:
    """Left on time (17:45 or earlier) on a worked weekday without lateness or early leave."""
    if not record.is_weekday or leave_type == LeaveType.FULL_DAY:
        return False
    if late_minutes > 0 or parse_duration_minutes(record.early_leave_minutes) > 0:
        return False
    if record.clock_out is None:
        return False
    return minutes_of_day(record.clock_out) <= TIMELY_DEPARTURE_HOUR * 60 + TIMELY_DEPARTURE_MINUTE


def missing_clock_type(record: AttendanceRecord) -> Optional[MissingEntryType]:
    """Which side of the clock pair is missing; BOTH only when no time was worked."""
    has_in = record.clock_in is not None
    has_out = record.clock_out is not None
    if has_in and not has_out:
        return MissingEntryType.CLOCK_OUT
    if has_out and not has_in:
        return MissingEntryType.CLOCK_IN
    if not has_in and parse_duration_minutes(record.actual_work_hours) == 0:
        return MissingEntryType.BOTH
    return None


def has_missing_clock(record: AttendanceRecord, leave_type: LeaveType) -> bool:
    if not record.is_weekday or leave_type != LeaveType.NONE:
        return False
    return missing_clock_type(record) is not None


def has_late_application_missing(record: AttendanceRecord, late_minutes: int) -> bool:
    if late_minutes <= 0 or has_flextime_application(record):
        return False
    return not has_application_phrase(record.application_content, LATE_EXCUSE_PHRASES)


def has_early_leave_application_missing(record: AttendanceRecord) -> bool:
    if parse_duration_minutes(record.early_leave_minutes) <= 0:
        return False
    return not has_application_phrase(record.application_content, EARLY_LEAVE_EXCUSE_PHRASES)


def has_time_leave_punch_missing(record: AttendanceRecord) -> bool:
    if not has_application_phrase(record.application_content, HOURLY_LEAVE_PHRASES):
        return False
    return record.private_out_time is None or record.private_return_time is None


def has_night_break_application_missing(
    record: AttendanceRecord,
    break_check: BreakCheck,
    policy: AnalysisPolicy = DEFAULT_POLICY,
) -> bool:
    if parse_duration_minutes(record.night_work_minutes) < policy.night_work_threshold_minutes:
        return False
    if break_check.actual_break_minutes >= break_check.required_break_minutes:
        return False
    modification = record.night_break_modification.strip()
    if modification and modification != EMPTY_NIGHT_BREAK_MODIFICATION:
        return False
    return not has_break_modification_application(record)


class DailyRecordAnalyzer:
    """Classify one day of attendance.

    Collaborators are injected so alternative schedule sources or overtime
    rules can be plugged in; the defaults follow company policy.
    """

    def __init__(
        self,
        *,
        policy: AnalysisPolicy = DEFAULT_POLICY,
        resolver: Optional[ScheduleResolver] = None,
        calculator: Optional[OvertimeCalculator] = None,
    ):
        self._policy = policy
        self._resolver = resolver or ScheduleResolver()
        self._calculator = calculator or StandardOvertimeCalculator(policy)

    @property
    def policy(self) -> AnalysisPolicy:
        return self._policy

    def has_early_start_violation(self, record: AttendanceRecord, leave_type: LeaveType) -> bool:
        if not record.is_weekday or leave_type != LeaveType.NONE or record.clock_in is None:
            return False
        if has_flextime_application(record):
            return False
        if has_application_phrase(record.application_content, EARLY_START_APPLICATION_PHRASES):
            return False
        start = self._resolver.resolve_or_default(record.application_content, record.sheet_name)
        if minutes_of_day(record.clock_in) < start.minutes_of_day:
            return not record.early_start_flag
        return False

    def analyze(self, record: AttendanceRecord) -> DailyAttendanceAnalysis:
        leave_type = classify_leave(record.application_content)
        overtime = self._calculator.details(record)

        late_minutes = parse_duration_minutes(record.late_minutes)
        if should_exclude_legacy_8am_late(record, late_minutes):
            late_minutes = 0
        early_leave_minutes = parse_duration_minutes(record.early_leave_minutes)

        break_check = evaluate_break(record, leave_type, self._policy)
        missing_clock = has_missing_clock(record, leave_type)
        early_start = self.has_early_start_violation(record, leave_type)

        checks = (
            (ViolationType.MISSING_CLOCK, missing_clock),
            (ViolationType.BREAK_VIOLATION, break_check.has_violation),
            (ViolationType.LATE_APPLICATION_MISSING, has_late_application_missing(record, late_minutes)),
            (ViolationType.EARLY_LEAVE_APPLICATION_MISSING, has_early_leave_application_missing(record)),
            (ViolationType.EARLY_START_APPLICATION_MISSING, early_start),
            (ViolationType.TIME_LEAVE_PUNCH_MISSING, has_time_leave_punch_missing(record)),
            (
                ViolationType.NIGHT_BREAK_APPLICATION_MISSING,
                has_night_break_application_missing(record, break_check, self._policy),
            ),
        )

        return DailyAttendanceAnalysis(
            record=record,
            leave_type=leave_type,
            is_holiday_work=is_holiday_work(record),
            is_timely_departure=is_timely_departure(record, leave_type, late_minutes),
            is_night_work=is_night_work(record),
            overtime_minutes=overtime.overtime_minutes,
            legal_overtime_minutes=overtime.legal_overtime_minutes,
            late_minutes=late_minutes,
            early_leave_minutes=early_leave_minutes,
            actual_break_minutes=break_check.actual_break_minutes,
            required_break_minutes=break_check.required_break_minutes,
            has_break_violation=break_check.has_violation,
            has_missing_clock=missing_clock,
            has_early_start_violation=early_start,
            violations=tuple(tag for tag, triggered in checks if triggered),
        )


_default_analyzer = DailyRecordAnalyzer()


def analyze_daily_record(record: AttendanceRecord) -> DailyAttendanceAnalysis:
    return _default_analyzer.analyze(record)
