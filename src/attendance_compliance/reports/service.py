from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Callable, Iterable, Optional, Sequence

from ..attendance.classifier import DailyRecordAnalyzer, is_night_work
from ..attendance.model import AttendanceRecord, AttendanceViolation, DailyAttendanceAnalysis
from ..common.datetime_utils import format_duration, now_local
from ..core.constants import OVERTIME_LIMIT_HOURS, UNASSIGNED_DEPARTMENT
from ..core.enums import LeaveType, OvertimeAlertLevel, Urgency, ViolationType
from ..overtime.alerts import alert_severity, get_overtime_alert_level
from .applications import calculate_total_work_minutes, count_applications
from .missing_entries import detect_missing_entries
from .model import (
    AnalysisSummary,
    DepartmentSummary,
    EmployeeMissingEntries,
    EmployeeMonthlySummary,
    ExtendedAnalysisResult,
    NightWorkRecord,
)
from .violation_types import count_violations_by_urgency

logger = logging.getLogger(__name__)

_HALF_DAY = (LeaveType.HALF_DAY_AM, LeaveType.HALF_DAY_PM)


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def violation_details(analysis: DailyAttendanceAnalysis, violation_type: ViolationType) -> str:
    """Short Japanese description shown next to a violation."""
    record = analysis.record
    if violation_type == ViolationType.LATE_APPLICATION_MISSING:
        return f"遅刻 {format_duration(analysis.late_minutes)}"
    if violation_type == ViolationType.EARLY_LEAVE_APPLICATION_MISSING:
        return f"早退 {format_duration(analysis.early_leave_minutes)}"
    if violation_type == ViolationType.BREAK_VIOLATION:
        return f"必要休憩 {analysis.required_break_minutes}分に対し {analysis.actual_break_minutes}分"
    if violation_type == ViolationType.MISSING_CLOCK:
        return "出退勤時刻なし"
    if violation_type == ViolationType.EARLY_START_APPLICATION_MISSING:
        clock_in = record.clock_in
        return f"{clock_in.hour}:{clock_in.minute:02d}出社" if clock_in else "出社"
    if violation_type == ViolationType.TIME_LEAVE_PUNCH_MISSING:
        return "私用外出/戻り未打刻"
    if violation_type == ViolationType.NIGHT_BREAK_APPLICATION_MISSING:
        return "深夜勤務あり"
    return ""


def violations_for_day(
    analysis: DailyAttendanceAnalysis,
    *,
    employee_id: str,
    employee_name: str,
    department: str,
) -> list[AttendanceViolation]:
    """One violation per triggered tag of the day."""
    out = []
    for violation_type in analysis.violations:
        is_break = violation_type == ViolationType.BREAK_VIOLATION
        out.append(
            AttendanceViolation(
                employee_id=employee_id,
                employee_name=employee_name,
                department=department,
                date=analysis.record.date,
                type=violation_type,
                details=violation_details(analysis, violation_type),
                required_break_minutes=analysis.required_break_minutes if is_break else None,
                actual_break_minutes=analysis.actual_break_minutes if is_break else None,
            )
        )
    return out


def analysis_cutoff(today: date, *, include_today: bool) -> date:
    """First date excluded from the analysis."""
    return today + timedelta(days=1) if include_today else today


class AttendanceAnalysisService:
    """Roll daily analyses up into employee, department and dataset summaries.

    Every method is a pure function of its arguments plus ``clock``; the
    clock only decides which dates are still in the future.
    """

    def __init__(
        self,
        *,
        analyzer: Optional[DailyRecordAnalyzer] = None,
        clock: Callable[[], datetime] = now_local,
        include_today: bool = False,
    ):
        self._analyzer = analyzer or DailyRecordAnalyzer()
        self._clock = clock
        self._include_today = include_today

    def _today(self, today: Optional[date]) -> date:
        return today or self._clock().date()

    def analyze_daily_record(self, record: AttendanceRecord) -> DailyAttendanceAnalysis:
        return self._analyzer.analyze(record)

    def create_employee_monthly_summary(
        self,
        employee_id: str,
        records: Sequence[AttendanceRecord],
        *,
        include_today: Optional[bool] = None,
        today: Optional[date] = None,
    ) -> EmployeeMonthlySummary:
        if include_today is None:
            include_today = self._include_today
        cutoff = analysis_cutoff(self._today(today), include_today=include_today)

        first = records[0] if records else None
        employee_name = first.employee_name if first else ""
        department = first.department if first else ""

        analyses = [self._analyzer.analyze(r) for r in records if r.date < cutoff]
        violations = tuple(
            v
            for a in analyses
            for v in violations_for_day(a, employee_id=employee_id, employee_name=employee_name, department=department)
        )

        def days(predicate: Callable[[DailyAttendanceAnalysis], bool]) -> int:
            return sum(1 for a in analyses if predicate(a))

        logger.debug(
            "employee %s: %d of %d records analysed, %d violations",
            employee_id, len(analyses), len(records), len(violations),
        )

        return EmployeeMonthlySummary(
            employee_id=employee_id,
            employee_name=employee_name,
            department=department,
            sheet_name=first.sheet_name if first else "",
            total_work_days=days(lambda a: a.record.has_any_punch),
            holiday_work_days=days(lambda a: a.is_holiday_work),
            total_overtime_minutes=sum(a.overtime_minutes for a in analyses),
            total_legal_overtime_minutes=sum(a.legal_overtime_minutes for a in analyses),
            late_days=days(lambda a: ViolationType.LATE_APPLICATION_MISSING in a.violations),
            early_leave_days=days(lambda a: ViolationType.EARLY_LEAVE_APPLICATION_MISSING in a.violations),
            timely_departure_days=days(lambda a: a.is_timely_departure),
            full_day_leave_days=days(lambda a: a.leave_type == LeaveType.FULL_DAY),
            half_day_leave_days=days(lambda a: a.leave_type in _HALF_DAY),
            break_violation_days=days(lambda a: a.has_break_violation),
            missing_clock_days=days(lambda a: a.has_missing_clock),
            early_start_violation_days=days(lambda a: a.has_early_start_violation),
            night_work_days=days(lambda a: a.is_night_work),
            violations=violations,
            passed_weekdays=days(lambda a: a.record.is_weekday),
            total_weekdays_in_month=sum(1 for r in records if r.is_weekday),
            application_counts=count_applications(records),
            total_work_minutes=calculate_total_work_minutes(records),
        )

    @staticmethod
    def create_department_summaries(summaries: Iterable[EmployeeMonthlySummary]) -> list[DepartmentSummary]:
        by_department: dict[str, list[EmployeeMonthlySummary]] = defaultdict(list)
        for s in summaries:
            by_department[s.department or UNASSIGNED_DEPARTMENT].append(s)

        results = []
        for department, members in sorted(by_department.items()):
            total_overtime = sum(s.total_overtime_minutes for s in members)
            total_legal = sum(s.total_legal_overtime_minutes for s in members)
            results.append(
                DepartmentSummary(
                    department=department,
                    employee_count=len(members),
                    total_overtime_minutes=total_overtime,
                    average_overtime_minutes=_round_half_up(total_overtime / len(members)),
                    total_legal_overtime_minutes=total_legal,
                    average_legal_overtime_minutes=_round_half_up(total_legal / len(members)),
                    holiday_work_count=sum(s.holiday_work_days for s in members),
                    total_violations=sum(len(s.violations) for s in members),
                    break_violations=sum(s.break_violation_days for s in members),
                    missing_clock_count=sum(s.missing_clock_days for s in members),
                )
            )
        return results

    def analyze_extended(
        self,
        records: Sequence[AttendanceRecord],
        *,
        include_today: Optional[bool] = None,
        today: Optional[date] = None,
    ) -> ExtendedAnalysisResult:
        if include_today is None:
            include_today = self._include_today
        today = self._today(today)
        cutoff = analysis_cutoff(today, include_today=include_today)

        by_employee: dict[str, list[AttendanceRecord]] = defaultdict(list)
        for record in records:
            by_employee[record.employee_id].append(record)

        employee_summaries = tuple(
            self.create_employee_monthly_summary(employee_id, recs, include_today=include_today, today=today)
            for employee_id, recs in by_employee.items()
        )
        all_violations = tuple(
            sorted((v for s in employee_summaries for v in s.violations), key=lambda v: v.date)
        )
        night_work_records = tuple(
            sorted(
                (
                    NightWorkRecord(
                        employee_name=r.employee_name,
                        department=r.department,
                        date=r.date,
                        clock_out=r.clock_out,
                    )
                    for r in records
                    if r.date < cutoff and is_night_work(r)
                ),
                key=lambda n: n.date,
            )
        )

        result = ExtendedAnalysisResult(
            summary=self._summarize(records, employee_summaries),
            employee_summaries=employee_summaries,
            department_summaries=tuple(self.create_department_summaries(employee_summaries)),
            all_violations=all_violations,
            night_work_records=night_work_records,
            analyzed_at=self._clock(),
        )
        logger.info(
            "analysed %d records for %d employees: %d violations",
            len(records), len(employee_summaries), len(all_violations),
        )
        return result

    def detect_missing_entries(
        self,
        records: Sequence[AttendanceRecord],
        *,
        today: Optional[date] = None,
    ) -> list[EmployeeMissingEntries]:
        return detect_missing_entries(records, today=self._today(today))

    @staticmethod
    def _summarize(
        records: Sequence[AttendanceRecord],
        employee_summaries: Sequence[EmployeeMonthlySummary],
    ) -> AnalysisSummary:
        dates = [r.date for r in records]
        exceeded = alert_severity(OvertimeAlertLevel.EXCEEDED)

        def has_urgency(s: EmployeeMonthlySummary, urgency: Urgency) -> bool:
            return count_violations_by_urgency(s.violations, urgency) > 0

        def is_high(s: EmployeeMonthlySummary) -> bool:
            level = get_overtime_alert_level(s.total_legal_overtime_minutes)
            return alert_severity(level) >= exceeded or has_urgency(s, Urgency.HIGH)

        return AnalysisSummary(
            total_employees=len(employee_summaries),
            employees_with_issues=sum(
                1
                for s in employee_summaries
                if s.violations or s.total_legal_overtime_minutes >= OVERTIME_LIMIT_HOURS * 60
            ),
            high_urgency_count=sum(1 for s in employee_summaries if is_high(s)),
            medium_urgency_count=sum(1 for s in employee_summaries if has_urgency(s, Urgency.MEDIUM)),
            low_urgency_count=0,
            date_range_start=min(dates) if dates else None,
            date_range_end=max(dates) if dates else None,
            sheet_names=tuple(dict.fromkeys(r.sheet_name for r in records)),
        )


_default_service = AttendanceAnalysisService()


def create_employee_monthly_summary(
    employee_id: str,
    records: Sequence[AttendanceRecord],
    *,
    include_today: bool = False,
    today: Optional[date] = None,
) -> EmployeeMonthlySummary:
    return _default_service.create_employee_monthly_summary(
        employee_id, records, include_today=include_today, today=today
    )


def create_department_summaries(summaries: Iterable[EmployeeMonthlySummary]) -> list[DepartmentSummary]:
    return AttendanceAnalysisService.create_department_summaries(summaries)


def analyze_extended(
    records: Sequence[AttendanceRecord],
    *,
    include_today: bool = False,
    today: Optional[date] = None,
) -> ExtendedAnalysisResult:
    return _default_service.analyze_extended(records, include_today=include_today, today=today)
