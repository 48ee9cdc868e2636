from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..attendance.model import AttendanceViolation
from ..core.enums import MissingEntryType, Urgency


@dataclass(frozen=True)
class ApplicationCounts:
    """Số đơn theo loại trong kỳ (dùng cho báo cáo cá nhân)."""

    overtime: int = 0
    early_start: int = 0
    early_start_break: int = 0
    late_early_leave: int = 0
    train_delay: int = 0
    flextime: int = 0
    break_modification: int = 0
    standby: int = 0
    night_duty: int = 0
    annual_leave: int = 0
    am_leave: int = 0
    pm_leave: int = 0
    hourly_leave: int = 0
    holiday_work: int = 0
    substitute_work: int = 0
    substitute_holiday: int = 0
    compensatory_leave: int = 0
    absence: int = 0
    special_leave: int = 0
    menstrual_leave: int = 0
    child_care_leave: int = 0
    hourly_child_care_leave: int = 0
    nursing_care_leave: int = 0
    hourly_nursing_care_leave: int = 0
    post_night_leave: int = 0
    other: int = 0


@dataclass(frozen=True)
class EmployeeMonthlySummary:
    """Tổng hợp theo tháng của một nhân viên (tạo một lần, không cập nhật dần)."""

    employee_id: str
    employee_name: str
    department: str
    sheet_name: str
    total_work_days: int
    holiday_work_days: int
    total_overtime_minutes: int
    total_legal_overtime_minutes: int
    late_days: int
    early_leave_days: int
    timely_departure_days: int
    full_day_leave_days: int
    half_day_leave_days: int
    break_violation_days: int
    missing_clock_days: int
    early_start_violation_days: int
    night_work_days: int
    violations: tuple[AttendanceViolation, ...]
    passed_weekdays: int
    total_weekdays_in_month: int
    application_counts: ApplicationCounts
    total_work_minutes: int


@dataclass(frozen=True)
class DepartmentSummary:
    department: str
    employee_count: int
    total_overtime_minutes: int
    average_overtime_minutes: int
    total_legal_overtime_minutes: int
    average_legal_overtime_minutes: int
    holiday_work_count: int
    total_violations: int
    break_violations: int
    missing_clock_count: int


@dataclass(frozen=True)
class NightWorkRecord:
    employee_name: str
    department: str
    date: date
    clock_out: datetime


@dataclass(frozen=True)
class AnalysisSummary:
    total_employees: int
    employees_with_issues: int
    high_urgency_count: int
    medium_urgency_count: int
    low_urgency_count: int
    date_range_start: Optional[date]
    date_range_end: Optional[date]
    sheet_names: tuple[str, ...]


@dataclass(frozen=True)
class ExtendedAnalysisResult:
    summary: AnalysisSummary
    employee_summaries: tuple[EmployeeMonthlySummary, ...]
    department_summaries: tuple[DepartmentSummary, ...]
    all_violations: tuple[AttendanceViolation, ...]
    night_work_records: tuple[NightWorkRecord, ...]
    analyzed_at: datetime


@dataclass(frozen=True)
class MissingEntry:
    employee_id: str
    employee_name: str
    department: str
    date: date
    type: MissingEntryType
    sheet_name: str


@dataclass(frozen=True)
class EmployeeMissingEntries:
    """Kết quả phát hiện thiếu chấm công của một nhân viên."""

    employee_id: str
    employee_name: str
    department: str
    sheet_name: str
    missing_entries: tuple[MissingEntry, ...]
    urgency: Urgency
    consecutive_missing_days: int

    @property
    def total_missing_days(self) -> int:
        return len(self.missing_entries)
