from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import CalendarType, LeaveType, ViolationType


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công một ngày của một nhân viên.

    ``clock_in``/``clock_out`` là giờ đã được hệ thống chấm công làm tròn theo
    ca; ``original_clock_in``/``original_clock_out`` là giờ bấm thực tế. Các
    trường thời lượng là chuỗi "H:MM" như khi xuất file, để trống nếu không có.
    """

    employee_id: str
    employee_name: str
    department: str
    date: date
    calendar_type: CalendarType = CalendarType.WEEKDAY
    position: str = ""
    day_of_week: str = ""
    calendar_raw: str = ""
    application_content: str = ""
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    original_clock_in: Optional[datetime] = None
    original_clock_out: Optional[datetime] = None
    early_start_flag: bool = False
    altx_overtime_in: Optional[datetime] = None
    altx_overtime_out: Optional[datetime] = None
    private_out_time: Optional[datetime] = None
    private_return_time: Optional[datetime] = None
    break_minutes: int = 0
    night_break_modification: str = ""
    night_work_minutes: str = ""
    actual_work_hours: str = ""
    overtime_hours: str = ""
    late_minutes: str = ""
    early_leave_minutes: str = ""
    remarks: str = ""
    sheet_name: str = ""

    @property
    def is_weekday(self) -> bool:
        return self.calendar_type == CalendarType.WEEKDAY

    @property
    def has_any_punch(self) -> bool:
        return self.clock_in is not None or self.clock_out is not None


@dataclass(frozen=True)
class DailyAttendanceAnalysis:
    """Kết quả phân tích một ngày (luôn tính lại, không lưu trạng thái)."""

    record: AttendanceRecord
    leave_type: LeaveType
    is_holiday_work: bool
    is_timely_departure: bool
    is_night_work: bool
    overtime_minutes: int
    legal_overtime_minutes: int
    late_minutes: int
    early_leave_minutes: int
    actual_break_minutes: int
    required_break_minutes: int
    has_break_violation: bool
    has_missing_clock: bool
    has_early_start_violation: bool
    violations: tuple[ViolationType, ...] = ()


@dataclass(frozen=True)
class AttendanceViolation:
    employee_id: str
    employee_name: str
    department: str
    date: date
    type: ViolationType
    details: str
    required_break_minutes: Optional[int] = None
    actual_break_minutes: Optional[int] = None
