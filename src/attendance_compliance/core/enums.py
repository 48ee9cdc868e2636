from __future__ import annotations

from enum import Enum


class CalendarType(str, Enum):
    """Loại ngày theo lịch công ty (ngày thường / ngày nghỉ luật định / ngày nghỉ công ty)."""

    WEEKDAY = "weekday"
    STATUTORY_HOLIDAY = "statutory_holiday"
    NON_STATUTORY_HOLIDAY = "non_statutory_holiday"


class LeaveType(str, Enum):
    """Loại nghỉ phép suy ra từ nội dung đơn."""

    NONE = "none"
    FULL_DAY = "full_day"
    HALF_DAY_AM = "half_day_am"
    HALF_DAY_PM = "half_day_pm"


class ViolationType(str, Enum):
    """Các loại vi phạm được gắn cho từng ngày."""

    MISSING_CLOCK = "missing_clock"
    BREAK_VIOLATION = "break_violation"
    LATE_APPLICATION_MISSING = "late_application_missing"
    EARLY_LEAVE_APPLICATION_MISSING = "early_leave_application_missing"
    EARLY_START_APPLICATION_MISSING = "early_start_application_missing"
    TIME_LEAVE_PUNCH_MISSING = "time_leave_punch_missing"
    NIGHT_BREAK_APPLICATION_MISSING = "night_break_application_missing"
    REMARKS_MISSING = "remarks_missing"
    REMARKS_FORMAT_WARNING = "remarks_format_warning"


class Urgency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class OvertimeAlertLevel(str, Enum):
    """Các mức cảnh báo theo Thỏa thuận 36 (36協定), từ nhẹ đến nặng."""

    NORMAL = "normal"
    WARNING = "warning"
    EXCEEDED = "exceeded"
    CAUTION = "caution"
    SERIOUS = "serious"
    SEVERE = "severe"
    CRITICAL = "critical"
    ILLEGAL = "illegal"


class MissingEntryType(str, Enum):
    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"
    BOTH = "both"
    ALTX_OVERTIME_IN = "altx_overtime_in"
    ALTX_OVERTIME_OUT = "altx_overtime_out"
