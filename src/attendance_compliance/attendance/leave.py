from __future__ import annotations

from typing import Optional

from ..common.phrases import has_application_phrase, has_exact_application_phrase
from ..core.enums import LeaveType
from ..core.keywords import (
    AFTERNOON_MARKERS,
    FULL_DAY_LEAVE_PHRASES,
    HALF_DAY_LEAVE_PHRASES,
    MORNING_MARKERS,
    SUBSTITUTE_WORK_PHRASES,
)
from .model import AttendanceRecord


def classify_leave(application_text: Optional[str]) -> LeaveType:
    """Classify the day's leave from the application column.

    Half-day names are checked before full-day ones so that "午前有休" is a
    half day and not paid leave for the whole day. A half day without a
    morning or afternoon marker is taken as a morning half day.
    """
    if has_application_phrase(application_text, HALF_DAY_LEAVE_PHRASES):
        if any(marker in application_text for marker in MORNING_MARKERS):
            return LeaveType.HALF_DAY_AM
        if any(marker in application_text for marker in AFTERNOON_MARKERS):
            return LeaveType.HALF_DAY_PM
        return LeaveType.HALF_DAY_AM

    # "有休" also sits inside "時間有休", so full-day names must be a whole item
    if has_exact_application_phrase(application_text, FULL_DAY_LEAVE_PHRASES):
        return LeaveType.FULL_DAY
    return LeaveType.NONE


def is_substitute_work(record: AttendanceRecord) -> bool:
    """Work on a holiday that was swapped with a weekday (振替出勤)."""
    return has_application_phrase(record.application_content, SUBSTITUTE_WORK_PHRASES)
