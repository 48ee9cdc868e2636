from __future__ import annotations

from typing import Optional

from ..attendance.model import AttendanceRecord
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .model import OvertimeDetails

_default_calculator = StandardOvertimeCalculator()


def calculate_overtime_details(
    record: AttendanceRecord,
    calculator: Optional[OvertimeCalculator] = None,
) -> OvertimeDetails:
    return (calculator or _default_calculator).details(record)


def calculate_overtime_minutes(record: AttendanceRecord) -> int:
    """Legacy single-value accessor: overtime beyond the contracted day."""
    return calculate_overtime_details(record).overtime_minutes
