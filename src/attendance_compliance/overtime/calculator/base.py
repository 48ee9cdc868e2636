from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceRecord
from ..model import OvertimeDetails


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for overtime)."""

    @abstractmethod
    def details(self, record: AttendanceRecord) -> OvertimeDetails:
        raise NotImplementedError
