from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import OvertimeAlertLevel


@dataclass(frozen=True)
class OvertimeDetails:
    overtime_minutes: int
    legal_overtime_minutes: int


@dataclass(frozen=True)
class OvertimeAlertInfo:
    """Hiển thị mức cảnh báo làm thêm giờ (36協定)."""

    level: OvertimeAlertLevel
    label: str
    color: str
    description: str
    action: str
