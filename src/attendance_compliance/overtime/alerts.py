"""36 Agreement alert ladder.

Monthly overtime is mapped to one of eight ordered levels. Thresholds are
inclusive lower bounds; the highest matching threshold wins.
"""

from __future__ import annotations

from ..core.constants import (
    ANNUAL_OVERTIME_LIMIT_HOURS,
    OVERTIME_CAUTION_HOURS,
    OVERTIME_CRITICAL_HOURS,
    OVERTIME_ILLEGAL_HOURS,
    OVERTIME_LIMIT_HOURS,
    OVERTIME_SERIOUS_HOURS,
    OVERTIME_SEVERE_HOURS,
    OVERTIME_WARNING_HOURS,
    PACE_DAYS_PER_MONTH,
)
from ..core.enums import OvertimeAlertLevel
from .model import OvertimeAlertInfo

# Most severe first.
_LADDER: tuple[tuple[int, OvertimeAlertLevel], ...] = (
    (OVERTIME_ILLEGAL_HOURS * 60, OvertimeAlertLevel.ILLEGAL),
    (OVERTIME_CRITICAL_HOURS * 60, OvertimeAlertLevel.CRITICAL),
    (OVERTIME_SEVERE_HOURS * 60, OvertimeAlertLevel.SEVERE),
    (OVERTIME_SERIOUS_HOURS * 60, OvertimeAlertLevel.SERIOUS),
    (OVERTIME_CAUTION_HOURS * 60, OvertimeAlertLevel.CAUTION),
    (OVERTIME_LIMIT_HOURS * 60, OvertimeAlertLevel.EXCEEDED),
    (OVERTIME_WARNING_HOURS * 60, OvertimeAlertLevel.WARNING),
)

ALERT_LEVEL_ORDER: tuple[OvertimeAlertLevel, ...] = tuple(OvertimeAlertLevel)

OVERTIME_ALERT_INFO: dict[OvertimeAlertLevel, OvertimeAlertInfo] = {
    OvertimeAlertLevel.NORMAL: OvertimeAlertInfo(
        OvertimeAlertLevel.NORMAL, "正常", "green", "残業時間は正常範囲内です。", ""
    ),
    OvertimeAlertLevel.WARNING: OvertimeAlertInfo(
        OvertimeAlertLevel.WARNING, "注意", "yellow", "月35時間を超過しています。", "上長への報告が必要です"
    ),
    OvertimeAlertLevel.EXCEEDED: OvertimeAlertInfo(
        OvertimeAlertLevel.EXCEEDED, "超過", "orange", "36協定の月45時間上限を超過しています。", "特別条項の確認が必要です"
    ),
    OvertimeAlertLevel.CAUTION: OvertimeAlertInfo(
        OvertimeAlertLevel.CAUTION, "警戒", "orange-dark", "月55時間を超過しています。", "残業抑制指示を検討してください"
    ),
    OvertimeAlertLevel.SERIOUS: OvertimeAlertInfo(
        OvertimeAlertLevel.SERIOUS, "深刻", "vermilion", "月65時間を超過しています。", "残業禁止措置の検討が必要です"
    ),
    OvertimeAlertLevel.SEVERE: OvertimeAlertInfo(
        OvertimeAlertLevel.SEVERE, "重大", "red-orange", "月70時間を超過しています。", "親会社への報告が必要です"
    ),
    OvertimeAlertLevel.CRITICAL: OvertimeAlertInfo(
        OvertimeAlertLevel.CRITICAL, "危険", "red", "月80時間超は健康リスクが高まります。", "医師の面接指導を実施してください"
    ),
    OvertimeAlertLevel.ILLEGAL: OvertimeAlertInfo(
        OvertimeAlertLevel.ILLEGAL, "違法", "darkred", "月100時間は特別条項でも超過不可です。", "直ちに是正が必要です"
    ),
}


def get_overtime_alert_level(monthly_overtime_minutes: int) -> OvertimeAlertLevel:
    for threshold, level in _LADDER:
        if monthly_overtime_minutes >= threshold:
            return level
    return OvertimeAlertLevel.NORMAL


def alert_severity(level: OvertimeAlertLevel) -> int:
    """Position of ``level`` on the ladder (0 = normal)."""
    return ALERT_LEVEL_ORDER.index(level)


def is_overtime_on_pace_to_exceed(
    current_minutes: int,
    day_of_month: int,
    limit_minutes: int = OVERTIME_LIMIT_HOURS * 60,
) -> bool:
    """Linear pro-ration over a 30-day month."""
    return current_minutes > limit_minutes * day_of_month / PACE_DAYS_PER_MONTH


def is_annual_overtime_exceeded(annual_overtime_minutes: int) -> bool:
    return annual_overtime_minutes >= ANNUAL_OVERTIME_LIMIT_HOURS * 60


def needs_medical_guidance(monthly_overtime_minutes: int) -> bool:
    """Physician interview required above 80 hours (Industrial Safety and Health Act)."""
    return monthly_overtime_minutes > OVERTIME_CRITICAL_HOURS * 60
