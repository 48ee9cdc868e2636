from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    AUTO_BREAK_CAP_MINUTES,
    DEFAULT_NIGHT_WORK_THRESHOLD_MINUTES,
    HALF_DAY_AUTO_BREAK_MINUTES,
)


@dataclass(frozen=True)
class AnalysisPolicy:
    """Tunable knobs of the daily analysis.

    half_day_auto_break_minutes: breaks up to this length on a half-day leave day
        are treated as the vendor's auto-inserted break and ignored.
    auto_break_cap_minutes: longer breaks are counted only up to this value.
    night_work_threshold_minutes: night work below this is not checked for a
        night-break adjustment.
    """

    half_day_auto_break_minutes: int = HALF_DAY_AUTO_BREAK_MINUTES
    auto_break_cap_minutes: int = AUTO_BREAK_CAP_MINUTES
    night_work_threshold_minutes: int = DEFAULT_NIGHT_WORK_THRESHOLD_MINUTES


DEFAULT_POLICY = AnalysisPolicy()
