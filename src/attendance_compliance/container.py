from __future__ import annotations

from dataclasses import dataclass

from .attendance.classifier import DailyRecordAnalyzer
from .core.constants import (
    AUTO_BREAK_CAP_MINUTES,
    DEFAULT_NIGHT_WORK_THRESHOLD_MINUTES,
    HALF_DAY_AUTO_BREAK_MINUTES,
)
from .core.policy import AnalysisPolicy
from .overtime.calculator.standard_calculator import StandardOvertimeCalculator
from .reports.service import AttendanceAnalysisService
from .schedules.resolver import ScheduleResolver


@dataclass(frozen=True)
class Container:
    policy: AnalysisPolicy

    schedule_resolver: ScheduleResolver
    overtime_calculator: StandardOvertimeCalculator

    daily_analyzer: DailyRecordAnalyzer
    analysis_service: AttendanceAnalysisService


def build_container(*, analysis_config: dict) -> Container:
    policy = AnalysisPolicy(
        half_day_auto_break_minutes=int(analysis_config.get("half_day_auto_break_minutes", HALF_DAY_AUTO_BREAK_MINUTES)),
        auto_break_cap_minutes=int(analysis_config.get("auto_break_cap_minutes", AUTO_BREAK_CAP_MINUTES)),
        night_work_threshold_minutes=int(
            analysis_config.get("night_work_threshold_minutes", DEFAULT_NIGHT_WORK_THRESHOLD_MINUTES)
        ),
    )

    schedule_resolver = ScheduleResolver()
    overtime_calculator = StandardOvertimeCalculator(policy)
    daily_analyzer = DailyRecordAnalyzer(
        policy=policy,
        resolver=schedule_resolver,
        calculator=overtime_calculator,
    )
    analysis_service = AttendanceAnalysisService(
        analyzer=daily_analyzer,
        include_today=bool(analysis_config.get("include_today", False)),
    )

    return Container(
        policy=policy,
        schedule_resolver=schedule_resolver,
        overtime_calculator=overtime_calculator,
        daily_analyzer=daily_analyzer,
        analysis_service=analysis_service,
    )
