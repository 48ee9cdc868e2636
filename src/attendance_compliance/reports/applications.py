"""Application tallies for the per-employee report.

Unlike the violation checks, these counts are informational, so a record is
counted under every category whose keyword occurs in its application text.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import fields
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_duration_minutes
from .model import ApplicationCounts

# "900-1730/1000-1200/7.75/1": schedule information only, no request.
_SCHEDULE_ONLY_RE = re.compile(r"^\d{3,4}-\d{3,4}/\d{3,4}-\d{3,4}/[\d.]+/\d+$")

_SIMPLE_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("overtime", ("残業",)),
    ("late_early_leave", ("遅刻", "早退")),
    ("train_delay", ("電車遅延", "遅延届", "遅延申請")),
    ("flextime", ("時差出勤", "時差勤務")),
    ("break_modification", ("休憩修正", "休憩時間修正", "深夜休憩")),
    ("standby", ("待機",)),
    ("night_duty", ("宿直",)),
    ("holiday_work", ("休出", "休日出勤")),
    ("substitute_holiday", ("振替休日", "振休")),
    ("compensatory_leave", ("代休",)),
    ("absence", ("欠勤",)),
    ("special_leave", ("特休", "特別休暇")),
    ("menstrual_leave", ("生理休暇",)),
    ("post_night_leave", ("明け休",)),
)


def is_schedule_only(application_text: str) -> bool:
    return not application_text or _SCHEDULE_ONLY_RE.match(application_text.strip()) is not None


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def application_categories(record: AttendanceRecord) -> list[str]:
    """Category names (``ApplicationCounts`` fields) the record counts toward."""
    text = record.application_content or ""
    if is_schedule_only(text):
        return ["early_start"] if record.early_start_flag else []

    found = [name for name, keywords in _SIMPLE_CATEGORIES if _contains_any(text, keywords)]

    if "早出中抜け" in text:
        found.append("early_start_break")
    elif "早出" in text or record.early_start_flag:
        found.append("early_start")

    is_hourly = _contains_any(text, ("有休時間", "時間有休"))
    is_am = _contains_any(text, ("午前有休", "AM有休", "午前休"))
    is_pm = _contains_any(text, ("午後有休", "PM有休", "午後休"))
    if is_hourly:
        found.append("hourly_leave")
    if is_am:
        found.append("am_leave")
    if is_pm:
        found.append("pm_leave")
    if _contains_any(text, ("有休", "有給", "年休")) and not (is_hourly or is_am or is_pm):
        found.append("annual_leave")

    if "振替出勤" in text or ("振出" in text and "振休" not in text):
        found.append("substitute_work")

    if _contains_any(text, ("看護休暇時間", "時間看護休暇")):
        found.append("hourly_child_care_leave")
    elif _contains_any(text, ("看護休暇", "子の看護")):
        found.append("child_care_leave")

    if _contains_any(text, ("介護休暇時間", "時間介護休暇")):
        found.append("hourly_nursing_care_leave")
    elif "介護休暇" in text:
        found.append("nursing_care_leave")

    return found or ["other"]


def count_applications(records: Iterable[AttendanceRecord]) -> ApplicationCounts:
    tally = Counter(name for record in records for name in application_categories(record))
    return ApplicationCounts(**{f.name: tally[f.name] for f in fields(ApplicationCounts)})


def calculate_total_work_minutes(records: Iterable[AttendanceRecord]) -> int:
    return sum(parse_duration_minutes(record.actual_work_hours) for record in records)
