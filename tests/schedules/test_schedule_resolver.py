from typing import Optional

import pytest

from attendance_compliance.schedules.model import ScheduledStart
from attendance_compliance.schedules.resolver import DEFAULT_START, ScheduleResolver, resolve_expected_start
from attendance_compliance.schedules.strategies.application_strategy import ApplicationScheduleStrategy
from attendance_compliance.schedules.strategies.base import ScheduleSourceStrategy
from attendance_compliance.schedules.strategies.sheet_label_strategy import SheetLabelScheduleStrategy


@pytest.mark.parametrize(
    "text, expected",
    [
        ("900-1730/1000-1200/7.75/1", ScheduledStart(9, 0)),
        ("830-1715", ScheduledStart(8, 30)),
        ("1000-1900/1300-1400/8/1", ScheduledStart(10, 0)),
        ("8:30-17:15", ScheduledStart(8, 30)),
        ("残業終了,900-1730/1200-1300/7.75/1", ScheduledStart(9, 0)),
    ],
)
def test_application_schedule_start(text, expected):
    assert ApplicationScheduleStrategy().resolve(application_text=text, sheet_label="") == expected


def test_application_time_inside_free_text_is_not_a_schedule():
    # hourly leave range is not the day's schedule
    assert ApplicationScheduleStrategy().resolve(application_text="時間有休 14:00-16:00", sheet_label="") is None


def test_application_schedule_out_of_range_is_ignored():
    assert ApplicationScheduleStrategy().resolve(application_text="2500-1730", sheet_label="") is None


def test_sheet_label_dual_schedule_first_wins():
    start = SheetLabelScheduleStrategy().resolve(application_text="", sheet_label="KDDI_日勤_800-1630～930-1800_1200")
    assert start == ScheduledStart(8, 0)


def test_sheet_label_colon_form():
    start = SheetLabelScheduleStrategy().resolve(application_text="", sheet_label="本社-8:30-17:15_営業")
    assert start == ScheduledStart(8, 30)


def test_sheet_label_without_schedule():
    assert SheetLabelScheduleStrategy().resolve(application_text="", sheet_label="本社_営業部") is None


def test_application_text_takes_precedence_over_sheet_label():
    assert resolve_expected_start("1000-1900", "KDDI_日勤_800-1630") == ScheduledStart(10, 0)


def test_falls_back_to_sheet_label():
    assert resolve_expected_start("遅刻申請", "KDDI_日勤_800-1630") == ScheduledStart(8, 0)


def test_nothing_resolved_returns_none_and_default_is_nine():
    assert resolve_expected_start("", "") is None
    assert ScheduleResolver().resolve_or_default("", "") == DEFAULT_START == ScheduledStart(9, 0)


class FixedSource(ScheduleSourceStrategy):
    def __init__(self, start: Optional[ScheduledStart]):
        self.start = start
        self.calls = 0

    def resolve(self, *, application_text: str, sheet_label: str):
        self.calls += 1
        return self.start


def test_chain_stops_at_first_match():
    first = FixedSource(ScheduledStart(7, 0))
    second = FixedSource(ScheduledStart(11, 0))

    resolver = ScheduleResolver(sources=(first, second))

    assert resolver.resolve("", "") == ScheduledStart(7, 0)
    assert second.calls == 0
