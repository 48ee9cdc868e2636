import pytest

from attendance_compliance.attendance.leave import classify_leave, is_substitute_work
from attendance_compliance.core.enums import LeaveType


@pytest.mark.parametrize(
    "text, expected",
    [
        ("有休", LeaveType.FULL_DAY),
        ("有給休暇", LeaveType.FULL_DAY),
        ("欠勤", LeaveType.FULL_DAY),
        ("生理休", LeaveType.FULL_DAY),
        ("子の看護休暇", LeaveType.FULL_DAY),
        ("明け休", LeaveType.FULL_DAY),
        ("振休", LeaveType.FULL_DAY),
        ("午前半休", LeaveType.HALF_DAY_AM),
        ("AM有休", LeaveType.HALF_DAY_AM),
        ("午後半休", LeaveType.HALF_DAY_PM),
        ("PM半休", LeaveType.HALF_DAY_PM),
        ("午後有休", LeaveType.HALF_DAY_PM),
        ("半休", LeaveType.HALF_DAY_AM),
        ("", LeaveType.NONE),
        ("残業申請", LeaveType.NONE),
    ],
)
def test_classify_leave(text, expected):
    assert classify_leave(text) == expected


def test_half_day_checked_before_full_day():
    # "午前有休" also contains 有休 but is a half day
    assert classify_leave("午前有休,残業") == LeaveType.HALF_DAY_AM


def test_free_text_mentioning_leave_is_not_leave():
    assert classify_leave("有休の予定を確認") == LeaveType.NONE


def test_hourly_leave_is_not_full_day():
    assert classify_leave("時間有休 14:00-16:00") == LeaveType.NONE


def test_substitute_work(make_record):
    assert is_substitute_work(make_record(application_content="振替出勤"))
    assert is_substitute_work(make_record(application_content="振出"))
    assert is_substitute_work(make_record(application_content="振替出勤(1/10分)"))
    assert not is_substitute_work(make_record(application_content="振替休日"))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("午前半休(通院)", LeaveType.HALF_DAY_AM),
        ("午後半休（私用）", LeaveType.HALF_DAY_PM),
        ("半休(午後)", LeaveType.HALF_DAY_PM),
        ("有休(通院)", LeaveType.FULL_DAY),
        ("残業申請,午後半休", LeaveType.HALF_DAY_PM),
    ],
)
def test_leave_with_bracketed_note(text, expected):
    assert classify_leave(text) == expected


def test_hourly_leave_with_bracketed_range_is_not_full_day():
    assert classify_leave("時間有休(14:00-16:00)") == LeaveType.NONE
