import pytest

from attendance_compliance.attendance.breaks import evaluate_break, has_break_violation, required_break_minutes
from attendance_compliance.core.enums import LeaveType
from attendance_compliance.core.policy import AnalysisPolicy


@pytest.mark.parametrize(
    "worked, required",
    [(0, 0), (360, 0), (361, 45), (480, 45), (481, 60), (720, 60)],
)
def test_required_break_tiers(worked, required):
    assert required_break_minutes(worked) == required


def test_six_and_a_half_hours_with_thirty_minute_break_is_violation():
    assert has_break_violation(390, 30)


def test_exactly_six_hours_needs_no_break():
    assert not has_break_violation(360, 0)


def test_evaluate_break_flags_short_break(make_record):
    check = evaluate_break(make_record(actual_work_hours="6:30", break_minutes=30), LeaveType.NONE)

    assert check.has_violation
    assert check.required_break_minutes == 45
    assert check.actual_break_minutes == 30


def test_half_day_auto_break_counts_as_zero(make_record):
    record = make_record(actual_work_hours="4:00", break_minutes=15, application_content="午後半休")

    check = evaluate_break(record, LeaveType.HALF_DAY_PM)

    assert check.actual_break_minutes == 0
    assert not check.has_violation


def test_half_day_real_break_is_kept(make_record):
    record = make_record(actual_work_hours="4:00", break_minutes=45, application_content="午前半休")

    assert evaluate_break(record, LeaveType.HALF_DAY_AM).actual_break_minutes == 45


def test_inflated_break_is_capped(make_record):
    check = evaluate_break(make_record(actual_work_hours="9:00", break_minutes=75), LeaveType.NONE)

    assert check.actual_break_minutes == 60
    assert not check.has_violation


def test_break_correction_application_disables_adjustments(make_record):
    record = make_record(actual_work_hours="9:00", break_minutes=75, application_content="休憩時間修正申請")

    assert evaluate_break(record, LeaveType.NONE).actual_break_minutes == 75


def test_adjustment_thresholds_are_configurable(make_record):
    record = make_record(actual_work_hours="4:00", break_minutes=20, application_content="午前半休")
    policy = AnalysisPolicy(half_day_auto_break_minutes=30)

    assert evaluate_break(record, LeaveType.HALF_DAY_AM).actual_break_minutes == 20
    assert evaluate_break(record, LeaveType.HALF_DAY_AM, policy).actual_break_minutes == 0


def test_required_break_uses_adjusted_working_time(make_record):
    check = evaluate_break(make_record(actual_work_hours="8:00", break_minutes=75), LeaveType.NONE)

    assert check.adjustment_minutes == 15
    assert check.worked_minutes == 495
    assert check.required_break_minutes == 60
    assert check.actual_break_minutes == 60
    assert not check.has_violation


def test_half_day_auto_break_moves_into_working_time(make_record):
    record = make_record(actual_work_hours="4:30", break_minutes=15, application_content="午前半休")

    check = evaluate_break(record, LeaveType.HALF_DAY_AM)

    assert check.worked_minutes == 285
    assert check.actual_break_minutes == 0


def test_break_correction_application_keeps_recorded_values(make_record):
    record = make_record(actual_work_hours="11:13", break_minutes=75, application_content="休憩時間修正申請")

    check = evaluate_break(record, LeaveType.NONE)

    assert check.adjustment_minutes == 0
    assert check.worked_minutes == 673
