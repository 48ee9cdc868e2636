from datetime import date

from attendance_compliance.core.enums import CalendarType, ViolationType
from attendance_compliance.reports.service import create_employee_monthly_summary


def _month(make_record):
    return [
        make_record(day=date(2026, 1, 5)),
        make_record(day=date(2026, 1, 6), clock_in="9:20", late_minutes="0:20"),
        make_record(day=date(2026, 1, 7), clock_out="16:00", actual_work_hours="6:30", break_minutes=30),
        make_record(day=date(2026, 1, 8), clock_in=None, clock_out=None, actual_work_hours="", break_minutes=0),
        make_record(day=date(2026, 1, 9), clock_in=None, clock_out=None, actual_work_hours="",
                    application_content="有休"),
        make_record(day=date(2026, 1, 10), calendar_type=CalendarType.NON_STATUTORY_HOLIDAY,
                    clock_out="14:00", actual_work_hours="4:00", break_minutes=0),
        make_record(day=date(2026, 1, 13), clock_out="19:00", actual_work_hours="9:00"),
        make_record(day=date(2026, 1, 14), clock_out="13:00", actual_work_hours="3:00",
                    early_leave_minutes="4:45", application_content="午後半休", break_minutes=0),
    ]


def test_counters(make_record, fixed_today):
    summary = create_employee_monthly_summary("E001", _month(make_record), today=fixed_today)

    assert summary.employee_name == "山田 太郎"
    assert summary.total_work_days == 6
    assert summary.holiday_work_days == 1
    assert summary.late_days == 1
    assert summary.early_leave_days == 0
    assert summary.break_violation_days == 1
    assert summary.missing_clock_days == 1
    assert summary.full_day_leave_days == 1
    assert summary.half_day_leave_days == 1
    assert summary.early_start_violation_days == 0
    assert summary.passed_weekdays == 7
    assert summary.total_weekdays_in_month == 7


def test_overtime_totals(make_record, fixed_today):
    summary = create_employee_monthly_summary("E001", _month(make_record), today=fixed_today)

    # holiday 4:00 counts fully, 9:00 weekday adds 75 / 60
    assert summary.total_overtime_minutes == 240 + 75
    assert summary.total_legal_overtime_minutes == 240 + 60
    assert summary.total_legal_overtime_minutes <= summary.total_overtime_minutes


def test_one_violation_per_tag(make_record, fixed_today):
    record = make_record(
        clock_in="9:30",
        clock_out="16:00",
        actual_work_hours="6:30",
        break_minutes=0,
        late_minutes="0:30",
    )

    summary = create_employee_monthly_summary("E001", [record], today=fixed_today)

    assert [v.type for v in summary.violations] == [
        ViolationType.BREAK_VIOLATION,
        ViolationType.LATE_APPLICATION_MISSING,
    ]
    break_violation, late = summary.violations
    assert break_violation.details == "必要休憩 45分に対し 0分"
    assert break_violation.required_break_minutes == 45
    assert break_violation.actual_break_minutes == 0
    assert late.details == "遅刻 0:30"
    assert late.required_break_minutes is None


def test_violation_details(make_record, fixed_today):
    records = [
        make_record(day=date(2026, 1, 5), clock_in="8:05"),
        make_record(day=date(2026, 1, 6), clock_in=None, clock_out=None, actual_work_hours=""),
        make_record(day=date(2026, 1, 7), clock_out="16:00", early_leave_minutes="1:45"),
        make_record(day=date(2026, 1, 8), application_content="時間有休"),
    ]

    details = {v.type: v.details for v in create_employee_monthly_summary("E001", records, today=fixed_today).violations}

    assert details[ViolationType.EARLY_START_APPLICATION_MISSING] == "8:05出社"
    assert details[ViolationType.MISSING_CLOCK] == "出退勤時刻なし"
    assert details[ViolationType.EARLY_LEAVE_APPLICATION_MISSING] == "早退 1:45"
    assert details[ViolationType.TIME_LEAVE_PUNCH_MISSING] == "私用外出/戻り未打刻"


def test_future_and_today_are_skipped(make_record):
    records = [
        make_record(day=date(2026, 1, 30), clock_in="9:20", late_minutes="0:20"),
        make_record(day=date(2026, 1, 31), clock_in="9:20", late_minutes="0:20"),
        make_record(day=date(2026, 2, 1), clock_in="9:20", late_minutes="0:20"),
    ]

    summary = create_employee_monthly_summary("E001", records, today=date(2026, 1, 31))

    assert summary.late_days == 1
    assert summary.total_weekdays_in_month == 3


def test_include_today(make_record):
    records = [
        make_record(day=date(2026, 1, 30), clock_in="9:20", late_minutes="0:20"),
        make_record(day=date(2026, 1, 31), clock_in="9:20", late_minutes="0:20"),
        make_record(day=date(2026, 2, 1), clock_in="9:20", late_minutes="0:20"),
    ]

    summary = create_employee_monthly_summary("E001", records, today=date(2026, 1, 31), include_today=True)

    assert summary.late_days == 2


def test_night_work_and_work_minutes(make_record, fixed_today):
    records = [
        make_record(day=date(2026, 1, 5), clock_out="22:30", actual_work_hours="12:30", break_minutes=60),
        make_record(day=date(2026, 1, 6)),
    ]

    summary = create_employee_monthly_summary("E001", records, today=fixed_today)

    assert summary.night_work_days == 1
    assert summary.total_work_minutes == 750 + 465


def test_auto_inserted_breaks_add_up_over_the_month(make_record, fixed_today):
    records = [
        make_record(day=date(2025, 12, 1), clock_out="21:28", actual_work_hours="11:13", break_minutes=75),
        make_record(day=date(2025, 12, 2), clock_out="18:48", actual_work_hours="8:33", break_minutes=75),
        make_record(day=date(2025, 12, 3), clock_out="22:00", actual_work_hours="11:45", break_minutes=75),
    ]

    summary = create_employee_monthly_summary("E001", records, today=fixed_today)

    assert summary.total_overtime_minutes == 541
    assert summary.total_legal_overtime_minutes == 496
    assert summary.break_violation_days == 0
