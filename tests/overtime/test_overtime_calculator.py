from attendance_compliance.core.enums import CalendarType
from attendance_compliance.core.policy import AnalysisPolicy
from attendance_compliance.overtime.calculator.standard_calculator import StandardOvertimeCalculator, is_holiday_work
from attendance_compliance.overtime.service import calculate_overtime_details, calculate_overtime_minutes


def test_weekday_nine_hours(make_record):
    details = calculate_overtime_details(make_record(actual_work_hours="9:00"))

    assert details.overtime_minutes == 75
    assert details.legal_overtime_minutes == 60


def test_weekday_between_contract_and_statute(make_record):
    details = calculate_overtime_details(make_record(actual_work_hours="7:55"))

    assert details.overtime_minutes == 10
    assert details.legal_overtime_minutes == 0


def test_short_day_has_no_overtime(make_record):
    details = calculate_overtime_details(make_record(actual_work_hours="5:00"))

    assert (details.overtime_minutes, details.legal_overtime_minutes) == (0, 0)


def test_holiday_work_counts_fully(make_record):
    for calendar_type in (CalendarType.STATUTORY_HOLIDAY, CalendarType.NON_STATUTORY_HOLIDAY):
        record = make_record(calendar_type=calendar_type, actual_work_hours="5:30")
        details = StandardOvertimeCalculator().details(record)

        assert is_holiday_work(record)
        assert details.overtime_minutes == details.legal_overtime_minutes == 330


def test_substitute_work_uses_weekday_thresholds(make_record):
    record = make_record(
        calendar_type=CalendarType.NON_STATUTORY_HOLIDAY,
        application_content="振替出勤",
        actual_work_hours="8:00",
    )

    details = calculate_overtime_details(record)

    assert not is_holiday_work(record)
    assert details.overtime_minutes == 15
    assert details.legal_overtime_minutes == 0


def test_holiday_without_punches_is_not_holiday_work(make_record):
    record = make_record(calendar_type=CalendarType.STATUTORY_HOLIDAY, clock_in=None, clock_out=None, actual_work_hours="")

    assert not is_holiday_work(record)
    assert calculate_overtime_minutes(record) == 0


def test_legacy_accessor_returns_contract_overtime(make_record):
    assert calculate_overtime_minutes(make_record(actual_work_hours="10:00")) == 135


def test_legal_never_exceeds_contract_overtime(make_record):
    for worked in ("0:00", "7:45", "8:00", "8:01", "11:13", "25:30"):
        details = calculate_overtime_details(make_record(actual_work_hours=worked))
        assert details.legal_overtime_minutes <= details.overtime_minutes


def test_auto_inserted_break_is_counted_as_work(make_record):
    details = calculate_overtime_details(make_record(actual_work_hours="11:13", break_minutes=75))

    assert (details.overtime_minutes, details.legal_overtime_minutes) == (223, 208)


def test_standard_break_needs_no_adjustment(make_record):
    details = calculate_overtime_details(make_record(actual_work_hours="9:00", break_minutes=60))

    assert (details.overtime_minutes, details.legal_overtime_minutes) == (75, 60)


def test_break_correction_application_keeps_recorded_hours(make_record):
    record = make_record(actual_work_hours="11:13", break_minutes=75, application_content="休憩時間修正申請")

    details = calculate_overtime_details(record)

    assert (details.overtime_minutes, details.legal_overtime_minutes) == (208, 193)


def test_half_day_auto_break_is_given_back(make_record):
    record = make_record(actual_work_hours="4:30", break_minutes=15, application_content="午前半休")

    details = calculate_overtime_details(record)

    assert (details.overtime_minutes, details.legal_overtime_minutes) == (0, 0)


def test_half_day_long_shift_gives_back_excess_break(make_record):
    record = make_record(actual_work_hours="8:15", break_minutes=75, application_content="午前半休")

    details = calculate_overtime_details(record)

    assert (details.overtime_minutes, details.legal_overtime_minutes) == (45, 30)


def test_holiday_work_is_not_adjusted(make_record):
    record = make_record(calendar_type=CalendarType.STATUTORY_HOLIDAY, actual_work_hours="5:00", break_minutes=75)

    assert calculate_overtime_details(record).overtime_minutes == 300


def test_cap_comes_from_policy(make_record):
    record = make_record(actual_work_hours="9:00", break_minutes=90)

    assert StandardOvertimeCalculator().details(record).overtime_minutes == 105
    assert StandardOvertimeCalculator(AnalysisPolicy(auto_break_cap_minutes=90)).details(record).overtime_minutes == 75
