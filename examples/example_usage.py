"""Ví dụ: dùng service layer (không qua Flask).

Mục tiêu: phân tích vài ngày chấm công mẫu rồi in tổng hợp theo nhân viên và phòng ban.
"""

import importlib
from datetime import date, datetime

from attendance_compliance.attendance.model import AttendanceRecord
from attendance_compliance.config import get_settings_module
from attendance_compliance.container import build_container


def _day(day: int, clock_in: str, clock_out: str, worked: str, **extra) -> AttendanceRecord:
    d = date(2026, 1, day)
    h_in, m_in = map(int, clock_in.split(":"))
    h_out, m_out = map(int, clock_out.split(":"))
    return AttendanceRecord(
        employee_id="E001",
        employee_name="山田 太郎",
        department="開発部",
        date=d,
        clock_in=datetime(2026, 1, day, h_in, m_in),
        clock_out=datetime(2026, 1, day, h_out, m_out),
        actual_work_hours=worked,
        break_minutes=extra.pop("break_minutes", 60),
        **extra,
    )


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(analysis_config=settings.ANALYSIS_CONFIG)

    records = [
        _day(5, "9:00", "17:45", "7:45"),
        _day(6, "9:20", "18:00", "7:40", late_minutes="0:20"),
        _day(7, "9:00", "22:30", "12:30"),
        _day(8, "8:10", "17:45", "8:35"),
    ]
    result = container.analysis_service.analyze_extended(records, today=date(2026, 2, 1))

    for s in result.employee_summaries:
        print(s.employee_name, "overtime(min)=", s.total_overtime_minutes, "violations=", len(s.violations))
    for v in result.all_violations:
        print(v.date, v.type.value, v.details)


if __name__ == "__main__":
    main()
