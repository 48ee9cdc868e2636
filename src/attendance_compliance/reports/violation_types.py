"""Urgency and guidance attached to each violation type.

Urgency is only used for prioritising follow-up; it never hides a violation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..attendance.model import AttendanceViolation
from ..core.enums import Urgency, ViolationType

VIOLATION_URGENCY: dict[ViolationType, Urgency] = {
    # Labor Standards Act violations.
    ViolationType.BREAK_VIOLATION: Urgency.HIGH,
    ViolationType.NIGHT_BREAK_APPLICATION_MISSING: Urgency.HIGH,
    # Missing applications.
    ViolationType.LATE_APPLICATION_MISSING: Urgency.MEDIUM,
    ViolationType.EARLY_LEAVE_APPLICATION_MISSING: Urgency.MEDIUM,
    ViolationType.EARLY_START_APPLICATION_MISSING: Urgency.MEDIUM,
    ViolationType.TIME_LEAVE_PUNCH_MISSING: Urgency.MEDIUM,
    ViolationType.MISSING_CLOCK: Urgency.NONE,
    ViolationType.REMARKS_MISSING: Urgency.NONE,
    ViolationType.REMARKS_FORMAT_WARNING: Urgency.NONE,
}


@dataclass(frozen=True)
class ViolationInfo:
    display_name: str
    possible_applications: tuple[str, ...]
    notes: str


VIOLATION_DISPLAY_INFO: dict[ViolationType, ViolationInfo] = {
    ViolationType.MISSING_CLOCK: ViolationInfo(
        "打刻漏れ",
        ("打刻忘れ／打刻訂正",),
        "この状態では月締め（出勤簿提出）ができません。打刻訂正申請を行ってください。",
    ),
    ViolationType.BREAK_VIOLATION: ViolationInfo(
        "休憩時間違反",
        ("休憩時間修正申請", "休憩時間追加申請"),
        "労働時間6時間超で45分、8時間超で60分の休憩が必要です。",
    ),
    ViolationType.LATE_APPLICATION_MISSING: ViolationInfo(
        "届出漏れ（遅刻）",
        ("遅刻・早退申請", "電車遅延申請", "時差出勤申請（事前申請のみ）", "有休申請（半休・事前申請のみ）"),
        "電車遅延の場合は「電車遅延申請」を提出し、到着時刻を跨ぐ遅延証明書の添付が必要です。",
    ),
    ViolationType.EARLY_LEAVE_APPLICATION_MISSING: ViolationInfo(
        "届出漏れ（早退）",
        ("遅刻・早退申請", "有休申請（半休・事前申請のみ）"),
        "早退が発生した場合は「遅刻・早退申請」を提出してください。半休は事前申請が原則です。",
    ),
    ViolationType.EARLY_START_APPLICATION_MISSING: ViolationInfo(
        "届出漏れ（早出）",
        ("早出申請", "早出フラグ入力"),
        "客先常駐者は出勤簿の「早出フラグ」に「1」を入力。内勤者は「早出申請」の提出・承認が必要です。",
    ),
    ViolationType.TIME_LEAVE_PUNCH_MISSING: ViolationInfo(
        "打刻漏れ（時間有休）",
        ("私用外出", "私用戻り"),
        "時間有休申請時は「私用外出」と「私用戻り」の打刻が必須です。",
    ),
    ViolationType.NIGHT_BREAK_APPLICATION_MISSING: ViolationInfo(
        "届出漏れ（深夜休憩）",
        ("休憩時間修正申請（深夜休憩修正）",),
        "深夜（22:00-05:00）の休憩は自動計算されません。「休憩時間修正申請」で深夜休憩時間を申告してください。",
    ),
    ViolationType.REMARKS_MISSING: ViolationInfo(
        "備考欄未入力",
        (),
        "申請内容に対して備考欄の記載が必要です。「【事由】＋【詳細】」形式で記載してください。",
    ),
    ViolationType.REMARKS_FORMAT_WARNING: ViolationInfo(
        "備考欄フォーマット",
        (),
        "備考欄は「【事由】＋【詳細】」形式での記載を推奨します。",
    ),
}


def count_violations_by_urgency(violations: Iterable[AttendanceViolation], urgency: Urgency) -> int:
    return sum(1 for v in violations if VIOLATION_URGENCY[v.type] == urgency)


def count_high_urgency_violations(violations: Iterable[AttendanceViolation]) -> int:
    return count_violations_by_urgency(violations, Urgency.HIGH)


def count_medium_urgency_violations(violations: Iterable[AttendanceViolation]) -> int:
    return count_violations_by_urgency(violations, Urgency.MEDIUM)
