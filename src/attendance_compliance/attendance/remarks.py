"""Remarks column checks.

The remarks column is now reviewed in the time-clock system itself, so these
checks are not part of the daily violations. They stay available for callers
that still want them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import MIN_REMARKS_LENGTH
from .model import AttendanceRecord

_REQUIRED_REASONS = {
    "直行": "直行（訪問先・業務目的の記載が必要）",
    "直帰": "直帰（訪問先・業務目的の記載が必要）",
    "遅延": "遅延（路線名・遅延時間の記載が必要）",
    "打刻修正": "打刻修正（理由の記載が必要）",
    "修正申請": "修正申請（理由の記載が必要）",
}
_ALTX_REASON = "AltX残業（タスク内容の記載が必要）"


@dataclass(frozen=True)
class RemarksRequirement:
    is_required: bool
    is_missing: bool
    reason: Optional[str] = None


def check_remarks_required(record: AttendanceRecord) -> RemarksRequirement:
    is_missing = not record.remarks.strip()

    if record.altx_overtime_in is not None or record.altx_overtime_out is not None:
        return RemarksRequirement(is_required=True, is_missing=is_missing, reason=_ALTX_REASON)

    application_content = record.application_content or ""
    for keyword, reason in _REQUIRED_REASONS.items():
        if keyword in application_content:
            return RemarksRequirement(is_required=True, is_missing=is_missing, reason=reason)

    return RemarksRequirement(is_required=False, is_missing=False)


def is_remarks_format_valid(remarks: str) -> bool:
    """Empty remarks are not a format problem; short ones are."""
    text = remarks.strip()
    return not text or len(text) >= MIN_REMARKS_LENGTH


def has_remarks_missing(record: AttendanceRecord) -> bool:
    requirement = check_remarks_required(record)
    return requirement.is_required and requirement.is_missing


def has_remarks_format_warning(record: AttendanceRecord) -> bool:
    requirement = check_remarks_required(record)
    return requirement.is_required and not requirement.is_missing and not is_remarks_format_valid(record.remarks)
