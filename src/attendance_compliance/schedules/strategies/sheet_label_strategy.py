from __future__ import annotations

import re
from typing import Optional

from ..model import ScheduledStart
from .base import ScheduleSourceStrategy

# "KDDI_日勤_800-1630_..." or "..._8:30-17:15_...". With dual schedules
# ("800-1630～930-1800") the first one wins.
_COMPACT_RE = re.compile(r"[_-](\d{3,4})-\d{3,4}")
_COLON_RE = re.compile(r"[_-](\d{1,2}):(\d{2})-\d{1,2}:\d{2}")


class SheetLabelScheduleStrategy(ScheduleSourceStrategy):
    """Schedule embedded in the sheet label."""

    def resolve(self, *, application_text: str, sheet_label: str) -> Optional[ScheduledStart]:
        if not sheet_label:
            return None

        match = _COMPACT_RE.search(sheet_label)
        if match:
            digits = match.group(1)
            return ScheduledStart.from_parts(digits[:-2], digits[-2:])

        match = _COLON_RE.search(sheet_label)
        if match:
            return ScheduledStart.from_parts(match.group(1), match.group(2))
        return None
