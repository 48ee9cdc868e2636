from __future__ import annotations

import re
from typing import Optional

from ..model import ScheduledStart
from .base import ScheduleSourceStrategy

# "900-1730/...", "8:30-17:15", or after a request label: "残業終了,900-1730/..."
_APPLICATION_SCHEDULE_RE = re.compile(r"(?:^|[,、])\s*(\d{1,2}):?(\d{2})-(\d{1,2}):?(\d{2})")


class ApplicationScheduleStrategy(ScheduleSourceStrategy):
    """Schedule written into the application column."""

    def resolve(self, *, application_text: str, sheet_label: str) -> Optional[ScheduledStart]:
        if not application_text:
            return None
        match = _APPLICATION_SCHEDULE_RE.search(application_text)
        if not match:
            return None
        return ScheduledStart.from_parts(match.group(1), match.group(2))
