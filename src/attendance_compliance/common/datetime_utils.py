from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

_DURATION_RE = re.compile(r"^\s*(\d+):(\d{1,2})\s*$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 timestamp (``2026-01-05T09:00`` or with seconds)."""
    return datetime.fromisoformat(value)


def parse_duration_minutes(value: Optional[str]) -> int:
    """Parse an "H:MM" duration into minutes.

    Empty or malformed text degrades to 0.
    """
    if not value:
        return 0
    match = _DURATION_RE.match(value)
    if not match:
        return 0
    return int(match.group(1)) * 60 + int(match.group(2))


def format_duration(minutes: int) -> str:
    """Format minutes as "H:MM"."""
    return f"{minutes // 60}:{minutes % 60:02d}"


def minutes_of_day(value: datetime) -> int:
    return value.hour * 60 + value.minute


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
