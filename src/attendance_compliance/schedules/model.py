from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ScheduledStart:
    """Giờ bắt đầu ca làm việc dự kiến."""

    hour: int
    minute: int

    @property
    def minutes_of_day(self) -> int:
        return self.hour * 60 + self.minute

    @classmethod
    def from_parts(cls, hour: str, minute: str) -> Optional["ScheduledStart"]:
        """Tạo từ chuỗi số đã khớp; giá trị ngoài phạm vi trả về None."""
        h, m = int(hour), int(minute)
        if not (0 <= h <= 23 and 0 <= m <= 59):
            return None
        return cls(hour=h, minute=m)
