from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import ScheduledStart


class ScheduleSourceStrategy(ABC):
    """Strategy Pattern: encapsulate where a day's scheduled start comes from."""

    @abstractmethod
    def resolve(self, *, application_text: str, sheet_label: str) -> Optional[ScheduledStart]:
        raise NotImplementedError
