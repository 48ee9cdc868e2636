from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core.constants import STANDARD_WORK_START_HOUR, STANDARD_WORK_START_MINUTE
from .model import ScheduledStart
from .strategies.application_strategy import ApplicationScheduleStrategy
from .strategies.base import ScheduleSourceStrategy
from .strategies.sheet_label_strategy import SheetLabelScheduleStrategy

DEFAULT_START = ScheduledStart(hour=STANDARD_WORK_START_HOUR, minute=STANDARD_WORK_START_MINUTE)


def _default_sources() -> tuple[ScheduleSourceStrategy, ...]:
    return (ApplicationScheduleStrategy(), SheetLabelScheduleStrategy())


@dataclass(frozen=True)
class ScheduleResolver:
    """Chain of Responsibility: first source that yields a start wins.

    Order: application text, then sheet label. None means "use the default".
    """

    sources: Sequence[ScheduleSourceStrategy] = field(default_factory=_default_sources)

    def resolve(self, application_text: str, sheet_label: str) -> Optional[ScheduledStart]:
        for source in self.sources:
            start = source.resolve(application_text=application_text or "", sheet_label=sheet_label or "")
            if start is not None:
                return start
        return None

    def resolve_or_default(self, application_text: str, sheet_label: str) -> ScheduledStart:
        return self.resolve(application_text, sheet_label) or DEFAULT_START


_default_resolver = ScheduleResolver()


def resolve_expected_start(application_text: str, sheet_label: str) -> Optional[ScheduledStart]:
    return _default_resolver.resolve(application_text, sheet_label)
