from __future__ import annotations

import re
from typing import AbstractSet, Optional

_ITEM_SEPARATORS = re.compile(r"[,、，/／\s]+")
_NOTE = re.compile(r"[(（][^)）]*[)）]")


def split_application_items(text: Optional[str]) -> list[str]:
    """Split application text into its items.

    The export joins several applications with commas, slashes or spaces,
    e.g. ``"時間有休 14:00-16:00"`` or ``"遅刻申請,残業申請"``. A bracketed
    note after an item, as in ``"有休(通院)"``, is dropped.
    """
    if not text:
        return []
    return [item for item in _ITEM_SEPARATORS.split(_NOTE.sub(" ", text)) if item]


def has_application_phrase(text: Optional[str], phrases: AbstractSet[str]) -> bool:
    """True when one of the formal application names ``phrases`` occurs in ``text``.

    The names are full application titles such as ``"電車遅延申請"``, so prose
    like ``"電車の遅延はありません"`` never contains one.
    """
    if not text:
        return False
    return any(phrase in text for phrase in phrases)


def has_exact_application_phrase(text: Optional[str], phrases: AbstractSet[str]) -> bool:
    """True when some item of ``text`` is exactly one of ``phrases``.

    For names short enough to appear inside unrelated words or prose.
    """
    return any(item in phrases for item in split_application_items(text))
