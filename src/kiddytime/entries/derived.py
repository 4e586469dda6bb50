"""State derived from an entry for display and export."""

from __future__ import annotations

from typing import Optional

from ..children.model import Child
from ..common.time_utils import should_have_meal, should_have_snack, total_duration
from ..core.enums import EntryStatus
from .model import TimeEntry


def has_data(entry: Optional[TimeEntry]) -> bool:
    if entry is None:
        return False
    return entry.is_absent or any(s.has_bound for s in entry.segments)


def effective_meal(entry: Optional[TimeEntry], child: Child) -> bool:
    """Explicit flag > presence during lunch > child's default policy."""
    if entry is None:
        return child.has_meal
    if entry.has_meal is not None:
        return entry.has_meal
    if should_have_meal(entry.segments):
        return True
    return child.has_meal


def effective_snack(entry: Optional[TimeEntry], child: Child) -> bool:
    if entry is None:
        return child.has_snack
    if entry.has_snack is not None:
        return entry.has_snack
    if should_have_snack(entry.segments):
        return True
    return child.has_snack


def entry_duration(entry: TimeEntry) -> Optional[str]:
    if entry.is_absent:
        return None
    return total_duration(entry.segments)


def entry_status(entry: Optional[TimeEntry]) -> EntryStatus:
    if entry is None:
        return EntryStatus.NOT_FILLED
    if entry.is_absent:
        return EntryStatus.ABSENT
    filled = [s for s in entry.segments if s.has_bound]
    if not filled:
        return EntryStatus.NOT_FILLED
    if all(s.leaving_time for s in filled):
        return EntryStatus.LEFT
    return EntryStatus.PRESENT


def segments_text(entry: TimeEntry) -> Optional[str]:
    """Text like "08:00-12:00, 14:00-?" built from the segments holding a bound."""
    if entry.is_absent:
        return None
    parts = [f"{s.arrival_time or '?'}-{s.leaving_time or '?'}" for s in entry.segments if s.has_bound]
    return ", ".join(parts) or None
