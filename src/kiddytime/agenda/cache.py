from __future__ import annotations

from typing import List, Optional, Sequence

from ..entries.model import TimeEntry, blank_entry


class EntryCache:
    """Entries loaded for the current window, reconciled after each save.

    Reconciliation matches on the surrogate id; the cache is replaced
    wholesale on the next load (navigation or view-mode change).
    """

    def __init__(self, entries: Sequence[TimeEntry] = ()):
        self._entries: List[TimeEntry] = list(entries)

    def load(self, entries: Sequence[TimeEntry]) -> None:
        self._entries = list(entries)

    def all(self) -> List[TimeEntry]:
        return list(self._entries)

    def get(self, child_id: str, date: str) -> Optional[TimeEntry]:
        for entry in self._entries:
            if entry.child_id == child_id and entry.date == date:
                return entry
        return None

    def get_or_blank(self, child_id: str, date: str) -> TimeEntry:
        return self.get(child_id, date) or blank_entry(child_id, date)

    def reconcile(self, entry: TimeEntry) -> None:
        for i, current in enumerate(self._entries):
            if current.id == entry.id:
                self._entries[i] = entry
                return
        self._entries.append(entry)
