from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TimeEntry


class EntryRepository(Protocol):
    """Entries are keyed by (child_id, date), never by the surrogate id."""

    def list_by_date_range(self, start_date: str, end_date: str) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def get_for_child_and_date(self, child_id: str, date: str) -> Optional[TimeEntry]:
        raise NotImplementedError

    def upsert(self, entry: TimeEntry) -> None:
        raise NotImplementedError

    def delete_by_child(self, child_id: str) -> int:
        raise NotImplementedError
