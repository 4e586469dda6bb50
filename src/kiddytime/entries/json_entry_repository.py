from __future__ import annotations

from typing import Optional, Sequence

from ..migration.legacy import migrate_time_entry
from ..storage.json_store import JsonCollection
from .model import TimeEntry
from .repository import EntryRepository


def _load(raw: dict) -> TimeEntry:
    # Records written before segments existed are upgraded on the fly.
    return TimeEntry.from_dict(migrate_time_entry(raw))


class JsonEntryRepository(EntryRepository):
    def __init__(self, collection: JsonCollection):
        self._collection = collection

    def list_by_date_range(self, start_date: str, end_date: str) -> Sequence[TimeEntry]:
        # ISO dates compare correctly as strings.
        return [
            _load(raw)
            for raw in self._collection.read_all()
            if start_date <= str(raw.get("date", "")) <= end_date
        ]

    def get_for_child_and_date(self, child_id: str, date: str) -> Optional[TimeEntry]:
        for raw in self._collection.read_all():
            if str(raw.get("childId")) == child_id and raw.get("date") == date:
                return _load(raw)
        return None

    def upsert(self, entry: TimeEntry) -> None:
        with self._collection.mutate() as items:
            for i, raw in enumerate(items):
                if str(raw.get("childId")) == entry.child_id and raw.get("date") == entry.date:
                    items[i] = entry.to_dict()
                    break
            else:
                items.append(entry.to_dict())

    def delete_by_child(self, child_id: str) -> int:
        with self._collection.mutate() as items:
            kept = [raw for raw in items if str(raw.get("childId")) != child_id]
            removed = len(items) - len(kept)
            items[:] = kept
        return removed
