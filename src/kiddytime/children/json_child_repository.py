from __future__ import annotations

from typing import Optional, Sequence

from ..migration.legacy import migrate_child
from ..storage.json_store import JsonCollection
from .model import Child
from .repository import ChildRepository


def _load(raw: dict) -> Child:
    return Child.from_dict(migrate_child(raw))


class JsonChildRepository(ChildRepository):
    def __init__(self, collection: JsonCollection):
        self._collection = collection

    def list_all(self) -> Sequence[Child]:
        return [_load(raw) for raw in self._collection.read_all()]

    def get_by_id(self, child_id: str) -> Optional[Child]:
        for raw in self._collection.read_all():
            if str(raw.get("id")) == child_id:
                return _load(raw)
        return None

    def create(self, child: Child) -> None:
        with self._collection.mutate() as items:
            items.append(child.to_dict())

    def update(self, child: Child) -> bool:
        with self._collection.mutate() as items:
            for i, raw in enumerate(items):
                if str(raw.get("id")) == child.id:
                    items[i] = child.to_dict()
                    return True
        return False

    def delete(self, child_id: str) -> bool:
        with self._collection.mutate() as items:
            kept = [raw for raw in items if str(raw.get("id")) != child_id]
            removed = len(kept) != len(items)
            items[:] = kept
        return removed
