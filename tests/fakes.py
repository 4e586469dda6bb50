"""In-memory repositories shared by the service tests."""

from __future__ import annotations

from typing import Optional

from kiddytime.children.model import Child
from kiddytime.entries.model import TimeEntry
from kiddytime.users.model import User


class InMemoryUsers:
    def __init__(self):
        self.items: list[User] = []

    def list_all(self):
        return list(self.items)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.items if u.username == username), None)

    def create(self, user: User) -> None:
        self.items.append(user)

    def count(self) -> int:
        return len(self.items)


class InMemoryChildren:
    def __init__(self, children=()):
        self.items: dict[str, Child] = {c.id: c for c in children}

    def list_all(self):
        return list(self.items.values())

    def get_by_id(self, child_id: str) -> Optional[Child]:
        return self.items.get(child_id)

    def create(self, child: Child) -> None:
        self.items[child.id] = child

    def update(self, child: Child) -> bool:
        if child.id not in self.items:
            return False
        self.items[child.id] = child
        return True

    def delete(self, child_id: str) -> bool:
        return self.items.pop(child_id, None) is not None


class InMemoryEntries:
    def __init__(self, entries=()):
        self.items: dict[tuple[str, str], TimeEntry] = {e.key: e for e in entries}

    def list_by_date_range(self, start_date: str, end_date: str):
        return [e for e in self.items.values() if start_date <= e.date <= end_date]

    def get_for_child_and_date(self, child_id: str, date: str) -> Optional[TimeEntry]:
        return self.items.get((child_id, date))

    def upsert(self, entry: TimeEntry) -> None:
        self.items[entry.key] = entry

    def delete_by_child(self, child_id: str) -> int:
        keys = [k for k in self.items if k[0] == child_id]
        for k in keys:
            del self.items[k]
        return len(keys)
