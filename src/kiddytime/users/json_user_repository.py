from __future__ import annotations

from typing import Optional, Sequence

from ..storage.json_store import JsonCollection
from .model import User
from .repository import UserRepository


class JsonUserRepository(UserRepository):
    def __init__(self, collection: JsonCollection):
        self._collection = collection

    def list_all(self) -> Sequence[User]:
        return [User.from_dict(raw) for raw in self._collection.read_all()]

    def get_by_username(self, username: str) -> Optional[User]:
        for raw in self._collection.read_all():
            if raw.get("username") == username:
                return User.from_dict(raw)
        return None

    def create(self, user: User) -> None:
        with self._collection.mutate() as items:
            items.append(user.to_dict())

    def count(self) -> int:
        return len(self._collection.read_all())
