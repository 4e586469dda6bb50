from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for the admin account.

    Note (DIP): the service layer depends on this interface, not on the JSON files.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create(self, user: User) -> None:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
