from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class User:
    """Domain entity: the single administrator account.

    Note: plain data object, no file access here.
    """

    id: str
    username: str
    password_hash: str
    created_at: str

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "User":
        return cls(
            id=str(raw["id"]),
            username=raw.get("username", ""),
            # Early data files stored the hash under "password".
            password_hash=raw.get("passwordHash") or raw.get("password", ""),
            created_at=raw.get("createdAt", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "passwordHash": self.password_hash,
            "createdAt": self.created_at,
        }
