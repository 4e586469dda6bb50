from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Child


class ChildRepository(Protocol):
    def list_all(self) -> Sequence[Child]:
        raise NotImplementedError

    def get_by_id(self, child_id: str) -> Optional[Child]:
        raise NotImplementedError

    def create(self, child: Child) -> None:
        raise NotImplementedError

    def update(self, child: Child) -> bool:
        """Replace the stored child with the same id; False when it does not exist."""

        raise NotImplementedError

    def delete(self, child_id: str) -> bool:
        raise NotImplementedError
