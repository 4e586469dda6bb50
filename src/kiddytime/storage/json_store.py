from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List

from ..core.constants import CHILDREN_FILE, ENTRIES_FILE, USERS_FILE
from ..core.exceptions import StorageError

log = logging.getLogger(__name__)


class JsonCollection:
    """A whole JSON array kept in one file.

    Every operation reads the full array and rewrites it in full. Mutations go
    through `mutate()` which holds a per-file lock for the whole
    read-modify-write, so two requests of the same process cannot drop each
    other's change. Other processes are not coordinated.
    """

    _locks: Dict[str, threading.RLock] = {}
    _locks_guard = threading.Lock()

    def __init__(self, path: str | Path):
        self._path = Path(path)
        key = str(self._path.resolve())
        with JsonCollection._locks_guard:
            self._lock = JsonCollection._locks.setdefault(key, threading.RLock())

    @property
    def path(self) -> Path:
        return self._path

    def ensure_exists(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            self._write([])

    def read_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return self._read()

    def write_all(self, items: List[Dict[str, Any]]) -> None:
        with self._lock:
            self._write(items)

    @contextmanager
    def mutate(self) -> Iterator[List[Dict[str, Any]]]:
        """Yield the current items; the (mutated) list is written back on exit."""
        with self._lock:
            items = self._read()
            yield items
            self._write(items)

    def _read(self) -> List[Dict[str, Any]]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "[]")
        except (OSError, ValueError) as e:
            log.error("Error reading file %s: %s", self._path, e)
            raise StorageError(f"Lecture impossible: {self._path.name}") from e
        if not isinstance(data, list):
            raise StorageError(f"{self._path.name} ne contient pas un tableau JSON")
        return data

    def _write(self, items: List[Dict[str, Any]]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=str(self._path.parent), prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self._path)
        except OSError as e:
            log.error("Error writing file %s: %s", self._path, e)
            raise StorageError(f"Écriture impossible: {self._path.name}") from e
        finally:
            if os.path.exists(tmp):
                os.unlink(tmp)


class JsonStore:
    """Owns the three collections living in one data directory."""

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self.users = JsonCollection(self.data_dir / USERS_FILE)
        self.children = JsonCollection(self.data_dir / CHILDREN_FILE)
        self.entries = JsonCollection(self.data_dir / ENTRIES_FILE)

    def initialize(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for collection in (self.users, self.children, self.entries):
            collection.ensure_exists()

    def collections(self) -> Dict[str, JsonCollection]:
        return {"users": self.users, "children": self.children, "entries": self.entries}
