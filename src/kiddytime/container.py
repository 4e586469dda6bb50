from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .children.json_child_repository import JsonChildRepository
from .children.service import ChildService
from .entries.json_entry_repository import JsonEntryRepository
from .entries.service import EntryService
from .reports.service import ExportService
from .storage.json_store import JsonStore
from .users.json_user_repository import JsonUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    store: JsonStore

    users_repo: JsonUserRepository
    children_repo: JsonChildRepository
    entries_repo: JsonEntryRepository

    auth_service: AuthService
    child_service: ChildService
    entry_service: EntryService
    export_service: ExportService


def build_container(*, data_dir: str | Path) -> Container:
    store = JsonStore(data_dir)
    store.initialize()

    users_repo = JsonUserRepository(store.users)
    children_repo = JsonChildRepository(store.children)
    entries_repo = JsonEntryRepository(store.entries)

    return Container(
        store=store,
        users_repo=users_repo,
        children_repo=children_repo,
        entries_repo=entries_repo,
        auth_service=AuthService(users_repo),
        child_service=ChildService(children_repo, entries_repo),
        entry_service=EntryService(entries_repo),
        export_service=ExportService(children_repo, entries_repo),
    )
