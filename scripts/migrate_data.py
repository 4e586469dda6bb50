"""Upgrade children.json / entries.json written by older versions in place."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from kiddytime.config import get_settings_module
from kiddytime.migration.legacy import migrate_collection, needs_migration
from kiddytime.storage.json_store import JsonStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = JsonStore(settings.DATA_DIR)
    store.initialize()

    for kind, collection in (("children", store.children), ("entries", store.entries)):
        with collection.mutate() as items:
            if not needs_migration(items):
                print(f"OK: {collection.path.name} already up to date")
                continue
            items[:] = migrate_collection(kind, items)
            print(f"OK: migrated {collection.path.name} ({len(items)} records)")


if __name__ == "__main__":
    main()
