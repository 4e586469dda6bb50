"""Copy the JSON data files into backups/<timestamp>/."""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from kiddytime.config import get_settings_module
from kiddytime.storage.json_store import JsonStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = JsonStore(settings.DATA_DIR)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = Path(__file__).resolve().parents[1] / "backups" / ts
    out_dir.mkdir(parents=True, exist_ok=True)

    copied = 0
    for collection in store.collections().values():
        if collection.path.exists():
            shutil.copy2(collection.path, out_dir / collection.path.name)
            copied += 1

    if not copied:
        raise SystemExit(f"Aucun fichier de données trouvé dans {store.data_dir}")
    print(f"OK: Backup created: {out_dir} ({copied} files)")


if __name__ == "__main__":
    main()
