from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from kiddytime.config import get_settings_module
from kiddytime.storage.json_store import JsonStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = JsonStore(settings.DATA_DIR)
    store.initialize()

    counts = {name: len(c.read_all()) for name, c in store.collections().items()}
    print(f"OK: data dir ready -> {store.data_dir} ({', '.join(f'{k}={v}' for k, v in counts.items())})")


if __name__ == "__main__":
    main()
