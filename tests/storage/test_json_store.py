from __future__ import annotations

import json

import pytest

from kiddytime.core.exceptions import StorageError
from kiddytime.storage.json_store import JsonCollection, JsonStore


def test_initialize_creates_empty_arrays(tmp_path):
    store = JsonStore(tmp_path / "data")
    store.initialize()

    for name in ("users.json", "children.json", "entries.json"):
        assert json.loads((tmp_path / "data" / name).read_text(encoding="utf-8")) == []


def test_missing_file_reads_as_empty(tmp_path):
    assert JsonCollection(tmp_path / "nope.json").read_all() == []


def test_write_is_pretty_and_keeps_accents(tmp_path):
    col = JsonCollection(tmp_path / "children.json")
    col.write_all([{"name": "Léa"}])

    text = (tmp_path / "children.json").read_text(encoding="utf-8")
    assert "Léa" in text
    assert "\n  " in text
    assert col.read_all() == [{"name": "Léa"}]


def test_mutate_writes_back(tmp_path):
    col = JsonCollection(tmp_path / "entries.json")
    col.write_all([{"id": 1}])

    with col.mutate() as items:
        items.append({"id": 2})

    assert col.read_all() == [{"id": 1}, {"id": 2}]


def test_mutate_does_not_write_on_error(tmp_path):
    col = JsonCollection(tmp_path / "entries.json")
    col.write_all([{"id": 1}])

    with pytest.raises(RuntimeError):
        with col.mutate() as items:
            items.clear()
            raise RuntimeError("boom")

    assert col.read_all() == [{"id": 1}]


def test_non_array_file_is_rejected(tmp_path):
    path = tmp_path / "users.json"
    path.write_text('{"id": 1}', encoding="utf-8")

    with pytest.raises(StorageError):
        JsonCollection(path).read_all()


def test_corrupt_file_is_rejected(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(StorageError):
        JsonCollection(path).read_all()
