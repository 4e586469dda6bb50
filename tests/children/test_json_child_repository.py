from __future__ import annotations

from kiddytime.children.json_child_repository import JsonChildRepository
from kiddytime.children.model import Child
from kiddytime.storage.json_store import JsonCollection


def test_legacy_child_is_read_with_defaults(tmp_path):
    col = JsonCollection(tmp_path / "children.json")
    col.write_all([{"id": "c1", "name": "Emma", "defaultArrivalTime": "08:30", "defaultLeavingTime": "16:00"}])

    child = JsonChildRepository(col).get_by_id("c1")

    assert child.has_meal is True
    assert child.has_snack is True
    assert child.expected_days == [1, 2, 3, 4, 5]
    assert child.default_segments[0].arrival_time == "08:30"


def test_null_policy_reads_as_true():
    child = Child.from_dict({"id": "c1", "name": "Emma", "hasMeal": None, "hasSnack": False})
    assert child.has_meal is True
    assert child.has_snack is False
