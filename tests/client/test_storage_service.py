from __future__ import annotations

import pytest

from kiddytime.children.model import Child
from kiddytime.client.api import ApiError
from kiddytime.client.storage import StorageService
from kiddytime.entries.model import TimeEntry


class FailingApi:
    def __getattr__(self, name):
        def call(*args, **kwargs):
            raise ApiError("Erreur réseau")

        return call


class RecordingApi:
    def __init__(self):
        self.calls = []

    def list_entries(self, start_date, end_date):
        self.calls.append(("list_entries", start_date, end_date))
        return [{"childId": "c1", "date": "2024-03-04", "segments": [{"id": "1", "arrivalTime": "08:00"}]}]

    def save_entry(self, entry):
        self.calls.append(("save_entry", entry))
        return {**entry, "updatedAt": "2024-03-04T08:00:00.000Z"}

    def login(self, password):
        if password != "secret":
            raise ApiError("Mot de passe incorrect", 401)
        return {"success": True}


def test_reads_fall_back_when_api_fails():
    storage = StorageService(FailingApi())

    assert storage.has_password() is False
    assert storage.check_auth() is False
    assert storage.get_children() == []
    assert storage.get_time_entries() == []
    assert storage.get_time_entry("c1", "2024-03-04") is None
    assert storage.verify_password("secret") is False


def test_writes_propagate_api_errors():
    storage = StorageService(FailingApi())
    child = Child(id="c1", name="Emma", default_arrival_time="08:00", default_leaving_time="17:00")

    with pytest.raises(ApiError):
        storage.add_child(child)
    with pytest.raises(ApiError):
        storage.delete_child("c1")
    with pytest.raises(ApiError):
        storage.save_time_entry(TimeEntry(child_id="c1", date="2024-03-04"))
    with pytest.raises(ApiError):
        storage.set_password("secret")


def test_all_entries_uses_wide_range():
    api = RecordingApi()
    entries = StorageService(api).get_time_entries()

    assert api.calls == [("list_entries", "2020-01-01", "2099-12-31")]
    assert entries[0].segments[0].arrival_time == "08:00"


def test_save_returns_server_copy():
    api = RecordingApi()
    saved = StorageService(api).save_time_entry(TimeEntry(child_id="c1", date="2024-03-04"))
    assert saved.updated_at == "2024-03-04T08:00:00.000Z"


def test_verify_password():
    storage = StorageService(RecordingApi())
    assert storage.verify_password("secret") is True
    assert storage.verify_password("nope") is False
