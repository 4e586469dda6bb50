from __future__ import annotations

import os

import pytest

os.environ.setdefault("APP_ENV", "testing")

from kiddytime.main import create_app  # noqa: E402


@pytest.fixture
def app(tmp_path):
    return create_app({"DATA_DIR": str(tmp_path / "data"), "TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    resp = client.post("/api/auth/setup", json={"password": "secret"})
    assert resp.status_code == 200
    return client
