from __future__ import annotations

import pytest
import requests

from kiddytime.client.api import ApiClient, ApiError


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.calls = []
        self._response = response or FakeResponse(payload={})
        self._error = error

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self._error:
            raise self._error
        return self._response


def test_list_entries_sends_range_params():
    session = FakeSession(FakeResponse(payload=[]))
    client = ApiClient("http://localhost:3000/api/", session=session)

    assert client.list_entries("2024-03-01", "2024-03-31") == []

    method, url, kwargs = session.calls[0]
    assert method == "GET"
    assert url == "http://localhost:3000/api/entries"
    assert kwargs["params"] == {"startDate": "2024-03-01", "endDate": "2024-03-31"}
    assert session.headers["Content-Type"] == "application/json"


def test_server_error_message_is_surfaced():
    session = FakeSession(FakeResponse(401, {"error": "Mot de passe incorrect"}))
    client = ApiClient("http://api", session=session)

    with pytest.raises(ApiError) as exc:
        client.login("bad")

    assert exc.value.message == "Mot de passe incorrect"
    assert exc.value.status_code == 401
    assert session.calls[0][2]["json"] == {"password": "bad"}


def test_error_without_body_is_a_network_error():
    client = ApiClient("http://api", session=FakeSession(FakeResponse(502)))
    with pytest.raises(ApiError, match="Erreur réseau"):
        client.health()


def test_transport_failure_is_a_network_error():
    client = ApiClient("http://api", session=FakeSession(error=requests.ConnectionError("down")))
    with pytest.raises(ApiError) as exc:
        client.list_children()
    assert exc.value.status_code is None
