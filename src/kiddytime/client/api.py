"""HTTP client for the KiddyTime REST API.

The session cookie set by login/setup is kept by the underlying
`requests.Session`, so one client instance equals one logged-in browser.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

NETWORK_ERROR = "Erreur réseau"


class ApiError(Exception):
    """Non-2xx answer or transport failure; carries the server message when there is one."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ApiClient:
    def __init__(self, base_url: str, *, session: Optional[requests.Session] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self.timeout = timeout

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ApiError(NETWORK_ERROR) from e

        if not response.ok:
            try:
                message = response.json().get("error") or NETWORK_ERROR
            except (ValueError, AttributeError):
                message = NETWORK_ERROR
            raise ApiError(message, response.status_code)

        return response.json()

    # Auth
    def has_password(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/has-password")

    def check(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/check")

    def setup(self, password: str) -> Dict[str, Any]:
        return self._request("POST", "/auth/setup", json={"password": password})

    def login(self, password: str) -> Dict[str, Any]:
        return self._request("POST", "/auth/login", json={"password": password})

    def logout(self) -> Dict[str, Any]:
        return self._request("POST", "/auth/logout")

    # Children
    def list_children(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/children")

    def get_child(self, child_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/children/{child_id}")

    def create_child(self, child: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/children", json=child)

    def update_child(self, child_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/children/{child_id}", json=updates)

    def delete_child(self, child_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/children/{child_id}")

    # Entries
    def list_entries(self, start_date: str, end_date: str) -> List[Dict[str, Any]]:
        return self._request("GET", "/entries", params={"startDate": start_date, "endDate": end_date})

    def get_entry(self, child_id: str, date: str) -> Dict[str, Any]:
        return self._request("GET", f"/entries/{child_id}/{date}")

    def save_entry(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/entries", json=entry)

    def update_entry(self, child_id: str, date: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/entries/{child_id}/{date}", json=updates)

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")
