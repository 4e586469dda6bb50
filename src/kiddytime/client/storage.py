from __future__ import annotations

import logging
from typing import List, Optional

from ..children.model import Child
from ..core.constants import ALL_ENTRIES_END, ALL_ENTRIES_START
from ..entries.model import TimeEntry
from .api import ApiClient, ApiError

log = logging.getLogger(__name__)


class StorageService:
    """Facade used by the views.

    Reads fall back to an empty/false answer when the API fails, so a view
    can always render; writes let `ApiError` propagate to the caller.
    """

    def __init__(self, api: ApiClient):
        self._api = api

    # Password management
    def set_password(self, password: str) -> None:
        self._api.setup(password)

    def verify_password(self, password: str) -> bool:
        try:
            self._api.login(password)
            return True
        except ApiError:
            return False

    def has_password(self) -> bool:
        try:
            return bool(self._api.has_password().get("hasPassword"))
        except ApiError as e:
            log.error("Error checking password: %s", e)
            return False

    def check_auth(self) -> bool:
        try:
            return bool(self._api.check().get("isAuthenticated"))
        except ApiError as e:
            log.error("Error checking auth: %s", e)
            return False

    def logout(self) -> None:
        self._api.logout()

    # Children management
    def get_children(self) -> List[Child]:
        try:
            return [Child.from_dict(raw) for raw in self._api.list_children()]
        except ApiError as e:
            log.error("Error getting children: %s", e)
            return []

    def add_child(self, child: Child) -> Child:
        return Child.from_dict(self._api.create_child(child.to_dict()))

    def update_child(self, child: Child) -> Child:
        return Child.from_dict(self._api.update_child(child.id, child.to_dict()))

    def delete_child(self, child_id: str) -> None:
        self._api.delete_child(child_id)

    # Time entries management
    def get_time_entries(self) -> List[TimeEntry]:
        return self.get_entries_for_date_range(ALL_ENTRIES_START, ALL_ENTRIES_END)

    def get_time_entry(self, child_id: str, date: str) -> Optional[TimeEntry]:
        try:
            return TimeEntry.from_dict(self._api.get_entry(child_id, date))
        except ApiError:
            # 404 is expected when nobody touched that day yet
            return None

    def save_time_entry(self, entry: TimeEntry) -> TimeEntry:
        return TimeEntry.from_dict(self._api.save_entry(entry.to_dict()))

    def get_entries_for_date_range(self, start_date: str, end_date: str) -> List[TimeEntry]:
        try:
            return [TimeEntry.from_dict(raw) for raw in self._api.list_entries(start_date, end_date)]
        except ApiError as e:
            log.error("Error getting entries for date range: %s", e)
            return []
