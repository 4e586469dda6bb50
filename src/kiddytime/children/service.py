from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional, Sequence

from ..common.datetime_utils import utc_now_iso
from ..common.validators import optional_bool, require_non_empty, require_time, weekday_list
from ..core.constants import DEFAULT_EXPECTED_DAYS
from ..core.exceptions import NotFoundError, ValidationError
from ..entries.repository import EntryRepository
from .model import Child, DefaultTimeBlock
from .repository import ChildRepository

log = logging.getLogger(__name__)


def parse_default_segments(raw_blocks: Any, fallback_days: Sequence[int]) -> List[DefaultTimeBlock]:
    if not isinstance(raw_blocks, list):
        raise ValidationError("defaultSegments doit être une liste")
    blocks: List[DefaultTimeBlock] = []
    for i, raw in enumerate(raw_blocks, start=1):
        if not isinstance(raw, dict):
            raise ValidationError("defaultSegments contient un élément invalide")
        days = raw.get("days")
        blocks.append(
            DefaultTimeBlock(
                id=str(raw.get("id") or i),
                arrival_time=require_time(raw.get("arrivalTime"), "Heure d'arrivée"),
                leaving_time=require_time(raw.get("leavingTime"), "Heure de départ"),
                days=weekday_list(days, "days") if days is not None else list(fallback_days),
            )
        )
    return blocks


class ChildService:
    """Use case: manage children (list, create, edit, delete with cascade)."""

    def __init__(self, children: ChildRepository, entries: EntryRepository):
        self._children = children
        self._entries = entries

    def list_children(self) -> Sequence[Child]:
        return self._children.list_all()

    def get_child(self, child_id: str) -> Child:
        child = self._children.get_by_id(child_id)
        if not child:
            raise NotFoundError("Enfant non trouvé")
        return child

    def create_child(self, payload: Dict[str, Any]) -> Child:
        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Données manquantes")

        expected_days = (
            weekday_list(payload["expectedDays"], "expectedDays")
            if payload.get("expectedDays") is not None
            else list(DEFAULT_EXPECTED_DAYS)
        )

        if payload.get("defaultSegments"):
            blocks = parse_default_segments(payload["defaultSegments"], expected_days)
        elif payload.get("defaultArrivalTime") and payload.get("defaultLeavingTime"):
            blocks = [
                DefaultTimeBlock(
                    id="1",
                    arrival_time=require_time(payload["defaultArrivalTime"], "Heure d'arrivée"),
                    leaving_time=require_time(payload["defaultLeavingTime"], "Heure de départ"),
                    days=list(expected_days),
                )
            ]
        else:
            raise ValidationError("Données manquantes")

        child = Child(
            id=uuid.uuid4().hex,
            name=name.strip(),
            default_arrival_time=blocks[0].arrival_time,
            default_leaving_time=blocks[0].leaving_time,
            has_meal=_bool_or_default(payload, "hasMeal", True),
            has_snack=_bool_or_default(payload, "hasSnack", True),
            expected_days=expected_days,
            default_segments=blocks,
            absent_days=_string_list(payload.get("absentDays")),
            photo_url=payload.get("photoUrl") or None,
            created_at=utc_now_iso(),
        )
        self._children.create(child)
        return child

    def update_child(self, child_id: str, payload: Dict[str, Any]) -> Child:
        """Merge the given fields onto the stored child; absent fields are kept."""
        child = self.get_child(child_id)
        changes: Dict[str, Any] = {}

        if payload.get("name") is not None:
            changes["name"] = require_non_empty(payload["name"], "Nom")
        if payload.get("expectedDays") is not None:
            changes["expected_days"] = weekday_list(payload["expectedDays"], "expectedDays")
        for key, attr in (("hasMeal", "has_meal"), ("hasSnack", "has_snack")):
            value = optional_bool(payload.get(key), key)
            if value is not None:
                changes[attr] = value
        if "absentDays" in payload:
            changes["absent_days"] = _string_list(payload["absentDays"])
        if "photoUrl" in payload:
            changes["photo_url"] = payload["photoUrl"] or None

        expected_days = changes.get("expected_days", child.expected_days)
        if payload.get("defaultSegments"):
            blocks = parse_default_segments(payload["defaultSegments"], expected_days)
        elif payload.get("defaultArrivalTime") or payload.get("defaultLeavingTime"):
            first = child.default_segments[0] if child.default_segments else None
            arrival = payload.get("defaultArrivalTime") or child.default_arrival_time
            leaving = payload.get("defaultLeavingTime") or child.default_leaving_time
            head = DefaultTimeBlock(
                id=first.id if first else "1",
                arrival_time=require_time(arrival, "Heure d'arrivée"),
                leaving_time=require_time(leaving, "Heure de départ"),
                days=list(first.days) if first else list(expected_days),
            )
            blocks = [head, *child.default_segments[1:]]
        else:
            blocks = None

        if blocks is not None:
            changes["default_segments"] = blocks
            changes["default_arrival_time"] = blocks[0].arrival_time
            changes["default_leaving_time"] = blocks[0].leaving_time

        changes["updated_at"] = utc_now_iso()
        updated = child.with_updates(**changes)
        if not self._children.update(updated):
            raise NotFoundError("Enfant non trouvé")
        return updated

    def delete_child(self, child_id: str) -> int:
        """Delete the child and every entry recorded for it; returns the entry count removed."""
        self.get_child(child_id)
        self._children.delete(child_id)
        removed = self._entries.delete_by_child(child_id)
        log.info("Child %s deleted with %d entries", child_id, removed)
        return removed


def _bool_or_default(payload: Dict[str, Any], key: str, default: bool) -> bool:
    value: Optional[bool] = optional_bool(payload.get(key), key)
    return default if value is None else value


def _string_list(value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError("absentDays doit être une liste de textes")
    return list(value)
