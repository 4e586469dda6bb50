from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} requis")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} doit contenir au moins {min_len} caractères")
    return value


def optional_time(value: Any, field_name: str) -> Optional[str]:
    """Accept "HH:mm" or an empty value (returned as None)."""
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not _TIME_RE.match(value):
        raise ValidationError(f"{field_name} invalide (format HH:mm attendu)")
    return value


def require_time(value: Any, field_name: str) -> str:
    out = optional_time(value, field_name)
    if out is None:
        raise ValidationError(f"{field_name} requis")
    return out


def require_iso_date(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationError(f"{field_name} invalide (format YYYY-MM-DD attendu)")
    return value


def optional_bool(value: Any, field_name: str) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    raise ValidationError(f"{field_name} doit être vrai, faux ou nul")


def weekday_list(values: Any, field_name: str) -> list[int]:
    if not isinstance(values, (list, tuple)):
        raise ValidationError(f"{field_name} doit être une liste de jours")
    days: set[int] = set()
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 6:
            raise ValidationError(f"{field_name} contient un jour invalide: {v!r}")
        days.add(v)
    return sorted(days)
