from __future__ import annotations

from enum import Enum


class AbsenceReason(str, Enum):
    """Raisons d'absence proposées; tout autre texte libre reste accepté."""

    SICK = "Malade"
    HOLIDAY = "Vacances"
    OTHER = "Autre"


class EntryStatus(str, Enum):
    """Statut d'une journée tel qu'affiché et exporté."""

    ABSENT = "Absent"
    LEFT = "Parti"
    PRESENT = "Présent"
    NOT_FILLED = "Non renseigné"


class ViewMode(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
