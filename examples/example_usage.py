"""Example: use the service layer without Flask.

Prints who is expected today and what each child's day looks like.
"""

import importlib
from datetime import date

from kiddytime.agenda.presence import classify_day
from kiddytime.common.datetime_utils import format_iso_date
from kiddytime.config import get_settings_module
from kiddytime.container import build_container
from kiddytime.entries.derived import effective_meal, entry_duration, entry_status


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_dir=settings.DATA_DIR)

    today = date.today()
    day_s = format_iso_date(today)
    children = container.child_service.list_children()
    entries = container.entry_service.list_for_range(day_s, day_s)
    by_child = {e.child_id: e for e in entries}

    presence = classify_day(children, entries, today)
    for child in presence.expected + presence.unexpected:
        entry = by_child.get(child.id)
        duration = entry_duration(entry) if entry else None
        print(
            f"{child.name}: {entry_status(entry).value}"
            f" | durée={duration or '-'} | repas={'oui' if effective_meal(entry, child) else 'non'}"
        )


if __name__ == "__main__":
    main()
