"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ADMIN_USERNAME = "admin"
MIN_PASSWORD_LENGTH = 4


# Weekday indices follow the Sunday=0 convention.
DEFAULT_EXPECTED_DAYS = (1, 2, 3, 4, 5)
DEFAULT_ARRIVAL_TIME = "08:00"
DEFAULT_LEAVING_TIME = "17:00"

# Meal/snack windows in minutes since midnight, [start, end).
LUNCH_WINDOW = (11 * 60, 13 * 60)
SNACK_WINDOW = (15 * 60, 17 * 60)

USERS_FILE = "users.json"
CHILDREN_FILE = "children.json"
ENTRIES_FILE = "entries.json"

# Range used by clients that want "every" entry.
ALL_ENTRIES_START = "2020-01-01"
ALL_ENTRIES_END = "2099-12-31"
