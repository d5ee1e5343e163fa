"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60
MAX_HOURS_PER_DAY = 24

DEFAULT_GRACE_MINUTES = 10
DEFAULT_LATE_THRESHOLD_MINUTES = 15
DEFAULT_EARLY_DEPARTURE_THRESHOLD_MINUTES = 15
DEFAULT_FULL_DAY_HOURS = 8.0
DEFAULT_HALF_DAY_HOURS = 4.0
DEFAULT_BREAK_MINUTES = 60
DEFAULT_MAX_BREAK_MINUTES = 120
DEFAULT_OVERTIME_THRESHOLD_MINUTES = 30
DEFAULT_WEEKLY_OFF_DAYS = frozenset({0, 6})

MAX_GRACE_MINUTES = 120
MAX_LATE_THRESHOLD_MINUTES = 240

# Clock-in before this hour marks a half day as the first half.
HALF_DAY_NOON_HOUR = 12
