"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

# Reads closer than this to the previous kept read are the same badge event.
DEDUP_GAP_MINUTES = 15

MIN_SESSION_HOURS = 0.1
MAX_SESSION_HOURS = 24.0

# A day counts as "Completo" above this share of the scheduled shift length.
COMPLETE_SHIFT_RATIO = 0.6
MIN_WORKED_HOURS = 1.0

OVERTIME_NOISE_MINUTES = 5
MAX_LATE_MINUTES = 12 * 60

HOURS_DECIMALS = 2

# Weekday numbers follow the shift tables: 0 = Sunday ... 6 = Saturday.
DEFAULT_WORKDAYS = frozenset({1, 2, 3, 4, 5})

DEFAULT_SHIFT_NAME = "Turno Matutino"
DEFAULT_SHIFT_START = time(6, 0)
DEFAULT_SHIFT_END = time(15, 30)
DEFAULT_TOLERANCE_MINUTES = 15

# Shift names that mark a role-specific schedule (office staff, drivers).
SPECIFIC_SHIFT_KEYWORDS = ("oficina", "chofer", "office", "driver")

MAX_REPORT_DAYS = 90
MAX_DAILY_REPORT_DAYS = 31
DEFAULT_WEEK_DAYS = 5

EXCESSIVE_DAILY_HOURS = 16.0
