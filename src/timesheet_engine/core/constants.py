"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import DayName

# Canonical week order; timesheet days are always keyed by these names.
DAY_ORDER = tuple(day.value for day in DayName)
WEEKEND_DAYS = frozenset({DayName.SATURDAY.value, DayName.SUNDAY.value})

MINUTES_PER_DAY = 24 * 60

REGULAR_HOURS_PER_DAY = 8
DOUBLE_TIME_AFTER_HOURS = 12
SEVENTH_DAY_OVERTIME_HOURS = 8
SEVENTH_CONSECUTIVE_DAY = 7

# Rest breaks up to this many minutes are paid time.
PAID_BREAK_MAX_MINUTES = 10

MEAL_BREAK_REQUIRED_AFTER_MINUTES = 5 * 60
LONG_SHIFT_MINUTES = 10 * 60
LONG_SHIFT_MIN_MEAL_MINUTES = 30
AM_BREAK_REQUIRED_FROM_MINUTES = 210
PM_BREAK_REQUIRED_FROM_MINUTES = 6 * 60

DEFAULT_TIME_IN = "08:00"
DEFAULT_MEAL_BREAK_START = "12:00"
DEFAULT_MEAL_BREAK_END = "12:30"
DEFAULT_TIME_OUT = "16:30"
DEFAULT_AM_BREAK_START = "10:00"
DEFAULT_AM_BREAK_END = "10:10"
DEFAULT_PM_BREAK_START = "15:00"
DEFAULT_PM_BREAK_END = "15:10"
