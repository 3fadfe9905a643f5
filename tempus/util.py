"""Utility constants and helpers for tempus.

Time unit constants represent durations in seconds. Unit names double as
the ``unit`` field of every error, so they are defined once here and shared.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

MONTHS_PER_YEAR = 12

# Unit names
SECONDS = "seconds"
MINUTES = "minutes"
HOURS = "hours"
DAYS = "days"
WEEKS = "weeks"
MONTHS = "months"
YEARS = "years"

UNITS = (SECONDS, MINUTES, HOURS, DAYS, WEEKS, MONTHS, YEARS)

# Offset directions
PAST = "past"
FUTURE = "future"


def function_name(unit: str, direction: str) -> str:
    """Return the public function name for a unit and direction."""
    return _FUNCTION_NAMES[unit, direction]


_FUNCTION_NAMES = {
    (unit, direction): f"{unit}_{'ago' if direction == PAST else 'from_now'}"
    for unit in UNITS
    for direction in (PAST, FUTURE)
}
