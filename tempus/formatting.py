"""Fixed-format string rendering for dates and instants.

All formats are English and locale-independent.
"""

from datetime import date, datetime
from email.utils import format_datetime

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _require_aware(value: datetime, func: str) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise TypeError(
            f"{func}() requires a timezone-aware datetime.\n"
            f"Got naive datetime: {value!r}\n"
            f"Hint: use tempus.now() or attach tzinfo=timezone.utc"
        )


def to_date_string(value: date) -> str:
    """Format as ``YYYY-MM-DD``, e.g. ``"2026-02-22"``."""
    return value.isoformat()


def to_long_date(value: date) -> str:
    """Format as ``"February 22, 2026"``.

    Single-digit days are space padded (``"February  5, 2026"``).
    """
    return f"{_MONTH_NAMES[value.month - 1]} {value.day:>2}, {value.year}"


def to_iso8601(value: datetime) -> str:
    """Format as ISO 8601 with seconds precision, e.g. ``"2026-02-22T14:30:00+00:00"``."""
    _require_aware(value, "to_iso8601")
    return value.isoformat(timespec="seconds")


def to_rfc2822(value: datetime) -> str:
    """Format as RFC 2822, e.g. ``"Sun, 22 Feb 2026 14:30:00 +0000"``."""
    _require_aware(value, "to_rfc2822")
    return format_datetime(value)
