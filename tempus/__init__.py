from importlib.resources import files

from .clock import Clock, FixedClock, SystemClock
from .errors import NegativeValueError, OffsetOverflowError, TempusError
from .formatting import to_date_string, to_iso8601, to_long_date, to_rfc2822
from .relative import (
    Offset,
    days_ago,
    days_ago_datetime,
    days_from_now,
    days_from_now_datetime,
    hours_ago,
    hours_from_now,
    minutes_ago,
    minutes_from_now,
    months_ago,
    months_ago_datetime,
    months_from_now,
    months_from_now_datetime,
    now,
    seconds_ago,
    seconds_from_now,
    today,
    tomorrow,
    weeks_ago,
    weeks_ago_datetime,
    weeks_from_now,
    weeks_from_now_datetime,
    years_ago,
    years_ago_datetime,
    years_from_now,
    years_from_now_datetime,
    yesterday,
)

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "TempusError",
    "NegativeValueError",
    "OffsetOverflowError",
    "Offset",
    "now",
    "today",
    "yesterday",
    "tomorrow",
    "seconds_ago",
    "seconds_from_now",
    "minutes_ago",
    "minutes_from_now",
    "hours_ago",
    "hours_from_now",
    "days_ago",
    "days_from_now",
    "days_ago_datetime",
    "days_from_now_datetime",
    "weeks_ago",
    "weeks_from_now",
    "weeks_ago_datetime",
    "weeks_from_now_datetime",
    "months_ago",
    "months_from_now",
    "months_ago_datetime",
    "months_from_now_datetime",
    "years_ago",
    "years_from_now",
    "years_ago_datetime",
    "years_from_now_datetime",
    "to_date_string",
    "to_long_date",
    "to_iso8601",
    "to_rfc2822",
    "docs",
]
