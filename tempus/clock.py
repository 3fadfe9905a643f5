"""Clock providers.

A clock is the only source of "now" for the relative time functions. The
system clock reads the wall clock on every call; the fixed clock freezes a
single instant so results are reproducible.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from zoneinfo import ZoneInfo

from typing_extensions import override


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        pass

    def today(self) -> date:
        """Return the calendar date of the current instant."""
        return self.now().date()


class SystemClock(Clock):
    """Wall clock, optionally pinned to an IANA timezone.

    Args:
        tz: IANA timezone name (e.g. "UTC", "US/Pacific"). None uses the
            machine's local timezone.
    """

    def __init__(self, tz: str | None = None):
        self.tz: str | None = tz
        self.zone: ZoneInfo | None = ZoneInfo(tz) if tz is not None else None

    @override
    def now(self) -> datetime:
        if self.zone is None:
            return datetime.now().astimezone()
        return datetime.now(tz=self.zone)

    @override
    def __repr__(self) -> str:
        return f"SystemClock(tz={self.tz!r})"


class FixedClock(Clock):
    """Clock frozen at a single timezone-aware instant."""

    def __init__(self, instant: datetime):
        if not isinstance(instant, datetime):
            raise TypeError(
                f"FixedClock instant must be a datetime.\n"
                f"Got {type(instant).__name__!r}: {instant!r}\n"
                f"Hint: Use a timezone-aware datetime:\n"
                f"  FixedClock(datetime(2024, 6, 15, tzinfo=timezone.utc))"
            )
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise TypeError(
                f"FixedClock instant must be a timezone-aware datetime.\n"
                f"Got naive datetime: {instant!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc.\n"
                f"  # Or use timezone.utc for UTC:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        self.instant: datetime = instant

    @override
    def now(self) -> datetime:
        return self.instant

    @override
    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"
