"""Points in time relative to now.

Every ``<unit>_ago`` / ``<unit>_from_now`` function follows the same steps:

1. validate the magnitude (an ``int``, never negative)
2. read the clock
3. apply the signed offset with range checking
4. return the shifted ``datetime`` (seconds, minutes, hours) or ``date``
   (days, weeks, months, years)

Negative magnitudes raise :class:`~tempus.errors.NegativeValueError` naming
the paired function. Results outside ``datetime.MINYEAR``..``MAXYEAR`` raise
:class:`~tempus.errors.OffsetOverflowError`; nothing wraps around.

Months and years use calendar arithmetic from ``dateutil.relativedelta``:
when the day of month does not exist in the target month it is clamped to
the month's last day (Jan 31 + 1 month = Feb 28/29).

All functions accept a keyword-only ``clock``; without one a fresh
:class:`~tempus.clock.SystemClock` in local time is used.

Example:
    >>> from datetime import datetime, timezone
    >>> from tempus import FixedClock, days_ago
    >>> clock = FixedClock(datetime(2024, 6, 15, tzinfo=timezone.utc))
    >>> days_ago(3, clock=clock)
    datetime.date(2024, 6, 12)
"""

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from typing import TypeVar

from dateutil.relativedelta import relativedelta

from tempus.clock import Clock, SystemClock
from tempus.errors import NegativeValueError, OffsetOverflowError
from tempus.util import (
    DAY,
    DAYS,
    FUTURE,
    HOUR,
    HOURS,
    MINUTE,
    MINUTES,
    MONTHS,
    MONTHS_PER_YEAR,
    PAST,
    SECOND,
    SECONDS,
    WEEK,
    WEEKS,
    YEARS,
    function_name,
)

Point = TypeVar("Point", date, datetime)

# Units applied as fixed durations
_SCALES = {
    SECONDS: SECOND,
    MINUTES: MINUTE,
    HOURS: HOUR,
    DAYS: DAY,
    WEEKS: WEEK,
}

# Units applied as calendar months
_MONTH_SCALES = {
    MONTHS: 1,
    YEARS: MONTHS_PER_YEAR,
}


@dataclass(frozen=True, kw_only=True)
class Offset:
    """A validated displacement from now: ``value`` units toward ``direction``."""

    value: int
    unit: str
    direction: str

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Offset value must be >= 0, got {self.value}")

    @property
    def signed(self) -> int:
        """Value with the direction applied (negative for the past)."""
        return -self.value if self.direction == PAST else self.value


def _offset(value: int, unit: str, direction: str) -> Offset:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{function_name(unit, direction)}() expects an int.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    if value < 0:
        opposite = FUTURE if direction == PAST else PAST
        raise NegativeValueError(unit, function_name(unit, opposite), -value)
    return Offset(value=value, unit=unit, direction=direction)


def _shift(point: Point, offset: Offset) -> Point:
    """Apply ``offset`` to ``point``, raising OffsetOverflowError when out of range."""
    if offset.value == 0:
        return point

    if offset.unit in _MONTH_SCALES:
        months = offset.signed * _MONTH_SCALES[offset.unit]
        # Target year must stay within MINYEAR..MAXYEAR
        year = (point.year * MONTHS_PER_YEAR + point.month - 1 + months) // MONTHS_PER_YEAR
        if not MINYEAR <= year <= MAXYEAR:
            raise OffsetOverflowError(offset.unit, offset.signed)
        return point + relativedelta(months=months)

    try:
        return point + timedelta(seconds=offset.signed * _SCALES[offset.unit])
    except OverflowError as exc:
        raise OffsetOverflowError(offset.unit, offset.signed) from exc


def _clock(clock: Clock | None) -> Clock:
    return clock if clock is not None else SystemClock()


def now(*, clock: Clock | None = None) -> datetime:
    """Return the current instant."""
    return _clock(clock).now()


def today(*, clock: Clock | None = None) -> date:
    """Return the current calendar date."""
    return _clock(clock).today()


def yesterday(*, clock: Clock | None = None) -> date:
    """Return the date before today.

    Raises:
        OffsetOverflowError: If the clock reads ``date.min``
    """
    return days_ago(1, clock=clock)


def tomorrow(*, clock: Clock | None = None) -> date:
    """Return the date after today.

    Raises:
        OffsetOverflowError: If the clock reads ``date.max``
    """
    return days_from_now(1, clock=clock)


def seconds_ago(seconds: int, *, clock: Clock | None = None) -> datetime:
    """Return the instant ``seconds`` seconds before now.

    Raises:
        NegativeValueError: If ``seconds`` is negative
        OffsetOverflowError: If the result precedes ``datetime.min``
    """
    offset = _offset(seconds, SECONDS, PAST)
    return _shift(_clock(clock).now(), offset)


def seconds_from_now(seconds: int, *, clock: Clock | None = None) -> datetime:
    """Return the instant ``seconds`` seconds after now.

    Raises:
        NegativeValueError: If ``seconds`` is negative
        OffsetOverflowError: If the result is past ``datetime.max``
    """
    offset = _offset(seconds, SECONDS, FUTURE)
    return _shift(_clock(clock).now(), offset)


def minutes_ago(minutes: int, *, clock: Clock | None = None) -> datetime:
    """Return the instant ``minutes`` minutes before now."""
    offset = _offset(minutes, MINUTES, PAST)
    return _shift(_clock(clock).now(), offset)


def minutes_from_now(minutes: int, *, clock: Clock | None = None) -> datetime:
    """Return the instant ``minutes`` minutes after now."""
    offset = _offset(minutes, MINUTES, FUTURE)
    return _shift(_clock(clock).now(), offset)


def hours_ago(hours: int, *, clock: Clock | None = None) -> datetime:
    """Return the instant ``hours`` hours before now.

    Hours are fixed 3600 second steps on the wall clock of the instant's
    timezone; DST transitions are not compensated for.
    """
    offset = _offset(hours, HOURS, PAST)
    return _shift(_clock(clock).now(), offset)


def hours_from_now(hours: int, *, clock: Clock | None = None) -> datetime:
    """Return the instant ``hours`` hours after now."""
    offset = _offset(hours, HOURS, FUTURE)
    return _shift(_clock(clock).now(), offset)


def days_ago(days: int, *, clock: Clock | None = None) -> date:
    """Return the date ``days`` days before today.

    Args:
        days: Number of days, >= 0
        clock: Clock to read today from (default: local system clock)

    Raises:
        NegativeValueError: If ``days`` is negative; suggests ``days_from_now``
        OffsetOverflowError: If the result precedes ``date.min``

    Example:
        >>> days_ago(3, clock=FixedClock(datetime(2024, 6, 15, tzinfo=timezone.utc)))
        datetime.date(2024, 6, 12)
    """
    offset = _offset(days, DAYS, PAST)
    return _shift(_clock(clock).today(), offset)


def days_from_now(days: int, *, clock: Clock | None = None) -> date:
    """Return the date ``days`` days after today."""
    offset = _offset(days, DAYS, FUTURE)
    return _shift(_clock(clock).today(), offset)


def days_ago_datetime(days: int, *, clock: Clock | None = None) -> datetime:
    """Like :func:`days_ago` but keeps the current time of day."""
    offset = _offset(days, DAYS, PAST)
    return _shift(_clock(clock).now(), offset)


def days_from_now_datetime(days: int, *, clock: Clock | None = None) -> datetime:
    """Like :func:`days_from_now` but keeps the current time of day."""
    offset = _offset(days, DAYS, FUTURE)
    return _shift(_clock(clock).now(), offset)


def weeks_ago(weeks: int, *, clock: Clock | None = None) -> date:
    """Return the date ``weeks`` weeks (7 days each) before today."""
    offset = _offset(weeks, WEEKS, PAST)
    return _shift(_clock(clock).today(), offset)


def weeks_from_now(weeks: int, *, clock: Clock | None = None) -> date:
    """Return the date ``weeks`` weeks (7 days each) after today."""
    offset = _offset(weeks, WEEKS, FUTURE)
    return _shift(_clock(clock).today(), offset)


def weeks_ago_datetime(weeks: int, *, clock: Clock | None = None) -> datetime:
    offset = _offset(weeks, WEEKS, PAST)
    return _shift(_clock(clock).now(), offset)


def weeks_from_now_datetime(weeks: int, *, clock: Clock | None = None) -> datetime:
    offset = _offset(weeks, WEEKS, FUTURE)
    return _shift(_clock(clock).now(), offset)


def months_ago(months: int, *, clock: Clock | None = None) -> date:
    """Return the date ``months`` calendar months before today.

    The day of month is clamped to the target month's length, so
    ``months_ago(1)`` on March 31 gives the last day of February.
    """
    offset = _offset(months, MONTHS, PAST)
    return _shift(_clock(clock).today(), offset)


def months_from_now(months: int, *, clock: Clock | None = None) -> date:
    """Return the date ``months`` calendar months after today (day clamped)."""
    offset = _offset(months, MONTHS, FUTURE)
    return _shift(_clock(clock).today(), offset)


def months_ago_datetime(months: int, *, clock: Clock | None = None) -> datetime:
    offset = _offset(months, MONTHS, PAST)
    return _shift(_clock(clock).now(), offset)


def months_from_now_datetime(months: int, *, clock: Clock | None = None) -> datetime:
    offset = _offset(months, MONTHS, FUTURE)
    return _shift(_clock(clock).now(), offset)


def years_ago(years: int, *, clock: Clock | None = None) -> date:
    """Return the date ``years`` years before today.

    February 29 maps to February 28 in non-leap target years.
    """
    offset = _offset(years, YEARS, PAST)
    return _shift(_clock(clock).today(), offset)


def years_from_now(years: int, *, clock: Clock | None = None) -> date:
    """Return the date ``years`` years after today (Feb 29 clamped)."""
    offset = _offset(years, YEARS, FUTURE)
    return _shift(_clock(clock).today(), offset)


def years_ago_datetime(years: int, *, clock: Clock | None = None) -> datetime:
    offset = _offset(years, YEARS, PAST)
    return _shift(_clock(clock).now(), offset)


def years_from_now_datetime(years: int, *, clock: Clock | None = None) -> datetime:
    offset = _offset(years, YEARS, FUTURE)
    return _shift(_clock(clock).now(), offset)
