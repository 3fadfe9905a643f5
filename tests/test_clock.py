"""Tests for clock providers."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from tempus import Clock, FixedClock, SystemClock


def test_fixed_clock_is_frozen():
    instant = datetime(2024, 6, 15, 12, 30, tzinfo=timezone.utc)
    clock = FixedClock(instant)

    assert clock.now() == instant
    assert clock.now() == clock.now()
    assert clock.today() == date(2024, 6, 15)


def test_fixed_clock_today_uses_local_date():
    """Test today() is the date in the instant's own timezone."""
    clock = FixedClock(datetime(2024, 6, 15, 23, 30, tzinfo=ZoneInfo("US/Pacific")))

    assert clock.today() == date(2024, 6, 15)


def test_fixed_clock_rejects_naive_datetime():
    with pytest.raises(TypeError, match="timezone-aware"):
        FixedClock(datetime(2024, 6, 15))


def test_fixed_clock_rejects_date():
    with pytest.raises(TypeError, match="must be a datetime"):
        FixedClock(date(2024, 6, 15))  # type: ignore[arg-type]


def test_system_clock_local():
    before = datetime.now(timezone.utc)
    reading = SystemClock().now()
    after = datetime.now(timezone.utc)

    assert reading.tzinfo is not None
    assert before <= reading <= after


def test_system_clock_timezone():
    clock = SystemClock(tz="Asia/Tokyo")
    reading = clock.now()

    assert reading.tzinfo == ZoneInfo("Asia/Tokyo")
    assert isinstance(clock.today(), date)
    assert repr(clock) == "SystemClock(tz='Asia/Tokyo')"


def test_system_clock_unknown_timezone():
    with pytest.raises(ZoneInfoNotFoundError):
        SystemClock(tz="Not/AZone")


def test_custom_clock():
    """Test that any Clock subclass can drive today()."""

    class Midnight(Clock):
        def now(self) -> datetime:
            return datetime(2000, 1, 1, tzinfo=timezone.utc)

    assert Midnight().today() == date(2000, 1, 1)
