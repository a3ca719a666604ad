"""Tests for the WallTime class."""

from __future__ import annotations

import datetime

import pytest

from civilclock import InvalidTime, ValidationError, WallTime
from civilclock.clock import FixedClock


class TestTimeConstruction:
    """Tests for WallTime construction."""

    def test_basic(self) -> None:
        t = WallTime(14, 30, 45, 123_456_789)
        assert t.hour == 14
        assert t.minute == 30
        assert t.second == 45
        assert t.nanosecond == 123_456_789

    def test_default_is_midnight(self) -> None:
        assert WallTime() == WallTime.midnight()
        assert WallTime().is_midnight is True

    def test_hour_out_of_range(self) -> None:
        with pytest.raises(InvalidTime, match="hour must be between 0 and 23, got 24"):
            WallTime(24, 0, 0)
        with pytest.raises(InvalidTime):
            WallTime(-1, 0, 0)

    def test_minute_and_second_out_of_range(self) -> None:
        with pytest.raises(InvalidTime, match="minute"):
            WallTime(0, 60, 0)
        with pytest.raises(InvalidTime, match="second"):
            WallTime(0, 0, 60)

    def test_nanosecond_out_of_range(self) -> None:
        with pytest.raises(InvalidTime, match="nanosecond"):
            WallTime(0, 0, 0, 1_000_000_000)

    def test_invalid_time_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            WallTime(25, 0, 0)

    def test_from_nanoseconds(self) -> None:
        assert WallTime.from_nanoseconds(3_600_000_000_000) == WallTime(1, 0, 0)
        with pytest.raises(InvalidTime):
            WallTime.from_nanoseconds(-1)
        with pytest.raises(InvalidTime):
            WallTime.from_nanoseconds(86_400 * 1_000_000_000)

    def test_from_seconds_wraps(self) -> None:
        assert WallTime.from_seconds(90_000) == WallTime(1, 0, 0)
        assert WallTime.from_seconds(-1) == WallTime(23, 59, 59)

    def test_from_milliseconds_wraps(self) -> None:
        assert WallTime.from_milliseconds(1_500) == WallTime(0, 0, 1, 500_000_000)
        assert WallTime.from_milliseconds(-1) == WallTime(23, 59, 59, 999_000_000)

    def test_now_reads_clock(self) -> None:
        clock = FixedClock(datetime.datetime(2024, 1, 1, 9, 15, 30, 250000))
        assert WallTime.now(clock=clock) == WallTime(9, 15, 30, 250_000_000)

    def test_noon(self) -> None:
        assert WallTime.noon() == WallTime(12, 0, 0)
        assert WallTime.noon().is_noon is True


class TestTimeProperties:
    """Tests for derived WallTime properties."""

    def test_sub_second_views(self) -> None:
        t = WallTime(12, 30, 45, 123_456_789)
        assert t.millisecond == 123
        assert t.microsecond == 123_456

    def test_totals(self) -> None:
        t = WallTime(1, 1, 1, 1_000_000)
        assert t.total_seconds == 3661
        assert t.total_milliseconds == 3_661_001
        assert t.total_microseconds == 3_661_001_000
        assert t.total_nanoseconds == 3_661_001_000_000

    def test_hour12(self) -> None:
        assert WallTime(0, 15).hour12 == 12
        assert WallTime(11, 0).hour12 == 11
        assert WallTime(12, 0).hour12 == 12
        assert WallTime(13, 0).hour12 == 1
        assert WallTime(23, 0).hour12 == 11

    def test_am_pm(self) -> None:
        assert WallTime(11, 59, 59).is_am is True
        assert WallTime(12, 0).is_pm is True
        assert WallTime(12, 0).is_am is False

    def test_midnight_is_truthy(self) -> None:
        assert bool(WallTime.midnight()) is True


class TestTimeArithmetic:
    """Tests for wrapping WallTime arithmetic."""

    def test_add_hours_wraps(self) -> None:
        assert WallTime(23, 0, 0).add_hours(2) == WallTime(1, 0, 0)

    def test_add_minutes_negative_wraps(self) -> None:
        assert WallTime(0, 30, 0).add_minutes(-45) == WallTime(23, 45, 0)

    def test_add_seconds_keeps_sub_second(self) -> None:
        assert WallTime(23, 59, 59, 500).add_seconds(2) == WallTime(0, 0, 1, 500)

    def test_add_full_days_is_identity(self) -> None:
        t = WallTime(8, 20, 0, 7)
        assert t.add_hours(24) == t
        assert t.add_seconds(-86_400 * 3) == t

    def test_add_nanoseconds(self) -> None:
        assert WallTime(0, 0, 0).add_nanoseconds(-1) == WallTime(23, 59, 59, 999_999_999)
        assert WallTime(0, 0, 0, 999_999_999).add_nanoseconds(1) == WallTime(0, 0, 1)

    def test_add_milliseconds(self) -> None:
        assert WallTime(23, 59, 59, 999_000_000).add_milliseconds(1) == WallTime.midnight()


class TestTimeComparison:
    """Tests for WallTime ordering."""

    def test_ordering(self) -> None:
        assert WallTime(9, 0) < WallTime(10, 0)
        assert WallTime(10, 0, 0, 1) > WallTime(10, 0)
        assert WallTime(10, 0) <= WallTime(10, 0)

    def test_compare(self) -> None:
        assert WallTime(1, 0).compare(WallTime(2, 0)) == -1
        assert WallTime(2, 0).compare(WallTime(1, 0)) == 1
        assert WallTime(2, 0).compare(WallTime(2, 0)) == 0

    def test_hash(self) -> None:
        assert hash(WallTime(3, 4, 5)) == hash(WallTime(3, 4, 5))

    def test_foreign_types(self) -> None:
        assert WallTime(1, 0) != datetime.time(1, 0)


class TestTimeRendering:
    """Tests for WallTime string forms."""

    def test_repr(self) -> None:
        assert repr(WallTime(1, 0, 0)) == "WallTime(1, 0, 0, 0)"

    def test_str(self) -> None:
        assert str(WallTime(9, 5, 7, 42)) == "09:05:07"

    def test_format(self) -> None:
        assert WallTime(9, 5, 7, 42_000_000).format("%H:%M:%S.%f") == "09:05:07.042"
