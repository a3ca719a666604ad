"""Tests for the CivilDate class."""

from __future__ import annotations

import datetime
import logging

import pytest

from civilclock import AdjustOutcome, CivilDate, InvalidDate, ValidationError
from civilclock.clock import FixedClock


class TestDateConstruction:
    """Tests for CivilDate construction."""

    def test_basic(self) -> None:
        d = CivilDate(2024, 1, 15)
        assert d.year == 2024
        assert d.month == 1
        assert d.day == 15

    def test_default_is_first_supported_day(self) -> None:
        assert CivilDate() == CivilDate(1, 1, 1)

    def test_leap_day(self) -> None:
        assert CivilDate(2024, 2, 29).day == 29
        assert CivilDate(2000, 2, 29).day == 29

    def test_leap_day_in_common_year(self) -> None:
        with pytest.raises(InvalidDate, match="day must be between 1 and 28"):
            CivilDate(2023, 2, 29)

    def test_century_not_leap(self) -> None:
        with pytest.raises(InvalidDate):
            CivilDate(1900, 2, 29)

    def test_year_bounds(self) -> None:
        assert CivilDate(1, 1, 1).year == 1
        assert CivilDate(9999, 12, 31).year == 9999
        with pytest.raises(InvalidDate, match="year must be between 1 and 9999"):
            CivilDate(0, 1, 1)
        with pytest.raises(InvalidDate, match="got 10000"):
            CivilDate(10000, 1, 1)

    def test_invalid_month(self) -> None:
        with pytest.raises(InvalidDate, match="month must be between 1 and 12"):
            CivilDate(2024, 13, 1)
        with pytest.raises(InvalidDate):
            CivilDate(2024, 0, 1)

    def test_invalid_day(self) -> None:
        with pytest.raises(InvalidDate):
            CivilDate(2024, 4, 31)
        with pytest.raises(InvalidDate):
            CivilDate(2024, 1, 0)

    def test_invalid_date_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            CivilDate(2024, 2, 30)

    def test_today_reads_clock(self) -> None:
        clock = FixedClock(datetime.datetime(2024, 12, 25, 8, 0))
        assert CivilDate.today(clock=clock) == CivilDate(2024, 12, 25)

    def test_today_uses_default_clock(self, fixed_clock: FixedClock) -> None:
        assert CivilDate.today() == CivilDate(2024, 7, 4)


class TestFromDayOfYear:
    """Tests for CivilDate.from_day_of_year."""

    def test_leap_year(self) -> None:
        assert CivilDate.from_day_of_year(2024, 60) == CivilDate(2024, 2, 29)
        assert CivilDate.from_day_of_year(2024, 366) == CivilDate(2024, 12, 31)

    def test_common_year(self) -> None:
        assert CivilDate.from_day_of_year(2023, 60) == CivilDate(2023, 3, 1)
        assert CivilDate.from_day_of_year(2023, 1) == CivilDate(2023, 1, 1)

    def test_out_of_range_ordinal(self) -> None:
        with pytest.raises(InvalidDate, match="day of year must be between 1 and 365"):
            CivilDate.from_day_of_year(2023, 366)
        with pytest.raises(InvalidDate):
            CivilDate.from_day_of_year(2024, 0)

    def test_out_of_range_year(self) -> None:
        with pytest.raises(InvalidDate):
            CivilDate.from_day_of_year(0, 1)

    def test_round_trip_every_day(self) -> None:
        for year in (1, 1900, 2000, 2023, 2024, 9999):
            total = 366 if CivilDate(year, 1, 1).is_leap_year else 365
            for doy in range(1, total + 1):
                d = CivilDate.from_day_of_year(year, doy)
                assert d.day_of_year == doy
                assert CivilDate(d.year, d.month, d.day) == d


class TestDateProperties:
    """Tests for derived CivilDate properties."""

    def test_day_of_week(self) -> None:
        assert CivilDate(2024, 12, 25).day_of_week == 2
        assert CivilDate(2024, 1, 15).day_of_week == 0

    def test_weekend(self) -> None:
        assert CivilDate(2024, 1, 20).is_weekend is True  # Saturday
        assert CivilDate(2024, 1, 21).is_weekend is True  # Sunday
        assert CivilDate(2024, 1, 19).is_weekend is False
        assert CivilDate(2024, 1, 19).is_weekday is True

    def test_quarter(self) -> None:
        assert CivilDate(2024, 1, 1).quarter == 1
        assert CivilDate(2024, 3, 31).quarter == 1
        assert CivilDate(2024, 4, 1).quarter == 2
        assert CivilDate(2024, 9, 30).quarter == 3
        assert CivilDate(2024, 12, 31).quarter == 4

    def test_week_number_year_boundaries(self) -> None:
        assert CivilDate(2024, 12, 30).week_number == 1
        assert CivilDate(2021, 1, 3).week_number == 53
        assert CivilDate(2020, 12, 31).week_number == 53

    def test_week_number_at_range_edges(self) -> None:
        assert CivilDate(1, 1, 1).week_number == 1
        assert CivilDate(9999, 12, 31).week_number == 52

    def test_day_of_year(self) -> None:
        assert CivilDate(2024, 12, 25).day_of_year == 360
        assert CivilDate(2024, 3, 1).day_of_year == 61

    def test_month_and_year_edges(self) -> None:
        d = CivilDate(2024, 2, 10)
        assert d.first_day_of_month() == CivilDate(2024, 2, 1)
        assert d.last_day_of_month() == CivilDate(2024, 2, 29)
        assert d.first_day_of_year() == CivilDate(2024, 1, 1)
        assert d.last_day_of_year() == CivilDate(2024, 12, 31)

    def test_replace(self) -> None:
        assert CivilDate(2024, 1, 31).replace(month=3) == CivilDate(2024, 3, 31)
        with pytest.raises(InvalidDate):
            CivilDate(2024, 1, 31).replace(month=2)


class TestAddDays:
    """Tests for CivilDate.add_days."""

    def test_into_leap_day(self) -> None:
        assert CivilDate(2024, 2, 28).add_days(1) == CivilDate(2024, 2, 29)

    def test_across_february_in_common_year(self) -> None:
        assert CivilDate(2023, 2, 28).add_days(1) == CivilDate(2023, 3, 1)

    def test_across_year(self) -> None:
        assert CivilDate(2024, 12, 31).add_days(1) == CivilDate(2025, 1, 1)
        assert CivilDate(2025, 1, 1).add_days(-1) == CivilDate(2024, 12, 31)

    def test_zero(self) -> None:
        d = CivilDate(2024, 6, 15)
        assert d.add_days(0) == d

    def test_large_offset(self) -> None:
        assert CivilDate(1, 1, 1).add_days(3652058) == CivilDate(9999, 12, 31)
        assert CivilDate(9999, 12, 31).add_days(-3652058) == CivilDate(1, 1, 1)

    def test_inverse(self) -> None:
        start = CivilDate(2024, 3, 15)
        for n in (1, 17, 59, 365, 366, 1461, 146097, -1, -400, -700000):
            assert start.add_days(n).add_days(-n) == start

    def test_matches_stdlib(self) -> None:
        start = CivilDate(1999, 12, 31)
        base = datetime.date(1999, 12, 31)
        for n in range(-800, 800, 7):
            d = start.add_days(n)
            expected = base + datetime.timedelta(days=n)
            assert (d.year, d.month, d.day) == (expected.year, expected.month, expected.day)

    def test_past_upper_bound_is_no_op(self) -> None:
        d = CivilDate(9999, 12, 31)
        assert d.add_days(1) == d

    def test_past_lower_bound_is_no_op(self) -> None:
        d = CivilDate(1, 1, 1)
        assert d.add_days(-1) == d
        assert CivilDate(1, 1, 10).add_days(-100) == CivilDate(1, 1, 10)

    def test_checked_reports_rejection(self) -> None:
        d = CivilDate(9999, 12, 31)
        result, outcome = d.checked_add_days(1)
        assert result == d
        assert outcome is AdjustOutcome.REJECTED_OUT_OF_RANGE
        assert outcome.changed_value is False

    def test_checked_reports_applied(self) -> None:
        result, outcome = CivilDate(2024, 2, 28).checked_add_days(2)
        assert result == CivilDate(2024, 3, 1)
        assert outcome is AdjustOutcome.APPLIED

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="civilclock.core.date")
        CivilDate(1, 1, 1).add_days(-1)
        assert "leaves the supported range" in caplog.text


class TestAddMonths:
    """Tests for CivilDate.add_months and add_years."""

    def test_clamps_day_in_leap_year(self) -> None:
        assert CivilDate(2024, 1, 31).add_months(1) == CivilDate(2024, 2, 29)

    def test_clamps_day_in_common_year(self) -> None:
        assert CivilDate(2023, 1, 31).add_months(1) == CivilDate(2023, 2, 28)

    def test_clamps_to_thirty_day_month(self) -> None:
        assert CivilDate(2024, 3, 31).add_months(1) == CivilDate(2024, 4, 30)

    def test_negative_crosses_year(self) -> None:
        assert CivilDate(2024, 3, 15).add_months(-3) == CivilDate(2023, 12, 15)
        assert CivilDate(2024, 1, 15).add_months(-1) == CivilDate(2023, 12, 15)

    def test_multi_year(self) -> None:
        assert CivilDate(2024, 11, 30).add_months(14) == CivilDate(2026, 1, 30)
        assert CivilDate(2024, 1, 1).add_months(-25) == CivilDate(2021, 12, 1)

    def test_year_clamped_high(self) -> None:
        result, outcome = CivilDate(9999, 11, 30).checked_add_months(3)
        assert result == CivilDate(9999, 2, 28)
        assert outcome is AdjustOutcome.CLAMPED_YEAR
        assert outcome.changed_value is True

    def test_year_clamped_low(self) -> None:
        result, outcome = CivilDate(1, 3, 15).checked_add_months(-5)
        assert result == CivilDate(1, 10, 15)
        assert outcome is AdjustOutcome.CLAMPED_YEAR

    def test_clamp_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="civilclock.core.date")
        CivilDate(9999, 6, 1).add_months(12)
        assert "clamped to 9999" in caplog.text

    def test_add_years_from_leap_day(self) -> None:
        assert CivilDate(2024, 2, 29).add_years(1) == CivilDate(2025, 2, 28)
        assert CivilDate(2024, 2, 29).add_years(4) == CivilDate(2028, 2, 29)

    def test_add_years_clamps(self) -> None:
        assert CivilDate(9990, 5, 5).add_years(100) == CivilDate(9999, 5, 5)
        _, outcome = CivilDate(5, 5, 5).checked_add_years(-10)
        assert outcome is AdjustOutcome.CLAMPED_YEAR


class TestDaysBetween:
    """Tests for CivilDate.days_between."""

    def test_signed(self) -> None:
        a = CivilDate(2024, 3, 1)
        b = CivilDate(2024, 2, 1)
        assert a.days_between(b) == 29
        assert b.days_between(a) == -29
        assert a.days_between(a) == 0

    def test_since_unix_epoch(self) -> None:
        assert CivilDate(2024, 1, 1).days_between(CivilDate(1970, 1, 1)) == 19723

    def test_consistent_with_add_days(self) -> None:
        start = CivilDate(1600, 2, 29)
        for n in (0, 1, 365, 10000, 146097):
            assert start.add_days(n).days_between(start) == n


class TestDateComparison:
    """Tests for CivilDate ordering and equality."""

    def test_ordering_is_lexicographic(self) -> None:
        dates = [
            CivilDate(2024, 12, 1),
            CivilDate(2023, 12, 31),
            CivilDate(2024, 1, 31),
            CivilDate(2024, 2, 1),
        ]
        assert sorted(dates) == [
            CivilDate(2023, 12, 31),
            CivilDate(2024, 1, 31),
            CivilDate(2024, 2, 1),
            CivilDate(2024, 12, 1),
        ]

    def test_compare(self) -> None:
        a = CivilDate(2024, 1, 1)
        b = CivilDate(2024, 1, 2)
        assert a.compare(b) == -1
        assert b.compare(a) == 1
        assert a.compare(CivilDate(2024, 1, 1)) == 0

    def test_equality_and_hash(self) -> None:
        a = CivilDate(2024, 7, 4)
        b = CivilDate(2024, 7, 4)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_foreign_types(self) -> None:
        d = CivilDate(2024, 7, 4)
        assert d != "2024-07-04"
        assert d != datetime.date(2024, 7, 4)
        with pytest.raises(TypeError):
            d < "2024-07-04"  # noqa: B015

    def test_immutable(self) -> None:
        d = CivilDate(2024, 7, 4)
        with pytest.raises(AttributeError):
            d.year = 2025  # type: ignore[misc]


class TestDateRendering:
    """Tests for CivilDate string forms."""

    def test_repr(self) -> None:
        assert repr(CivilDate(2024, 1, 5)) == "CivilDate(2024, 1, 5)"

    def test_str_is_iso(self) -> None:
        assert str(CivilDate(2024, 1, 5)) == "2024-01-05"
        assert CivilDate(5, 3, 9).to_iso_format() == "0005-03-09"

    def test_format(self) -> None:
        assert CivilDate(2024, 12, 25).format("%A, %B %d, %Y") == "Wednesday, December 25, 2024"
