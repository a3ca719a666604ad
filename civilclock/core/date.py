"""CivilDate class representing a calendar date.

This module provides the CivilDate class for representing calendar dates
in the proleptic Gregorian calendar, years 1 through 9999.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from civilclock._internal.calendar import (
    day_number_to_ymd,
    day_of_week,
    day_of_year,
    days_in_month,
    days_since_epoch_start,
    is_leap_year,
    is_valid_date,
    iso_week_number,
    month_and_day_from_day_of_year,
    ymd_to_day_number,
)
from civilclock._internal.constants import (
    DEFAULT_DATE_FORMAT,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
)
from civilclock._internal.validation import validate_date, validate_day_of_year
from civilclock.clock import resolve_clock
from civilclock.format.strftime import strftime
from civilclock.units.outcome import AdjustOutcome

if TYPE_CHECKING:
    from civilclock.clock import Clock

logger = logging.getLogger(__name__)


class CivilDate:
    """A calendar date in the proleptic Gregorian calendar.

    CivilDate represents a specific calendar day with year, month, and day
    components. The Gregorian leap-year rule is applied uniformly to every
    supported year, with no historical calendar switch.

    Instances are immutable. Arithmetic methods return a new CivilDate and
    never raise: add_days leaves the value unchanged when the result would
    fall outside years 1-9999, while add_months and add_years clamp the
    year into that range.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CivilDate(2024, 12, 25)
        >>> d.day_of_week  # Wednesday
        2
        >>> d.day_of_year
        360
        >>> d.add_days(10)
        CivilDate(2025, 1, 4)

        >>> CivilDate(2024, 1, 31).add_months(1)  # Clamps to Feb 29
        CivilDate(2024, 2, 29)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int = 1, month: int = 1, day: int = 1) -> None:
        """Create a CivilDate from year, month, and day.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            InvalidDate: If any component is out of range.

        Examples:
            >>> CivilDate()
            CivilDate(1, 1, 1)

            >>> CivilDate(2023, 2, 29)
            Traceback (most recent call last):
            ...
            civilclock.errors.InvalidDate: day must be between 1 and 28 for 2023-02, got 29
        """
        validate_date(year, month, day)

        self._year: int = year
        self._month: int = month
        self._day: int = day

    @classmethod
    def _from_ymd(cls, year: int, month: int, day: int) -> CivilDate:
        """Create a CivilDate from components already known to be valid."""
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        instance._day = day
        return instance

    @classmethod
    def today(cls, clock: Clock | None = None) -> CivilDate:
        """Return today's local date.

        Args:
            clock: Clock to read. Defaults to the module default clock.

        Returns:
            A CivilDate for the clock's current day.
        """
        now = resolve_clock(clock).now()
        return cls(now.year, now.month, now.day)

    @classmethod
    def from_day_of_year(cls, year: int, day_of_year: int) -> CivilDate:
        """Create a CivilDate from a year and a 1-based day of the year.

        Args:
            year: The year (1-9999).
            day_of_year: Day of the year (1-365, or 1-366 in leap years).

        Returns:
            The corresponding CivilDate.

        Raises:
            InvalidDate: If the year or the ordinal is out of range.

        Examples:
            >>> CivilDate.from_day_of_year(2024, 60)
            CivilDate(2024, 2, 29)
            >>> CivilDate.from_day_of_year(2023, 60)
            CivilDate(2023, 3, 1)
        """
        validate_day_of_year(year, day_of_year)
        month, day = month_and_day_from_day_of_year(year, day_of_year)
        return cls._from_ymd(year, month, day)

    @property
    def year(self) -> int:
        """Return the year component (1-9999)."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._day

    @property
    def day_of_week(self) -> int:
        """Return the day of the week.

        Returns:
            Day of week (0=Monday, 6=Sunday).

        Examples:
            >>> CivilDate(2024, 1, 15).day_of_week  # Monday
            0
            >>> CivilDate(2024, 1, 21).day_of_week  # Sunday
            6
        """
        return day_of_week(self._year, self._month, self._day)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year.

        Returns:
            Day of year (1-366).

        Examples:
            >>> CivilDate(2024, 12, 31).day_of_year  # Leap year
            366
            >>> CivilDate(2023, 12, 31).day_of_year
            365
        """
        return day_of_year(self._year, self._month, self._day)

    @property
    def quarter(self) -> int:
        """Return the quarter of the year (1-4)."""
        return (self._month - 1) // 3 + 1

    @property
    def week_number(self) -> int:
        """Return the ISO 8601 week number (1-53).

        Dates in the first days of January may belong to the last week of
        the previous year, and dates in the last days of December may
        belong to week 1 of the next year.

        Examples:
            >>> CivilDate(2024, 12, 25).week_number
            52
            >>> CivilDate(2024, 12, 30).week_number
            1
            >>> CivilDate(2021, 1, 3).week_number
            53
        """
        return iso_week_number(self._year, self._month, self._day)

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self._year)

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self.day_of_week >= 5

    @property
    def is_weekday(self) -> bool:
        """Return True for Monday through Friday."""
        return not self.is_weekend

    def first_day_of_month(self) -> CivilDate:
        return CivilDate._from_ymd(self._year, self._month, 1)

    def last_day_of_month(self) -> CivilDate:
        return CivilDate._from_ymd(
            self._year, self._month, days_in_month(self._month, self._year)
        )

    def first_day_of_year(self) -> CivilDate:
        return CivilDate._from_ymd(self._year, 1, 1)

    def last_day_of_year(self) -> CivilDate:
        return CivilDate._from_ymd(self._year, 12, 31)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> CivilDate:
        """Return a new CivilDate with specified components replaced.

        Raises:
            InvalidDate: If the resulting date is invalid.

        Examples:
            >>> CivilDate(2024, 1, 15).replace(month=6)
            CivilDate(2024, 6, 15)
        """
        return CivilDate(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def checked_add_days(self, days: int) -> tuple[CivilDate, AdjustOutcome]:
        """Add days and report whether the result was applied.

        The numeric result is identical to add_days(). When the result
        would leave years 1-9999 the original date is returned with
        AdjustOutcome.REJECTED_OUT_OF_RANGE.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            Tuple of (resulting date, outcome).

        Examples:
            >>> CivilDate(2024, 2, 28).checked_add_days(1)
            (CivilDate(2024, 2, 29), <AdjustOutcome.APPLIED: 'applied'>)
        """
        if days == 0:
            return (self, AdjustOutcome.APPLIED)

        day_number = ymd_to_day_number(self._year, self._month, self._day) + days
        year, month, day = day_number_to_ymd(day_number)

        if not is_valid_date(year, month, day):
            logger.debug(
                "add_days(%d) from %s leaves the supported range; date unchanged",
                days,
                self,
            )
            return (self, AdjustOutcome.REJECTED_OUT_OF_RANGE)

        return (CivilDate._from_ymd(year, month, day), AdjustOutcome.APPLIED)

    def add_days(self, days: int) -> CivilDate:
        """Return a new CivilDate offset by the given number of days.

        If the result would fall before 0001-01-01 or after 9999-12-31,
        the date is returned unchanged.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            A new CivilDate offset by the specified days, or this date.

        Examples:
            >>> CivilDate(2023, 2, 28).add_days(1)
            CivilDate(2023, 3, 1)
            >>> CivilDate(2024, 1, 15).add_days(-20)
            CivilDate(2023, 12, 26)
            >>> CivilDate(9999, 12, 31).add_days(1)
            CivilDate(9999, 12, 31)
        """
        result, _ = self.checked_add_days(days)
        return result

    def checked_add_months(self, months: int) -> tuple[CivilDate, AdjustOutcome]:
        """Add months and report whether the year had to be clamped.

        The numeric result is identical to add_months().

        Args:
            months: Number of months to add (can be negative).

        Returns:
            Tuple of (resulting date, outcome), where the outcome is
            AdjustOutcome.CLAMPED_YEAR if the year left 1-9999.
        """
        if months == 0:
            return (self, AdjustOutcome.APPLIED)

        total_months = (self._year - 1) * MONTHS_PER_YEAR + (self._month - 1) + months
        years_index, month_index = divmod(total_months, MONTHS_PER_YEAR)
        new_year = years_index + 1
        new_month = month_index + 1

        outcome = AdjustOutcome.APPLIED
        if new_year < MIN_YEAR or new_year > MAX_YEAR:
            clamped = min(max(new_year, MIN_YEAR), MAX_YEAR)
            logger.debug(
                "add_months(%d) from %s reaches year %d; clamped to %d",
                months,
                self,
                new_year,
                clamped,
            )
            new_year = clamped
            outcome = AdjustOutcome.CLAMPED_YEAR

        new_day = min(self._day, days_in_month(new_month, new_year))
        return (CivilDate._from_ymd(new_year, new_month, new_day), outcome)

    def add_months(self, months: int) -> CivilDate:
        """Return a new CivilDate offset by the given number of months.

        If the resulting day is invalid for the new month, it is clamped to
        the last valid day of that month. A year outside 1-9999 is clamped
        into that range.

        Args:
            months: Number of months to add (can be negative).

        Returns:
            A new CivilDate offset by the specified months.

        Examples:
            >>> CivilDate(2024, 1, 31).add_months(1)
            CivilDate(2024, 2, 29)
            >>> CivilDate(2023, 1, 31).add_months(1)
            CivilDate(2023, 2, 28)
            >>> CivilDate(2024, 3, 15).add_months(-3)
            CivilDate(2023, 12, 15)
        """
        result, _ = self.checked_add_months(months)
        return result

    def checked_add_years(self, years: int) -> tuple[CivilDate, AdjustOutcome]:
        """Add years through checked_add_months(12 * years)."""
        return self.checked_add_months(years * MONTHS_PER_YEAR)

    def add_years(self, years: int) -> CivilDate:
        """Return a new CivilDate offset by the given number of years.

        Equivalent to add_months(12 * years), so Feb 29 maps to Feb 28 in a
        non-leap target year and the year is clamped into 1-9999.

        Examples:
            >>> CivilDate(2024, 2, 29).add_years(1)
            CivilDate(2025, 2, 28)
        """
        return self.add_months(years * MONTHS_PER_YEAR)

    def days_between(self, other: CivilDate) -> int:
        """Return the signed number of days from ``other`` to this date.

        Positive when this date is later.

        Examples:
            >>> CivilDate(2024, 3, 1).days_between(CivilDate(2024, 2, 1))
            29
            >>> CivilDate(2024, 1, 1).days_between(CivilDate(1970, 1, 1))
            19723
        """
        self_days = days_since_epoch_start(self._year) + self.day_of_year - 1
        other_days = days_since_epoch_start(other._year) + other.day_of_year - 1
        return self_days - other_days

    def format(self, fmt: str = DEFAULT_DATE_FORMAT) -> str:
        """Render this date with a strftime-style template.

        Time directives have no field on a date and render their own letter.

        Examples:
            >>> CivilDate(2024, 12, 25).format("%A, %B %d, %Y")
            'Wednesday, December 25, 2024'
        """
        return strftime(self, fmt)

    def to_iso_format(self) -> str:
        """Return the date as YYYY-MM-DD."""
        return self.format(DEFAULT_DATE_FORMAT)

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def compare(self, other: CivilDate) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after ``other``."""
        a, b = self._key(), other._key()
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another.

        Examples:
            >>> CivilDate(2024, 1, 15) < CivilDate(2024, 1, 16)
            True
        """
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"CivilDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["CivilDate"]
