"""Validation utilities for civilclock.

This module turns the boolean predicates from the calendar module into
checks that raise InvalidDate or InvalidTime with a message naming the
offending component.

This module is not part of the public API.
"""

from __future__ import annotations

from civilclock._internal.calendar import (
    days_in_month,
    days_in_year,
    is_valid_day,
    is_valid_hour,
    is_valid_minute,
    is_valid_month,
    is_valid_nanosecond,
    is_valid_second,
    is_valid_year,
)
from civilclock._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_DAY,
)
from civilclock.errors import InvalidDate, InvalidTime


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        InvalidDate: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if not is_valid_year(year):
        raise InvalidDate(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidDate: If month is outside 1-12.
    """
    if not is_valid_month(month):
        raise InvalidDate(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12, already validated).
        day: The day to validate.

    Raises:
        InvalidDate: If day is invalid for the month.
    """
    if not is_valid_day(day, month, year):
        max_day = days_in_month(month, year)
        raise InvalidDate(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate a full (year, month, day) triple.

    Raises:
        InvalidDate: If any component is out of range.
    """
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


def validate_day_of_year(year: int, day_of_year: int) -> None:
    """Validate a 1-based day-of-year ordinal.

    Raises:
        InvalidDate: If the year is unsupported or the ordinal is out of range.
    """
    validate_year(year)
    max_doy = days_in_year(year)
    if day_of_year < 1 or day_of_year > max_doy:
        raise InvalidDate(
            f"day of year must be between 1 and {max_doy} for {year:04d}, "
            f"got {day_of_year}"
        )


def validate_time(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate time-of-day components.

    Raises:
        InvalidTime: If any component is outside its bound.
    """
    if not is_valid_hour(hour):
        raise InvalidTime(f"hour must be between 0 and 23, got {hour}")
    if not is_valid_minute(minute):
        raise InvalidTime(f"minute must be between 0 and 59, got {minute}")
    if not is_valid_second(second):
        raise InvalidTime(f"second must be between 0 and 59, got {second}")
    if not is_valid_nanosecond(nanosecond):
        raise InvalidTime(
            f"nanosecond must be between 0 and 999999999, got {nanosecond}"
        )


def validate_nanos_of_day(nanos: int) -> None:
    """Validate a raw nanoseconds-since-midnight count.

    Raises:
        InvalidTime: If the count is negative or a full day or more.
    """
    if nanos < 0 or nanos >= NANOS_PER_DAY:
        raise InvalidTime(
            f"nanoseconds since midnight must be between 0 and {NANOS_PER_DAY - 1}, "
            f"got {nanos}"
        )


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
    "validate_day_of_year",
    "validate_time",
    "validate_nanos_of_day",
]
