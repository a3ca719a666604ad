"""Calendar utilities for civilclock.

This module provides the pure calendar functions everything else is built
on: leap-year logic, month lengths, day counts since the start of year 1,
day of week and ISO 8601 week numbering. None of them raise; callers pass
values that are already range-checked or that they are prepared to treat
as sentinels.

This module is not part of the public API.
"""

from __future__ import annotations

from civilclock._internal.constants import (
    CUMULATIVE_DAYS,
    DAYS_IN_LEAP_YEAR,
    DAYS_IN_YEAR,
    DAYS_PER_MONTH,
    HOURS_PER_DAY,
    MAX_YEAR,
    MIN_YEAR,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    NANOS_PER_SECOND,
    SECONDS_PER_MINUTE,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if it is divisible by 400, or divisible by 4
    and not by 100.

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(2023)
        False
    """
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in a given month.

    Args:
        month: The month (1-12).
        year: The year (needed for February in leap years).

    Returns:
        Number of days in the month, or 0 if month is not in 1-12.

    Examples:
        >>> days_in_month(2, 2024)
        29
        >>> days_in_month(2, 2023)
        28
        >>> days_in_month(13, 2024)
        0
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        return 0
    if month != 2:
        return DAYS_PER_MONTH[month - 1]
    return 29 if is_leap_year(year) else 28


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return DAYS_IN_LEAP_YEAR if is_leap_year(year) else DAYS_IN_YEAR


def days_since_epoch_start(year: int) -> int:
    """Return the number of days from 0001-01-01 to January 1 of ``year``.

    Args:
        year: Target year (1-9999).

    Returns:
        Total days in all complete years before ``year``.

    Examples:
        >>> days_since_epoch_start(1)
        0
        >>> days_since_epoch_start(2)
        365
        >>> days_since_epoch_start(1970)
        719162
    """
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a valid date.

    Examples:
        >>> day_of_year(2024, 12, 31)
        366
        >>> day_of_year(2023, 3, 1)
        60
    """
    doy = CUMULATIVE_DAYS[month - 1] + day
    if month > 2 and is_leap_year(year):
        doy += 1
    return doy


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the day of the week using Zeller's congruence.

    Zeller's native numbering starts at Saturday=0; the result is rotated
    so that Monday=0 through Sunday=6.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Day of week (0=Monday, 6=Sunday).

    Examples:
        >>> day_of_week(2024, 12, 25)  # Wednesday
        2
        >>> day_of_week(1, 1, 1)  # Monday
        0
    """
    y, m = year, month
    if m < 3:
        m += 12
        y -= 1
    k = y % 100
    j = y // 100
    h = (day + (13 * (m + 1)) // 5 + k + k // 4 + j // 4 - 2 * j) % 7
    return (h + 5) % 7


def iso_week_number(year: int, month: int, day: int) -> int:
    """Return the ISO 8601 week number for a date.

    Week 1 is the week containing the year's first Thursday. A computed
    week 0 belongs to the last week of the previous year; a computed
    week 53 belongs to week 1 of the next year when that year starts on
    Monday through Thursday.

    Works on plain integers so the boundary lookups at year 1 and year
    9999 never need an out-of-range date value.

    Examples:
        >>> iso_week_number(2024, 12, 25)
        52
        >>> iso_week_number(2024, 12, 31)  # 2025-01-01 is a Wednesday
        1
        >>> iso_week_number(2021, 1, 1)  # Friday, tail of 2020
        53
    """
    dow_jan1 = day_of_week(year, 1, 1)
    week = (day_of_year(year, month, day) + dow_jan1 - 1) // 7
    if dow_jan1 <= 3:
        week += 1

    if week == 0:
        return iso_week_number(year - 1, 12, 31)

    if week == 53 and day_of_week(year + 1, 1, 1) <= 3:
        return 1

    return week


def month_and_day_from_day_of_year(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day of year to (month, day).

    The caller guarantees 1 <= doy <= days_in_year(year).
    """
    remaining = doy
    for month in range(1, MONTHS_PER_YEAR + 1):
        dim = days_in_month(month, year)
        if remaining <= dim:
            return (month, remaining)
        remaining -= dim
    return (MONTHS_PER_YEAR, remaining)


def ymd_to_day_number(year: int, month: int, day: int) -> int:
    """Return days elapsed since 0001-01-01 (which is day 0).

    Examples:
        >>> ymd_to_day_number(1, 1, 1)
        0
        >>> ymd_to_day_number(1970, 1, 1)
        719162
    """
    return days_since_epoch_start(year) + day_of_year(year, month, day) - 1


def day_number_to_ymd(day_number: int) -> tuple[int, int, int]:
    """Convert days since 0001-01-01 back to (year, month, day).

    Decomposes the count into 400-, 100-, 4- and 1-year cycles. Negative
    inputs produce years below 1; callers range-check the year.

    Examples:
        >>> day_number_to_ymd(0)
        (1, 1, 1)
        >>> day_number_to_ymd(719162)
        (1970, 1, 1)
    """
    n400, n = divmod(day_number, 146097)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle lands one past the final bucket
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = month_and_day_from_day_of_year(year, n + 1)
    return (year, month, day)


def is_valid_year(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR


def is_valid_month(month: int) -> bool:
    return 1 <= month <= MONTHS_PER_YEAR


def is_valid_day(day: int, month: int, year: int) -> bool:
    return 1 <= day <= days_in_month(month, year)


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Return True if (year, month, day) is a supported calendar date."""
    return is_valid_year(year) and is_valid_month(month) and is_valid_day(day, month, year)


def is_valid_hour(hour: int) -> bool:
    return 0 <= hour < HOURS_PER_DAY


def is_valid_minute(minute: int) -> bool:
    return 0 <= minute < MINUTES_PER_HOUR


def is_valid_second(second: int) -> bool:
    return 0 <= second < SECONDS_PER_MINUTE


def is_valid_nanosecond(nanosecond: int) -> bool:
    return 0 <= nanosecond < NANOS_PER_SECOND


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_since_epoch_start",
    "day_of_year",
    "day_of_week",
    "iso_week_number",
    "month_and_day_from_day_of_year",
    "ymd_to_day_number",
    "day_number_to_ymd",
    "is_valid_year",
    "is_valid_month",
    "is_valid_day",
    "is_valid_date",
    "is_valid_hour",
    "is_valid_minute",
    "is_valid_second",
    "is_valid_nanosecond",
]
