"""civilclock exception hierarchy.

All civilclock-specific exceptions inherit from CivilClockError.
"""

from __future__ import annotations


class CivilClockError(Exception):
    """Base exception for all civilclock errors."""

    pass


class ValidationError(CivilClockError):
    """Invalid input values.

    Raised at construction time when a component is out of range.
    Arithmetic never raises it.
    """

    pass


class InvalidDate(ValidationError):
    """A (year, month, day) triple is not a valid calendar date.

    Examples:
        - Year outside 1-9999
        - Month outside 1-12
        - February 29 in a non-leap year
    """

    pass


class InvalidTime(ValidationError):
    """A time-of-day component or raw nanosecond count is out of range.

    Examples:
        - Hour outside 0-23
        - Nanosecond value of 1_000_000_000 or more
        - A nanosecond count of a full day or more
    """

    pass


__all__ = [
    "CivilClockError",
    "ValidationError",
    "InvalidDate",
    "InvalidTime",
]
