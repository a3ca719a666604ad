"""civilclock: calendar and clock arithmetic on plain value types.

civilclock represents proleptic Gregorian dates (years 1-9999), times of
day with nanosecond precision, and their combination, with exact
arithmetic, comparison and a small locale-free formatting language.

Core Types:
    CivilDate: Calendar date (year, month, day)
    WallTime: Time of day (hour, minute, second, nanosecond)
    Timestamp: CivilDate + WallTime with day-carrying arithmetic

Units:
    AdjustOutcome: How a checked date adjustment was applied

Clock:
    Clock, SystemClock, FixedClock: sources for the now()/today() factories

Format Functions:
    strftime: Render a value with a %-directive template
    to_iso8601: Render a value as ISO 8601

Exceptions:
    CivilClockError: Base exception
    ValidationError: Invalid input values
    InvalidDate: Invalid date components
    InvalidTime: Invalid time components

Example:
    >>> from civilclock import Timestamp
    >>> ts = Timestamp(2024, 12, 31, 23, 0, 0)
    >>> ts.add_hours(2).to_iso8601()
    '2025-01-01T01:00:00'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from civilclock.core.date import CivilDate
from civilclock.core.time import WallTime
from civilclock.core.timestamp import Timestamp

# Units
from civilclock.units.outcome import AdjustOutcome

# Clock
from civilclock.clock import (
    Clock,
    FixedClock,
    SystemClock,
    get_default_clock,
    set_default_clock,
)

# Exceptions
from civilclock.errors import (
    CivilClockError,
    InvalidDate,
    InvalidTime,
    ValidationError,
)

# Format functions
from civilclock.format import strftime, to_iso8601

__all__: list[str] = [
    "__version__",
    # Core types
    "CivilDate",
    "WallTime",
    "Timestamp",
    # Units
    "AdjustOutcome",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_default_clock",
    "set_default_clock",
    # Exceptions
    "CivilClockError",
    "ValidationError",
    "InvalidDate",
    "InvalidTime",
    # Format functions
    "strftime",
    "to_iso8601",
]
