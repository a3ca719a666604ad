"""Core value types.

This module provides the three value types:
    - CivilDate: Calendar date in the proleptic Gregorian calendar
    - WallTime: Time of day with nanosecond precision
    - Timestamp: A CivilDate and a WallTime with day-carrying arithmetic
"""

from __future__ import annotations

from civilclock.core.date import CivilDate
from civilclock.core.time import WallTime
from civilclock.core.timestamp import Timestamp

__all__: list[str] = [
    "CivilDate",
    "WallTime",
    "Timestamp",
]
