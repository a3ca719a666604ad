"""Internal utilities for civilclock.

This module contains private implementation details:
    - Calendar math (leap years, month lengths, weekday, ISO weeks)
    - Constants and lookup tables
    - Validation helpers raising InvalidDate / InvalidTime
    - The @deprecated decorator

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civilclock._internal.decorators import deprecated
from civilclock._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "deprecated",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
