"""Text formatting for civilclock values.

This module provides functions for rendering values as text:
    - strftime-style formatting over a fixed directive table
    - ISO 8601 rendering at second, milli, micro and nano precision

Functions:
    strftime: Format a value using a strftime-style template.
    to_iso8601: Format a value as ISO 8601.
    to_iso8601_ms: ISO 8601 with milliseconds.
    to_iso8601_us: ISO 8601 with microseconds.
    to_iso8601_ns: ISO 8601 with nanoseconds.

Examples:
    >>> from civilclock import Timestamp
    >>> from civilclock.format import strftime, to_iso8601_ms

    >>> strftime(Timestamp(2024, 1, 15, 14, 30, 45), "%Y/%m/%d %H:%M")
    '2024/01/15 14:30'

    >>> to_iso8601_ms(Timestamp(2024, 1, 15, 14, 30, 45, 7_000_000))
    '2024-01-15T14:30:45.007'
"""

from __future__ import annotations

from civilclock.format.iso8601 import (
    to_iso8601,
    to_iso8601_ms,
    to_iso8601_ns,
    to_iso8601_us,
)
from civilclock.format.strftime import strftime

__all__: list[str] = [
    # strftime
    "strftime",
    # ISO 8601
    "to_iso8601",
    "to_iso8601_ms",
    "to_iso8601_us",
    "to_iso8601_ns",
]
