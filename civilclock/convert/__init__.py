"""Value conversion utilities.

This module provides functions for converting Timestamps to and from
Unix epoch offsets in seconds and milliseconds.

Examples:
    >>> from civilclock import Timestamp
    >>> from civilclock.convert import to_unix_seconds, from_unix_seconds

    >>> ts = Timestamp(2024, 1, 15, 14, 30, 45)
    >>> from_unix_seconds(to_unix_seconds(ts)) == ts
    True
"""

from __future__ import annotations

from civilclock.convert.epoch import (
    from_unix_millis,
    from_unix_seconds,
    to_unix_millis,
    to_unix_seconds,
)

__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
]
