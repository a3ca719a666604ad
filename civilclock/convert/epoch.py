"""Epoch conversion utilities.

This module provides module-level functions for converting between
Timestamps and Unix epoch offsets (seconds and milliseconds). Timestamps
carry no timezone, so the epoch is the civil instant 1970-01-01T00:00:00.

Functions:
    to_unix_seconds: Convert a Timestamp to Unix seconds.
    from_unix_seconds: Create a Timestamp from Unix seconds.
    to_unix_millis: Convert a Timestamp to Unix milliseconds.
    from_unix_millis: Create a Timestamp from Unix milliseconds.

Examples:
    >>> from civilclock import Timestamp
    >>> to_unix_seconds(Timestamp(1970, 1, 1))
    0
    >>> from_unix_seconds(86_400)
    Timestamp(1970, 1, 2, 0, 0, 0, 0)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from civilclock.core.timestamp import Timestamp


def to_unix_seconds(ts: "Timestamp") -> int:
    """Convert a Timestamp to whole seconds since the Unix epoch.

    Examples:
        >>> from civilclock import Timestamp
        >>> to_unix_seconds(Timestamp(2024, 1, 1))
        1704067200
    """
    return ts.to_unix_timestamp()


def from_unix_seconds(seconds: int) -> "Timestamp":
    """Create a Timestamp from seconds since the Unix epoch."""
    from civilclock.core.timestamp import Timestamp

    return Timestamp.from_unix_timestamp(seconds)


def to_unix_millis(ts: "Timestamp") -> int:
    """Convert a Timestamp to milliseconds since the Unix epoch.

    Examples:
        >>> from civilclock import Timestamp
        >>> to_unix_millis(Timestamp(1970, 1, 1, 0, 0, 0, 500_000_000))
        500
    """
    return ts.to_unix_timestamp_ms()


def from_unix_millis(millis: int) -> "Timestamp":
    """Create a Timestamp from milliseconds since the Unix epoch."""
    from civilclock.core.timestamp import Timestamp

    return Timestamp.from_unix_timestamp_ms(millis)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
]
