"""ISO 8601 formatting.

This module provides the fixed ISO 8601 templates and helpers that render
a value through the shared strftime renderer. There is no parser.

Templates:
    ISO8601_FORMAT    - YYYY-MM-DDTHH:MM:SS
    ISO8601_MS_FORMAT - YYYY-MM-DDTHH:MM:SS.fff
    ISO8601_US_FORMAT - YYYY-MM-DDTHH:MM:SS.uuuuuu
    ISO8601_NS_FORMAT - YYYY-MM-DDTHH:MM:SS.nnnnnnnnn

Examples:
    >>> from civilclock import CivilDate, Timestamp
    >>> to_iso8601(Timestamp(2024, 12, 25, 14, 30, 45))
    '2024-12-25T14:30:45'
    >>> to_iso8601(CivilDate(2024, 12, 25))
    '2024-12-25'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from civilclock._internal.constants import DEFAULT_DATE_FORMAT, DEFAULT_TIME_FORMAT
from civilclock.format.strftime import strftime

if TYPE_CHECKING:
    from civilclock.core.date import CivilDate
    from civilclock.core.time import WallTime
    from civilclock.core.timestamp import Timestamp

TemporalType = Union["CivilDate", "WallTime", "Timestamp"]

ISO8601_FORMAT: str = "%Y-%m-%dT%H:%M:%S"
ISO8601_MS_FORMAT: str = ISO8601_FORMAT + ".%f"
ISO8601_US_FORMAT: str = ISO8601_FORMAT + ".%u"
ISO8601_NS_FORMAT: str = ISO8601_FORMAT + ".%N"


def _base_template(value: TemporalType) -> str:
    """Pick the seconds-precision template for the kind of value."""
    has_date = hasattr(value, "year")
    has_time = hasattr(value, "hour")
    if has_date and has_time:
        return ISO8601_FORMAT
    if has_date:
        return DEFAULT_DATE_FORMAT
    return DEFAULT_TIME_FORMAT


def _with_fraction(value: TemporalType, directive: str) -> str:
    base = _base_template(value)
    if base == DEFAULT_DATE_FORMAT:
        return strftime(value, base)
    return strftime(value, f"{base}.{directive}")


def to_iso8601(value: TemporalType) -> str:
    """Format a value as ISO 8601 at whole-second precision.

    Dates render as YYYY-MM-DD, times as HH:MM:SS and timestamps as
    YYYY-MM-DDTHH:MM:SS.
    """
    return strftime(value, _base_template(value))


def to_iso8601_ms(value: TemporalType) -> str:
    """Format with a 3-digit millisecond fraction (dates have none)."""
    return _with_fraction(value, "%f")


def to_iso8601_us(value: TemporalType) -> str:
    """Format with a 6-digit microsecond fraction (dates have none)."""
    return _with_fraction(value, "%u")


def to_iso8601_ns(value: TemporalType) -> str:
    """Format with a 9-digit nanosecond fraction (dates have none).

    Examples:
        >>> from civilclock import WallTime
        >>> to_iso8601_ns(WallTime(1, 2, 3, 4))
        '01:02:03.000000004'
    """
    return _with_fraction(value, "%N")


__all__ = [
    "ISO8601_FORMAT",
    "ISO8601_MS_FORMAT",
    "ISO8601_US_FORMAT",
    "ISO8601_NS_FORMAT",
    "to_iso8601",
    "to_iso8601_ms",
    "to_iso8601_us",
    "to_iso8601_ns",
]
