"""strftime-style formatting.

This module provides the directive renderer shared by CivilDate, WallTime
and Timestamp. It supports a fixed set of directives, renders names from
fixed English tables, and never consults the locale.

Supported Directives:
    %Y - 4-digit year (e.g., 2024)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %w - Day of week, 1 digit (0=Monday, 6=Sunday)
    %j - 3-digit day of year (001-366)
    %q - Quarter, 1 digit (1-4)
    %W - 2-digit ISO 8601 week number (01-53)
    %B - Full month name (January)
    %b - Abbreviated month name (Jan)
    %A - Full weekday name (Monday)
    %a - Abbreviated weekday name (Mon)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %f - 3-digit millisecond (000-999)
    %u - 6-digit microsecond (000000-999999)
    %N - 9-digit nanosecond (000000000-999999999)
    %% - Literal %

Any other directive renders its own character, as does a directive whose
field the value does not have (%H on a CivilDate, %Y on a WallTime). A
trailing lone % is copied through. Formatting never raises.

Examples:
    >>> from civilclock import CivilDate, Timestamp
    >>> strftime(CivilDate(2024, 1, 5), "%Y-%m-%d")
    '2024-01-05'
    >>> strftime(Timestamp(2024, 7, 4, 14, 30, 45), "%a %d %b %H:%M")
    'Thu 04 Jul 14:30'
    >>> strftime(CivilDate(2024, 1, 5), "%z")
    'z'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Union

from civilclock._internal.constants import (
    MONTH_ABBREV,
    MONTH_NAMES,
    WEEKDAY_ABBREV,
    WEEKDAY_NAMES,
)

if TYPE_CHECKING:
    from civilclock.core.date import CivilDate
    from civilclock.core.time import WallTime
    from civilclock.core.timestamp import Timestamp

# Type alias for formattable values
TemporalType = Union["CivilDate", "WallTime", "Timestamp"]


def _padded(width: int) -> Callable[[int], str]:
    return lambda value: f"{value:0{width}d}"


# Directive character -> (accessor attribute, renderer)
_DIRECTIVES: dict[str, tuple[str, Callable[[int], str]]] = {
    "Y": ("year", _padded(4)),
    "m": ("month", _padded(2)),
    "d": ("day", _padded(2)),
    "w": ("day_of_week", _padded(1)),
    "j": ("day_of_year", _padded(3)),
    "q": ("quarter", _padded(1)),
    "W": ("week_number", _padded(2)),
    "B": ("month", lambda month: MONTH_NAMES[month - 1]),
    "b": ("month", lambda month: MONTH_ABBREV[month - 1]),
    "A": ("day_of_week", lambda dow: WEEKDAY_NAMES[dow]),
    "a": ("day_of_week", lambda dow: WEEKDAY_ABBREV[dow]),
    "H": ("hour", _padded(2)),
    "M": ("minute", _padded(2)),
    "S": ("second", _padded(2)),
    "f": ("millisecond", _padded(3)),
    "u": ("microsecond", _padded(6)),
    "N": ("nanosecond", _padded(9)),
}


def strftime(value: TemporalType, fmt: str) -> str:
    """Format a temporal value using a strftime-style template.

    Args:
        value: A CivilDate, WallTime, or Timestamp to format.
        fmt: Template with %-directives.

    Returns:
        The rendered string.

    Examples:
        >>> from civilclock import WallTime
        >>> strftime(WallTime(14, 30, 45, 123_456_789), "%H:%M:%S.%N")
        '14:30:45.123456789'
        >>> strftime(WallTime(14, 30), "100%% at %H%")
        '100% at 14%'
    """
    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            result.append(_format_directive(value, fmt[i + 1]))
            i += 2
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(value: TemporalType, directive: str) -> str:
    """Render a single directive character for ``value``."""
    if directive == "%":
        return "%"

    entry = _DIRECTIVES.get(directive)
    if entry is None:
        return directive

    attribute, render = entry
    field = getattr(value, attribute, None)
    if field is None:
        return directive
    return render(field)


__all__ = ["strftime"]
