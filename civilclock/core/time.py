"""WallTime class representing a time of day.

This module provides the WallTime class for representing time-of-day values
with nanosecond precision.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from civilclock._internal.constants import (
    DEFAULT_TIME_FORMAT,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from civilclock._internal.validation import validate_nanos_of_day, validate_time
from civilclock.clock import resolve_clock
from civilclock.format.strftime import strftime

if TYPE_CHECKING:
    from civilclock.clock import Clock


class WallTime:
    """A time of day with nanosecond precision.

    WallTime represents the time portion of a day, from midnight (00:00:00)
    to just before the next midnight (23:59:59.999999999). It carries no
    date and no timezone.

    The internal representation stores the total nanoseconds since
    midnight in a single `_nanos` slot. All arithmetic wraps modulo one
    day; a WallTime never records how many days were crossed. Callers that
    need the day carry (see Timestamp) compute it from the unwrapped total.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nanosecond: The nanosecond component (0-999999999).

    Examples:
        >>> t = WallTime(14, 30, 45, 123_456_789)
        >>> t.millisecond
        123
        >>> t.microsecond
        123456

        >>> WallTime(23, 0, 0).add_hours(2)
        WallTime(1, 0, 0, 0)
        >>> WallTime(0, 30, 0).add_minutes(-45)
        WallTime(23, 45, 0, 0)
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a WallTime from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).

        Raises:
            InvalidTime: If any component is out of range.
        """
        validate_time(hour, minute, second, nanosecond)

        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> WallTime:
        """Create a WallTime from nanoseconds since midnight.

        This is an internal factory method that bypasses validation
        for use when the value is known to be valid.
        """
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def from_nanoseconds(cls, nanos: int) -> WallTime:
        """Create a WallTime from a raw nanoseconds-since-midnight count.

        Raises:
            InvalidTime: If the count is negative or a full day or more.

        Examples:
            >>> WallTime.from_nanoseconds(3_600_000_000_000)
            WallTime(1, 0, 0, 0)
        """
        validate_nanos_of_day(nanos)
        return cls._from_nanos(nanos)

    @classmethod
    def from_seconds(cls, seconds: int) -> WallTime:
        """Create a WallTime from seconds, wrapping modulo one day.

        Examples:
            >>> WallTime.from_seconds(90_000)  # 25 hours
            WallTime(1, 0, 0, 0)
            >>> WallTime.from_seconds(-1)
            WallTime(23, 59, 59, 0)
        """
        return cls._from_nanos((seconds % SECONDS_PER_DAY) * NANOS_PER_SECOND)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> WallTime:
        """Create a WallTime from milliseconds, wrapping modulo one day."""
        return cls._from_nanos((milliseconds * NANOS_PER_MILLISECOND) % NANOS_PER_DAY)

    @classmethod
    def now(cls, clock: Clock | None = None) -> WallTime:
        """Return the current local time of day.

        Args:
            clock: Clock to read. Defaults to the module default clock.
        """
        now = resolve_clock(clock).now()
        return cls(
            now.hour,
            now.minute,
            now.second,
            now.microsecond * NANOS_PER_MICROSECOND,
        )

    @classmethod
    def midnight(cls) -> WallTime:
        return cls._from_nanos(0)

    @classmethod
    def noon(cls) -> WallTime:
        return cls._from_nanos(12 * NANOS_PER_HOUR)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanoseconds within the current second (0-999999999)."""
        return self._nanos % NANOS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the milliseconds within the current second (0-999).

        Examples:
            >>> WallTime(12, 30, 45, 123_456_789).millisecond
            123
        """
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the microseconds within the current second (0-999999)."""
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MICROSECOND

    @property
    def total_seconds(self) -> int:
        """Return whole seconds since midnight."""
        return self._nanos // NANOS_PER_SECOND

    @property
    def total_milliseconds(self) -> int:
        return self._nanos // NANOS_PER_MILLISECOND

    @property
    def total_microseconds(self) -> int:
        return self._nanos // NANOS_PER_MICROSECOND

    @property
    def total_nanoseconds(self) -> int:
        """Return the packed nanoseconds since midnight [0, NANOS_PER_DAY)."""
        return self._nanos

    @property
    def is_midnight(self) -> bool:
        return self._nanos == 0

    @property
    def is_noon(self) -> bool:
        return self._nanos == 12 * NANOS_PER_HOUR

    @property
    def is_am(self) -> bool:
        return self.hour < 12

    @property
    def is_pm(self) -> bool:
        return self.hour >= 12

    @property
    def hour12(self) -> int:
        """Return the hour on a 12-hour clock (1-12).

        Examples:
            >>> WallTime(0, 15).hour12
            12
            >>> WallTime(13, 0).hour12
            1
            >>> WallTime(12, 0).hour12
            12
        """
        h = self.hour
        if h == 0:
            return 12
        if h > 12:
            return h - 12
        return h

    def add_seconds(self, seconds: int) -> WallTime:
        """Return a new WallTime offset by whole seconds, wrapping at midnight.

        The sub-second part is kept unchanged.

        Examples:
            >>> WallTime(23, 59, 59, 500).add_seconds(2)
            WallTime(0, 0, 1, 500)
        """
        total_secs = (self.total_seconds + seconds) % SECONDS_PER_DAY
        return WallTime._from_nanos(total_secs * NANOS_PER_SECOND + self.nanosecond)

    def add_minutes(self, minutes: int) -> WallTime:
        return self.add_seconds(minutes * SECONDS_PER_MINUTE)

    def add_hours(self, hours: int) -> WallTime:
        return self.add_seconds(hours * SECONDS_PER_HOUR)

    def add_milliseconds(self, milliseconds: int) -> WallTime:
        """Return a new WallTime offset by milliseconds, wrapping at midnight."""
        return self.add_nanoseconds(milliseconds * NANOS_PER_MILLISECOND)

    def add_nanoseconds(self, nanoseconds: int) -> WallTime:
        """Return a new WallTime offset by nanoseconds, wrapping at midnight.

        Examples:
            >>> WallTime(0, 0, 0).add_nanoseconds(-1)
            WallTime(23, 59, 59, 999999999)
        """
        return WallTime._from_nanos((self._nanos + nanoseconds) % NANOS_PER_DAY)

    def format(self, fmt: str = DEFAULT_TIME_FORMAT) -> str:
        """Render this time with a strftime-style template.

        Date directives have no field on a time and render their own letter.

        Examples:
            >>> WallTime(9, 5, 7, 42_000_000).format("%H:%M:%S.%f")
            '09:05:07.042'
        """
        return strftime(self, fmt)

    def to_iso_format(self) -> str:
        """Return the time as HH:MM:SS."""
        return self.format(DEFAULT_TIME_FORMAT)

    def compare(self, other: WallTime) -> int:
        """Return -1, 0 or 1 as this time is before, equal to or after ``other``."""
        return (self._nanos > other._nanos) - (self._nanos < other._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WallTime):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, WallTime):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, WallTime):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, WallTime):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, WallTime):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"WallTime({self.hour}, {self.minute}, {self.second}, {self.nanosecond})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Times are always truthy, midnight included."""
        return True


__all__ = ["WallTime"]
