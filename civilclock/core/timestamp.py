"""Timestamp class combining a civil date and a wall time.

This module provides the Timestamp class. A Timestamp exclusively owns one
CivilDate and one WallTime; arithmetic on the time of day carries any day
overflow into the date part.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from civilclock._internal.constants import (
    DEFAULT_TIMESTAMP_FORMAT,
    MILLIS_PER_SECOND,
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_DAY,
    UNIX_EPOCH_MONTH,
    UNIX_EPOCH_YEAR,
)
from civilclock._internal.decorators import deprecated
from civilclock.clock import resolve_clock
from civilclock.core.date import CivilDate
from civilclock.core.time import WallTime
from civilclock.format.iso8601 import (
    ISO8601_FORMAT,
    ISO8601_MS_FORMAT,
    ISO8601_NS_FORMAT,
    ISO8601_US_FORMAT,
)
from civilclock.format.strftime import strftime

if TYPE_CHECKING:
    from civilclock.clock import Clock

_UNIX_EPOCH = CivilDate(UNIX_EPOCH_YEAR, UNIX_EPOCH_MONTH, UNIX_EPOCH_DAY)


class Timestamp:
    """A civil date combined with a wall-clock time of day.

    Timestamp has no timezone. Its date and time parts are each valid on
    their own and have no cross-field constraint, but every operation that
    moves the time of day across midnight carries the day overflow into
    the date with floored division, so negative offsets roll the date back.

    The date part follows CivilDate's policies: a carry that would leave
    years 1-9999 leaves the date unchanged, and month/year arithmetic
    clamps the year.

    Attributes:
        date: The CivilDate part.
        time: The WallTime part.

    Examples:
        >>> ts = Timestamp(2024, 12, 31, 23, 0, 0)
        >>> ts.add_hours(2)
        Timestamp(2025, 1, 1, 1, 0, 0, 0)

        >>> Timestamp(2024, 3, 1, 0, 30).add_minutes(-45)
        Timestamp(2024, 2, 29, 23, 45, 0, 0)

        >>> Timestamp(2024, 1, 1).to_unix_timestamp()
        1704067200
    """

    __slots__ = ("_date", "_time")

    def __init__(
        self,
        year: int = 1,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a Timestamp from component parts.

        Raises:
            InvalidDate: If the date components are invalid.
            InvalidTime: If the time components are invalid.
        """
        self._date: CivilDate = CivilDate(year, month, day)
        self._time: WallTime = WallTime(hour, minute, second, nanosecond)

    @classmethod
    def combine(cls, date: CivilDate, time: WallTime | None = None) -> Timestamp:
        """Create a Timestamp from a CivilDate and an optional WallTime.

        Args:
            date: The date part.
            time: The time part (defaults to midnight).

        Examples:
            >>> Timestamp.combine(CivilDate(2024, 12, 25), WallTime(14, 30, 45))
            Timestamp(2024, 12, 25, 14, 30, 45, 0)
        """
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time if time is not None else WallTime.midnight()
        return instance

    @classmethod
    def now(cls, clock: Clock | None = None) -> Timestamp:
        """Return the current local date and time.

        Args:
            clock: Clock to read. Defaults to the module default clock.
        """
        now = resolve_clock(clock).now()
        return cls(
            now.year,
            now.month,
            now.day,
            now.hour,
            now.minute,
            now.second,
            now.microsecond * NANOS_PER_MICROSECOND,
        )

    @classmethod
    def from_unix_timestamp(cls, seconds: int) -> Timestamp:
        """Create a Timestamp from seconds since 1970-01-01T00:00:00.

        The day count is applied to the epoch date with add_days, so a
        count that would leave years 1-9999 keeps the epoch date.

        Examples:
            >>> Timestamp.from_unix_timestamp(1704067200)
            Timestamp(2024, 1, 1, 0, 0, 0, 0)
            >>> Timestamp.from_unix_timestamp(-1)
            Timestamp(1969, 12, 31, 23, 59, 59, 0)
        """
        days, remaining = divmod(seconds, SECONDS_PER_DAY)
        return cls.combine(_UNIX_EPOCH.add_days(days), WallTime.from_seconds(remaining))

    @classmethod
    def from_unix_timestamp_ms(cls, milliseconds: int) -> Timestamp:
        """Create a Timestamp from milliseconds since 1970-01-01T00:00:00.

        Examples:
            >>> Timestamp.from_unix_timestamp_ms(1704067200123).millisecond
            123
        """
        seconds, millis = divmod(milliseconds, MILLIS_PER_SECOND)
        base = cls.from_unix_timestamp(seconds)
        return cls.combine(
            base._date,
            WallTime._from_nanos(base._time.total_nanoseconds + millis * NANOS_PER_MILLISECOND),
        )

    @property
    def date(self) -> CivilDate:
        return self._date

    @property
    def time(self) -> WallTime:
        return self._time

    @deprecated("use the Timestamp.date property")
    def get_date(self) -> CivilDate:
        return self._date

    @deprecated("use the Timestamp.time property")
    def get_time(self) -> WallTime:
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def day_of_week(self) -> int:
        return self._date.day_of_week

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def quarter(self) -> int:
        return self._date.quarter

    @property
    def week_number(self) -> int:
        return self._date.week_number

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    @property
    def millisecond(self) -> int:
        return self._time.millisecond

    @property
    def microsecond(self) -> int:
        return self._time.microsecond

    def add_days(self, days: int) -> Timestamp:
        """Return a new Timestamp with the date moved by ``days``."""
        return Timestamp.combine(self._date.add_days(days), self._time)

    def add_months(self, months: int) -> Timestamp:
        """Return a new Timestamp with the date moved by ``months``."""
        return Timestamp.combine(self._date.add_months(months), self._time)

    def add_years(self, years: int) -> Timestamp:
        """Return a new Timestamp with the date moved by ``years``."""
        return Timestamp.combine(self._date.add_years(years), self._time)

    def add_seconds(self, seconds: int) -> Timestamp:
        """Return a new Timestamp offset by whole seconds.

        The day overflow is the floored quotient of the new second-of-day
        total by 86400 and is applied to the date; the sub-second part of
        the time is kept.

        Args:
            seconds: Number of seconds to add (can be negative).

        Examples:
            >>> Timestamp(2024, 1, 1, 0, 0, 0, 250).add_seconds(-1)
            Timestamp(2023, 12, 31, 23, 59, 59, 250)
        """
        if seconds == 0:
            return self

        total = self._time.total_seconds + seconds
        day_overflow, remainder = divmod(total, SECONDS_PER_DAY)

        time = WallTime._from_nanos(remainder * NANOS_PER_SECOND + self._time.nanosecond)
        return Timestamp.combine(self._date.add_days(day_overflow), time)

    def add_minutes(self, minutes: int) -> Timestamp:
        return self.add_seconds(minutes * SECONDS_PER_MINUTE)

    def add_hours(self, hours: int) -> Timestamp:
        return self.add_seconds(hours * SECONDS_PER_HOUR)

    def add_milliseconds(self, milliseconds: int) -> Timestamp:
        """Return a new Timestamp offset by milliseconds, carrying days."""
        return self.add_nanoseconds(milliseconds * NANOS_PER_MILLISECOND)

    def add_nanoseconds(self, nanoseconds: int) -> Timestamp:
        """Return a new Timestamp offset by nanoseconds, carrying days.

        Examples:
            >>> Timestamp(2024, 12, 31, 23, 59, 59, 999_999_999).add_nanoseconds(1)
            Timestamp(2025, 1, 1, 0, 0, 0, 0)
        """
        if nanoseconds == 0:
            return self

        total = self._time.total_nanoseconds + nanoseconds
        day_overflow, remainder = divmod(total, NANOS_PER_DAY)
        return Timestamp.combine(
            self._date.add_days(day_overflow), WallTime._from_nanos(remainder)
        )

    def seconds_between(self, other: Timestamp) -> int:
        """Return the signed whole-second difference from ``other`` to this one.

        Computed as the day difference times 86400 plus the difference of
        whole seconds since midnight. Sub-second parts are ignored, so two
        timestamps 0.9 s apart within the same second compare as 0.

        Examples:
            >>> a = Timestamp(2024, 1, 3, 0, 0, 10)
            >>> b = Timestamp(2024, 1, 1, 23, 59, 50)
            >>> a.seconds_between(b)
            86420
        """
        day_diff = self._date.days_between(other._date)
        sec_diff = self._time.total_seconds - other._time.total_seconds
        return day_diff * SECONDS_PER_DAY + sec_diff

    def to_unix_timestamp(self) -> int:
        """Return whole seconds since 1970-01-01T00:00:00."""
        day_diff = self._date.days_between(_UNIX_EPOCH)
        return day_diff * SECONDS_PER_DAY + self._time.total_seconds

    def to_unix_timestamp_ms(self) -> int:
        """Return milliseconds since 1970-01-01T00:00:00."""
        return self.to_unix_timestamp() * MILLIS_PER_SECOND + self.millisecond

    def format(self, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
        """Render this timestamp with a strftime-style template.

        Examples:
            >>> Timestamp(2024, 7, 4, 14, 30, 45).format("%H:%M:%S")
            '14:30:45'
        """
        return strftime(self, fmt)

    def to_iso8601(self) -> str:
        """Return YYYY-MM-DDTHH:MM:SS."""
        return self.format(ISO8601_FORMAT)

    def to_iso8601_ms(self) -> str:
        """Return YYYY-MM-DDTHH:MM:SS.fff."""
        return self.format(ISO8601_MS_FORMAT)

    def to_iso8601_us(self) -> str:
        """Return YYYY-MM-DDTHH:MM:SS.uuuuuu."""
        return self.format(ISO8601_US_FORMAT)

    def to_iso8601_ns(self) -> str:
        """Return YYYY-MM-DDTHH:MM:SS.nnnnnnnnn."""
        return self.format(ISO8601_NS_FORMAT)

    def _key(self) -> tuple[int, int, int, int]:
        return (self._date.year, self._date.month, self._date.day, self._time.total_nanoseconds)

    def compare(self, other: Timestamp) -> int:
        """Return -1, 0 or 1 comparing dates first, then times."""
        cmp = self._date.compare(other._date)
        if cmp != 0:
            return cmp
        return self._time.compare(other._time)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Timestamp({self.year}, {self.month}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second}, {self.nanosecond})"
        )

    def __str__(self) -> str:
        return self.format(DEFAULT_TIMESTAMP_FORMAT)


__all__ = ["Timestamp"]
