"""Clock collaborator for the "now" and "today" factories.

The value types never read the host clock directly. They ask a Clock for
the current local wall-clock instant and break it into date and time
components. Accuracy and timezone resolution belong to the clock.

Examples:
    >>> import datetime
    >>> from civilclock import CivilDate
    >>> from civilclock.clock import FixedClock
    >>> clock = FixedClock(datetime.datetime(2024, 7, 4, 14, 30, 45))
    >>> CivilDate.today(clock=clock)
    CivilDate(2024, 7, 4)
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Clock(Protocol):
    """Source of the current local instant."""

    def now(self) -> _datetime.datetime:
        """Return the current local date and time."""
        ...


class SystemClock:
    """Clock backed by the host's local wall clock."""

    def now(self) -> _datetime.datetime:
        return _datetime.datetime.now()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that always returns a preset instant.

    Useful for tests and for replaying a known moment. The instant can be
    moved explicitly with advance().

    Args:
        instant: The instant to report. Any tzinfo is ignored; only the
            local wall-clock fields are read.
    """

    def __init__(self, instant: _datetime.datetime) -> None:
        self._instant = instant

    def now(self) -> _datetime.datetime:
        return self._instant

    def advance(self, delta: _datetime.timedelta) -> None:
        """Move the reported instant by ``delta``."""
        self._instant = self._instant + delta

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


_default_clock: Clock = SystemClock()


def get_default_clock() -> Clock:
    """Return the clock used when a factory receives ``clock=None``."""
    return _default_clock


def set_default_clock(clock: Clock) -> Clock:
    """Install ``clock`` as the default and return the previous one.

    Raises:
        TypeError: If ``clock`` has no ``now()`` method.
    """
    global _default_clock
    if not isinstance(clock, Clock):
        raise TypeError(f"expected a Clock, got {type(clock).__name__}")
    previous = _default_clock
    _default_clock = clock
    logger.debug("default clock set to %r", clock)
    return previous


def resolve_clock(clock: Clock | None) -> Clock:
    """Return ``clock`` or the module default when it is None."""
    return clock if clock is not None else _default_clock


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_default_clock",
    "set_default_clock",
    "resolve_clock",
]
