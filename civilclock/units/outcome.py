"""Outcome of a checked calendar adjustment.

This module provides the AdjustOutcome enum returned by the checked_*
arithmetic methods on CivilDate. The plain methods apply the same
policies silently.
"""

from __future__ import annotations

from enum import Enum


class AdjustOutcome(Enum):
    """How a calendar adjustment was applied.

    Examples:
        >>> from civilclock import CivilDate
        >>> _, outcome = CivilDate(9999, 12, 31).checked_add_days(1)
        >>> outcome
        <AdjustOutcome.REJECTED_OUT_OF_RANGE: 'rejected_out_of_range'>
        >>> outcome.changed_value
        False
    """

    APPLIED = "applied"  # Result is exactly the requested offset
    REJECTED_OUT_OF_RANGE = "rejected_out_of_range"  # add_days left the value unchanged
    CLAMPED_YEAR = "clamped_year"  # add_months pinned the year to 1 or 9999

    @property
    def changed_value(self) -> bool:
        """Return False only when the adjustment was rejected outright."""
        return self != AdjustOutcome.REJECTED_OUT_OF_RANGE


__all__ = ["AdjustOutcome"]
