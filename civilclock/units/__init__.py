"""Calendar enumerations.

This module provides:
    - AdjustOutcome: result tag for checked date arithmetic
"""

from __future__ import annotations

from civilclock.units.outcome import AdjustOutcome

__all__: list[str] = [
    "AdjustOutcome",
]
