"""Pytest configuration and fixtures for civilclock tests."""

from __future__ import annotations

import datetime
import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so civilclock can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from civilclock.clock import FixedClock, get_default_clock, set_default_clock  # noqa: E402


@pytest.fixture
def fixed_clock():
    """Install a FixedClock at 2024-07-04 14:30:45.123456 as the default."""
    clock = FixedClock(datetime.datetime(2024, 7, 4, 14, 30, 45, 123456))
    previous = set_default_clock(clock)
    yield clock
    set_default_clock(previous)


@pytest.fixture(autouse=True)
def _restore_default_clock():
    """Guard against a test leaving a different default clock behind."""
    original = get_default_clock()
    yield
    set_default_clock(original)
