"""Internal constants for civilclock.

These constants define the limits, unit sizes and static lookup tables
used throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

HOURS_PER_DAY: int = 24
MINUTES_PER_HOUR: int = 60
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
MILLIS_PER_SECOND: int = 1_000

MONTHS_PER_YEAR: int = 12
DAYS_IN_YEAR: int = 365
DAYS_IN_LEAP_YEAR: int = 366

# Supported year range (proleptic Gregorian, no year 0)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year), 0-indexed by month - 1
DAYS_PER_MONTH: tuple[int, ...] = (
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before the start of each month (non-leap year); index 12 is the year length
CUMULATIVE_DAYS: tuple[int, ...] = (
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365,
)

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_ABBREV: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Monday first, matching day_of_week() numbering
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

WEEKDAY_ABBREV: tuple[str, ...] = (
    "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun",
)

# Unix epoch as a civil date
UNIX_EPOCH_YEAR: int = 1970
UNIX_EPOCH_MONTH: int = 1
UNIX_EPOCH_DAY: int = 1

# Default format templates
DEFAULT_DATE_FORMAT: str = "%Y-%m-%d"
DEFAULT_TIME_FORMAT: str = "%H:%M:%S"
DEFAULT_TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MILLIS_PER_SECOND",
    "MONTHS_PER_YEAR",
    "DAYS_IN_YEAR",
    "DAYS_IN_LEAP_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_PER_MONTH",
    "CUMULATIVE_DAYS",
    "MONTH_NAMES",
    "MONTH_ABBREV",
    "WEEKDAY_NAMES",
    "WEEKDAY_ABBREV",
    "UNIX_EPOCH_YEAR",
    "UNIX_EPOCH_MONTH",
    "UNIX_EPOCH_DAY",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_TIME_FORMAT",
    "DEFAULT_TIMESTAMP_FORMAT",
]
