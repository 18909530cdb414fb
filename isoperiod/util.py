"""Utility constants for isoperiod.

Time unit constants represent durations in nanoseconds (ticks).
These are used throughout the API for consistent time representation.
"""

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

# Tick range: a signed 64-bit count of nanoseconds
MAX_MAGNITUDE = 1 << 63
MAX_DURATION = MAX_MAGNITUDE - 1
MIN_DURATION = -MAX_MAGNITUDE
