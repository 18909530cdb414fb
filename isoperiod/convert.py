"""Conversions between nanosecond ticks and ``datetime.timedelta``."""

from datetime import timedelta

from isoperiod.errors import DurationOverflowError
from isoperiod.util import MAX_DURATION, MICROSECOND, MIN_DURATION, SECOND


def timedelta_ticks(delta: timedelta) -> int:
    """Return the exact nanosecond count of ``delta`` with no range check."""
    return (delta.days * 86400 + delta.seconds) * SECOND + delta.microseconds * MICROSECOND


def from_timedelta(delta: timedelta) -> int:
    """Return the exact nanosecond count of ``delta``.

    Raises:
        DurationOverflowError: If the result is outside the signed 64-bit range
    """
    ticks = timedelta_ticks(delta)
    if not MIN_DURATION <= ticks <= MAX_DURATION:
        raise DurationOverflowError("timedelta outside the int64 range", str(delta))
    return ticks


def to_timedelta(ticks: int) -> timedelta:
    """Return ``ticks`` as a timedelta, truncated toward zero to microseconds."""
    micros = abs(ticks) // MICROSECOND
    return timedelta(microseconds=-micros if ticks < 0 else micros)
