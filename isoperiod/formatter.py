"""ISO-8601 duration formatting.

Output is always expressed in days, hours, minutes and seconds: a tick
count carries no calendar position, so months and years cannot be derived.
"""

from datetime import timedelta

from isoperiod.convert import from_timedelta
from isoperiod.errors import DurationOverflowError
from isoperiod.util import MAX_DURATION, MIN_DURATION, SECOND

_FRACTION_DIGITS = 9


def format_duration(value: int | timedelta) -> str:
    """
    Return the canonical ISO-8601 form of a duration.

    Zero-valued units are omitted and the zero duration formats as "PT0S".

    Args:
        value: Nanoseconds in the signed 64-bit range, or a timedelta

    Returns:
        Text such as "P1DT1H", "PT0.2S" or "-P1D"

    Raises:
        DurationOverflowError: If the value is outside the signed 64-bit range
        TypeError: If value is neither an int nor a timedelta

    Example:
        >>> from isoperiod import HOUR, format_duration
        >>> format_duration(25 * HOUR)
        'P1DT1H'
        >>> format_duration(200_000_000)
        'PT0.2S'
    """
    if isinstance(value, timedelta):
        ticks = from_timedelta(value)
    elif isinstance(value, int) and not isinstance(value, bool):
        ticks = value
    else:
        raise TypeError(
            f"Duration must be int (nanoseconds) or timedelta.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )

    if not MIN_DURATION <= ticks <= MAX_DURATION:
        raise DurationOverflowError("duration outside the int64 range", str(ticks))

    if ticks == 0:
        return "PT0S"

    negative = ticks < 0
    magnitude = -ticks if negative else ticks

    # Parts are collected least significant first and reversed at the end
    parts: list[str] = []

    seconds, nanos = divmod(magnitude, SECOND)
    fraction = f"{nanos:0{_FRACTION_DIGITS}d}".rstrip("0")
    if fraction or seconds % 60:
        parts.append("S")
        if fraction:
            parts.append("." + fraction)
        parts.append(str(seconds % 60))

    minutes = seconds // 60
    if minutes % 60:
        parts.append(f"{minutes % 60}M")

    hours = minutes // 60
    if hours % 24:
        parts.append(f"{hours % 24}H")

    if parts:
        parts.append("T")

    days = hours // 24
    if days:
        parts.append(f"{days}D")

    parts.append("P")
    if negative:
        parts.append("-")

    return "".join(reversed(parts))
