"""Duration units and their resolution to nanosecond ticks.

Units fall into two families sharing one call shape:

- Fixed units (days, hours, minutes, seconds) have a constant length.
- Calendar units (months, years) have no fixed length and are measured from
  a reference instant through a calendar primitive.

The calendar primitive defaults to python-dateutil's relativedelta, which
clamps to the end of the month (Jan 31 + 1 month = Feb 28/29).
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from enum import Enum
from types import MappingProxyType
from typing import Callable, TypeAlias

from dateutil.relativedelta import relativedelta

from isoperiod.convert import timedelta_ticks
from isoperiod.errors import DurationOverflowError
from isoperiod.util import DAY, HOUR, MAX_MAGNITUDE, MICROSECOND, MINUTE, SECOND

logger = logging.getLogger(__name__)


class UnitKind(Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def is_calendar(self) -> bool:
        """True if the unit length depends on a calendar position."""
        return self in (UnitKind.YEAR, UnitKind.MONTH)


# Unit letters before the T designator
DATE_UNITS: Mapping[str, UnitKind] = MappingProxyType(
    {
        "Y": UnitKind.YEAR,
        "M": UnitKind.MONTH,
        "D": UnitKind.DAY,
    }
)

# Unit letters after the T designator
TIME_UNITS: Mapping[str, UnitKind] = MappingProxyType(
    {
        "H": UnitKind.HOUR,
        "M": UnitKind.MINUTE,
        "S": UnitKind.SECOND,
    }
)

FIXED_TICKS: Mapping[UnitKind, int] = MappingProxyType(
    {
        UnitKind.DAY: DAY,
        UnitKind.HOUR: HOUR,
        UnitKind.MINUTE: MINUTE,
        UnitKind.SECOND: SECOND,
    }
)

CalendarAdd: TypeAlias = Callable[[datetime, UnitKind, int], int]
"""Add ``count`` calendar units to an instant, returning the elapsed ticks."""


def elapsed_ticks(start: datetime, end: datetime) -> int:
    """Return the nanoseconds elapsed from ``start`` to ``end``.

    Aware datetimes are compared on the UTC timeline so that offset changes
    (e.g. DST transitions) are counted.
    """
    if start.tzinfo is not None and end.tzinfo is not None:
        start = start.astimezone(timezone.utc)
        end = end.astimezone(timezone.utc)
    return timedelta_ticks(end - start)


def calendar_add(instant: datetime, kind: UnitKind, count: int) -> int:
    """Default calendar primitive backed by ``dateutil.relativedelta``.

    Args:
        instant: Calendar position to measure from
        kind: UnitKind.YEAR or UnitKind.MONTH
        count: Number of units to add

    Returns:
        Ticks elapsed between ``instant`` and ``instant + count units``

    Raises:
        ValueError: If kind is not a calendar unit
        DurationOverflowError: If the result leaves the datetime range
    """
    if kind is UnitKind.YEAR:
        step = relativedelta(years=count)
    elif kind is UnitKind.MONTH:
        step = relativedelta(months=count)
    else:
        raise ValueError(f"{kind.value} is not a calendar unit")

    try:
        return elapsed_ticks(instant, instant + step)
    except (OverflowError, ValueError) as err:
        # datetime raises ValueError for years past 9999
        raise DurationOverflowError(
            f"{kind.value} outside the calendar range", str(count)
        ) from err


def advance(reference: datetime, ticks: int) -> datetime:
    """Move a reference instant forward by ``ticks`` (truncated to microseconds).

    Aware instants move on the UTC timeline, matching ``elapsed_ticks``.
    """
    delta = timedelta(microseconds=ticks // MICROSECOND)
    try:
        if reference.tzinfo is None:
            return reference + delta
        return (reference.astimezone(timezone.utc) + delta).astimezone(reference.tzinfo)
    except OverflowError as err:
        raise DurationOverflowError("reference instant out of range", str(ticks)) from err


def resolve(
    kind: UnitKind,
    value: int,
    scale: int | None = None,
    reference: datetime | None = None,
    calendar: CalendarAdd = calendar_add,
) -> int:
    """Resolve a unit amount to nanosecond ticks.

    Args:
        kind: Unit to resolve
        value: Whole amount, or fraction numerator when ``scale`` is given
        scale: Fraction denominator (a power of ten), None for whole amounts
        reference: Calendar position, required for calendar units only
        calendar: Calendar primitive used for calendar units

    Returns:
        Resolved tick count, at most 2**63

    Raises:
        DurationOverflowError: If the result exceeds 2**63
        ValueError: If a calendar unit is resolved without a reference
    """
    if kind.is_calendar:
        if reference is None:
            raise ValueError(
                f"Resolving a {kind.value} requires a reference instant.\n"
                f"Hint: pass reference=datetime(...) for calendar units"
            )
        return _resolve_calendar(kind, value, scale, reference, calendar)
    return _resolve_fixed(kind, value, scale)


def _resolve_fixed(kind: UnitKind, value: int, scale: int | None) -> int:
    unit = FIXED_TICKS[kind]
    if scale is not None:
        ticks = value * unit // scale
        if ticks > MAX_MAGNITUDE:
            raise DurationOverflowError(f"{kind.value} fraction overflow", str(value))
        return ticks

    if value > MAX_MAGNITUDE // unit:
        raise DurationOverflowError(f"{kind.value} overflow", str(value))
    return value * unit


def _resolve_calendar(
    kind: UnitKind,
    value: int,
    scale: int | None,
    reference: datetime,
    calendar: CalendarAdd,
) -> int:
    try:
        if scale is None:
            ticks = calendar(reference, kind, value)
        else:
            ticks = value * calendar(reference, kind, 1) // scale
    except OverflowError as err:
        raise DurationOverflowError(
            f"{kind.value} outside the calendar range", str(value)
        ) from err

    logger.debug(
        "resolved %s %s/%s from %s to %d ticks",
        value,
        kind.value,
        scale or 1,
        reference.isoformat(),
        ticks,
    )
    if ticks > MAX_MAGNITUDE:
        raise DurationOverflowError(f"{kind.value} overflow", str(value))
    return ticks
