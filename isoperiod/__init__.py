from .convert import from_timedelta, to_timedelta
from .errors import (
    DurationError,
    DurationOverflowError,
    InvalidFormatError,
    LeadingIntOverflowError,
    MissingUnitError,
    UnknownUnitError,
)
from .formatter import format_duration
from .parser import DurationParser, parse_duration
from .units import UnitKind, calendar_add
from .util import (
    DAY,
    HOUR,
    MAX_DURATION,
    MICROSECOND,
    MILLISECOND,
    MIN_DURATION,
    MINUTE,
    NANOSECOND,
    SECOND,
)

__all__ = [
    "parse_duration",
    "format_duration",
    "DurationParser",
    "UnitKind",
    "calendar_add",
    "from_timedelta",
    "to_timedelta",
    "DurationError",
    "InvalidFormatError",
    "MissingUnitError",
    "UnknownUnitError",
    "DurationOverflowError",
    "LeadingIntOverflowError",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "MAX_DURATION",
    "MIN_DURATION",
]
