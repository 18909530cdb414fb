"""ISO-8601 duration parsing.

Parses ``[+-]P(n)Y(n)M(n)DT(n)H(n)M(n)S`` into a signed nanosecond count.
Months and years are resolved against a reference instant, one token at a
time, so each calendar unit is measured from the position reached by the
previous one.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, TypeAlias

from isoperiod.errors import (
    DurationOverflowError,
    InvalidFormatError,
    MissingUnitError,
    UnknownUnitError,
)
from isoperiod.scanner import is_digit, leading_fraction, leading_int
from isoperiod.units import (
    DATE_UNITS,
    TIME_UNITS,
    CalendarAdd,
    UnitKind,
    advance,
    calendar_add,
    resolve,
)
from isoperiod.util import MAX_DURATION, MAX_MAGNITUDE

logger = logging.getLogger(__name__)

ReferenceProvider: TypeAlias = Callable[[], datetime]


def utc_now() -> datetime:
    """Default reference provider: the current instant in UTC."""
    return datetime.now(timezone.utc)


class DurationParser:
    """Reusable ISO-8601 duration parser.

    Holds only configuration; every call to ``parse`` tracks its own
    reference instant, so one parser may be shared freely.

    Example:
        >>> from datetime import datetime, timezone
        >>> parser = DurationParser(
        ...     reference=lambda: datetime(2020, 1, 1, tzinfo=timezone.utc)
        ... )
        >>> parser.parse("P1Y1M1D") // 86_400_000_000_000
        398
    """

    def __init__(
        self,
        reference: ReferenceProvider | None = None,
        calendar: CalendarAdd | None = None,
    ):
        """
        Initialize a parser.

        Args:
            reference: Zero-argument callable returning the instant months and
                years are measured from (default: now, in UTC). Called at most
                once per parse, and only when the text has calendar units.
            calendar: Calendar primitive adding N months/years to an instant
                (default: relativedelta-based ``calendar_add``)
        """
        if reference is not None and not callable(reference):
            raise TypeError(
                f"reference must be a zero-argument callable, "
                f"got {type(reference).__name__!r}.\n"
                f"Hint: wrap a fixed instant in a lambda:\n"
                f"  DurationParser(reference=lambda: datetime(2020, 1, 1, tzinfo=timezone.utc))"
            )
        if calendar is not None and not callable(calendar):
            raise TypeError(
                f"calendar must be callable, got {type(calendar).__name__!r}"
            )
        self.reference: ReferenceProvider = reference or utc_now
        self.calendar: CalendarAdd = calendar or calendar_add

    def __call__(self, text: str) -> int:
        return self.parse(text)

    def parse(self, text: str) -> int:
        """Parse ``text`` into a signed count of nanoseconds.

        Raises:
            InvalidFormatError: If the text does not follow the grammar
            MissingUnitError: If a number has no unit letter
            UnknownUnitError: If a unit letter is not valid in its section
            DurationOverflowError: If the magnitude leaves the int64 range
        """
        pos = 0
        end = len(text)
        negative = False

        # [-+]?
        if text[:1] in ("-", "+"):
            negative = text[0] == "-"
            pos = 1

        if pos == end:
            raise InvalidFormatError("empty duration", text)
        if text[pos] != "P":
            raise InvalidFormatError("duration must start with P", text)
        pos += 1
        if pos == end:
            raise InvalidFormatError("duration has no units", text)

        units = DATE_UNITS
        reference: datetime | None = None
        total = 0

        while pos < end:
            if text[pos] == "T":
                if units is TIME_UNITS:
                    raise InvalidFormatError("repeated T designator", text)
                units = TIME_UNITS
                pos += 1
                if pos == end:
                    raise InvalidFormatError("T designator has no units", text)

            if not (text[pos] == "." or is_digit(text[pos])):
                raise InvalidFormatError(f"unexpected character {text[pos]!r}", text)

            # [0-9]*
            start = pos
            value, pos = leading_int(text, pos)
            pre = pos != start

            # (\.[0-9]*)?
            fraction, scale, post = 0, 1, False
            if pos < end and text[pos] == ".":
                pos += 1
                start = pos
                fraction, scale, pos = leading_fraction(text, pos)
                post = pos != start

            if not pre and not post:
                raise InvalidFormatError("number has no digits", text)

            start = pos
            while pos < end and not (text[pos] in ".T" or is_digit(text[pos])):
                pos += 1
            if pos == start:
                raise MissingUnitError("missing unit", text)
            letter = text[start:pos]

            kind = units.get(letter)
            if kind is None:
                section = "time" if units is TIME_UNITS else "date"
                raise UnknownUnitError(f"unknown {section} unit {letter!r}", text, letter)

            if kind.is_calendar and reference is None:
                reference = self.reference()

            ticks = self._resolve(text, kind, value, None, reference)
            if fraction > 0:
                # A calendar fraction is measured from where the whole part ends
                anchor = None
                if kind.is_calendar:
                    anchor = self._advance(text, reference, ticks)
                part = self._resolve(text, kind, fraction, scale, anchor)
                logger.debug(
                    "fraction %d/%d %s resolved to %d ticks",
                    fraction,
                    scale,
                    kind.value,
                    part,
                )
                ticks += part

            if kind.is_calendar:
                reference = self._advance(text, reference, ticks)

            if total + ticks > MAX_MAGNITUDE:
                raise DurationOverflowError("duration overflow", text)
            total += ticks

        if negative:
            return -total
        if total > MAX_DURATION:
            raise DurationOverflowError("duration overflow", text)
        return total

    def _resolve(
        self,
        text: str,
        kind: UnitKind,
        value: int,
        scale: int | None,
        reference: datetime | None,
    ) -> int:
        try:
            return resolve(kind, value, scale, reference, self.calendar)
        except DurationOverflowError as err:
            raise DurationOverflowError(err.message, text) from err

    def _advance(self, text: str, reference: datetime, ticks: int) -> datetime:
        try:
            return advance(reference, ticks)
        except DurationOverflowError as err:
            raise DurationOverflowError(err.message, text) from err


def parse_duration(
    text: str,
    *,
    reference: ReferenceProvider | None = None,
    calendar: CalendarAdd | None = None,
) -> int:
    """
    Parse an ISO-8601 duration into a signed count of nanoseconds.

    Args:
        text: Duration such as "P3Y6M4DT12H30M17S", "-PT0.5S" or "P10D"
        reference: Zero-argument callable returning the instant that months
            and years are measured from (default: now, in UTC)
        calendar: Calendar primitive for months and years (default:
            relativedelta-based)

    Returns:
        Nanoseconds in the signed 64-bit range

    Raises:
        InvalidFormatError: If the text does not follow the grammar
        MissingUnitError: If a number has no unit letter
        UnknownUnitError: If a unit letter is not valid in its section
        DurationOverflowError: If the magnitude leaves the int64 range

    Example:
        >>> from isoperiod import HOUR, MINUTE, SECOND, parse_duration
        >>> parse_duration("PT12H30M17S") == 12 * HOUR + 30 * MINUTE + 17 * SECOND
        True
        >>> parse_duration("-P1D")
        -86400000000000
    """
    return DurationParser(reference=reference, calendar=calendar).parse(text)
