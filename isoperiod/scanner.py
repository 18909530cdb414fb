"""Digit scanners used by the duration parser.

Both scanners work on a position within the full input text so that errors
can carry the original string.
"""

from isoperiod.errors import LeadingIntOverflowError
from isoperiod.util import MAX_DURATION, MAX_MAGNITUDE


def is_digit(char: str) -> bool:
    """Return True for ASCII decimal digits only."""
    return "0" <= char <= "9"


def leading_int(text: str, pos: int) -> tuple[int, int]:
    """Consume the leading ``[0-9]*`` of ``text`` starting at ``pos``.

    Returns:
        Tuple of (value, position after the last digit consumed)

    Raises:
        LeadingIntOverflowError: If the value would exceed 2**63
    """
    value = 0
    end = len(text)
    while pos < end and is_digit(text[pos]):
        if value > MAX_MAGNITUDE // 10:
            raise LeadingIntOverflowError("integer overflow", text)
        value = value * 10 + ord(text[pos]) - ord("0")
        if value > MAX_MAGNITUDE:
            raise LeadingIntOverflowError("integer overflow", text)
        pos += 1
    return value, pos


def leading_fraction(text: str, pos: int) -> tuple[int, int, int]:
    """Consume the leading ``[0-9]*`` of ``text`` as fraction digits.

    Overflow is not an error here: once another digit would no longer fit,
    the value and scale stop changing and the remaining digits are skipped.

    Returns:
        Tuple of (value, scale, position after the last digit consumed),
        where the fraction equals ``value / scale``
    """
    value = 0
    scale = 1
    frozen = False
    end = len(text)
    while pos < end and is_digit(text[pos]):
        digit = ord(text[pos]) - ord("0")
        pos += 1
        if frozen:
            continue
        if value > MAX_DURATION // 10:
            frozen = True
            continue
        candidate = value * 10 + digit
        if candidate > MAX_MAGNITUDE:
            frozen = True
            continue
        value = candidate
        scale *= 10
    return value, scale, pos
