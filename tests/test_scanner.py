"""Tests for the digit scanners."""

import pytest

from isoperiod.errors import DurationOverflowError, LeadingIntOverflowError
from isoperiod.scanner import is_digit, leading_fraction, leading_int


def test_is_digit_accepts_ascii_only():
    assert is_digit("0")
    assert is_digit("9")
    assert not is_digit(".")
    assert not is_digit("T")
    # Arabic-Indic digit three
    assert not is_digit("٣")


def test_leading_int():
    """Test that the scanner stops at the first non-digit."""
    assert leading_int("123D", 0) == (123, 3)
    assert leading_int("P12H", 1) == (12, 3)
    assert leading_int("D", 0) == (0, 0)
    assert leading_int("", 0) == (0, 0)
    assert leading_int("007S", 0) == (7, 3)


def test_leading_int_boundary():
    """Test that 2**63 fits and anything larger overflows."""
    assert leading_int("9223372036854775808", 0) == (1 << 63, 19)

    with pytest.raises(LeadingIntOverflowError) as exc_info:
        leading_int("PT9223372036854775809S", 2)
    assert exc_info.value.text == "PT9223372036854775809S"

    with pytest.raises(DurationOverflowError):
        leading_int("1" * 30, 0)


def test_leading_fraction():
    """Test value and power-of-ten scale of fraction digits."""
    assert leading_fraction("5S", 0) == (5, 10, 1)
    assert leading_fraction("000000001S", 0) == (1, 10**9, 9)
    assert leading_fraction("250", 0) == (250, 1000, 3)
    assert leading_fraction("S", 0) == (0, 1, 0)
    assert leading_fraction("1.5S", 2) == (5, 10, 3)


def test_leading_fraction_freezes_on_overflow():
    """Test that excess digits are consumed without adding precision."""
    value, scale, pos = leading_fraction("1" * 30 + "S", 0)

    assert value == int("1" * 19)
    assert scale == 10**19
    assert pos == 30
