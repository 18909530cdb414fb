"""Tests for timedelta conversions."""

from datetime import timedelta

import pytest

from isoperiod import (
    DAY,
    MAX_DURATION,
    MICROSECOND,
    DurationOverflowError,
    from_timedelta,
    to_timedelta,
)
from isoperiod.convert import timedelta_ticks


def test_from_timedelta():
    assert from_timedelta(timedelta(days=1)) == DAY
    assert from_timedelta(timedelta(microseconds=1)) == MICROSECOND
    assert from_timedelta(timedelta(days=-1, microseconds=1)) == -DAY + MICROSECOND


def test_from_timedelta_out_of_range():
    with pytest.raises(DurationOverflowError, match="outside the int64 range"):
        from_timedelta(timedelta(days=106752))


def test_to_timedelta_truncates_toward_zero():
    """Test that sub-microsecond ticks are dropped for both signs."""
    assert to_timedelta(DAY + 999) == timedelta(days=1)
    assert to_timedelta(-1_999) == timedelta(microseconds=-1)
    assert to_timedelta(0) == timedelta(0)


def test_to_timedelta_full_range():
    assert to_timedelta(MAX_DURATION) == timedelta(microseconds=MAX_DURATION // MICROSECOND)


def test_timedelta_ticks_has_no_range_check():
    """Test the unchecked conversion shared with calendar measurements."""
    assert timedelta_ticks(timedelta(days=200000)) == 200000 * DAY
    assert timedelta_ticks(timedelta(microseconds=-1)) == -MICROSECOND
