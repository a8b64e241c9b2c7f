import time

import pytest

from mxlkit.timing import (
    Clock,
    Duration,
    Timepoint,
    as_duration,
    as_timepoint,
    clock_offset,
    current_time,
    current_time_utc,
    from_microseconds,
    from_milliseconds,
    from_seconds,
)


def test_default_timepoint_is_false():
    assert not Timepoint()
    assert bool(Timepoint(1)) is True


def test_default_duration_is_false():
    assert not Duration()
    assert bool(Duration(-1)) is True


def test_timepoint_minus_timepoint_is_duration():
    assert Timepoint(1500) - Timepoint(500) == Duration(1000)


def test_timepoint_subtraction_clamps_at_zero():
    assert Timepoint(5) - Duration(10) == Timepoint(0)


def test_timepoint_addition_clamps_at_zero():
    assert Timepoint(5) + Duration(-10) == Timepoint(0)


def test_timepoint_add_then_subtract_round_trip():
    start = Timepoint(1_000_000_000)
    step = Duration(250)
    assert (start + step) - step == start
    assert (start + step) - start == step


def test_timepoint_ordering():
    assert Timepoint(1) < Timepoint(2)
    assert Timepoint(2) >= Timepoint(2)
    assert Timepoint(3) > Timepoint(2)


def test_duration_ordering():
    assert Duration(1) < Duration(2)
    assert Duration(2) <= Duration(2)
    assert Duration(3) > Duration(2)


def test_duration_arithmetic_invariants():
    d = Duration(7)
    assert d * 2 == d + d
    assert 2 * d == d * 2
    assert (d * 2) / 2 == d
    assert (d + d) - d == d


def test_duration_division_truncates_toward_zero():
    assert Duration(-7) / 2 == -(Duration(7) / 2)
    assert (Duration(7) / 2) * 2 < Duration(7)


def test_duration_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Duration(10) / 0


def test_timespec_round_trip_timepoint():
    tp = as_timepoint(12, 345)
    assert tp.to_timespec() == (12, 345)


def test_timespec_round_trip_duration():
    d = as_duration(3, 999_999_999)
    assert d.to_timespec() == (3, 999_999_999)


def test_negative_duration_timespec_truncates():
    assert Duration(-1_500_000_000).to_timespec() == (-1, -500_000_000)


def test_unit_conversions_are_consistent():
    d = from_seconds(1.5)
    assert d.in_seconds() == 1.5
    assert d.in_milliseconds() == 1.5 * 1000
    assert d.in_microseconds() == 1.5 * 1000 * 1000
    assert d.in_nanoseconds() == float(d.value)


def test_from_milliseconds_and_microseconds_agree():
    assert from_milliseconds(2.0) == from_microseconds(2000.0)
    assert from_milliseconds(1000.0) == from_seconds(1.0)


def test_from_seconds_truncates():
    assert from_seconds(1e-10) == Duration(0)


def test_clock_offset_zero_for_non_tai():
    for clock in (Clock.MONOTONIC, Clock.REALTIME, Clock.PROCESS_CPU_TIME, Clock.THREAD_CPU_TIME):
        assert clock_offset(clock) == from_seconds(0.0)


def test_clock_offset_tai():
    expected = from_seconds(0.0) if hasattr(time, "CLOCK_TAI") else from_seconds(37.0)
    assert clock_offset(Clock.TAI) == expected


def test_current_realtime_close_to_system_time():
    before = time.time_ns()
    now = current_time(Clock.REALTIME)
    after = time.time_ns()
    assert before <= now.value <= after


def test_current_time_utc_close_to_system_time():
    before = time.time_ns()
    now = current_time_utc()
    after = time.time_ns()
    assert before <= now.value <= after


def test_monotonic_clock_does_not_go_backwards():
    first = current_time(Clock.MONOTONIC)
    second = current_time(Clock.MONOTONIC)
    assert first
    assert second >= first


def test_tai_ahead_of_realtime_by_at_most_leap_seconds():
    realtime = current_time(Clock.REALTIME)
    tai = current_time(Clock.TAI)
    diff = tai - realtime
    assert Duration(0) <= diff + from_seconds(1.0)
    assert diff <= from_seconds(37.0) + from_seconds(1.0)