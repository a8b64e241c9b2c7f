"""Clock access plus nanosecond time points and durations."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable, Optional

_NS_PER_SECOND = 1_000_000_000
_TAI_LEAP_SECONDS = 37.0


def _truncating_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of ``value``."""
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, value - quotient * divisor


class Clock(enum.Enum):
    """The clocks that time can be read from."""

    MONOTONIC = enum.auto()
    REALTIME = enum.auto()
    TAI = enum.auto()
    PROCESS_CPU_TIME = enum.auto()
    THREAD_CPU_TIME = enum.auto()


@dataclass(frozen=True, order=True)
class Timepoint:
    """A point in time, in nanoseconds relative to the clock's epoch."""

    value: int = 0

    def __bool__(self) -> bool:
        return self.value != 0

    def __add__(self, other: object) -> Timepoint:
        if isinstance(other, Duration):
            return Timepoint(max(self.value + other.value, 0))
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Timepoint):
            return Duration(self.value - other.value)
        if isinstance(other, Duration):
            return Timepoint(max(self.value - other.value, 0))
        return NotImplemented

    def to_timespec(self) -> tuple[int, int]:
        """Return ``(seconds, nanoseconds)``, truncated toward zero."""
        return _truncating_divmod(self.value, _NS_PER_SECOND)


@dataclass(frozen=True, order=True)
class Duration:
    """A span of time in nanoseconds."""

    value: int = 0

    def __bool__(self) -> bool:
        return self.value != 0

    def __add__(self, other: object) -> Duration:
        if isinstance(other, Duration):
            return Duration(self.value + other.value)
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if isinstance(other, Duration):
            return Duration(self.value - other.value)
        return NotImplemented

    def __neg__(self) -> Duration:
        return Duration(-self.value)

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, int):
            return Duration(self.value * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Duration:
        if isinstance(other, int):
            return Duration(_truncating_divmod(self.value, other)[0])
        return NotImplemented

    def to_timespec(self) -> tuple[int, int]:
        """Return ``(seconds, nanoseconds)``, truncated toward zero."""
        return _truncating_divmod(self.value, _NS_PER_SECOND)

    def in_seconds(self) -> float:
        return self.value / 1_000_000_000.0

    def in_milliseconds(self) -> float:
        return self.value / 1_000_000.0

    def in_microseconds(self) -> float:
        return self.value / 1_000.0

    def in_nanoseconds(self) -> float:
        return float(self.value)


def as_timepoint(seconds: int, nanoseconds: int) -> Timepoint:
    """Build a time point from a seconds/nanoseconds pair."""
    return Timepoint(seconds * _NS_PER_SECOND + nanoseconds)


def as_duration(seconds: int, nanoseconds: int) -> Duration:
    """Build a duration from a seconds/nanoseconds pair."""
    return Duration(seconds * _NS_PER_SECOND + nanoseconds)


def from_seconds(value: float) -> Duration:
    return Duration(int(value * 1_000_000_000.0))


def from_milliseconds(value: float) -> Duration:
    return Duration(int(value * 1_000_000.0))


def from_microseconds(value: float) -> Duration:
    return Duration(int(value * 1_000.0))


def _first_clock_id(*names: str) -> Optional[int]:
    for name in names:
        clock_id = getattr(time, name, None)
        if clock_id is not None:
            return clock_id
    return None


def _clock_id(clock: Clock) -> Optional[int]:
    if clock is Clock.MONOTONIC:
        return _first_clock_id("CLOCK_MONOTONIC_RAW", "CLOCK_MONOTONIC")
    if clock is Clock.TAI:
        return _first_clock_id("CLOCK_TAI", "CLOCK_REALTIME")
    if clock is Clock.PROCESS_CPU_TIME:
        return _first_clock_id("CLOCK_PROCESS_CPUTIME_ID")
    if clock is Clock.THREAD_CPU_TIME:
        return _first_clock_id("CLOCK_THREAD_CPUTIME_ID")
    return _first_clock_id("CLOCK_REALTIME")


_FALLBACK_READERS: dict[Clock, Callable[[], int]] = {
    Clock.MONOTONIC: time.monotonic_ns,
    Clock.REALTIME: time.time_ns,
    Clock.TAI: time.time_ns,
    Clock.PROCESS_CPU_TIME: time.process_time_ns,
    Clock.THREAD_CPU_TIME: time.thread_time_ns,
}


def clock_offset(clock: Clock) -> Duration:
    """Offset added to readings of ``clock``.

    Where the system has no TAI clock, TAI is derived from the realtime
    clock plus the current leap second count.
    """
    if clock is Clock.TAI and not hasattr(time, "CLOCK_TAI"):
        return from_seconds(_TAI_LEAP_SECONDS)
    return from_seconds(0.0)


def current_time(clock: Clock) -> Timepoint:
    """Read ``clock``; a zero time point means the clock could not be read."""
    reader = getattr(time, "clock_gettime_ns", None)
    clock_id = _clock_id(clock)
    try:
        if reader is not None and clock_id is not None:
            nanoseconds = reader(clock_id)
        else:
            nanoseconds = _FALLBACK_READERS[clock]()
    except OSError:
        return Timepoint()
    return Timepoint(nanoseconds) + clock_offset(clock)


def current_time_utc() -> Timepoint:
    """Read the current UTC wall-clock time."""
    return Timepoint(time.time_ns())