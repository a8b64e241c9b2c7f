"""Conversions between TAI time and flow head indices."""

from __future__ import annotations

import time
from typing import Optional

from .rational import Rational
from .timing import Clock, current_time

UNDEFINED_INDEX = 2**64 - 1
"""Returned where no index can be computed."""

_NS_PER_SECOND = 1_000_000_000


def _is_usable(edit_rate: Optional[Rational]) -> bool:
    return edit_rate is not None and edit_rate.numerator != 0 and edit_rate.denominator != 0


def get_time() -> int:
    """Current TAI time in nanoseconds since the epoch."""
    return current_time(Clock.TAI).value


def timestamp_to_head_index(edit_rate: Optional[Rational], timestamp: int) -> int:
    """Index of the edit unit at ``timestamp``, rounded to the nearest unit."""
    if not _is_usable(edit_rate):
        return UNDEFINED_INDEX
    return (timestamp * edit_rate.numerator + 500_000_000 * edit_rate.denominator) // (
        _NS_PER_SECOND * edit_rate.denominator
    )


def head_index_to_timestamp(edit_rate: Optional[Rational], index: int) -> int:
    """Start time in nanoseconds of the edit unit at ``index``."""
    if not _is_usable(edit_rate):
        return UNDEFINED_INDEX
    return (index * edit_rate.denominator * _NS_PER_SECOND) // edit_rate.numerator


def get_current_head_index(edit_rate: Optional[Rational]) -> int:
    """Index of the edit unit at the current TAI time."""
    if not _is_usable(edit_rate):
        return UNDEFINED_INDEX
    now = current_time(Clock.TAI)
    return timestamp_to_head_index(edit_rate, now.value) if now else UNDEFINED_INDEX


def get_ns_until_head_index(index: int, edit_rate: Optional[Rational]) -> int:
    """Nanoseconds until the edit unit at ``index`` begins, or 0 if it has."""
    if not _is_usable(edit_rate):
        return UNDEFINED_INDEX
    target = head_index_to_timestamp(edit_rate, index)
    now = current_time(Clock.TAI).value
    return target - now if now != 0 and target >= now else 0


def sleep_for_ns(ns: int) -> None:
    """Sleep for ``ns`` nanoseconds."""
    if ns > 0:
        time.sleep(ns / _NS_PER_SECOND)