"""Flow data formats and their classification."""

from __future__ import annotations

import enum


class DataFormat(enum.IntEnum):
    """Flow data formats as defined by NMOS IS-04, without event data."""

    UNSPECIFIED = 0
    VIDEO = 1
    AUDIO = 2
    DATA = 3
    MUX = 4


_VALID = frozenset({DataFormat.VIDEO, DataFormat.AUDIO, DataFormat.DATA, DataFormat.MUX})
_SUPPORTED = frozenset({DataFormat.VIDEO, DataFormat.AUDIO, DataFormat.DATA})
_DISCRETE = frozenset({DataFormat.VIDEO, DataFormat.DATA})
_CONTINUOUS = frozenset({DataFormat.AUDIO})


def is_valid_data_format(fmt: int) -> bool:
    """Whether ``fmt`` names a real data format."""
    return fmt in _VALID


def is_supported_data_format(fmt: int) -> bool:
    """Whether ``fmt`` can be carried by a flow."""
    return fmt in _SUPPORTED


def is_discrete_data_format(fmt: int) -> bool:
    """Whether ``fmt`` is carried in discrete grains."""
    return fmt in _DISCRETE


def is_continuous_data_format(fmt: int) -> bool:
    """Whether ``fmt`` is carried as continuous samples."""
    return fmt in _CONTINUOUS