"""The binary descriptive header stored at the start of a flow's shared data."""

from __future__ import annotations

import struct
import uuid
from dataclasses import dataclass, field
from typing import Optional, Union

from .dataformat import is_continuous_data_format
from .rational import Rational

FLOW_INFO_SIZE = 4096
"""Size in bytes of the serialised flow header."""

_HEADER = struct.Struct("<II")
_COMMON = struct.Struct("<16sQQII80s")
_DISCRETE = struct.Struct("<qqIIQ96s")
_CONTINUOUS = struct.Struct("<qqIIIIQ88s")
_UNION_SIZE = 128
_USER_DATA_SIZE = 3840
_COMMON_OFFSET = _HEADER.size
_UNION_OFFSET = _COMMON_OFFSET + _COMMON.size
_USER_DATA_OFFSET = _UNION_OFFSET + _UNION_SIZE


def _fit(data: bytes, size: int, name: str) -> bytes:
    if len(data) > size:
        raise ValueError(f"{name} holds {len(data)} bytes, at most {size} fit")
    return bytes(data).ljust(size, b"\x00")


@dataclass
class CommonFlowInfo:
    """Flow metadata shared by all data formats."""

    id: uuid.UUID = field(default_factory=lambda: uuid.UUID(int=0))
    last_write_time: int = 0
    last_read_time: int = 0
    format: int = 0
    flags: int = 0
    reserved: bytes = b""

    def _pack(self) -> bytes:
        return _COMMON.pack(
            self.id.bytes,
            self.last_write_time,
            self.last_read_time,
            self.format,
            self.flags,
            _fit(self.reserved, 80, "reserved"),
        )

    @classmethod
    def _unpack(cls, data: bytes, offset: int) -> CommonFlowInfo:
        raw_id, write_time, read_time, fmt, flags, reserved = _COMMON.unpack_from(data, offset)
        return cls(uuid.UUID(bytes=raw_id), write_time, read_time, fmt, flags, reserved)


@dataclass
class DiscreteFlowInfo:
    """Header data of flows carried in discrete grains."""

    grain_rate: Rational = field(default_factory=lambda: Rational(0, 1))
    grain_count: int = 0
    sync_counter: int = 0
    head_index: int = 0
    reserved: bytes = b""

    def _pack(self) -> bytes:
        return _DISCRETE.pack(
            self.grain_rate.numerator,
            self.grain_rate.denominator,
            self.grain_count,
            self.sync_counter,
            self.head_index,
            _fit(self.reserved, 96, "reserved"),
        )

    @classmethod
    def _unpack(cls, data: bytes, offset: int) -> DiscreteFlowInfo:
        num, den, count, sync, head, reserved = _DISCRETE.unpack_from(data, offset)
        return cls(Rational(num, den), count, sync, head, reserved)


@dataclass
class ContinuousFlowInfo:
    """Header data of flows carried as continuous per-channel samples."""

    sample_rate: Rational = field(default_factory=lambda: Rational(0, 1))
    channel_count: int = 0
    buffer_length: int = 0
    commit_batch_size: int = 0
    sync_batch_size: int = 0
    head_index: int = 0
    reserved: bytes = b""

    def _pack(self) -> bytes:
        return _CONTINUOUS.pack(
            self.sample_rate.numerator,
            self.sample_rate.denominator,
            self.channel_count,
            self.buffer_length,
            self.commit_batch_size,
            self.sync_batch_size,
            self.head_index,
            _fit(self.reserved, 88, "reserved"),
        )

    @classmethod
    def _unpack(cls, data: bytes, offset: int) -> ContinuousFlowInfo:
        num, den, channels, length, commit, sync, head, reserved = _CONTINUOUS.unpack_from(data, offset)
        return cls(Rational(num, den), channels, length, commit, sync, head, reserved)


@dataclass
class FlowInfo:
    """The complete flow header.

    At most one of ``discrete`` and ``continuous`` is set; which one is read
    back from bytes follows the data format in ``common``.
    """

    version: int = 1
    size: int = FLOW_INFO_SIZE
    common: CommonFlowInfo = field(default_factory=CommonFlowInfo)
    discrete: Optional[DiscreteFlowInfo] = None
    continuous: Optional[ContinuousFlowInfo] = None
    user_data: bytes = b""

    @property
    def _specific(self) -> Union[DiscreteFlowInfo, ContinuousFlowInfo, None]:
        if self.discrete is not None and self.continuous is not None:
            raise ValueError("a flow header is either discrete or continuous, not both")
        return self.continuous if self.continuous is not None else self.discrete

    @property
    def rate(self) -> Rational:
        """The grain rate or sample rate of the flow."""
        specific = self._specific
        if specific is None:
            return Rational(0, 1)
        return specific.sample_rate if isinstance(specific, ContinuousFlowInfo) else specific.grain_rate

    @property
    def head_index(self) -> int:
        """The current head index of the flow."""
        specific = self._specific
        return 0 if specific is None else specific.head_index

    def to_bytes(self) -> bytes:
        """Serialise the header into its fixed binary layout."""
        specific = self._specific
        union = b"\x00" * _UNION_SIZE if specific is None else specific._pack()
        return b"".join(
            (
                _HEADER.pack(self.version, self.size),
                self.common._pack(),
                union,
                _fit(self.user_data, _USER_DATA_SIZE, "user_data"),
            )
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> FlowInfo:
        """Parse a header from the first ``FLOW_INFO_SIZE`` bytes of ``data``."""
        if len(data) < FLOW_INFO_SIZE:
            raise ValueError(f"flow header needs {FLOW_INFO_SIZE} bytes, got {len(data)}")
        version, size = _HEADER.unpack_from(data, 0)
        common = CommonFlowInfo._unpack(data, _COMMON_OFFSET)
        user_data = bytes(data[_USER_DATA_OFFSET:FLOW_INFO_SIZE])
        if is_continuous_data_format(common.format):
            return cls(version, size, common, continuous=ContinuousFlowInfo._unpack(data, _UNION_OFFSET),
                       user_data=user_data)
        return cls(version, size, common, discrete=DiscreteFlowInfo._unpack(data, _UNION_OFFSET),
                   user_data=user_data)