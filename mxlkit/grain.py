"""Grain headers and views onto payload buffers."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import Union

GRAIN_FLAG_INVALID = 0x00000001
"""Marks a grain whose payload must not be used."""

GRAIN_INFO_SIZE = 4096
"""Size in bytes of the serialised grain header."""

_GRAIN = struct.Struct("<IIIIiII4068s")
_USER_DATA_SIZE = 4068


class PayloadLocation(enum.IntEnum):
    """Where the payload of a grain lives."""

    HOST_MEMORY = 0
    DEVICE_MEMORY = 1


@dataclass
class GrainInfo:
    """The header of one grain."""

    version: int = 1
    size: int = GRAIN_INFO_SIZE
    flags: int = 0
    payload_location: PayloadLocation = PayloadLocation.HOST_MEMORY
    device_index: int = -1
    grain_size: int = 0
    committed_size: int = 0
    user_data: bytes = b""

    def to_bytes(self) -> bytes:
        """Serialise the header into its fixed binary layout."""
        if len(self.user_data) > _USER_DATA_SIZE:
            raise ValueError(f"user_data holds {len(self.user_data)} bytes, at most {_USER_DATA_SIZE} fit")
        return _GRAIN.pack(
            self.version,
            self.size,
            self.flags,
            int(self.payload_location),
            self.device_index,
            self.grain_size,
            self.committed_size,
            bytes(self.user_data).ljust(_USER_DATA_SIZE, b"\x00"),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> GrainInfo:
        """Parse a header from the first ``GRAIN_INFO_SIZE`` bytes of ``data``."""
        if len(data) < GRAIN_INFO_SIZE:
            raise ValueError(f"grain header needs {GRAIN_INFO_SIZE} bytes, got {len(data)}")
        version, size, flags, location, device, grain_size, committed, user_data = _GRAIN.unpack_from(data, 0)
        return cls(version, size, flags, PayloadLocation(location), device, grain_size, committed, user_data)


@dataclass(frozen=True)
class BufferSlice:
    """A run of consecutive bytes; writable when the view is."""

    data: Union[memoryview, bytes, bytearray] = b""

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class WrappedBufferSlice:
    """A run of bytes in a ring buffer, split where the buffer wraps around."""

    fragments: tuple[BufferSlice, BufferSlice] = field(default_factory=lambda: (BufferSlice(), BufferSlice()))

    def __post_init__(self) -> None:
        if len(self.fragments) != 2:
            raise ValueError("a wrapped slice has exactly two fragments")

    def total_size(self) -> int:
        """Number of bytes across both fragments."""
        return sum(fragment.size for fragment in self.fragments)

    def __bytes__(self) -> bytes:
        return b"".join(bytes(fragment.data) for fragment in self.fragments)


@dataclass(frozen=True)
class WrappedMultiBufferSlice:
    """The same wrapped range in consecutive ring buffers ``stride`` bytes apart."""

    base: WrappedBufferSlice = field(default_factory=WrappedBufferSlice)
    stride: int = 0
    count: int = 0