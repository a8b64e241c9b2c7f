import pytest

from mxlkit.grain import (
    GRAIN_FLAG_INVALID,
    GRAIN_INFO_SIZE,
    BufferSlice,
    GrainInfo,
    PayloadLocation,
    WrappedBufferSlice,
    WrappedMultiBufferSlice,
)


def test_serialised_size_is_fixed():
    assert len(GrainInfo().to_bytes()) == 4096
    assert GRAIN_INFO_SIZE == len(GrainInfo(grain_size=4096).to_bytes())


def test_round_trip_preserves_fields():
    original = GrainInfo(
        flags=GRAIN_FLAG_INVALID,
        payload_location=PayloadLocation.DEVICE_MEMORY,
        device_index=2,
        grain_size=4096,
        committed_size=512,
        user_data=b"meta",
    )
    parsed = GrainInfo.from_bytes(original.to_bytes())
    assert parsed.flags == GRAIN_FLAG_INVALID
    assert parsed.payload_location is PayloadLocation.DEVICE_MEMORY
    assert parsed.device_index == 2
    assert parsed.grain_size == 4096
    assert parsed.committed_size == 512
    assert parsed.user_data.rstrip(b"\x00") == b"meta"
    assert parsed.to_bytes() == original.to_bytes()


def test_default_header_round_trips_with_negative_device_index():
    parsed = GrainInfo.from_bytes(GrainInfo().to_bytes())
    assert parsed.device_index == GrainInfo().device_index
    assert parsed.payload_location is PayloadLocation.HOST_MEMORY
    assert parsed.version == GrainInfo().version


def test_flags_word_position():
    data = GrainInfo(flags=GRAIN_FLAG_INVALID).to_bytes()
    assert GrainInfo.from_bytes(data).flags & GRAIN_FLAG_INVALID
    assert data[8] == GRAIN_FLAG_INVALID


def test_short_buffer_is_rejected():
    with pytest.raises(ValueError):
        GrainInfo.from_bytes(b"\x00" * 100)


def test_oversized_user_data_is_rejected():
    with pytest.raises(ValueError):
        GrainInfo(user_data=b"x" * GRAIN_INFO_SIZE).to_bytes()


def test_wrapped_slice_total_size_and_bytes():
    first = BufferSlice(b"abc")
    second = BufferSlice(b"de")
    wrapped = WrappedBufferSlice((first, second))
    assert wrapped.total_size() == first.size + second.size
    assert bytes(wrapped) == b"abcde"


def test_wrapped_slice_over_writable_view():
    backing = bytearray(8)
    view = memoryview(backing)
    wrapped = WrappedBufferSlice((BufferSlice(view[6:]), BufferSlice(view[:2])))
    wrapped.fragments[0].data[0] = 0xCA
    wrapped.fragments[1].data[1] = 0xFE
    assert backing[6] == 0xCA
    assert backing[1] == 0xFE
    assert wrapped.total_size() == 4


def test_empty_wrapped_slice():
    assert WrappedBufferSlice().total_size() == 0
    assert WrappedMultiBufferSlice().base.total_size() == 0


def test_wrapped_slice_needs_two_fragments():
    with pytest.raises(ValueError):
        WrappedBufferSlice((BufferSlice(b"a"),))


def test_multi_slice_keeps_geometry():
    base = WrappedBufferSlice((BufferSlice(b"\x00" * 200), BufferSlice(b"\x00" * 56)))
    multi = WrappedMultiBufferSlice(base=base, stride=16384, count=1)
    assert multi.base.total_size() == 256
    assert multi.stride == 16384
    assert multi.count == 1