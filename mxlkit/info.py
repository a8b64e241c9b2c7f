"""Human readable reports about flows."""

from __future__ import annotations

from typing import Optional

from .dataformat import DataFormat, is_continuous_data_format, is_discrete_data_format
from .flowinfo import ContinuousFlowInfo, DiscreteFlowInfo, FlowInfo
from .mediatime import get_time, timestamp_to_head_index

_UINT64 = 2**64
_LABEL_WIDTH = 18

_FORMAT_NAMES = {
    DataFormat.UNSPECIFIED: "UNSPECIFIED",
    DataFormat.VIDEO: "Video",
    DataFormat.AUDIO: "Audio",
    DataFormat.DATA: "Data",
    DataFormat.MUX: "Multiplexed",
}


def format_name(fmt: int) -> str:
    """Display name of a data format, ``UNKNOWN`` for values outside the enum."""
    try:
        return _FORMAT_NAMES[DataFormat(fmt)]
    except ValueError:
        return "UNKNOWN"


def _field(label: str, value: object) -> str:
    return f"\t{label:>{_LABEL_WIDTH}}: {value}\n"


def _discrete_lines(discrete: DiscreteFlowInfo) -> str:
    rate = discrete.grain_rate
    return "".join(
        (
            _field("Grain rate", f"{rate.numerator}/{rate.denominator}"),
            _field("Grain count", discrete.grain_count),
            _field("Head index", discrete.head_index),
        )
    )


def _continuous_lines(continuous: ContinuousFlowInfo) -> str:
    rate = continuous.sample_rate
    return "".join(
        (
            _field("Sample rate", f"{rate.numerator}/{rate.denominator}"),
            _field("Channel count", continuous.channel_count),
            _field("Buffer length", continuous.buffer_length),
            _field("Commit batch size", continuous.commit_batch_size),
            _field("Sync batch size", continuous.sync_batch_size),
            _field("Head index", continuous.head_index),
        )
    )


def format_flow_info(info: FlowInfo, now: Optional[int] = None) -> str:
    """Describe a flow header as an indented multi-line report.

    ``now`` is the TAI time in nanoseconds the latencies are measured
    against; the current time is used when it is not given. Latencies are
    unsigned 64 bit differences, as stored in the header.
    """
    if now is None:
        now = get_time()

    common = info.common
    parts = [
        f"- Flow [{common.id}]\n",
        _field("Version", info.version),
        _field("Struct size", info.size),
        _field("Last write time", common.last_write_time),
        _field("Last read time", common.last_read_time),
        _field("Format", format_name(common.format)),
        _field("Flags", f"{common.flags:08x}"),
    ]

    if is_discrete_data_format(common.format):
        parts.append(_discrete_lines(info.discrete if info.discrete is not None else DiscreteFlowInfo()))
    elif is_continuous_data_format(common.format):
        parts.append(_continuous_lines(info.continuous if info.continuous is not None else ContinuousFlowInfo()))

    current_index = timestamp_to_head_index(info.rate, now)
    parts.append(_field("Latency (grains)", (current_index - info.head_index) % _UINT64))
    parts.append(_field("Latency (ns)", (now - common.last_write_time) % _UINT64))
    return "".join(parts)