# mxlkit

Building blocks for exchanging media between processes as flows of grains
(video, data) or continuous sample buffers (audio). Everything here is pure
Python with no dependencies beyond the standard library; Python 3.10 or later.

| Module | What it holds |
| --- | --- |
| `mxlkit.timing` | `Clock`, `Timepoint`, `Duration`, clock readings |
| `mxlkit.rational` | `Rational`, with cross-multiplied equality |
| `mxlkit.dataformat` | `DataFormat` and its classification helpers |
| `mxlkit.mediatime` | TAI time ↔ head index conversions, sleeping |
| `mxlkit.status` | `Status`, the `MxlError` exception, `get_version()` |
| `mxlkit.flowinfo` | `FlowInfo` and its parts, a 4096-byte binary header |
| `mxlkit.grain` | `GrainInfo` (4096-byte header), `PayloadLocation`, buffer slices |
| `mxlkit.info` | text reports of a `FlowInfo` |

## Timing

```python
from mxlkit.timing import Clock, current_time, from_milliseconds

now = current_time(Clock.TAI)
later = now + from_milliseconds(40)
print((later - now).in_milliseconds())   # 40.0
```

`Timepoint` and `Duration` hold integer nanoseconds. Adding or subtracting a
duration never takes a time point below zero; a zero time point is falsy and
is what `current_time` returns when a clock cannot be read. Where the system
has no TAI clock, the realtime clock is read and `clock_offset(Clock.TAI)`
adds 37 seconds. `to_timespec()` gives a `(seconds, nanoseconds)` pair, and
`as_timepoint` / `as_duration` build values from one.

## Head indices

Index 0 is the start of the epoch. For an edit rate of 30000/1001:

```python
from mxlkit.rational import Rational
from mxlkit.mediatime import (
    UNDEFINED_INDEX,
    get_current_head_index,
    get_ns_until_head_index,
    head_index_to_timestamp,
    sleep_for_ns,
    timestamp_to_head_index,
)

rate = Rational(30000, 1001)

timestamp_to_head_index(rate, 0)           # 0
head_index_to_timestamp(rate, 1)           # 33366666
timestamp_to_head_index(rate, 33366666)    # 1

index = get_current_head_index(rate)
sleep_for_ns(get_ns_until_head_index(index + 1, rate))
```

An edit rate that is `None` or has a zero numerator or denominator yields
`UNDEFINED_INDEX` (2**64 - 1) from every conversion. `get_time()` returns the
current TAI time in nanoseconds.

## Data formats

```python
from mxlkit.dataformat import DataFormat, is_continuous_data_format, is_discrete_data_format

is_discrete_data_format(DataFormat.VIDEO)      # True
is_continuous_data_format(DataFormat.AUDIO)    # True
```

`is_valid_data_format` accepts video, audio, data and mux;
`is_supported_data_format` accepts video, audio and data.

## Flow and grain headers

`FlowInfo` is the binary header kept at the start of a flow's shared data.
It carries either a `DiscreteFlowInfo` (grain rate, grain count, head index)
or a `ContinuousFlowInfo` (sample rate, channels, buffer length, batch sizes,
head index); `from_bytes` picks which by the format in `common`.

```python
from mxlkit.flowinfo import FlowInfo

header = FlowInfo.from_bytes(raw)   # raw: 4096 bytes of a flow header
assert header.to_bytes() == raw
```

`GrainInfo` does the same for a grain header. `GRAIN_FLAG_INVALID` marks a
grain whose payload must not be used. `WrappedBufferSlice` describes a range
in a ring buffer split at the wrap point; `total_size()` adds both fragments
and `bytes()` joins them.

Fields that do not fit their fixed size raise `ValueError`, as does parsing
fewer bytes than a header needs.

## Reports

```python
from mxlkit.info import format_flow_info, format_name

format_name(1)                      # 'Video'
print(format_flow_info(header, now=ts))
```

The report lists identifier, version, size, read/write times, format, flags,
the format-specific fields and the latency in grains and nanoseconds relative
to `now` (the current TAI time when omitted).

## Status and version

`Status` enumerates operation outcomes; `MxlError(status, message)` carries
one. `get_version()` returns a `VersionType` whose `str()` is `0.6.0.0`.

## What this package does not do

It does not create, open or delete flows, manage shared-memory segments,
watch a domain directory, or provide flow readers and writers; nor does it
ship a command-line tool. It supplies the timing arithmetic, the data model
and the binary header layouts such components work with.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.