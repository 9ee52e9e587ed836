# timestampsvc

A small timestamp service library. It returns the current time as a timestamp
message with a chosen precision and a timezone label. It can also stream such
messages at a fixed interval.

## Installation

```
pip install .
```

## Usage

```python
from timestampsvc.models import (
    GetCurrentTimestampRequest,
    StreamTimestampsRequest,
    TimestampPrecision,
)
from timestampsvc.service import TimestampService

service = TimestampService()

response = service.get_current_timestamp(
    GetCurrentTimestampRequest(
        source="sensor-a",
        precision=TimestampPrecision.MILLISECONDS,
    )
)
message = response.timestamp_message
print(message.timestamp.seconds, message.timestamp.nanos, message.timezone)
print("processed in", response.processing_time_ns, "ns")

request = StreamTimestampsRequest(source="sensor-a", interval_ms=100, max_count=3)
for msg in service.stream_timestamps(request):
    print(msg.message, msg.timestamp.to_nanoseconds())
```

## Messages

The module `timestampsvc.models` holds the message types. All of them are
frozen dataclasses:

- `TimestampPrecision` is an `IntEnum` with these members: `UNSPECIFIED`,
  `SECONDS`, `MILLISECONDS`, `MICROSECONDS` and `NANOSECONDS`.
- `Timestamp(seconds, nanos)` stores whole seconds since the epoch and
  nanoseconds. It raises `ValueError` if `nanos` is outside `[0, 1_000_000_000)`.
  - `Timestamp.from_nanoseconds(total)` builds a timestamp from a count of
    nanoseconds since the epoch.
  - `to_nanoseconds()` returns that count.
- `TimestampMessage` holds these fields: `timestamp`, `source`, `message`,
  `timezone` and `precision`.
- `GetCurrentTimestampRequest` and `GetCurrentTimestampResponse` are the
  request and response for a single timestamp. The response holds the
  `timestamp_message` and the `processing_time_ns`.
- `StreamTimestampsRequest` holds these fields: `source`, `interval_ms`,
  `max_count`, `timezone` and `precision`.

### Defaults

- A precision of `TimestampPrecision.UNSPECIFIED` is treated as nanoseconds.
- An empty timezone becomes `"UTC"`.
- In a stream, an interval of zero or less becomes 1000 ms.
- In a stream, a `max_count` of zero or less streams until the stream is
  cancelled.

Single responses carry the text `"Current timestamp response"`. Streamed
messages carry the texts `"Stream timestamp #1"`, `"Stream timestamp #2"`, and
so on.

### Precision

`timestampsvc.service.truncate_nanos(nanos, precision)` drops the part of a
fractional second that is finer than the chosen precision:

- `SECONDS` gives `0`.
- `MILLISECONDS` and `MICROSECONDS` round down to whole units.
- Any other precision keeps the value as it is.

### Cancelling a stream

`stream_timestamps` takes an optional `is_cancelled` callable. It is checked
before each message, and the stream ends once it returns true. Closing the
generator also ends the stream. After each message the stream sleeps for the
interval.

### Testing with a fixed clock

`TimestampService(clock, monotonic, sleep)` takes three optional functions:

- `clock` is the wall clock in nanoseconds. It defaults to `time.time_ns`.
- `monotonic` is a monotonic clock in nanoseconds. It defaults to
  `time.perf_counter_ns`.
- `sleep` is a sleep function that takes seconds. It defaults to `time.sleep`.

A test can pass fixed values for each of these.

`system_timezone()` always returns `"UTC"`.

## What it does not do

This package is a library only:

- It does not open a network port or run a server.
- It has no RPC layer, health check or command-line program.
- Requests are plain Python objects passed to `TimestampService` methods in the
  same process.
- The timezone is only a label copied into each message. Times are not
  converted to it.

## Running the tests

```
pip install .[test]
pytest
```