import pytest

from timestampsvc.models import (
    GetCurrentTimestampRequest,
    GetCurrentTimestampResponse,
    StreamTimestampsRequest,
    Timestamp,
    TimestampMessage,
    TimestampPrecision,
)


@pytest.mark.parametrize(
    "total",
    [0, 1, 999_999_999, 1_000_000_000, 1_700_000_000_123_456_789, -1, -1_500_000_000],
)
def test_nanosecond_round_trip(total):
    assert Timestamp.from_nanoseconds(total).to_nanoseconds() == total


@pytest.mark.parametrize("total", [0, 5, 1_700_000_000_123_456_789, -7])
def test_from_nanoseconds_keeps_nanos_in_range(total):
    ts = Timestamp.from_nanoseconds(total)
    assert 0 <= ts.nanos < 1_000_000_000


def test_from_nanoseconds_splits_seconds_and_nanos():
    ts = Timestamp.from_nanoseconds(1_700_000_000_123_456_789)
    assert ts == Timestamp(seconds=1_700_000_000, nanos=123_456_789)


@pytest.mark.parametrize("nanos", [-1, 1_000_000_000])
def test_out_of_range_nanos_rejected(nanos):
    with pytest.raises(ValueError):
        Timestamp(seconds=0, nanos=nanos)


def test_precision_lookup_by_wire_value_is_ordered():
    looked_up = [TimestampPrecision(value) for value in range(5)]
    assert looked_up == [
        TimestampPrecision.UNSPECIFIED,
        TimestampPrecision.SECONDS,
        TimestampPrecision.MILLISECONDS,
        TimestampPrecision.MICROSECONDS,
        TimestampPrecision.NANOSECONDS,
    ]
    assert looked_up == sorted(looked_up)


def test_request_keeps_given_precision():
    request = GetCurrentTimestampRequest(precision=TimestampPrecision.MILLISECONDS)
    assert request.precision == TimestampPrecision.MILLISECONDS


def test_request_defaults_are_empty():
    request = GetCurrentTimestampRequest()
    assert (request.source, request.timezone, request.precision) == (
        "",
        "",
        TimestampPrecision.UNSPECIFIED,
    )


def test_stream_request_defaults_are_zero():
    request = StreamTimestampsRequest(source="clock")
    assert (request.interval_ms, request.max_count) == (0, 0)
    assert request.source == "clock"


def test_response_default_message_is_epoch():
    response = GetCurrentTimestampResponse()
    assert response.timestamp_message == TimestampMessage()
    assert response.timestamp_message.timestamp.to_nanoseconds() == 0
    assert response.processing_time_ns == 0