"""The timestamp service: single timestamps and timed streams of them."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator

from .models import (
    NANOS_PER_SECOND,
    GetCurrentTimestampRequest,
    GetCurrentTimestampResponse,
    StreamTimestampsRequest,
    Timestamp,
    TimestampMessage,
    TimestampPrecision,
)

DEFAULT_TIMEZONE = "UTC"
DEFAULT_INTERVAL_MS = 1000

_UNIT_NANOS = {
    TimestampPrecision.SECONDS: NANOS_PER_SECOND,
    TimestampPrecision.MILLISECONDS: 1_000_000,
    TimestampPrecision.MICROSECONDS: 1_000,
}


def truncate_nanos(nanos: int, precision: TimestampPrecision) -> int:
    """Drop the part of a fractional second finer than ``precision``."""
    unit = _UNIT_NANOS.get(precision)
    if unit is None:
        return nanos
    if unit == NANOS_PER_SECOND:
        return 0
    return (nanos // unit) * unit


def _effective_precision(precision: TimestampPrecision) -> TimestampPrecision:
    if precision == TimestampPrecision.UNSPECIFIED:
        return TimestampPrecision.NANOSECONDS
    return TimestampPrecision(precision)


class TimestampService:
    """Produces timestamp messages from a wall clock."""

    def __init__(
        self,
        clock: Callable[[], int] | None = None,
        monotonic: Callable[[], int] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._clock = clock or time.time_ns
        self._monotonic = monotonic or time.perf_counter_ns
        self._sleep = sleep or time.sleep

    def get_current_timestamp(
        self, request: GetCurrentTimestampRequest
    ) -> GetCurrentTimestampResponse:
        """Return the current timestamp and the time taken to build it."""
        start = self._monotonic()
        message = self.create_timestamp_message(
            request.source,
            "Current timestamp response",
            request.timezone or DEFAULT_TIMEZONE,
            _effective_precision(request.precision),
        )
        end = self._monotonic()
        return GetCurrentTimestampResponse(
            timestamp_message=message, processing_time_ns=end - start
        )

    def stream_timestamps(
        self,
        request: StreamTimestampsRequest,
        is_cancelled: Callable[[], bool] | None = None,
    ) -> Iterator[TimestampMessage]:
        """Yield timestamps every interval until cancelled or the count is met."""
        interval_ms = request.interval_ms if request.interval_ms > 0 else DEFAULT_INTERVAL_MS
        precision = _effective_precision(request.precision)
        timezone = request.timezone or DEFAULT_TIMEZONE
        cancelled = is_cancelled or (lambda: False)

        count = 0
        while not cancelled():
            if request.max_count > 0 and count >= request.max_count:
                break
            yield self.create_timestamp_message(
                request.source,
                f"Stream timestamp #{count + 1}",
                timezone,
                precision,
            )
            count += 1
            self._sleep(interval_ms / 1000)

    def create_timestamp_message(
        self,
        source: str,
        message: str = "",
        timezone: str = DEFAULT_TIMEZONE,
        precision: TimestampPrecision = TimestampPrecision.NANOSECONDS,
    ) -> TimestampMessage:
        """Build a message stamped with the clock's current time."""
        now = Timestamp.from_nanoseconds(self._clock())
        stamp = Timestamp(now.seconds, truncate_nanos(now.nanos, precision))
        return TimestampMessage(
            timestamp=stamp,
            source=source,
            message=message,
            timezone=timezone,
            precision=precision,
        )

    def system_timezone(self) -> str:
        """Return the timezone the service reports for itself."""
        return DEFAULT_TIMEZONE