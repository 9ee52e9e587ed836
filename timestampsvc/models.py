"""Message types exchanged with the timestamp service."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

NANOS_PER_SECOND = 1_000_000_000


class TimestampPrecision(IntEnum):
    """Resolution to which a timestamp's fractional second is kept."""

    UNSPECIFIED = 0
    SECONDS = 1
    MILLISECONDS = 2
    MICROSECONDS = 3
    NANOSECONDS = 4


@dataclass(frozen=True)
class Timestamp:
    """A point in time as whole seconds since the epoch plus nanoseconds."""

    seconds: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise ValueError(
                f"nanos must be in [0, {NANOS_PER_SECOND}), got {self.nanos}"
            )

    @classmethod
    def from_nanoseconds(cls, total_nanos: int) -> Timestamp:
        """Build a timestamp from nanoseconds since the epoch."""
        seconds, nanos = divmod(int(total_nanos), NANOS_PER_SECOND)
        return cls(seconds=seconds, nanos=nanos)

    def to_nanoseconds(self) -> int:
        """Return the timestamp as nanoseconds since the epoch."""
        return self.seconds * NANOS_PER_SECOND + self.nanos


@dataclass(frozen=True)
class TimestampMessage:
    """A timestamp together with where it came from and how it was taken."""

    timestamp: Timestamp = field(default_factory=Timestamp)
    source: str = ""
    message: str = ""
    timezone: str = ""
    precision: TimestampPrecision = TimestampPrecision.UNSPECIFIED


@dataclass(frozen=True)
class GetCurrentTimestampRequest:
    """Request for a single current timestamp."""

    source: str = ""
    timezone: str = ""
    precision: TimestampPrecision = TimestampPrecision.UNSPECIFIED


@dataclass(frozen=True)
class GetCurrentTimestampResponse:
    """The current timestamp and how long it took to produce."""

    timestamp_message: TimestampMessage = field(default_factory=TimestampMessage)
    processing_time_ns: int = 0


@dataclass(frozen=True)
class StreamTimestampsRequest:
    """Request for a stream of timestamps at a fixed interval."""

    source: str = ""
    interval_ms: int = 0
    max_count: int = 0
    timezone: str = ""
    precision: TimestampPrecision = TimestampPrecision.UNSPECIFIED