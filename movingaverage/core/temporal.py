"""Nanosecond-resolution time values for sample timestamps.

Instant is a point in time measured from the Unix epoch; Duration is a
signed span between two instants. Both store integer nanoseconds so that
ordering and equality are exact. Plain ints and floats are accepted
wherever a span is expected and are interpreted as seconds.
"""

from __future__ import annotations

import math
import time
from datetime import UTC, datetime, timedelta
from typing import Union

_NANOS_PER_SECOND = 1_000_000_000


def _seconds_to_nanos(seconds: int | float) -> int:
    if isinstance(seconds, int):
        return seconds * _NANOS_PER_SECOND
    return int(round(seconds * _NANOS_PER_SECOND))


class Duration:
    """A signed span of time."""

    __slots__ = ("nanoseconds",)

    ZERO: Duration

    def __init__(self, nanoseconds: int):
        self.nanoseconds = int(nanoseconds)

    @classmethod
    def from_seconds(cls, seconds: int | float) -> Duration:
        return cls(_seconds_to_nanos(seconds))

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Duration:
        return cls((td.days * 86_400 + td.seconds) * _NANOS_PER_SECOND + td.microseconds * 1_000)

    def to_seconds(self) -> float:
        return float(self.nanoseconds) / _NANOS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        return timedelta(microseconds=self.nanoseconds // 1_000)

    def is_negative(self) -> bool:
        return self.nanoseconds < 0

    def __add__(self, other: Union[Duration, Instant, int, float]):
        if isinstance(other, Duration):
            return Duration(self.nanoseconds + other.nanoseconds)
        if isinstance(other, Instant):
            return Instant(other.nanoseconds + self.nanoseconds)
        if isinstance(other, (int, float)):
            return Duration(self.nanoseconds + _seconds_to_nanos(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union[Duration, int, float]):
        if isinstance(other, Duration):
            return Duration(self.nanoseconds - other.nanoseconds)
        if isinstance(other, (int, float)):
            return Duration(self.nanoseconds - _seconds_to_nanos(other))
        return NotImplemented

    def __neg__(self) -> Duration:
        return Duration(-self.nanoseconds)

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds == other.nanoseconds

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds < other.nanoseconds

    def __le__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds <= other.nanoseconds

    def __gt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds > other.nanoseconds

    def __ge__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds >= other.nanoseconds

    def __hash__(self) -> int:
        return hash(("Duration", self.nanoseconds))

    def __repr__(self) -> str:
        return f"Duration({self.to_seconds()!r}s)"


Duration.ZERO = Duration(0)


class Instant:
    """A point in time, in nanoseconds since the Unix epoch."""

    __slots__ = ("nanoseconds",)

    Epoch: Instant

    def __init__(self, nanoseconds: int):
        self.nanoseconds = int(nanoseconds)

    @classmethod
    def from_seconds(cls, seconds: int | float) -> Instant:
        return cls(_seconds_to_nanos(seconds))

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Convert a datetime. Naive datetimes are taken to be UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return cls.Epoch + Duration.from_timedelta(dt - datetime(1970, 1, 1, tzinfo=UTC))

    @classmethod
    def now(cls) -> Instant:
        return cls(time.time_ns())

    def to_seconds(self) -> float:
        return float(self.nanoseconds) / _NANOS_PER_SECOND

    def to_datetime(self) -> datetime:
        return datetime(1970, 1, 1, tzinfo=UTC) + timedelta(microseconds=self.nanoseconds // 1_000)

    @property
    def epoch_second(self) -> int:
        """Whole seconds since the epoch, rounded towards negative infinity."""
        return self.nanoseconds // _NANOS_PER_SECOND

    def __add__(self, other: Union[Duration, int, float]):
        if isinstance(other, Duration):
            return Instant(self.nanoseconds + other.nanoseconds)
        if isinstance(other, (int, float)):
            return Instant(self.nanoseconds + _seconds_to_nanos(other))
        return NotImplemented

    def __sub__(self, other: Union[Instant, Duration, int, float]):
        if isinstance(other, Instant):
            return Duration(self.nanoseconds - other.nanoseconds)
        if isinstance(other, Duration):
            return Instant(self.nanoseconds - other.nanoseconds)
        if isinstance(other, (int, float)):
            return Instant(self.nanoseconds - _seconds_to_nanos(other))
        return NotImplemented

    # Equality
    def __eq__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self.nanoseconds == other.nanoseconds

    # Ordering
    def __lt__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self.nanoseconds < other.nanoseconds

    def __le__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self.nanoseconds <= other.nanoseconds

    def __gt__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self.nanoseconds > other.nanoseconds

    def __ge__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self.nanoseconds >= other.nanoseconds

    def __hash__(self) -> int:
        return hash(("Instant", self.nanoseconds))

    def __repr__(self) -> str:
        return f"Instant({self.to_seconds()!r}s)"


Instant.Epoch = Instant(0)


def as_duration(value: Duration | timedelta | int | float) -> Duration:
    """Coerce a Duration, timedelta or number of seconds to a Duration.

    Raises:
        TypeError: If ``value`` is none of the accepted types.
        ValueError: If ``value`` is a NaN or infinite number of seconds.
    """
    if isinstance(value, Duration):
        return value
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    if isinstance(value, bool):
        raise TypeError("Expected a duration, got bool")
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError(f"duration must be finite, got {value!r}")
        return Duration.from_seconds(value)
    raise TypeError(f"Expected Duration, timedelta or seconds, got {type(value).__name__}")


def as_instant(value: Instant | datetime | int | float) -> Instant:
    """Coerce an Instant, datetime or epoch seconds to an Instant.

    Raises:
        TypeError: If ``value`` is none of the accepted types.
    """
    if isinstance(value, Instant):
        return value
    if isinstance(value, datetime):
        return Instant.from_datetime(value)
    if isinstance(value, bool):
        raise TypeError("Expected a timestamp, got bool")
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError(f"timestamp must be finite, got {value!r}")
        return Instant.from_seconds(value)
    raise TypeError(f"Expected Instant, datetime or epoch seconds, got {type(value).__name__}")
