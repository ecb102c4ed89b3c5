"""Timestamped scalar samples."""

from __future__ import annotations

from dataclasses import dataclass, field

from movingaverage.core.clock import SYSTEM_CLOCK, Clock
from movingaverage.core.temporal import Instant, as_instant


def _now() -> Instant:
    return SYSTEM_CLOCK.now


@dataclass(frozen=True)
class TimeData:
    """A value captured at a point in time.

    Attributes:
        value: The sampled value.
        timestamp: When the value was captured. Defaults to the current
            wall-clock time. Datetimes and epoch seconds are converted
            to Instant.
    """

    value: float
    timestamp: Instant = field(default_factory=_now)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))
        if not isinstance(self.timestamp, Instant):
            object.__setattr__(self, "timestamp", as_instant(self.timestamp))

    @classmethod
    def capture(cls, value: float, clock: Clock = SYSTEM_CLOCK) -> TimeData:
        """Create a sample stamped with ``clock``'s current time."""
        return cls(value, clock.now)

    def get_value(self) -> float:
        return self.value

    def get_timestamp(self) -> Instant:
        return self.timestamp
