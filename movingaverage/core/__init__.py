"""Time primitives shared by the averaging types."""

from movingaverage.core.clock import SYSTEM_CLOCK, Clock, ManualClock, SystemClock
from movingaverage.core.temporal import Duration, Instant, as_duration, as_instant

__all__ = [
    "Clock",
    "Duration",
    "Instant",
    "ManualClock",
    "SYSTEM_CLOCK",
    "SystemClock",
    "as_duration",
    "as_instant",
]
