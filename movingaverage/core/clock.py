"""Sources of the current time.

Anything that needs "now" (default sample timestamps, time-based averages)
reads it from a Clock so that tests can substitute a ManualClock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from movingaverage.core.temporal import Duration, Instant, as_duration


class Clock(ABC):
    """Provides the current time as an Instant."""

    @property
    @abstractmethod
    def now(self) -> Instant:
        ...


class SystemClock(Clock):
    """Reads the wall clock on every access."""

    @property
    def now(self) -> Instant:
        return Instant.now()

    def __repr__(self) -> str:
        return "SystemClock()"


class ManualClock(Clock):
    """A clock that only moves when told to."""

    def __init__(self, start_time: Instant = Instant.Epoch):
        self._current_time = start_time

    @property
    def now(self) -> Instant:
        return self._current_time

    def update(self, time: Instant) -> None:
        self._current_time = time

    def advance(self, duration: Duration | float) -> Instant:
        """Move the clock forward and return the new time."""
        self._current_time = self._current_time + as_duration(duration)
        return self._current_time

    def __repr__(self) -> str:
        return f"ManualClock(now={self._current_time!r})"


SYSTEM_CLOCK = SystemClock()
