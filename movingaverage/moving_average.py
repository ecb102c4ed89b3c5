"""Count-bounded moving average over timestamped samples.

MovingAverage keeps the most recent ``period`` samples in a FIFO window and
a running sum of their values, so the plain average is available in
constant time. It also offers a time-based average that scans the window
for samples newer than a given duration.

Example:
    >>> avg = MovingAverage(period=3)
    >>> for v in (1.0, 2.0, 3.0, 4.0):
    ...     avg.add_value(v)
    >>> avg.get_average()
    3.0
"""

from __future__ import annotations

import logging
import math
import threading
from collections import deque
from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from movingaverage.core.clock import SYSTEM_CLOCK, Clock
from movingaverage.core.temporal import Duration, Instant, as_duration, as_instant
from movingaverage.time_data import TimeData

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)

MAX_PERIOD = 2_073_600
DEFAULT_PERIOD = 10


def _clamp(min_value: int, max_value: int, value: int) -> int:
    return max(min_value, min(max_value, int(value)))


class MovingAverage:
    """Sliding window of samples with a running sum.

    The window holds at most ``period`` samples; adding one more evicts the
    oldest. All window and sum updates happen under a single lock, so
    concurrent ``add_*`` calls leave the sum consistent with the window.

    Args:
        period: Maximum number of samples to keep. Clamped to
            ``[0, MAX_PERIOD]``.
        clock: Source of "now" for ``add_value`` and time-based averages.
    """

    def __init__(self, period: int = DEFAULT_PERIOD, clock: Clock = SYSTEM_CLOCK):
        self._period = _clamp(0, MAX_PERIOD, period)
        self._clock = clock
        self._window: deque[TimeData] = deque()
        self._sum = 0.0
        self._lock = threading.Lock()

    # === Mutation ===

    def add_data(self, data: TimeData) -> None:
        """Append a sample, evicting the oldest one if the window is full."""
        with self._lock:
            self._append(data)

    def add_value(self, value: float) -> None:
        """Append ``value`` stamped with the clock's current time."""
        self.add_data(TimeData.capture(value, self._clock))

    def add_list_of_data(self, list_of_data: Iterable[TimeData]) -> None:
        """Append each sample in iteration order, as one atomic batch."""
        samples = list(list_of_data)
        with self._lock:
            for data in samples:
                self._append(data)

    def _append(self, data: TimeData) -> None:
        self._sum += data.value
        self._window.append(data)
        if len(self._window) > self._period:
            evicted = self._window.popleft()
            self._sum -= evicted.value
            if not math.isfinite(evicted.value):
                # inf - inf leaves NaN in the running sum until the next reset
                logger.debug("Evicted non-finite value %r; running sum is now %r", evicted.value, self._sum)

    def reset(self) -> None:
        """Drop every sample and zero the running sum."""
        with self._lock:
            self._window.clear()
            self._sum = 0.0
        logger.debug("Moving average reset (period=%d)", self._period)

    # === Window access ===

    @property
    def window(self) -> list[TimeData]:
        """Copy of the window contents, oldest first."""
        with self._lock:
            return list(self._window)

    def get_window(self) -> list[TimeData]:
        return self.window

    @property
    def first_entry(self) -> TimeData | None:
        """Oldest sample in the window, or None if empty."""
        with self._lock:
            return self._window[0] if self._window else None

    @property
    def last_entry(self) -> TimeData | None:
        """Newest sample in the window, or None if empty."""
        with self._lock:
            return self._window[-1] if self._window else None

    def get_first_entry(self) -> TimeData | None:
        return self.first_entry

    def get_last_entry(self) -> TimeData | None:
        return self.last_entry

    def get_time_span(self, exact: bool = False) -> Duration | None:
        """Time covered by the window, or None if empty.

        By default the span is the newest timestamp minus the *whole epoch
        seconds* of the oldest timestamp, matching the historical
        behaviour of this class: the result over-reports by the oldest
        sample's sub-second fraction. Pass ``exact=True`` for the plain
        difference between the two timestamps.
        """
        with self._lock:
            if not self._window:
                return None
            first = self._window[0]
            last = self._window[-1]
        if exact:
            return last.timestamp - first.timestamp
        return last.timestamp - Instant.from_seconds(first.timestamp.epoch_second)

    # === Averages ===

    @property
    def sum(self) -> float:
        """Running sum of the values in the window."""
        with self._lock:
            return self._sum

    def get_average(self) -> float:
        """Mean of the window values. Returns 0.0 if empty."""
        with self._lock:
            if not self._window:
                return 0.0
            return self._sum / len(self._window)

    def get_time_based_average_of(
        self,
        duration: Duration | timedelta | float,
        now: Instant | datetime | float | None = None,
    ) -> float:
        """Mean of the samples captured within ``duration`` of ``now``.

        A sample counts if its timestamp is strictly after
        ``now - duration``.

        Args:
            duration: Length of the look-back window. Seconds if numeric.
            now: Reference time as an Instant, datetime or epoch seconds.
                Defaults to the clock's current time.

        Returns:
            The mean of the qualifying values, or 0.0 if none qualify.

        Raises:
            ValueError: If ``duration`` is negative or not finite.
        """
        duration = as_duration(duration)
        if duration.is_negative():
            raise ValueError(f"duration must be >= 0, got {duration.to_seconds()}s")
        now = self._clock.now if now is None else as_instant(now)
        cutoff = now - duration

        total = 0.0
        count = 0
        with self._lock:
            for data in self._window:
                if data.timestamp > cutoff:
                    total += data.value
                    count += 1
        return total / count if count > 0 else 0.0

    # === Period ===

    @property
    def period(self) -> int:
        """Maximum number of samples kept in the window."""
        return self._period

    @period.setter
    def period(self, period: int) -> None:
        self.set_period(period)

    def get_period(self) -> int:
        return self._period

    def set_period(self, period: int) -> None:
        """Change the window size. Discards every sample currently held."""
        clamped = _clamp(0, MAX_PERIOD, period)
        if clamped != period:
            logger.debug("Requested period %r clamped to %d", period, clamped)
        with self._lock:
            self._period = clamped
            self._window.clear()
            self._sum = 0.0
        logger.debug("Moving average period set to %d; window cleared", clamped)

    def is_filling(self) -> bool:
        """True until the window holds ``period`` samples."""
        with self._lock:
            return len(self._window) < self._period

    # === Export ===

    def to_dataframe(self) -> pd.DataFrame:
        """Window snapshot as a DataFrame (see ``window_to_dataframe``)."""
        from movingaverage.export import window_to_dataframe

        return window_to_dataframe(self.window)

    # === Container protocol ===

    def __len__(self) -> int:
        with self._lock:
            return len(self._window)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[TimeData]:
        return iter(self.window)

    def __repr__(self) -> str:
        return (
            f"MovingAverage(period={self._period}, "
            f"samples={len(self._window)}, "
            f"average={self.get_average()!r})"
        )
