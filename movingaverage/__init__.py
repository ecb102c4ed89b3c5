"""Moving averages over timestamped samples.

Re-exports the public API so callers can write::

    from movingaverage import MovingAverage, TimeData
"""

import logging

from movingaverage.core.clock import SYSTEM_CLOCK, Clock, ManualClock, SystemClock
from movingaverage.core.temporal import Duration, Instant
from movingaverage.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from movingaverage.moving_average import DEFAULT_PERIOD, MAX_PERIOD, MovingAverage
from movingaverage.time_data import TimeData

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core types
    "MovingAverage",
    "TimeData",
    "DEFAULT_PERIOD",
    "MAX_PERIOD",
    # Time
    "Clock",
    "Duration",
    "Instant",
    "ManualClock",
    "SYSTEM_CLOCK",
    "SystemClock",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
