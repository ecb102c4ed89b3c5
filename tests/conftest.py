"""
Shared pytest fixtures for movingaverage tests.
"""

import logging

import pytest

from movingaverage import Instant, ManualClock

# 2023-11-14T22:13:20Z, a whole-second epoch instant
BASE_NANOS = 1_700_000_000_000_000_000


@pytest.fixture
def base_instant() -> Instant:
    """A fixed, whole-second starting time for reproducible timestamps."""
    return Instant(BASE_NANOS)


@pytest.fixture
def clock(base_instant) -> ManualClock:
    """A manual clock parked at ``base_instant``."""
    return ManualClock(base_instant)


@pytest.fixture(autouse=True)
def reset_movingaverage_logging():
    """Reset logging state before and after each test.

    Leaves the package logger with only a NullHandler and level NOTSET so
    handlers installed by one test never leak into the next.
    """
    logger = logging.getLogger("movingaverage")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
