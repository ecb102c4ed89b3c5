"""Tabular export of sample windows."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from movingaverage.time_data import TimeData

TIMESTAMP = "timestamp"
TIME_NANOS = "time_nanos"
VALUE = "value"


def window_to_dataframe(samples: Iterable[TimeData]) -> pd.DataFrame:
    """Build a DataFrame with one row per sample, in iteration order.

    Columns are ``timestamp`` (UTC datetime64), ``time_nanos`` (int64
    nanoseconds since the epoch) and ``value`` (float64).
    """
    samples = list(samples)
    time_nanos = [s.timestamp.nanoseconds for s in samples]
    return pd.DataFrame({
        TIMESTAMP: pd.to_datetime(pd.Series(time_nanos, dtype="int64"), unit="ns", utc=True),
        TIME_NANOS: pd.Series(time_nanos, dtype="int64"),
        VALUE: pd.Series([s.value for s in samples], dtype="float64"),
    })
