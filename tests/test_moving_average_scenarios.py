"""End-to-end scenarios for MovingAverage driven by a manual clock.

These mirror how a dashboard polls the averager: readings arrive once per
tick, and the display reads both the sample-count average and the average
over the last few seconds.
"""

import pytest

from movingaverage import Duration, ManualClock, MovingAverage, TimeData


def test_window_of_three_keeps_last_three(clock):
    avg = MovingAverage(3, clock=clock)
    for v in (1.0, 2.0, 3.0, 4.0):
        avg.add_value(v)
        clock.advance(1)

    assert [s.value for s in avg.window] == [2.0, 3.0, 4.0]
    assert avg.get_average() == 3.0
    assert not avg.is_filling()


def test_fresh_instance_reports_nothing():
    avg = MovingAverage()
    assert avg.get_average() == 0
    assert avg.get_first_entry() is None
    assert avg.get_time_span() is None


def test_negative_duration_fails_fast(clock):
    avg = MovingAverage(clock=clock)
    avg.add_value(1.0)
    with pytest.raises(ValueError):
        avg.get_time_based_average_of(Duration.from_seconds(-2))


def test_time_based_average_over_last_two_seconds(base_instant):
    clock = ManualClock(base_instant)
    avg = MovingAverage(10, clock=clock)
    for v in (10.0, 20.0, 30.0, 40.0, 50.0):
        avg.add_value(v)
        clock.advance(1)
    # now = t0 + 5s, so a 2s look-back keeps only the sample taken at t0 + 4s
    assert clock.now == base_instant + Duration.from_seconds(5)

    assert avg.get_time_based_average_of(Duration.from_seconds(2)) == 50.0
    assert avg.get_time_based_average_of(Duration.from_seconds(2.5)) == 45.0
    assert avg.get_time_based_average_of(Duration.from_seconds(60)) == 30.0


def test_time_based_average_changes_as_time_passes(clock):
    avg = MovingAverage(10, clock=clock)
    avg.add_value(5.0)
    clock.advance(1)
    avg.add_value(15.0)

    assert avg.get_time_based_average_of(Duration.from_seconds(3)) == 10.0
    clock.advance(2.5)
    assert avg.get_time_based_average_of(Duration.from_seconds(3)) == 15.0
    clock.advance(10)
    assert avg.get_time_based_average_of(Duration.from_seconds(3)) == 0.0
    # count-based average does not depend on the clock
    assert avg.get_average() == 10.0


def test_resizing_discards_history(clock):
    avg = MovingAverage(5, clock=clock)
    for v in range(5):
        avg.add_value(float(v))
        clock.advance(1)
    assert avg.get_average() == 2.0

    avg.set_period(2)
    assert avg.is_filling()
    assert avg.get_average() == 0.0

    avg.add_list_of_data([TimeData(8.0, clock.now), TimeData(6.0, clock.now)])
    assert avg.get_average() == 7.0
    assert avg.get_time_span() == Duration.ZERO


def test_span_grows_until_window_full_then_slides(clock, base_instant):
    avg = MovingAverage(3, clock=clock)
    spans = []
    for v in range(6):
        avg.add_value(float(v))
        spans.append(avg.get_time_span().to_seconds())
        clock.advance(1)

    assert spans == [0.0, 1.0, 2.0, 2.0, 2.0, 2.0]
    assert avg.first_entry.timestamp == base_instant + Duration.from_seconds(3)
