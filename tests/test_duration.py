import math
import unittest
from datetime import UTC, datetime, timedelta

from movingaverage.core.temporal import Duration, Instant, as_duration, as_instant


class TestDuration(unittest.TestCase):
    def test_from_seconds_int(self):
        d = Duration.from_seconds(1)
        self.assertEqual(d.nanoseconds, 1_000_000_000)
        self.assertEqual(d.to_seconds(), 1.0)

    def test_from_seconds_float(self):
        d = Duration.from_seconds(0.5)
        self.assertEqual(d.to_seconds(), 0.5)

    def test_add_duration(self):
        a = Duration.from_seconds(1)
        b = Duration.from_seconds(2)
        self.assertEqual((a + b).to_seconds(), 3.0)

    def test_sub_duration(self):
        a = Duration.from_seconds(3)
        b = Duration.from_seconds(1)
        self.assertEqual((a - b).to_seconds(), 2.0)

    def test_negation_and_sign(self):
        d = -Duration.from_seconds(2)
        self.assertTrue(d.is_negative())
        self.assertFalse(Duration.ZERO.is_negative())

    def test_compare(self):
        self.assertTrue(Duration.from_seconds(1) < Duration.from_seconds(2))
        self.assertTrue(Duration.from_seconds(2) >= Duration.from_seconds(1))
        self.assertEqual(Duration.from_seconds(1), Duration(1_000_000_000))

    def test_timedelta_conversion(self):
        self.assertEqual(Duration.from_timedelta(timedelta(seconds=1.5)).nanoseconds, 1_500_000_000)
        self.assertEqual(Duration.from_timedelta(timedelta(seconds=-1)).nanoseconds, -1_000_000_000)
        self.assertEqual(Duration.from_seconds(90).to_timedelta(), timedelta(minutes=1, seconds=30))

    def test_as_duration(self):
        self.assertEqual(as_duration(2), Duration.from_seconds(2))
        self.assertEqual(as_duration(timedelta(seconds=2)), Duration.from_seconds(2))
        d = Duration.from_seconds(3)
        self.assertIs(as_duration(d), d)
        with self.assertRaises(TypeError):
            as_duration("2s")
        with self.assertRaises(TypeError):
            as_duration(True)

    def test_as_duration_rejects_non_finite(self):
        for value in (math.nan, math.inf, -math.inf):
            with self.assertRaises(ValueError):
                as_duration(value)


class TestInstant(unittest.TestCase):
    def test_instant_plus_duration(self):
        t = Instant.from_seconds(1)
        d = Duration.from_seconds(2)
        self.assertEqual((t + d).to_seconds(), 3.0)
        # also Duration + Instant should work
        self.assertEqual((d + t).to_seconds(), 3.0)

    def test_instant_minus_duration(self):
        t = Instant.from_seconds(3)
        d = Duration.from_seconds(1)
        self.assertEqual((t - d).to_seconds(), 2.0)

    def test_instant_minus_instant_is_duration(self):
        span = Instant.from_seconds(5) - Instant.from_seconds(2)
        self.assertIsInstance(span, Duration)
        self.assertEqual(span, Duration.from_seconds(3))

    def test_epoch_second_truncates_fraction(self):
        self.assertEqual(Instant(1_700_000_000_750_000_000).epoch_second, 1_700_000_000)
        self.assertEqual(Instant(-500_000_000).epoch_second, -1)

    def test_datetime_round_trip(self):
        dt = datetime(2020, 1, 1, tzinfo=UTC)
        t = Instant.from_datetime(dt)
        self.assertEqual(t, Instant.from_seconds(1_577_836_800))
        self.assertEqual(t.to_datetime(), dt)

    def test_naive_datetime_is_utc(self):
        self.assertEqual(
            Instant.from_datetime(datetime(2020, 1, 1)),
            Instant.from_datetime(datetime(2020, 1, 1, tzinfo=UTC)),
        )

    def test_ordering_and_hash(self):
        a = Instant(10)
        b = Instant(20)
        self.assertTrue(a < b <= Instant(20))
        self.assertTrue(b > a >= Instant(10))
        self.assertEqual(len({a, Instant(10), b}), 2)

    def test_as_instant(self):
        self.assertEqual(as_instant(1), Instant.from_seconds(1))
        with self.assertRaises(TypeError):
            as_instant("now")
        with self.assertRaises(ValueError):
            as_instant(math.nan)


if __name__ == "__main__":
    unittest.main()
