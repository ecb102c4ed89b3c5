"""Smoothing a noisy sensor reading with MovingAverage.

This example shows:
1. A count-based moving average following a slowly drifting signal
2. A time-based average over the last few seconds of samples
3. Exporting the window to a DataFrame for inspection

Samples are timestamped by a ManualClock that advances a fixed step per
reading, so the output is reproducible.

```
sensor -> add_value() -> [window of N samples] -> get_average()
                                              \-> get_time_based_average_of(5s)
```
"""

from __future__ import annotations

import math
import random
from pathlib import Path

from movingaverage import Duration, Instant, ManualClock, MovingAverage


def synthetic_signal(t: float, rng: random.Random) -> float:
    """A slow sine drift plus gaussian noise."""
    return 20.0 + 5.0 * math.sin(t / 30.0) + rng.gauss(0.0, 1.5)


def run(samples: int, period: int, step_s: float, seed: int) -> tuple[list[float], list[float], list[float]]:
    rng = random.Random(seed)
    clock = ManualClock(Instant.from_seconds(1_700_000_000))
    avg = MovingAverage(period=period, clock=clock)

    times: list[float] = []
    raw: list[float] = []
    smoothed: list[float] = []
    for i in range(samples):
        t = i * step_s
        value = synthetic_signal(t, rng)
        avg.add_value(value)
        times.append(t)
        raw.append(value)
        smoothed.append(avg.get_average())
        clock.advance(step_s)

    print(avg)
    print(f"  last {period} samples average: {avg.get_average():.3f}")
    print(f"  last 5s average:              {avg.get_time_based_average_of(Duration.from_seconds(5)):.3f}")
    span = avg.get_time_span(exact=True)
    print(f"  window span:                  {span.to_seconds():.1f}s")
    print(avg.to_dataframe().tail())
    return times, raw, smoothed


def visualize(times: list[float], raw: list[float], smoothed: list[float], output_dir: Path) -> None:
    import matplotlib.pyplot as plt

    output_dir.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(times, raw, label="raw", alpha=0.4)
    ax.plot(times, smoothed, label="moving average", linewidth=2)
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Reading")
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(output_dir / "sensor_smoothing.png", dpi=150)
    plt.close(fig)
    print(f"Saved: {output_dir / 'sensor_smoothing.png'}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Smooth a synthetic sensor signal with a moving average")
    parser.add_argument("--samples", type=int, default=300, help="Number of readings")
    parser.add_argument("--period", type=int, default=10, help="Window size in samples")
    parser.add_argument("--step", type=float, default=1.0, help="Seconds between readings")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--plot", action="store_true", help="Save a PNG (requires matplotlib)")
    parser.add_argument("--output", type=Path, default=Path("output/sensor_smoothing"), help="Plot directory")
    args = parser.parse_args()

    times, raw, smoothed = run(args.samples, args.period, args.step, args.seed)
    if args.plot:
        visualize(times, raw, smoothed, args.output)
