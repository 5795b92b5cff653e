#!/usr/bin/env python3
"""Performance benchmark script for the HF scoring engine."""

import time
import sys
from pathlib import Path
from datetime import datetime, timedelta, timezone
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hfscore.data.models import Bar
from hfscore.engine import ScoringEngine


def generate_sample_bars(count: int) -> List[Bar]:
    """Generate a zig-zag bar series for benchmarking."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    bars = []
    for i in range(count):
        close = 1.1000 + 0.0010 * ((i % 40) - 20) / 20.0
        bars.append(Bar(
            open_time=start + timedelta(minutes=i),
            open=close - 0.0001,
            high=close + 0.0004,
            low=close - 0.0004,
            close=close,
            volume_proxy=100.0 + (i % 7) * 10
        ))
    return bars


def benchmark_advance(count: int) -> float:
    """Return committed bars per second."""
    bars = generate_sample_bars(count)
    engine = ScoringEngine()

    start = time.perf_counter()
    engine.replay(bars)
    elapsed = time.perf_counter() - start
    return count / elapsed if elapsed > 0 else float("inf")


def benchmark_peek(count: int, ticks_per_bar: int = 10) -> float:
    """Return transient evaluations per second on a warmed-up engine."""
    bars = generate_sample_bars(count + 1)
    engine = ScoringEngine()
    engine.replay(bars[:count])

    start = time.perf_counter()
    for _ in range(ticks_per_bar):
        engine.peek(bars[count])
    elapsed = time.perf_counter() - start
    return ticks_per_bar / elapsed if elapsed > 0 else float("inf")


def main():
    print("⏱️  HF Score benchmark")
    for count in (1_000, 10_000, 50_000):
        print(f"  advance x{count}: {benchmark_advance(count):,.0f} bars/s")
    print(f"  peek: {benchmark_peek(1_000, 100):,.0f} evaluations/s")


if __name__ == "__main__":
    main()
