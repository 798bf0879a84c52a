"""Timing helpers for fixpoint benchmarks."""

import time
from typing import Callable, List

# (upper bound in ns, divisor, unit, decimals), smallest unit first
_UNITS = (
    (1_000, 1, "ns", 0),
    (1_000_000, 1_000, "µs", 1),
    (1_000_000_000, 1_000_000, "ms", 2),
    (float('inf'), 1_000_000_000, "s", 3),
)


class Timer:
    """
    Lap timer: every ``with`` block over the same instance records one lap.

    Usage:
        timer = Timer()
        for _ in range(10):
            with timer:
                work()
        timer.laps  # ten nanosecond durations
    """

    def __init__(self):
        self.laps: List[int] = []
        self._started_ns = 0

    def __enter__(self):
        self._started_ns = time.perf_counter_ns()
        return self

    def __exit__(self, *exc):
        self.laps.append(time.perf_counter_ns() - self._started_ns)

    @property
    def last_ns(self) -> int:
        return self.laps[-1] if self.laps else 0

    @property
    def total_ns(self) -> int:
        return sum(self.laps)


def measure(func: Callable, *args, iterations: int = 100, warmup: int = 10) -> List[int]:
    """
    Time ``func(*args)`` repeatedly.

    Returns the per-call nanosecond samples in ascending order; the
    warmup calls are not recorded.
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    for _ in range(warmup):
        func(*args)

    timer = Timer()
    for _ in range(iterations):
        with timer:
            func(*args)

    return sorted(timer.laps)


def format_ns(ns: float) -> str:
    """Format nanoseconds with the largest unit that keeps the value >= 1."""
    for bound, divisor, unit, decimals in _UNITS:
        if ns < bound:
            return f"{ns / divisor:.{decimals}f} {unit}"


def format_overhead(baseline_ns: float, measured_ns: float) -> str:
    """Format how much slower ``measured`` is than ``baseline``."""
    if baseline_ns <= 0:
        return "n/a"
    return f"{measured_ns / baseline_ns:.2f}x baseline"
