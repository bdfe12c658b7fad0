"""Run a piece of code repeatedly for a while and time it."""

import math
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class BenchmarkResults:
    requested_duration: float
    duration: float
    execution_count: int
    avg_time: float


def benchmark(duration: float, code: Callable[[], object]) -> BenchmarkResults:
    """Call ``code`` until ``duration`` seconds have passed."""
    start = time.perf_counter()
    count = 0
    while time.perf_counter() - start < duration:
        code()
        count += 1
    total = time.perf_counter() - start
    return BenchmarkResults(
        requested_duration=duration,
        duration=total,
        execution_count=count,
        avg_time=total / count if count else math.inf,
    )