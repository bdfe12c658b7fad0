import math

import pytest

from stompbox.bench import benchmark


def test_counts_calls():
    calls = []
    results = benchmark(0.02, lambda: calls.append(1))
    assert results.execution_count == len(calls)
    assert results.execution_count > 0


def test_duration_at_least_requested():
    results = benchmark(0.02, lambda: None)
    assert results.requested_duration == 0.02
    assert results.duration >= 0.02


def test_average_is_total_over_count():
    results = benchmark(0.01, lambda: sum(range(100)))
    assert results.avg_time * results.execution_count == pytest.approx(results.duration)


def test_zero_duration_runs_nothing():
    calls = []
    results = benchmark(0.0, lambda: calls.append(1))
    assert calls == []
    assert results.execution_count == 0
    assert math.isinf(results.avg_time)