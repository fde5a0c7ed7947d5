r"""
Shared pytest fixtures for ips-bench tests.
"""

import pytest

from ips_bench.benchmarks import BenchmarkSet
from ips_bench.runner import Executor
from ips_bench.types import BenchmarkUnit, SampleResult


class FakeClock:
    """Nanosecond clock that moves forward by `step_ns` on every read."""

    def __init__(self, step_ns: int = 1_000_000) -> None:
        self.now = 0
        self.step_ns = step_ns
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        now = self.now
        self.now += self.step_ns
        return now

    def advance(self, ns: int) -> None:
        self.now += ns


class FailingWorkload:
    """Workload that raises once it has been called `succeed` times."""

    def __init__(self, succeed: int) -> None:
        self.succeed = succeed
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1
        if self.calls > self.succeed:
            raise RuntimeError("workload exploded")


def noop() -> None:
    pass


@pytest.fixture
def clock() -> FakeClock:
    """1 ms per clock read."""
    return FakeClock()


@pytest.fixture
def executor(clock) -> Executor:
    """Executor with 10 ms windows on the fake clock."""
    return Executor(clock=clock, default_warmup_seconds=0.01, default_measure_seconds=0.01)


@pytest.fixture
def fast_set() -> BenchmarkSet:
    """Three cheap benchmarks with fixed baselines."""
    return BenchmarkSet([
        BenchmarkUnit(name="alpha", workload=noop, basic_iteration_time=0.001),
        BenchmarkUnit(name="beta", workload=noop, basic_iteration_time=0.002),
        BenchmarkUnit(name="gamma", workload=noop, basic_iteration_time=0.003),
    ])


@pytest.fixture
def sample_results() -> list[SampleResult]:
    return [
        SampleResult(unit_name="A", iterations_per_second=100.0, sample_count=3, stddev=1.0, invocations=300, elapsed_seconds=3.0),
        SampleResult(unit_name="B", iterations_per_second=50.0, sample_count=3, stddev=0.5, invocations=150, elapsed_seconds=3.0),
        SampleResult(unit_name="C", iterations_per_second=200.0, sample_count=3, stddev=4.0, invocations=600, elapsed_seconds=3.0),
    ]


@pytest.fixture
def make_clock():
    """Factory for fake clocks with a custom step."""
    return FakeClock


@pytest.fixture
def make_failing():
    """Factory for workloads that raise after a number of calls."""
    return FailingWorkload
