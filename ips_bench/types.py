r"""
Core types for micro-benchmark runs.

    from ips_bench.types import BenchmarkUnit, ExecutionPlan, SampleResult

    unit = BenchmarkUnit(name="concat", workload=lambda: "a" + "b", basic_iteration_time=1e-6)
    plan = ExecutionPlan()
"""

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import IntEnum, auto

from ips_bench.errors import InvalidArgument

__all__ = [
    "Phase",
    "Workload",
    "BenchmarkUnit",
    "ExecutionPlan",
    "SampleResult",
    "ComparisonEntry",
    "ComparisonReport",
]

Workload = Callable[[], object]


class Phase(IntEnum):
    """Execution phase of a benchmark unit."""

    WARMUP = auto()
    MEASUREMENT = auto()

    @property
    def label(self) -> str:
        """Lower-case name used in messages."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class BenchmarkUnit:
    """A named, runnable unit of work.

    Attributes:
        name: Unique name within a benchmark set.
        workload: Zero-argument callable; its return value is ignored.
        basic_iteration_time: Cost of a single invocation in seconds.
    """

    name: str
    workload: Workload
    basic_iteration_time: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.basic_iteration_time) or self.basic_iteration_time <= 0:
            msg = f"Baseline iteration time of '{self.name}' must be finite and positive, got {self.basic_iteration_time!r}"
            raise InvalidArgument(msg)

    def __call__(self) -> None:
        self.workload()


@dataclass(frozen=True, slots=True)
class ExecutionPlan:
    """Shared plan for a run.

    Attributes:
        iterations: Independent measurement passes per unit.
        warmup_seconds: Warmup window length (None = executor default).
        measure_seconds: Measurement window length (None = executor default).
    """

    iterations: int = 3
    warmup_seconds: float | None = None
    measure_seconds: float | None = None

    def __post_init__(self) -> None:
        if self.iterations < 1:
            msg = f"iterations must be positive, got {self.iterations}"
            raise InvalidArgument(msg)
        for seconds in (self.warmup_seconds, self.measure_seconds):
            if seconds is not None and not seconds > 0:
                msg = f"window lengths must be positive, got {seconds}"
                raise InvalidArgument(msg)

    @property
    def scaled(self) -> bool:
        """True if the plan overrides the executor's default windows."""
        return self.warmup_seconds is not None or self.measure_seconds is not None


@dataclass(frozen=True, slots=True)
class SampleResult:
    """Measured throughput of one benchmark unit.

    Attributes:
        unit_name: Name of the measured unit.
        iterations_per_second: Mean rate across measurement passes.
        sample_count: Number of measurement passes.
        stddev: Standard deviation of the per-pass rates.
        invocations: Total workload calls across measurement passes.
        elapsed_seconds: Total measured time in seconds.
    """

    unit_name: str
    iterations_per_second: float
    sample_count: int
    stddev: float
    invocations: int = 0
    elapsed_seconds: float = 0.0

    @property
    def stddev_percent(self) -> float:
        """Standard deviation as a percentage of the mean rate."""
        if self.iterations_per_second in (0.0, float("inf")):
            return 0.0
        return 100.0 * self.stddev / self.iterations_per_second

    @property
    def seconds_per_iteration(self) -> float:
        """Mean latency of one invocation in seconds."""
        if self.iterations_per_second == 0:
            return float("inf")
        return 1.0 / self.iterations_per_second


@dataclass(frozen=True, slots=True)
class ComparisonEntry:
    """A result annotated with its slowdown relative to the fastest."""

    result: SampleResult
    slowdown: float

    @property
    def name(self) -> str:
        return self.result.unit_name

    @property
    def fastest(self) -> bool:
        return self.slowdown == 1.0


@dataclass(frozen=True, slots=True)
class ComparisonReport:
    """Results ranked by non-increasing rate.

    Attributes:
        entries: Ranked entries, fastest first.
    """

    entries: tuple[ComparisonEntry, ...]

    @property
    def fastest(self) -> ComparisonEntry:
        """Fastest entry."""
        return self.entries[0]

    @property
    def names(self) -> list[str]:
        """Unit names in ranked order."""
        return [e.name for e in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ComparisonEntry]:
        return iter(self.entries)
