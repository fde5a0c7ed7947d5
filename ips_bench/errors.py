r"""
Error types raised by the benchmark harness.

    from ips_bench.errors import ExecutionFailure

    try:
        driver.execute(benchmark_set)
    except ExecutionFailure as e:
        print(e.unit_name, e.phase.label)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ips_bench.types import Phase, SampleResult

__all__ = [
    "BenchError",
    "InvalidArgument",
    "NoMatchingBenchmarks",
    "EmptyInput",
    "ExecutionFailure",
    "DuplicateBenchmark",
    "DefinitionError",
]


class BenchError(Exception):
    """Base class for harness errors."""


class InvalidArgument(BenchError, ValueError):
    """Malformed planner input (negative or non-finite baseline time)."""


class NoMatchingBenchmarks(BenchError, LookupError):
    """Requested names select none of the set's units."""

    def __init__(self, requested: list[str], available: list[str]) -> None:
        self.requested = requested
        self.available = available
        msg = f"No benchmarks match {', '.join(requested)}. Available: {', '.join(available) or 'none'}"
        super().__init__(msg)


class EmptyInput(BenchError, ValueError):
    """Comparison requested on zero results."""


class DuplicateBenchmark(BenchError, ValueError):
    """A benchmark name was declared twice in one set."""


class DefinitionError(BenchError):
    """A benchmark definition file could not be loaded."""


class ExecutionFailure(BenchError, RuntimeError):
    """A workload raised during warmup or measurement.

    Attributes:
        unit_name: Name of the failing unit.
        phase: Phase in which the workload raised.
        cause: The exception raised by the workload.
        partial_results: Results of units completed before the failure.
    """

    def __init__(
        self,
        unit_name: str,
        phase: Phase,
        cause: BaseException,
        *,
        partial_results: list[SampleResult] | None = None,
    ) -> None:
        self.unit_name = unit_name
        self.phase = phase
        self.cause = cause
        self.partial_results = list(partial_results or [])
        super().__init__(f"Benchmark '{unit_name}' failed during {phase.label}: {cause!r}")
