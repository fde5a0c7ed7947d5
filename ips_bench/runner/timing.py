r"""
Timing utilities for benchmarks.

All timing reads a monotonic nanosecond clock; wall-clock time is never used.

    from ips_bench.runner.timing import measure_time

    timing = measure_time(workload)
    print(f"Elapsed: {timing.elapsed_seconds}s")
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ParamSpec, TypeVar

__all__ = ["Clock", "TimerResult", "measure_time", "ns_to_seconds"]

P = ParamSpec("P")
R = TypeVar("R")

# Monotonic clock returning nanoseconds
Clock = Callable[[], int]


def ns_to_seconds(elapsed_ns: int) -> float:
    return elapsed_ns / 1_000_000_000


@dataclass
class TimerResult:
    """Result from a timing measurement.

    Attributes:
        elapsed_ns: Elapsed time in nanoseconds.
        result: Return value from the timed function.
    """

    elapsed_ns: int
    result: Any = None

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return ns_to_seconds(self.elapsed_ns)


def measure_time(func: Callable[P, R], *args: P.args, **kwargs: P.kwargs) -> TimerResult:
    """Measure execution time of a function call.

    Args:
        func: Function to call.
        *args: Positional arguments.
        **kwargs: Keyword arguments.

    Returns:
        TimerResult with elapsed time and function result.
    """
    start = time.perf_counter_ns()
    result = func(*args, **kwargs)
    end = time.perf_counter_ns()
    return TimerResult(elapsed_ns=end - start, result=result)
