r"""
ips-bench: iterations-per-second micro-benchmark harness.

Runs named workloads for a time budget, scales warmup and measurement
windows up for slow benchmarks, and ranks the results.

    from ips_bench import BenchmarkSet, Driver, DriverOptions

    suite = BenchmarkSet()

    @suite.benchmark("concat")
    def concat():
        "a" * 100 + "b"

    report = Driver().execute(suite, options=DriverOptions(disable_scaling=True))
"""

from ips_bench.benchmarks import BenchmarkSet
from ips_bench.config import DriverOptions
from ips_bench.errors import (
    BenchError,
    EmptyInput,
    ExecutionFailure,
    InvalidArgument,
    NoMatchingBenchmarks,
)
from ips_bench.reporting.compare import compare
from ips_bench.runner import Driver, Executor, IterationPlanner
from ips_bench.types import (
    BenchmarkUnit,
    ComparisonEntry,
    ComparisonReport,
    ExecutionPlan,
    Phase,
    SampleResult,
)

__all__ = [
    "BenchError",
    "BenchmarkSet",
    "BenchmarkUnit",
    "ComparisonEntry",
    "ComparisonReport",
    "Driver",
    "DriverOptions",
    "EmptyInput",
    "ExecutionFailure",
    "ExecutionPlan",
    "Executor",
    "InvalidArgument",
    "IterationPlanner",
    "NoMatchingBenchmarks",
    "Phase",
    "SampleResult",
    "compare",
]

__version__ = "0.1.0"
