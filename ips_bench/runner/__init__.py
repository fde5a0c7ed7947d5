r"""
Benchmark planning, execution and orchestration.

Decides how long to warm up and measure, runs each benchmark in
submission order, and hands the results to the reporter.

    from ips_bench.runner import Driver

    report = Driver().execute(suite)
"""

from ips_bench.runner.driver import Driver
from ips_bench.runner.executor import ExecutionOutcome, Executor
from ips_bench.runner.planner import IterationPlanner, scaled_seconds
from ips_bench.runner.timing import measure_time

__all__ = [
    "Driver",
    "ExecutionOutcome",
    "Executor",
    "IterationPlanner",
    "measure_time",
    "scaled_seconds",
]
