r"""
Benchmark driver: Select -> Plan -> Run -> Compare.

    from ips_bench.config import DriverOptions
    from ips_bench.runner import Driver

    report = Driver().execute(suite, ["escapeHTML"], DriverOptions(disable_scaling=True))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ips_bench.config import DriverOptions
from ips_bench.errors import ExecutionFailure, NoMatchingBenchmarks
from ips_bench.reporting.compare import Reporter
from ips_bench.runner.executor import Executor
from ips_bench.runner.planner import IterationPlanner
from ips_bench.types import BenchmarkUnit, ComparisonReport, ExecutionPlan, SampleResult

if TYPE_CHECKING:
    from ips_bench.benchmarks.base import BenchmarkSet

__all__ = ["Driver"]

logger = logging.getLogger(__name__)


class Driver:
    """Orchestrates planning, execution and comparison of a benchmark set."""

    def __init__(
        self,
        *,
        planner: IterationPlanner | None = None,
        executor: Executor | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._planner = planner or IterationPlanner()
        self._executor = executor or Executor()
        self._reporter = reporter or Reporter()
        self._plan: ExecutionPlan | None = None
        self._results: list[SampleResult] = []
        self._failures: list[ExecutionFailure] = []

    @property
    def plan(self) -> ExecutionPlan | None:
        """Plan used by the last run."""
        return self._plan

    @property
    def results(self) -> list[SampleResult]:
        """Results of the last run, in submission order."""
        return self._results

    @property
    def failures(self) -> list[ExecutionFailure]:
        """Failures of the last run."""
        return self._failures

    def select(self, benchmark_set: BenchmarkSet, requested_names: Iterable[str] | None) -> list[BenchmarkUnit]:
        """Select units to run.

        Raises:
            NoMatchingBenchmarks: If the request names none of the set's units.
        """
        requested = sorted(set(requested_names or ()))
        units = benchmark_set.select(requested)
        if not units:
            raise NoMatchingBenchmarks(requested, benchmark_set.names())
        unknown = [name for name in requested if name not in benchmark_set]
        if unknown:
            logger.warning("Ignoring unknown benchmarks: %s", ", ".join(unknown))
        return units

    def execute(
        self,
        benchmark_set: BenchmarkSet,
        requested_names: Iterable[str] | None = None,
        options: DriverOptions | None = None,
    ) -> ComparisonReport:
        """Run the selected benchmarks and compare them.

        Args:
            benchmark_set: Benchmarks available.
            requested_names: Names to run (empty/None = all).
            options: Driver options (None = defaults).

        Returns:
            ComparisonReport over the completed units.

        Raises:
            NoMatchingBenchmarks: Nothing selected; raised before any timing.
            InvalidArgument: A baseline iteration time is negative or not finite.
            ExecutionFailure: A workload raised (unless continue_on_error is set
                and at least one unit completed).
        """
        options = options or DriverOptions()
        self._plan = None
        self._results = []
        self._failures = []

        units = self.select(benchmark_set, requested_names)

        max_iteration_time = max(unit.basic_iteration_time for unit in units)
        self._plan = self._planner.plan(max_iteration_time, not options.disable_scaling)
        logger.debug("Running %d benchmarks with %s", len(units), self._plan)

        if options.continue_on_error:
            outcome = self._executor.run_all(units, self._plan)
            self._results = outcome.results
            self._failures = outcome.failures
            for failure in outcome.failures:
                logger.error("%s", failure)
            if not outcome.results:
                raise outcome.failures[0]
        else:
            try:
                self._results = self._executor.run(units, self._plan)
            except ExecutionFailure as e:
                self._results = e.partial_results
                self._failures = [e]
                raise

        return self._reporter.compare(self._results)
