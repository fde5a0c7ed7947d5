r"""
Benchmark execution under a shared plan.

Each unit gets one warmup window whose samples are discarded, followed by
`plan.iterations` independent measurement windows. A window calls the
workload until its time budget is spent and yields one rate; the rates
give the mean and standard deviation reported for the unit.

    from ips_bench.runner.executor import Executor

    results = Executor().run(units, plan)
"""

import gc
import logging
import math
import statistics
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ips_bench.config import get_executor_defaults
from ips_bench.errors import ExecutionFailure
from ips_bench.runner.timing import Clock, ns_to_seconds
from ips_bench.types import BenchmarkUnit, ExecutionPlan, Phase, SampleResult

__all__ = ["ExecutionOutcome", "Executor", "ProgressCallback"]

logger = logging.getLogger(__name__)

# (unit name, status) with status one of warmup, measuring, done, failed
ProgressCallback = Callable[[str, str], None]


@dataclass
class ExecutionOutcome:
    """Results of a run that continues past failing units.

    Attributes:
        results: Completed results in submission order.
        failures: Failures in submission order.
    """

    results: list[SampleResult] = field(default_factory=list)
    failures: list[ExecutionFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if every unit completed."""
        return not self.failures


@dataclass(frozen=True, slots=True)
class _Window:
    calls: int
    elapsed_ns: int

    @property
    def rate(self) -> float:
        if self.elapsed_ns <= 0:
            return float("inf")
        return self.calls / ns_to_seconds(self.elapsed_ns)


class Executor:
    """Runs benchmark units one at a time, in submission order."""

    def __init__(
        self,
        *,
        clock: Clock = time.perf_counter_ns,
        default_warmup_seconds: float | None = None,
        default_measure_seconds: float | None = None,
    ) -> None:
        env_warmup, env_measure = get_executor_defaults()
        self._clock = clock
        self._default_warmup = default_warmup_seconds if default_warmup_seconds is not None else env_warmup
        self._default_measure = default_measure_seconds if default_measure_seconds is not None else env_measure
        self._progress_callback: ProgressCallback | None = None

    def set_progress_callback(self, callback: ProgressCallback) -> None:
        """Set callback for progress updates."""
        self._progress_callback = callback

    def windows(self, plan: ExecutionPlan) -> tuple[float, float]:
        """Effective (warmup, measure) window lengths for a plan."""
        warmup = plan.warmup_seconds if plan.warmup_seconds is not None else self._default_warmup
        measure = plan.measure_seconds if plan.measure_seconds is not None else self._default_measure
        return warmup, measure

    def run(self, units: Sequence[BenchmarkUnit], plan: ExecutionPlan) -> list[SampleResult]:
        """Run every unit, stopping at the first failure.

        Args:
            units: Units in submission order.
            plan: Shared execution plan.

        Returns:
            One SampleResult per unit, in submission order.

        Raises:
            ExecutionFailure: If a workload raises. Results of the units
                completed before it are attached as `partial_results`.
        """
        results: list[SampleResult] = []
        for unit in units:
            try:
                results.append(self.run_unit(unit, plan))
            except ExecutionFailure as e:
                e.partial_results = list(results)
                raise
        return results

    def run_all(self, units: Sequence[BenchmarkUnit], plan: ExecutionPlan) -> ExecutionOutcome:
        """Run every unit, recording failures and moving on to the next unit."""
        outcome = ExecutionOutcome()
        for unit in units:
            try:
                outcome.results.append(self.run_unit(unit, plan))
            except ExecutionFailure as e:
                e.partial_results = list(outcome.results)
                outcome.failures.append(e)
        return outcome

    def run_unit(self, unit: BenchmarkUnit, plan: ExecutionPlan) -> SampleResult:
        """Warm up and measure a single unit.

        Raises:
            ExecutionFailure: If the workload raises in either phase.
        """
        warmup_seconds, measure_seconds = self.windows(plan)
        self._progress(unit.name, "warmup")
        try:
            warmup = self._guarded_window(unit, warmup_seconds, Phase.WARMUP)
            logger.debug("%s: warmup %d calls in %.3fs", unit.name, warmup.calls, ns_to_seconds(warmup.elapsed_ns))

            self._progress(unit.name, "measuring")
            samples = []
            for _ in range(plan.iterations):
                gc.collect()
                samples.append(self._guarded_window(unit, measure_seconds, Phase.MEASUREMENT))
        except ExecutionFailure:
            self._progress(unit.name, "failed")
            raise

        result = self._summarize(unit.name, samples)
        self._progress(unit.name, "done")
        return result

    def _guarded_window(self, unit: BenchmarkUnit, seconds: float, phase: Phase) -> _Window:
        """Run one window, wrapping workload errors in ExecutionFailure."""
        try:
            return self._run_window(unit, seconds)
        except Exception as e:
            logger.debug("%s: failed during %s", unit.name, phase.label, exc_info=True)
            raise ExecutionFailure(unit.name, phase, e) from e

    def _run_window(self, unit: BenchmarkUnit, seconds: float) -> _Window:
        """Call the workload until `seconds` have elapsed, at least once."""
        budget_ns = int(seconds * 1_000_000_000)
        workload = unit.workload
        clock = self._clock
        calls = 0
        start = clock()
        while True:
            workload()
            calls += 1
            elapsed = clock() - start
            if elapsed >= budget_ns:
                return _Window(calls=calls, elapsed_ns=elapsed)

    def _summarize(self, name: str, samples: list[_Window]) -> SampleResult:
        """Mean rate and standard deviation across measurement windows."""
        rates = [s.rate for s in samples]
        if any(math.isinf(r) for r in rates):
            mean, stddev = float("inf"), 0.0
        else:
            mean = statistics.mean(rates)
            stddev = statistics.stdev(rates) if len(rates) > 1 else 0.0

        return SampleResult(
            unit_name=name,
            iterations_per_second=mean,
            sample_count=len(samples),
            stddev=stddev,
            invocations=sum(s.calls for s in samples),
            elapsed_seconds=ns_to_seconds(sum(s.elapsed_ns for s in samples)),
        )

    def _progress(self, name: str, status: str) -> None:
        if self._progress_callback:
            self._progress_callback(name, status)
