r"""
Execution planning for benchmark runs.

Long benchmarks get longer warmup and measurement windows, growing
logarithmically with how far the slowest iteration exceeds the threshold.

    from ips_bench.runner.planner import IterationPlanner

    plan = IterationPlanner().plan(1.0, scaling_enabled=True)
    plan.measure_seconds  # ~33.03
"""

import logging
import math
from collections.abc import Callable

from ips_bench.config import DEFAULT_ITERATIONS, LONG_ITERATION_THRESHOLD
from ips_bench.errors import InvalidArgument
from ips_bench.types import ExecutionPlan

__all__ = ["IterationPlanner", "NoticeCallback", "scaled_seconds"]

logger = logging.getLogger(__name__)

NoticeCallback = Callable[[str], None]

# Seconds given to a benchmark sitting exactly at the threshold
BASE_SCALED_SECONDS = 10.0


def scaled_seconds(max_basic_iteration_time: float, *, threshold: float = LONG_ITERATION_THRESHOLD) -> float:
    """Window length for a run whose slowest iteration takes the given time."""
    return BASE_SCALED_SECONDS * (1 + math.log(max_basic_iteration_time / threshold))


class IterationPlanner:
    """Decides the shared execution plan for a run."""

    def __init__(
        self,
        *,
        threshold: float = LONG_ITERATION_THRESHOLD,
        iterations: int = DEFAULT_ITERATIONS,
        notify: NoticeCallback | None = None,
    ) -> None:
        self._threshold = threshold
        self._iterations = iterations
        self._notify = notify

    @property
    def threshold(self) -> float:
        return self._threshold

    def plan(self, max_basic_iteration_time: float, scaling_enabled: bool = True) -> ExecutionPlan:
        """Compute the execution plan.

        Args:
            max_basic_iteration_time: Slowest baseline iteration time in seconds.
            scaling_enabled: False keeps the executor's default windows.

        Returns:
            ExecutionPlan, scaled only when the baseline exceeds the threshold.

        Raises:
            InvalidArgument: If the baseline is negative or not finite.
        """
        if not math.isfinite(max_basic_iteration_time) or max_basic_iteration_time < 0:
            msg = f"Baseline iteration time must be finite and non-negative, got {max_basic_iteration_time!r}"
            raise InvalidArgument(msg)

        if not scaling_enabled or max_basic_iteration_time <= self._threshold:
            return ExecutionPlan(iterations=self._iterations)

        seconds = scaled_seconds(max_basic_iteration_time, threshold=self._threshold)
        self._emit(
            "These are long benchmarks - we're increasing warmup and sample time "
            f"to {round(seconds)} seconds per iteration"
        )
        return ExecutionPlan(
            iterations=self._iterations,
            warmup_seconds=seconds,
            measure_seconds=seconds,
        )

    def _emit(self, notice: str) -> None:
        logger.info(notice)
        if self._notify:
            self._notify(notice)
