r"""
Benchmark sets.

A set is an ordered collection of uniquely named units. Units are
registered with the `benchmark` decorator or `add`; the baseline
iteration time is measured from one call unless given.

    from ips_bench.benchmarks.base import BenchmarkSet

    suite = BenchmarkSet()

    @suite.benchmark("concat")
    def concat():
        "a" * 100 + "b"
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ips_bench.errors import DuplicateBenchmark
from ips_bench.runner.timing import measure_time
from ips_bench.types import BenchmarkUnit, Workload

__all__ = ["BenchmarkSet", "measure_basic_iteration_time"]

logger = logging.getLogger(__name__)

# Floor for the baseline so it stays positive on coarse clocks
MIN_BASIC_ITERATION_TIME = 1e-9


def measure_basic_iteration_time(workload: Workload) -> float:
    """Time a single call of the workload, in seconds."""
    timing = measure_time(workload)
    return max(timing.elapsed_seconds, MIN_BASIC_ITERATION_TIME)


class BenchmarkSet:
    """Ordered collection of benchmark units with unique names."""

    def __init__(self, units: Iterable[BenchmarkUnit] = ()) -> None:
        self._units: dict[str, BenchmarkUnit] = {}
        for unit in units:
            self._insert(unit)

    def _insert(self, unit: BenchmarkUnit) -> None:
        if unit.name in self._units:
            msg = f"Benchmark '{unit.name}' is already defined"
            raise DuplicateBenchmark(msg)
        self._units[unit.name] = unit

    def add(
        self,
        name: str,
        workload: Workload,
        *,
        basic_iteration_time: float | None = None,
    ) -> BenchmarkUnit:
        """Add a unit, measuring its baseline when not given.

        Raises:
            DuplicateBenchmark: If the name is already taken.
        """
        if name in self._units:
            msg = f"Benchmark '{name}' is already defined"
            raise DuplicateBenchmark(msg)
        if basic_iteration_time is None:
            basic_iteration_time = measure_basic_iteration_time(workload)
            logger.debug("%s: basic iteration time %.6fs", name, basic_iteration_time)
        unit = BenchmarkUnit(name=name, workload=workload, basic_iteration_time=basic_iteration_time)
        self._insert(unit)
        return unit

    def benchmark(self, name: str, *, basic_iteration_time: float | None = None) -> Callable[[Workload], Any]:
        """Decorator to register a function as a benchmark."""

        def decorator(workload: Workload) -> Workload:
            self.add(name, workload, basic_iteration_time=basic_iteration_time)
            return workload

        return decorator

    def extend(self, other: BenchmarkSet) -> None:
        """Append all units of another set."""
        for unit in other:
            self._insert(unit)

    def get(self, name: str) -> BenchmarkUnit | None:
        """Get unit by name."""
        return self._units.get(name)

    def names(self) -> list[str]:
        """Unit names in declaration order."""
        return list(self._units)

    def select(self, names: Iterable[str] | None = None) -> list[BenchmarkUnit]:
        """Units whose names are requested, in declaration order.

        An empty or missing request selects every unit. Unknown names are ignored.
        """
        requested = set(names or ())
        if not requested:
            return list(self._units.values())
        return [unit for name, unit in self._units.items() if name in requested]

    def __iter__(self) -> Iterator[BenchmarkUnit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, name: object) -> bool:
        return name in self._units
