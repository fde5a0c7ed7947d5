r"""
Ranked comparison of benchmark results.

    from ips_bench.reporting.compare import compare

    report = compare(results)
    for entry in report:
        print(entry.name, entry.slowdown)
"""

import math
from collections.abc import Sequence

from ips_bench.errors import EmptyInput
from ips_bench.types import ComparisonEntry, ComparisonReport, SampleResult

__all__ = ["Reporter", "compare", "slowdown_factor"]


def slowdown_factor(fastest_rate: float, rate: float) -> float:
    """How many times slower `rate` is than `fastest_rate`."""
    if math.isinf(fastest_rate):
        return 1.0 if math.isinf(rate) else float("inf")
    if rate <= 0:
        return float("inf")
    return fastest_rate / rate


def compare(results: Sequence[SampleResult]) -> ComparisonReport:
    """Rank results by rate, fastest first.

    Ties keep submission order.

    Raises:
        EmptyInput: If there are no results to compare.
    """
    if not results:
        raise EmptyInput("Cannot compare an empty set of results")

    ranked = sorted(results, key=lambda r: r.iterations_per_second, reverse=True)
    fastest_rate = ranked[0].iterations_per_second

    return ComparisonReport(
        entries=tuple(
            ComparisonEntry(result=r, slowdown=slowdown_factor(fastest_rate, r.iterations_per_second))
            for r in ranked
        )
    )


class Reporter:
    """Builds comparison reports from executor results."""

    def compare(self, results: Sequence[SampleResult]) -> ComparisonReport:
        """See `compare`."""
        return compare(results)
