r"""
Loading benchmark definition files.

A definition file is plain Python with a `benchmark` decorator in scope:

    small = "a" * 100

    @benchmark("core-string-concat-small")
    def concat_small():
        hash(small + str(random.randint(1, 10)))

    from ips_bench.benchmarks.loader import load_files

    suite = load_files(["bench/concat.py"])
"""

import logging
import runpy
from collections.abc import Iterable
from pathlib import Path

from ips_bench.benchmarks.base import BenchmarkSet
from ips_bench.errors import BenchError, DefinitionError

__all__ = ["load_file", "load_files"]

logger = logging.getLogger(__name__)


def load_file(path: str | Path, benchmark_set: BenchmarkSet | None = None) -> BenchmarkSet:
    """Execute a definition file, registering its benchmarks.

    Args:
        path: Definition file.
        benchmark_set: Set to add to (None = new set).

    Returns:
        The set the benchmarks were added to.

    Raises:
        DefinitionError: If the file is missing or raises while loading.
    """
    path = Path(path)
    target = benchmark_set if benchmark_set is not None else BenchmarkSet()

    if not path.is_file():
        msg = f"Benchmark file not found: {path}"
        raise DefinitionError(msg)

    before = len(target)
    try:
        runpy.run_path(str(path), init_globals={"benchmark": target.benchmark}, run_name="__benchmark__")
    except BenchError:
        raise
    except Exception as e:
        msg = f"Failed to load {path}: {e}"
        raise DefinitionError(msg) from e

    logger.debug("Loaded %d benchmarks from %s", len(target) - before, path)
    return target


def load_files(paths: Iterable[str | Path]) -> BenchmarkSet:
    """Load several definition files into one set, in order."""
    benchmark_set = BenchmarkSet()
    for path in paths:
        load_file(path, benchmark_set)
    return benchmark_set
