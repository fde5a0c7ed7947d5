r"""
Benchmark sets and the built-in catalogue.

Catalogue groups:
- strings: concatenation, HTML escaping, buffer writes, allocation, swapcase
- text: CSV parsing, Cyrillic transliteration

    from ips_bench.benchmarks import BenchmarkSet, builtin_benchmarks

    suite = builtin_benchmarks()
    units = suite.select(["escapeHTML"])
"""

from ips_bench.benchmarks.base import BenchmarkSet, measure_basic_iteration_time
from ips_bench.benchmarks.loader import load_file, load_files
from ips_bench.benchmarks.strings import string_benchmarks
from ips_bench.benchmarks.text import text_benchmarks, transliterate

__all__ = [
    "BenchmarkSet",
    "builtin_benchmarks",
    "load_file",
    "load_files",
    "measure_basic_iteration_time",
    "string_benchmarks",
    "text_benchmarks",
    "transliterate",
]


def builtin_benchmarks() -> BenchmarkSet:
    """All built-in benchmarks, strings first."""
    suite = string_benchmarks()
    suite.extend(text_benchmarks())
    return suite
