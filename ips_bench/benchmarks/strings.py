r"""
String micro-benchmarks: concatenation, HTML escaping, buffer writes and
case swapping.

    from ips_bench.benchmarks.strings import string_benchmarks

    suite = string_benchmarks()
"""

import html
import random

from ips_bench.benchmarks.base import BenchmarkSet

__all__ = ["string_benchmarks"]

TWEET_SIZE = 280
LARGE_BUFFER_SIZE = 256 * 1024

HTML_DOCUMENT = (
    '<html> <head> <meta charset="UTF-8"> <meta description="No description."> </head> <body> </body> </html>'
)


def _fill(buffer: bytearray) -> None:
    for index in range(len(buffer)):
        buffer[index] = index % 20


def _alloc_and_fill(size: int) -> None:
    image = bytearray(b"0" * size)
    for n in range(size):
        image[n] = n % 100


def _alloc_and_set_one(size: int) -> None:
    image = bytearray(b"0" * size)
    image[3] = ord("1")


def _add_concat(suite: BenchmarkSet) -> None:
    for label, size in (("small", 100), ("med", 250), ("large", 1000)):
        base = "a" * size

        def concat(base: str = base) -> None:
            hash(base + str(random.randint(1, 10)))

        suite.add(f"core-string-concat-{label}", concat)


def _add_escape_html(suite: BenchmarkSet) -> None:
    escaped = {"html": ""}

    @suite.benchmark("escapeHTML")
    def escape_html() -> None:
        escaped["html"] = html.escape(HTML_DOCUMENT)


def _add_setbyte(suite: BenchmarkSet) -> None:
    small_buffer = bytearray(b"0" * TWEET_SIZE)
    large_buffer = bytearray(b"0" * LARGE_BUFFER_SIZE)

    @suite.benchmark("small_buffer[]= alloc")
    def small_alloc() -> None:
        _fill(bytearray(b"0" * TWEET_SIZE))

    @suite.benchmark("small_buffer[]= no-alloc")
    def small_no_alloc() -> None:
        _fill(small_buffer)

    @suite.benchmark("large_buffer[]= alloc")
    def large_alloc() -> None:
        _fill(bytearray(b"0" * LARGE_BUFFER_SIZE))

    @suite.benchmark("large_buffer[]= no-alloc")
    def large_no_alloc() -> None:
        _fill(large_buffer)

    @suite.benchmark("large_buffer interleaved")
    def large_interleaved() -> None:
        buffer = bytearray(b"0" * LARGE_BUFFER_SIZE)
        for index in range(0, len(buffer) - 2, 3):
            buffer[index] = index % 20
            buffer[index + 1] = (index + 1) % 20
            buffer[index + 2] = (index + 2) % 20


def _add_buffer_alloc(suite: BenchmarkSet) -> None:
    for label, size in (("10", 10), ("100", 100), ("1000", 1000), ("10_000", 10_000)):
        suite.add(f"alloc-{label}", lambda size=size: _alloc_and_fill(size))

    for label, size in (("10", 10), ("1000", 1000), ("100_000", 100_000), ("1M", 1_000_000)):
        suite.add(f"alloc-{label}-1", lambda size=size: _alloc_and_set_one(size))


def _add_swapcase(suite: BenchmarkSet) -> None:
    state = {
        "short": "Foo Bar Baz Foo Bar Baz Foo Bar Baz",
        "long": "Foo Bar Baz Foo Bar Baz Foo Bar Baz " * 1000,
    }

    @suite.benchmark("swapcase")
    def swapcase() -> None:
        state["short"] = state["short"].swapcase()

    @suite.benchmark("long swapcase")
    def long_swapcase() -> None:
        state["long"] = state["long"].swapcase()


def string_benchmarks() -> BenchmarkSet:
    """Build the string micro-benchmark set."""
    suite = BenchmarkSet()
    _add_concat(suite)
    _add_escape_html(suite)
    _add_setbyte(suite)
    _add_buffer_alloc(suite)
    _add_swapcase(suite)
    return suite
