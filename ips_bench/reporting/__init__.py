r"""
Result comparison and reporting.

Ranks benchmark results by throughput and renders them as
benchmark-ips style text, JSON, CSV or Markdown.

    from ips_bench.reporting import TextFormatter, compare

    report = compare(results)
    print(TextFormatter().to_string(report))
"""

from ips_bench.reporting.compare import Reporter, compare, slowdown_factor
from ips_bench.reporting.formats import (
    CsvExporter,
    JsonExporter,
    MarkdownExporter,
    TextFormatter,
    get_exporter,
    humanize,
)

__all__ = [
    "CsvExporter",
    "JsonExporter",
    "MarkdownExporter",
    "Reporter",
    "TextFormatter",
    "compare",
    "get_exporter",
    "humanize",
    "slowdown_factor",
]
