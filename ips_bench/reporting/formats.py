r"""
Output formats for comparison reports.

    from ips_bench.reporting.formats import TextFormatter, JsonExporter

    print(TextFormatter().to_string(report))
    JsonExporter().export(report, "results.json")
"""

import json
import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ips_bench.types import ComparisonEntry, ComparisonReport, SampleResult

__all__ = [
    "BaseExporter",
    "CsvExporter",
    "EXPORTERS",
    "JsonExporter",
    "MarkdownExporter",
    "TextFormatter",
    "get_exporter",
    "humanize",
]

_SUFFIXES = ["", "k", "M", "B", "T", "Q"]


def humanize(value: float) -> str:
    """Scale a rate with a k/M/B suffix, e.g. 12345.0 -> '12.345k'."""
    if not math.isfinite(value):
        return "inf"
    scale = int(math.log10(value) / 3) if value > 0 else 0
    if scale < 0 or scale >= len(_SUFFIXES):
        scale = 0
    return f"{value / 1000**scale:.3f}{_SUFFIXES[scale]}"


def _slowdown_text(slowdown: float) -> str:
    return "inf" if math.isinf(slowdown) else f"{slowdown:.2f}x"


class BaseExporter(ABC):
    """Base class for report exporters."""

    def export(self, report: ComparisonReport, path: str | Path) -> None:
        """Export report to file."""
        Path(path).write_text(self.to_string(report))

    @abstractmethod
    def to_string(self, report: ComparisonReport) -> str:
        """Export report to string."""
        ...


class TextFormatter(BaseExporter):
    """benchmark-ips style text: one line per result, then the comparison."""

    def __init__(self, *, width: int = 20) -> None:
        self._width = width

    def format_result(self, result: SampleResult) -> str:
        """Single result line, e.g. '  concat  1.234M (± 2.1%) i/s - 18.5M in 15.0s'."""
        return (
            f"{result.unit_name.rjust(self._width)} {humanize(result.iterations_per_second).rjust(10)} "
            f"(±{result.stddev_percent:4.1f}%) i/s - {humanize(result.invocations)} "
            f"in {result.elapsed_seconds:.1f}s"
        )

    def format_comparison(self, report: ComparisonReport) -> str:
        lines = ["Comparison:"]
        for entry in report:
            rate = entry.result.iterations_per_second
            line = f"{entry.name.rjust(self._width)}: {rate:10.1f} i/s"
            if not entry.fastest:
                line += f" - {_slowdown_text(entry.slowdown)}  slower"
            lines.append(line)
        return "\n".join(lines)

    def to_string(self, report: ComparisonReport) -> str:
        lines = [self.format_result(e.result) for e in report]
        lines.append("")
        lines.append(self.format_comparison(report))
        return "\n".join(lines) + "\n"


def _entry_to_dict(rank: int, entry: ComparisonEntry) -> dict[str, Any]:
    result = entry.result
    return {
        "rank": rank,
        "name": result.unit_name,
        "iterations_per_second": result.iterations_per_second,
        "stddev": result.stddev,
        "samples": result.sample_count,
        "invocations": result.invocations,
        "elapsed_seconds": result.elapsed_seconds,
        "slowdown": entry.slowdown,
    }


class JsonExporter(BaseExporter):
    """Export report to JSON format."""

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def to_dict(self, report: ComparisonReport) -> dict[str, Any]:
        return {
            "fastest": report.fastest.name,
            "results": [_entry_to_dict(i, e) for i, e in enumerate(report, start=1)],
        }

    def to_string(self, report: ComparisonReport) -> str:
        """Export report to JSON string."""
        return json.dumps(self.to_dict(report), indent=self._indent)


def _csv_field(value: str) -> str:
    if any(c in value for c in ',"\n'):
        return '"' + value.replace('"', '""') + '"'
    return value


class CsvExporter(BaseExporter):
    """Export report to CSV format."""

    def to_string(self, report: ComparisonReport) -> str:
        """Export report to CSV string."""
        lines = ["rank,name,iterations_per_second,stddev,samples,invocations,elapsed_seconds,slowdown"]
        for i, entry in enumerate(report, start=1):
            result = entry.result
            lines.append(",".join([
                str(i),
                _csv_field(result.unit_name),
                f"{result.iterations_per_second:.3f}",
                f"{result.stddev:.3f}",
                str(result.sample_count),
                str(result.invocations),
                f"{result.elapsed_seconds:.6f}",
                f"{entry.slowdown:.4f}",
            ]))
        return "\n".join(lines)


class MarkdownExporter(BaseExporter):
    """Export report to Markdown format."""

    def to_string(self, report: ComparisonReport) -> str:
        """Export report to Markdown string."""
        lines = [
            "# Benchmark Comparison",
            "",
            "| Benchmark | i/s | ± | Slowdown |",
            "|-----------|-----|---|----------|",
        ]
        for entry in report:
            result = entry.result
            slowdown = "**1.00x**" if entry.fastest else _slowdown_text(entry.slowdown)
            lines.append(
                f"| {result.unit_name} | {humanize(result.iterations_per_second)} "
                f"| {result.stddev_percent:.1f}% | {slowdown} |"
            )
        lines.append("")
        lines.append("*Slowdown relative to fastest (1.00x = fastest)*")
        lines.append("")
        return "\n".join(lines)


EXPORTERS: dict[str, type[BaseExporter]] = {
    "text": TextFormatter,
    "json": JsonExporter,
    "csv": CsvExporter,
    "markdown": MarkdownExporter,
}


def get_exporter(name: str) -> BaseExporter:
    """Get exporter by format name.

    Raises:
        ValueError: If the format is not recognized.
    """
    if name not in EXPORTERS:
        valid = ", ".join(EXPORTERS)
        msg = f"Unknown format '{name}'. Valid formats: {valid}"
        raise ValueError(msg)
    return EXPORTERS[name]()
