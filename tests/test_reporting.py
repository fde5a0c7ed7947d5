r"""
Tests for ips_bench.reporting module.
"""

import json

import pytest

from ips_bench.errors import EmptyInput
from ips_bench.reporting import (
    CsvExporter,
    JsonExporter,
    MarkdownExporter,
    Reporter,
    TextFormatter,
    compare,
    get_exporter,
    humanize,
    slowdown_factor,
)
from ips_bench.types import SampleResult


def result(name, rate):
    return SampleResult(unit_name=name, iterations_per_second=rate, sample_count=3, stddev=0.0)


@pytest.fixture
def report(sample_results):
    return compare(sample_results)


class TestCompare:
    def test_ranked_with_slowdown(self, report):
        assert report.names == ["C", "A", "B"]
        assert [e.slowdown for e in report] == [1.0, 2.0, 4.0]
        assert report.fastest.name == "C"

    def test_empty_input(self):
        with pytest.raises(EmptyInput):
            compare([])

    def test_idempotent(self, sample_results):
        assert compare(sample_results) == compare(sample_results)

    def test_does_not_reorder_input(self, sample_results):
        compare(sample_results)
        assert [r.unit_name for r in sample_results] == ["A", "B", "C"]

    def test_ties_keep_submission_order(self):
        report = compare([result("x", 10.0), result("y", 20.0), result("z", 10.0)])
        assert report.names == ["y", "x", "z"]
        assert [e.slowdown for e in report] == [1.0, 2.0, 2.0]

    def test_single_result(self):
        report = compare([result("only", 5.0)])
        assert len(report) == 1
        assert report.fastest.fastest is True

    def test_non_increasing_rates(self, report):
        rates = [e.result.iterations_per_second for e in report]
        assert rates == sorted(rates, reverse=True)

    def test_reporter_delegates(self, sample_results):
        assert Reporter().compare(sample_results) == compare(sample_results)


class TestSlowdownFactor:
    def test_ratio(self):
        assert slowdown_factor(200.0, 50.0) == 4.0

    def test_zero_rate(self):
        assert slowdown_factor(200.0, 0.0) == float("inf")

    def test_infinite_fastest(self):
        assert slowdown_factor(float("inf"), float("inf")) == 1.0
        assert slowdown_factor(float("inf"), 10.0) == float("inf")


class TestHumanize:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.0, "0.000"),
            (0.5, "0.500"),
            (999.0, "999.000"),
            (12345.0, "12.345k"),
            (2_500_000.0, "2.500M"),
            (float("inf"), "inf"),
        ],
    )
    def test_humanize(self, value, expected):
        assert humanize(value) == expected


class TestTextFormatter:
    def test_comparison_block(self, report):
        text = TextFormatter().to_string(report)
        lines = text.splitlines()

        assert "Comparison:" in lines
        comparison = lines[lines.index("Comparison:") + 1:]
        assert comparison[0].strip() == "C:      200.0 i/s"
        assert comparison[1].strip().endswith("100.0 i/s - 2.00x  slower")
        assert comparison[2].strip().endswith("50.0 i/s - 4.00x  slower")

    def test_result_line(self, sample_results):
        line = TextFormatter().format_result(sample_results[2])
        assert line.strip().startswith("C")
        assert "(± 2.0%) i/s" in line
        assert line.endswith("in 3.0s")


class TestExporters:
    def test_json(self, report):
        data = json.loads(JsonExporter().to_string(report))
        assert data["fastest"] == "C"
        assert [r["name"] for r in data["results"]] == ["C", "A", "B"]
        assert data["results"][2]["slowdown"] == 4.0
        assert data["results"][0]["rank"] == 1

    def test_csv(self, report):
        lines = CsvExporter().to_string(report).splitlines()
        assert lines[0].startswith("rank,name,iterations_per_second")
        assert lines[1].startswith("1,C,200.000")
        assert len(lines) == 4

    def test_csv_quotes_names_with_commas(self):
        lines = CsvExporter().to_string(compare([result("a,b", 1.0)])).splitlines()
        assert lines[1].startswith('1,"a,b",')

    def test_csv_escapes_quotes_in_names(self):
        lines = CsvExporter().to_string(compare([result('a"b,c', 1.0)])).splitlines()
        assert lines[1].startswith('1,"a""b,c",')

    def test_markdown(self, report):
        text = MarkdownExporter().to_string(report)
        assert "# Benchmark Comparison" in text
        assert "| C | 200.000 | 2.0% | **1.00x** |" in text
        assert "| B | 50.000 | 1.0% | 4.00x |" in text

    def test_export_to_file(self, report, tmp_path):
        path = tmp_path / "report.json"
        JsonExporter().export(report, path)
        assert json.loads(path.read_text())["fastest"] == "C"

    def test_get_exporter(self):
        assert isinstance(get_exporter("markdown"), MarkdownExporter)
        assert isinstance(get_exporter("text"), TextFormatter)

    def test_get_unknown_exporter(self):
        with pytest.raises(ValueError, match="Unknown format"):
            get_exporter("xml")
