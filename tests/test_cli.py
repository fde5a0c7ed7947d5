r"""
Tests for ips_bench.cli module.
"""

import json
import sys

import pytest
from typer.testing import CliRunner

from ips_bench.cli import app
from ips_bench.runner import Executor

runner = CliRunner()

FAST = ["--warmup", "0.001", "--time", "0.001"]


@pytest.fixture
def definitions(tmp_path):
    path = tmp_path / "defs.py"
    path.write_text(
        '@benchmark("join")\n'
        'def join():\n'
        '    "-".join(["a", "b", "c"])\n'
        '\n'
        '@benchmark("format")\n'
        'def format_():\n'
        '    "{}-{}".format(1, 2)\n'
    )
    return path


@pytest.fixture
def broken_definitions(tmp_path):
    path = tmp_path / "broken.py"
    path.write_text(
        'calls = []\n'
        '\n'
        '@benchmark("ok", basic_iteration_time=0.001)\n'
        'def ok():\n'
        '    pass\n'
        '\n'
        '@benchmark("boom", basic_iteration_time=0.001)\n'
        'def boom():\n'
        '    raise ValueError("boom")\n'
    )
    return path


class TestRun:
    def test_run_text(self, definitions):
        result = runner.invoke(app, ["run", str(definitions), *FAST])

        assert result.exit_code == 0, result.output
        assert "Comparison:" in result.output
        assert "join" in result.output
        assert "format" in result.output

    def test_run_selected(self, definitions):
        result = runner.invoke(app, ["run", str(definitions), "-b", "join", *FAST])

        assert result.exit_code == 0, result.output
        assert "format" not in result.output

    def test_run_json_to_file(self, definitions, tmp_path):
        output = tmp_path / "out.json"
        result = runner.invoke(app, ["run", str(definitions), "-f", "json", "-o", str(output), *FAST])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text())
        assert sorted(r["name"] for r in data["results"]) == ["format", "join"]

    def test_no_matching_benchmarks(self, definitions):
        result = runner.invoke(app, ["run", str(definitions), "-b", "missing", *FAST])

        assert result.exit_code == 1
        assert "No benchmarks match missing" in result.output

    def test_unknown_format(self, definitions):
        result = runner.invoke(app, ["run", str(definitions), "-f", "xml"])

        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_failure_names_unit_and_phase(self, broken_definitions):
        result = runner.invoke(app, ["run", str(broken_definitions), *FAST])

        assert result.exit_code == 1
        assert "'boom' failed during warmup" in result.output

    def test_continue_on_error(self, broken_definitions):
        result = runner.invoke(app, ["run", str(broken_definitions), "--continue-on-error", *FAST])

        assert result.exit_code == 0, result.output
        assert "Comparison:" in result.output
        assert "Warning: Benchmark 'boom' failed during warmup" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["run", str(tmp_path / "nope.py"), *FAST])

        assert result.exit_code == 1
        assert "Benchmark file not found" in result.output


class TestList:
    def test_list(self, definitions):
        result = runner.invoke(app, ["list", str(definitions)])

        assert result.exit_code == 0, result.output
        assert "Available benchmarks:" in result.output
        assert "  - join (" in result.output
        assert "  - format (" in result.output


class TestOutputStreams:
    @pytest.fixture
    def slow_definitions(self, tmp_path):
        path = tmp_path / "slow.py"
        path.write_text(
            '@benchmark("slow", basic_iteration_time=1.0)\n'
            'def slow():\n'
            '    pass\n'
        )
        return path

    @pytest.fixture
    def fake_executor(self, monkeypatch, make_clock):
        """Run the CLI's executor on a clock that moves 40 s per read."""
        cli_module = sys.modules["ips_bench.cli.main"]
        monkeypatch.setattr(
            cli_module,
            "Executor",
            lambda **kwargs: Executor(clock=make_clock(step_ns=40_000_000_000), **kwargs),
        )

    def test_scaled_run_keeps_json_on_stdout(self, slow_definitions, fake_executor):
        result = runner.invoke(app, ["run", str(slow_definitions), "-f", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["fastest"] == "slow"
        assert "33 seconds per iteration" in result.stderr

    def test_progress_on_stderr(self, slow_definitions, fake_executor):
        result = runner.invoke(app, ["run", str(slow_definitions), "-f", "csv", "-v"])

        assert result.exit_code == 0, result.output
        assert result.stdout.startswith("rank,name,")
        assert "  slow: measuring" in result.stderr

    def test_invalid_env_override(self, definitions, monkeypatch):
        monkeypatch.setenv("IPS_BENCH_WARMUP", "abc")

        result = runner.invoke(app, ["run", str(definitions)])

        assert result.exit_code == 1
        assert "Error: IPS_BENCH_WARMUP must be a number of seconds" in result.stderr
