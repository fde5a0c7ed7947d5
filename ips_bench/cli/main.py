r"""
Command-line interface for ips-bench.

    ips-bench run                              # built-in catalogue
    ips-bench run bench/concat.py -b core-string-concat-small --no-scale
    ips-bench run -f json -o results.json
    ips-bench list bench/concat.py
"""

import logging
from functools import partial
from pathlib import Path
from typing import Annotated

import typer

from ips_bench.benchmarks import BenchmarkSet, builtin_benchmarks, load_files
from ips_bench.config import DriverOptions
from ips_bench.errors import BenchError, ExecutionFailure
from ips_bench.reporting import TextFormatter, get_exporter
from ips_bench.runner import Driver, Executor, IterationPlanner

__all__ = ["app", "main"]

app = typer.Typer(
    name="ips-bench",
    help="Iterations-per-second micro-benchmark harness.",
    no_args_is_help=True,
)

FilesArgument = Annotated[
    list[Path] | None, typer.Argument(help="Benchmark definition files (default: built-in catalogue)")
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(files: list[Path] | None) -> BenchmarkSet:
    if files:
        return load_files(files)
    return builtin_benchmarks()


@app.command()
def run(
    files: FilesArgument = None,
    benchmarks: Annotated[
        str | None, typer.Option("-b", "--benchmarks", help="Benchmarks to run (comma-separated)")
    ] = None,
    no_scale: Annotated[
        bool, typer.Option("--no-scale", help="Do not lengthen warmup and measurement for long benchmarks")
    ] = False,
    continue_on_error: Annotated[
        bool, typer.Option("--continue-on-error", help="Keep running after a benchmark fails")
    ] = False,
    warmup: Annotated[
        float | None, typer.Option("--warmup", min=0.001, help="Default warmup seconds")
    ] = None,
    time_: Annotated[
        float | None, typer.Option("--time", min=0.001, help="Default measurement seconds per pass")
    ] = None,
    format_: Annotated[
        str, typer.Option("-f", "--format", help="Output format: text, json, csv, markdown")
    ] = "text",
    output: Annotated[Path | None, typer.Option("-o", "--output", help="Output file path")] = None,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Verbose output")] = False,
) -> None:
    """Run benchmarks and print a ranked comparison."""
    _configure_logging(verbose)

    try:
        exporter = get_exporter(format_)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    env_options = DriverOptions.from_env()
    options = DriverOptions(
        disable_scaling=no_scale or env_options.disable_scaling,
        continue_on_error=continue_on_error or env_options.continue_on_error,
    )
    names = [b.strip() for b in benchmarks.split(",") if b.strip()] if benchmarks else None

    # stdout carries only the report
    echo_err = partial(typer.echo, err=True)

    try:
        executor = Executor(default_warmup_seconds=warmup, default_measure_seconds=time_)
        if verbose:
            executor.set_progress_callback(lambda name, status: echo_err(f"  {name}: {status}"))
        driver = Driver(planner=IterationPlanner(notify=echo_err), executor=executor)

        benchmark_set = _load(files)
        report = driver.execute(benchmark_set, names, options)
    except ExecutionFailure as e:
        formatter = TextFormatter()
        for result in e.partial_results:
            echo_err(formatter.format_result(result))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except BenchError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for failure in driver.failures:
        typer.echo(f"Warning: {failure}", err=True)

    if output is not None:
        exporter.export(report, output)
        typer.echo(f"Exported {format_}: {output}")
    else:
        typer.echo(exporter.to_string(report))


@app.command(name="list")
def list_benchmarks(files: FilesArgument = None) -> None:
    """List benchmarks with their basic iteration time."""
    try:
        benchmark_set = _load(files)
    except BenchError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Available benchmarks:")
    for unit in benchmark_set:
        typer.echo(f"  - {unit.name} ({unit.basic_iteration_time * 1000:.3f} ms)")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
