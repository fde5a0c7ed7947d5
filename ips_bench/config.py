r"""
Harness configuration and defaults.

Environment variables (prefix IPS_BENCH_, also read from a .env file):
    - IPS_BENCH_NO_SCALE: disable adaptive scaling of long benchmarks
    - IPS_BENCH_CONTINUE_ON_ERROR: keep running after a benchmark fails
    - IPS_BENCH_WARMUP: default warmup window in seconds
    - IPS_BENCH_TIME: default measurement window in seconds

    from ips_bench.config import DriverOptions, get_executor_defaults

    options = DriverOptions.from_mapping({"--no-scale": True})
    warmup, measure = get_executor_defaults()
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from ips_bench.errors import InvalidArgument

__all__ = [
    "DEFAULT_ITERATIONS",
    "DEFAULT_MEASURE_SECONDS",
    "DEFAULT_WARMUP_SECONDS",
    "DriverOptions",
    "ENV_PREFIX",
    "LONG_ITERATION_THRESHOLD",
    "get_env",
    "get_env_flag",
    "get_executor_defaults",
]

# Look for .env in current dir or the project root
_env_file = Path(".env")
if not _env_file.exists():
    _env_file = Path(__file__).parent.parent / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

ENV_PREFIX = "IPS_BENCH_"

# A single iteration taking this long (seconds) marks a long benchmark
LONG_ITERATION_THRESHOLD = 0.1

# Measurement passes per unit
DEFAULT_ITERATIONS = 3

# benchmark-ips defaults
DEFAULT_WARMUP_SECONDS = 2.0
DEFAULT_MEASURE_SECONDS = 5.0

NO_SCALE_OPTION = "--no-scale"
CONTINUE_ON_ERROR_OPTION = "--continue-on-error"

_TRUTHY = {"1", "true", "yes", "on"}


def get_env(key: str, *, default: str | None = None) -> str | None:
    """Get environment variable with IPS_BENCH_ prefix.

    Args:
        key: Variable name without prefix (e.g., "NO_SCALE").
        default: Default value if not set.

    Returns:
        Environment variable value or default.
    """
    return os.environ.get(f"{ENV_PREFIX}{key}", default)


def get_env_flag(key: str) -> bool:
    """Read a boolean IPS_BENCH_ variable ("1", "true", "yes", "on")."""
    value = get_env(key)
    return value is not None and value.strip().lower() in _TRUTHY


def _get_env_seconds(key: str, default: float) -> float:
    value = get_env(key)
    if value is None:
        return default
    try:
        seconds = float(value)
    except ValueError:
        msg = f"{ENV_PREFIX}{key} must be a number of seconds, got '{value}'"
        raise InvalidArgument(msg) from None
    if seconds <= 0:
        msg = f"{ENV_PREFIX}{key} must be positive, got {seconds}"
        raise InvalidArgument(msg)
    return seconds


def get_executor_defaults() -> tuple[float, float]:
    """Default (warmup, measure) window lengths in seconds.

    Raises:
        InvalidArgument: If an override is not a positive number.
    """
    return (
        _get_env_seconds("WARMUP", DEFAULT_WARMUP_SECONDS),
        _get_env_seconds("TIME", DEFAULT_MEASURE_SECONDS),
    )


@dataclass(frozen=True, slots=True)
class DriverOptions:
    """Options for a driver run.

    Attributes:
        disable_scaling: Skip adaptive scaling of long benchmarks (--no-scale).
        continue_on_error: Keep running after a benchmark fails.
    """

    disable_scaling: bool = False
    continue_on_error: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "DriverOptions":
        """Build options from a command-line style map, e.g. {"--no-scale": True}."""
        return cls(
            disable_scaling=bool(options.get(NO_SCALE_OPTION, False)),
            continue_on_error=bool(options.get(CONTINUE_ON_ERROR_OPTION, False)),
        )

    @classmethod
    def from_env(cls) -> "DriverOptions":
        """Build options from IPS_BENCH_ environment variables."""
        return cls(
            disable_scaling=get_env_flag("NO_SCALE"),
            continue_on_error=get_env_flag("CONTINUE_ON_ERROR"),
        )
