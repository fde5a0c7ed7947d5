r"""
Command-line interface for ips-bench.

    ips-bench run -b escapeHTML,parse --no-scale
    ips-bench list
"""

from ips_bench.cli.main import app, main

__all__ = [
    "app",
    "main",
]
