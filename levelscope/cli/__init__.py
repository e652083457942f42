"""CLI commands for LevelScope.

This package provides the command-line interface: volume profile,
breakout and support/resistance commands over local candle files.
"""

from levelscope.cli.main import cli, main

__all__ = ["cli", "main"]
