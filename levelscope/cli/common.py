"""Helpers shared by the CLI commands."""

from datetime import datetime
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from levelscope.config import Settings, load_config
from levelscope.data import load_candles
from levelscope.models import Candle

console = Console()


def print_error(message: str, title: str = "Error") -> None:
    """Show an error panel."""
    console.print(Panel(
        f"[red]{message}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def get_settings() -> Settings:
    """Load configuration, exiting with an error panel if it is invalid."""
    try:
        return load_config()
    except ValidationError as e:
        print_error(f"Invalid configuration:\n{e}", title="Config Error")
        raise SystemExit(1)


def load_candles_or_exit(path: Path) -> list[Candle]:
    """Load candles from a file, exiting with an error panel on failure."""
    try:
        return load_candles(path)
    except (OSError, ValueError) as e:
        print_error(f"Could not read candles from {path}:\n{e}", title="Data Error")
        raise SystemExit(1)


def parse_timestamp(value: str) -> datetime | int:
    """Parse a CLI timestamp: an integer epoch value or an ISO date/time."""
    value = value.strip()
    if value.lstrip("-").isdigit():
        return int(value)
    return datetime.fromisoformat(value)
