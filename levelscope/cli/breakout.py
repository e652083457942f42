"""Breakout and levels commands for LevelScope CLI.

Classifies the latest candle of a file against its recent range and
reports support/resistance extremes of a window of candles.
"""

from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from levelscope.cli.common import get_settings, load_candles_or_exit, print_error
from levelscope.indicators.breakout import analyze_breakout
from levelscope.indicators.levels import DEFAULT_FALLBACK_SIZE, find_range_levels
from levelscope.models import BreakoutOptions, BreakoutResult

console = Console()


def _breakout_style(result: BreakoutResult) -> tuple[str, str]:
    """Pick (color, label) for a breakout result."""
    if not result.has_breakout:
        return "dim", "NO BREAKOUT"
    if result.strength == "weak":
        color = "yellow"
    elif result.direction == "up":
        color = "green"
    else:
        color = "red"
    return color, f"{result.strength.upper()} {result.direction.upper()}"


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-l", "--lookback", type=int, help="Window size including the latest candle")
@click.option("-vt", "--volume-threshold", type=float, help="Volume multiple over average for confirmation")
@click.option("-pt", "--price-threshold", type=float, help="Fractional distance beyond a level (0.002 = 0.2%)")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def breakout(
    file: Path,
    lookback: Optional[int],
    volume_threshold: Optional[float],
    price_threshold: Optional[float],
    as_json: bool,
) -> None:
    """Check whether the latest candle broke its recent range.

    \b
    Examples:
      levelscope breakout candles.csv                  # Defaults (20, 1.5x, 0.2%)
      levelscope breakout candles.csv --lookback 50    # Longer reference window
      levelscope breakout candles.csv -vt 2 -pt 0.005  # Stricter thresholds
    """
    settings = get_settings()
    candles = load_candles_or_exit(file)

    overrides = {
        key: value
        for key, value in {
            "lookback_period": lookback,
            "volume_threshold": volume_threshold,
            "price_threshold": price_threshold,
        }.items()
        if value is not None
    }
    try:
        options = BreakoutOptions(**{**settings.breakout.model_dump(), **overrides})
    except ValidationError as e:
        print_error(f"Invalid breakout options:\n{e}", title="Configuration Error")
        raise SystemExit(1)

    result = analyze_breakout(candles, options)

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return

    color, label = _breakout_style(result)
    lines = [f"[bold {color}]{label}[/bold {color}]", "", result.message]

    if result.support_level is not None:
        ratio = f"{result.volume_ratio:.0%}" if result.volume_ratio is not None else "N/A"
        lines += [
            "",
            f"Price: {result.current_price:.4f}",
            f"Support: {result.support_level:.4f}",
            f"Resistance: {result.resistance_level:.4f}",
            f"Volume: {ratio} of average",
        ]

    console.print(Panel(
        "\n".join(lines),
        title=f"[bold]Breakout ({options.lookback_period} candles)[/bold]",
        border_style=color,
    ))


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-f", "--from-index", type=float, help="First visible candle index")
@click.option("-t", "--to-index", type=float, help="Last visible candle index")
@click.option(
    "-n", "--fallback",
    type=click.IntRange(min=1),
    default=DEFAULT_FALLBACK_SIZE,
    show_default=True,
    help="Trailing candles used when no index range is given",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def levels(
    file: Path,
    from_index: Optional[float],
    to_index: Optional[float],
    fallback: int,
    as_json: bool,
) -> None:
    """Show support and resistance extremes of a window of candles.

    \b
    Examples:
      levelscope levels candles.csv                 # Last 100 candles
      levelscope levels candles.csv -f 200 -t 350   # Candles 200-350
    """
    candles = load_candles_or_exit(file)
    result = find_range_levels(candles, from_index, to_index, fallback)

    if result is None:
        console.print(Panel(
            "[yellow]Not enough data for analysis.[/yellow]",
            title="[bold yellow]No Data[/bold yellow]",
            border_style="yellow",
        ))
        return

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return

    console.print(Panel(
        f"[bold]{result.message}[/bold]\n\n"
        f"[red]Resistance:[/red] {result.resistance_level:.4f}\n"
        f"[green]Support:[/green] {result.support_level:.4f}\n"
        f"[dim]Window: {result.analysis_type.replace('_', ' ')}[/dim]",
        title="[bold]Support / Resistance[/bold]",
        border_style="blue",
    ))
