"""Profile command for LevelScope CLI.

Builds a volume profile from a candle file and shows the POC, value
area and the volume histogram.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from levelscope.cli.common import (
    get_settings,
    load_candles_or_exit,
    parse_timestamp,
    print_error,
)
from levelscope.indicators.volume_profile import (
    build_volume_profile,
    calculate_volume_profile,
    describe_profile,
)
from levelscope.models import ProfileOptions, SessionWindow, VolumeProfile

console = Console()

BAR_WIDTH = 40


def _histogram_table(profile: VolumeProfile) -> Table:
    """Render the histogram with the highest price on top."""
    table = Table(
        title=f"Volume Histogram ({len(profile.histogram)} bins)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Price", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("", no_wrap=True)

    max_volume = profile.poc.volume or 1.0
    va_low, va_high = profile.value_area.from_price, profile.value_area.to_price

    for idx in reversed(range(len(profile.histogram))):
        price_bin = profile.histogram[idx]
        bar = "█" * round(price_bin.volume / max_volume * BAR_WIDTH)

        if idx == profile.poc.index:
            style = "bold yellow"
        elif va_low <= price_bin.price <= va_high:
            style = "green"
        else:
            style = "dim"

        table.add_row(
            f"{price_bin.price:.4f}",
            f"{price_bin.volume:,.0f}",
            f"[{style}]{bar}[/{style}]",
        )

    return table


def _summary_panel(profile: VolumeProfile, message: str) -> Panel:
    meta = profile.meta
    lines = [
        f"[bold]{message}[/bold]",
        "",
        f"[yellow]POC:[/yellow] {profile.poc.price:.4f} ({profile.poc.volume:,.0f} vol)",
        f"[green]Value Area:[/green] {profile.value_area.from_price:.4f} - {profile.value_area.to_price:.4f} "
        f"({profile.value_area.volume:,.0f} vol, target {profile.value_area.coverage:.0%})",
        f"Total volume: {profile.total_volume:,.0f}, bins: {len(profile.histogram)}",
        f"[dim]Step {meta.price_step:g}, range {meta.min_price:g} - {meta.max_price:g}, "
        f"body weight {meta.body_weight:g}[/dim]",
    ]
    return Panel("\n".join(lines), title="[bold]Volume Profile[/bold]", border_style="cyan")


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-s", "--step", type=float, help="Price bucket width (default: chosen from the data)")
@click.option("-b", "--body-weight", type=float, help="Share of volume given to candle bodies (0-1)")
@click.option("-va", "--value-area", "value_area_pct", type=float, help="Value area coverage (0-1]")
@click.option("--from", "from_time", help="Session start (epoch value or ISO date/time)")
@click.option("--to", "to_time", help="Session end (epoch value or ISO date/time)")
@click.option("--json", "as_json", is_flag=True, help="Print the profile as JSON")
def profile(
    file: Path,
    step: Optional[float],
    body_weight: Optional[float],
    value_area_pct: Optional[float],
    from_time: Optional[str],
    to_time: Optional[str],
    as_json: bool,
) -> None:
    """Build a volume profile from a candle file.

    \b
    Examples:
      levelscope profile candles.csv                 # Automatic step
      levelscope profile candles.csv --step 0.5      # Fixed bucket width
      levelscope profile candles.csv --from 2024-01-02T09:00 --to 2024-01-02T17:00
      levelscope profile candles.json --json         # Machine-readable output
    """
    settings = get_settings()
    candles = load_candles_or_exit(file)

    session = None
    if from_time is not None or to_time is not None:
        if from_time is None or to_time is None:
            print_error("Both --from and --to are needed for a session filter.")
            raise SystemExit(1)
        try:
            session = SessionWindow(from_time=parse_timestamp(from_time), to_time=parse_timestamp(to_time))
        except ValueError as e:
            print_error(f"Invalid session bounds: {e}")
            raise SystemExit(1)

    body_weight = settings.profile.body_weight if body_weight is None else body_weight
    value_area_pct = settings.profile.value_area_pct if value_area_pct is None else value_area_pct

    try:
        if step is None:
            analysis = calculate_volume_profile(
                candles,
                body_weight=body_weight,
                value_area_pct=value_area_pct,
                session=session,
                target_bins=settings.profile.target_bins,
            )
            result, message = analysis.profile, analysis.message
        else:
            options = ProfileOptions(
                price_step=step,
                session=session,
                body_weight=body_weight,
                value_area_pct=value_area_pct,
            )
            result = build_volume_profile(candles, options)
            message = describe_profile(result) if result else "No candles to analyse"
    except ValueError as e:  # InvalidConfiguration or pydantic ValidationError
        print_error(str(e), title="Configuration Error")
        raise SystemExit(1)

    if result is None:
        console.print(Panel(
            f"[yellow]{message}[/yellow]",
            title="[bold yellow]No Data[/bold yellow]",
            border_style="yellow",
        ))
        return

    if as_json:
        click.echo(result.model_dump_json(by_alias=True, indent=2))
        return

    console.print(_summary_panel(result, message))
    console.print(_histogram_table(result))
