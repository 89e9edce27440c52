# chronos/cli/commands/run.py
# Interactive live stopwatch command

from __future__ import annotations

import sys
from typing import Optional

import typer

from ...chronos_io.console import console
from ...chronos_io.generics import exit_with_error
from ...config.settings import get_settings
from ...core.formatting import format_lap_time
from ...core.verbose import is_quiet
from ...ui.display.stopwatch_view import render_lap_summary
from ..app import app
from ..decorators import handle_chronos_error
from ..helpers import build_gateway
from ..session import StopwatchSession


# * Run the stopwatch w/ a live display until q/Esc is pressed
@app.command()
@handle_chronos_error
def run(
    ctx: typer.Context,
    fresh: bool = typer.Option(
        False, "--fresh", help="Start w/ an empty lap list instead of restoring saved laps"
    ),
    refresh_rate: Optional[int] = typer.Option(
        None, "--refresh-rate", min=1, max=120, help="Display frames per second"
    ),
) -> None:
    """Start the interactive stopwatch (space start/pause, l lap, r reset, q quit)."""
    settings = get_settings(ctx)
    if not sys.stdin.isatty():
        exit_with_error("chronos run needs an interactive terminal")

    interval_ms = 1000.0 / refresh_rate if refresh_rate else settings.tick_interval_ms
    session = StopwatchSession(
        gateway=build_gateway(settings),
        tick_interval_ms=interval_ms,
        load_saved=not fresh,
    )
    session.run()
    if is_quiet():
        return

    console.print(
        f"[chronos.muted]Stopped at[/] [chronos.accent]{format_lap_time(session.engine.elapsed_now())}[/]"
    )
    console.print(render_lap_summary(session.engine.statistics()))
