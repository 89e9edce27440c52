# chronos/cli/commands/laps.py
# Saved lap list subcommands (show/clear/export)

from __future__ import annotations

import json
from pathlib import Path

import typer

from ...chronos_io.console import console
from ...chronos_io.generics import write_json_safe
from ...config.settings import get_settings
from ...core.laps import LapLedger
from ...ui.display.stopwatch_view import render_lap_summary, render_lap_table
from ...ui.theming.styled_helpers import styled_success_line
from ..app import app
from ..decorators import handle_chronos_error
from ..helpers import build_gateway

laps_app = typer.Typer(rich_markup_mode="rich", help="Show & manage saved laps")
app.add_typer(laps_app, name="laps")


def _saved_ledger(ctx: typer.Context) -> LapLedger:
    ledger = LapLedger()
    ledger.restore(build_gateway(get_settings(ctx)).load_laps())
    return ledger


# * Default: print saved laps w/ fastest/slowest highlights & deltas
@laps_app.callback(invoke_without_command=True)
def laps_callback(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the raw persisted lap records"),
) -> None:
    if ctx.invoked_subcommand is not None:
        return

    ledger = _saved_ledger(ctx)
    if as_json:
        # plain stdout so the output can be piped
        typer.echo(json.dumps([lap.to_dict() for lap in ledger.laps], indent=2))
        return

    if not len(ledger):
        console.print("[chronos.muted]No saved laps[/]")
        return

    console.print(render_lap_table(ledger.rows()))
    console.print()
    console.print(render_lap_summary(ledger.statistics()))


# * Remove all saved laps
@laps_app.command()
def clear(ctx: typer.Context) -> None:
    gateway = build_gateway(get_settings(ctx))
    count = len(gateway.load_laps())
    gateway.save_laps([])
    console.print(*styled_success_line("Cleared saved laps", f"[chronos.accent2]{count}[/]"))


# * Write saved laps to a JSON file in the persisted lap layout
@laps_app.command()
@handle_chronos_error
def export(ctx: typer.Context, path: Path = typer.Argument(..., help="Destination JSON file")) -> None:
    ledger = _saved_ledger(ctx)
    write_json_safe([lap.to_dict() for lap in ledger.laps], path)
    console.print(*styled_success_line(f"Exported {len(ledger)} laps", f"[chronos.accent2]{path}[/]"))
