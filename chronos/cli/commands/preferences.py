# chronos/cli/commands/preferences.py
# Theme & sound preference commands (set explicitly or toggle)

from __future__ import annotations

from typing import Optional

import typer

from ...chronos_io.console import console, refresh_theme
from ...config.settings import get_settings
from ...core.clock import MonotonicClock
from ...core.engine import StopwatchEngine
from ...core.gateway import THEME_VALUES
from ...core.scheduler import CooperativeScheduler
from ...ui.theming.styled_helpers import styled_success_line
from ..app import app
from ..helpers import build_gateway

SOUND_CHOICES = {"on": True, "off": False}


# engine w/ saved preferences loaded; toggles go through it so CLI & session share the rules
def _preference_engine(ctx: typer.Context) -> StopwatchEngine:
    clock = MonotonicClock()
    engine = StopwatchEngine(
        clock=clock,
        scheduler=CooperativeScheduler(clock),
        gateway=build_gateway(get_settings(ctx)),
    )
    engine.load_saved_data()
    return engine


# * Set the display theme, or toggle dark/light when no value is given
@app.command()
def theme(
    ctx: typer.Context,
    value: Optional[str] = typer.Argument(None, help="dark or light"),
) -> None:
    if value is not None and value not in THEME_VALUES:
        raise typer.BadParameter(
            f"Invalid theme '{value}'. Valid themes: {', '.join(THEME_VALUES)}"
        )

    engine = _preference_engine(ctx)
    if value is None or value != engine.theme:
        engine.toggle_theme()

    refresh_theme(engine.theme)
    console.print(*styled_success_line("Theme set to", f"[chronos.accent2]{engine.theme}[/]"))


# * Turn lap sound on/off, or toggle when no value is given
@app.command()
def sound(
    ctx: typer.Context,
    value: Optional[str] = typer.Argument(None, help="on or off"),
) -> None:
    if value is not None and value not in SOUND_CHOICES:
        raise typer.BadParameter(f"Invalid value '{value}'. Use 'on' or 'off'")

    engine = _preference_engine(ctx)
    if value is None or SOUND_CHOICES[value] != engine.sound_enabled:
        engine.toggle_sound()

    state = "on" if engine.sound_enabled else "off"
    console.print(*styled_success_line("Sound", f"[chronos.accent2]{state}[/]"))
