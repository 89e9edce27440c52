# chronos/cli/commands/config.py
# Settings subcommands (list/get/set/reset/path) over the JSON-backed ChronosSettings

from __future__ import annotations

import json
from builtins import list as builtin_list
from dataclasses import fields
from typing import Any

import typer

from ...chronos_io.console import console
from ...config.settings import ChronosSettings, settings_manager
from ...ui.theming.styled_helpers import (
    format_setting_value,
    styled_setting_line,
    styled_success_line,
)
from ...ui.theming.theme_engine import accent_gradient, styled_checkmark, success_gradient
from ..app import app
from ..decorators import handle_chronos_error

config_app = typer.Typer(rich_markup_mode="rich", help="Manage Chronos settings")
app.add_typer(config_app, name="config")

# one-line meaning of each setting, shown by `chronos config`
SETTING_DESCRIPTIONS = {
    "state_dir": "where laps & preferences are stored (null = CHRONOS_HOME)",
    "laps_filename": "saved laps file inside the state directory",
    "preferences_filename": "theme & sound preferences file",
    "refresh_rate": "live display frames per second (1-120)",
    "persist_laps": "keep laps & preferences between sessions",
    "dev_mode": "allow DEBUG output w/ --verbose",
}


def _known_keys() -> set[str]:
    return {f.name for f in fields(ChronosSettings)}


def _require_known(key: str) -> None:
    if key not in _known_keys():
        valid = ", ".join(sorted(_known_keys()))
        raise typer.BadParameter(f"Unknown setting: {key}. Valid settings: {valid}")


# JSON-coerce CLI input (60 -> int, false -> bool, null -> None); anything else stays a string
def _coerce_value(
    raw: str,
) -> str | int | float | bool | None | builtin_list[Any] | dict[str, Any]:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# * Print every setting w/ its meaning plus the resolved storage locations
def _print_current_settings() -> None:
    settings = settings_manager.load()

    console.print()
    console.print(accent_gradient("Current Configuration"))
    console.print(f"[chronos.muted]Config file: {settings_manager.config_path}[/]")
    console.print(f"[chronos.muted]Laps file:   {settings.laps_path}[/]")
    console.print()

    for key, value in settings_manager.list_settings().items():
        console.print(*styled_setting_line(key, format_setting_value(value)))
        description = SETTING_DESCRIPTIONS.get(key)
        if description:
            console.print(f"    [chronos.muted]{description}[/]")

    console.print()
    console.print(
        "[chronos.muted]Change one w/ [/][chronos.accent2]chronos config set KEY VALUE[/]"
    )


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Print one setting as JSON
@config_app.command()
def get(key: str) -> None:
    _require_known(key)
    console.print(f"[chronos.accent2]{json.dumps(settings_manager.get(key))}[/]")


# * Validate & persist one setting
@config_app.command(name="set")
@handle_chronos_error
def set_cmd(key: str, value: str) -> None:
    _require_known(key)

    coerced = _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except (TypeError, ValueError) as e:
        raise typer.BadParameter(str(e))
    console.print(
        *styled_success_line(f"Set {key}", f"[chronos.accent2]{json.dumps(coerced)}[/]")
    )

    settings = settings_manager.load()
    if key in ("state_dir", "laps_filename"):
        console.print(f"[chronos.muted]Laps now stored in {settings.laps_path}[/]")
    elif key == "refresh_rate":
        console.print(
            f"[chronos.muted]Frames every {settings.tick_interval_ms:.1f}ms in chronos run[/]"
        )


@config_app.command()
@handle_chronos_error
def reset() -> None:
    settings_manager.reset()
    console.print(styled_checkmark(), success_gradient("Reset settings to defaults"))


@config_app.command()
def path() -> None:
    console.print(f"[chronos.accent2]{settings_manager.config_path}[/]")


@config_app.command(name="list")
def list_cmd() -> None:
    _print_current_settings()
