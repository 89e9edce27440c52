# chronos/ui/theming/console_theme.py
# Console theme initialization & switching for Rich styling

from __future__ import annotations

from typing import Any, Optional

from rich.errors import StyleSyntaxError
from rich.theme import ThemeStackError

from ...chronos_io.console import console
from .theme_engine import get_chronos_theme, set_active_theme_name


# * Replace the pushed theme on target (shared console by default), e.g. after toggling dark/light
def refresh_theme(theme_name: Optional[str] = None, target: Optional[Any] = None) -> None:
    out = target if target is not None else console
    if theme_name is not None:
        set_active_theme_name(theme_name)
    try:
        out.pop_theme()
    except ThemeStackError:
        pass  # nothing pushed yet
    out.push_theme(get_chronos_theme())


# safe startup variant used by the CLI callback
def auto_initialize_theme(theme_name: Optional[str] = None) -> None:
    try:
        refresh_theme(theme_name)
    except StyleSyntaxError as e:
        console.print(f"[dim]Theme unavailable ({e}); using plain styles[/]")
