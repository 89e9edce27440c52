# chronos/chronos_io/console.py
# Centralized console shared by the CLI, the live stopwatch view & the output manager
#
# - Console is created as a bare Console() at import time (no theme loading)
# - Theme initialization happens in app.py:main_callback() via auto_initialize_theme()
# - Modules import the proxy at load time; Live needs the real Console via get_console()
# - Tests: pass a recording Console to StopwatchSession or capture stdout

from __future__ import annotations

from typing import Any, Optional

from rich.console import Console


# proxy delegating to the underlying Console; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()


# * Get the underlying Console instance (needed by rich.live.Live)
def get_console() -> Console:
    return console._get_console()


# * Re-apply the dark/light theme after a preference change
def refresh_theme(theme_name: Optional[str] = None, target: Optional[Console] = None) -> None:
    # ! import here to avoid circular dependency w/ ui module
    from ..ui.theming.console_theme import refresh_theme as _refresh_theme

    _refresh_theme(theme_name, target)


__all__ = [
    "console",
    "get_console",
    "refresh_theme",
]
