# chronos/ui/quick/quick_usage.py
# Quick usage blurb for when no subcommand is provided

from __future__ import annotations

from ...chronos_io.console import console
from ..theming.theme_engine import accent_gradient


# * Show banner, common commands & help reference
def show_quick_usage() -> None:
    console.print()
    console.print(accent_gradient("CHRONOS  ·  drift-free stopwatch"))
    console.print()
    console.print("[bold]Quick usage:[/]")

    commands = [
        ("run", "Live stopwatch (space start/pause, l lap, r reset)"),
        ("laps", "Show saved laps & statistics"),
        ("theme", "Toggle dark/light theme"),
        ("sound", "Toggle lap sound"),
        ("config", "Show settings"),
    ]

    # max command length for alignment
    max_cmd_len = max(len(cmd) for cmd, _ in commands)
    for cmd, desc in commands:
        padding = max_cmd_len - len(cmd) + 8
        console.print(f"  [dim]chronos[/] [bold]{cmd}[/]{' ' * padding}[dim]# {desc}[/]")
    console.print()

    console.print("[dim]For full help:[/] [bold]chronos --help[/]")
    console.print()
