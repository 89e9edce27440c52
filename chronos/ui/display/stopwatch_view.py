# chronos/ui/display/stopwatch_view.py
# Rich renderables for the live stopwatch: time readout, status badge, lap table & key legend

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...core.formatting import format_delta, format_lap_time
from ...core.types import LapRow, LapStatistics, RunState, TimeParts
from ..theming.theme_engine import accent_gradient

# status badge label & style per run state
STATUS_LABELS = {
    RunState.RUNNING: ("● RUNNING", "chronos.running"),
    RunState.PAUSED: ("● PAUSED", "chronos.paused"),
    RunState.IDLE: ("● READY", "chronos.idle"),
}

KEY_LEGEND = [
    ("space", "start/pause"),
    ("l", "lap"),
    ("r", "reset"),
    ("c", "clear laps"),
    ("t", "theme"),
    ("s", "sound"),
    ("q", "quit"),
]


# * Main readout: HH:MM:SS w/ smaller centiseconds
def render_time(total: TimeParts) -> Text:
    hh, mm, ss, cc = total.padded()
    text = Text(justify="center")
    text.append(f"{hh}:{mm}:{ss}", style="chronos.digits")
    text.append(f".{cc}", style="chronos.accent")
    return text


def render_status(state: RunState) -> Text:
    label, style = STATUS_LABELS[state]
    return Text(label, style=style, justify="center")


# current lap row is only shown once the stopwatch has run
def render_current_lap(state: RunState, current_lap: TimeParts) -> Text:
    if state is RunState.IDLE:
        return Text("")
    text = Text(justify="center")
    text.append("Current lap  ", style="chronos.muted")
    text.append(str(current_lap), style="chronos.accent2")
    return text


def _delta_text(row: LapRow) -> Text:
    if row.delta_ms is None:
        return Text("")
    if row.delta_ms > 0:
        style = "chronos.slowest"
    elif row.delta_ms < 0:
        style = "chronos.fastest"
    else:
        style = "chronos.muted"
    return Text(format_delta(row.delta_ms), style=style)


def _badge_text(row: LapRow) -> Text:
    if row.is_fastest:
        return Text(row.badge, style="chronos.fastest")
    if row.is_slowest:
        return Text(row.badge, style="chronos.slowest")
    return Text(row.badge, style="chronos.muted")


# * Lap table; fastest & slowest rows are highlighted, deltas colored by sign
def render_lap_table(rows: Sequence[LapRow], limit: int | None = None) -> Table:
    table = Table(
        expand=True,
        box=None,
        show_edge=False,
        header_style="chronos.muted",
        pad_edge=False,
    )
    table.add_column("#", justify="left", no_wrap=True)
    table.add_column("Split", justify="right", no_wrap=True)
    table.add_column("Total", justify="right", no_wrap=True)
    table.add_column("Δ avg", justify="right", no_wrap=True)
    table.add_column("", justify="right", no_wrap=True)

    # keep the most recent laps visible
    visible = rows[-limit:] if limit else rows
    for row in visible:
        row_style = None
        if row.is_fastest:
            row_style = "chronos.fastest"
        elif row.is_slowest:
            row_style = "chronos.slowest"
        table.add_row(
            Text(f"#{row.number:02d}", style="chronos.muted"),
            Text(format_lap_time(row.lap.lap_ms), style=row_style or "chronos.digits"),
            Text(format_lap_time(row.lap.total_ms), style="chronos.muted"),
            _delta_text(row),
            _badge_text(row),
        )
    return table


# * One-line summary of lap statistics
def render_lap_summary(stats: LapStatistics) -> Text:
    text = Text()
    if stats.count == 0:
        text.append("No laps recorded", style="chronos.muted")
        return text
    text.append(f"{stats.count} lap{'s' if stats.count != 1 else ''}", style="chronos.accent")
    if stats.fastest_ms is not None and stats.slowest_ms is not None and not stats.tied:
        text.append("  fastest ", style="chronos.muted")
        text.append(format_lap_time(stats.fastest_ms), style="chronos.fastest")
        text.append("  slowest ", style="chronos.muted")
        text.append(format_lap_time(stats.slowest_ms), style="chronos.slowest")
    if stats.average_ms is not None:
        text.append("  average ", style="chronos.muted")
        text.append(format_lap_time(stats.average_ms), style="chronos.accent2")
    return text


def render_key_legend(sound_enabled: bool, theme: str) -> Text:
    text = Text(justify="center")
    for i, (key_name, action) in enumerate(KEY_LEGEND):
        if i:
            text.append("  ")
        text.append(key_name, style="chronos.key")
        text.append(f" {action}", style="chronos.muted")
    text.append(f"\nsound {'on' if sound_enabled else 'off'} · {theme} theme", style="chronos.muted")
    return text


# * Full screen for the interactive session
def render_stopwatch(
    state: RunState,
    total: TimeParts,
    current_lap: TimeParts,
    rows: Sequence[LapRow],
    stats: LapStatistics,
    sound_enabled: bool = True,
    theme: str = "dark",
    lap_limit: int = 10,
) -> RenderableType:
    watch = Panel(
        Group(
            render_status(state),
            Text(""),
            render_time(total),
            render_current_lap(state, current_lap),
        ),
        title=accent_gradient("CHRONOS"),
        border_style="chronos.border",
        padding=(1, 4),
    )

    parts: list[RenderableType] = [watch]
    if rows:
        parts.append(
            Panel(
                Group(render_lap_table(rows, limit=lap_limit), Text(""), render_lap_summary(stats)),
                title="[chronos.accent]Laps[/]",
                border_style="chronos.border",
            )
        )
    parts.append(render_key_legend(sound_enabled, theme))
    return Align.center(Group(*parts))
