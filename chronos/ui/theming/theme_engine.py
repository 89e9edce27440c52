# chronos/ui/theming/theme_engine.py
# Theme engine: Rich style sheets & gradient text for the active dark/light theme

from __future__ import annotations

from rich.text import Text
from rich.theme import Theme

from .theme_definitions import DEFAULT_THEME, GRADIENTS, THEMES

# status colors shared by both themes
SUCCESS = "#10b981"
WARNING = "#ffaa00"
ERROR = "#ff4444"
DEBUG = "#00b5b5"

# theme currently pushed onto the console
_active_theme = DEFAULT_THEME


def resolve_theme_name(name: str | None) -> str:
    return name if name in THEMES else DEFAULT_THEME


def get_active_theme_name() -> str:
    return _active_theme


def set_active_theme_name(name: str | None) -> str:
    global _active_theme
    _active_theme = resolve_theme_name(name)
    return _active_theme


# * Build the Rich Theme for a palette; style names are namespaced under "chronos."
def get_chronos_theme(name: str | None = None) -> Theme:
    palette = THEMES[resolve_theme_name(name or _active_theme)]
    styles = {f"chronos.{slot}": color for slot, color in palette.items()}
    styles.update(
        {
            "chronos.digits": f"bold {palette['digits']}",
            "chronos.fastest": f"bold {palette['fastest']}",
            "chronos.slowest": f"bold {palette['slowest']}",
            "chronos.key": f"bold {palette['accent']}",
            "success": SUCCESS,
            "warning": WARNING,
            "error": ERROR,
            "debug": DEBUG,
        }
    )
    return Theme(styles)


# * RGB helpers for natural gradients
def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    hex_color = hex_color.lstrip("#")
    return (int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16))


def _rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def _lerp_color(a_hex: str, b_hex: str, t: float) -> str:
    a = _hex_to_rgb(a_hex)
    b = _hex_to_rgb(b_hex)
    return _rgb_to_hex(
        (
            int(round(a[0] + (b[0] - a[0]) * t)),
            int(round(a[1] + (b[1] - a[1]) * t)),
            int(round(a[2] + (b[2] - a[2]) * t)),
        )
    )


# * Gradient text w/ per-character RGB interpolation across the color stops
def natural_gradient(text: str, colors: list[str] | None = None) -> Text:
    if colors is None:
        colors = GRADIENTS[_active_theme]

    if not text or not colors:
        return Text(text)
    if len(colors) < 2:
        return Text(text, style=colors[0])

    result = Text()
    n = len(text)
    n_stops = len(colors)
    for i, char in enumerate(text):
        if n == 1:
            result.append(char, style=colors[0])
            continue
        seg_pos = (i / (n - 1)) * (n_stops - 1)
        idx = int(seg_pos)
        if idx >= n_stops - 1:
            color = colors[-1]
        else:
            color = _lerp_color(colors[idx], colors[idx + 1], seg_pos - idx)
        result.append(char, style=color)
    return result


def accent_gradient(text: str) -> Text:
    return natural_gradient(text)


def success_gradient(text: str) -> Text:
    return natural_gradient(text, [SUCCESS, "#059669", "#047857"])


def styled_checkmark() -> Text:
    return Text("✓", style=f"bold {SUCCESS}")


def styled_arrow() -> Text:
    return Text("->", style="chronos.accent2")


def styled_bullet() -> Text:
    return Text("•", style="chronos.accent")
