# chronos/ui/theming/theme_definitions.py
# Dark & light palettes for the Chronos terminal display

from __future__ import annotations

DEFAULT_THEME = "dark"

# named palette slots used by theme_engine to build Rich styles
THEMES: dict[str, dict[str, str]] = {
    "dark": {
        "accent": "#7c9cff",  # periwinkle
        "accent2": "#a78bfa",  # soft violet
        "digits": "#f5f7ff",  # near white
        "muted": "#8b93a7",  # slate gray
        "fastest": "#34d399",  # emerald
        "slowest": "#f87171",  # coral red
        "running": "#34d399",
        "paused": "#fbbf24",  # amber
        "idle": "#8b93a7",
        "border": "#3b4261",  # deep slate
    },
    "light": {
        "accent": "#3056d3",  # cobalt
        "accent2": "#7c3aed",  # violet
        "digits": "#111827",  # ink
        "muted": "#6b7280",  # gray
        "fastest": "#059669",  # deep emerald
        "slowest": "#dc2626",  # crimson
        "running": "#059669",
        "paused": "#d97706",  # dark amber
        "idle": "#6b7280",
        "border": "#cbd5e1",  # pale slate
    },
}

# title gradient stops per theme
GRADIENTS: dict[str, list[str]] = {
    "dark": ["#7c9cff", "#8f8cfd", "#a78bfa", "#c084fc"],
    "light": ["#3056d3", "#4f46e5", "#6d28d9", "#7c3aed"],
}
