# chronos/ui/theming/styled_helpers.py
# Pre-composed styling helpers for common CLI output patterns

from __future__ import annotations

import json
from typing import Any

from .theme_engine import styled_arrow, styled_bullet, styled_checkmark, success_gradient


def styled_success_line(label: str, value: str | None = None) -> list:
    """Checkmark + gradient label [+ arrow + value].

    Returns list of renderables for console.print(*result).
    """
    parts: list[Any] = [styled_checkmark(), success_gradient(label)]
    if value is not None:
        parts.extend([styled_arrow(), value])
    return parts


def styled_setting_line(key: str, value: str) -> list:
    """Bullet + key + arrow + value."""
    return [
        styled_bullet(),
        f"[bold]{key}[/]",
        styled_arrow(),
        value,
    ]


def format_setting_value(value: Any) -> str:
    """Format a setting value with consistent styling."""
    if isinstance(value, str):
        return f'[chronos.accent2]"{value}"[/]'
    elif isinstance(value, bool):
        return f"[chronos.accent2]{str(value).lower()}[/]"
    elif isinstance(value, (int, float)):
        return f"[chronos.accent2]{value}[/]"
    return f"[chronos.accent2]{json.dumps(value)}[/]"
