# tests/unit/ui/test_theming.py
# Unit tests for dark/light themes & console theme switching

from rich.console import Console

from chronos.ui.theming.console_theme import refresh_theme
from chronos.ui.theming.theme_definitions import THEMES
from chronos.ui.theming.theme_engine import (
    get_active_theme_name,
    get_chronos_theme,
    natural_gradient,
    resolve_theme_name,
    set_active_theme_name,
)


class TestThemeEngine:
    # * Verify both palettes define the same slots
    def test_palettes_share_slots(self):
        assert set(THEMES["dark"]) == set(THEMES["light"])

    def test_unknown_theme_resolves_to_default(self):
        assert resolve_theme_name("neon") == "dark"
        assert set_active_theme_name("light") == "light"
        assert get_active_theme_name() == "light"

    def test_theme_styles(self):
        styles = get_chronos_theme("light").styles
        assert "chronos.fastest" in styles
        assert "chronos.key" in styles
        assert styles["chronos.accent"] != get_chronos_theme("dark").styles["chronos.accent"]

    def test_gradient_keeps_text(self):
        assert natural_gradient("CHRONOS").plain == "CHRONOS"
        assert natural_gradient("x", ["#000000"]).plain == "x"


class TestRefreshTheme:
    # * Verify refresh replaces (not stacks) the pushed theme
    def test_refresh_replaces_theme(self):
        console = Console()
        refresh_theme("light", console)
        light = console.get_style("chronos.accent")
        refresh_theme("dark", console)
        refresh_theme("dark", console)
        assert console.get_style("chronos.accent") != light
