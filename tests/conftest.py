# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from tests.test_support.fake_clock import FakeClock


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    # Create isolated .chronos directory & point CHRONOS_HOME at it
    chronos_dir = fake_home / ".chronos"
    chronos_dir.mkdir()
    monkeypatch.setenv("CHRONOS_HOME", str(chronos_dir))

    monkeypatch.setattr(Path, "home", lambda: fake_home)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from chronos.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = chronos_dir / "config.json"

    # ! reset active theme so tests don't leak dark/light state
    from chronos.ui.theming import theme_engine

    monkeypatch.setattr(theme_engine, "_active_theme", theme_engine.DEFAULT_THEME)

    # ! reset output manager to NullOutputManager for test isolation
    from chronos.core.output import reset_output_manager

    reset_output_manager()
    yield fake_home
    reset_output_manager()


@pytest.fixture
def chronos_dir(isolate_config):
    return isolate_config / ".chronos"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def write_config(chronos_dir):
    # Write config.json into the isolated home
    def _write(data):
        path = chronos_dir / "config.json"
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def saved_laps(chronos_dir):
    # Seed laps.json in the isolated state directory
    def _write(records):
        path = chronos_dir / "laps.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write
