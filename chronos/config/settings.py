# chronos/config/settings.py
# Configuration management for the Chronos CLI: state paths, refresh rate & persistence switches

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, cast

import typer

from ..chronos_io.generics import read_json_safe, write_json_safe
from ..core.exceptions import ChronosError

# environment override for the config & state directory (may come from a .env file)
CHRONOS_HOME_ENV = "CHRONOS_HOME"


# * Resolve the Chronos home directory ($CHRONOS_HOME or ~/.chronos)
def chronos_home() -> Path:
    override = os.environ.get(CHRONOS_HOME_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".chronos"


# * Settings dataclass w/ state file locations & live display configuration
@dataclass
class ChronosSettings:
    # state directory for laps & preferences (None -> chronos home)
    state_dir: Optional[str] = None
    laps_filename: str = "laps.json"
    preferences_filename: str = "preferences.json"

    # live display frames per second
    refresh_rate: int = 30

    # persist laps & preferences between sessions
    persist_laps: bool = True

    # dev mode setting (enables DEBUG output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        if self.state_dir is not None and not isinstance(self.state_dir, str):
            raise ValueError(
                f"state_dir must be a string path or null, got {type(self.state_dir).__name__}"
            )

        for name in ("laps_filename", "preferences_filename"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")

        # refresh_rate validation (bool is an int subclass)
        if (
            isinstance(self.refresh_rate, bool)
            or not isinstance(self.refresh_rate, int)
            or not 1 <= self.refresh_rate <= 120
        ):
            raise ValueError(f"refresh_rate must be an integer 1-120, got {self.refresh_rate!r}")

        # strict bool validation (no coercion)
        for name in ("persist_laps", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}"
                )

    @property
    def state_path(self) -> Path:
        if self.state_dir:
            return Path(self.state_dir).expanduser()
        return chronos_home()

    @property
    def laps_path(self) -> Path:
        return self.state_path / self.laps_filename

    @property
    def preferences_path(self) -> Path:
        return self.state_path / self.preferences_filename

    @property
    def tick_interval_ms(self) -> float:
        return 1000.0 / self.refresh_rate


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self._explicit_path = config_path
        self._settings: Optional[ChronosSettings] = None

    # resolved lazily so CHRONOS_HOME from .env is honored
    @property
    def config_path(self) -> Path:
        return self._explicit_path or chronos_home() / "config.json"

    @config_path.setter
    def config_path(self, value: Path) -> None:
        self._explicit_path = value

    # load settings from file or return defaults
    def load(self) -> ChronosSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                if not isinstance(data, dict):
                    raise ValueError("config root must be a JSON object")
                self._settings = ChronosSettings(**data)
            except (ChronosError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = ChronosSettings()
        else:
            self._settings = ChronosSettings()

        return self._settings

    def save(self, settings: ChronosSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a value; the whole dataclass is rebuilt so __post_init__ validation runs
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        self.save(ChronosSettings(**data))

    def reset(self) -> None:
        self.save(ChronosSettings())

    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[ChronosSettings] = None
) -> ChronosSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for ChronosSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, ChronosSettings):
            return obj

    return settings_manager.load()
