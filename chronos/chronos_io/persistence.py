# chronos/chronos_io/persistence.py
# Durable JSON-file persistence gateway for laps & preferences
#
# Boundary policy: write failures are logged & swallowed (engine state stays in memory, no retry);
# unreadable or malformed data loads as absent/empty. Nothing here may crash the engine.

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from ..core.exceptions import ChronosError
from ..core.gateway import parse_laps
from ..core.types import Lap
from ..core.verbose import vlog_dev, vlog_persistence_error
from .generics import read_json_safe, write_json_safe


# * Gateway backed by two JSON files in the state directory
class JsonFileGateway:
    def __init__(
        self,
        state_dir: Path,
        laps_filename: str = "laps.json",
        preferences_filename: str = "preferences.json",
    ) -> None:
        self.state_dir = Path(state_dir)
        self.laps_path = self.state_dir / laps_filename
        self.preferences_path = self.state_dir / preferences_filename

    # laps are stored as a JSON array of {"lapMs", "totalMs"} in recording order
    def save_laps(self, laps: Iterable[Lap]) -> None:
        payload = [lap.to_dict() for lap in laps]
        try:
            write_json_safe(payload, self.laps_path)
        except ChronosError as e:
            vlog_persistence_error("Saving laps", e)

    def load_laps(self) -> list[Lap]:
        if not self.laps_path.exists():
            return []
        try:
            return parse_laps(read_json_safe(self.laps_path))
        except ChronosError as e:
            vlog_persistence_error("Loading laps", e)
            return []

    def save_preference(self, key: str, value: str) -> None:
        preferences = self._read_preferences()
        preferences[key] = value
        try:
            write_json_safe(preferences, self.preferences_path)
        except ChronosError as e:
            vlog_persistence_error(f"Saving preference '{key}'", e)

    def load_preference(self, key: str) -> Optional[str]:
        value = self._read_preferences().get(key)
        return value if isinstance(value, str) else None

    def _read_preferences(self) -> dict[str, object]:
        if not self.preferences_path.exists():
            return {}
        try:
            data = read_json_safe(self.preferences_path)
        except ChronosError as e:
            vlog_persistence_error("Loading preferences", e)
            return {}
        if not isinstance(data, dict):
            vlog_dev("STORE", f"Ignoring non-object preferences in {self.preferences_path}")
            return {}
        return data
