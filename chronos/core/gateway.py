# chronos/core/gateway.py
# Persistence gateway contract consumed by the engine (pure - durable adapters live in chronos_io)

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable

from .exceptions import LapDataError
from .types import Lap

# recognized preference keys & values
PREF_THEME = "theme"
PREF_SOUND = "soundEnabled"
THEME_VALUES = ("dark", "light")
SOUND_VALUES = ("true", "false")


# * Storage interface for laps & preferences
@runtime_checkable
class PersistenceGateway(Protocol):
    def save_laps(self, laps: Iterable[Lap]) -> None: ...

    def load_laps(self) -> list[Lap]: ...

    def save_preference(self, key: str, value: str) -> None: ...

    def load_preference(self, key: str) -> Optional[str]: ...


# * Parse a persisted lap array; raises LapDataError on any malformed entry
def parse_laps(data: object) -> list[Lap]:
    if not isinstance(data, list):
        raise LapDataError(f"Lap data must be a list, got {type(data).__name__}")
    return [Lap.from_dict(entry) for entry in data]


# * In-memory gateway for tests & sessions w/ persistence disabled
class InMemoryGateway:
    def __init__(self) -> None:
        self._laps: list[Lap] = []
        self._preferences: dict[str, str] = {}

    def save_laps(self, laps: Iterable[Lap]) -> None:
        self._laps = list(laps)

    def load_laps(self) -> list[Lap]:
        return list(self._laps)

    def save_preference(self, key: str, value: str) -> None:
        self._preferences[key] = value

    def load_preference(self, key: str) -> Optional[str]:
        return self._preferences.get(key)
