# chronos/core/types.py
# Pure dataclasses & enums shared by the timer engine - no I/O dependencies

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .exceptions import LapDataError


# persisted lap record field names
LAP_MS_KEY = "lapMs"
TOTAL_MS_KEY = "totalMs"


# * Run state of the stopwatch
class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


# * Formatted time fields; str() renders HH:MM:SS.cc
@dataclass(frozen=True)
class TimeParts:
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    centiseconds: int = 0

    # zero-padded display strings (hours may exceed two digits)
    def padded(self) -> tuple[str, str, str, str]:
        return (
            f"{self.hours:02d}",
            f"{self.minutes:02d}",
            f"{self.seconds:02d}",
            f"{self.centiseconds:02d}",
        )

    def __str__(self) -> str:
        hh, mm, ss, cc = self.padded()
        return f"{hh}:{mm}:{ss}.{cc}"


def _coerce_ms(data: dict[str, Any], key: str) -> float:
    if key not in data:
        raise LapDataError(f"Lap record missing '{key}'")
    value = data[key]
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LapDataError(f"Lap field '{key}' must be a number, got {value!r}")
    try:
        ms = float(value)
    except OverflowError as e:
        raise LapDataError(f"Lap field '{key}' is too large") from e
    if not math.isfinite(ms) or ms < 0:
        raise LapDataError(f"Lap field '{key}' must be finite & >= 0, got {ms!r}")
    return ms


# * A recorded lap split; immutable once created
@dataclass(frozen=True)
class Lap:
    lap_ms: float
    total_ms: float

    # serialize to the persisted lap layout
    def to_dict(self) -> dict[str, float]:
        return {LAP_MS_KEY: self.lap_ms, TOTAL_MS_KEY: self.total_ms}

    # parse a persisted lap record, raising LapDataError when malformed
    @classmethod
    def from_dict(cls, data: Any) -> "Lap":
        if not isinstance(data, dict):
            raise LapDataError(f"Lap record must be an object, got {type(data).__name__}")
        return cls(
            lap_ms=_coerce_ms(data, LAP_MS_KEY),
            total_ms=_coerce_ms(data, TOTAL_MS_KEY),
        )


# * Lap list row w/ highlight flags & delta vs average
@dataclass(frozen=True)
class LapRow:
    number: int
    lap: Lap
    is_fastest: bool = False
    is_slowest: bool = False
    # None when fewer than two laps exist
    delta_ms: Optional[float] = None

    @property
    def badge(self) -> str:
        if self.is_fastest:
            return "Fastest"
        if self.is_slowest:
            return "Slowest"
        return f"Lap {self.number}"


# * Aggregate statistics over all recorded laps
@dataclass(frozen=True)
class LapStatistics:
    count: int = 0
    fastest_ms: Optional[float] = None
    slowest_ms: Optional[float] = None
    average_ms: Optional[float] = None
    # all laps share one value (incl. the single-lap case)
    tied: bool = False


# * Point-in-time view of the engine for renderers
@dataclass(frozen=True)
class EngineSnapshot:
    state: RunState
    total_ms: float
    current_lap_ms: float
    lap_count: int
    total: TimeParts
    current_lap: TimeParts
