# chronos/core/formatting.py
# Pure time formatting helpers (truncation only, no rounding)

from __future__ import annotations

import math

from .types import TimeParts

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1000


# * Split milliseconds into hours (unbounded), minutes, seconds & centiseconds
def format_time(total_ms: float) -> TimeParts:
    ms = max(0, math.floor(total_ms))
    return TimeParts(
        hours=ms // MS_PER_HOUR,
        minutes=(ms // MS_PER_MINUTE) % 60,
        seconds=(ms // MS_PER_SECOND) % 60,
        centiseconds=(ms % MS_PER_SECOND) // 10,
    )


# compact HH:MM:SS.cc string used by lap rows
def format_lap_time(total_ms: float) -> str:
    return str(format_time(total_ms))


# * Signed delta: "+" slower or equal to average, "-" faster; magnitude formatted separately
def format_delta(delta_ms: float) -> str:
    sign = "+" if delta_ms >= 0 else "-"
    return f"{sign}{format_lap_time(abs(delta_ms))}"
