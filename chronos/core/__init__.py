# chronos/core/__init__.py
# Timing engine: clock, state machine, lap ledger & render scheduling

from .clock import Clock, MonotonicClock
from .engine import StopwatchEngine
from .formatting import format_delta, format_lap_time, format_time
from .gateway import InMemoryGateway, PersistenceGateway
from .laps import LapLedger
from .scheduler import CooperativeScheduler, RenderLoop, ScheduleToken, Scheduler
from .timer import StopwatchTimer, TimerState
from .types import EngineSnapshot, Lap, LapRow, LapStatistics, RunState, TimeParts

__all__ = [
    "Clock",
    "MonotonicClock",
    "StopwatchEngine",
    "format_delta",
    "format_lap_time",
    "format_time",
    "InMemoryGateway",
    "PersistenceGateway",
    "LapLedger",
    "CooperativeScheduler",
    "RenderLoop",
    "ScheduleToken",
    "Scheduler",
    "StopwatchTimer",
    "TimerState",
    "EngineSnapshot",
    "Lap",
    "LapRow",
    "LapStatistics",
    "RunState",
    "TimeParts",
]
