# chronos/core/timer.py
# Start/pause/reset state machine w/ drift-free elapsed-time accounting

from __future__ import annotations

from dataclasses import dataclass

from .clock import Clock
from .types import RunState


# * Mutable run state; elapsed_ms excludes the current run segment
@dataclass
class TimerState:
    running: bool = False
    elapsed_ms: float = 0.0
    # clock reading at the start of the current segment (only meaningful while running)
    start_stamp: float = 0.0


# * Stopwatch state machine; invalid transitions are no-ops, never errors
class StopwatchTimer:
    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._state = TimerState()
        # set once a segment has run since the last reset (distinguishes PAUSED from IDLE)
        self._has_run = False

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def state(self) -> RunState:
        if self._state.running:
            return RunState.RUNNING
        if self._has_run:
            return RunState.PAUSED
        return RunState.IDLE

    # start or resume; returns False when already running
    def start(self) -> bool:
        if self._state.running:
            return False
        self._state.start_stamp = self._clock.now()
        self._state.running = True
        self._has_run = True
        return True

    # pause & fold the current segment into elapsed_ms; returns False when not running
    def pause(self) -> bool:
        if not self._state.running:
            return False
        self._state.elapsed_ms += self._clock.now() - self._state.start_stamp
        self._state.running = False
        return True

    # return to IDLE w/ zero elapsed time
    def reset(self) -> None:
        self._state = TimerState()
        self._has_run = False

    # total active time since the last reset, excluding paused intervals
    def elapsed_now(self) -> float:
        if not self._state.running:
            return self._state.elapsed_ms
        return self._state.elapsed_ms + (self._clock.now() - self._state.start_stamp)
