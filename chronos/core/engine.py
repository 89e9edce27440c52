# chronos/core/engine.py
# Stopwatch engine: owns timer, lap ledger & render loop and exposes the command surface

from __future__ import annotations

from typing import Callable, Optional

from .gateway import (
    PREF_SOUND,
    PREF_THEME,
    SOUND_VALUES,
    THEME_VALUES,
    InMemoryGateway,
    PersistenceGateway,
)
from .clock import Clock
from .formatting import format_time
from .laps import LapLedger
from .scheduler import RenderLoop, Scheduler
from .timer import StopwatchTimer
from .types import EngineSnapshot, Lap, LapRow, LapStatistics, RunState, TimeParts
from .verbose import vlog_dev, vlog_lap, vlog_state

TickCallback = Callable[[TimeParts, TimeParts], None]
LapCallback = Callable[[Lap], None]

DEFAULT_THEME = "dark"
DEFAULT_SOUND_ENABLED = True
DEFAULT_TICK_INTERVAL_MS = 1000 / 30


class StopwatchEngine:
    """Single stopwatch session.

    All commands run synchronously on the caller's thread & never raise for
    unmet preconditions; they degrade to no-ops. While running, the render loop
    calls ``on_tick(total, current_lap)`` once per frame.

    Args:
        clock: monotonic millisecond time source.
        scheduler: cancellable scheduler driving the render loop.
        gateway: lap & preference storage (in-memory when omitted).
        on_tick: host render callback.
        on_lap: feedback hook run after each lap while sound is enabled.
        tick_interval_ms: delay between frames.
    """

    def __init__(
        self,
        clock: Clock,
        scheduler: Scheduler,
        gateway: Optional[PersistenceGateway] = None,
        on_tick: Optional[TickCallback] = None,
        on_lap: Optional[LapCallback] = None,
        tick_interval_ms: float = DEFAULT_TICK_INTERVAL_MS,
    ) -> None:
        self._timer = StopwatchTimer(clock)
        self._ledger = LapLedger()
        self._render_loop = RenderLoop(scheduler, tick_interval_ms, self._emit_tick)
        self._gateway: PersistenceGateway = gateway if gateway is not None else InMemoryGateway()
        self.on_tick = on_tick
        self.on_lap = on_lap
        self.theme = DEFAULT_THEME
        self.sound_enabled = DEFAULT_SOUND_ENABLED

    # ===== QUERIES =====

    @property
    def state(self) -> RunState:
        return self._timer.state

    @property
    def running(self) -> bool:
        return self._timer.running

    @property
    def render_active(self) -> bool:
        return self._render_loop.active

    @property
    def laps(self) -> tuple[Lap, ...]:
        return self._ledger.laps

    @property
    def lap_start_ms(self) -> float:
        return self._ledger.lap_start_ms

    def elapsed_now(self) -> float:
        return self._timer.elapsed_now()

    def current_lap_ms(self) -> float:
        return self._ledger.current_lap_ms(self._timer.elapsed_now())

    def statistics(self) -> LapStatistics:
        return self._ledger.statistics()

    def lap_rows(self) -> list[LapRow]:
        return self._ledger.rows()

    def snapshot(self) -> EngineSnapshot:
        total_ms = self._timer.elapsed_now()
        lap_ms = self._ledger.current_lap_ms(total_ms)
        return EngineSnapshot(
            state=self._timer.state,
            total_ms=total_ms,
            current_lap_ms=lap_ms,
            lap_count=len(self._ledger),
            total=format_time(total_ms),
            current_lap=format_time(lap_ms),
        )

    # ===== COMMANDS =====

    def start(self) -> None:
        previous = self._timer.state
        if not self._timer.start():
            vlog_dev("ENGINE", "start() ignored: already running")
            return
        self._render_loop.start()
        vlog_state(previous.value, RunState.RUNNING.value, self._timer.elapsed_now())

    def pause(self) -> None:
        if not self._timer.pause():
            vlog_dev("ENGINE", "pause() ignored: not running")
            return
        # no frame may fire once the state has left RUNNING
        self._render_loop.stop()
        vlog_state(RunState.RUNNING.value, RunState.PAUSED.value, self._timer.elapsed_now())

    def toggle_run_pause(self) -> None:
        if self._timer.running:
            self.pause()
        else:
            self.start()

    def lap(self) -> None:
        if not self._timer.running:
            vlog_dev("ENGINE", "lap() ignored: not running")
            return
        lap = self._ledger.record(self._timer.elapsed_now())
        vlog_lap(len(self._ledger), lap.lap_ms, lap.total_ms)
        if self.sound_enabled and self.on_lap is not None:
            self.on_lap(lap)
        self._gateway.save_laps(self._ledger.laps)

    def reset(self) -> None:
        previous = self._timer.state
        self._render_loop.stop()
        self._timer.reset()
        self._ledger.reset()
        vlog_state(previous.value, RunState.IDLE.value, 0.0)
        # draw the zero state once so the host display clears
        self._emit_tick()
        self._gateway.save_laps(self._ledger.laps)

    def clear_laps(self) -> None:
        self._ledger.clear(self._timer.elapsed_now())
        vlog_dev("ENGINE", f"Laps cleared; next lap measured from {self._ledger.lap_start_ms:.0f}ms")
        self._gateway.save_laps(self._ledger.laps)

    # ===== PREFERENCES =====

    def toggle_theme(self) -> str:
        self.theme = "light" if self.theme == "dark" else "dark"
        self._gateway.save_preference(PREF_THEME, self.theme)
        return self.theme

    def toggle_sound(self) -> bool:
        self.sound_enabled = not self.sound_enabled
        self._gateway.save_preference(PREF_SOUND, "true" if self.sound_enabled else "false")
        return self.sound_enabled

    # * Restore saved laps & preferences; timing is never resumed
    def load_saved_data(self) -> None:
        self._ledger.restore(self._gateway.load_laps())

        theme = self._gateway.load_preference(PREF_THEME)
        if theme in THEME_VALUES:
            self.theme = theme

        sound = self._gateway.load_preference(PREF_SOUND)
        if sound in SOUND_VALUES:
            self.sound_enabled = sound == "true"

    # ===== RENDERING =====

    def _emit_tick(self) -> None:
        if self.on_tick is None:
            return
        snapshot = self.snapshot()
        self.on_tick(snapshot.total, snapshot.current_lap)
