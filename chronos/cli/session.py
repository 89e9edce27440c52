# chronos/cli/session.py
# Interactive stopwatch session: keyboard commands + cooperative render loop + Rich Live display
#
# All engine mutation happens on the calling thread. A reader thread only turns keypresses into
# queue items; the main loop waits on the queue no longer than the next scheduled frame.

from __future__ import annotations

import queue
import threading
from typing import Callable, Optional, Protocol

from readchar import key, readkey
from rich.console import Console, RenderableType
from rich.live import Live

from ..core.clock import Clock, MonotonicClock
from ..core.engine import StopwatchEngine
from ..core.gateway import PersistenceGateway
from ..core.scheduler import CooperativeScheduler
from ..core.types import Lap, TimeParts
from ..core.verbose import vlog, vlog_dev
from ..chronos_io.console import get_console, refresh_theme
from ..ui.display.stopwatch_view import render_stopwatch

QUIT_KEYS = ("q", "Q", key.ESC, key.CTRL_C)


# * Source of keypresses; poll() returns None when nothing arrived within timeout
class KeySource(Protocol):
    def poll(self, timeout: Optional[float]) -> Optional[str]: ...

    def close(self) -> None: ...


# * Terminal keys via readchar on a daemon reader thread
class TerminalKeySource:
    def __init__(self, read: Callable[[], str] = readkey) -> None:
        self._read = read
        self._keys: "queue.Queue[str]" = queue.Queue()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._reader, name="chronos-keys", daemon=True)
        self._thread.start()

    def _reader(self) -> None:
        while not self._stop.is_set():
            k = self._read()
            self._keys.put(k)
            # stop reading once quitting so the terminal mode is restored by readchar
            if k in QUIT_KEYS:
                break

    def poll(self, timeout: Optional[float]) -> Optional[str]:
        try:
            return self._keys.get(timeout=timeout)
        except queue.Empty:
            return None

    def close(self) -> None:
        self._stop.set()


class StopwatchSession:
    """Host for one interactive stopwatch run.

    Wires a StopwatchEngine to a CooperativeScheduler and a Rich Live view.
    ``run()`` blocks until a quit key is pressed.
    """

    def __init__(
        self,
        gateway: Optional[PersistenceGateway] = None,
        clock: Optional[Clock] = None,
        console: Optional[Console] = None,
        key_source: Optional[KeySource] = None,
        tick_interval_ms: float = 1000 / 30,
        load_saved: bool = True,
    ) -> None:
        self.clock = clock or MonotonicClock()
        self.scheduler = CooperativeScheduler(self.clock)
        self.console = console or get_console()
        self._key_source = key_source
        self._live: Optional[Live] = None
        self.frames = 0

        self.engine = StopwatchEngine(
            clock=self.clock,
            scheduler=self.scheduler,
            gateway=gateway,
            on_tick=self._on_tick,
            on_lap=self._on_lap,
            tick_interval_ms=tick_interval_ms,
        )
        if load_saved:
            self.engine.load_saved_data()
            vlog("SESSION", f"Restored {len(self.engine.laps)} saved laps")
        refresh_theme(self.engine.theme, self.console)

    # ===== RENDERING =====

    def render_screen(
        self, total: Optional[TimeParts] = None, current_lap: Optional[TimeParts] = None
    ) -> RenderableType:
        snapshot = self.engine.snapshot()
        return render_stopwatch(
            state=snapshot.state,
            total=total or snapshot.total,
            current_lap=current_lap or snapshot.current_lap,
            rows=self.engine.lap_rows(),
            stats=self.engine.statistics(),
            sound_enabled=self.engine.sound_enabled,
            theme=self.engine.theme,
        )

    def _on_tick(self, total: TimeParts, current_lap: TimeParts) -> None:
        self.frames += 1
        self._redraw(total, current_lap)

    def _on_lap(self, lap: Lap) -> None:
        # terminal bell stands in for the lap tick sound
        self.console.bell()

    def _redraw(
        self, total: Optional[TimeParts] = None, current_lap: Optional[TimeParts] = None
    ) -> None:
        if self._live is not None:
            self._live.update(self.render_screen(total, current_lap), refresh=True)

    # ===== INPUT =====

    # * Dispatch one key; returns False when the session should end
    def handle_key(self, k: str) -> bool:
        if k in QUIT_KEYS:
            return False
        if k == key.SPACE:
            self.engine.toggle_run_pause()
        elif k in ("l", "L"):
            self.engine.lap()
        elif k in ("r", "R"):
            self.engine.reset()
        elif k in ("c", "C"):
            self.engine.clear_laps()
        elif k in ("t", "T"):
            refresh_theme(self.engine.toggle_theme(), self.console)
        elif k in ("s", "S"):
            self.engine.toggle_sound()
        else:
            vlog_dev("SESSION", f"Unbound key {k!r}")
            return True
        self._redraw()
        return True

    # ===== MAIN LOOP =====

    # wait for a key no longer than the next frame is due
    def _poll_timeout(self) -> Optional[float]:
        delay_ms = self.scheduler.next_delay_ms()
        return None if delay_ms is None else delay_ms / 1000.0

    def run(self) -> None:
        key_source = self._key_source or TerminalKeySource()
        try:
            with Live(
                self.render_screen(),
                console=self.console,
                auto_refresh=False,
                transient=False,
            ) as live:
                self._live = live
                while True:
                    k = key_source.poll(self._poll_timeout())
                    if k is not None and not self.handle_key(k):
                        break
                    self.scheduler.run_pending()
        finally:
            self._live = None
            key_source.close()
            # stop the render chain; elapsed time is not persisted between sessions
            self.engine.pause()
        vlog("SESSION", f"Session ended after {self.frames} frames")
