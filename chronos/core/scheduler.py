# chronos/core/scheduler.py
# Cooperative render scheduling: cancellable timer queue & single-chain render loop

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from .clock import Clock


# * Handle returned by schedule(); cancelling is idempotent
@dataclass(eq=False)
class ScheduleToken:
    due: float
    callback: Callable[[], None] = field(repr=False)
    cancelled: bool = False


# * Protocol for schedulers driving the render loop
class Scheduler(Protocol):
    def schedule(self, callback: Callable[[], None], delay_ms: float) -> ScheduleToken: ...

    def cancel(self, token: ScheduleToken) -> None: ...


# * Single-threaded timer queue; the host loop calls run_pending() between events
class CooperativeScheduler:
    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._queue: list[tuple[float, int, ScheduleToken]] = []
        self._seq = itertools.count()

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> ScheduleToken:
        token = ScheduleToken(due=self._clock.now() + max(0.0, delay_ms), callback=callback)
        heapq.heappush(self._queue, (token.due, next(self._seq), token))
        return token

    def cancel(self, token: ScheduleToken) -> None:
        token.cancelled = True

    # number of live (non-cancelled) entries
    def pending(self) -> int:
        return sum(1 for _, _, token in self._queue if not token.cancelled)

    # ms until the next live entry is due (0 when overdue), None when idle
    def next_delay_ms(self) -> Optional[float]:
        self._drop_cancelled()
        if not self._queue:
            return None
        return max(0.0, self._queue[0][0] - self._clock.now())

    # * Fire every entry due now; entries scheduled while firing wait for the next pass
    def run_pending(self) -> int:
        now = self._clock.now()
        due: list[ScheduleToken] = []
        while self._queue and self._queue[0][0] <= now:
            _, _, token = heapq.heappop(self._queue)
            due.append(token)

        fired = 0
        for token in due:
            # an earlier callback in this pass may have cancelled it
            if token.cancelled:
                continue
            token.cancelled = True
            token.callback()
            fired += 1
        return fired

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)


# * Repeating frame chain; at most one live token, stale firings are suppressed
class RenderLoop:
    def __init__(
        self,
        scheduler: Scheduler,
        interval_ms: float,
        frame: Callable[[], None],
    ) -> None:
        self._scheduler = scheduler
        self.interval_ms = interval_ms
        self._frame = frame
        self._token: Optional[ScheduleToken] = None
        # identifies the live chain; bumped on every start/stop
        self._generation = 0

    @property
    def active(self) -> bool:
        return self._token is not None

    # cancel any live chain & begin a fresh one (first frame fires on the next pass)
    def start(self) -> None:
        self.stop()
        self._schedule(self._generation, 0.0)

    def stop(self) -> None:
        self._generation += 1
        if self._token is not None:
            self._scheduler.cancel(self._token)
            self._token = None

    def _schedule(self, generation: int, delay_ms: float) -> None:
        self._token = self._scheduler.schedule(lambda: self._fire(generation), delay_ms)

    def _fire(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._token = None
        self._frame()
        # frame() may have stopped the loop (e.g. a tick callback calling pause())
        if generation == self._generation:
            self._schedule(generation, self.interval_ms)
