# chronos/core/clock.py
# Clock source abstraction: monotonic millisecond readings for elapsed-time accounting

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


# * Protocol for time sources consumed by the timer, ledger & scheduler
@runtime_checkable
class Clock(Protocol):
    # milliseconds; never decreases within a session
    def now(self) -> float: ...


# * Monotonic clock backed by time.monotonic() (unaffected by system clock changes)
class MonotonicClock:
    def now(self) -> float:
        return time.monotonic() * 1000.0
