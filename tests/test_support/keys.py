# tests/test_support/keys.py
# Scripted key source for driving StopwatchSession w/o a terminal

from __future__ import annotations

from typing import Iterable, Optional, Union

from tests.test_support.fake_clock import FakeClock

# a step is either a key to deliver or a number of ms to let pass
Step = Union[str, float, int]


class ScriptedKeys:
    def __init__(self, clock: FakeClock, steps: Iterable[Step]) -> None:
        self._clock = clock
        self._steps = list(steps)
        self.polls: list[Optional[float]] = []
        self.closed = False

    def poll(self, timeout: Optional[float]) -> Optional[str]:
        self.polls.append(timeout)
        if not self._steps:
            # script exhausted; quit so the session cannot spin forever
            return "q"
        step = self._steps.pop(0)
        if isinstance(step, str):
            return step
        self._clock.advance(float(step))
        return None

    def close(self) -> None:
        self.closed = True
