# tests/unit/core/test_timer.py
# Unit tests for the stopwatch state machine & drift-free elapsed accounting

from chronos.core.timer import StopwatchTimer
from chronos.core.types import RunState
from tests.test_support.fake_clock import FakeClock


class TestStopwatchTimer:
    # * Verify initial state
    def test_starts_idle_at_zero(self, clock):
        timer = StopwatchTimer(clock)
        assert timer.state is RunState.IDLE
        assert not timer.running
        assert timer.elapsed_now() == 0

    # * Verify elapsed follows the clock while running
    def test_elapsed_while_running(self, clock):
        timer = StopwatchTimer(clock)
        assert timer.start() is True
        clock.advance(1234)
        assert timer.state is RunState.RUNNING
        assert timer.elapsed_now() == 1234

    # * Verify paused intervals are excluded
    def test_pause_excludes_paused_time(self, clock):
        timer = StopwatchTimer(clock)
        timer.start()
        clock.advance(2500)
        assert timer.pause() is True
        clock.advance(10_000)
        assert timer.state is RunState.PAUSED
        assert timer.elapsed_now() == 2500

        timer.start()
        clock.advance(500)
        timer.pause()
        assert timer.elapsed_now() == 3000

    # * Verify invalid transitions are no-ops
    def test_start_while_running_is_noop(self, clock):
        timer = StopwatchTimer(clock)
        timer.start()
        clock.advance(100)
        assert timer.start() is False
        clock.advance(100)
        assert timer.elapsed_now() == 200

    def test_pause_when_not_running_is_noop(self, clock):
        timer = StopwatchTimer(clock)
        assert timer.pause() is False
        assert timer.state is RunState.IDLE
        timer.start()
        clock.advance(40)
        timer.pause()
        assert timer.pause() is False
        assert timer.elapsed_now() == 40

    # * Verify reset from any state returns to idle
    def test_reset_mid_run(self, clock):
        timer = StopwatchTimer(clock)
        timer.start()
        clock.advance(900)
        timer.reset()
        assert timer.state is RunState.IDLE
        assert not timer.running
        clock.advance(900)
        assert timer.elapsed_now() == 0

    # * Verify many short segments accumulate without drift
    def test_many_segments_sum_exactly(self):
        clock = FakeClock(start_ms=0)
        timer = StopwatchTimer(clock)
        for _ in range(100):
            timer.start()
            clock.advance(10)
            timer.pause()
            clock.advance(7)
        assert timer.elapsed_now() == 1000
