# tests/unit/core/test_output.py
# Unit tests for the output registry & verbose logging helpers

from chronos.cli.output_manager import OutputManager
from chronos.core.output import (
    NullOutputManager,
    OutputInterface,
    OutputLevel,
    get_output_manager,
    reset_output_manager,
    set_output_manager,
)
from chronos.core.verbose import (
    init_verbose,
    is_quiet,
    vlog_dev,
    vlog_lap,
    vlog_persistence_error,
    vlog_state,
)


class RecordingOutput(NullOutputManager):
    def __init__(self, level=OutputLevel.VERBOSE):
        self.level = level
        self.messages = []
        self.warnings = []

    def get_level(self):
        return self.level

    def is_debug_enabled(self):
        return self.level >= OutputLevel.DEBUG

    def is_verbose_enabled(self):
        return self.level >= OutputLevel.VERBOSE

    def verbose(self, msg, category="INFO", detail=None, **kwargs):
        self.messages.append((category, msg, detail))

    def warning(self, msg, category="WARN"):
        self.warnings.append((category, msg))


class TestRegistry:
    # * Verify null manager is the default
    def test_default_is_null(self):
        assert isinstance(get_output_manager(), NullOutputManager)
        assert isinstance(get_output_manager(), OutputInterface)
        assert not get_output_manager().is_verbose_enabled()
        assert not is_quiet()

    def test_set_and_reset(self):
        recorder = RecordingOutput()
        set_output_manager(recorder)
        assert get_output_manager() is recorder
        reset_output_manager()
        assert isinstance(get_output_manager(), NullOutputManager)


class TestVerboseHelpers:
    # * Verify categorized state & lap messages
    def test_state_and_lap_categories(self):
        recorder = RecordingOutput()
        set_output_manager(recorder)
        vlog_state("idle", "running", 0)
        vlog_lap(2, 1500, 3000)
        assert recorder.messages[0][:2] == ("STATE", "idle -> running")
        assert recorder.messages[1][0] == "LAP"
        assert "1500ms" in recorder.messages[1][1]

    def test_persistence_error_is_warning(self):
        recorder = RecordingOutput()
        set_output_manager(recorder)
        vlog_persistence_error("Saving laps", OSError("disk full"))
        assert recorder.warnings[0][0] == "STORE"
        assert "disk full" in recorder.warnings[0][1]

    # * Verify dev logging only at DEBUG
    def test_vlog_dev_requires_debug(self):
        recorder = RecordingOutput(OutputLevel.VERBOSE)
        set_output_manager(recorder)
        vlog_dev("ENGINE", "hidden")
        assert recorder.messages == []

        recorder.level = OutputLevel.DEBUG
        vlog_dev("ENGINE", "shown")
        assert recorder.messages[0][0] == "DEV:ENGINE"

    def test_init_verbose_registers_output_manager(self):
        init_verbose(enabled=True)
        manager = get_output_manager()
        assert isinstance(manager, OutputManager)
        assert manager.get_level() == OutputLevel.VERBOSE

    # * Verify quiet wins over verbose
    def test_init_verbose_quiet(self):
        init_verbose(enabled=True, quiet=True)
        assert get_output_manager().get_level() == OutputLevel.QUIET
        assert is_quiet()
