# tests/unit/cli/test_output_manager.py
# Unit tests for OutputManager implementation

from chronos.cli.output_manager import OutputManager
from chronos.core.output import OutputInterface, OutputLevel


class TestInitialize:
    # * Verify OutputManager implements protocol
    def test_implements_protocol(self):
        assert isinstance(OutputManager(), OutputInterface)

    def test_default_level(self):
        manager = OutputManager()
        manager.initialize()
        assert manager.get_level() == OutputLevel.NORMAL
        assert not manager.is_verbose_enabled()

    # * Verify DEBUG requires dev_mode
    def test_debug_requires_dev_mode(self):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.DEBUG, dev_mode=False)
        assert manager.get_level() == OutputLevel.VERBOSE

    def test_debug_with_dev_mode(self):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.DEBUG, dev_mode=True)
        assert manager.is_debug_enabled()

    # * Verify quiet wins over everything
    def test_quiet_overrides(self):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.DEBUG, dev_mode=True, quiet=True)
        assert manager.get_level() == OutputLevel.QUIET


class TestConsoleOutput:
    def test_verbose_hidden_at_normal(self, capsys):
        manager = OutputManager()
        manager.initialize()
        manager.verbose("not shown", "STATE")
        assert "not shown" not in capsys.readouterr().out

    def test_verbose_shown_w_category(self, capsys):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.VERBOSE)
        manager.verbose("idle -> running", "STATE", "Elapsed: 0ms")
        out = capsys.readouterr().out
        assert "[STATE]" in out
        assert "idle -> running" in out
        assert "Elapsed: 0ms" in out


class TestLogFile:
    # * Verify messages & warnings reach the log file
    def test_writes_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "chronos.log"
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.VERBOSE, log_file=log_file)
        manager.start_session()
        manager.verbose("Lap 1: 1500ms", "LAP")
        manager.end_session()
        content = log_file.read_text(encoding="utf-8")
        assert "[LAP] Lap 1: 1500ms" in content
        assert "Session Ended" in content
        assert "Chronos 0.1.0 session" in content

    def test_warning_always_logged_to_file(self, tmp_path, capsys):
        log_file = tmp_path / "chronos.log"
        manager = OutputManager()
        manager.initialize(log_file=log_file)
        manager.warning("Saving laps failed", "STORE")
        manager.cleanup()
        assert "[STORE] Saving laps failed" in log_file.read_text(encoding="utf-8")
        assert "Saving laps failed" not in capsys.readouterr().out
