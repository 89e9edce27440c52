# tests/unit/chronos_io/test_persistence.py
# Unit tests for the JSON-file persistence gateway

import json

import pytest

from chronos.chronos_io.persistence import JsonFileGateway
from chronos.core.engine import StopwatchEngine
from chronos.core.gateway import PREF_SOUND, PREF_THEME, InMemoryGateway, PersistenceGateway
from chronos.core.scheduler import CooperativeScheduler
from chronos.core.types import Lap


@pytest.fixture
def gateway(tmp_path):
    return JsonFileGateway(tmp_path / "state")


class TestLaps:
    # * Verify persisted layout & order
    def test_save_and_load(self, gateway):
        laps = [Lap(1000, 1000), Lap(2000, 3000)]
        gateway.save_laps(laps)
        raw = json.loads(gateway.laps_path.read_text(encoding="utf-8"))
        assert raw == [{"lapMs": 1000, "totalMs": 1000}, {"lapMs": 2000, "totalMs": 3000}]
        assert gateway.load_laps() == laps

    def test_missing_file_is_empty(self, gateway):
        assert gateway.load_laps() == []

    # * Verify malformed data loads as empty
    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            '{"lapMs": 1, "totalMs": 1}',
            '[{"lapMs": 1}]',
            '[{"lapMs": "fast", "totalMs": 1}]',
            "null",
        ],
    )
    def test_malformed_is_empty(self, gateway, content):
        gateway.laps_path.parent.mkdir(parents=True)
        gateway.laps_path.write_text(content, encoding="utf-8")
        assert gateway.load_laps() == []

    # * Verify undecodable bytes & out-of-range numbers load as empty
    @pytest.mark.parametrize(
        "content",
        [
            b"[\xff\xfe]",
            b'[{"lapMs": 1' + b"0" * 400 + b', "totalMs": 1}]',
            b'[{"lapMs": 1' + b"0" * 5000 + b', "totalMs": 1}]',
            b"[" * 100_000,
        ],
    )
    def test_corrupt_bytes_are_empty(self, gateway, content):
        gateway.laps_path.parent.mkdir(parents=True)
        gateway.laps_path.write_bytes(content)
        assert gateway.load_laps() == []

    # * Verify write failures are swallowed
    def test_write_failure_swallowed(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a dir")
        gateway = JsonFileGateway(blocker)
        gateway.save_laps([Lap(1, 1)])
        gateway.save_preference(PREF_THEME, "light")
        assert gateway.load_laps() == []


class TestPreferences:
    def test_save_and_load(self, gateway):
        gateway.save_preference(PREF_THEME, "light")
        gateway.save_preference(PREF_SOUND, "false")
        assert gateway.load_preference(PREF_THEME) == "light"
        assert gateway.load_preference(PREF_SOUND) == "false"
        raw = json.loads(gateway.preferences_path.read_text(encoding="utf-8"))
        assert raw == {"theme": "light", "soundEnabled": "false"}

    def test_missing_is_none(self, gateway):
        assert gateway.load_preference(PREF_THEME) is None

    # * Verify non-object & non-string data is ignored
    def test_non_object_ignored(self, gateway):
        gateway.preferences_path.parent.mkdir(parents=True)
        gateway.preferences_path.write_text("[1, 2]", encoding="utf-8")
        assert gateway.load_preference(PREF_THEME) is None
        gateway.save_preference(PREF_THEME, "dark")
        assert gateway.load_preference(PREF_THEME) == "dark"

    # * Verify an undecodable preferences file is absent & gets replaced on save
    def test_invalid_utf8_ignored(self, gateway):
        gateway.preferences_path.parent.mkdir(parents=True)
        gateway.preferences_path.write_bytes(b'{"theme": "\xff"}')
        assert gateway.load_preference(PREF_THEME) is None
        gateway.save_preference(PREF_SOUND, "false")
        assert gateway.load_preference(PREF_SOUND) == "false"

    def test_non_string_value_ignored(self, gateway):
        gateway.preferences_path.parent.mkdir(parents=True)
        gateway.preferences_path.write_text('{"soundEnabled": true}', encoding="utf-8")
        assert gateway.load_preference(PREF_SOUND) is None


class TestInMemoryGateway:
    def test_protocol(self, gateway):
        assert isinstance(InMemoryGateway(), PersistenceGateway)
        assert isinstance(gateway, PersistenceGateway)

    # * Verify saved laps are copied, not aliased
    def test_copies_laps(self):
        memory = InMemoryGateway()
        laps = [Lap(1, 1)]
        memory.save_laps(laps)
        laps.append(Lap(2, 3))
        assert memory.load_laps() == [Lap(1, 1)]


class TestEngineRestore:
    # * Verify corrupt saved files leave the engine on defaults
    def test_load_saved_data_survives_corrupt_files(self, clock, gateway):
        gateway.laps_path.parent.mkdir(parents=True)
        gateway.laps_path.write_bytes(b'[{"lapMs": 1' + b"0" * 400 + b', "totalMs": 1}]')
        gateway.preferences_path.write_bytes(b'{"theme": "\xff"}')

        engine = StopwatchEngine(clock=clock, scheduler=CooperativeScheduler(clock), gateway=gateway)
        engine.load_saved_data()
        assert engine.laps == ()
        assert engine.theme == "dark"
        assert engine.sound_enabled is True
