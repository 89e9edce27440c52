# tests/unit/core/test_exceptions.py
# Unit tests for the Chronos exception hierarchy

from pathlib import Path

import pytest

from chronos.core.exceptions import (
    ChronosError,
    FileOperationError,
    FileReadError,
    FileWriteError,
    JSONParsingError,
    LapDataError,
    format_error_message,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [JSONParsingError, LapDataError, FileReadError, FileWriteError],
    )
    def test_all_derive_from_chronos_error(self, exc_type):
        assert issubclass(exc_type, ChronosError)

    def test_file_errors_share_base(self):
        assert issubclass(FileReadError, FileOperationError)
        assert issubclass(FileWriteError, FileOperationError)


class TestFileOperationError:
    # * Verify string paths are normalized to Path
    def test_path_normalized(self):
        err = FileWriteError("nope", "/tmp/laps.json")
        assert err.path == Path("/tmp/laps.json")
        assert str(err) == "nope"
        assert "path=" in repr(err)


def test_format_error_message():
    assert format_error_message("File Error", "missing") == "[red]File Error:[/] missing"
