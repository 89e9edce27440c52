# chronos/core/exceptions.py
# Custom exception hierarchy for Chronos (pure - no I/O operations)

from pathlib import Path


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for Chronos application
class ChronosError(Exception):
    pass


# * JSON parsing errors
class JSONParsingError(ChronosError):
    pass


# * Persisted lap data is malformed
class LapDataError(ChronosError):
    pass


# * Base error for file I/O operations
class FileOperationError(ChronosError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
