# chronos/cli/decorators.py
# CLI decorator translating Chronos errors into Rich-formatted messages & exit code 1

import functools
from typing import Any, Callable, TypeVar

from ..core.exceptions import (
    ChronosError,
    FileOperationError,
    JSONParsingError,
    LapDataError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling Chronos errors in CLI commands w/ Rich output
def handle_chronos_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..chronos_io.console import console

        try:
            return func(*args, **kwargs)
        except JSONParsingError as e:
            console.print(format_error_message("JSON Parsing Error", str(e)))
            raise SystemExit(1)
        except LapDataError as e:
            console.print(format_error_message("Lap Data Error", str(e)))
            raise SystemExit(1)
        except FileOperationError as e:
            console.print(format_error_message("File Error", str(e)))
            raise SystemExit(1)
        except ChronosError as e:
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
