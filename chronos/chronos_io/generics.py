# chronos/chronos_io/generics.py
# Generic JSON & filesystem helpers shared by settings & the persistence gateway

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from ..core.exceptions import FileReadError, FileWriteError, JSONParsingError
from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    Path(path).parent.mkdir(parents=True, exist_ok=True)


# * Write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: Any, path: Path) -> None:
    content = json.dumps(obj, indent=2)
    try:
        ensure_parent(path)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Could not write {path}: {e}", path) from e
    vlog_file_write(path, len(content))


# * Read JSON w/ UTF-8 encoding; parse errors carry a numbered snippet of the offending text
def read_json_safe(path: Path) -> Any:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FileReadError(f"Could not read {path}: {e}", path) from e
    except UnicodeDecodeError as e:
        raise FileReadError(f"{path} is not valid UTF-8: {e.reason}", path) from e
    vlog_file_read(path, len(text))
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        lines = text.split("\n")
        # JSONDecodeError uses 1-based line numbers
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)

        numbered_lines = []
        for i, line in enumerate(lines[snippet_start:snippet_end], start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}") from e
    # oversized integer literals & pathological nesting fail outside JSONDecodeError
    except (ValueError, RecursionError) as e:
        raise JSONParsingError(f"Invalid JSON in {path}: {e}") from e


# exit CLI w/ standardized error handling
def exit_with_error(msg: str, code: int = 1) -> None:
    import typer

    typer.echo(msg, err=True)
    raise typer.Exit(code)
