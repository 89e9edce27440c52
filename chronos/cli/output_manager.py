# chronos/cli/output_manager.py
# Output manager implementation for quiet, normal, verbose & debug modes

# * Real implementation w/ Rich console output & optional plain-text file logging
# * Registered via set_output_manager() at CLI startup

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import IO, Any, Optional

from .. import __version__
from ..core.output import OutputLevel

# tag style per log category (engine transitions, laps, storage, config)
CATEGORY_STYLES = {
    "STATE": "chronos.accent",
    "LAP": "chronos.fastest",
    "STORE": "warning",
    "FILE": "chronos.muted",
    "CONFIG": "chronos.muted",
    "SESSION": "chronos.accent2",
    "DEV": "debug",
}


class OutputManager:
    # Implements the OutputInterface protocol used by chronos.core.verbose

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._session_start: float | None = None
        self._log_file_path: Path | None = None
        self._log_file_handle: IO[str] | None = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        quiet: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._dev_mode = dev_mode
        self._level = self._compute_effective_level(requested_level, dev_mode, quiet)
        self._session_start = time.monotonic()
        self._setup_log_file(log_file)

    # --quiet wins; DEBUG requires dev_mode & is capped at VERBOSE otherwise
    def _compute_effective_level(
        self, requested: OutputLevel, dev_mode: bool, quiet: bool
    ) -> OutputLevel:
        if quiet:
            return OutputLevel.QUIET
        max_allowed = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
        return min(requested, max_allowed)

    def get_level(self) -> OutputLevel:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level >= OutputLevel.DEBUG

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if self._level < OutputLevel.VERBOSE:
            return
        self._emit(category, msg, detail, **kwargs)

    # warnings always reach the log file; the console only sees them when verbose
    def warning(self, msg: str, category: str = "WARN") -> None:
        if self._level >= OutputLevel.VERBOSE:
            self._emit(category, msg, style="warning")
        else:
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")

    def _emit(
        self,
        category: str,
        msg: str,
        detail: Optional[str] = None,
        style: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        from ..chronos_io.console import console

        # DEV:<category> lines share the debug style
        base = category.split(":", 1)[0]
        tag_style = style or CATEGORY_STYLES.get(base, "bold cyan")
        console.print(f"[dim]\\[{self._elapsed()}][/] [{tag_style}]\\[{category}][/] {msg}", **kwargs)
        self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
        for line in (detail or "").splitlines():
            console.print(f"  [dim]{line}[/]")
            self._write_to_file(f"  {line}")

    def start_session(self) -> None:
        self._session_start = time.monotonic()
        if self._log_file_handle:
            self._write_to_file(f"\n{'=' * 60}")
            self._write_to_file(f"Chronos {__version__} session: {datetime.now().isoformat()}")
            self._write_to_file(f"Level: {self._level.name}")
            if self._dev_mode:
                self._write_to_file("Mode: Developer (dev_mode enabled)")
            self._write_to_file(f"{'=' * 60}\n")

    def end_session(self) -> None:
        if self._log_file_handle:
            self._write_to_file(f"\n{'=' * 60}")
            self._write_to_file(f"Session Ended: {datetime.now().isoformat()}")
            self._write_to_file(f"{'=' * 60}\n")
        self.cleanup()

    # File logging

    def _elapsed(self) -> str:
        if self._session_start is None:
            return "0.00s"
        return f"{time.monotonic() - self._session_start:.2f}s"

    def _setup_log_file(self, log_file: Path | None) -> None:
        self.cleanup()
        self._log_file_path = log_file
        if log_file is not None:
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._log_file_handle = open(log_file, "a", encoding="utf-8")
            except OSError:
                self._log_file_path = None
                self._log_file_handle = None

    def _write_to_file(self, msg: str) -> None:
        if self._log_file_handle is not None:
            try:
                self._log_file_handle.write(f"{msg}\n")
                self._log_file_handle.flush()
            except OSError:
                pass

    def cleanup(self) -> None:
        if self._log_file_handle is not None:
            try:
                self._log_file_handle.close()
            except OSError:
                pass
            self._log_file_handle = None
