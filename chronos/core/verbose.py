# chronos/core/verbose.py
# Verbose logging helpers - delegate to the registered OutputManager w/ categorized messages for
# state transitions, laps, persistence & configuration

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize verbose logging for a CLI invocation
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
    quiet: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        quiet=quiet,
        log_file=log_file,
    )
    set_output_manager(manager)


# --quiet suppresses everything but command results
def is_quiet() -> bool:
    return get_output_manager().get_level() <= OutputLevel.QUIET


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log a run state transition (e.g. idle -> running)
def vlog_state(previous: str, current: str, elapsed_ms: float) -> None:
    get_output_manager().verbose(
        f"{previous} -> {current}", "STATE", f"Elapsed: {elapsed_ms:.0f}ms"
    )


# * Log a recorded lap
def vlog_lap(number: int, lap_ms: float, total_ms: float) -> None:
    get_output_manager().verbose(
        f"Lap {number}: {lap_ms:.0f}ms", "LAP", f"Total: {total_ms:.0f}ms"
    )


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# * Log a persistence failure swallowed at the gateway boundary
def vlog_persistence_error(operation: str, error: Exception) -> None:
    get_output_manager().warning(f"{operation} failed, keeping in-memory state: {error}", "STORE")


def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Dev-mode only logging
def vlog_dev(category: str, message: str, detail: str | None = None) -> None:
    if get_output_manager().is_debug_enabled():
        get_output_manager().verbose(message, f"DEV:{category}", detail)


# * Mark the start of a logged CLI invocation (writes a session header to the log file)
def start_verbose_session() -> None:
    get_output_manager().start_session()


def cleanup_verbose() -> None:
    get_output_manager().end_session()
