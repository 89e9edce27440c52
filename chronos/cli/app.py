# chronos/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies w/ the app object.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables (e.g. CHRONOS_HOME) once at startup
load_dotenv()

from ..config.settings import settings_manager
from ..core.verbose import cleanup_verbose, init_verbose, start_verbose_session, vlog_config


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="Chronos - a drift-free terminal stopwatch w/ laps & lap statistics",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings, set up logging & show quick usage when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress logging & session summaries (overrides --verbose)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    # log_file implies verbose mode; DEBUG additionally requires dev_mode; --quiet wins
    init_verbose(
        enabled=verbose or log_file is not None,
        log_file=log_file,
        dev_mode=ctx.obj.dev_mode,
        quiet=quiet,
    )
    start_verbose_session()
    # closes the log file once the command finishes
    ctx.call_on_close(cleanup_verbose)
    vlog_config("state_dir", ctx.obj.state_path)

    # apply the saved dark/light preference to the shared console
    from .helpers import build_gateway
    from ..core.gateway import PREF_THEME
    from ..ui.theming.console_theme import auto_initialize_theme

    auto_initialize_theme(build_gateway(ctx.obj).load_preference(PREF_THEME))

    if ctx.invoked_subcommand is None:
        from ..ui.quick.quick_usage import show_quick_usage

        show_quick_usage()
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import run as _run  # noqa: F401,E402
from .commands import laps as _laps  # noqa: F401,E402
from .commands import preferences as _preferences  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
