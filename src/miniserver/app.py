"""Typer application and CLI entry point for miniserver.

Wires the root Typer application, registers the built-in commands (``run``,
``plugins``, ``config``), and maps :class:`~miniserver.exceptions.MiniServerError`
to process exit codes. The :func:`main` function is the console-script entry
point declared in ``pyproject.toml``. Unhandled exceptions are written to a
crash log under the data directory.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from miniserver import __version__
from miniserver.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="miniserver",
    help="Compose plugins into a single process with an ordered startup lifecycle.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# ------------------------------------------------------------------ #
# Built-in commands
# ------------------------------------------------------------------ #

from miniserver.commands.config import config_app  # noqa: E402
from miniserver.commands.plugins import plugins_command  # noqa: E402
from miniserver.commands.run import run_command  # noqa: E402

app.command("run")(run_command)
app.command("plugins")(plugins_command)
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"miniserver {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Root log level (DEBUG, INFO, WARNING, ERROR)."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~miniserver.output.OutputManager` and stores
    shared options in ``ctx.obj`` for sub-commands.
    """
    from miniserver.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))

    if log_level is None and verbose:
        log_level = "DEBUG"

    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    ctx.obj["no_color"] = no_color
    ctx.obj["verbose"] = verbose


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from miniserver.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``miniserver`` console script.

    :class:`~miniserver.exceptions.MiniServerError` instances that escape a
    command cause a clean exit with the error's ``exit_code``. All other
    exceptions produce a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from miniserver.exceptions import MiniServerError
        from miniserver.output import error

        if isinstance(exc, MiniServerError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
