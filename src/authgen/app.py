"""Typer application and CLI entry point for authgen.

This module wires together the top-level Typer application and registers
the built-in commands: the one-off generators (``basic``, ``bearer``,
``digest``, ``jwt``) and the ``profile`` and ``config`` groups.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer
app. :class:`~authgen.exceptions.AuthgenError` exits with the error's
``exit_code``; unhandled exceptions are written to a crash log under the
data directory.

See Also:
    :mod:`authgen.config`: Profile and global configuration resolution.
    :mod:`authgen.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import Any

import typer

from authgen import __version__
from authgen.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="authgen",
    help="Generate Basic, Bearer, Digest and JWT credentials for HTTP requests.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# ------------------------------------------------------------------ #
# Commands
# ------------------------------------------------------------------ #

from authgen.commands.config import config_app  # noqa: E402
from authgen.commands.generate import (  # noqa: E402
    basic_command,
    bearer_command,
    digest_command,
    jwt_command,
)
from authgen.commands.profile import profile_app  # noqa: E402

app.command("basic")(basic_command)
app.command("bearer")(bearer_command)
app.command("digest")(digest_command)
app.command("jwt")(jwt_command)
app.add_typer(profile_app, name="profile", help="Stored credential profiles.")
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"authgen {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route ``authgen`` log records to stderr through Rich when verbose."""
    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger("authgen")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    if not verbose:
        logger.setLevel(logging.WARNING)
        return
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


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
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~authgen.output.OutputManager` from CLI
    flags, configures logging, and stores shared options in ``ctx.obj``.
    When neither ``--json`` nor ``--plain`` is given, ``output.format``
    from the global config decides.
    """
    from authgen.config import load_global_config
    from authgen.exceptions import AuthgenError
    from authgen.output import OutputFormat, OutputManager, set_output, warning

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        try:
            fmt = OutputFormat(load_global_config().output.format)
        except (AuthgenError, ValueError) as exc:
            warning(f"Ignoring output.format from config: {exc}")

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet))
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from authgen.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``authgen`` console script.

    Unhandled :class:`~authgen.exceptions.AuthgenError` instances cause a
    clean exit with the error's ``exit_code``. All other exceptions produce
    a crash log and a generic failure exit.

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
        from authgen.exceptions import AuthgenError
        from authgen.output import error

        if isinstance(exc, AuthgenError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
