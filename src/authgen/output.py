"""Terminal output for generated credentials and stored settings.

A generated credential is the only thing a generate command writes to
stdout, so ``$(authgen jwt ...)`` captures exactly one value and nothing
else. Status lines, confirmations, warnings and errors are written to
stderr and never mix with it.

Three kinds of data reach stdout:

* a **credential** -- the ``Authorization`` header value, or the bare
  token with ``--token-only``;
* a **record** -- one settings mapping, i.e. a profile or the global
  config, shown by the ``show`` commands;
* a **table** -- the profile listing.

Each is rendered according to the resolved :class:`OutputFormat`. Colour
is dropped for ``NO_COLOR``, ``TERM=dumb`` and ``--no-color``.

The :class:`OutputManager` is built once by
:func:`~authgen.app.main_callback` and installed with :func:`set_output`;
commands reach it through the module-level helpers.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from authgen.headers import AUTHORIZATION, format_header


class OutputFormat(str, Enum):
    """Supported output formats.

    ``AUTO`` becomes ``RICH`` on an interactive terminal with colour
    enabled, and ``PLAIN`` otherwise.
    """

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Writes credentials and settings to stdout and notices to stderr.

    Args:
        format: Requested format. ``AUTO`` is resolved immediately.
        no_color: Print notices without Rich markup.
        quiet: Drop informational notices. Warnings and errors are
            always shown, and stdout data is never suppressed.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        if format == OutputFormat.AUTO:
            rich = _is_tty() and not self._no_color
            format = OutputFormat.RICH if rich else OutputFormat.PLAIN
        self._format = format
        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=format == OutputFormat.RICH,
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    # --- stdout ---

    def credential(self, scheme: str, token: str, token_only: bool = False) -> None:
        """Write one generated credential.

        JSON mode wraps it as ``{"Authorization": "<scheme> <token>"}``, or
        ``{"token": "<token>"}`` with *token_only*. The other modes write
        the bare value on a single line.
        """
        if self._format == OutputFormat.JSON:
            if token_only:
                self._write_json({"token": token})
            else:
                self._write_json({AUTHORIZATION: format_header(scheme, token)})
            return
        value = token if token_only else format_header(scheme, token)
        if self._format == OutputFormat.RICH:
            # no line breaks inside a long JWT
            self._stdout.print(value, markup=False, highlight=False, soft_wrap=True)
        else:
            self._write(value)

    def record(self, data: dict[str, Any], title: Optional[str] = None) -> None:
        """Write one settings mapping such as a profile or the global config.

        Nested sections are flattened to dotted names (``defaults.jwt_algorithm``)
        in the plain and Rich renderings, matching the keys accepted by
        ``authgen config set``. JSON mode keeps the nesting.
        """
        if self._format == OutputFormat.JSON:
            self._write_json(data)
            return
        rows = list(_flatten(data))
        if self._format == OutputFormat.PLAIN:
            for name, value in rows:
                self._write(f"{name}\t{value}")
            return
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Setting")
        table.add_column("Value", overflow="fold")
        for name, value in rows:
            table.add_row(name, value)
        self._stdout.print(table)

    def table(
        self,
        headers: list[str],
        rows: list[list[str]],
        title: Optional[str] = None,
    ) -> None:
        """Write rows as a Rich table, tab-separated lines, or a JSON array."""
        if self._format == OutputFormat.JSON:
            self._write_json([dict(zip(headers, row)) for row in rows])
        elif self._format == OutputFormat.PLAIN:
            for line in [headers, *rows]:
                self._write("\t".join(line))
        else:
            rendered = Table(title=title, show_header=True, header_style="bold cyan")
            for header in headers:
                rendered.add_column(header)
            for row in rows:
                rendered.add_row(*row)
            self._stdout.print(rendered)

    # --- stderr ---

    def info(self, message: str) -> None:
        if not self._quiet:
            self._notice(message)

    def success(self, message: str) -> None:
        if not self._quiet:
            self._notice(message, style="green")

    def suggest(self, message: str) -> None:
        """Print a next-step hint such as the command to run now."""
        if not self._quiet:
            self._notice(f"→ {message}", style="dim")

    def warning(self, message: str) -> None:
        self._notice(message, style="yellow", label="Warning:")

    def error(self, message: str) -> None:
        self._notice(message, style="bold red", label="Error:")

    # --- internals ---

    def _write(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    def _write_json(self, data: Any) -> None:
        self._write(json.dumps(data, indent=2, ensure_ascii=False))

    def _notice(
        self,
        message: str,
        style: Optional[str] = None,
        label: Optional[str] = None,
    ) -> None:
        if self._no_color:
            text = f"{label} {message}" if label else message
            print(text, file=sys.stderr, flush=True)
            return
        # error text can quote user input such as "[x]", which is not markup
        text = escape(message)
        if label:
            text = f"[{style}]{label}[/{style}] {text}"
        elif style:
            text = f"[{style}]{text}[/{style}]"
        self._stderr.print(text, highlight=False, soft_wrap=True)


def _flatten(data: dict[str, Any], prefix: str = ""):
    """Yield ``(dotted_name, text)`` pairs for a settings mapping."""
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict) and value:
            yield from _flatten(value, prefix=f"{name}.")
        elif value is None:
            yield name, ""
        elif isinstance(value, bool):
            yield name, "true" if value else "false"
        elif isinstance(value, (dict, list)):
            yield name, json.dumps(value, ensure_ascii=False)
        else:
            yield name, str(value)


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """Return True when ``NO_COLOR`` is set (any value) or ``TERM=dumb``."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# --- global instance ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager. Tests call this between CLI runs."""
    global _output
    _output = None


def credential(scheme: str, token: str, token_only: bool = False) -> None:
    get_output().credential(scheme, token, token_only)


def record(data: dict[str, Any], title: Optional[str] = None) -> None:
    get_output().record(data, title)


def table(headers: list[str], rows: list[list[str]], title: Optional[str] = None) -> None:
    get_output().table(headers, rows, title)


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def suggest(message: str) -> None:
    get_output().suggest(message)


def warning(message: str) -> None:
    get_output().warning(message)


def error(message: str) -> None:
    get_output().error(message)
