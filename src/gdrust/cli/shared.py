# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared utilities for CLI commands (logging, exits, registration)."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final, NoReturn

import typer
from rich.console import Console
from rich.text import Text

from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import section as core_section
from ..logging import warn as core_warn
from ..runtime.console.manager import detect_tty

EXIT_FAILURE: Final[int] = 1


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = field(default=re.compile(r"([\w-]+)=(\".*?\"|\S+)"))

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences."""

        core_info(message, use_emoji=self.use_emoji)

    def section(self, title: str) -> None:
        """Render a section header separating blocks of output."""

        core_section(title, use_color=detect_tty())

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            value_style = "bold blue" if key in {"command", "cmd", "url"} else "bold green"
            text.append(raw_value, style=value_style)
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)

    def abort(self, message: str, *, exit_code: int = EXIT_FAILURE) -> NoReturn:
        """Log ``message`` as a failure and exit with ``exit_code``."""

        self.fail(message)
        raise typer.Exit(code=exit_code)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` and route library log records to the terminal.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    configure_logging(debug=debug)
    console = Console(no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug)


def configure_logging(*, debug: bool) -> None:
    """Stream ``gdrust`` log records to stderr.

    Warnings are always shown; debug records only when ``debug`` is set.
    """

    logger = logging.getLogger("gdrust")
    for existing in list(logger.handlers):
        if getattr(existing, "_gdrust_cli_handler", False):
            logger.removeHandler(existing)
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    setattr(handler, "_gdrust_cli_handler", True)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


CommandCallable = Callable[..., None]


def register_command(
    app: typer.Typer,
    callback: CommandCallable,
    *,
    name: str,
    help_text: str | None = None,
    hidden: bool = False,
) -> CommandCallable:
    """Register ``callback`` on ``app`` as command ``name``.

    Args:
        app: Typer application receiving the command.
        callback: Command implementation.
        name: Command name.
        help_text: Help text; the callback docstring when omitted.
        hidden: Hide the command from the help listing (used for aliases).

    Returns:
        CommandCallable: The registered callback.
    """

    return app.command(name=name, help=help_text, hidden=hidden)(callback)


__all__ = [
    "CLILogger",
    "EXIT_FAILURE",
    "build_cli_logger",
    "configure_logging",
    "register_command",
]
