# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from typing import Final

from rich.rule import Rule
from rich.text import Text

from .runtime.console.manager import detect_tty, get_console_manager

THEME: Final[dict[str, str]] = {
    "default": "#8a8a8a",
    "info": "#75baff",
    "success": "#6cfc47",
    "error": "#ff3d3d",
    "warning": "#ff9f3d",
}


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def section(title: str, *, use_color: bool) -> None:
    """Render a section header to delineate console output blocks.

    Args:
        title: Section title displayed to the user.
        use_color: Flag indicating whether ANSI colour support is desired.
    """

    console = get_console_manager().get(color=use_color, emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


_LEVELS: Final[dict[str, tuple[str, str]]] = {
    "info": ("ℹ️ ", "info"),
    "ok": ("✅ ", "success"),
    "warn": ("⚠️ ", "warning"),
    "fail": ("❌ ", "error"),
}


def _emit(level: str, msg: str, use_emoji: bool, use_color: bool | None) -> None:
    symbol, theme_key = _LEVELS[level]
    _print_line(f"{emoji(symbol, use_emoji)}{msg}", style=THEME[theme_key], use_emoji=use_emoji, use_color=use_color)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a progress note, such as a download starting."""

    _emit("info", msg, use_emoji, use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a completed step."""

    _emit("ok", msg, use_emoji, use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit("warn", msg, use_emoji, use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an error. Callers decide whether the command also exits.

    Args:
        msg: Message text to display.
        use_emoji: Whether to prefix the cross mark.
        use_color: Explicit colour flag; ``None`` falls back to TTY detection.
    """

    _emit("fail", msg, use_emoji, use_color)


__all__ = [
    "THEME",
    "emoji",
    "fail",
    "info",
    "ok",
    "section",
    "warn",
]
