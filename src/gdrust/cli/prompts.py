# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interactive prompts: free text, yes/no and numbered list selection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, TypeVar

import click
import typer
from rich.table import Table

from ..logging import THEME
from ..runtime.console.manager import detect_tty, get_console_manager

_YES_ANSWERS: Final[frozenset[str]] = frozenset({"y", "yes"})

ChoiceValue = TypeVar("ChoiceValue")


def ask(question: str, *, default: str | None = None) -> str:
    """Return the user's answer to ``question``.

    Args:
        question: Prompt text.
        default: Value returned for an empty answer, shown in brackets.

    Returns:
        str: The answer with surrounding whitespace removed.
    """

    answer = typer.prompt(question, default=default or "", show_default=bool(default))
    return str(answer).strip()


def confirm(question: str) -> bool:
    """Return ``True`` only when ``question`` is answered with ``y`` or ``yes``."""

    answer = typer.prompt(f"{question} [y/n]", default="", show_default=False)
    return str(answer).strip().lower() in _YES_ANSWERS


def select(
    question: str,
    choices: Sequence[tuple[str, ChoiceValue]],
    *,
    use_emoji: bool = True,
) -> ChoiceValue | None:
    """Render ``choices`` as a numbered table and return the value picked.

    Args:
        question: Heading shown above the table.
        choices: ``(label, value)`` pairs in display order.
        use_emoji: Whether the console may render emoji glyphs.

    Returns:
        ChoiceValue | None: Selected value, or ``None`` when there is nothing to pick.
    """

    if not choices:
        return None
    color = detect_tty()
    console = get_console_manager().get(color=color, emoji=use_emoji)
    table = Table(title=question, show_header=False, box=None, title_justify="left")
    table.add_column("#", justify="right", style=THEME["default"] if color else None)
    table.add_column("choice")
    for index, (label, _) in enumerate(choices, start=1):
        table.add_row(str(index), label)
    console.print(table)
    number = typer.prompt("Enter a number", type=click.IntRange(1, len(choices)))
    return choices[int(number) - 1][1]


__all__ = ["ask", "confirm", "select"]
