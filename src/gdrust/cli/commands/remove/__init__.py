# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Remove CLI command and its ``rm`` alias."""

from __future__ import annotations

from typer import Typer

from ...shared import register_command
from .command import remove_command

__all__ = ["register"]

HELP_TEXT = "Removes a tool from the project (alias: rm)."


def register(app: Typer) -> None:
    """Register ``remove`` and the hidden ``rm`` alias with ``app``.

    Args:
        app: Typer application receiving the registrations.
    """

    register_command(app, remove_command, name="remove", help_text=HELP_TEXT)
    register_command(app, remove_command, name="rm", help_text=HELP_TEXT, hidden=True)
