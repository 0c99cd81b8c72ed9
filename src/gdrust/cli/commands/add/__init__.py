# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Add CLI command."""

from __future__ import annotations

from typer import Typer

from ...shared import register_command
from .command import add_command

__all__ = ["register"]


def register(app: Typer) -> None:
    """Register the add command with ``app``."""

    register_command(app, add_command, name="add", help_text="Adds a tool to the current project.")
