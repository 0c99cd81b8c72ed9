# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""New CLI command."""

from __future__ import annotations

from typer import Typer

from ...shared import register_command
from .command import new_command

__all__ = ["register"]


def register(app: Typer) -> None:
    """Register the new command with ``app``."""

    register_command(app, new_command, name="new", help_text="Creates a new Godot project with Rust support.")
