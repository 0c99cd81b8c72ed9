# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Convert CLI command."""

from __future__ import annotations

from typer import Typer

from ...shared import register_command
from .command import convert_command

__all__ = ["register"]


def register(app: Typer) -> None:
    """Register the convert command with ``app``."""

    register_command(app, convert_command, name="convert", help_text="Converts an existing Godot project to support Rust.")
