# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer option declarations shared across commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

RootOption = Annotated[
    Path,
    typer.Option(
        "--root",
        "-r",
        help="Directory the command operates on (defaults to the current directory).",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
]
EmojiOption = Annotated[
    bool | None,
    typer.Option(
        "--emoji/--no-emoji",
        help="Toggle emoji in output (defaults to the configured value).",
    ),
]
DebugOption = Annotated[
    bool,
    typer.Option("--debug", help="Show debug logging."),
]
ProjectOption = Annotated[
    str | None,
    typer.Option("--project", "-p", help="Name of the Cargo package to use."),
]
ToolOption = Annotated[
    str | None,
    typer.Option("--tool", "-t", help="Catalog id of the tool, or an http(s) URL of a zip archive."),
]

__all__ = ["DebugOption", "EmojiOption", "ProjectOption", "RootOption", "ToolOption"]
