# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .commands import register_commands
from .typer_ext import create_typer

app = create_typer(help="Godot Rust CLI", no_args_is_help=True, add_completion=False)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"gdrust {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def root_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the version and exit.",
            callback=_print_version,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Scaffold Godot projects with Rust extensions and manage their tools."""


@app.command("help")
def help_command(ctx: typer.Context) -> None:
    """Show this message and exit."""

    parent = ctx.parent or ctx
    typer.echo(parent.get_help())


register_commands(app)


def main() -> None:
    """Run the ``gdrust`` console script."""

    app(prog_name="gdrust")


__all__ = ["app", "main"]
