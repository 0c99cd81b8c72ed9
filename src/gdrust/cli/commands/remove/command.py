# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``gdrust remove`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ....catalog import CrateTool
from ....manifest import remove_dependency
from ... import services
from ...options import DebugOption, EmojiOption, ProjectOption, RootOption
from ...selection import select_dependency, select_project


def remove_command(
    root: RootOption = Path("."),
    project: ProjectOption = None,
    emoji: EmojiOption = None,
    debug: DebugOption = False,
) -> None:
    """Remove a catalog dependency from a Cargo package."""

    env = services.prepare_environment(root, emoji=emoji, debug=debug)
    logger = env.logger

    try:
        package = select_project(env, project)
    except services.COMMAND_ERRORS as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    if package is None:
        logger.abort("Could not find the requested project")

    dependency = select_dependency(env, package, services.require_catalog(env))
    if dependency is None:
        logger.warn(f"No catalog dependencies found in {package.name}")
        raise typer.Exit(code=0)
    if not isinstance(dependency, CrateTool) or not dependency.source:
        logger.abort(f"Tool {dependency.id!r} is not a crate and cannot be removed")

    try:
        remove_dependency(dependency.source, package.path, runner=services.get_runner())
    except services.COMMAND_ERRORS as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    logger.ok(f"Removed {dependency.source} from {package.name}")
    raise typer.Exit(code=0)


__all__ = ["remove_command"]
