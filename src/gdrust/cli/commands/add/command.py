# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``gdrust add`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ....catalog import AssetTool, CrateTool, ToolRecord
from ....filesystem import find_godot_project_root
from ....manifest import add_dependency, add_git_dependency
from ... import services
from ...options import DebugOption, EmojiOption, ProjectOption, RootOption, ToolOption
from ...selection import is_archive_url, select_project, select_tool, tool_id_from_url
from ...services import CommandEnvironment


def _add_crate(env: CommandEnvironment, tool: CrateTool, project: str | None) -> None:
    if not tool.source:
        env.logger.abort(f"Tool {tool.id!r} does not name a crate")
    package = select_project(env, project)
    if package is None:
        env.logger.abort("Could not find the requested project")
    runner = services.get_runner()
    git = tool.git
    if git is not None and git.url:
        add_git_dependency(tool.source, package.path, url=git.url, branch=git.branch, runner=runner)
    else:
        add_dependency(tool.source, package.path, runner=runner)
    env.logger.ok(f"Added {tool.source} to {package.name}")


def _add_asset(env: CommandEnvironment, tool: AssetTool) -> None:
    project_root = find_godot_project_root(env.root)
    env.logger.debug(f"project_root={project_root}")
    services.build_installer(env.settings, use_emoji=env.use_emoji).install(tool, project_root)


def _add_archive_url(env: CommandEnvironment, url: str) -> None:
    project_root = find_godot_project_root(env.root)
    installer = services.build_installer(env.settings, use_emoji=env.use_emoji)
    installer.install_from_url(url, tool_id_from_url(url), project_root)


def add_command(
    root: RootOption = Path("."),
    tool: ToolOption = None,
    project: ProjectOption = None,
    emoji: EmojiOption = None,
    debug: DebugOption = False,
) -> None:
    """Add a catalog tool, or a zip archive given by URL, to the project."""

    env = services.prepare_environment(root, emoji=emoji, debug=debug)
    logger = env.logger

    selected: ToolRecord | str | None
    if tool and is_archive_url(tool):
        selected = tool
    else:
        selected = select_tool(env, services.require_catalog(env), tool)
    if not selected:
        logger.abort("Could not find the requested tool")

    try:
        if isinstance(selected, str):
            _add_archive_url(env, selected)
        elif isinstance(selected, CrateTool):
            _add_crate(env, selected, project)
        elif isinstance(selected, AssetTool):
            _add_asset(env, selected)
        else:
            logger.abort(f"Tool {selected.id!r} is installed from a script URL, which is not supported yet")
    except services.COMMAND_ERRORS as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    raise typer.Exit(code=0)


__all__ = ["add_command"]
