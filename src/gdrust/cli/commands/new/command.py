# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``gdrust new`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ....constants import CARGO_EXECUTABLE, GIT_EXECUTABLE, GODOT_EXECUTABLE, RUST_INSTALL_URL
from ....filesystem import is_godot_project_directory
from ....project.templates import POST_CREATE_TEMPLATE
from ... import prompts, services
from ...options import DebugOption, EmojiOption, RootOption
from ...selection import prompt_project_name


def new_command(
    root: RootOption = Path("."),
    emoji: EmojiOption = None,
    debug: DebugOption = False,
) -> None:
    """Create ``<root>/<name>`` holding a ``godot`` project and a ``rust`` extension crate."""

    env = services.prepare_environment(root, emoji=emoji, debug=debug)
    logger = env.logger

    if not services.tool_available(CARGO_EXECUTABLE):
        logger.fail("Cargo is not installed")
        logger.info("Please install Rust and Cargo before creating a new project")
        logger.info(f"You can install Rust and Cargo from {RUST_INSTALL_URL}")
        raise typer.Exit(code=1)

    if is_godot_project_directory(env.root):
        logger.fail("A Godot project already exists in the current directory")
        logger.info('Either use a directory that doesn\'t contain a project or run the "convert" command')
        raise typer.Exit(code=1)

    project_name = prompt_project_name(logger)
    if (env.root / project_name).exists():
        logger.abort("A folder with the same name already exists")

    scaffolder = services.build_scaffolder(use_emoji=env.use_emoji)
    try:
        layout = scaffolder.create_new(env.root, project_name)
    except services.COMMAND_ERRORS as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    logger.ok("Godot Rust project created!")

    if services.tool_available(GIT_EXECUTABLE) and prompts.confirm(
        "Do you want to initialize a git repository?",
    ):
        try:
            scaffolder.init_git_repo(layout.root)
        except services.COMMAND_ERRORS as exc:
            logger.warn(f"Unable to initialize the git repository: {exc}")

    if services.tool_available(GODOT_EXECUTABLE) and prompts.confirm(
        "Do you want to open the project in Godot?",
    ):
        scaffolder.open_in_editor(layout.project_file)
    else:
        logger.section("Next steps")
        logger.info(POST_CREATE_TEMPLATE.format(project_file=layout.project_file))
    raise typer.Exit(code=0)


__all__ = ["new_command"]
