# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``gdrust convert`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Final

import typer

from ....filesystem import is_godot_project_directory
from ... import prompts, services
from ...options import DebugOption, EmojiOption, RootOption
from ...selection import prompt_project_name

ADD_MODE: Final[str] = "a"
RESTRUCTURE_MODE: Final[str] = "r"


def convert_command(
    root: RootOption = Path("."),
    emoji: EmojiOption = None,
    debug: DebugOption = False,
) -> None:
    """Add a ``rust`` extension crate to the Godot project at ``root``.

    Mode ``a`` puts the crate inside the project; mode ``r`` first moves the
    project into a ``godot`` subdirectory and places the crate beside it.
    """

    env = services.prepare_environment(root, emoji=emoji, debug=debug)
    logger = env.logger

    if not is_godot_project_directory(env.root):
        logger.fail("No Godot project found in the current directory")
        logger.info('Either use a directory that contains a project or run the "new" command')
        raise typer.Exit(code=1)

    logger.ok("Found project file!")
    project_name = prompt_project_name(logger, default=env.root.name)
    answer = prompts.ask(
        "Do you want to add (A) the project to the current directory or restructure (R) it? [a/r]",
    ).lower()

    scaffolder = services.build_scaffolder(use_emoji=env.use_emoji)
    try:
        if answer == ADD_MODE:
            logger.info("Adding project to the current directory")
            scaffolder.add_to_existing(env.root, project_name)
        elif answer == RESTRUCTURE_MODE:
            logger.warn("It is recommended to backup your project with version control before proceeding.")
            if not prompts.confirm("Are you sure you want to continue?"):
                logger.abort("Aborting")
            scaffolder.restructure(env.root, project_name)
        else:
            logger.abort('Invalid input, please either enter "a" to add or "r" to restructure the project')
    except services.COMMAND_ERRORS as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    logger.ok("Done!")
    raise typer.Exit(code=0)


__all__ = ["convert_command"]
