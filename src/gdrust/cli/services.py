# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Factories the commands use to reach settings, the network and external tools."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import requests
import typer

from .. import config
from ..assets import AssetInstaller
from ..catalog import ToolRecord
from ..catalog import fetch_catalog as fetch_remote_catalog
from ..config import Settings
from ..core.runtime.process import (
    CommandRunner,
    SubprocessExecutionError,
    default_runner,
    is_executable_available,
)
from ..errors import ConfigError, GdrustError
from ..http import HttpClient, HttpStatusError
from ..project import ProjectScaffolder
from .shared import CLILogger, build_cli_logger

# Failures reported as a single error line followed by exit status 1.
COMMAND_ERRORS = (
    GdrustError,
    FileNotFoundError,
    SubprocessExecutionError,
    HttpStatusError,
    requests.RequestException,
)


@dataclass(frozen=True, slots=True)
class CommandEnvironment:
    """Resolved inputs shared by every command invocation."""

    root: Path
    settings: Settings
    logger: CLILogger

    @property
    def use_emoji(self) -> bool:
        """Return whether output may include emoji glyphs."""

        return self.logger.use_emoji


def load_settings() -> Settings:
    """Return settings from the user configuration file and environment."""

    return config.load_settings()


def build_http_client(settings: Settings) -> HttpClient:
    """Return an HTTP client honouring the configured timeout."""

    return HttpClient.from_settings(settings)


def get_runner() -> CommandRunner:
    """Return the runner used for cargo and git invocations."""

    return default_runner


def tool_available(name: str) -> bool:
    """Return ``True`` when executable ``name`` answers ``--version``."""

    return is_executable_available(name)


def fetch_catalog(settings: Settings) -> list[ToolRecord]:
    """Download the tool catalog from the configured URL."""

    return fetch_remote_catalog(build_http_client(settings), settings.catalog_url)


def build_installer(settings: Settings, *, use_emoji: bool) -> AssetInstaller:
    """Return an asset installer bound to the configured hosting API."""

    return AssetInstaller(
        build_http_client(settings),
        api_url=settings.github_api_url,
        use_emoji=use_emoji,
    )


def build_scaffolder(*, use_emoji: bool) -> ProjectScaffolder:
    """Return a scaffolder driving cargo and git through :func:`get_runner`."""

    return ProjectScaffolder(runner=get_runner(), use_emoji=use_emoji)


def require_catalog(env: CommandEnvironment) -> list[ToolRecord]:
    """Return the tool catalog, exiting with status 1 when it cannot be fetched."""

    try:
        catalog = fetch_catalog(env.settings)
    except COMMAND_ERRORS as exc:
        env.logger.fail(f"Unable to fetch the tool catalog: {exc}")
        raise typer.Exit(code=1) from exc
    env.logger.debug(f"tools={len(catalog)} url={env.settings.catalog_url}")
    return catalog


def prepare_environment(root: Path, *, emoji: bool | None, debug: bool) -> CommandEnvironment:
    """Load settings and build the CLI logger for one command invocation.

    Args:
        root: Working root supplied through ``--root``.
        emoji: Explicit ``--emoji/--no-emoji`` choice, ``None`` to use settings.
        debug: Whether debug logging is enabled.

    Returns:
        CommandEnvironment: Inputs for the command body.

    Raises:
        typer.Exit: With status 1 when the configuration is invalid.
    """

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger = build_cli_logger(emoji=emoji if emoji is not None else True, debug=debug)
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    use_emoji = settings.use_emoji if emoji is None else emoji
    logger = build_cli_logger(emoji=use_emoji, debug=debug)
    logger.debug(f"root={root} catalog={settings.catalog_url}")
    return CommandEnvironment(root=root, settings=settings, logger=logger)


__all__ = [
    "COMMAND_ERRORS",
    "CommandEnvironment",
    "build_http_client",
    "build_installer",
    "build_scaffolder",
    "fetch_catalog",
    "get_runner",
    "load_settings",
    "prepare_environment",
    "require_catalog",
    "tool_available",
]
