# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the project and tool a command acts on from flags or prompts."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Final
from urllib.parse import urlparse

from ..assets import safe_tool_id
from ..catalog import ToolRecord, dependency_choices, resolve_tool_by_id, sorted_for_display
from ..errors import PreconditionError
from ..filesystem import find_cargo_manifests
from ..manifest import PackageLocation, collect_package_info
from ..project import validate_project_name
from . import prompts
from .services import CommandEnvironment
from .shared import CLILogger

URL_CHOICE: Final[str] = "url"


def is_archive_url(value: str) -> bool:
    """Return ``True`` when ``value`` looks like an http(s) URL rather than a catalog id."""

    return urlparse(value).scheme.lower() in {"http", "https"}


def tool_id_from_url(url: str) -> str:
    """Return a filesystem-safe identifier derived from the archive name in ``url``.

    Args:
        url: Archive URL supplied by the user.

    Returns:
        str: Sanitised file stem, ``"asset"`` when nothing usable remains.
    """

    return safe_tool_id(PurePosixPath(urlparse(url).path).stem)


def prompt_project_name(logger: CLILogger, *, default: str | None = None) -> str:
    """Prompt until the user supplies a usable project name.

    Args:
        logger: Logger that reports rejected names.
        default: Name offered for an empty answer.

    Returns:
        str: Validated project name.
    """

    while True:
        try:
            return validate_project_name(prompts.ask("Project name", default=default))
        except PreconditionError as exc:
            logger.fail(str(exc))


def discover_packages(env: CommandEnvironment) -> dict[str, PackageLocation]:
    """Return the Cargo packages reachable from the working root."""

    manifests = find_cargo_manifests(env.root)
    env.logger.debug(f"manifests={len(manifests)} root={env.root}")
    return collect_package_info(manifests)


def select_project(env: CommandEnvironment, name: str | None) -> PackageLocation | None:
    """Return the package named by ``-p``, or the one the user picks.

    Args:
        env: Command environment.
        name: Value of ``--project``; ``None`` opens a selection prompt.

    Returns:
        PackageLocation | None: Selected package, ``None`` when not found.
    """

    packages = discover_packages(env)
    if name:
        return packages.get(name)
    return prompts.select(
        "What project would you like to use?",
        [(package_name, location) for package_name, location in packages.items()],
        use_emoji=env.use_emoji,
    )


def select_tool(
    env: CommandEnvironment,
    catalog: list[ToolRecord],
    requested: str | None,
) -> ToolRecord | str | None:
    """Return the catalog tool or archive URL the user asked for.

    Args:
        env: Command environment.
        catalog: Catalog records.
        requested: Value of ``--tool``: a catalog id or an archive URL.

    Returns:
        ToolRecord | str | None: Catalog record, archive URL, or ``None`` when unknown.
    """

    if requested:
        if is_archive_url(requested):
            return requested
        return resolve_tool_by_id(requested, catalog)

    choices: list[tuple[str, ToolRecord | str]] = [(tool.name, tool) for tool in sorted_for_display(catalog)]
    choices.append(("Download an archive from a URL", URL_CHOICE))
    selected = prompts.select("What tool would you like to use?", choices, use_emoji=env.use_emoji)
    if isinstance(selected, str):
        return prompts.ask("Enter the URL of the tool") or None
    return selected


def select_dependency(
    env: CommandEnvironment,
    package: PackageLocation,
    catalog: list[ToolRecord],
) -> ToolRecord | None:
    """Return the catalog entry the user picks among ``package``'s dependencies."""

    choices = dependency_choices(package.record, catalog)
    return prompts.select(
        "What dependency would you like to use?",
        [(tool.name, tool) for tool in choices],
        use_emoji=env.use_emoji,
    )


__all__ = [
    "discover_packages",
    "is_archive_url",
    "prompt_project_name",
    "select_dependency",
    "select_project",
    "select_tool",
    "tool_id_from_url",
]
