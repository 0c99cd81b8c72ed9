# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cargo invocations that create crates and edit their dependencies."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..constants import CARGO_EXECUTABLE
from ..core.runtime.process import CommandRunner, default_runner
from ..errors import ManifestError
from .accessor import manifest_directory


def _cargo(args: Sequence[str], cwd: Path, runner: CommandRunner | None) -> None:
    (runner or default_runner)((CARGO_EXECUTABLE, *args), cwd)


def add_dependency(name: str, root: Path, *, runner: CommandRunner | None = None) -> None:
    """Run ``cargo add <name>`` for the package at ``root``.

    Args:
        name: Crate to add.
        root: Package directory or its ``Cargo.toml``.
        runner: Command runner; defaults to :func:`default_runner`.
    """

    _cargo(("add", name), manifest_directory(root), runner)


def add_git_dependency(
    name: str,
    root: Path,
    *,
    url: str | None,
    branch: str | None = None,
    runner: CommandRunner | None = None,
) -> None:
    """Run ``cargo add <name> --git <url> [--branch <branch>]``.

    Args:
        name: Crate to add.
        root: Package directory or its ``Cargo.toml``.
        url: Repository URL; required.
        branch: Optional branch to track.
        runner: Command runner; defaults to :func:`default_runner`.

    Raises:
        ManifestError: If ``url`` is empty.
    """

    if not url:
        raise ManifestError(f"No repository URL provided for git dependency {name!r}")
    args = ["add", name, "--git", url]
    if branch:
        args.extend(["--branch", branch])
    _cargo(args, manifest_directory(root), runner)


def remove_dependency(name: str, root: Path, *, runner: CommandRunner | None = None) -> None:
    """Run ``cargo remove <name>`` for the package at ``root``."""

    _cargo(("remove", name), manifest_directory(root), runner)


def new_library(parent: Path, directory_name: str, *, runner: CommandRunner | None = None) -> Path:
    """Create a library crate with ``cargo new <directory_name> --vcs none --lib``.

    Args:
        parent: Directory the crate directory is created in.
        directory_name: Name of the new crate directory.
        runner: Command runner; defaults to :func:`default_runner`.

    Returns:
        Path: Directory of the new crate.
    """

    _cargo(("new", directory_name, "--vcs", "none", "--lib"), parent, runner)
    return parent / directory_name


def build(root: Path, *, runner: CommandRunner | None = None) -> None:
    """Run ``cargo build`` for the crate at ``root``."""

    _cargo(("build",), manifest_directory(root), runner)


__all__ = [
    "add_dependency",
    "add_git_dependency",
    "build",
    "new_library",
    "remove_dependency",
]
