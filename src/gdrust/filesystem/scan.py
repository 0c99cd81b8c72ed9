# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Name-based file and directory discovery beneath a root directory."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from ..constants import CARGO_MANIFEST, GODOT_PROJECT_FILE, SCAN_EXCLUDE_DIRS
from ..errors import PreconditionError


def _walk(root: Path, skip: Iterable[str]) -> Iterable[tuple[Path, list[str], list[str]]]:
    """Yield ``os.walk`` triples below ``root`` while pruning ``skip`` directory names.

    Args:
        root: Directory acting as the traversal boundary.
        skip: Directory names that are never entered.

    Yields:
        tuple[Path, list[str], list[str]]: Directory path, child directory names and file names.
    """

    skipped = frozenset(skip)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in skipped)
        yield Path(dirpath), dirnames, filenames


def find_files(root: Path, name: str, *, skip: Iterable[str] = ()) -> list[Path]:
    """Return absolute paths of files called ``name`` anywhere beneath ``root``.

    Args:
        root: Directory to search.
        name: Exact file name to match.
        skip: Directory names excluded from traversal.

    Returns:
        list[Path]: Sorted absolute file paths.
    """

    root = root.resolve()
    if not root.is_dir():
        return []
    matches = [directory / name for directory, _, filenames in _walk(root, skip) if name in filenames]
    return sorted(matches)


def find_directories(
    root: Path,
    name: str,
    *,
    skip: Iterable[str] = (),
    prune_matches: bool = False,
) -> list[Path]:
    """Return absolute paths of directories called ``name`` beneath ``root``.

    Args:
        root: Directory to search; ``root`` itself is never reported.
        name: Exact directory name to match.
        skip: Directory names excluded from traversal.
        prune_matches: When ``True`` matched directories are not searched further,
            so nested directories of the same name are only reported once through
            their outermost ancestor.

    Returns:
        list[Path]: Sorted absolute directory paths.
    """

    root = root.resolve()
    if not root.is_dir():
        return []
    matches: list[Path] = []
    for directory, dirnames, _ in _walk(root, skip):
        if name in dirnames:
            matches.append(directory / name)
            if prune_matches:
                dirnames.remove(name)
    return sorted(matches)


def find_cargo_manifests(start: Path) -> list[Path]:
    """Return Cargo manifests beneath ``start``, falling back to its parent directory.

    Args:
        start: Directory the command runs from.

    Returns:
        list[Path]: Sorted manifest paths; empty when neither location holds one.
    """

    manifests = find_files(start, CARGO_MANIFEST, skip=SCAN_EXCLUDE_DIRS)
    if manifests:
        return manifests
    return find_files(start.resolve().parent, CARGO_MANIFEST, skip=SCAN_EXCLUDE_DIRS)


def normalize_project_root(path: Path) -> Path:
    """Return the directory for ``path``, stripping a trailing ``project.godot``.

    Args:
        path: Project directory or path to its ``project.godot`` marker.

    Returns:
        Path: Directory containing the project marker.
    """

    if path.name.lower() == GODOT_PROJECT_FILE:
        return path.parent
    return path


def is_godot_project_directory(directory: Path) -> bool:
    """Return ``True`` when ``directory`` contains a ``project.godot`` marker.

    Args:
        directory: Directory to inspect.

    Returns:
        bool: ``True`` when the marker file exists.
    """

    return (directory / GODOT_PROJECT_FILE).is_file()


def find_godot_project_root(start: Path) -> Path:
    """Locate the Godot project that ``start`` belongs to.

    The directory itself wins, then the first marker found beneath it, then the
    same search is repeated from each parent directory.

    Args:
        start: Directory (or ``project.godot`` path) the search begins at.

    Returns:
        Path: Absolute path of the directory holding ``project.godot``.

    Raises:
        PreconditionError: If no Godot project is found before the filesystem root.
    """

    current = normalize_project_root(start).resolve()
    while True:
        if is_godot_project_directory(current):
            return current
        markers = find_files(current, GODOT_PROJECT_FILE, skip=SCAN_EXCLUDE_DIRS)
        if markers:
            return markers[0].parent
        if current.parent == current:
            raise PreconditionError(f"No Godot project found in {start} or any parent directory")
        current = current.parent


def merge_tree(source: Path, destination: Path) -> None:
    """Copy the contents of ``source`` into ``destination``.

    Directories are created as needed and same-named files are overwritten.

    Args:
        source: Directory whose contents are copied.
        destination: Directory receiving the contents; created when absent.
    """

    destination.mkdir(parents=True, exist_ok=True)
    shutil.copytree(source, destination, dirs_exist_ok=True)


__all__ = [
    "find_cargo_manifests",
    "find_directories",
    "find_files",
    "find_godot_project_root",
    "is_godot_project_directory",
    "merge_tree",
    "normalize_project_root",
]
