# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem discovery and tree-copy helpers."""

from __future__ import annotations

from .scan import (
    find_cargo_manifests,
    find_directories,
    find_files,
    find_godot_project_root,
    is_godot_project_directory,
    merge_tree,
    normalize_project_root,
)

__all__ = [
    "find_cargo_manifests",
    "find_directories",
    "find_files",
    "find_godot_project_root",
    "is_godot_project_directory",
    "merge_tree",
    "normalize_project_root",
]
