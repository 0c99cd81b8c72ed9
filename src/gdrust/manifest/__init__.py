# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cargo manifest access and dependency management."""

from __future__ import annotations

from .accessor import (
    collect_package_info,
    configure_extension_manifest,
    find_package,
    find_workspace_manifest,
    manifest_directory,
    manifest_path,
    read_manifest,
    rename_package,
    validate_package_name,
    write_manifest,
)
from .cargo import add_dependency, add_git_dependency, build, new_library, remove_dependency
from .models import ManifestRecord, PackageLocation

__all__ = [
    "ManifestRecord",
    "PackageLocation",
    "add_dependency",
    "add_git_dependency",
    "build",
    "collect_package_info",
    "configure_extension_manifest",
    "find_package",
    "find_workspace_manifest",
    "manifest_directory",
    "manifest_path",
    "new_library",
    "read_manifest",
    "remove_dependency",
    "rename_package",
    "validate_package_name",
    "write_manifest",
]
