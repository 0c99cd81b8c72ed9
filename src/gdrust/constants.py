# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants shared across project scaffolding, manifests and asset ingestion."""

from __future__ import annotations

from typing import Final

DEFAULT_CATALOG_URL: Final[str] = (
    "https://raw.githubusercontent.com/TheColorRed/godot-rust/refs/heads/main/assets/tool-db.json"
)
DEFAULT_GITHUB_API_URL: Final[str] = "https://api.github.com"
GITHUB_ACCEPT_HEADER: Final[str] = "application/vnd.github+json"

GODOT_PROJECT_FILE: Final[str] = "project.godot"
GODOT_STATE_DIR: Final[str] = ".godot"
GODOT_SUBDIR: Final[str] = "godot"
GDEXTENSION_FILE: Final[str] = "rust.gdextension"
ADDONS_DIR: Final[str] = "addons"

CARGO_MANIFEST: Final[str] = "Cargo.toml"
RUST_SUBDIR: Final[str] = "rust"
GODOT_CRATE: Final[str] = "godot"

CARGO_EXECUTABLE: Final[str] = "cargo"
GIT_EXECUTABLE: Final[str] = "git"
GODOT_EXECUTABLE: Final[str] = "godot"

ARCHIVE_SUFFIX: Final[str] = ".tmp.zip"
EXTRACT_SUFFIX: Final[str] = ".tmp"

SCAN_EXCLUDE_DIRS: Final[frozenset[str]] = frozenset(
    {
        ".git",
        GODOT_STATE_DIR,
        "node_modules",
        "target",
    },
)

GITIGNORE_ENTRIES: Final[tuple[str, ...]] = ("target/", ".godot/")

RUST_INSTALL_URL: Final[str] = "https://www.rust-lang.org/tools/install"

__all__ = [
    "ADDONS_DIR",
    "ARCHIVE_SUFFIX",
    "CARGO_EXECUTABLE",
    "CARGO_MANIFEST",
    "DEFAULT_CATALOG_URL",
    "DEFAULT_GITHUB_API_URL",
    "EXTRACT_SUFFIX",
    "GDEXTENSION_FILE",
    "GITHUB_ACCEPT_HEADER",
    "GITIGNORE_ENTRIES",
    "GIT_EXECUTABLE",
    "GODOT_CRATE",
    "GODOT_EXECUTABLE",
    "GODOT_PROJECT_FILE",
    "GODOT_STATE_DIR",
    "GODOT_SUBDIR",
    "RUST_INSTALL_URL",
    "RUST_SUBDIR",
    "SCAN_EXCLUDE_DIRS",
]
