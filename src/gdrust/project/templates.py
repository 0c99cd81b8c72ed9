# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""File templates written while scaffolding a Godot project with a Rust extension."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

ENTRY_SYMBOL: Final[str] = "gdext_rust_init"
COMPATIBILITY_MINIMUM: Final[str] = "4.1"


@dataclass(frozen=True, slots=True)
class LibraryTarget:
    """One ``[libraries]`` entry of the extension descriptor."""

    key: str
    profile: str
    prefix: str
    extension: str


LIBRARY_TARGETS: Final[tuple[LibraryTarget, ...]] = (
    LibraryTarget("linux.debug.x86_64", "debug", "lib", "so"),
    LibraryTarget("linux.release.x86_64", "release", "lib", "so"),
    LibraryTarget("windows.debug.x86_64", "debug", "", "dll"),
    LibraryTarget("windows.release.x86_64", "release", "", "dll"),
    LibraryTarget("macos.debug", "debug", "lib", "dylib"),
    LibraryTarget("macos.release", "release", "lib", "dylib"),
    LibraryTarget("macos.debug.arm64", "debug", "lib", "dylib"),
    LibraryTarget("macos.release.arm64", "release", "lib", "dylib"),
)

LIB_RS_TEMPLATE: Final[str] = """use godot::prelude::*;

struct RustExtension;

#[gdextension]
unsafe impl ExtensionLibrary for RustExtension {}
"""

POST_CREATE_TEMPLATE: Final[str] = """
Now that the project has been created, finish the creation process in the Godot editor.

  1. Open Godot
  2. Click on "Import"
  3. Select the file "{project_file}"
"""


def library_name(project_name: str) -> str:
    """Return the file stem Cargo gives the library built for crate ``project_name``."""

    return project_name.replace("-", "_")


def render_gdextension(project_name: str, rust_dir: str) -> str:
    """Render the ``rust.gdextension`` descriptor.

    Args:
        project_name: Crate name; determines the built library's file name.
        rust_dir: Crate directory relative to the Godot project root.

    Returns:
        str: Descriptor text with one library path per platform/build/arch.
    """

    lib = library_name(project_name)
    width = max(len(target.key) for target in LIBRARY_TARGETS) + 3
    lines = [
        "[configuration]",
        f'entry_symbol = "{ENTRY_SYMBOL}"',
        f"compatibility_minimum = {COMPATIBILITY_MINIMUM}",
        "reloadable = true",
        "",
        "[libraries]",
    ]
    for target in LIBRARY_TARGETS:
        path = f"res://{rust_dir}/target/{target.profile}/{target.prefix}{lib}.{target.extension}"
        lines.append(f'{(target.key + " =").ljust(width)}"{path}"')
    return "\n".join(lines) + "\n"


__all__ = [
    "ENTRY_SYMBOL",
    "LIBRARY_TARGETS",
    "LIB_RS_TEMPLATE",
    "POST_CREATE_TEMPLATE",
    "LibraryTarget",
    "library_name",
    "render_gdextension",
]
