# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Create Godot projects with a Rust GDExtension crate, or add one to an existing project."""

from __future__ import annotations

import re
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..constants import (
    GDEXTENSION_FILE,
    GIT_EXECUTABLE,
    GITIGNORE_ENTRIES,
    GODOT_CRATE,
    GODOT_EXECUTABLE,
    GODOT_PROJECT_FILE,
    GODOT_STATE_DIR,
    GODOT_SUBDIR,
    RUST_SUBDIR,
)
from ..core.runtime.process import CommandRunner, default_runner, spawn_detached
from ..errors import PreconditionError
from ..filesystem.scan import is_godot_project_directory
from ..logging import info
from ..manifest import accessor, cargo
from .templates import LIB_RS_TEMPLATE, render_gdextension

_PROJECT_NAME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_project_name(name: str | None) -> str:
    """Return ``name`` stripped when it can name both the project folder and its crate.

    Args:
        name: Raw user input.

    Returns:
        str: The accepted project name.

    Raises:
        PreconditionError: With a user-facing reason when the name is rejected.
    """

    candidate = (name or "").strip()
    if not candidate:
        raise PreconditionError("Project name is required")
    if any(char.isspace() for char in candidate):
        raise PreconditionError("Project name cannot contain spaces")
    if not _PROJECT_NAME_RE.match(candidate):
        raise PreconditionError("Project name may only contain letters, digits, '-' or '_'")
    return candidate


@dataclass(frozen=True, slots=True)
class ProjectLayout:
    """Paths of a scaffolded project."""

    root: Path
    godot_dir: Path
    rust_dir: Path

    @property
    def project_file(self) -> Path:
        """Return the ``project.godot`` marker path."""

        return self.godot_dir / GODOT_PROJECT_FILE


class ProjectScaffolder:
    """Write project skeletons and drive Cargo to create the extension crate."""

    def __init__(self, *, runner: CommandRunner | None = None, use_emoji: bool = True) -> None:
        """Initialise the scaffolder.

        Args:
            runner: Command runner used for cargo and git; defaults to :func:`default_runner`.
            use_emoji: When ``True`` progress messages include emoji markers.
        """

        self._runner = runner or default_runner
        self._use_emoji = use_emoji

    def _info(self, message: str) -> None:
        info(message, use_emoji=self._use_emoji)

    def create_godot_project(self, folder: Path) -> Path:
        """Write an empty ``project.godot`` marker into ``folder``."""

        self._info("Creating Godot project")
        folder.mkdir(parents=True, exist_ok=True)
        marker = folder / GODOT_PROJECT_FILE
        marker.touch()
        return marker

    def write_gdextension(self, folder: Path, project_name: str, rust_dir: str) -> Path:
        """Write ``rust.gdextension`` into ``folder``.

        Args:
            folder: Godot project directory.
            project_name: Crate name the library paths are derived from.
            rust_dir: Crate directory relative to ``folder``.

        Returns:
            Path: The descriptor written.
        """

        self._info(f'Creating GDExtension: "{GDEXTENSION_FILE}"')
        descriptor = folder / GDEXTENSION_FILE
        descriptor.write_text(render_gdextension(project_name, rust_dir), encoding="utf-8")
        return descriptor

    def create_rust_project(self, parent: Path, project_name: str) -> Path:
        """Create the ``rust`` library crate inside ``parent`` and build it once.

        The crate is renamed to ``project_name`` so the library file matches
        the paths in the extension descriptor.

        Args:
            parent: Directory that receives the ``rust`` crate directory.
            project_name: Package name for the crate.

        Returns:
            Path: Crate directory.
        """

        self._info(f'Creating new Rust project "{parent.name}/{RUST_SUBDIR}"')
        crate_dir = cargo.new_library(parent, RUST_SUBDIR, runner=self._runner)
        accessor.rename_package(project_name, crate_dir)
        self._info('Adding resolver = "2", crate-type and profile settings to the Cargo.toml file')
        accessor.configure_extension_manifest(crate_dir)
        self._info(f"Adding {GODOT_CRATE} crate to the Cargo.toml file")
        cargo.add_dependency(GODOT_CRATE, crate_dir, runner=self._runner)
        cargo.build(crate_dir, runner=self._runner)
        return crate_dir

    def write_lib_rs(self, crate_dir: Path) -> Path:
        """Replace ``src/lib.rs`` of ``crate_dir`` with the extension entry point."""

        lib_rs = crate_dir / "src" / "lib.rs"
        lib_rs.parent.mkdir(parents=True, exist_ok=True)
        lib_rs.write_text(LIB_RS_TEMPLATE, encoding="utf-8")
        return lib_rs

    def create_new(self, base_dir: Path, project_name: str) -> ProjectLayout:
        """Create ``<base_dir>/<project_name>`` with ``godot/`` and ``rust/`` subprojects.

        Args:
            base_dir: Directory the project folder is created in.
            project_name: Validated project name.

        Returns:
            ProjectLayout: Paths of the created project.

        Raises:
            PreconditionError: If ``base_dir`` is already a Godot project or the
                project folder exists.
        """

        if is_godot_project_directory(base_dir):
            raise PreconditionError("A Godot project already exists in the current directory")
        root = base_dir / project_name
        if root.exists():
            raise PreconditionError("A folder with the same name already exists")

        self._info("Creating project folder structure")
        layout = ProjectLayout(root=root, godot_dir=root / GODOT_SUBDIR, rust_dir=root / RUST_SUBDIR)
        layout.godot_dir.mkdir(parents=True)
        self.create_godot_project(layout.godot_dir)
        self.write_gdextension(layout.godot_dir, project_name, f"../{RUST_SUBDIR}")
        self.create_rust_project(root, project_name)
        self.write_lib_rs(layout.rust_dir)
        return layout

    def add_to_existing(self, project_root: Path, project_name: str) -> ProjectLayout:
        """Add a ``rust/`` crate inside an existing Godot project.

        Raises:
            PreconditionError: If ``project_root`` holds no ``project.godot``.
        """

        if not is_godot_project_directory(project_root):
            raise PreconditionError("No Godot project found in the current directory")
        layout = ProjectLayout(root=project_root, godot_dir=project_root, rust_dir=project_root / RUST_SUBDIR)
        self.write_gdextension(project_root, project_name, RUST_SUBDIR)
        self.create_rust_project(project_root, project_name)
        self.write_lib_rs(layout.rust_dir)
        return layout

    def move_into_godot_subdir(self, project_root: Path) -> Path:
        """Move the project's files into ``<project_root>/godot`` through a sibling temp folder.

        Visible entries and the ``.godot`` state directory move; other hidden
        entries such as ``.git`` stay at the top level.

        Args:
            project_root: Existing Godot project directory.

        Returns:
            Path: The new ``godot`` subdirectory.

        Raises:
            PreconditionError: If the temporary folder already exists.
        """

        staging = project_root.parent / f".tmp-{project_root.name}"
        if staging.exists():
            raise PreconditionError(f"Temporary folder {staging} already exists; remove it and retry")

        self._info("Moving files to a temporary folder")
        staging.mkdir()
        for entry in sorted(project_root.iterdir()):
            if entry.name.startswith(".") and entry.name != GODOT_STATE_DIR:
                continue
            shutil.move(str(entry), str(staging / entry.name))

        self._info("Moving the temporary folder files into the newly created folder")
        godot_dir = project_root / GODOT_SUBDIR
        godot_dir.mkdir()
        for entry in sorted(staging.iterdir()):
            shutil.move(str(entry), str(godot_dir / entry.name))

        self._info("Cleaning up the temporary folder")
        staging.rmdir()
        return godot_dir

    def restructure(self, project_root: Path, project_name: str) -> ProjectLayout:
        """Move an existing project into ``godot/`` and create a sibling ``rust/`` crate.

        Raises:
            PreconditionError: If ``project_root`` holds no ``project.godot``.
        """

        if not is_godot_project_directory(project_root):
            raise PreconditionError("No Godot project found in the current directory")
        self._info("Restructuring the project")
        godot_dir = self.move_into_godot_subdir(project_root)
        layout = ProjectLayout(root=project_root, godot_dir=godot_dir, rust_dir=project_root / RUST_SUBDIR)
        self.write_gdextension(godot_dir, project_name, f"../{RUST_SUBDIR}")
        self.create_rust_project(project_root, project_name)
        self.write_lib_rs(layout.rust_dir)
        return layout

    def init_git_repo(self, project_root: Path) -> Path:
        """Run ``git init`` in ``project_root`` and write its ``.gitignore``.

        Returns:
            Path: The ``.gitignore`` written.
        """

        self._info("Initializing git repository")
        self._runner((GIT_EXECUTABLE, "init"), project_root)
        gitignore = project_root / ".gitignore"
        gitignore.write_text("\n".join(GITIGNORE_ENTRIES) + "\n", encoding="utf-8")
        return gitignore

    def open_in_editor(self, project_file: Path) -> None:
        """Launch the Godot editor on ``project_file`` without waiting for it."""

        self._info(f'Opening the project in Godot: "{project_file}"')
        spawn_detached((GODOT_EXECUTABLE, str(project_file)))


__all__ = ["ProjectLayout", "ProjectScaffolder", "validate_project_name"]
