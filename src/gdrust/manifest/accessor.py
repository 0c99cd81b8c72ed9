# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read, query and rewrite Cargo manifests.

Reads go through :mod:`tomllib`; every mutation reloads the file with
:mod:`tomlkit` and rewrites it whole, preserving tables, comments and ordering
the record does not describe. There is no locking; concurrent writers race.
"""

from __future__ import annotations

import logging
import re
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Final

import tomlkit
from pydantic import ValidationError
from tomlkit.container import Container
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import Table

from ..constants import CARGO_MANIFEST
from ..errors import ManifestError
from ..filesystem.scan import find_cargo_manifests
from .models import DependencySpec, ManifestRecord, PackageLocation

LOGGER = logging.getLogger(__name__)

PACKAGE_NAME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_-]+$")


def manifest_path(root: Path) -> Path:
    """Return the ``Cargo.toml`` path for ``root`` (a directory or the manifest itself)."""

    if root.name.lower() == CARGO_MANIFEST.lower():
        return root
    return root / CARGO_MANIFEST


def manifest_directory(root: Path) -> Path:
    """Return the directory that holds the manifest addressed by ``root``."""

    return manifest_path(root).parent


def read_manifest(path: Path) -> ManifestRecord:
    """Parse ``path`` into a :class:`ManifestRecord`.

    Args:
        path: Manifest file to read.

    Returns:
        ManifestRecord: Parsed record. Workspace roots report members and no package name.

    Raises:
        ManifestError: If the file cannot be read or is not valid TOML.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ManifestError(f"Unable to read manifest {path}: {exc}") from exc

    dependencies = data.get("dependencies", {})
    if not isinstance(dependencies, Mapping):
        raise ManifestError(f"{path}: [dependencies] must be a table")

    workspace = data.get("workspace")
    name: str | None = None
    version: str | None = None
    members: tuple[str, ...] | None = None
    if isinstance(workspace, Mapping):
        members = tuple(str(member) for member in workspace.get("members", ()))
    else:
        package = data.get("package", {})
        if isinstance(package, Mapping):
            raw_name = package.get("name")
            raw_version = package.get("version")
            name = raw_name if isinstance(raw_name, str) and raw_name else None
            version = raw_version if isinstance(raw_version, str) else None

    try:
        return ManifestRecord(
            path=path,
            name=name,
            version=version,
            dependencies=dict(dependencies),
            workspace_members=members,
        )
    except ValidationError as exc:
        raise ManifestError(f"Invalid manifest {path}: {exc}") from exc


def _load_document(path: Path) -> tomlkit.TOMLDocument:
    if not path.exists():
        return tomlkit.document()
    try:
        return tomlkit.parse(path.read_text(encoding="utf-8"))
    except (OSError, TOMLKitError) as exc:
        raise ManifestError(f"Unable to parse manifest {path}: {exc}") from exc


def _ensure_table(container: Container | Table, key: str, *, super_table: bool = False) -> Table:
    existing = container.get(key)
    if isinstance(existing, Table):
        return existing
    table = tomlkit.table(is_super_table=super_table)
    container[key] = table
    return table


def _plain(value: Any) -> Any:
    return value.unwrap() if hasattr(value, "unwrap") else value


def _toml_value(spec: DependencySpec) -> Any:
    if isinstance(spec, str):
        return spec
    inline = tomlkit.inline_table()
    inline.update(spec)
    return inline


def _sync_dependencies(document: tomlkit.TOMLDocument, dependencies: Mapping[str, DependencySpec]) -> None:
    existing = document.get("dependencies")
    if existing is None and not dependencies:
        return
    table = _ensure_table(document, "dependencies")
    for key in [key for key in table if key not in dependencies]:
        del table[key]
    for key, spec in dependencies.items():
        if key in table and _plain(table[key]) == spec:
            continue
        table[key] = _toml_value(spec)


def write_manifest(path: Path, record: ManifestRecord) -> None:
    """Rewrite ``path`` so it reflects ``record``.

    Package name/version (or workspace members) and the ``[dependencies]``
    table are updated; everything else in the file is kept as-is.

    Args:
        path: Manifest file to write; created when missing.
        record: Desired manifest state.

    Raises:
        ManifestError: If the existing file cannot be parsed or written.
    """

    document = _load_document(path)
    if record.is_workspace:
        workspace = _ensure_table(document, "workspace")
        workspace["members"] = list(record.workspace_members or ())
    else:
        package = _ensure_table(document, "package")
        if record.name:
            package["name"] = record.name
        if record.version:
            package["version"] = record.version
    _sync_dependencies(document, record.dependencies)
    try:
        path.write_text(tomlkit.dumps(document), encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Unable to write manifest {path}: {exc}") from exc


def _read_or_skip(path: Path) -> ManifestRecord | None:
    try:
        return read_manifest(path)
    except ManifestError as exc:
        LOGGER.warning("Skipping manifest %s: %s", path, exc)
        return None


def find_workspace_manifest(paths: Iterable[Path]) -> Path | None:
    """Return the first of ``paths`` that is a workspace root."""

    for path in paths:
        record = _read_or_skip(path)
        if record is not None and record.is_workspace:
            return path
    return None


def collect_package_info(paths: Iterable[Path]) -> dict[str, PackageLocation]:
    """Return package name → location for the manifests in ``paths``.

    Manifests without a package name (including workspace roots) and files
    that cannot be parsed are skipped; a later manifest with a duplicate name
    replaces an earlier one.

    Args:
        paths: Candidate manifest files.

    Returns:
        dict[str, PackageLocation]: Mapping in discovery order.
    """

    packages: dict[str, PackageLocation] = {}
    for path in paths:
        record = _read_or_skip(path)
        if record is not None and record.name:
            packages[record.name] = PackageLocation(path=path, record=record)
    return packages


def find_package(name: str, start: Path) -> PackageLocation | None:
    """Return the package called ``name`` among the manifests found from ``start``."""

    return collect_package_info(find_cargo_manifests(start)).get(name)


def validate_package_name(name: str) -> str:
    """Return ``name`` stripped when it is an acceptable crate name.

    Raises:
        ManifestError: If the name is empty or contains unsupported characters.
    """

    candidate = name.strip()
    if not candidate or not PACKAGE_NAME_RE.match(candidate):
        raise ManifestError(f"Invalid package name {name!r}: use letters, digits, '-' or '_'")
    return candidate


def rename_package(new_name: str, root: Path) -> ManifestRecord:
    """Rename the package whose manifest lives at ``root``.

    Args:
        new_name: Replacement package name.
        root: Package directory or its ``Cargo.toml``.

    Returns:
        ManifestRecord: The record written to disk.

    Raises:
        ManifestError: If the manifest is a workspace root or the name is invalid.
    """

    path = manifest_path(root)
    record = read_manifest(path)
    if record.is_workspace:
        raise ManifestError(f"{path} is a workspace manifest; workspaces have no package name to rename")
    updated = record.model_copy(update={"name": validate_package_name(new_name)})
    write_manifest(path, updated)
    return updated


def configure_extension_manifest(root: Path) -> None:
    """Apply the settings a Godot extension crate needs to its manifest.

    Adds ``resolver = "2"`` to ``[package]``, builds the library as a
    ``cdylib``, and optimises dependencies in dev builds while leaving the
    crate itself unoptimised.

    Args:
        root: Crate directory or its ``Cargo.toml``.

    Raises:
        ManifestError: If the manifest cannot be parsed or written.
    """

    path = manifest_path(root)
    document = _load_document(path)
    package = _ensure_table(document, "package")
    package["resolver"] = "2"

    lib = _ensure_table(document, "lib")
    lib["crate-type"] = ["cdylib"]

    profile = _ensure_table(document, "profile", super_table=True)
    dev = _ensure_table(profile, "dev")
    dev["opt-level"] = 0
    dev_package = _ensure_table(dev, "package", super_table=True)
    every_package = _ensure_table(dev_package, "*")
    every_package["opt-level"] = 3

    try:
        path.write_text(tomlkit.dumps(document), encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Unable to write manifest {path}: {exc}") from exc


__all__ = [
    "collect_package_info",
    "configure_extension_manifest",
    "find_package",
    "find_workspace_manifest",
    "manifest_directory",
    "manifest_path",
    "read_manifest",
    "rename_package",
    "validate_package_name",
    "write_manifest",
]
