# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory views of Cargo manifests."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DependencySpec = str | dict[str, Any]


class ManifestRecord(BaseModel):
    """Parsed view of a ``Cargo.toml`` file.

    A workspace root carries ``workspace_members`` and never a package name;
    a member manifest carries a package name and no member list.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    name: str | None = None
    version: str | None = None
    dependencies: dict[str, DependencySpec] = Field(default_factory=dict)
    workspace_members: tuple[str, ...] | None = None

    @model_validator(mode="after")
    def _workspace_has_no_package_name(self) -> ManifestRecord:
        if self.workspace_members is not None and self.name:
            raise ValueError(f"{self.path}: a workspace manifest cannot carry a package name")
        return self

    @property
    def is_workspace(self) -> bool:
        """Return ``True`` when the manifest is a workspace root."""

        return self.workspace_members is not None

    @property
    def directory(self) -> Path:
        """Return the directory holding the manifest."""

        return self.path.parent


@dataclass(slots=True, frozen=True)
class PackageLocation:
    """Manifest path paired with its parsed record, keyed by package name in lookups."""

    path: Path
    record: ManifestRecord

    @property
    def name(self) -> str:
        """Return the package name of the located manifest."""

        return self.record.name or ""


__all__ = ["DependencySpec", "ManifestRecord", "PackageLocation"]
