# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed records describing the tools listed in the remote catalog."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class GitOptions(BaseModel):
    """Source-control coordinates attached to a tool."""

    model_config = ConfigDict(frozen=True)

    url: str | None = None
    branch: str | None = None
    release: str | None = None
    owner: str | None = None
    repo: str | None = None
    asset: str | None = None

    @property
    def has_release_coordinates(self) -> bool:
        """Return ``True`` when both owner and repository are populated."""

        return bool(self.owner and self.repo)


class AssetPageOptions(BaseModel):
    """Location of a generic asset-library page listing downloadable archives."""

    model_config = ConfigDict(frozen=True)

    page: str | None = None


class ToolOptions(BaseModel):
    """Kind-specific options of a catalog tool."""

    model_config = ConfigDict(frozen=True)

    git: GitOptions | None = None
    asset: AssetPageOptions | None = None


class GitReleaseSource(BaseModel):
    """Archive published as an asset of a repository's latest release."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    asset_name: str | None = None


class AssetPageSource(BaseModel):
    """Archive linked from an asset-library page."""

    model_config = ConfigDict(frozen=True)

    page: str


class _ToolBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    id: str
    source: str | None = None
    options: ToolOptions = Field(default_factory=ToolOptions)

    @property
    def git(self) -> GitOptions | None:
        """Return the tool's source-control options, if any."""

        return self.options.git


class CrateTool(_ToolBase):
    """A Rust crate added to a Cargo manifest; ``source`` names the crate."""

    type: Literal["crate"] = "crate"


class UrlTool(_ToolBase):
    """A tool installed by an external script; ``source`` is the script URL."""

    type: Literal["url"] = "url"


class AssetTool(_ToolBase):
    """A prebuilt archive merged into the Godot project's ``addons`` directory.

    Exactly one archive source is configured: release coordinates
    (``options.git.owner`` and ``options.git.repo``) or an asset page
    (``options.asset.page``).
    """

    type: Literal["asset"] = "asset"

    @model_validator(mode="after")
    def _exactly_one_source(self) -> AssetTool:
        git = self.options.git
        page = self.options.asset.page if self.options.asset else None
        has_release = git is not None and git.has_release_coordinates
        if has_release == bool(page):
            raise ValueError(
                f"asset tool {self.id!r} must define either options.git owner/repo or options.asset.page",
            )
        return self

    @property
    def asset_source(self) -> GitReleaseSource | AssetPageSource:
        """Return the archive source selected by the tool's options."""

        git = self.options.git
        if git is not None and git.owner and git.repo:
            return GitReleaseSource(owner=git.owner, repo=git.repo, asset_name=git.asset)
        page = self.options.asset.page if self.options.asset else None
        # The validator guarantees a page when no release coordinates exist.
        return AssetPageSource(page=page or "")


ToolRecord = Annotated[CrateTool | UrlTool | AssetTool, Field(discriminator="type")]

TOOL_RECORD_ADAPTER: TypeAdapter[CrateTool | UrlTool | AssetTool] = TypeAdapter(ToolRecord)


__all__ = [
    "AssetPageOptions",
    "AssetPageSource",
    "AssetTool",
    "CrateTool",
    "GitOptions",
    "GitReleaseSource",
    "TOOL_RECORD_ADAPTER",
    "ToolOptions",
    "ToolRecord",
    "UrlTool",
]
