# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the library and CLI layers."""

from __future__ import annotations


class GdrustError(RuntimeError):
    """Base class for errors raised by gdrust operations."""


class PreconditionError(GdrustError):
    """Raised when the environment or project layout does not permit an operation."""


class ConfigError(GdrustError):
    """Raised when configuration files or environment overrides are malformed."""


class CatalogError(GdrustError):
    """Raised when the remote tool catalog cannot be parsed or violates its shape."""


class ResolutionError(GdrustError):
    """Raised when a tool, project or download URL cannot be resolved."""


class ManifestError(GdrustError):
    """Raised when a Cargo manifest cannot be read, written or mutated."""


class AssetError(GdrustError):
    """Base class for archive ingestion failures."""


class InvalidAssetUrlError(AssetError):
    """Raised when a download URL does not use an HTTP(S) scheme."""

    def __init__(self, url: str) -> None:
        """Initialise the error with the rejected URL.

        Args:
            url: URL that failed the scheme check.
        """

        super().__init__(f"Invalid URL provided for the asset: {url!r}")
        self.url = url


class AssetDownloadError(AssetError):
    """Raised when the asset host answers with a non-success status."""


class ArchiveError(AssetError):
    """Raised when a downloaded archive holds entries that cannot be extracted safely."""


__all__ = [
    "ArchiveError",
    "AssetDownloadError",
    "AssetError",
    "CatalogError",
    "ConfigError",
    "GdrustError",
    "InvalidAssetUrlError",
    "ManifestError",
    "PreconditionError",
    "ResolutionError",
]
