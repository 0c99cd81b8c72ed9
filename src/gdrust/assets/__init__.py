# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Archive ingestion for asset tools."""

from __future__ import annotations

from .archive import ArchiveEntry, extract_archive, iter_archive_entries
from .ingest import (
    AssetInstaller,
    IngestionResult,
    IngestionWorkingSet,
    download_archive,
    ensure_http_url,
    ingestion_workspace,
    merge_root_files,
    relocate_addons,
    safe_tool_id,
)
from .resolve import find_zip_links, resolve_asset_url, resolve_release_asset_url

__all__ = [
    "ArchiveEntry",
    "AssetInstaller",
    "IngestionResult",
    "IngestionWorkingSet",
    "download_archive",
    "ensure_http_url",
    "extract_archive",
    "find_zip_links",
    "ingestion_workspace",
    "iter_archive_entries",
    "merge_root_files",
    "relocate_addons",
    "resolve_asset_url",
    "resolve_release_asset_url",
    "safe_tool_id",
]
