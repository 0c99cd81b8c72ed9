# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Download an asset archive and merge it into a Godot project.

The pipeline runs download → streaming extraction → ``addons`` relocation →
root-file merge. The downloaded ``<id>.tmp.zip`` and the ``<id>.tmp``
extraction folder live in the project root for the duration of one run and
are removed on every exit path.

Only two things leave the extraction folder: the contents of every directory
named ``addons`` (merged into the project's ``addons``) and the files sitting
directly in the archive root (copied to the project root). Anything else is
dropped.
"""

from __future__ import annotations

import logging
import re
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Final
from urllib.parse import urlparse

import requests

from ..catalog.models import AssetTool
from ..constants import ADDONS_DIR, ARCHIVE_SUFFIX, EXTRACT_SUFFIX
from ..errors import AssetDownloadError, InvalidAssetUrlError, ResolutionError
from ..filesystem.scan import find_directories, merge_tree, normalize_project_root
from ..http import HttpClient, HttpStatusError
from ..logging import info, ok, warn
from .archive import extract_archive
from .resolve import resolve_asset_url

LOGGER = logging.getLogger(__name__)

_HTTP_SCHEMES = frozenset({"http", "https"})
_TOOL_ID_UNSAFE_RE: Final[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9_-]+")


@dataclass(frozen=True, slots=True)
class IngestionWorkingSet:
    """Temporary paths owned by one ingestion run."""

    archive_path: Path
    extract_dir: Path
    project_root: Path


@dataclass(frozen=True, slots=True)
class IngestionResult:
    """Summary of a completed ingestion."""

    tool_id: str
    url: str
    addon_sources: tuple[Path, ...]
    root_files: tuple[Path, ...]


def ensure_http_url(url: str) -> str:
    """Return ``url`` when it uses an HTTP(S) scheme.

    Raises:
        InvalidAssetUrlError: For any other scheme, or an empty URL.
    """

    parsed = urlparse(url or "")
    if parsed.scheme.lower() not in _HTTP_SCHEMES or not parsed.netloc:
        raise InvalidAssetUrlError(url)
    return url


def safe_tool_id(tool_id: str) -> str:
    """Return ``tool_id`` reduced to letters, digits, ``_`` and ``-``.

    Catalog ids name files inside the project root, so separators and dots
    never reach the filesystem. ``"asset"`` is returned when nothing usable remains.
    """

    return _TOOL_ID_UNSAFE_RE.sub("-", tool_id).strip("-") or "asset"


def _remove_working_set(working_set: IngestionWorkingSet) -> None:
    try:
        working_set.archive_path.unlink(missing_ok=True)
    except OSError as exc:
        LOGGER.warning("Unable to remove %s: %s", working_set.archive_path, exc)
    if working_set.extract_dir.exists():
        try:
            shutil.rmtree(working_set.extract_dir)
        except OSError as exc:
            LOGGER.warning("Unable to remove %s: %s", working_set.extract_dir, exc)


@contextmanager
def ingestion_workspace(project_root: Path, tool_id: str) -> Iterator[IngestionWorkingSet]:
    """Own the temporary archive file and extraction folder for ``tool_id``.

    Both are deleted when the block exits, whether it succeeds or raises.

    Args:
        project_root: Godot project directory the paths are created in.
        tool_id: Catalog identifier naming the temporary paths; passed through
            :func:`safe_tool_id` first.

    Yields:
        IngestionWorkingSet: Paths for the archive and the extraction folder.
    """

    stem = safe_tool_id(tool_id)
    working_set = IngestionWorkingSet(
        archive_path=project_root / f"{stem}{ARCHIVE_SUFFIX}",
        extract_dir=project_root / f"{stem}{EXTRACT_SUFFIX}",
        project_root=project_root,
    )
    try:
        yield working_set
    finally:
        _remove_working_set(working_set)


def download_archive(client: HttpClient, url: str, destination: Path) -> Path | None:
    """Download ``url`` into memory and persist it at ``destination``.

    Args:
        client: HTTP client used for the download.
        url: Archive URL; must use HTTP(S).
        destination: File the archive is written to.

    Returns:
        Path | None: ``destination`` on success, ``None`` when the transfer failed.

    Raises:
        InvalidAssetUrlError: If ``url`` is not HTTP(S); raised before any request.
        AssetDownloadError: If the server answers with a non-success status.
    """

    ensure_http_url(url)
    try:
        payload = client.get_bytes(url)
    except HttpStatusError as exc:
        raise AssetDownloadError(f"Failed to download the asset zip file: {exc}") from exc
    except requests.RequestException as exc:
        LOGGER.warning("Download of %s failed: %s", url, exc)
        return None
    destination.write_bytes(payload)
    return destination


def relocate_addons(extract_dir: Path, project_root: Path) -> tuple[Path, ...]:
    """Merge every ``addons`` directory found in ``extract_dir`` into the project's ``addons``.

    Matches are found at any depth; a match is copied whole, so ``addons``
    directories nested inside it keep their place in its structure.

    Args:
        extract_dir: Extraction folder to search.
        project_root: Godot project directory.

    Returns:
        tuple[Path, ...]: The ``addons`` directories that were merged.
    """

    sources = tuple(find_directories(extract_dir, ADDONS_DIR, prune_matches=True))
    target = project_root / ADDONS_DIR
    for source in sources:
        merge_tree(source, target)
    return sources


def merge_root_files(extract_dir: Path, project_root: Path) -> tuple[Path, ...]:
    """Copy the files directly inside ``extract_dir`` to the project root, overwriting.

    Args:
        extract_dir: Extraction folder.
        project_root: Godot project directory.

    Returns:
        tuple[Path, ...]: Destination paths written.
    """

    written: list[Path] = []
    for child in sorted(extract_dir.iterdir()):
        if not child.is_file():
            continue
        destination = project_root / child.name
        shutil.copyfile(child, destination)
        written.append(destination)
    return tuple(written)


class AssetInstaller:
    """Install asset tools into a Godot project."""

    def __init__(self, client: HttpClient, *, api_url: str, use_emoji: bool = True) -> None:
        """Initialise the installer.

        Args:
            client: HTTP client used for lookups and downloads.
            api_url: Base URL of the hosting API used for release lookups.
            use_emoji: When ``True`` progress messages include emoji markers.
        """

        self._client = client
        self._api_url = api_url
        self._use_emoji = use_emoji

    def resolve_url(self, tool: AssetTool) -> str:
        """Return the archive URL for ``tool`` (``""`` when unresolved)."""

        return resolve_asset_url(tool, self._client, api_url=self._api_url)

    def install(self, tool: AssetTool, project_root: Path) -> IngestionResult:
        """Resolve, download and merge ``tool``'s archive into ``project_root``.

        Args:
            tool: Asset tool from the catalog.
            project_root: Godot project directory or its ``project.godot`` file.

        Returns:
            IngestionResult: Summary of what was merged.

        Raises:
            ResolutionError: If no download URL could be resolved.
        """

        url = self.resolve_url(tool)
        if not url:
            raise ResolutionError(f"Could not resolve a download URL for tool {tool.id!r}")
        return self.install_from_url(url, tool.id, project_root)

    def install_from_url(self, url: str, tool_id: str, project_root: Path) -> IngestionResult:
        """Download the archive at ``url`` and merge it into ``project_root``.

        Args:
            url: HTTP(S) archive URL.
            tool_id: Identifier used to name the temporary paths.
            project_root: Godot project directory or its ``project.godot`` file.

        Returns:
            IngestionResult: Summary of what was merged.

        Raises:
            InvalidAssetUrlError: If ``url`` is not HTTP(S).
            AssetDownloadError: If the download fails.
        """

        ensure_http_url(url)
        root = normalize_project_root(project_root).resolve()
        with ingestion_workspace(root, tool_id) as working_set:
            info(f"Downloading {url}", use_emoji=self._use_emoji)
            archive = download_archive(self._client, url, working_set.archive_path)
            if archive is None:
                raise AssetDownloadError(f"Failed to download the asset zip file from {url}")

            count = extract_archive(archive, working_set.extract_dir)
            LOGGER.debug("extracted files=%d archive=%s", count, archive)

            addon_sources = relocate_addons(working_set.extract_dir, root)
            if not addon_sources:
                warn(f"No addons directory found in the archive for {tool_id}", use_emoji=self._use_emoji)
            root_files = merge_root_files(working_set.extract_dir, root)

        ok(f"Added {tool_id} to {root}", use_emoji=self._use_emoji)
        return IngestionResult(
            tool_id=tool_id,
            url=url,
            addon_sources=addon_sources,
            root_files=root_files,
        )


__all__ = [
    "AssetInstaller",
    "IngestionResult",
    "IngestionWorkingSet",
    "download_archive",
    "ensure_http_url",
    "ingestion_workspace",
    "merge_root_files",
    "relocate_addons",
]
