# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the archive download URL of an asset tool."""

from __future__ import annotations

import logging
import re
from typing import Any, Final
from urllib.parse import urljoin

import requests

from ..catalog.models import AssetPageSource, AssetTool, GitReleaseSource
from ..constants import GITHUB_ACCEPT_HEADER
from ..http import HttpClient, HttpStatusError

LOGGER = logging.getLogger(__name__)

ZIP_LINK_RE: Final[re.Pattern[str]] = re.compile(r'href="([^"]+\.zip)"', re.IGNORECASE)


def latest_release_endpoint(api_url: str, owner: str, repo: str) -> str:
    """Return the "latest release" API endpoint for ``owner/repo``."""

    return f"{api_url.rstrip('/')}/repos/{owner}/{repo}/releases/latest"


def select_release_asset(payload: Any, asset_name: str | None) -> str:
    """Return the download URL of the release asset called ``asset_name``.

    Args:
        payload: Decoded release document with an ``assets`` list.
        asset_name: Asset file name configured for the tool.

    Returns:
        str: ``browser_download_url`` of the match, or ``""`` when nothing matches.
    """

    if not asset_name or not isinstance(payload, dict):
        return ""
    for asset in payload.get("assets") or ():
        if isinstance(asset, dict) and asset.get("name") == asset_name:
            url = asset.get("browser_download_url")
            return url if isinstance(url, str) else ""
    return ""


def resolve_release_asset_url(client: HttpClient, api_url: str, source: GitReleaseSource) -> str:
    """Return the download URL of ``source``'s asset in the latest release.

    Args:
        client: HTTP client used for the API query.
        api_url: Base URL of the hosting API.
        source: Release coordinates and asset file name.

    Returns:
        str: Download URL, or ``""`` when the query fails or no asset matches.
    """

    endpoint = latest_release_endpoint(api_url, source.owner, source.repo)
    response = client.get(endpoint, headers={"Accept": GITHUB_ACCEPT_HEADER})
    if not response.ok:
        LOGGER.warning("Release lookup %s returned HTTP %s", endpoint, response.status_code)
        return ""
    return select_release_asset(response.json(), source.asset_name)


def find_zip_links(html: str, base_url: str) -> list[str]:
    """Return absolute targets of every ``.zip`` hyperlink in ``html``, in document order."""

    return [urljoin(base_url, match) for match in ZIP_LINK_RE.findall(html)]


def resolve_asset_page_url(client: HttpClient, source: AssetPageSource) -> str:
    """Return the first ``.zip`` link on the asset page.

    Args:
        client: HTTP client used to fetch the page.
        source: Asset page location.

    Returns:
        str: Archive URL, or ``""`` when the fetch fails or the page links no archive.
    """

    try:
        html = client.get_text(source.page)
    except (HttpStatusError, requests.RequestException) as exc:
        LOGGER.warning("Unable to fetch asset page %s: %s", source.page, exc)
        return ""
    links = find_zip_links(html, source.page)
    if len(links) > 1:
        LOGGER.warning("Asset page %s links %d archives; using the first: %s", source.page, len(links), links[0])
    return links[0] if links else ""


def resolve_asset_url(tool: AssetTool, client: HttpClient, *, api_url: str) -> str:
    """Return the archive URL for ``tool`` using the strategy its options select.

    Args:
        tool: Asset tool from the catalog.
        client: HTTP client used for lookups.
        api_url: Base URL of the hosting API for release lookups.

    Returns:
        str: Archive URL, or ``""`` when nothing could be resolved.
    """

    source = tool.asset_source
    if isinstance(source, GitReleaseSource):
        return resolve_release_asset_url(client, api_url, source)
    return resolve_asset_page_url(client, source)


__all__ = [
    "ZIP_LINK_RE",
    "find_zip_links",
    "latest_release_endpoint",
    "resolve_asset_page_url",
    "resolve_asset_url",
    "resolve_release_asset_url",
    "select_release_asset",
]
