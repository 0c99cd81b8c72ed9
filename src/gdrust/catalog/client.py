# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fetch the remote tool catalog and resolve tools and manifest dependencies against it."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import ValidationError

from ..errors import CatalogError
from ..http import HttpClient
from ..manifest.models import ManifestRecord
from .models import TOOL_RECORD_ADAPTER, CrateTool, ToolRecord

LOGGER = logging.getLogger(__name__)


def parse_tool_record(payload: Any) -> ToolRecord:
    """Validate one catalog entry.

    Args:
        payload: Decoded JSON object describing a tool.

    Returns:
        ToolRecord: Typed tool record.

    Raises:
        CatalogError: If the entry does not match any tool shape.
    """

    try:
        return TOOL_RECORD_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        ident = payload.get("id") if isinstance(payload, dict) else None
        raise CatalogError(f"Invalid catalog entry {ident!r}: {exc}") from exc


def parse_catalog(payload: Any) -> list[ToolRecord]:
    """Return the valid tool records contained in a decoded catalog document.

    Entries that fail validation are skipped with a warning so one malformed
    record does not hide the rest of the catalog.

    Args:
        payload: Decoded JSON document; must be an array.

    Returns:
        list[ToolRecord]: Records in catalog order.

    Raises:
        CatalogError: If the document is not a JSON array.
    """

    if not isinstance(payload, list):
        raise CatalogError("Tool catalog must be a JSON array")
    records: list[ToolRecord] = []
    for entry in payload:
        try:
            records.append(parse_tool_record(entry))
        except CatalogError as exc:
            LOGGER.warning("%s", exc)
    return records


def fetch_catalog(client: HttpClient, url: str) -> list[ToolRecord]:
    """Download and parse the tool catalog.

    Nothing is cached; every call performs one GET request.

    Args:
        client: HTTP client used for the request.
        url: Catalog endpoint.

    Returns:
        list[ToolRecord]: Records in catalog order.
    """

    return parse_catalog(client.get_json(url))


def resolve_tool_by_id(tool_id: str, catalog: Iterable[ToolRecord]) -> ToolRecord | None:
    """Return the catalog entry whose ``id`` equals ``tool_id``."""

    return next((tool for tool in catalog if tool.id == tool_id), None)


def resolve_dependency_to_catalog_entry(
    dependency_name: str,
    catalog: Sequence[ToolRecord],
) -> ToolRecord | None:
    """Map a manifest dependency name to its catalog entry.

    Manifests record the crate name while the catalog keys tools by a logical
    identifier, so the ``id`` is tried first and the ``source`` of crate
    entries second.

    Args:
        dependency_name: Key from a manifest's ``[dependencies]`` table.
        catalog: Catalog records to search.

    Returns:
        ToolRecord | None: Matching record, or ``None`` when the crate is unknown.
    """

    by_id = resolve_tool_by_id(dependency_name, catalog)
    if by_id is not None:
        return by_id
    return next(
        (tool for tool in catalog if isinstance(tool, CrateTool) and tool.source == dependency_name),
        None,
    )


def dependency_choices(
    record: ManifestRecord,
    catalog: Sequence[ToolRecord],
) -> list[ToolRecord]:
    """Return catalog entries for the dependencies declared by ``record``.

    Dependencies unknown to the catalog are left out.

    Args:
        record: Parsed manifest whose dependencies are mapped.
        catalog: Catalog records to search.

    Returns:
        list[ToolRecord]: Catalog entries in manifest order, without duplicates.
    """

    choices: list[ToolRecord] = []
    seen: set[str] = set()
    for name in record.dependencies:
        tool = resolve_dependency_to_catalog_entry(name, catalog)
        if tool is None or tool.id in seen:
            continue
        seen.add(tool.id)
        choices.append(tool)
    return choices


def sorted_for_display(catalog: Iterable[ToolRecord]) -> list[ToolRecord]:
    """Return ``catalog`` ordered by display name for selection prompts."""

    return sorted(catalog, key=lambda tool: tool.name.casefold())


__all__ = [
    "dependency_choices",
    "fetch_catalog",
    "parse_catalog",
    "parse_tool_record",
    "resolve_dependency_to_catalog_entry",
    "resolve_tool_by_id",
    "sorted_for_display",
]
