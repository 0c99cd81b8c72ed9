# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for catalog parsing and lookups."""

from __future__ import annotations

from pathlib import Path

import pytest

from gdrust.catalog import (
    AssetPageSource,
    AssetTool,
    CrateTool,
    GitReleaseSource,
    UrlTool,
    dependency_choices,
    fetch_catalog,
    parse_catalog,
    parse_tool_record,
    resolve_dependency_to_catalog_entry,
    resolve_tool_by_id,
    sorted_for_display,
)
from gdrust.errors import CatalogError
from gdrust.manifest import ManifestRecord

CATALOG = [
    {"name": "Serde", "id": "serde", "type": "crate", "source": "serde"},
    {"name": "Godot Rust", "id": "gdext", "type": "crate", "source": "godot",
     "options": {"git": {"url": "https://github.com/godot-rust/gdext", "branch": "master"}}},
    {"name": "Dialogic", "id": "dialogic", "type": "asset",
     "options": {"git": {"owner": "dialogic-godot", "repo": "dialogic", "asset": "dialogic.zip"}}},
    {"name": "beehave", "id": "beehave", "type": "asset",
     "options": {"asset": {"page": "https://godotengine.org/asset-library/asset/1349"}}},
    {"name": "Installer", "id": "installer", "type": "url", "source": "https://example.test/install.sh"},
]


def test_parse_catalog_builds_typed_records() -> None:
    records = parse_catalog(CATALOG)

    assert [type(record) for record in records] == [CrateTool, CrateTool, AssetTool, AssetTool, UrlTool]
    assert records[0].type == "crate" and records[0].source == "serde"
    assert records[1].git is not None and records[1].git.branch == "master"
    assert records[2].asset_source == GitReleaseSource(owner="dialogic-godot", repo="dialogic", asset_name="dialogic.zip")
    assert records[3].asset_source == AssetPageSource(page="https://godotengine.org/asset-library/asset/1349")


def test_asset_tool_requires_exactly_one_source() -> None:
    with pytest.raises(CatalogError):
        parse_tool_record({"name": "Empty", "id": "empty", "type": "asset"})
    with pytest.raises(CatalogError):
        parse_tool_record(
            {
                "name": "Both",
                "id": "both",
                "type": "asset",
                "options": {"git": {"owner": "o", "repo": "r"}, "asset": {"page": "https://x.test/p"}},
            },
        )


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(CatalogError, match="mystery"):
        parse_tool_record({"name": "Mystery", "id": "mystery", "type": "plugin"})


def test_invalid_entries_are_skipped_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    payload = [*CATALOG, {"name": "Broken", "id": "broken", "type": "asset"}]

    with caplog.at_level("WARNING", logger="gdrust"):
        records = parse_catalog(payload)

    assert [record.id for record in records] == [entry["id"] for entry in CATALOG]
    assert "broken" in caplog.text


def test_catalog_must_be_an_array() -> None:
    with pytest.raises(CatalogError):
        parse_catalog({"tools": CATALOG})


def test_fetch_catalog_reads_configured_url(fake_client, response) -> None:
    client, session = fake_client({"https://db.test/tools.json": response(payload=CATALOG)})

    records = fetch_catalog(client, "https://db.test/tools.json")

    assert len(records) == len(CATALOG)
    assert session.requests == ["https://db.test/tools.json"]


def test_resolve_tool_by_id() -> None:
    records = parse_catalog(CATALOG)

    assert resolve_tool_by_id("beehave", records) is records[3]
    assert resolve_tool_by_id("nope", records) is None


def test_dependency_resolves_by_id_then_crate_source() -> None:
    records = parse_catalog(CATALOG)

    assert resolve_dependency_to_catalog_entry("serde", records) is records[0]
    assert resolve_dependency_to_catalog_entry("godot", records) is records[1]
    assert resolve_dependency_to_catalog_entry("rand", records) is None


def test_dependency_choices_keep_manifest_order_and_skip_unknown() -> None:
    records = parse_catalog(CATALOG)
    manifest = ManifestRecord(
        path=Path("Cargo.toml"),
        name="game",
        dependencies={"godot": {"git": "https://github.com/godot-rust/gdext"}, "rand": "0.8", "serde": "1.0"},
    )

    assert [tool.id for tool in dependency_choices(manifest, records)] == ["gdext", "serde"]


def test_sorted_for_display_is_case_insensitive() -> None:
    names = [tool.name for tool in sorted_for_display(parse_catalog(CATALOG))]

    assert names == ["beehave", "Dialogic", "Godot Rust", "Installer", "Serde"]
