# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Remote tool catalog models and lookups."""

from __future__ import annotations

from .client import (
    dependency_choices,
    fetch_catalog,
    parse_catalog,
    parse_tool_record,
    resolve_dependency_to_catalog_entry,
    resolve_tool_by_id,
    sorted_for_display,
)
from .models import (
    AssetPageSource,
    AssetTool,
    CrateTool,
    GitOptions,
    GitReleaseSource,
    ToolOptions,
    ToolRecord,
    UrlTool,
)

__all__ = [
    "AssetPageSource",
    "AssetTool",
    "CrateTool",
    "GitOptions",
    "GitReleaseSource",
    "ToolOptions",
    "ToolRecord",
    "UrlTool",
    "dependency_choices",
    "fetch_catalog",
    "parse_catalog",
    "parse_tool_record",
    "resolve_dependency_to_catalog_entry",
    "resolve_tool_by_id",
    "sorted_for_display",
]
