# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project scaffolding."""

from __future__ import annotations

from .scaffold import ProjectLayout, ProjectScaffolder, validate_project_name
from .templates import render_gdextension

__all__ = ["ProjectLayout", "ProjectScaffolder", "render_gdextension", "validate_project_name"]
