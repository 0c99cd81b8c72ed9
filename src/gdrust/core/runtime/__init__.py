# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process execution helpers."""

from __future__ import annotations

from .process import (
    CommandOptions,
    CommandRunner,
    SubprocessExecutionError,
    default_runner,
    is_executable_available,
    run_command,
    spawn_detached,
)

__all__ = [
    "CommandOptions",
    "CommandRunner",
    "SubprocessExecutionError",
    "default_runner",
    "is_executable_available",
    "run_command",
    "spawn_detached",
]
