# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered settings: built-in defaults, an optional TOML file, then environment overrides."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import DEFAULT_CATALOG_URL, DEFAULT_GITHUB_API_URL
from .errors import ConfigError

CONFIG_ENV_VAR: Final[str] = "GDRUST_CONFIG"
CONFIG_SECTION: Final[str] = "gdrust"
CONFIG_FILENAME: Final[str] = "config.toml"

ENV_OVERRIDES: Final[dict[str, str]] = {
    "GDRUST_CATALOG_URL": "catalog_url",
    "GDRUST_GITHUB_API_URL": "github_api_url",
    "GDRUST_REQUEST_TIMEOUT": "request_timeout",
    "GDRUST_EMOJI": "use_emoji",
}

_FALSE_STRINGS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})
_TRUE_STRINGS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


class Settings(BaseModel):
    """Runtime settings shared by the catalog client, asset installer and CLI."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    catalog_url: str = DEFAULT_CATALOG_URL
    github_api_url: str = DEFAULT_GITHUB_API_URL
    request_timeout: float | None = Field(default=None, ge=0)
    use_emoji: bool = True

    @field_validator("github_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        """Return ``value`` without a trailing slash so endpoint joins stay predictable.

        Args:
            value: Configured API base URL.

        Returns:
            str: Normalised base URL.
        """

        return value.rstrip("/")

    @field_validator("use_emoji", mode="before")
    @classmethod
    def _coerce_bool(cls, value: Any) -> Any:
        """Interpret common textual booleans supplied through the environment.

        Args:
            value: Raw value from a TOML file or environment variable.

        Returns:
            Any: Boolean for recognised strings, otherwise ``value`` unchanged.
        """

        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        return value


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the configuration file location honouring ``GDRUST_CONFIG`` and XDG.

    Args:
        env: Environment mapping; defaults to ``os.environ``.

    Returns:
        Path: Location of the user configuration file (which may not exist).
    """

    environ = os.environ if env is None else env
    explicit = environ.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()
    xdg = environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / CONFIG_SECTION / CONFIG_FILENAME


def _load_file(path: Path) -> dict[str, Any]:
    """Return the settings table stored in ``path``.

    Args:
        path: TOML file to read.

    Returns:
        dict[str, Any]: The ``[gdrust]`` table when present, else the top-level table.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, Mapping):
        raise ConfigError(f"Configuration at {path} must contain a [{CONFIG_SECTION}] table")
    return dict(section)


def load_settings(
    *,
    env: Mapping[str, str] | None = None,
    path: Path | None = None,
) -> Settings:
    """Return settings merged from defaults, the configuration file and the environment.

    Args:
        env: Environment mapping; defaults to ``os.environ``.
        path: Explicit configuration file; defaults to :func:`default_config_path`.

    Returns:
        Settings: Validated settings instance.

    Raises:
        ConfigError: If the file or an override holds an invalid value.
    """

    environ = os.environ if env is None else env
    config_path = path or default_config_path(environ)
    payload: dict[str, Any] = _load_file(config_path) if config_path.is_file() else {}
    for variable, field_name in ENV_OVERRIDES.items():
        raw = environ.get(variable)
        if raw is not None and raw != "":
            payload[field_name] = raw
    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid gdrust configuration: {exc}") from exc


__all__ = [
    "CONFIG_ENV_VAR",
    "ENV_OVERRIDES",
    "Settings",
    "default_config_path",
    "load_settings",
]
