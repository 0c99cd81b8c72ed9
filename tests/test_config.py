# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from gdrust.config import Settings, default_config_path, load_settings
from gdrust.constants import DEFAULT_CATALOG_URL, DEFAULT_GITHUB_API_URL
from gdrust.errors import ConfigError


def test_defaults_without_file_or_environment(tmp_path: Path) -> None:
    settings = load_settings(env={}, path=tmp_path / "absent.toml")

    assert settings == Settings()
    assert settings.catalog_url == DEFAULT_CATALOG_URL
    assert settings.github_api_url == DEFAULT_GITHUB_API_URL
    assert settings.request_timeout is None
    assert settings.use_emoji is True


def test_file_section_then_environment_override(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text(
        '[gdrust]\ncatalog_url = "https://example.test/tools.json"\n'
        'github_api_url = "https://api.example.test/"\nrequest_timeout = 5\n',
        encoding="utf-8",
    )

    settings = load_settings(
        env={"GDRUST_REQUEST_TIMEOUT": "12.5", "GDRUST_EMOJI": "off"},
        path=config,
    )

    assert settings.catalog_url == "https://example.test/tools.json"
    assert settings.github_api_url == "https://api.example.test"
    assert settings.request_timeout == 12.5
    assert settings.use_emoji is False


def test_config_path_from_environment(tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text('catalog_url = "https://example.test/db.json"\n', encoding="utf-8")

    assert default_config_path({"GDRUST_CONFIG": str(config)}) == config
    assert load_settings(env={"GDRUST_CONFIG": str(config)}).catalog_url == "https://example.test/db.json"


def test_xdg_config_home_is_honoured(tmp_path: Path) -> None:
    assert default_config_path({"XDG_CONFIG_HOME": str(tmp_path)}) == tmp_path / "gdrust" / "config.toml"


def test_malformed_file_raises_config_error(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text("catalog_url = [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(env={}, path=config)


def test_unknown_key_raises_config_error(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text('[gdrust]\ncolour = "loud"\n', encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(env={}, path=config)


def test_invalid_timeout_override_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_settings(env={"GDRUST_REQUEST_TIMEOUT": "soon"}, path=tmp_path / "absent.toml")
