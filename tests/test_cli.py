# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the gdrust commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from gdrust.catalog import AssetTool, parse_catalog
from gdrust.cli.app import app

CATALOG = [
    {"name": "Serde", "id": "serde", "type": "crate", "source": "serde"},
    {"name": "Godot Rust", "id": "gdext", "type": "crate", "source": "godot",
     "options": {"git": {"url": "https://github.com/godot-rust/gdext", "branch": "master"}}},
    {"name": "Dialogic", "id": "dialogic", "type": "asset",
     "options": {"git": {"owner": "dialogic-godot", "repo": "dialogic", "asset": "dialogic.zip"}}},
    {"name": "Installer", "id": "installer", "type": "url", "source": "https://example.test/install.sh"},
]

GAME_MANIFEST = """[package]
name = "game"
version = "0.1.0"
edition = "2021"

[dependencies]
serde = "1.0"
rand = "0.8"
"""


class RecordingInstaller:
    def __init__(self) -> None:
        self.installs: list[tuple[str, Path]] = []
        self.urls: list[tuple[str, str, Path]] = []

    def install(self, tool: AssetTool, project_root: Path) -> None:
        self.installs.append((tool.id, project_root))

    def install_from_url(self, url: str, tool_id: str, project_root: Path) -> None:
        self.urls.append((url, tool_id, project_root))


@pytest.fixture
def cli_services(monkeypatch: pytest.MonkeyPatch, recording_runner):
    """Replace network, runner and tool probes used by the commands."""

    available = {"cargo": True, "git": False, "godot": False}
    installer = RecordingInstaller()
    monkeypatch.setattr("gdrust.cli.services.fetch_catalog", lambda settings: parse_catalog(CATALOG))
    monkeypatch.setattr("gdrust.cli.services.get_runner", lambda: recording_runner)
    monkeypatch.setattr("gdrust.cli.services.tool_available", lambda name: available.get(name, False))
    monkeypatch.setattr("gdrust.cli.services.build_installer", lambda settings, *, use_emoji: installer)
    return available, installer, recording_runner


def _game_project(tmp_path: Path) -> Path:
    crate = tmp_path / "rust"
    crate.mkdir()
    (crate / "Cargo.toml").write_text(GAME_MANIFEST, encoding="utf-8")
    return crate.resolve()


def test_help_lists_commands() -> None:
    runner = CliRunner()

    for args in (["help"], ["--help"], ["-h"]):
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        for command in ("new", "convert", "add", "remove"):
            assert command in result.output


def test_command_help_accepts_short_flag() -> None:
    result = CliRunner().invoke(app, ["add", "-h"])

    assert result.exit_code == 0
    assert "--tool" in result.output
    assert "--project" in result.output


def test_version_flag() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("gdrust ")


@pytest.mark.parametrize("command", ["remove", "rm"])
def test_remove_issues_single_cargo_remove(command: str, tmp_path: Path, cli_services) -> None:
    _, _, recording_runner = cli_services
    crate = _game_project(tmp_path)

    result = CliRunner().invoke(
        app,
        [command, "--root", str(tmp_path), "-p", "game", "--no-emoji"],
        input="1\n",
    )

    assert result.exit_code == 0, result.output
    assert recording_runner.calls == [(("cargo", "remove", "serde"), crate)]
    assert "Removed serde from game" in result.output


def test_remove_selects_project_when_not_given(tmp_path: Path, cli_services) -> None:
    _, _, recording_runner = cli_services
    _game_project(tmp_path)

    result = CliRunner().invoke(app, ["remove", "--root", str(tmp_path), "--no-emoji"], input="1\n1\n")

    assert result.exit_code == 0, result.output
    assert "What project would you like to use?" in result.output
    assert recording_runner.commands() == [("cargo", "remove", "serde")]


def test_remove_unknown_project_fails(tmp_path: Path, cli_services) -> None:
    _game_project(tmp_path)

    result = CliRunner().invoke(app, ["remove", "--root", str(tmp_path), "-p", "other", "--no-emoji"])

    assert result.exit_code == 1
    assert "Could not find the requested project" in result.output


def test_add_unknown_tool_fails(tmp_path: Path, cli_services) -> None:
    result = CliRunner().invoke(app, ["add", "--root", str(tmp_path), "-t", "nope", "--no-emoji"])

    assert result.exit_code == 1
    assert "Could not find the requested tool" in result.output


def test_add_crate_runs_cargo_add(tmp_path: Path, cli_services) -> None:
    _, _, recording_runner = cli_services
    crate = _game_project(tmp_path)

    result = CliRunner().invoke(app, ["add", "--root", str(tmp_path), "-t", "serde", "-p", "game", "--no-emoji"])

    assert result.exit_code == 0, result.output
    assert recording_runner.calls == [(("cargo", "add", "serde"), crate)]


def test_add_git_crate_passes_repository(tmp_path: Path, cli_services) -> None:
    _, _, recording_runner = cli_services
    _game_project(tmp_path)

    result = CliRunner().invoke(app, ["add", "-r", str(tmp_path), "-t", "gdext", "-p", "game", "--no-emoji"])

    assert result.exit_code == 0, result.output
    assert recording_runner.commands() == [
        ("cargo", "add", "godot", "--git", "https://github.com/godot-rust/gdext", "--branch", "master"),
    ]


def test_add_asset_installs_into_godot_root(tmp_path: Path, cli_services) -> None:
    _, installer, _ = cli_services
    godot_dir = tmp_path / "godot"
    godot_dir.mkdir()
    (godot_dir / "project.godot").touch()

    result = CliRunner().invoke(app, ["add", "--root", str(tmp_path), "-t", "dialogic", "--no-emoji"])

    assert result.exit_code == 0, result.output
    assert installer.installs == [("dialogic", godot_dir.resolve())]


def test_add_archive_url_installs_directly(tmp_path: Path, cli_services) -> None:
    _, installer, _ = cli_services
    (tmp_path / "project.godot").touch()
    url = "https://downloads.test/o/r/bundle.zip"

    result = CliRunner().invoke(app, ["add", "--root", str(tmp_path), "-t", url, "--no-emoji"])

    assert result.exit_code == 0, result.output
    assert installer.urls == [(url, "bundle", tmp_path.resolve())]


def test_add_from_selection(tmp_path: Path, cli_services) -> None:
    _, installer, _ = cli_services
    (tmp_path / "project.godot").touch()

    # Sorted display order: Dialogic, Godot Rust, Installer, Serde, then the URL entry.
    result = CliRunner().invoke(app, ["add", "--root", str(tmp_path), "--no-emoji"], input="1\n")

    assert result.exit_code == 0, result.output
    assert installer.installs == [("dialogic", tmp_path.resolve())]


def test_add_script_tool_is_unsupported(tmp_path: Path, cli_services) -> None:
    result = CliRunner().invoke(app, ["add", "--root", str(tmp_path), "-t", "installer", "--no-emoji"])

    assert result.exit_code == 1
    assert "not supported" in result.output


def test_new_requires_cargo(tmp_path: Path, cli_services) -> None:
    available, _, _ = cli_services
    available["cargo"] = False

    result = CliRunner().invoke(app, ["new", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "Cargo is not installed" in result.output
    assert "rust-lang.org" in result.output


def test_new_refuses_existing_project(tmp_path: Path, cli_services) -> None:
    (tmp_path / "project.godot").touch()

    result = CliRunner().invoke(app, ["new", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "A Godot project already exists" in result.output


def test_new_creates_project_after_reprompting_name(tmp_path: Path, cli_services) -> None:
    _, _, recording_runner = cli_services

    result = CliRunner().invoke(app, ["new", "--root", str(tmp_path), "--no-emoji"], input="my game\ngame\n")

    assert result.exit_code == 0, result.output
    assert "Project name cannot contain spaces" in result.output
    assert (tmp_path / "game" / "godot" / "project.godot").is_file()
    assert (tmp_path / "game" / "rust" / "src" / "lib.rs").is_file()
    assert recording_runner.commands()[0] == ("cargo", "new", "rust", "--vcs", "none", "--lib")
    assert "Click on \"Import\"" in result.output


def test_new_offers_git_when_available(tmp_path: Path, cli_services) -> None:
    available, _, recording_runner = cli_services
    available["git"] = True

    result = CliRunner().invoke(app, ["new", "--root", str(tmp_path), "--no-emoji"], input="game\ny\n")

    assert result.exit_code == 0, result.output
    assert ("git", "init") in recording_runner.commands()
    assert (tmp_path / "game" / ".gitignore").is_file()


def test_new_refuses_existing_folder(tmp_path: Path, cli_services) -> None:
    (tmp_path / "game").mkdir()

    result = CliRunner().invoke(app, ["new", "--root", str(tmp_path), "--no-emoji"], input="game\n")

    assert result.exit_code == 1
    assert "A folder with the same name already exists" in result.output


def test_convert_requires_project(tmp_path: Path, cli_services) -> None:
    result = CliRunner().invoke(app, ["convert", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "No Godot project found" in result.output


def test_convert_add_mode(tmp_path: Path, cli_services) -> None:
    (tmp_path / "project.godot").touch()

    result = CliRunner().invoke(app, ["convert", "--root", str(tmp_path), "--no-emoji"], input="game\na\n")

    assert result.exit_code == 0, result.output
    assert (tmp_path / "rust.gdextension").is_file()
    assert (tmp_path / "rust" / "Cargo.toml").is_file()
    assert (tmp_path / "project.godot").is_file()


def test_convert_restructure_requires_confirmation(tmp_path: Path, cli_services) -> None:
    (tmp_path / "project.godot").touch()

    result = CliRunner().invoke(app, ["convert", "--root", str(tmp_path), "--no-emoji"], input="game\nr\nn\n")

    assert result.exit_code == 1
    assert "Aborting" in result.output
    assert (tmp_path / "project.godot").is_file()


def test_convert_invalid_mode_exits(tmp_path: Path, cli_services) -> None:
    (tmp_path / "project.godot").touch()

    result = CliRunner().invoke(app, ["convert", "--root", str(tmp_path), "--no-emoji"], input="game\nx\n")

    assert result.exit_code == 1
    assert "Invalid input" in result.output
