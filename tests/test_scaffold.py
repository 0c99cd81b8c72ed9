# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for project scaffolding."""

from __future__ import annotations

import re
import tomllib
from pathlib import Path

import pytest

from gdrust.errors import PreconditionError
from gdrust.manifest import read_manifest
from gdrust.project import ProjectScaffolder, render_gdextension, validate_project_name
from gdrust.project.templates import LIB_RS_TEMPLATE, LIBRARY_TARGETS

EXPECTED_CARGO = [
    ("cargo", "new", "rust", "--vcs", "none", "--lib"),
    ("cargo", "add", "godot"),
    ("cargo", "build"),
]


def _library_paths(descriptor: Path) -> dict[str, str]:
    text = descriptor.read_text(encoding="utf-8")
    section = text.split("[libraries]", 1)[1]
    return dict(re.findall(r'^(\S+)\s*=\s*"([^"]+)"', section, flags=re.MULTILINE))


def test_validate_project_name() -> None:
    assert validate_project_name("  my_game ") == "my_game"
    for bad, reason in (("", "required"), ("my game", "spaces"), ("game!", "letters")):
        with pytest.raises(PreconditionError, match=reason):
            validate_project_name(bad)


def test_render_gdextension_lists_every_target() -> None:
    text = render_gdextension("my-game", "../rust")

    assert 'entry_symbol = "gdext_rust_init"' in text
    assert "compatibility_minimum = 4.1" in text
    assert len(LIBRARY_TARGETS) == 8
    assert '"res://../rust/target/debug/libmy_game.so"' in text
    assert '"res://../rust/target/release/my_game.dll"' in text
    assert '"res://../rust/target/release/libmy_game.dylib"' in text


def test_create_new_builds_layout(tmp_path: Path, recording_runner) -> None:
    layout = ProjectScaffolder(runner=recording_runner, use_emoji=False).create_new(tmp_path, "game")

    root = tmp_path / "game"
    assert layout.root == root
    assert layout.project_file == root / "godot" / "project.godot"
    assert layout.project_file.is_file()
    assert (root / "rust" / "src" / "lib.rs").read_text(encoding="utf-8") == LIB_RS_TEMPLATE

    paths = _library_paths(root / "godot" / "rust.gdextension")
    assert len(paths) == 8
    assert paths["linux.debug.x86_64"] == "res://../rust/target/debug/libgame.so"

    assert recording_runner.commands() == EXPECTED_CARGO
    assert recording_runner.calls[0][1] == root
    assert all(cwd == root / "rust" for _, cwd in recording_runner.calls[1:])

    manifest = root / "rust" / "Cargo.toml"
    assert read_manifest(manifest).name == "game"
    data = tomllib.loads(manifest.read_text(encoding="utf-8"))
    assert data["lib"]["crate-type"] == ["cdylib"]
    assert data["package"]["resolver"] == "2"


def test_create_new_refuses_inside_existing_project(tmp_path: Path, recording_runner) -> None:
    (tmp_path / "project.godot").touch()

    with pytest.raises(PreconditionError, match="already exists"):
        ProjectScaffolder(runner=recording_runner, use_emoji=False).create_new(tmp_path, "game")

    assert recording_runner.calls == []


def test_create_new_refuses_existing_folder(tmp_path: Path, recording_runner) -> None:
    (tmp_path / "game").mkdir()

    with pytest.raises(PreconditionError, match="same name"):
        ProjectScaffolder(runner=recording_runner, use_emoji=False).create_new(tmp_path, "game")


def test_add_to_existing_places_crate_inside_project(tmp_path: Path, recording_runner) -> None:
    (tmp_path / "project.godot").touch()

    layout = ProjectScaffolder(runner=recording_runner, use_emoji=False).add_to_existing(tmp_path, "game")

    assert layout.rust_dir == tmp_path / "rust"
    assert (tmp_path / "rust" / "src" / "lib.rs").is_file()
    assert _library_paths(tmp_path / "rust.gdextension")["windows.debug.x86_64"] == (
        "res://rust/target/debug/game.dll"
    )
    assert recording_runner.calls[0] == (EXPECTED_CARGO[0], tmp_path)


def test_add_to_existing_requires_project(tmp_path: Path, recording_runner) -> None:
    with pytest.raises(PreconditionError):
        ProjectScaffolder(runner=recording_runner, use_emoji=False).add_to_existing(tmp_path, "game")


def test_restructure_moves_project_into_godot_subdirectory(tmp_path: Path, recording_runner) -> None:
    root = tmp_path / "game"
    root.mkdir()
    (root / "project.godot").write_text("config_version=5\n", encoding="utf-8")
    (root / "scenes").mkdir()
    (root / "scenes" / "main.tscn").write_text("[gd_scene]\n", encoding="utf-8")
    (root / ".godot").mkdir()
    (root / ".git").mkdir()

    layout = ProjectScaffolder(runner=recording_runner, use_emoji=False).restructure(root, "game")

    assert layout.godot_dir == root / "godot"
    assert (root / "godot" / "project.godot").read_text(encoding="utf-8") == "config_version=5\n"
    assert (root / "godot" / "scenes" / "main.tscn").is_file()
    assert (root / "godot" / ".godot").is_dir()
    assert (root / ".git").is_dir()
    assert not (root / "project.godot").exists()
    assert (root / "godot" / "rust.gdextension").is_file()
    assert (root / "rust" / "Cargo.toml").is_file()
    assert not (tmp_path / ".tmp-game").exists()


def test_restructure_refuses_when_staging_folder_exists(tmp_path: Path, recording_runner) -> None:
    root = tmp_path / "game"
    root.mkdir()
    (root / "project.godot").touch()
    (tmp_path / ".tmp-game").mkdir()

    with pytest.raises(PreconditionError, match="Temporary folder"):
        ProjectScaffolder(runner=recording_runner, use_emoji=False).restructure(root, "game")

    assert (root / "project.godot").is_file()


def test_init_git_repo_writes_gitignore(tmp_path: Path, recording_runner) -> None:
    gitignore = ProjectScaffolder(runner=recording_runner, use_emoji=False).init_git_repo(tmp_path)

    assert recording_runner.calls == [(("git", "init"), tmp_path)]
    assert gitignore.read_text(encoding="utf-8").splitlines() == ["target/", ".godot/"]


def test_open_in_editor_spawns_detached(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    launched: list[tuple[str, ...]] = []
    monkeypatch.setattr("gdrust.project.scaffold.spawn_detached", lambda args: launched.append(tuple(args)))

    ProjectScaffolder(use_emoji=False).open_in_editor(tmp_path / "project.godot")

    assert launched == [("godot", str(tmp_path / "project.godot"))]
