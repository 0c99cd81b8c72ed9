# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import logging
import zipfile
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Any

import pytest

from gdrust.http import HttpClient

CARGO_TOML = """[package]
name = "rust"
version = "0.1.0"
edition = "2021"

[dependencies]
"""


class RecordingRunner:
    """Command runner that records invocations and fakes ``cargo new``."""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[str, ...], Path]] = []

    def __call__(self, args: Sequence[str], cwd: Path | None) -> CompletedProcess[str]:
        command = tuple(args)
        workdir = cwd or Path.cwd()
        self.calls.append((command, workdir))
        if command[:2] == ("cargo", "new"):
            crate = workdir / command[2]
            (crate / "src").mkdir(parents=True)
            (crate / "Cargo.toml").write_text(CARGO_TOML, encoding="utf-8")
            (crate / "src" / "lib.rs").write_text("// generated\n", encoding="utf-8")
        return CompletedProcess(list(command), 0, "", "")

    def commands(self) -> list[tuple[str, ...]]:
        return [command for command, _ in self.calls]


class FakeResponse:
    def __init__(self, *, status_code: int = 200, body: bytes = b"", payload: Any = None) -> None:
        self.status_code = status_code
        self.content = body if payload is None else json.dumps(payload).encode("utf-8")
        self.text = self.content.decode("utf-8", errors="replace")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        return json.loads(self.content)


class FakeSession:
    """Session answering from a URL → response mapping and recording requests."""

    def __init__(self, routes: Mapping[str, FakeResponse | Exception]) -> None:
        self.routes = dict(routes)
        self.requests: list[str] = []

    def get(self, url: str, *, headers: Mapping[str, str] | None = None, timeout: float | None = None):
        self.requests.append(url)
        answer = self.routes.get(url)
        if answer is None:
            return FakeResponse(status_code=404)
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Keep user configuration and ``GDRUST_*`` variables out of every test."""

    for variable in (
        "GDRUST_CATALOG_URL",
        "GDRUST_GITHUB_API_URL",
        "GDRUST_REQUEST_TIMEOUT",
        "GDRUST_EMOJI",
    ):
        monkeypatch.delenv(variable, raising=False)
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("GDRUST_CONFIG", str(config_dir / "missing.toml"))


@pytest.fixture(autouse=True)
def reset_gdrust_logger() -> None:
    """Undo handler changes the CLI makes so caplog sees library records."""

    logger = logging.getLogger("gdrust")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def fake_client() -> Callable[..., tuple[HttpClient, FakeSession]]:
    def factory(routes: Mapping[str, FakeResponse | Exception]) -> tuple[HttpClient, FakeSession]:
        session = FakeSession(routes)
        return HttpClient(session=session), session

    return factory


@pytest.fixture
def response() -> type[FakeResponse]:
    return FakeResponse


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[[Mapping[str, str | None]], bytes]:
    """Return a builder turning ``{name: content}`` into zip bytes (``None`` marks a directory)."""

    def build(entries: Mapping[str, str | None]) -> bytes:
        archive = tmp_path / "fixture-archive.zip"
        with zipfile.ZipFile(archive, "w") as handle:
            for name, content in entries.items():
                if content is None:
                    handle.writestr(name.rstrip("/") + "/", "")
                else:
                    handle.writestr(name, content)
        data = archive.read_bytes()
        archive.unlink()
        return data

    return build
