# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sequential, streaming extraction of zip archives."""

from __future__ import annotations

import shutil
import zipfile
import zlib
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from functools import partial
from pathlib import Path, PurePosixPath
from typing import IO

from ..errors import ArchiveError

_COPY_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    """One member of an archive, in archive order."""

    name: str
    is_dir: bool
    _opener: Callable[[], IO[bytes]]

    def open(self) -> IO[bytes]:
        """Return a readable stream over the member's decompressed bytes."""

        return self._opener()


def iter_archive_entries(path: Path) -> Iterator[ArchiveEntry]:
    """Yield the entries of the zip archive at ``path`` one at a time.

    The generator is single-pass; each entry's stream is only valid until the
    generator advances past it.

    Args:
        path: Zip archive on disk.

    Yields:
        ArchiveEntry: Directory markers (names ending in ``/``) and files.

    Raises:
        zipfile.BadZipFile: If ``path`` is not a readable zip archive.
    """

    with zipfile.ZipFile(path) as archive:
        for info in archive.infolist():
            yield ArchiveEntry(
                name=info.filename,
                is_dir=info.filename.endswith(("/", "\\")),
                _opener=partial(archive.open, info),
            )


def entry_destination(root: Path, name: str) -> Path:
    """Return where archive member ``name`` is written below ``root``.

    Args:
        root: Extraction directory.
        name: Member name as stored in the archive.

    Returns:
        Path: Destination path inside ``root``.

    Raises:
        ArchiveError: If the member name is absolute or climbs out of ``root``.
    """

    member = PurePosixPath(name.replace("\\", "/"))
    if member.is_absolute() or ".." in member.parts or (member.parts and member.parts[0].endswith(":")):
        raise ArchiveError(f"Archive entry {name!r} points outside the extraction directory")
    return root.joinpath(*member.parts)


def extract_archive(path: Path, destination: Path) -> int:
    """Stream every entry of ``path`` into ``destination``.

    Entries are processed strictly in archive order; a file counts as
    extracted once its output handle is closed.

    Args:
        path: Zip archive to extract.
        destination: Directory receiving the archive's contents.

    Returns:
        int: Number of files written.

    Raises:
        ArchiveError: If the archive or an entry's compressed data is corrupt,
            an entry is encrypted or uses an unsupported compression method,
            or an entry escapes ``destination``.
    """

    destination.mkdir(parents=True, exist_ok=True)
    written = 0
    try:
        for entry in iter_archive_entries(path):
            target = entry_destination(destination, entry.name)
            if entry.is_dir:
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            with entry.open() as source, target.open("wb") as sink:
                shutil.copyfileobj(source, sink, _COPY_CHUNK_SIZE)
            written += 1
    except (zipfile.BadZipFile, zlib.error, RuntimeError) as exc:
        raise ArchiveError(f"Failed to extract the asset zip file {path.name}: {exc}") from exc
    return written


__all__ = ["ArchiveEntry", "entry_destination", "extract_archive", "iter_archive_entries"]
