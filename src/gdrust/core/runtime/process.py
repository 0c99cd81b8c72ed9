# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# cargo/git/godot execution, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404 suppression_valid: Shell-free subprocess wrapper enforces safe execution.
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Protocol

LOGGER = logging.getLogger(__name__)

VERSION_FLAG = "--version"


@dataclass(slots=True, frozen=True)
class CommandOptions:
    """Immutable command execution options.

    ``cwd`` is the explicit working root of the command; the process-wide
    working directory is never changed.
    """

    cwd: Path | None = None
    check: bool = True
    capture_output: bool = False
    text: bool = True
    discard_stdin: bool = False


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command sequence that was executed.
            returncode: Exit status reported by the subprocess.
            stdout: Captured standard output stream.
            stderr: Captured standard error stream.
        """
        rendered = " ".join([Path(command[0]).name, *command[1:]])
        detail = f" stderr: {stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(f"Command '{rendered}' exited with status {returncode}.{detail}")
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class CommandRunner(Protocol):
    """Callable executing ``args`` inside ``cwd`` and returning the completed process."""

    def __call__(self, args: Sequence[str], cwd: Path | None) -> CompletedProcess[str]:
        """Execute ``args`` with ``cwd`` as working directory.

        Args:
            args: Command line arguments to execute.
            cwd: Working directory for the command.

        Returns:
            CompletedProcess[str]: Completed process metadata.
        """
        ...


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Normalise the subprocess argument sequence.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Validated argument list suitable for subprocess execution.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be found on ``PATH``.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
) -> CompletedProcess[str]:
    """Execute ``args`` after normalising the executable path.

    Args:
        args: Command and argument sequence to execute.
        options: Base options configuring execution semantics.

    Returns:
        CompletedProcess: Subprocess execution metadata.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        SubprocessExecutionError: When ``check`` is true and the process exits
            with a non-zero status.
    """

    normalized = _normalize_args(args)
    resolved_options = options or CommandOptions()
    LOGGER.debug("running command=%s cwd=%s", " ".join(args), resolved_options.cwd)

    # Bandit: arguments are assembled by gdrust itself and passed as a list
    # without shell expansion.
    completed: CompletedProcess[str] = subprocess.run(  # nosec B603 - controlled arguments, not user supplied
        normalized,
        cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
        check=False,
        capture_output=resolved_options.capture_output,
        text=resolved_options.text,
        stdin=subprocess.DEVNULL if resolved_options.discard_stdin else None,
    )

    if resolved_options.check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


def default_runner(args: Sequence[str], cwd: Path | None) -> CompletedProcess[str]:
    """Invoke :func:`run_command` with output inherited from the terminal.

    Args:
        args: Command line arguments to execute.
        cwd: Working directory for the command.

    Returns:
        CompletedProcess[str]: Completed process metadata from the invocation.
    """

    return run_command(args, options=CommandOptions(cwd=cwd, check=True))


def is_executable_available(name: str) -> bool:
    """Return ``True`` when ``name --version`` runs successfully.

    Args:
        name: Executable probed on ``PATH``.

    Returns:
        bool: ``True`` when the executable exists and reports its version.
    """

    try:
        completed = run_command(
            (name, VERSION_FLAG),
            options=CommandOptions(check=False, capture_output=True, discard_stdin=True),
        )
    except (FileNotFoundError, PermissionError):
        return False
    except OSError as exc:
        LOGGER.debug("probe failed command=%s error=%s", name, exc)
        return False
    return completed.returncode == 0


def spawn_detached(args: Sequence[str]) -> None:
    """Launch ``args`` in a new session without waiting for it to exit.

    Args:
        args: Command and argument sequence to launch.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
    """

    normalized = _normalize_args(args)
    subprocess.Popen(  # nosec B603 - controlled arguments, not user supplied
        normalized,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
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
