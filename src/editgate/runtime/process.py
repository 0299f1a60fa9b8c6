# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deadline-aware wrappers around ``subprocess`` execution.

Each command runs in its own process group so an overrunning tool, together
with anything it spawned, can be killed and reaped when its time budget runs
out.
"""

from __future__ import annotations

import logging
import os
import shutil
import signal
import subprocess  # nosec B404
import sys
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ..constants import KILL_GRACE_SECONDS, TIMEOUT_EXIT_CODE
from ..errors import ToolLaunchError, ToolNotFound

LOGGER = logging.getLogger(__name__)

_IS_WINDOWS = sys.platform == "win32"


@dataclass(slots=True)
class CommandOptions:
    """Execution options for :func:`run_command`."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must be non-negative")


@dataclass(slots=True)
class CommandResult:
    """Captured outcome of a finished (or killed) subprocess."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False
    duration: float = field(default=0.0)


def resolve_executable(name: str, search_dirs: Sequence[Path] = ()) -> str:
    """Return an absolute path for *name*.

    Args:
        name: Executable name or absolute path.
        search_dirs: Directories consulted, in order, before ``PATH``.

    Returns:
        str: Absolute path to an executable file.

    Raises:
        ToolNotFound: If no executable can be located.
    """

    candidate = Path(name)
    if candidate.is_absolute():
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return str(candidate)
        raise ToolNotFound(name)
    existing = [directory for directory in search_dirs if directory.is_dir()]
    if existing:
        local = shutil.which(name, path=os.pathsep.join(str(directory) for directory in existing))
        if local is not None:
            return local
    resolved = shutil.which(name)
    if resolved is None:
        raise ToolNotFound(name, search_dirs)
    return resolved


def _normalize_args(args: Sequence[str], search_dirs: Sequence[Path]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)
    head, *rest = args
    return [resolve_executable(head, search_dirs), *rest]


def _spawn_kwargs() -> dict[str, object]:
    if _IS_WINDOWS:  # pragma: no cover - exercised on Windows only
        return {"creationflags": subprocess.CREATE_NEW_PROCESS_GROUP}
    return {"start_new_session": True}


def _kill_process_group(process: subprocess.Popen[str]) -> None:
    """Kill *process* and every process sharing its group."""

    if _IS_WINDOWS:  # pragma: no cover - exercised on Windows only
        process.kill()
        return
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    except PermissionError:
        process.kill()


def _reap(process: subprocess.Popen[str]) -> tuple[str, str]:
    """Collect remaining output from a killed *process* and wait for it to exit."""

    try:
        stdout, stderr = process.communicate(timeout=KILL_GRACE_SECONDS)
    except subprocess.TimeoutExpired:
        # A descendant escaped the group and still holds the pipes open.
        for stream in (process.stdout, process.stderr):
            if stream is not None:
                stream.close()
        process.wait()
        return "", ""
    return stdout or "", stderr or ""


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
    search_dirs: Sequence[Path] = (),
) -> CommandResult:
    """Execute *args* and capture its output, killing it when ``timeout`` elapses.

    Args:
        args: Command and arguments; the executable is resolved via
            :func:`resolve_executable`.
        options: Working directory, environment overrides and timeout.
        search_dirs: Extra directories searched for the executable before ``PATH``.

    Returns:
        CommandResult: Exit status and captured streams. A killed command reports
        ``timed_out=True`` and exit code 124.

    Raises:
        ToolNotFound: If the executable cannot be resolved.
        ToolLaunchError: If the operating system refuses to execute it.
    """

    resolved_options = options or CommandOptions()
    normalized = _normalize_args(args, search_dirs)
    env = dict(os.environ)
    if resolved_options.env is not None:
        env.update(resolved_options.env)

    started = time.monotonic()
    try:
        process = subprocess.Popen(  # nosec B603
            normalized,
            cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
            env=env,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            **_spawn_kwargs(),
        )
    except FileNotFoundError as exc:
        raise ToolNotFound(normalized[0]) from exc
    except OSError as exc:
        raise ToolLaunchError(normalized[0], exc.strerror or str(exc)) from exc

    try:
        stdout, stderr = process.communicate(timeout=resolved_options.timeout)
    except subprocess.TimeoutExpired:
        _kill_process_group(process)
        stdout, stderr = _reap(process)
        duration = time.monotonic() - started
        LOGGER.warning("command %s killed after %.2fs", normalized[0], duration)
        timeout_msg = f"Command timed out after {resolved_options.timeout:.1f}s"
        return CommandResult(
            args=tuple(normalized),
            returncode=TIMEOUT_EXIT_CODE,
            stdout=stdout,
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
            timed_out=True,
            duration=duration,
        )
    except BaseException:
        _kill_process_group(process)
        _reap(process)
        raise

    duration = time.monotonic() - started
    LOGGER.debug("command %s exited %s in %.2fs", normalized[0], process.returncode, duration)
    return CommandResult(
        args=tuple(normalized),
        returncode=process.returncode,
        stdout=stdout or "",
        stderr=stderr or "",
        duration=duration,
    )


__all__ = ["CommandOptions", "CommandResult", "resolve_executable", "run_command"]
