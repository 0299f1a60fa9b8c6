# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the edit gate."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class EditGateError(Exception):
    """Base class for errors raised by editgate."""


class ConfigError(EditGateError):
    """Raised when configuration input is invalid."""


class BoundaryError(EditGateError):
    """Raised when a path resolves outside the project boundary."""

    def __init__(self, raw_path: str, root: Path) -> None:
        """Record the offending path and the boundary it escaped.

        Args:
            raw_path: Path exactly as supplied by the caller.
            root: Canonical project root the path was checked against.
        """

        super().__init__(f"{raw_path!r} resolves outside project root {root}")
        self.raw_path = raw_path
        self.root = root


class ToolNotFound(EditGateError, FileNotFoundError):
    """Raised when a formatter or linter executable cannot be located."""

    def __init__(self, executable: str, searched: Sequence[Path] = ()) -> None:
        locations = ", ".join(str(path) for path in searched)
        suffix = f" (searched {locations} and PATH)" if locations else " on PATH"
        super().__init__(f"Executable '{executable}' was not found{suffix}")
        self.executable = executable
        self.searched = tuple(searched)


class ToolLaunchError(EditGateError, OSError):
    """Raised when an executable exists but the operating system refuses to start it."""

    def __init__(self, executable: str, reason: str) -> None:
        super().__init__(f"Unable to launch '{executable}': {reason}")
        self.executable = executable
        self.reason = reason


__all__ = ["BoundaryError", "ConfigError", "EditGateError", "ToolLaunchError", "ToolNotFound"]
