# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across editgate modules.

The message literals below are matched verbatim by downstream tooling and must
not be reworded.
"""

from __future__ import annotations

from typing import Final

DEFAULT_TIMEOUT_SECONDS: Final[float] = 2.0
"""Wall-clock budget shared by the formatter and linter invocations."""

KILL_GRACE_SECONDS: Final[float] = 0.5
"""Upper bound spent reaping a process group after it has been killed."""

TIMEOUT_EXIT_CODE: Final[int] = 124

FILE_PATH_ENV: Final[str] = "CLAUDE_FILE_PATH"

SUPPORTED_EXTENSIONS: Final[tuple[str, ...]] = (".ts", ".tsx", ".js", ".jsx")

BOUNDARY_VIOLATION_MESSAGE: Final[str] = "Security: File path outside project boundary"
AUTO_FORMAT_MARKER: Final[str] = "🔧 Auto-formatting"
TIMEOUT_NOTICE: Final[str] = "Checks timed out - proceeding anyway"
EDIT_COMPLETED_TEMPLATE: Final[str] = "✓ Edit completed for {path}"

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "editgate"
CONFIG_FILENAME: Final[str] = ".editgate.toml"

LOCAL_BIN_DIR: Final[tuple[str, ...]] = ("node_modules", ".bin")

__all__ = [
    "AUTO_FORMAT_MARKER",
    "BOUNDARY_VIOLATION_MESSAGE",
    "CONFIG_FILENAME",
    "DEFAULT_TIMEOUT_SECONDS",
    "EDIT_COMPLETED_TEMPLATE",
    "FILE_PATH_ENV",
    "KILL_GRACE_SECONDS",
    "LOCAL_BIN_DIR",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
    "SUPPORTED_EXTENSIONS",
    "TIMEOUT_EXIT_CODE",
    "TIMEOUT_NOTICE",
]
