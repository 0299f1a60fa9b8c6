# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the editgate package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .constants import FILE_PATH_ENV
from .workspaces import Workspace


class EditRequest(BaseModel):
    """A single request to vet an edit of ``file_path``."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    requested_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        variable: str = FILE_PATH_ENV,
    ) -> EditRequest | None:
        """Return a request built from *variable* in *env*, or ``None`` when unset."""

        source = os.environ if env is None else env
        value = source.get(variable)
        if not value:
            return None
        return cls(file_path=value)


class ToolKind(str, Enum):
    """Enumerate the external tools driven by the gate."""

    FORMATTER = "formatter"
    LINTER = "linter"


class OutcomeCategory(str, Enum):
    """Interpretation of a single tool invocation."""

    PASSED = "passed"
    NEEDS_FORMATTING = "needs_formatting"
    REFORMATTED = "reformatted"
    TIMED_OUT = "timed_out"
    TOOL_NOT_FOUND = "tool_not_found"
    TOOL_CRASHED = "tool_crashed"
    FORMAT_UNFIXABLE = "format_unfixable"
    LINT_VIOLATION = "lint_violation"

    @property
    def is_fatal(self) -> bool:
        """Return ``True`` when this category blocks the edit."""

        return self in _FATAL_CATEGORIES

    @property
    def label(self) -> str:
        """Return the human-readable form used in report headers."""

        return self.value.replace("_", " ")


_FATAL_CATEGORIES = frozenset(
    {
        OutcomeCategory.TOOL_NOT_FOUND,
        OutcomeCategory.TOOL_CRASHED,
        OutcomeCategory.FORMAT_UNFIXABLE,
        OutcomeCategory.LINT_VIOLATION,
    },
)


class ToolOutcome(BaseModel):
    """Capture the result of one formatter or linter invocation."""

    model_config = ConfigDict(frozen=True)

    tool: ToolKind
    name: str
    action: str
    category: OutcomeCategory
    command: tuple[str, ...] = ()
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False
    duration: float = 0.0

    @property
    def fatal(self) -> bool:
        """Return ``True`` when the outcome blocks the edit."""

        return self.category.is_fatal

    @property
    def output(self) -> str:
        """Return stdout followed by stderr with surrounding blank lines removed."""

        chunks = [chunk.strip("\n") for chunk in (self.stdout, self.stderr)]
        return "\n".join(chunk for chunk in chunks if chunk.strip())


class PipelineStage(str, Enum):
    """Terminal stage reached by one gate invocation."""

    REJECTED_BOUNDARY = "rejected-boundary"
    IGNORED_FILETYPE = "ignored-filetype"
    CHECKS_RAN = "checks-ran"


class PipelineResult(BaseModel):
    """Terminal value of a pre-edit check."""

    model_config = ConfigDict(frozen=True)

    stage: PipelineStage
    raw_path: str
    path: Path | None = None
    display_path: str | None = None
    workspace: Workspace | None = None
    outcomes: tuple[ToolOutcome, ...] = ()

    @property
    def final_exit_code(self) -> int:
        """Return the process exit code for this result.

        Returns:
            int: 1 for a boundary rejection or any fatal outcome, otherwise 0.
            Timeouts alone never fail the invocation.
        """

        if self.stage is PipelineStage.REJECTED_BOUNDARY:
            return 1
        return 1 if any(outcome.fatal for outcome in self.outcomes) else 0

    @property
    def timed_out(self) -> bool:
        """Return ``True`` when any invocation was cut short or skipped by the deadline."""

        return any(outcome.timed_out for outcome in self.outcomes)


class Report(BaseModel):
    """Rendered stdout text and process exit code for one invocation."""

    model_config = ConfigDict(frozen=True)

    text: str
    exit_code: int


__all__ = [
    "EditRequest",
    "OutcomeCategory",
    "PipelineResult",
    "PipelineStage",
    "Report",
    "ToolKind",
    "ToolOutcome",
]
