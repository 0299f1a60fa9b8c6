# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the edit gate."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from ..constants import DEFAULT_TIMEOUT_SECONDS, FILE_PATH_ENV, SUPPORTED_EXTENSIONS
from ..errors import ConfigError
from ..filetypes import normalize_extensions
from ..workspaces import DEFAULT_WORKSPACES, Workspace, WorkspaceTable


class ToolCommand(BaseModel):
    """Describe how to invoke one external formatter or linter."""

    model_config = ConfigDict(frozen=True)

    name: str
    executable: str
    args: list[str] = Field(default_factory=list)
    check_args: list[str] = Field(default_factory=list)
    fix_args: list[str] = Field(default_factory=list)
    config_flag: str | None = "--config"

    def build(self, file: Path, *, action_args: Sequence[str], config: Path | None = None) -> list[str]:
        """Return the argument vector for running this tool against *file*.

        Args:
            file: Canonical path of the file being checked.
            action_args: Mode-specific arguments (``check_args`` or ``fix_args``).
            config: Optional tool configuration file for the active workspace.

        Returns:
            list[str]: Command line with the file path as the final argument.
        """

        command = [self.executable, *self.args, *action_args]
        if config is not None and self.config_flag:
            command.extend((self.config_flag, str(config)))
        command.append(str(file))
        return command


def default_formatter() -> ToolCommand:
    """Return the built-in Prettier command (``--check`` then ``--write``)."""

    return ToolCommand(name="prettier", executable="prettier", check_args=["--check"], fix_args=["--write"])


def default_linter() -> ToolCommand:
    """Return the built-in ESLint command."""

    return ToolCommand(name="eslint", executable="eslint")


class GateConfig(BaseModel):
    """Top-level configuration consumed by the edit gate pipeline."""

    model_config = ConfigDict(frozen=True)

    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    extensions: list[str] = Field(default_factory=lambda: list(SUPPORTED_EXTENSIONS))
    file_path_env: str = FILE_PATH_ENV
    formatter: ToolCommand = Field(default_factory=default_formatter)
    linter: ToolCommand = Field(default_factory=default_linter)
    workspaces: list[Workspace] = Field(default_factory=lambda: list(DEFAULT_WORKSPACES))
    edit_log: Path | None = None
    emoji: bool = True

    @field_validator("formatter", mode="before")
    @classmethod
    def _complete_formatter(cls, value: object) -> object:
        return _overlay(default_formatter(), value)

    @field_validator("linter", mode="before")
    @classmethod
    def _complete_linter(cls, value: object) -> object:
        return _overlay(default_linter(), value)

    @field_validator("extensions")
    @classmethod
    def _normalise_extensions(cls, value: list[str]) -> list[str]:
        normalized = normalize_extensions(value)
        if not normalized:
            raise ValueError("at least one file extension must be configured")
        return sorted(normalized)

    @field_validator("edit_log")
    @classmethod
    def _anchor_edit_log(cls, value: Path | None, info: ValidationInfo) -> Path | None:
        """Anchor a relative log path at the ``project_root`` passed in the validation context."""

        if value is None or value.is_absolute():
            return value
        project_root = (info.context or {}).get("project_root")
        return value if project_root is None else Path(project_root) / value

    @model_validator(mode="after")
    def _check_workspaces(self) -> GateConfig:
        try:
            WorkspaceTable(self.workspaces)
        except ConfigError as exc:
            raise ValueError(str(exc)) from exc
        return self

    def workspace_table(self) -> WorkspaceTable:
        """Return the validated workspace table.

        Returns:
            WorkspaceTable: Resolver built from :attr:`workspaces`.
        """

        return WorkspaceTable(self.workspaces)


def _overlay(default: ToolCommand, value: object) -> object:
    """Fill keys missing from a partial tool table with the built-in command."""

    if isinstance(value, Mapping):
        return {**default.model_dump(), **value}
    return value


__all__ = ["GateConfig", "ToolCommand", "default_formatter", "default_linter"]
