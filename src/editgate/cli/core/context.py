# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Startup wiring shared by the CLI commands."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from ...boundary import ProjectBoundary
from ...config import ConfigError, GateConfig, load_config
from ...models import EditRequest
from .shared import CLIError


@dataclass(frozen=True, slots=True)
class GateContext:
    """Boundary and configuration resolved once per invocation."""

    boundary: ProjectBoundary
    config: GateConfig


def load_gate_context(
    root: Path | None,
    *,
    config_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> GateContext:
    """Resolve the project boundary and load layered configuration beneath it.

    Raises:
        CLIError: If the configuration cannot be loaded.
    """

    boundary = ProjectBoundary.from_path(root)
    try:
        config = load_config(boundary.root, explicit=config_path, **dict(overrides or {}))
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc
    return GateContext(boundary=boundary, config=config)


def resolve_emoji(flag: bool | None, config: GateConfig) -> bool:
    """Return the explicit ``--emoji/--no-emoji`` choice, or the configured default when none was given."""

    return config.emoji if flag is None else flag


def resolve_request(file_path: str | None, config: GateConfig, env: Mapping[str, str] | None = None) -> EditRequest:
    """Return the edit request from the CLI argument or the configured environment variable.

    Raises:
        typer.BadParameter: If neither source supplies a path.
    """

    if file_path is not None:
        return EditRequest(file_path=file_path)
    request = EditRequest.from_env(env, variable=config.file_path_env)
    if request is None:
        raise typer.BadParameter(
            f"no file path given and ${config.file_path_env} is not set",
            param_hint="FILE_PATH",
        )
    return request


__all__ = ["GateContext", "load_gate_context", "resolve_emoji", "resolve_request"]
