# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Services backing the ``post-edit`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ....config import GateConfig
from ....edit_log import EditLogger
from ...core.context import load_gate_context, resolve_request
from ...core.shared import CLIError, CLILogger


def load_post_edit_config(root: Path | None, config_path: Path | None, *, logger: CLILogger) -> GateConfig:
    """Return the project configuration, falling back to defaults with a warning.

    Configuration problems are downgraded so the editing agent is never
    blocked after an edit has already happened.
    """

    try:
        return load_gate_context(root, config_path=config_path).config
    except CLIError as exc:
        logger.warn(f"Using default configuration: {exc}")
        return GateConfig()


def record_edit(file_path: str | None, *, config: GateConfig, logger: CLILogger) -> str | None:
    """Write the completion line for the edited file and return it.

    Args:
        file_path: Path argument, or ``None`` to read the configured environment variable.
        config: Configuration supplying the variable name and optional edit log.
        logger: CLI logger used for stdout and warnings.

    Returns:
        str | None: The completion line, or ``None`` when no path was available.
    """

    try:
        request = resolve_request(file_path, config)
    except typer.BadParameter as exc:
        logger.warn(f"Nothing to record: {exc.message}")
        return None
    edit_logger = EditLogger(echo=logger.echo, log_file=config.edit_log, use_emoji=logger.use_emoji)
    return edit_logger.record(request.file_path)


__all__ = ["load_post_edit_config", "record_edit"]
