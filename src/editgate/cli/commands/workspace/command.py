# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command showing which workspace owns a file."""

from __future__ import annotations

import typer

from ....errors import BoundaryError
from ...core.context import load_gate_context, resolve_emoji, resolve_request
from ...core.shared import CONFIG_OPTION, EMOJI_OPTION, ROOT_OPTION, CLIError, build_cli_logger
from ..pre_edit.models import FILE_PATH_ARGUMENT


def workspace_command(
    file_path: FILE_PATH_ARGUMENT = None,
    root: ROOT_OPTION = None,
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = None,
) -> None:
    """Print the workspace id, package and prefix that own a file."""

    logger = build_cli_logger(emoji=emoji is not False)
    try:
        context = load_gate_context(root, config_path=config)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    logger = build_cli_logger(emoji=resolve_emoji(emoji, context.config))
    request = resolve_request(file_path, context.config)
    try:
        path = context.boundary.validate(request.file_path)
    except BoundaryError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    workspace = context.config.workspace_table().resolve(path, context.boundary)
    logger.echo(f"{workspace.id}\t{workspace.package or '-'}\t{workspace.path_prefix or '.'}")
    raise typer.Exit(code=0)


__all__ = ["workspace_command"]
