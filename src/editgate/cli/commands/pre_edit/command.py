# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command run by the editing agent before it modifies a file."""

from __future__ import annotations

import typer

from ...core.context import resolve_emoji
from ...core.shared import CONFIG_OPTION, DEBUG_OPTION, EMOJI_OPTION, ROOT_OPTION, CLIError, build_cli_logger
from .models import FILE_PATH_ARGUMENT, TIMEOUT_OPTION, PreEditOptions
from .services import load_pre_edit_context, run_pre_edit


def pre_edit_command(
    file_path: FILE_PATH_ARGUMENT = None,
    root: ROOT_OPTION = None,
    config: CONFIG_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    emoji: EMOJI_OPTION = None,
    debug: DEBUG_OPTION = False,
) -> None:
    """Check a file against the project boundary, then format and lint it.

    Prints nothing when there is nothing to report. Exits 1 on a boundary
    violation, lint violation, unfixable formatting error, or missing or
    crashed tool; exits 0 otherwise, including when the checks time out.
    """

    options = PreEditOptions(
        file_path=file_path,
        root=root,
        config_path=config,
        timeout=timeout,
    )
    logger = build_cli_logger(emoji=emoji is not False, debug=debug)
    try:
        context = load_pre_edit_context(options)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    logger = build_cli_logger(emoji=resolve_emoji(emoji, context.config), debug=debug)
    report = run_pre_edit(options, context, logger=logger)

    if report.text:
        logger.echo(report.text)
    raise typer.Exit(code=report.exit_code)


__all__ = ["pre_edit_command"]
