# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command run by the editing agent after it has modified a file."""

from __future__ import annotations

import typer

from ...core.context import resolve_emoji
from ...core.shared import CONFIG_OPTION, EMOJI_OPTION, ROOT_OPTION, build_cli_logger
from ..pre_edit.models import FILE_PATH_ARGUMENT
from .services import load_post_edit_config, record_edit


def post_edit_command(
    file_path: FILE_PATH_ARGUMENT = None,
    root: ROOT_OPTION = None,
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = None,
) -> None:
    """Record that an edit completed. Always exits 0."""

    logger = build_cli_logger(emoji=emoji is not False)
    gate_config = load_post_edit_config(root, config, logger=logger)
    logger = build_cli_logger(emoji=resolve_emoji(emoji, gate_config))
    record_edit(file_path, config=gate_config, logger=logger)
    raise typer.Exit(code=0)


__all__ = ["post_edit_command"]
