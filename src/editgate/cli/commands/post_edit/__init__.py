# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Post-edit command package exposing registration helpers."""

from __future__ import annotations

import typer

from ...core.shared import register_command
from .command import post_edit_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the ``post-edit`` command with the Typer ``app``."""

    register_command(app, post_edit_command, name="post-edit")
