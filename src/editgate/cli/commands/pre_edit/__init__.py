# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pre-edit command package exposing registration helpers."""

from __future__ import annotations

import typer

from ...core.shared import register_command
from .command import pre_edit_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the ``pre-edit`` command with the Typer ``app``."""

    register_command(app, pre_edit_command, name="pre-edit")
