# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command registry."""

from __future__ import annotations

import typer

from . import post_edit, pre_edit, workspace

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register the built-in commands on ``app``."""

    pre_edit.register(app)
    post_edit.register(app)
    workspace.register(app)
