# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Workspace lookup command package."""

from __future__ import annotations

import typer

from ...core.shared import register_command
from .command import workspace_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the ``workspace`` command with the Typer ``app``."""

    register_command(app, workspace_command, name="workspace")
