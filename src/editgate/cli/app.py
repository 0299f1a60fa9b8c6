# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from .commands import register_commands
from .core.typer_ext import TyperAppConfig, create_typer

app = create_typer(config=TyperAppConfig(help_text="Pre/post edit gate for formatter and linter checks."))
register_commands(app)


def main() -> None:
    app()


__all__ = ["app", "main"]
