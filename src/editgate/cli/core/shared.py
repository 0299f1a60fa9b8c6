# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared utilities for CLI commands (logging, errors, registration)."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from ...logging import fail as core_fail
from ...logging import get_console_manager
from ...logging import warn as core_warn
from .typer_ext import SortedTyperCommand


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = field(default=re.compile(r"([\w-]+)=(\".*?\"|\S+)"))

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write ``message`` verbatim to stdout."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Emit a highlighted ``key=value`` debug line when debug logging is enabled."""

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold blue" if key in {"command", "cmd"} else "bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a stderr console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.
    """

    console = get_console_manager().get(color=not no_color, emoji=emoji)
    configure_logging(console=console, debug=debug)
    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug)


def configure_logging(*, console: Console, debug: bool) -> None:
    """Route ``editgate`` library loggers to *console* through Rich."""

    logger = logging.getLogger("editgate")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=console, show_path=False, show_time=False, markup=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


def register_command(app: typer.Typer, func: Callable[..., Any], *, name: str, help_text: str | None = None) -> None:
    """Register *func* on *app* using sorted help output."""

    app.command(name=name, help=help_text, cls=SortedTyperCommand)(func)


ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Project root (defaults to the current directory).", show_default=False),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Additional TOML configuration file.", show_default=False),
]
EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output (defaults to the emoji setting).", show_default=False),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Show tool commands, timings and internal log records on stderr."),
]


__all__ = [
    "CLIError",
    "CLILogger",
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "ROOT_OPTION",
    "build_cli_logger",
    "configure_logging",
    "register_command",
]
