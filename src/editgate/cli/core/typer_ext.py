# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Custom Typer helpers for consistent, sorted CLI help output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup

ARGUMENT_PARAM_TYPE: Final[str] = "argument"


@dataclass(frozen=True, slots=True)
class TyperAppConfig:
    """Settings applied when constructing a Typer application."""

    help_text: str
    name: str | None = None
    invoke_without_command: bool = False
    no_args_is_help: bool = True


class SortedTyperCommand(TyperCommand):
    """Command whose help lists arguments in declaration order and options alphabetically."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        params = self.get_params(ctx)
        arguments = [param for param in params if param.param_type_name == ARGUMENT_PARAM_TYPE]
        options = sorted(
            (param for param in params if param.param_type_name != ARGUMENT_PARAM_TYPE),
            key=_primary_option_name,
        )
        for title, group in (("Arguments", arguments), ("Options", options)):
            rows = [row for row in (param.get_help_record(ctx) for param in group) if row is not None]
            if rows:
                with formatter.section(title):
                    formatter.write_dl(rows)


class SortedTyperGroup(TyperGroup):
    """Typer group that lists commands alphabetically."""

    def list_commands(self, ctx: Context) -> list[str]:
        return sorted(super().list_commands(ctx))


def create_typer(*, config: TyperAppConfig) -> typer.Typer:
    """Return a Typer application with sorted help listings.

    Rich markup is disabled so help text and error output stay plain.
    """

    return typer.Typer(
        name=config.name,
        help=config.help_text,
        cls=SortedTyperGroup,
        invoke_without_command=config.invoke_without_command,
        no_args_is_help=config.no_args_is_help,
        add_completion=False,
        rich_markup_mode=None,
        pretty_exceptions_enable=False,
    )


def _primary_option_name(param: Parameter) -> str:
    names = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    preferred = next((name for name in names if name.startswith("--")), names[0] if names else param.name or "")
    return preferred.lstrip("-").lower()


__all__ = ["SortedTyperCommand", "SortedTyperGroup", "TyperAppConfig", "create_typer"]
