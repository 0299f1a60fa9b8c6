# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option containers for the ``pre-edit`` command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

FILE_PATH_ARGUMENT = Annotated[
    str | None,
    typer.Argument(
        help="File about to be edited. Defaults to the path in the configured environment variable.",
        show_default=False,
    ),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option(
        "--timeout",
        "-t",
        help="Seconds shared by the formatter and linter (default 2).",
        show_default=False,
    ),
]


@dataclass(frozen=True, slots=True)
class PreEditOptions:
    """Normalised CLI options for a pre-edit check."""

    file_path: str | None
    root: Path | None
    config_path: Path | None
    timeout: float | None


__all__ = ["FILE_PATH_ARGUMENT", "PreEditOptions", "TIMEOUT_OPTION"]
