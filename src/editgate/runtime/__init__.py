# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process execution primitives bounded by a shared deadline."""

from __future__ import annotations

from .deadline import Deadline
from .process import CommandOptions, CommandResult, resolve_executable, run_command

__all__ = ["CommandOptions", "CommandResult", "Deadline", "resolve_executable", "run_command"]
