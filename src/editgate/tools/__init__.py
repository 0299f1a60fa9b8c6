# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""External formatter and linter execution."""

from __future__ import annotations

from .runner import ToolRunner, classify_format_check, classify_format_fix, classify_lint

__all__ = ["ToolRunner", "classify_format_check", "classify_format_fix", "classify_lint"]
