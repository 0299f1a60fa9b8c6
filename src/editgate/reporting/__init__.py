# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report rendering for pre-edit checks."""

from __future__ import annotations

from .report import assemble

__all__ = ["assemble"]
