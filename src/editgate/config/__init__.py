# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from ..errors import ConfigError
from .loader import ConfigLoader, PyProjectConfigSource, TomlConfigSource, load_config
from .models import GateConfig, ToolCommand, default_formatter, default_linter

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "GateConfig",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "ToolCommand",
    "default_formatter",
    "default_linter",
    "load_config",
]
