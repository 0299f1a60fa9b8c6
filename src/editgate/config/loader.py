# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered configuration loading (defaults, pyproject, dedicated TOML, CLI)."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from string import Template
from typing import Any

from pydantic import ValidationError

from ..constants import CONFIG_FILENAME, PYPROJECT_SECTION_KEY, PYPROJECT_TOOL_KEY
from ..errors import ConfigError
from .models import GateConfig


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, env: Mapping[str, str] | None = None) -> None:
        self.path = path
        self._env = os.environ if env is None else env

    def load(self) -> Mapping[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            with self.path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self.path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Unable to read {self.path}: {exc}") from exc
        return self._substitute(self._select(data))

    def _substitute(self, value: Any) -> Any:
        """Replace $VAR and ${VAR} references in string values; unknown names stay as written."""

        if isinstance(value, str):
            return Template(value).safe_substitute(self._env)
        if isinstance(value, Mapping):
            return {key: self._substitute(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self._substitute(item) for item in value]
        return value

    def _select(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        return data


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.editgate]`` within ``pyproject.toml``."""

    def _select(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return section


class ConfigLoader:
    """Merge configuration sources with predictable precedence.

    Later sources win. Tables merge key by key; arrays (including the
    ``workspaces`` table list) replace earlier values wholesale.
    """

    def __init__(self, *, project_root: Path, sources: Sequence[TomlConfigSource]) -> None:
        self._project_root = project_root.resolve()
        self._sources = list(sources)

    @classmethod
    def for_root(cls, project_root: Path, *, explicit: Path | None = None) -> ConfigLoader:
        """Return a loader reading the standard configuration files under *project_root*.

        Args:
            project_root: Directory containing ``pyproject.toml`` and ``.editgate.toml``.
            explicit: Additional configuration file given on the command line.

        Raises:
            ConfigError: If *explicit* does not exist.
        """

        sources: list[TomlConfigSource] = [
            PyProjectConfigSource(project_root / "pyproject.toml"),
            TomlConfigSource(project_root / CONFIG_FILENAME),
        ]
        if explicit is not None:
            if not explicit.is_file():
                raise ConfigError(f"Configuration file not found: {explicit}")
            sources.append(TomlConfigSource(explicit))
        return cls(project_root=project_root, sources=sources)

    def load(self, overrides: Mapping[str, Any] | None = None) -> GateConfig:
        """Return the merged configuration.

        Args:
            overrides: Final layer of values, typically from CLI options.
                ``None`` values are ignored.

        Raises:
            ConfigError: If any layer fails to parse or validate.
        """

        layers = [source.load() for source in self._sources]
        layers.append({key: value for key, value in (overrides or {}).items() if value is not None})
        merged: dict[str, Any] = {}
        for layer in layers:
            _overlay_layer(merged, layer)
        try:
            return GateConfig.model_validate(merged, context={"project_root": self._project_root})
        except ValidationError as exc:
            raise ConfigError(f"Invalid editgate configuration: {exc}") from exc


def load_config(project_root: Path, *, explicit: Path | None = None, **overrides: Any) -> GateConfig:
    """Convenience wrapper around :class:`ConfigLoader`."""

    return ConfigLoader.for_root(project_root, explicit=explicit).load(overrides)


def _overlay_layer(target: dict[str, Any], layer: Mapping[str, Any]) -> None:
    """Apply *layer* onto *target* in place; nested tables merge, anything else is replaced."""

    for key, value in layer.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _overlay_layer(current, value)
        else:
            target[key] = dict(value) if isinstance(value, Mapping) else value


__all__ = ["ConfigLoader", "PyProjectConfigSource", "TomlConfigSource", "load_config"]
