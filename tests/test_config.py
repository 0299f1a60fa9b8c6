# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from editgate.config import ConfigLoader, GateConfig, load_config
from editgate.config.loader import PyProjectConfigSource, TomlConfigSource
from editgate.constants import DEFAULT_TIMEOUT_SECONDS, FILE_PATH_ENV
from editgate.errors import ConfigError


def _write(path: Path, content: str) -> Path:
    path.write_text(dedent(content), encoding="utf-8")
    return path


def test_defaults_without_files(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert config.extensions == [".js", ".jsx", ".ts", ".tsx"]
    assert config.file_path_env == FILE_PATH_ENV
    assert config.formatter.name == "prettier"
    assert config.linter.name == "eslint"
    assert [workspace.id for workspace in config.workspace_table()] == ["web", "studio", "ui", "shared", "root"]
    assert config.edit_log is None


def test_pyproject_section_is_read(tmp_path: Path) -> None:
    _write(
        tmp_path / "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.editgate]
        timeout_seconds = 5
        extensions = ["ts", ".MTS"]
        """,
    )

    config = load_config(tmp_path)

    assert config.timeout_seconds == 5.0
    assert config.extensions == [".mts", ".ts"]


def test_dedicated_file_overrides_pyproject(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", "[tool.editgate]\ntimeout_seconds = 5\nemoji = false\n")
    _write(tmp_path / ".editgate.toml", "timeout_seconds = 3\n")

    config = load_config(tmp_path)

    assert config.timeout_seconds == 3.0
    assert config.emoji is False


def test_explicit_file_and_overrides_have_highest_precedence(tmp_path: Path) -> None:
    _write(tmp_path / ".editgate.toml", "timeout_seconds = 3\n")
    explicit = _write(tmp_path / "ci.toml", "timeout_seconds = 4\nfile_path_env = \"EDITED_FILE\"\n")

    assert load_config(tmp_path, explicit=explicit).timeout_seconds == 4.0
    config = load_config(tmp_path, explicit=explicit, timeout_seconds=9.5)
    assert config.timeout_seconds == 9.5
    assert config.file_path_env == "EDITED_FILE"


def test_none_overrides_are_ignored(tmp_path: Path) -> None:
    _write(tmp_path / ".editgate.toml", "timeout_seconds = 3\n")

    assert load_config(tmp_path, timeout_seconds=None).timeout_seconds == 3.0


def test_tool_tables_merge_key_by_key(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", "[tool.editgate.formatter]\nexecutable = \"npx\"\n")
    _write(tmp_path / ".editgate.toml", "[formatter]\nargs = [\"prettier\"]\n")

    formatter = load_config(tmp_path).formatter

    assert formatter.executable == "npx"
    assert formatter.args == ["prettier"]
    command = formatter.build(Path("/p/a.ts"), action_args=formatter.check_args)
    assert command == ["npx", "prettier", "--check", "/p/a.ts"]


def test_workspace_list_replaces_defaults(tmp_path: Path) -> None:
    _write(
        tmp_path / ".editgate.toml",
        """
        [[workspaces]]
        id = "site"
        path_prefix = "site/"
        linter_config = "eslint.config.js"
        """,
    )

    table = load_config(tmp_path).workspace_table()

    assert [workspace.id for workspace in table] == ["site", "root"]
    site = table.get("site")
    assert site is not None
    assert site.path_prefix == "site"
    assert site.linter_config == Path("eslint.config.js")


def test_relative_edit_log_is_anchored_at_root(tmp_path: Path) -> None:
    _write(tmp_path / ".editgate.toml", "edit_log = \".editgate/edits.log\"\n")

    assert load_config(tmp_path).edit_log == tmp_path.resolve() / ".editgate" / "edits.log"


def test_environment_variables_are_expanded(tmp_path: Path) -> None:
    config_file = _write(tmp_path / "env.toml", "[linter]\nexecutable = \"${NODE_BIN}/eslint\"\n")

    data = TomlConfigSource(config_file, env={"NODE_BIN": "/opt/node/bin"}).load()

    assert data == {"linter": {"executable": "/opt/node/bin/eslint"}}


def test_pyproject_without_section_contributes_nothing(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", "[tool.black]\nline-length = 100\n")

    assert PyProjectConfigSource(pyproject).load() == {}


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    _write(tmp_path / ".editgate.toml", "timeout_seconds = \n")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


@pytest.mark.parametrize("content", ["timeout_seconds = 0\n", "timeout_seconds = -1\n", "extensions = []\n"])
def test_invalid_values_raise_config_error(tmp_path: Path, content: str) -> None:
    _write(tmp_path / ".editgate.toml", content)

    with pytest.raises(ConfigError, match="Invalid editgate configuration"):
        load_config(tmp_path)


def test_absolute_workspace_prefix_is_rejected(tmp_path: Path) -> None:
    _write(tmp_path / ".editgate.toml", "[[workspaces]]\nid = \"abs\"\npath_prefix = \"/etc\"\n")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_missing_explicit_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        ConfigLoader.for_root(tmp_path, explicit=tmp_path / "missing.toml")


def test_config_model_round_trips_defaults() -> None:
    config = GateConfig()

    assert GateConfig.model_validate(config.model_dump()) == config


def test_duplicate_workspace_ids_fail_at_load_time(tmp_path: Path) -> None:
    _write(
        tmp_path / ".editgate.toml",
        """
        [[workspaces]]
        id = "web"
        path_prefix = "apps/web"

        [[workspaces]]
        id = "web"
        path_prefix = "apps/site"
        """,
    )

    with pytest.raises(ConfigError, match="Duplicate workspace id"):
        load_config(tmp_path)


def test_loaded_configuration_is_immutable(tmp_path: Path) -> None:
    _write(tmp_path / ".editgate.toml", "edit_log = \"edits.log\"\n")
    config = load_config(tmp_path)

    with pytest.raises(ValidationError):
        config.timeout_seconds = 10.0
    with pytest.raises(ValidationError):
        config.formatter.executable = "npx"
    assert config.edit_log == tmp_path.resolve() / "edits.log"


def test_edit_log_stays_relative_without_project_root() -> None:
    assert GateConfig(edit_log=Path("edits.log")).edit_log == Path("edits.log")
