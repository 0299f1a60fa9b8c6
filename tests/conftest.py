# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from editgate.boundary import ProjectBoundary
from editgate.config import GateConfig
from tests.helpers.fake_tools import install_fake_tools


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return a monorepo-shaped project root with the standard workspace directories."""

    root = tmp_path / "project"
    for relative in ("apps/web/src", "apps/studio", "packages/ui/src", "packages/logger/src", "scripts"):
        (root / relative).mkdir(parents=True, exist_ok=True)
    (root / "README.md").write_text("# project\n", encoding="utf-8")
    return root.resolve()


@pytest.fixture
def boundary(project_root: Path) -> ProjectBoundary:
    return ProjectBoundary.from_path(project_root)


@pytest.fixture
def fake_tools(project_root: Path) -> Path:
    """Install the fake formatter and linter under ``node_modules/.bin``."""

    return install_fake_tools(project_root)


@pytest.fixture
def gate_config() -> GateConfig:
    """Return defaults with a generous budget so slow CI hosts do not time out."""

    return GateConfig(timeout_seconds=15.0)
