# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map edited files onto the monorepo workspace that owns them.

A single repository hosts several independently configured sub-projects that
share one gate entry point. Each :class:`Workspace` declares a path prefix
relative to the project root; :class:`WorkspaceTable` resolves a file to the
most specific matching entry and falls back to the root workspace otherwise.
Resolution never touches the filesystem.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path, PurePosixPath
from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator

from .boundary import ProjectBoundary
from .errors import ConfigError

FALLBACK_WORKSPACE_ID: Final[str] = "root"


class Workspace(BaseModel):
    """Logical sub-project with its own formatter and linter configuration."""

    model_config = ConfigDict(frozen=True)

    id: str
    path_prefix: str = ""
    package: str | None = None
    formatter_config: Path | None = None
    linter_config: Path | None = None

    @field_validator("path_prefix", mode="before")
    @classmethod
    def _normalise_prefix(cls, value: str | Path | None) -> str:
        """Return the prefix as a relative POSIX path without ``.`` segments."""

        if value is None:
            return ""
        pure = PurePosixPath(str(value).replace("\\", "/"))
        if pure.is_absolute() or ".." in pure.parts:
            raise ValueError(f"workspace prefix must be relative to the project root: {value!r}")
        parts = [part for part in pure.parts if part not in {"", "."}]
        return "/".join(parts)

    @property
    def is_fallback(self) -> bool:
        """Return ``True`` when the workspace matches every path."""

        return not self.path_prefix

    @property
    def prefix_parts(self) -> tuple[str, ...]:
        """Return the prefix split into path components (empty for the fallback)."""

        return tuple(part for part in self.path_prefix.split("/") if part)

    def directory(self, boundary: ProjectBoundary) -> Path:
        """Return the absolute directory rooted at this workspace's prefix."""

        return boundary.root.joinpath(*self.prefix_parts)

    def resolve_config(self, value: Path | None, boundary: ProjectBoundary) -> Path | None:
        """Return *value* anchored at the workspace directory when relative."""

        if value is None:
            return None
        return value if value.is_absolute() else self.directory(boundary) / value

    def matches(self, parts: Sequence[str]) -> bool:
        """Return ``True`` when *parts* start with this workspace's prefix components.

        Args:
            parts: Components of a path relative to the project root.

        Returns:
            bool: Whether the path lies under this workspace.
        """

        prefix = self.prefix_parts
        return tuple(parts[: len(prefix)]) == prefix


DEFAULT_WORKSPACES: Final[tuple[Workspace, ...]] = (
    Workspace(id="web", path_prefix="apps/web", package="@sanity/web"),
    Workspace(id="studio", path_prefix="apps/studio", package="@sanity/studio"),
    Workspace(id="ui", path_prefix="packages/ui", package="@workspace/ui"),
    Workspace(id="shared", path_prefix="packages", package="@workspace/shared"),
    Workspace(id=FALLBACK_WORKSPACE_ID, path_prefix="", package=FALLBACK_WORKSPACE_ID),
)


class WorkspaceTable:
    """Ordered, immutable list of workspace rules with a guaranteed fallback."""

    def __init__(self, workspaces: Iterable[Workspace] = DEFAULT_WORKSPACES) -> None:
        """Validate and freeze the supplied workspace rules.

        Args:
            workspaces: Rules in priority order. A fallback workspace with an
                empty prefix is appended when none is supplied.

        Raises:
            ConfigError: If ids repeat or more than one fallback is declared.
        """

        entries = tuple(workspaces)
        seen: set[str] = set()
        for workspace in entries:
            if workspace.id in seen:
                raise ConfigError(f"Duplicate workspace id: {workspace.id}")
            seen.add(workspace.id)
        fallbacks = [workspace for workspace in entries if workspace.is_fallback]
        if len(fallbacks) > 1:
            names = ", ".join(workspace.id for workspace in fallbacks)
            raise ConfigError(f"Only one fallback workspace may be declared, found: {names}")
        if not fallbacks:
            if FALLBACK_WORKSPACE_ID in seen:
                raise ConfigError(f"Workspace id '{FALLBACK_WORKSPACE_ID}' is reserved for the fallback workspace")
            entries = (*entries, Workspace(id=FALLBACK_WORKSPACE_ID, package=FALLBACK_WORKSPACE_ID))
        self._entries = entries

    def __iter__(self) -> Iterator[Workspace]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def fallback(self) -> Workspace:
        """Return the workspace with an empty prefix."""

        return next(workspace for workspace in self._entries if workspace.is_fallback)

    def get(self, workspace_id: str) -> Workspace | None:
        """Return the workspace called *workspace_id*, or ``None`` when it is not declared."""

        return next((workspace for workspace in self._entries if workspace.id == workspace_id), None)

    def resolve(self, path: Path, boundary: ProjectBoundary) -> Workspace:
        """Return the workspace owning *path*.

        The longest matching prefix wins; among equally long prefixes the
        earliest entry wins. Paths outside the boundary resolve to the
        fallback workspace.

        Args:
            path: Canonical path previously accepted by the boundary.
            boundary: Project boundary the prefixes are relative to.

        Returns:
            Workspace: Exactly one workspace for every input.
        """

        try:
            parts = path.relative_to(boundary.root).parts
        except ValueError:
            return self.fallback
        best: Workspace | None = None
        for workspace in self._entries:
            if not workspace.matches(parts):
                continue
            if best is None or len(workspace.prefix_parts) > len(best.prefix_parts):
                best = workspace
        return best if best is not None else self.fallback


__all__ = ["DEFAULT_WORKSPACES", "FALLBACK_WORKSPACE_ID", "Workspace", "WorkspaceTable"]
