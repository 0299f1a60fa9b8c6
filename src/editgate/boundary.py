# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project boundary validation for incoming edit paths."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import BoundaryError


@dataclass(frozen=True, slots=True)
class ProjectBoundary:
    """Canonical project root outside of which edits are refused."""

    root: Path

    @classmethod
    def from_path(cls, root: str | Path | None = None) -> ProjectBoundary:
        """Return a boundary anchored at *root* (the working directory by default).

        Args:
            root: Directory to treat as the project root.

        Returns:
            ProjectBoundary: Boundary whose root is absolute and symlink free.
        """

        candidate = Path.cwd() if root is None else Path(root).expanduser()
        return cls(root=candidate.resolve())

    def canonicalize(self, raw_path: str | Path) -> Path:
        """Return *raw_path* as an absolute, symlink-free path.

        Relative inputs are anchored at the boundary root rather than the
        process working directory so the result does not depend on where the
        gate was launched from.
        """

        candidate = Path(raw_path).expanduser()
        if not candidate.is_absolute():
            candidate = self.root / candidate
        return candidate.resolve(strict=False)

    def contains(self, path: Path) -> bool:
        """Return ``True`` when canonical *path* is the root or nested below it."""

        return path == self.root or self.root in path.parents

    def validate(self, raw_path: str | Path) -> Path:
        """Return the canonical form of *raw_path* when it lies inside the boundary.

        Args:
            raw_path: Absolute or relative path supplied by the editing agent.

        Returns:
            Path: Canonical path nested under (or equal to) :attr:`root`.

        Raises:
            BoundaryError: If the path is empty, cannot be resolved, or escapes
                the root through ``..`` segments or symlinks.
        """

        text = str(raw_path)
        if not text.strip():
            raise BoundaryError(text, self.root)
        try:
            resolved = self.canonicalize(text)
        except (OSError, RuntimeError) as exc:  # RuntimeError covers symlink loops
            raise BoundaryError(text, self.root) from exc
        if not self.contains(resolved):
            raise BoundaryError(text, self.root)
        return resolved

    def relative(self, path: Path) -> str:
        """Return *path* relative to the root in POSIX form (``.`` for the root)."""

        try:
            return path.relative_to(self.root).as_posix() or "."
        except ValueError:
            return path.as_posix()


__all__ = ["ProjectBoundary"]
