# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""File-type filtering for the edit gate."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .constants import SUPPORTED_EXTENSIONS


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """Return lower-cased extensions, each with a leading dot."""

    normalized: set[str] = set()
    for raw in extensions:
        value = raw.strip().lower()
        if not value:
            continue
        normalized.add(value if value.startswith(".") else f".{value}")
    return frozenset(normalized)


def should_check(path: Path, extensions: Iterable[str] = SUPPORTED_EXTENSIONS) -> bool:
    """Return ``True`` when *path* has an extension the toolchain understands."""

    return path.suffix.lower() in normalize_extensions(extensions)


__all__ = ["normalize_extensions", "should_check"]
