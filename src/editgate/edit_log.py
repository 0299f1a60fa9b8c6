# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Post-edit completion records."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from .constants import EDIT_COMPLETED_TEMPLATE
from .logging import warn


def completion_line(path: str) -> str:
    return EDIT_COMPLETED_TEMPLATE.format(path=path)


@dataclass(slots=True)
class EditLogger:
    """Write one completion line per finished edit.

    The line always goes to ``echo``; when ``log_file`` is set it is also
    appended there with a UTC timestamp. Failures to write the file are
    reported as warnings and never propagate.
    """

    echo: Callable[[str], None]
    log_file: Path | None = None
    use_emoji: bool = True

    def record(self, path: str, *, now: datetime | None = None) -> str:
        line = completion_line(path)
        self.echo(line)
        if self.log_file is not None:
            stamp = (now or datetime.now(UTC)).isoformat(timespec="seconds")
            try:
                self.log_file.parent.mkdir(parents=True, exist_ok=True)
                with self.log_file.open("a", encoding="utf-8") as handle:
                    handle.write(f"{stamp} {line}\n")
            except OSError as exc:
                warn(f"Unable to append to edit log {self.log_file}: {exc}", use_emoji=self.use_emoji)
        return line


__all__ = ["EditLogger", "completion_line"]
