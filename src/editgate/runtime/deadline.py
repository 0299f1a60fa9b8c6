# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Monotonic wall-clock budget shared by a sequence of tool invocations."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

Clock = Callable[[], float]


@dataclass(slots=True)
class Deadline:
    """Track how much of a fixed time budget is left.

    The clock starts when the deadline is created. ``clock`` exists so tests can
    drive the budget without sleeping.
    """

    budget: float
    clock: Clock = time.monotonic
    started_at: float = field(init=False)

    def __post_init__(self) -> None:
        if self.budget < 0:
            raise ValueError("deadline budget must be non-negative")
        self.started_at = self.clock()

    def elapsed(self) -> float:
        return self.clock() - self.started_at

    def remaining(self) -> float:
        """Return seconds left in the budget, never negative."""

        return max(0.0, self.budget - self.elapsed())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0


__all__ = ["Clock", "Deadline"]
