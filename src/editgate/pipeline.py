# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pre-edit check pipeline.

Stages run in a fixed order and any of them may end the invocation early:

1. boundary validation, before anything inspects the file,
2. file-type filtering (unsupported files end silently with success),
3. workspace resolution,
4. formatter then linter, sharing one deadline.
"""

from __future__ import annotations

import logging
import time

from .boundary import ProjectBoundary
from .config.models import GateConfig
from .errors import BoundaryError
from .filetypes import should_check
from .models import EditRequest, PipelineResult, PipelineStage
from .runtime.deadline import Clock, Deadline
from .tools.runner import ToolRunner
from .workspaces import WorkspaceTable

LOGGER = logging.getLogger(__name__)


class EditGate:
    """Configuration bound to a project boundary, ready to vet edits."""

    def __init__(
        self,
        config: GateConfig,
        boundary: ProjectBoundary,
        *,
        runner: ToolRunner | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.config = config
        self.boundary = boundary
        self.workspaces: WorkspaceTable = config.workspace_table()
        self.runner = runner or ToolRunner(config, boundary)
        self._clock = clock

    def check(self, request: EditRequest) -> PipelineResult:
        """Run every stage for *request* and return the terminal result."""

        try:
            path = self.boundary.validate(request.file_path)
        except BoundaryError as exc:
            LOGGER.info("rejected edit: %s", exc)
            return PipelineResult(stage=PipelineStage.REJECTED_BOUNDARY, raw_path=request.file_path)

        if not should_check(path, self.config.extensions):
            return PipelineResult(stage=PipelineStage.IGNORED_FILETYPE, raw_path=request.file_path, path=path)

        workspace = self.workspaces.resolve(path, self.boundary)
        LOGGER.debug("%s resolved to workspace %s", path, workspace.id)
        deadline = Deadline(self.config.timeout_seconds, clock=self._clock)
        outcomes = self.runner.run(path, workspace, deadline)
        return PipelineResult(
            stage=PipelineStage.CHECKS_RAN,
            raw_path=request.file_path,
            path=path,
            display_path=self.boundary.relative(path),
            workspace=workspace,
            outcomes=tuple(outcomes),
        )


__all__ = ["EditGate"]
