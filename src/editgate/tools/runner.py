# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the workspace formatter and linter against one file under a shared deadline."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..boundary import ProjectBoundary
from ..config.models import GateConfig, ToolCommand
from ..constants import LOCAL_BIN_DIR
from ..errors import ToolLaunchError, ToolNotFound
from ..models import OutcomeCategory, ToolKind, ToolOutcome
from ..runtime.deadline import Deadline
from ..runtime.process import CommandOptions, CommandResult, run_command
from ..workspaces import Workspace

LOGGER = logging.getLogger(__name__)

CommandRunner = Callable[..., CommandResult]
Classifier = Callable[[int], OutcomeCategory]

# Prettier: 0 clean, 1 would reformat, 2 parse or configuration error.
# ESLint: 0 clean, 1 rule violations, 2 configuration error or crash.
_PRETTIER_NEEDS_FORMAT = 1
_TOOL_ERROR = 2


def classify_format_check(code: int) -> OutcomeCategory:
    """Map a Prettier ``--check`` exit code to an outcome category.

    Args:
        code: Process exit status; negative values mean death by signal.

    Returns:
        OutcomeCategory: ``PASSED`` for 0, ``NEEDS_FORMATTING`` for 1,
        ``FORMAT_UNFIXABLE`` for 2 and ``TOOL_CRASHED`` otherwise.
    """

    if code == 0:
        return OutcomeCategory.PASSED
    if code == _PRETTIER_NEEDS_FORMAT:
        return OutcomeCategory.NEEDS_FORMATTING
    if code == _TOOL_ERROR:
        return OutcomeCategory.FORMAT_UNFIXABLE
    return OutcomeCategory.TOOL_CRASHED


def classify_format_fix(code: int) -> OutcomeCategory:
    """Map a Prettier ``--write`` exit code to an outcome category.

    Args:
        code: Process exit status.

    Returns:
        OutcomeCategory: ``REFORMATTED`` for 0, ``FORMAT_UNFIXABLE`` when the
        rewrite failed and ``TOOL_CRASHED`` for any other status.
    """

    if code == 0:
        return OutcomeCategory.REFORMATTED
    if code in {_PRETTIER_NEEDS_FORMAT, _TOOL_ERROR}:
        return OutcomeCategory.FORMAT_UNFIXABLE
    return OutcomeCategory.TOOL_CRASHED


def classify_lint(code: int) -> OutcomeCategory:
    """Map an ESLint exit code to an outcome category.

    Args:
        code: Process exit status.

    Returns:
        OutcomeCategory: ``PASSED`` for 0, ``LINT_VIOLATION`` for 1 and
        ``TOOL_CRASHED`` for configuration errors, crashes and signals.
    """

    if code == 0:
        return OutcomeCategory.PASSED
    if code == 1:
        return OutcomeCategory.LINT_VIOLATION
    return OutcomeCategory.TOOL_CRASHED


@dataclass(frozen=True, slots=True)
class _InvocationContext:
    path: Path
    workspace: Workspace
    cwd: Path
    search_dirs: tuple[Path, ...]
    deadline: Deadline


class ToolRunner:
    """Execute the formatter (auto-fix) and then the linter for a single file.

    The formatter runs first so the linter sees reformatted content. Both share
    one :class:`Deadline`; once it is spent the running tool is killed and any
    remaining invocation is recorded as timed out without being spawned.
    Callers must ensure nothing else modifies the file while the runner works
    on it.
    """

    def __init__(
        self,
        config: GateConfig,
        boundary: ProjectBoundary,
        *,
        runner: CommandRunner = run_command,
    ) -> None:
        self._config = config
        self._boundary = boundary
        self._runner = runner

    def search_dirs(self, workspace: Workspace) -> tuple[Path, ...]:
        """Return local ``node_modules/.bin`` directories, workspace first."""

        candidates = (
            workspace.directory(self._boundary).joinpath(*LOCAL_BIN_DIR),
            self._boundary.root.joinpath(*LOCAL_BIN_DIR),
        )
        return tuple(dict.fromkeys(candidates))

    def run(self, path: Path, workspace: Workspace, deadline: Deadline) -> list[ToolOutcome]:
        """Run the formatter then the linter against *path*.

        Args:
            path: Canonical path accepted by the project boundary.
            workspace: Workspace supplying tool configuration files.
            deadline: Budget shared by every invocation.

        Returns:
            list[ToolOutcome]: One outcome per invocation in execution order.
        """

        workspace_dir = workspace.directory(self._boundary)
        context = _InvocationContext(
            path=path,
            workspace=workspace,
            cwd=workspace_dir if workspace_dir.is_dir() else self._boundary.root,
            search_dirs=self.search_dirs(workspace),
            deadline=deadline,
        )
        outcomes = self._run_formatter(context)
        if any(outcome.fatal for outcome in outcomes):
            return outcomes

        linter = self._config.linter
        if any(outcome.timed_out for outcome in outcomes):
            outcomes.append(_skipped(ToolKind.LINTER, linter, "lint"))
            return outcomes
        outcomes.append(
            self._invoke(
                context,
                linter,
                kind=ToolKind.LINTER,
                action="lint",
                action_args=linter.check_args,
                config=workspace.resolve_config(workspace.linter_config, self._boundary),
                classify=classify_lint,
            ),
        )
        return outcomes

    def _run_formatter(self, context: _InvocationContext) -> list[ToolOutcome]:
        formatter = self._config.formatter
        config = context.workspace.resolve_config(context.workspace.formatter_config, self._boundary)
        check = self._invoke(
            context,
            formatter,
            kind=ToolKind.FORMATTER,
            action="check",
            action_args=formatter.check_args,
            config=config,
            classify=classify_format_check,
        )
        if check.category is not OutcomeCategory.NEEDS_FORMATTING:
            return [check]
        fix = self._invoke(
            context,
            formatter,
            kind=ToolKind.FORMATTER,
            action="fix",
            action_args=formatter.fix_args,
            config=config,
            classify=classify_format_fix,
        )
        return [check, fix]

    def _invoke(
        self,
        context: _InvocationContext,
        tool: ToolCommand,
        *,
        kind: ToolKind,
        action: str,
        action_args: Sequence[str],
        config: Path | None,
        classify: Classifier,
    ) -> ToolOutcome:
        if context.deadline.expired:
            LOGGER.warning("%s %s skipped: time budget exhausted", tool.name, action)
            return _skipped(kind, tool, action)

        command = tool.build(context.path, action_args=action_args, config=config)
        options = CommandOptions(cwd=context.cwd, timeout=context.deadline.remaining())
        try:
            result = self._runner(command, options=options, search_dirs=context.search_dirs)
        except ToolNotFound as exc:
            return ToolOutcome(
                tool=kind,
                name=tool.name,
                action=action,
                category=OutcomeCategory.TOOL_NOT_FOUND,
                command=tuple(command),
                stderr=str(exc),
            )
        except ToolLaunchError as exc:
            LOGGER.warning("%s %s could not be started: %s", tool.name, action, exc.reason)
            return ToolOutcome(
                tool=kind,
                name=tool.name,
                action=action,
                category=OutcomeCategory.TOOL_CRASHED,
                command=tuple(command),
                stderr=str(exc),
            )

        if result.timed_out:
            LOGGER.warning("%s %s timed out after %.2fs", tool.name, action, result.duration)
            category = OutcomeCategory.TIMED_OUT
        else:
            category = classify(result.returncode)
        LOGGER.debug("%s %s -> %s (exit %s)", tool.name, action, category.value, result.returncode)
        return ToolOutcome(
            tool=kind,
            name=tool.name,
            action=action,
            category=category,
            command=result.args,
            exit_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
            timed_out=result.timed_out,
            duration=result.duration,
        )


def _skipped(kind: ToolKind, tool: ToolCommand, action: str) -> ToolOutcome:
    return ToolOutcome(
        tool=kind,
        name=tool.name,
        action=action,
        category=OutcomeCategory.TIMED_OUT,
        timed_out=True,
    )


__all__ = ["ToolRunner", "classify_format_check", "classify_format_fix", "classify_lint"]
