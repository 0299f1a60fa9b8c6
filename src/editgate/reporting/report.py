# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn a pipeline result into stdout text and a process exit code."""

from __future__ import annotations

from ..constants import AUTO_FORMAT_MARKER, BOUNDARY_VIOLATION_MESSAGE, TIMEOUT_NOTICE
from ..logging import emoji
from ..models import OutcomeCategory, PipelineResult, PipelineStage, Report, ToolKind, ToolOutcome


def assemble(result: PipelineResult, *, use_emoji: bool = True) -> Report:
    """Render *result* without side effects.

    An empty ``text`` means there is nothing to report; callers must print
    nothing at all in that case.

    The auto-formatting marker appears only once the formatter has rewritten
    the file, followed by the check output that triggered the rewrite.
    Linter output is always passed through, so warnings from a clean run
    still reach the agent. Passing formatter checks stay silent.

    Args:
        result: Terminal value of one pre-edit check.
        use_emoji: Whether status prefixes include emoji glyphs. The
            auto-formatting marker always carries its glyph.

    Returns:
        Report: Text in execution order and the final exit code.
    """

    if result.stage is PipelineStage.REJECTED_BOUNDARY:
        return Report(text=f"{emoji('❌ ', use_emoji)}{BOUNDARY_VIOLATION_MESSAGE}", exit_code=1)
    if result.stage is PipelineStage.IGNORED_FILETYPE:
        return Report(text="", exit_code=0)

    display = result.display_path or result.raw_path
    lines: list[str] = []
    timeout_reported = False
    pending_check: ToolOutcome | None = None
    for outcome in result.outcomes:
        if outcome.category is OutcomeCategory.NEEDS_FORMATTING:
            pending_check = outcome
            continue
        if outcome.category is OutcomeCategory.REFORMATTED:
            lines.append(f"{AUTO_FORMAT_MARKER} {display}")
            if pending_check is not None and pending_check.output:
                lines.append(pending_check.output)
            continue
        if outcome.category is OutcomeCategory.TIMED_OUT:
            if not timeout_reported:
                lines.append(f"{emoji('⚠️ ', use_emoji)}{TIMEOUT_NOTICE}")
                timeout_reported = True
            continue
        if outcome.fatal:
            header = f"{outcome.name} {outcome.action}: {outcome.category.label} ({display})"
            lines.append(f"{emoji('❌ ', use_emoji)}{header}")
            if outcome.output:
                lines.append(outcome.output)
        elif outcome.tool is ToolKind.LINTER and outcome.output:
            lines.append(outcome.output)
    return Report(text="\n".join(lines), exit_code=result.final_exit_code)


__all__ = ["assemble"]
