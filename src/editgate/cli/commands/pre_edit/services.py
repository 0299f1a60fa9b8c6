# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Services backing the ``pre-edit`` command."""

from __future__ import annotations

from ....models import PipelineResult, Report
from ....pipeline import EditGate
from ....reporting import assemble
from ...core.context import GateContext, load_gate_context, resolve_request
from ...core.shared import CLILogger
from .models import PreEditOptions


def load_pre_edit_context(options: PreEditOptions) -> GateContext:
    """Return boundary and configuration with the ``--timeout`` override applied.

    Raises:
        CLIError: If configuration cannot be loaded.
    """

    return load_gate_context(
        options.root,
        config_path=options.config_path,
        overrides={"timeout_seconds": options.timeout},
    )


def run_pre_edit(options: PreEditOptions, context: GateContext, *, logger: CLILogger) -> Report:
    """Run the gate pipeline for the requested file and return its report.

    Args:
        options: Normalised command options.
        context: Boundary and configuration loaded for this invocation.
        logger: CLI logger whose emoji setting also applies to the report.

    Returns:
        Report: Text for stdout and the process exit code.

    Raises:
        typer.BadParameter: If no file path was supplied.
    """

    request = resolve_request(options.file_path, context.config)
    logger.debug(
        f"root={context.boundary.root} path={request.file_path} timeout={context.config.timeout_seconds}",
    )
    result = EditGate(context.config, context.boundary).check(request)
    _debug_result(result, logger)
    return assemble(result, use_emoji=logger.use_emoji)


def _debug_result(result: PipelineResult, logger: CLILogger) -> None:
    logger.debug(f"stage={result.stage.value} exit={result.final_exit_code}")
    if result.workspace is not None:
        logger.debug(f"workspace={result.workspace.id} prefix={result.workspace.path_prefix or '.'}")
    for outcome in result.outcomes:
        command = " ".join(outcome.command) or "<not started>"
        logger.debug(
            f"tool={outcome.name} action={outcome.action} category={outcome.category.value} "
            f"exit={outcome.exit_code} duration={outcome.duration:.2f}s command=\"{command}\"",
        )


__all__ = ["load_pre_edit_context", "run_pre_edit"]
