# cppguard:header:start
#
#   project      : CppGuard
#   file         : runner.py
#   file_relpath : src/cppguard/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Run the CppGuard pipeline over one file or a whole tree.

Files are processed sequentially; each header runs read → detect → insert →
write to completion before the next one is visited. Per-file failures are
captured in the returned results and never raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cppguard.config.logging import get_logger
from cppguard.file_resolver import walk_headers
from cppguard.pipeline.context import ProcessingContext
from cppguard.pipeline.outcomes import RunResult, TraversalError
from cppguard.pipeline.steps.detector import DetectorStep
from cppguard.pipeline.steps.inserter import InserterStep
from cppguard.pipeline.steps.reader import ReaderStep
from cppguard.pipeline.steps.writer import WriterStep

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from cppguard.config import Config
    from cppguard.config.logging import CppGuardLogger
    from cppguard.pipeline.context import FileResult
    from cppguard.pipeline.steps.base import BaseStep

logger: CppGuardLogger = get_logger(__name__)

GUARD_PIPELINE: tuple[BaseStep, ...] = (
    ReaderStep(),
    DetectorStep(),
    InserterStep(),
    WriterStep(),
)


def run_steps(ctx: ProcessingContext, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Invoke ``steps`` in order on ``ctx`` and return it.

    Steps after a halt are still invoked but skip their work (see
    `BaseStep.may_proceed`).
    """
    for step in steps:
        ctx = step(ctx)
    return ctx


def process_file(
    path: Path,
    config: Config,
    steps: Sequence[BaseStep] = GUARD_PIPELINE,
) -> ProcessingContext:
    """Run the guard pipeline on a single header.

    Args:
        path (Path): The header file.
        config (Config): The effective configuration.
        steps (Sequence[BaseStep]): The steps to run.

    Returns:
        ProcessingContext: The final context for the file.
    """
    ctx = ProcessingContext(path=path, config=config)
    ctx = run_steps(ctx, steps)
    logger.debug("%s: %s", path, ctx.status.value)
    return ctx


def process_tree(config: Config) -> RunResult:
    """Walk ``config.root`` and run the guard pipeline on every header.

    Args:
        config (Config): The effective configuration.

    Returns:
        RunResult: Per-file results and traversal errors.
    """
    errors: list[TraversalError] = []
    results: list[FileResult] = []

    def _on_error(err: OSError) -> None:
        errors.append(TraversalError.from_os_error(err))

    for path in walk_headers(config, on_error=_on_error):
        results.append(process_file(path, config).to_result())

    logger.debug(
        "Processed %d header(s) under %s (%d traversal error(s))",
        len(results),
        config.root,
        len(errors),
    )
    return RunResult(files=results, traversal_errors=errors)
