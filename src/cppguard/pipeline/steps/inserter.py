# cppguard:header:start
#
#   project      : CppGuard
#   file         : inserter.py
#   file_relpath : src/cppguard/pipeline/steps/inserter.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Inserter step: compute the updated image with guards spliced in.

Anchor errors leave the file untouched: the status records which anchor was
missing and the pipeline halts before the writer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cppguard.config.logging import get_logger
from cppguard.guard.errors import (
    CoincidentAnchorsError,
    GuardInsertionError,
    MissingClosingAnchorError,
    MissingOpeningAnchorError,
)
from cppguard.guard.inserter import insert_cpp_guards
from cppguard.pipeline.status import FileStatus
from cppguard.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from cppguard.config.logging import CppGuardLogger
    from cppguard.pipeline.context import ProcessingContext

logger: CppGuardLogger = get_logger(__name__)


def _status_for_error(exc: GuardInsertionError) -> FileStatus:
    if isinstance(exc, MissingOpeningAnchorError):
        return FileStatus.NO_DEFINE
    if isinstance(exc, MissingClosingAnchorError):
        return FileStatus.NO_ENDIF
    if isinstance(exc, CoincidentAnchorsError):
        return FileStatus.COINCIDENT_ANCHORS
    raise exc


class InserterStep(BaseStep):
    """Fill ``ctx.updated`` with the guarded image.

    Sets:
      - FileStatus: {WOULD_INSERT} on success (the writer may promote it to
        INSERTED); {NO_DEFINE, NO_ENDIF, COINCIDENT_ANCHORS} on failure (halts).
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only for loaded files whose guards are missing."""
        return super().may_proceed(ctx) and ctx.lines is not None

    def run(self, ctx: ProcessingContext) -> None:
        """Insert the guards into a copy of ``ctx.lines``.

        Args:
            ctx (ProcessingContext): The processing context for the current file.
        """
        assert ctx.lines is not None, "ctx.lines not loaded"
        if ctx.config.check:
            logger.info("Guards missing in: %s", ctx.path)
        else:
            logger.info("Adding guards to: %s", ctx.path)
        try:
            ctx.updated = insert_cpp_guards(ctx.lines)
        except GuardInsertionError as e:
            logger.error("Error adding include guards to %s: %s", ctx.path, e)
            ctx.status = _status_for_error(e)
            reason = f"Error adding include guards: {e}"
            ctx.error(reason)
            ctx.request_halt(reason=reason, at_step=self)
            return

        ctx.status = FileStatus.WOULD_INSERT
        logger.debug(
            "%s: %d line(s) -> %d line(s)", ctx.path, len(ctx.lines), len(ctx.updated)
        )
