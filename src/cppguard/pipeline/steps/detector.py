# cppguard:header:start
#
#   project      : CppGuard
#   file         : detector.py
#   file_relpath : src/cppguard/pipeline/steps/detector.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Detector step: stop early when the header already has linkage guards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cppguard.config.logging import get_logger
from cppguard.guard.detector import has_cpp_guards
from cppguard.pipeline.status import FileStatus
from cppguard.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from cppguard.config.logging import CppGuardLogger
    from cppguard.pipeline.context import ProcessingContext

logger: CppGuardLogger = get_logger(__name__)


class DetectorStep(BaseStep):
    """Check ``ctx.lines`` for the guard pattern.

    Sets:
      - FileStatus: {PRESENT} (halts); left PENDING when guards are missing.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only once the reader loaded the file."""
        return super().may_proceed(ctx) and ctx.lines is not None

    def run(self, ctx: ProcessingContext) -> None:
        """Mark the file ``PRESENT`` and halt if the guards are found.

        Args:
            ctx (ProcessingContext): The processing context for the current file.
        """
        assert ctx.lines is not None, "ctx.lines not loaded"
        if has_cpp_guards(ctx.lines):
            ctx.status = FileStatus.PRESENT
            logger.debug("C++ guards already present in %s", ctx.path)
            ctx.request_halt(reason="guards present", at_step=self)
