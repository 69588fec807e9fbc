# cppguard:header:start
#
#   project      : CppGuard
#   file         : reader.py
#   file_relpath : src/cppguard/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""File reader step for the CppGuard pipeline.

Loads the header as a list of lines, each keeping its original terminator
(see `cppguard.utils.file.read_lines`). A read failure is terminal for the
file: the status becomes ``UNREADABLE`` and the pipeline halts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cppguard.config.logging import get_logger
from cppguard.pipeline.status import FileStatus
from cppguard.pipeline.steps.base import BaseStep
from cppguard.utils.file import read_lines

if TYPE_CHECKING:
    from cppguard.config.logging import CppGuardLogger
    from cppguard.pipeline.context import ProcessingContext

logger: CppGuardLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Load the file image into ``ctx.lines``.

    Sets:
      - FileStatus: {UNREADABLE} on failure; left PENDING on success.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: ProcessingContext) -> None:
        """Read ``ctx.path`` into ``ctx.lines``.

        Args:
            ctx (ProcessingContext): The processing context for the current file.
        """
        try:
            ctx.lines = read_lines(ctx.path)
        except OSError as e:
            logger.error("Error reading file %s: %s", ctx.path, e)
            ctx.status = FileStatus.UNREADABLE
            reason = f"Error reading file: {e}"
            ctx.error(reason)
            ctx.request_halt(reason=reason, at_step=self)
            return

        logger.debug("Read %d line(s) from %s", len(ctx.lines), ctx.path)
