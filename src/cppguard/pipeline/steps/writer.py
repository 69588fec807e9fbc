# cppguard:header:start
#
#   project      : CppGuard
#   file         : writer.py
#   file_relpath : src/cppguard/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Writer step for committing updated lines to a sink.

Sinks
-----
- FileSystemSink: writes in-place to the file path.
- NullSink: no-op (check mode).

There is no rollback: if a write fails halfway the file may be left
truncated. The failure is reported as ``WRITE_FAILED``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from cppguard.config.logging import get_logger
from cppguard.pipeline.status import FileStatus
from cppguard.pipeline.steps.base import BaseStep
from cppguard.utils.file import write_lines

if TYPE_CHECKING:
    from cppguard.config.logging import CppGuardLogger
    from cppguard.pipeline.context import ProcessingContext

logger: CppGuardLogger = get_logger(__name__)


class WriteSink(Protocol):
    """Destination for the updated lines of a file."""

    def write(self, *, ctx: ProcessingContext) -> int:
        """Write ``ctx.updated`` and return the number of bytes written.

        Raises:
            OSError: If writing fails.
        """
        ...


class NullSink:
    """Check-mode sink: does not write anything."""

    def write(self, *, ctx: ProcessingContext) -> int:
        """No-op write; always returns 0."""
        return 0


class FileSystemSink:
    """Filesystem sink that writes in-place to ``ctx.path``."""

    def write(self, *, ctx: ProcessingContext) -> int:
        """Overwrite ``ctx.path`` with ``ctx.updated``.

        Args:
            ctx (ProcessingContext): Processing context containing the updated lines.

        Returns:
            int: Number of bytes written.
        """
        assert ctx.updated is not None, "ctx.updated not computed"
        return write_lines(ctx.updated, ctx.path)


def select_sink(ctx: ProcessingContext) -> WriteSink:
    """Return ``NullSink`` in check mode, ``FileSystemSink`` otherwise."""
    if ctx.config.check:
        logger.trace("Selected NULL sink (check mode)")
        return NullSink()
    return FileSystemSink()


class WriterStep(BaseStep):
    """Persist ``ctx.updated``.

    Sets:
      - FileStatus: {INSERTED} after a write; {WRITE_FAILED} on error;
        WOULD_INSERT is kept in check mode.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only when the inserter produced updated lines."""
        return super().may_proceed(ctx) and ctx.updated is not None

    def run(self, ctx: ProcessingContext) -> None:
        """Write the updated lines through the selected sink.

        Args:
            ctx (ProcessingContext): The processing context for the current file.
        """
        sink: WriteSink = select_sink(ctx)
        if isinstance(sink, NullSink):
            ctx.info("Check mode: guards would be inserted")
            return
        try:
            ctx.bytes_written = sink.write(ctx=ctx)
        except OSError as e:
            logger.error("Error writing to file %s: %s", ctx.path, e)
            ctx.status = FileStatus.WRITE_FAILED
            reason = f"Error writing to file: {e}"
            ctx.error(reason)
            ctx.request_halt(reason=reason, at_step=self)
            return

        ctx.status = FileStatus.INSERTED
        logger.debug("Wrote %d byte(s) to %s", ctx.bytes_written, ctx.path)
