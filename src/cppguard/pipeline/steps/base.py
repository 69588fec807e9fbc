# cppguard:header:start
#
#   project      : CppGuard
#   file         : base.py
#   file_relpath : src/cppguard/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*::

    ctx = step(ctx)  # internally: may_proceed → run?
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cppguard.config.logging import get_logger

if TYPE_CHECKING:
    from cppguard.config.logging import CppGuardLogger
    from cppguard.pipeline.context import ProcessingContext

logger: CppGuardLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this and override ``may_proceed()`` and ``run()``. Do not override
    ``__call__`` unless you need custom lifecycle behavior.

    Attributes:
        name (str): Stable step identifier for logs.
    """

    name: str

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (ProcessingContext): The processing context for the current file.

        Returns:
            ProcessingContext: The same context instance after mutation.
        """
        ctx.steps.append(self)
        if self.may_proceed(ctx):
            logger.trace("%s: running for %s", self.name, ctx.path)
            self.run(ctx)
            if ctx.is_halted:
                logger.debug("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.trace("%s: may not proceed for %s", self.name, ctx.path)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run; by default unless the pipeline halted.

        Args:
            ctx (ProcessingContext): The processing context.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        return not ctx.is_halted

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's work, mutating ``ctx`` in place.

        Args:
            ctx (ProcessingContext): The processing context.
        """
        raise NotImplementedError
