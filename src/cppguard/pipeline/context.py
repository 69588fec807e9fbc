# cppguard:header:start
#
#   project      : CppGuard
#   file         : context.py
#   file_relpath : src/cppguard/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Processing context and per-file result for the CppGuard pipeline.

A `ProcessingContext` is created for each header, threaded through the steps
(reader → detector → inserter → writer), and finally snapshotted into an
immutable `FileResult`. Steps never raise for per-file problems: they record a
`Diagnostic`, set ``ctx.status`` and call `ProcessingContext.request_halt`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cppguard.core.diagnostics import Diagnostic, DiagnosticLevel
from cppguard.pipeline.status import FileStatus

if TYPE_CHECKING:
    from pathlib import Path

    from cppguard.config import Config
    from cppguard.pipeline.steps.base import BaseStep


@dataclass
class Flow:
    """Pipeline control flags.

    Attributes:
        halt (bool): No further step runs for this file.
        reason (str): Why the pipeline halted.
        at_step (str): Name of the step that requested the halt.
    """

    halt: bool = False
    reason: str = ""
    at_step: str = ""


@dataclass
class ProcessingContext:
    """Mutable state for one header while it moves through the pipeline.

    Attributes:
        path (Path): The header being processed.
        config (Config): The effective configuration.
        status (FileStatus): Current outcome; ``PENDING`` until a step decides.
        lines (list[str] | None): Original lines, set by the reader.
        updated (list[str] | None): Lines with guards inserted, set by the inserter.
        bytes_written (int): Bytes written by the writer (0 when nothing was written).
        diagnostics (list[Diagnostic]): Messages collected along the way.
        flow (Flow): Halt flags.
        steps (list[BaseStep]): Steps invoked so far, in order.
    """

    path: Path
    config: Config
    status: FileStatus = FileStatus.PENDING
    lines: list[str] | None = None
    updated: list[str] | None = None
    bytes_written: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])
    flow: Flow = field(default_factory=Flow)
    steps: list[BaseStep] = field(default_factory=lambda: [])

    @property
    def is_halted(self) -> bool:
        """Return True if a step stopped the pipeline for this file."""
        return self.flow.halt

    def request_halt(self, *, reason: str, at_step: BaseStep) -> None:
        """Stop processing this file after the current step.

        Args:
            reason (str): Human-readable reason, kept for debugging.
            at_step (BaseStep): The step requesting the halt.
        """
        self.flow = Flow(halt=True, reason=reason, at_step=at_step.name)

    def add_diagnostic(self, level: DiagnosticLevel, message: str) -> None:
        """Attach a diagnostic to this file."""
        self.diagnostics.append(Diagnostic(level=level, message=message))

    def info(self, message: str) -> None:
        """Attach an INFO diagnostic."""
        self.add_diagnostic(DiagnosticLevel.INFO, message)

    def warning(self, message: str) -> None:
        """Attach a WARNING diagnostic."""
        self.add_diagnostic(DiagnosticLevel.WARNING, message)

    def error(self, message: str) -> None:
        """Attach an ERROR diagnostic."""
        self.add_diagnostic(DiagnosticLevel.ERROR, message)

    def to_result(self) -> FileResult:
        """Snapshot this context into an immutable `FileResult`."""
        return FileResult(
            path=self.path,
            status=self.status,
            diagnostics=tuple(self.diagnostics),
            bytes_written=self.bytes_written,
        )


@dataclass(frozen=True)
class FileResult:
    """Final outcome for one header.

    Attributes:
        path (Path): The header file.
        status (FileStatus): What happened to it.
        diagnostics (tuple[Diagnostic, ...]): Messages collected while processing.
        bytes_written (int): Bytes written to disk (0 unless ``INSERTED``).
    """

    path: Path
    status: FileStatus
    diagnostics: tuple[Diagnostic, ...] = ()
    bytes_written: int = 0
