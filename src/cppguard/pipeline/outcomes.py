# cppguard:header:start
#
#   project      : CppGuard
#   file         : outcomes.py
#   file_relpath : src/cppguard/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Aggregate per-file results into a run summary.

Presentation-free: no ANSI and no console logic. The CLI layers coloring on
top using the colorizer carried by each `FileStatus`.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cppguard.core.diagnostics import DiagnosticStats, compute_diagnostic_stats
from cppguard.pipeline.status import FileStatus

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cppguard.pipeline.context import FileResult


@dataclass(frozen=True)
class TraversalError:
    """A directory-walk error that was logged and skipped.

    Attributes:
        path (str | None): The entry that could not be visited, if known.
        message (str): The error text.
    """

    path: str | None
    message: str

    @classmethod
    def from_os_error(cls, err: OSError) -> TraversalError:
        """Build a record from the ``OSError`` raised by the walker."""
        return cls(path=err.filename, message=err.strerror or str(err))


@dataclass(frozen=True)
class RunResult:
    """Aggregate result of a scan.

    Attributes:
        files (Sequence[FileResult]): Per-file results in walk order.
        traversal_errors (Sequence[TraversalError]): Walk errors, in order.
    """

    files: Sequence[FileResult]
    traversal_errors: Sequence[TraversalError] = ()

    def counts(self) -> dict[FileStatus, int]:
        """Return the number of files per status, in `FileStatus` declaration order."""
        counter: Counter[FileStatus] = Counter(r.status for r in self.files)
        return {status: counter[status] for status in FileStatus if counter[status]}

    def diagnostic_stats(self) -> DiagnosticStats:
        """Return the per-level diagnostic counts over all files."""
        return compute_diagnostic_stats(d for r in self.files for d in r.diagnostics)

    def with_status(self, *statuses: FileStatus) -> list[FileResult]:
        """Return the results whose status is one of ``statuses``."""
        return [r for r in self.files if r.status in statuses]

    @property
    def modified(self) -> int:
        """Number of files written."""
        return sum(1 for r in self.files if r.status == FileStatus.INSERTED)

    @property
    def would_change(self) -> bool:
        """True if any file lacks guards that could be inserted."""
        return any(r.status.is_change for r in self.files)

    @property
    def failed(self) -> int:
        """Number of files left unmodified because of an error."""
        return sum(1 for r in self.files if r.status.is_error)

    @property
    def had_errors(self) -> bool:
        """True if any file failed or the walk hit an error."""
        return self.failed > 0 or bool(self.traversal_errors)
