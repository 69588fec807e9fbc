# cppguard:header:start
#
#   project      : CppGuard
#   file         : utils.py
#   file_relpath : src/cppguard/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Human-readable rendering of a run result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cppguard.core.diagnostics import DiagnosticLevel
from cppguard.pipeline.status import FileStatus
from cppguard.utils.file import compute_relpath

if TYPE_CHECKING:
    from pathlib import Path

    from cppguard.cli.console import ClickConsole
    from cppguard.core.diagnostics import DiagnosticStats
    from cppguard.pipeline.outcomes import RunResult


def render_summary_counts(console: ClickConsole, result: RunResult) -> None:
    """Print aligned per-status counts, then diagnostic and traversal error tallies."""
    console.print()
    console.heading("Summary by outcome:")

    counts: dict[FileStatus, int] = result.counts()
    if not counts:
        console.print("  no header files found")
    label_width: int = max((len(status.value) for status in counts), default=0) + 1
    num_width: int = len(str(len(result.files)))
    for status, n in counts.items():
        line = f"  {status.value:<{label_width}}: {n:>{num_width}}"
        console.print(console.colored(line, status.color))

    stats: DiagnosticStats = result.diagnostic_stats()
    if stats.n_error or stats.n_warning:
        worst: DiagnosticLevel = DiagnosticLevel.ERROR if stats.n_error else DiagnosticLevel.WARNING
        line = f"  diagnostics: {stats.n_error} error(s), {stats.n_warning} warning(s)"
        console.print(console.colored(line, worst.color))

    if result.traversal_errors:
        line = f"  traversal errors: {len(result.traversal_errors)}"
        console.print(console.colored(line, FileStatus.UNREADABLE.color))


def render_per_file(
    console: ClickConsole,
    result: RunResult,
    *,
    relative_to: Path | None,
    statuses: tuple[FileStatus, ...],
) -> None:
    """Print one line per file whose status is in ``statuses``.

    Args:
        console (ClickConsole): Output console.
        result (RunResult): The run result.
        relative_to (Path | None): Base for displayed paths (CWD when None).
        statuses (tuple[FileStatus, ...]): Statuses worth listing.
    """
    for r in result.with_status(*statuses):
        shown: Path = compute_relpath(r.path, relative_to)
        console.print(f"{shown}: {console.colored(r.status.value, r.status.color)}")
