# cppguard:header:start
#
#   project      : CppGuard
#   file         : diagnostics.py
#   file_relpath : src/cppguard/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Per-file diagnostics recorded by the pipeline steps.

Steps never raise for a problem with one header: they attach a `Diagnostic`
to the processing context and move on. The CLI tallies them per severity
(`compute_diagnostic_stats`) for the run summary.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity of a diagnostic, from least to most severe."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` style used to display this level."""
        return _LEVEL_COLORS[self]


_LEVEL_COLORS: dict[DiagnosticLevel, Callable[[str], str]] = {
    DiagnosticLevel.INFO: cast("Callable[[str], str]", chalk.blue),
    DiagnosticLevel.WARNING: cast("Callable[[str], str]", chalk.yellow),
    DiagnosticLevel.ERROR: cast("Callable[[str], str]", chalk.red_bright),
}


@dataclass(frozen=True)
class Diagnostic:
    """One message attached to a file."""

    level: DiagnosticLevel
    message: str

    def __str__(self) -> str:
        return f"{self.level.value}: {self.message}"


@dataclass(frozen=True)
class DiagnosticStats:
    """Number of diagnostics per level.

    Attributes:
        n_info (int): INFO diagnostics.
        n_warning (int): WARNING diagnostics.
        n_error (int): ERROR diagnostics.
    """

    n_info: int = 0
    n_warning: int = 0
    n_error: int = 0


def compute_diagnostic_stats(diags: Iterable[Diagnostic]) -> DiagnosticStats:
    """Count ``diags`` per level.

    Args:
        diags (Iterable[Diagnostic]): Diagnostics of one or many files.

    Returns:
        DiagnosticStats: The per-level counts.
    """
    counts: Counter[DiagnosticLevel] = Counter(d.level for d in diags)
    return DiagnosticStats(
        n_info=counts[DiagnosticLevel.INFO],
        n_warning=counts[DiagnosticLevel.WARNING],
        n_error=counts[DiagnosticLevel.ERROR],
    )
