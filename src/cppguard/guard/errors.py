# cppguard:header:start
#
#   project      : CppGuard
#   file         : errors.py
#   file_relpath : src/cppguard/guard/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Exceptions raised by the guard insertion logic.

All of them leave the input lines untouched; the pipeline turns them into a
per-file status and moves on to the next header.
"""

from __future__ import annotations


class CppGuardError(Exception):
    """Base class for CppGuard errors."""


class GuardInsertionError(CppGuardError):
    """The guard blocks cannot be placed in this file."""


class MissingOpeningAnchorError(GuardInsertionError):
    """No ``#define`` directive to insert the opening block after."""

    def __init__(self) -> None:
        super().__init__("Couldn't find first #define")


class MissingClosingAnchorError(GuardInsertionError):
    """No ``#endif`` directive to insert the closing block before."""

    def __init__(self) -> None:
        super().__init__("Couldn't find last #endif")


class CoincidentAnchorsError(GuardInsertionError):
    """The first ``#define`` and the last ``#endif`` are the same line.

    Attributes:
        index (int): Zero-based index of the shared anchor line.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"First #define and last #endif are the same line ({index + 1}); "
            "cannot place guards around it"
        )
