# cppguard:header:start
#
#   project      : CppGuard
#   file         : detector.py
#   file_relpath : src/cppguard/guard/detector.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Rough check for C++ linkage guards in a header.

We look for::

    #ifdef __cplusplus
    extern "C" {
    #endif

and::

    #ifdef __cplusplus
    }
    #endif

as an ordered subsequence of the file's lines, ignoring every other line.
This allows false positives (any ``}`` between the second
``#ifdef __cplusplus`` and a later ``#endif`` completes the pattern), but you
only get them with really strange headers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cppguard.config.logging import get_logger
from cppguard.guard.classifiers import DEFAULT_CLASSIFIERS

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from cppguard.config.logging import CppGuardLogger
    from cppguard.guard.classifiers import LineClassifier

logger: CppGuardLogger = get_logger(__name__)

GUARD_PATTERN: tuple[LineClassifier, ...] = DEFAULT_CLASSIFIERS.guard_pattern


def match_progress(
    lines: Iterable[str],
    pattern: Sequence[LineClassifier] = GUARD_PATTERN,
) -> int:
    """Return how many leading classifiers of ``pattern`` were matched in order.

    Each line is tested against the classifier at the cursor only; a match
    advances the cursor. Scanning stops as soon as the whole pattern matched.

    Args:
        lines (Iterable[str]): The file's lines.
        pattern (Sequence[LineClassifier]): Classifiers to find, in order.

    Returns:
        int: A value in ``0..len(pattern)``; ``len(pattern)`` means found.
    """
    i = 0
    if not pattern:
        return 0
    for lineno, line in enumerate(lines, start=1):
        if pattern[i].matches(line):
            logger.trace("line %d matches %s (%d/%d)", lineno, pattern[i].name, i + 1, len(pattern))
            i += 1
        if i >= len(pattern):
            break
    return i


def has_cpp_guards(
    lines: Iterable[str],
    pattern: Sequence[LineClassifier] = GUARD_PATTERN,
) -> bool:
    """Return True if the header already carries C++ linkage guards.

    Args:
        lines (Iterable[str]): The file's lines (terminators may be included).
        pattern (Sequence[LineClassifier]): Classifiers to find, in order.
            Defaults to the six-line guard pattern.

    Returns:
        bool: True when every classifier matched a distinct line, in order.
    """
    return len(pattern) > 0 and match_progress(lines, pattern) == len(pattern)
