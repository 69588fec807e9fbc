# cppguard:header:start
#
#   project      : CppGuard
#   file         : inserter.py
#   file_relpath : src/cppguard/guard/inserter.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Insert C++ linkage guards just inside a header's include guard.

The placement is naive, so check the results: the opening block goes after
the first ``#define`` and the closing block before the last ``#endif``. For
the usual layout::

    #ifndef FOO_H
    #define FOO_H
    ...
    #endif

that is exactly inside the include guard. Existing lines keep their own
terminators; inserted lines always end with ``\\n``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cppguard.config.logging import get_logger
from cppguard.constants import CLOSING_GUARD_LINES, OPENING_GUARD_LINES
from cppguard.guard.classifiers import DEFAULT_CLASSIFIERS
from cppguard.guard.errors import (
    CoincidentAnchorsError,
    MissingClosingAnchorError,
    MissingOpeningAnchorError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cppguard.config.logging import CppGuardLogger
    from cppguard.guard.classifiers import ClassifierTable

logger: CppGuardLogger = get_logger(__name__)


@dataclass(frozen=True)
class Anchors:
    """Positions the guard blocks are anchored to.

    Attributes:
        first_define (int): Index of the first ``#define`` line.
        last_endif (int): Index of the last ``#endif`` line.
    """

    first_define: int
    last_endif: int


def find_anchors(
    lines: Sequence[str],
    classifiers: ClassifierTable = DEFAULT_CLASSIFIERS,
) -> Anchors:
    """Locate the first ``#define`` and the last ``#endif``.

    The two searches are independent: nothing checks that the ``#define``
    comes before the ``#endif``.

    Args:
        lines (Sequence[str]): The file's lines.
        classifiers (ClassifierTable): Classifiers for the two directives.

    Returns:
        Anchors: The anchor indices.

    Raises:
        MissingOpeningAnchorError: No line matches ``#define``.
        MissingClosingAnchorError: No line matches ``#endif``.
    """
    first_define: int = next(
        (i for i, line in enumerate(lines) if classifiers.define.matches(line)), -1
    )
    last_endif: int = next(
        (i for i in range(len(lines) - 1, -1, -1) if classifiers.endif.matches(lines[i])), -1
    )

    if first_define == -1:
        raise MissingOpeningAnchorError()
    if last_endif == -1:
        raise MissingClosingAnchorError()

    logger.debug("anchors: first #define at %d, last #endif at %d", first_define, last_endif)
    return Anchors(first_define=first_define, last_endif=last_endif)


def insert_cpp_guards(
    lines: Sequence[str],
    classifiers: ClassifierTable = DEFAULT_CLASSIFIERS,
) -> list[str]:
    """Return a copy of ``lines`` with C++ linkage guards spliced in.

    Args:
        lines (Sequence[str]): The file's lines, terminators included. Not modified.
        classifiers (ClassifierTable): Classifiers used to find the anchors.

    Returns:
        list[str]: The new lines.

    Raises:
        MissingOpeningAnchorError: No ``#define`` line.
        MissingClosingAnchorError: No ``#endif`` line.
        CoincidentAnchorsError: The same line is both the first ``#define`` and
            the last ``#endif`` (e.g. ``#define X #endif``); its guards would
            have to go both before and after it.
    """
    anchors: Anchors = find_anchors(lines, classifiers)
    if anchors.first_define == anchors.last_endif:
        raise CoincidentAnchorsError(anchors.first_define)

    modified: list[str] = []
    for i, line in enumerate(lines):
        if i == anchors.first_define:
            modified.append(line)
            modified.extend(OPENING_GUARD_LINES)
        elif i == anchors.last_endif:
            modified.extend(CLOSING_GUARD_LINES)
            modified.append(line)
        else:
            modified.append(line)
    return modified
