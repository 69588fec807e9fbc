# cppguard:header:start
#
#   project      : CppGuard
#   file         : __init__.py
#   file_relpath : src/cppguard/guard/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Detection and insertion of C++ linkage guards.

This package is I/O free: it works on lists of lines (terminators included)
and never touches the filesystem.
"""

from __future__ import annotations

from cppguard.guard.classifiers import (
    DEFAULT_CLASSIFIERS,
    ClassifierTable,
    LineClassifier,
    RegexClassifier,
)
from cppguard.guard.detector import GUARD_PATTERN, has_cpp_guards
from cppguard.guard.errors import (
    CoincidentAnchorsError,
    CppGuardError,
    GuardInsertionError,
    MissingClosingAnchorError,
    MissingOpeningAnchorError,
)
from cppguard.guard.inserter import Anchors, find_anchors, insert_cpp_guards

__all__ = [
    "DEFAULT_CLASSIFIERS",
    "GUARD_PATTERN",
    "Anchors",
    "ClassifierTable",
    "CoincidentAnchorsError",
    "CppGuardError",
    "GuardInsertionError",
    "LineClassifier",
    "MissingClosingAnchorError",
    "MissingOpeningAnchorError",
    "RegexClassifier",
    "find_anchors",
    "has_cpp_guards",
    "insert_cpp_guards",
]
