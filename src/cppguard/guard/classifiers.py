# cppguard:header:start
#
#   project      : CppGuard
#   file         : classifiers.py
#   file_relpath : src/cppguard/guard/classifiers.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Line classifiers used to recognize linkage guards and anchor directives.

A classifier answers one question about a single line: does it have a given
*shape* (``#ifdef __cplusplus``, ``extern "C"``, ``#endif``...)? Lines are
stripped of surrounding whitespace before being tested and classifiers use
regex *search* semantics, so trailing tokens (``extern "C" {``,
``#endif /* FOO_H */``) are accepted and the shape may even appear after
other text on the line.

That looseness is deliberate: these are *very* simple regexes, not a
preprocessor. A stricter rule can be plugged in by implementing the
`LineClassifier` protocol and building another `ClassifierTable`; the detector
and inserter only ever talk to the table.

Example:
    ```python
    from cppguard.guard.classifiers import DEFAULT_CLASSIFIERS

    DEFAULT_CLASSIFIERS.endif.matches("  #endif /* FOO_H */\\r\\n")  # True
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol


class LineClassifier(Protocol):
    """Predicate on a single line of source text."""

    name: str

    def matches(self, line: str) -> bool:
        """Return True if ``line`` has the shape this classifier recognizes.

        Args:
            line (str): A raw line, terminator included.

        Returns:
            bool: Whether the line matches.
        """
        ...


@dataclass(frozen=True)
class RegexClassifier:
    """Classifier backed by a compiled regular expression.

    The line is stripped before matching and the pattern is *searched*, not
    anchored.

    Attributes:
        name (str): Short identifier used in logs and reprs.
        pattern (re.Pattern[str]): The compiled pattern.
    """

    name: str
    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, name: str, regex: str) -> RegexClassifier:
        """Build a classifier from a regex source string."""
        return cls(name=name, pattern=re.compile(regex))

    def matches(self, line: str) -> bool:
        """Return True if the stripped ``line`` contains a match."""
        return self.pattern.search(line.strip()) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.pattern.pattern!r})"


@dataclass(frozen=True)
class ClassifierTable:
    """Immutable set of classifiers shared by the detector and the inserter.

    Attributes:
        ifdef_cplusplus (LineClassifier): ``#ifdef __cplusplus``.
        extern_c (LineClassifier): ``extern "C"`` (with or without ``{``).
        endif (LineClassifier): ``#endif``.
        close_block (LineClassifier): Any line holding a ``}``.
        define (LineClassifier): ``#define`` followed by something.
    """

    ifdef_cplusplus: LineClassifier
    extern_c: LineClassifier
    endif: LineClassifier
    close_block: LineClassifier
    define: LineClassifier

    @property
    def guard_pattern(self) -> tuple[LineClassifier, ...]:
        """Return the six classifiers making up the guard, in file order.

        The first three describe the opening guard::

            #ifdef __cplusplus
            extern "C" {
            #endif

        and the last three the closing guard::

            #ifdef __cplusplus
            }
            #endif
        """
        return (
            self.ifdef_cplusplus,
            self.extern_c,
            self.endif,
            self.ifdef_cplusplus,
            self.close_block,
            self.endif,
        )


DEFAULT_CLASSIFIERS: ClassifierTable = ClassifierTable(
    ifdef_cplusplus=RegexClassifier.compile("ifdef_cplusplus", r"#ifdef\s+__cplusplus(\s+.*)?"),
    extern_c=RegexClassifier.compile("extern_c", r'extern\s+"C"(\s+.*)?'),
    endif=RegexClassifier.compile("endif", r"#endif(\s+.*)?"),
    close_block=RegexClassifier.compile("close_block", r"}.*"),
    define=RegexClassifier.compile("define", r"#define\s+.*"),
)
