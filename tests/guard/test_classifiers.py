# cppguard:header:start
#
#   project      : CppGuard
#   file         : test_classifiers.py
#   file_relpath : tests/guard/test_classifiers.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Tests for the per-line classifiers.

Lines are stripped before matching and patterns are searched, so trailing
comments and CRLF terminators never prevent a match.
"""

from __future__ import annotations

from dataclasses import dataclass

from cppguard.guard.classifiers import (
    DEFAULT_CLASSIFIERS,
    ClassifierTable,
    LineClassifier,
    RegexClassifier,
)
from tests.conftest import parametrize


@parametrize(
    "line, expected",
    [
        ("#ifdef __cplusplus\n", True),
        ("  #ifdef   __cplusplus  \r\n", True),
        ("#ifdef __cplusplus // C++ only\n", True),
        ("#ifndef __cplusplus\n", False),
        ("#if defined(__cplusplus)\n", False),
        ("# ifdef __cplusplus\n", False),
    ],
)
def test_ifdef_cplusplus(line: str, expected: bool) -> None:
    """``#ifdef __cplusplus`` is recognized with any surrounding whitespace."""
    assert DEFAULT_CLASSIFIERS.ifdef_cplusplus.matches(line) is expected


@parametrize(
    "line, expected",
    [
        ('extern "C" {\n', True),
        ('extern "C"\n', True),
        ('extern  "C"  {  \r\n', True),
        ('extern "C++" {\n', False),
        ("extern int errno;\n", False),
    ],
)
def test_extern_c(line: str, expected: bool) -> None:
    """``extern "C"`` matches with or without the opening brace."""
    assert DEFAULT_CLASSIFIERS.extern_c.matches(line) is expected


@parametrize(
    "line, expected",
    [
        ("#endif\n", True),
        ("#endif /* FOO_H */\n", True),
        ("  #endif\r\n", True),
        ("#endif", True),
        ("# endif\n", False),
        ("#else\n", False),
    ],
)
def test_endif(line: str, expected: bool) -> None:
    """``#endif`` matches with a trailing comment and any terminator."""
    assert DEFAULT_CLASSIFIERS.endif.matches(line) is expected


@parametrize(
    "line, expected",
    [
        ("}\n", True),
        ("};\n", True),
        ("  } /* extern C */\r\n", True),
        ("int x;\n", False),
        ("\n", False),
    ],
)
def test_close_block(line: str, expected: bool) -> None:
    """Any line holding a closing brace counts as a block close."""
    assert DEFAULT_CLASSIFIERS.close_block.matches(line) is expected


@parametrize(
    "line, expected",
    [
        ("#define FOO_H\n", True),
        ("  #define FOO_H 1\r\n", True),
        ("#define\n", False),
        ("#  define FOO_H\n", False),
        ("#undef FOO_H\n", False),
    ],
)
def test_define(line: str, expected: bool) -> None:
    """``#define`` must be followed by whitespace and something else."""
    assert DEFAULT_CLASSIFIERS.define.matches(line) is expected


def test_guard_pattern_order() -> None:
    """The guard pattern lists the opening then the closing block, in file order."""
    table = DEFAULT_CLASSIFIERS
    assert [c.name for c in table.guard_pattern] == [
        "ifdef_cplusplus",
        "extern_c",
        "endif",
        "ifdef_cplusplus",
        "close_block",
        "endif",
    ]


def test_regex_classifier_repr() -> None:
    """The repr shows the name and the regex source."""
    c = RegexClassifier.compile("define", r"#define\s+.*")
    assert repr(c) == "RegexClassifier('define', '#define\\\\s+.*')"


@dataclass(frozen=True)
class _PrefixClassifier:
    name: str
    prefix: str

    def matches(self, line: str) -> bool:
        return line.startswith(self.prefix)


def test_custom_classifier_in_table() -> None:
    """Any object with ``name`` and ``matches`` can replace a regex classifier."""
    strict_define: LineClassifier = _PrefixClassifier("define", "#define FOO_H")
    table = ClassifierTable(
        ifdef_cplusplus=DEFAULT_CLASSIFIERS.ifdef_cplusplus,
        extern_c=DEFAULT_CLASSIFIERS.extern_c,
        endif=DEFAULT_CLASSIFIERS.endif,
        close_block=DEFAULT_CLASSIFIERS.close_block,
        define=strict_define,
    )
    assert table.define.matches("#define FOO_H\n")
    assert not table.define.matches("#define BAR 1\n")
    assert table.guard_pattern[0] is DEFAULT_CLASSIFIERS.ifdef_cplusplus
