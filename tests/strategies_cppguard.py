# cppguard:header:start
#
#   project      : CppGuard
#   file         : strategies_cppguard.py
#   file_relpath : tests/strategies_cppguard.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

# pyright: strict

"""Hypothesis strategies for generating C headers and raw file contents.

Generated headers always start with a two-line include guard and end with a
closing ``#endif``; the body in between is arbitrary single-line text, so it
may well contain directives or braces of its own.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

EXCLUDED_CATEGORIES: tuple[Literal["Cs"], ...] = ("Cs",)

# Lines that look like code, mixed in with random text
C_SNIPPETS: tuple[str, ...] = (
    "int foo(void);",
    "struct s { int x; };",
    "#include <stddef.h>",
    "#define MAX(a, b) ((a) > (b) ? (a) : (b))",
    "#ifdef DEBUG",
    "#endif /* DEBUG */",
    "/* comment */",
    "typedef unsigned int uint;",
    "",
)


@dataclass(frozen=True)
class HeaderSample:
    """A generated header split into its parts.

    Attributes:
        prefix (list[str]): The include-guard lines (``#ifndef``/``#define``).
        body (list[str]): Lines between the include guard and the final ``#endif``.
        suffix (list[str]): The final ``#endif`` line.
        newline (str): Terminator used by every line.
    """

    prefix: list[str]
    body: list[str]
    suffix: list[str]
    newline: str

    @property
    def lines(self) -> list[str]:
        """Return the whole header as lines."""
        return [*self.prefix, *self.body, *self.suffix]


def s_body_line() -> st.SearchStrategy[str]:
    """Return a strategy for one line of header body text (no terminator)."""
    random_text: st.SearchStrategy[str] = st.text(
        alphabet=st.characters(
            exclude_categories=EXCLUDED_CATEGORIES,
            exclude_characters="\n",
        ),
        max_size=40,
    )
    return st.one_of(st.sampled_from(C_SNIPPETS), random_text)


@st.composite
def s_header(draw: Draw) -> HeaderSample:
    """Generate a header with an include guard and no C++ linkage guards."""
    newline: str = draw(st.sampled_from(LINE_ENDINGS))
    name: str = draw(st.from_regex(r"[A-Z][A-Z0-9_]{0,12}_H", fullmatch=True))
    body: list[str] = draw(st.lists(s_body_line(), max_size=20))
    return HeaderSample(
        prefix=[f"#ifndef {name}{newline}", f"#define {name}{newline}"],
        body=[line + newline for line in body],
        suffix=[f"#endif{newline}"],
        newline=newline,
    )


def s_file_bytes() -> st.SearchStrategy[bytes]:
    """Return a strategy for raw file contents rich in line terminators."""
    return st.lists(
        st.one_of(st.binary(max_size=16), st.sampled_from([b"\n", b"\r\n", b"\r"])),
        max_size=30,
    ).map(b"".join)
