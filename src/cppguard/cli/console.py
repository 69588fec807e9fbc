# cppguard:header:start
#
#   project      : CppGuard
#   file         : console.py
#   file_relpath : src/cppguard/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Stdout console for the run report.

The report (per-file listing in check mode, summary counts) is program output
and goes through `ClickConsole` to stdout. Diagnostics go through `logging` to
stderr, so ``-q`` quiets the log while the report stays, and ``--no-summary``
does the opposite.

Colors come from two places: `yachalk` colorizers carried by `FileStatus`
members and `click.style` for headings. Click strips ANSI codes from both
when the stream is not a terminal or when color is disabled.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

if TYPE_CHECKING:
    from collections.abc import Callable


class ClickConsole:
    """Write report lines to a text stream.

    Attributes:
        enable_color (bool | None): ``True`` forces ANSI colors, ``False``
            strips them, ``None`` lets Click decide from the stream (tty or not).
        out (TextIO): Destination stream, ``sys.stdout`` by default.
    """

    enable_color: bool | None
    out: TextIO

    def __init__(self, *, enable_color: bool | None = None, out: TextIO | None = None) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout

    def print(self, text: str = "") -> None:
        """Write one line of report output."""
        click.echo(text, file=self.out, color=self.enable_color)

    def heading(self, text: str) -> None:
        """Write a bold, underlined section title."""
        if self.enable_color is not False:
            text = click.style(text, bold=True, underline=True)
        self.print(text)

    def colored(self, text: str, colorizer: Callable[[str], str]) -> str:
        """Return ``text`` decorated by ``colorizer`` unless color is disabled."""
        return text if self.enable_color is False else colorizer(text)
