# cppguard:header:start
#
#   project      : CppGuard
#   file         : status.py
#   file_relpath : src/cppguard/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Per-file status enum for the CppGuard pipeline.

Every processed header ends in exactly one `FileStatus`. Values are
human-readable strings used in logs and summaries; each member also carries a
colorizer for terminal output (``FileStatus.INSERTED.color("...")``).
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display (e.g. a yachalk style)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the decorated text."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a plain string and that carries a colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color


class FileStatus(ColoredStrEnum):
    """Outcome of processing one header file.

    Members are grouped by what happened to the file on disk:

    * left alone because nothing is needed: ``PRESENT``;
    * changed (or would be, in check mode): ``INSERTED``, ``WOULD_INSERT``;
    * left alone because of an error: everything else.
    """

    PENDING = ("pending", chalk.gray)
    PRESENT = ("guards present", chalk.green)
    WOULD_INSERT = ("guards missing", chalk.red_bright)
    INSERTED = ("guards inserted", chalk.yellow_bright)
    UNREADABLE = ("read error", chalk.red_bright)
    NO_DEFINE = ("no #define anchor", chalk.red)
    NO_ENDIF = ("no #endif anchor", chalk.red)
    COINCIDENT_ANCHORS = ("#define and #endif on the same line", chalk.red)
    WRITE_FAILED = ("write error", chalk.red_bright)

    @property
    def is_error(self) -> bool:
        """Return True if the file could not be processed."""
        return self in _ERROR_STATUSES

    @property
    def is_change(self) -> bool:
        """Return True if guards were (or would be) inserted."""
        return self in (FileStatus.INSERTED, FileStatus.WOULD_INSERT)


_ERROR_STATUSES: frozenset[FileStatus] = frozenset(
    {
        FileStatus.UNREADABLE,
        FileStatus.NO_DEFINE,
        FileStatus.NO_ENDIF,
        FileStatus.COINCIDENT_ANCHORS,
        FileStatus.WRITE_FAILED,
    }
)
