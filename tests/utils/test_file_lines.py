# cppguard:header:start
#
#   project      : CppGuard
#   file         : test_file_lines.py
#   file_relpath : tests/utils/test_file_lines.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Tests for the line-preserving file reader and writer."""

from __future__ import annotations

import io
import time
from typing import TYPE_CHECKING

import pytest

from cppguard.utils.file import compute_relpath, iter_lines_keepends, read_lines, write_lines
from tests.conftest import parametrize, write_bytes

if TYPE_CHECKING:
    from pathlib import Path


@parametrize("chunk_size", [1, 2, 3, 7, 64 * 1024])
@parametrize(
    "data, expected",
    [
        (b"", []),
        (b"\n", [b"\n"]),
        (b"a\nb\n", [b"a\n", b"b\n"]),
        (b"a\nb", [b"a\n", b"b"]),
        (b"a\r\nb\r\n", [b"a\r\n", b"b\r\n"]),
        (b"a\rb\n", [b"a\rb\n"]),
        (b"a\r", [b"a\r"]),
        (b"\n\n\r\n", [b"\n", b"\n", b"\r\n"]),
    ],
)
def test_iter_lines_keepends(chunk_size: int, data: bytes, expected: list[bytes]) -> None:
    """Only LF ends a line; CR stays with its line whatever the chunking."""
    assert list(iter_lines_keepends(io.BytesIO(data), chunk_size)) == expected


def _best_read_time(n: int) -> float:
    data = b"x" * n
    best = float("inf")
    for _ in range(3):
        t0 = time.perf_counter()
        lines = list(iter_lines_keepends(io.BytesIO(data), 64 * 1024))
        best = min(best, time.perf_counter() - t0)
        assert lines == [data]
    return best


def test_iter_lines_long_unterminated_line_scales_linearly() -> None:
    """A multi-megabyte line without newline is read in time linear in its size."""
    t_small = _best_read_time(8 * 1024 * 1024)
    t_large = _best_read_time(32 * 1024 * 1024)
    # 4x the input; quadratic rescanning would take about 16x as long
    assert t_large / max(t_small, 1e-3) < 8


def test_iter_lines_rejects_bad_chunk_size() -> None:
    with pytest.raises(ValueError):
        list(iter_lines_keepends(io.BytesIO(b"x\n"), 0))


def test_read_lines_empty_file(tmp_path: Path) -> None:
    f = write_bytes(tmp_path / "empty.h", b"")
    assert read_lines(f) == []


def test_read_lines_keeps_terminators(tmp_path: Path) -> None:
    f = write_bytes(tmp_path / "mixed.h", b"#define A\r\n\n#endif")
    assert read_lines(f) == ["#define A\r\n", "\n", "#endif"]


def test_read_lines_long_line_across_chunks(tmp_path: Path) -> None:
    long_line = b"x" * 10_000 + b"\n"
    f = write_bytes(tmp_path / "long.h", long_line * 3)
    lines = read_lines(f, chunk_size=4096)
    assert len(lines) == 3
    assert all(len(line) == 10_001 for line in lines)


def test_read_lines_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_lines(tmp_path / "missing.h")


@parametrize(
    "data",
    [
        b"#define A\n",
        b"caf\xc3\xa9\r\n#endif",
        b"\xff\xfe not utf-8 \x80\n",
        b"\xef\xbb\xbf#define BOM\n",
    ],
)
def test_read_write_round_trip_is_byte_exact(tmp_path: Path, data: bytes) -> None:
    """Any byte content survives read then write, valid UTF-8 or not."""
    src = write_bytes(tmp_path / "in.h", data)
    dst = tmp_path / "out.h"
    written = write_lines(read_lines(src), dst)
    assert dst.read_bytes() == data
    assert written == len(data)


def test_write_lines_truncates(tmp_path: Path) -> None:
    f = write_bytes(tmp_path / "f.h", b"a much longer original content\n")
    assert write_lines(["x\n"], f) == 2
    assert f.read_bytes() == b"x\n"


def test_write_lines_adds_nothing_between_lines(tmp_path: Path) -> None:
    f = tmp_path / "f.h"
    write_lines(["a", "b\r\n", "c"], f)
    assert f.read_bytes() == b"ab\r\nc"


def test_write_lines_into_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        write_lines(["x\n"], tmp_path / "nope" / "f.h")


def test_compute_relpath(tmp_path: Path) -> None:
    f = write_bytes(tmp_path / "a" / "b.h", b"")
    assert compute_relpath(f, tmp_path).as_posix() == "a/b.h"
    assert compute_relpath(f, tmp_path / "c").as_posix() == "../a/b.h"
