# cppguard:header:start
#
#   project      : CppGuard
#   file         : file.py
#   file_relpath : src/cppguard/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

r"""File utilities: line-preserving reads and writes, relative paths.

Files are handled as bytes and split on ``\n`` only, so a ``\r`` before the
``\n`` stays in the line (CRLF lines end with ``"\r\n"``) and a lone ``\r`` is
plain content. Bytes are decoded as UTF-8 with ``surrogateescape``: any byte
sequence, valid UTF-8 or not, survives a read/write cycle unchanged.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, TYPE_CHECKING

from cppguard.config.logging import get_logger
from cppguard.constants import FILE_ENCODING, FILE_ENCODING_ERRORS, READ_CHUNK_SIZE

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from cppguard.config.logging import CppGuardLogger

logger: CppGuardLogger = get_logger(__name__)


def iter_lines_keepends(stream: IO[bytes], chunk_size: int = READ_CHUNK_SIZE) -> Iterator[bytes]:
    r"""Yield the lines of a binary stream without stripping their terminators.

    The end-of-line marker is one optional ``\r`` followed by one mandatory
    ``\n``. The last line is yielded even if it has no newline; an empty
    stream yields nothing. Only one chunk plus the pending partial line is held
    in memory at a time.

    Args:
        stream (IO[bytes]): Binary stream to read from.
        chunk_size (int): Number of bytes requested per read.

    Yields:
        bytes: One line, terminator included.

    Raises:
        ValueError: If ``chunk_size`` is not positive.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    pending = bytearray()
    while True:
        chunk: bytes = stream.read(chunk_size)
        if not chunk:
            break
        # Bytes already in `pending` hold no newline
        search = len(pending)
        pending += chunk
        start = 0
        while (nl := pending.find(b"\n", search)) >= 0:
            yield bytes(pending[start : nl + 1])
            start = search = nl + 1
        del pending[:start]
    if pending:
        # Final, non-terminated line
        yield bytes(pending)


def read_lines(path: Path, chunk_size: int = READ_CHUNK_SIZE) -> list[str]:
    """Read a whole file into memory and return its lines.

    Line ending characters are not stripped.

    Args:
        path (Path): File to read.
        chunk_size (int): Number of bytes requested per read.

    Returns:
        list[str]: The lines; concatenating them gives back the file content.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with path.open("rb") as fh:
        lines: list[str] = [
            raw.decode(FILE_ENCODING, FILE_ENCODING_ERRORS)
            for raw in iter_lines_keepends(fh, chunk_size)
        ]
    logger.trace("read %d line(s) from %s", len(lines), path)
    return lines


def write_lines(lines: Iterable[str], path: Path) -> int:
    """Write ``lines`` to ``path``, truncating or creating it.

    Line ending characters must be included; nothing is added between lines.

    Args:
        lines (Iterable[str]): Lines to write, terminators included.
        path (Path): Destination file.

    Returns:
        int: Number of bytes written.

    Raises:
        OSError: If the file cannot be created, written or flushed.
    """
    written = 0
    with path.open("wb") as fh:
        for line in lines:
            written += fh.write(line.encode(FILE_ENCODING, FILE_ENCODING_ERRORS))
        fh.flush()
    logger.trace("wrote %d byte(s) to %s", written, path)
    return written


def compute_relpath(file_path: Path, root_path: Path | None) -> Path:
    """Compute the relative path from ``root_path`` to ``file_path``.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path | None): The base directory; the current directory when None.

    Returns:
        Path: The relative path from root_path to file_path.
    """
    resolved_path = file_path.resolve()
    resolved_root = (root_path or Path.cwd()).resolve()

    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a direct subpath
        return Path(os.path.relpath(resolved_path, start=resolved_root))
