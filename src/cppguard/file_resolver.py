# cppguard:header:start
#
#   project      : CppGuard
#   file         : file_resolver.py
#   file_relpath : src/cppguard/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Enumerate the header files below a scan root.

Directories are walked recursively (symlinked directories are listed but not
followed) in sorted order so runs are deterministic. Only non-directory
entries whose name ends with the case-sensitive suffix ``.h`` are yielded:
``foo.hpp``, ``foo.c`` or ``FOO.H`` are never touched. Gitignore-style
exclude patterns, relative to the root, prune files and whole directories.

Traversal errors (unreadable directory, missing root...) are logged and passed
to an optional callback; they never stop the walk.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from cppguard.config.logging import get_logger
from cppguard.constants import HEADER_SUFFIX

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from cppguard.config import Config
    from cppguard.config.logging import CppGuardLogger

logger: CppGuardLogger = get_logger(__name__)


def is_header_name(name: str) -> bool:
    """Return True if a file name selects a C/C++ header."""
    return name.endswith(HEADER_SUFFIX)


def build_exclude_spec(patterns: tuple[str, ...] | list[str]) -> PathSpec | None:
    """Compile gitignore-style exclude patterns, or return None when there are none."""
    if not patterns:
        return None
    return PathSpec.from_lines("gitwildmatch", list(patterns))


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def walk_headers(
    config: Config,
    *,
    on_error: Callable[[OSError], None] | None = None,
) -> Iterator[Path]:
    """Yield the header files to process for ``config.root``.

    A root that is itself a file is yielded when its name is a header name.

    Args:
        config (Config): Supplies ``root`` and ``exclude_patterns``.
        on_error (Callable[[OSError], None] | None): Called with every traversal
            error after it has been logged.

    Yields:
        Path: Header files, in sorted walk order.
    """
    root: Path = config.root
    spec: PathSpec | None = build_exclude_spec(config.exclude_patterns)

    def _report(err: OSError) -> None:
        logger.error("Error scanning files: %s", err)
        if on_error is not None:
            on_error(err)

    def _excluded(path: Path, *, is_dir: bool = False) -> bool:
        if spec is None:
            return False
        rel: str = _rel_for_match(path, root)
        # Directory patterns like ``build/`` only match paths ending with a slash
        return spec.match_file(rel + "/" if is_dir else rel)

    if not root.is_dir():
        if root.exists() or root.is_symlink():
            if is_header_name(root.name):
                yield root
            else:
                logger.debug("Root %s is not a header, nothing to do", root)
        else:
            _report(FileNotFoundError(2, "No such file or directory", str(root)))
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_report):
        base = Path(dirpath)
        # Prune in place so os.walk skips excluded directories
        dirnames[:] = sorted(d for d in dirnames if not _excluded(base / d, is_dir=True))
        for name in sorted(filenames):
            if not is_header_name(name):
                logger.trace("Skipping non-header %s", base / name)
                continue
            path: Path = base / name
            if _excluded(path):
                logger.debug("Excluded by pattern: %s", path)
                continue
            yield path
