# cppguard:header:start
#
#   project      : CppGuard
#   file         : __main__.py
#   file_relpath : src/cppguard/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Module entry point for running CppGuard via ``python -m cppguard``.

Delegates to :func:`cppguard.cli.main.cli`, the same command installed as the
``cppguard`` console script.

Examples:
    Add missing guards to every header below ``include/``::

        python -m cppguard include
"""

from __future__ import annotations

from cppguard.cli.main import cli

if __name__ == "__main__":
    cli()
