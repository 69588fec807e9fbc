# cppguard:header:start
#
#   project      : CppGuard
#   file         : exit_codes.py
#   file_relpath : src/cppguard/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Exit codes for the CppGuard CLI.

Per-file and traversal errors are logged, not turned into exit codes: a normal
run always exits with ``SUCCESS``. ``WOULD_CHANGE`` is only used by
``--check``; Click's own usage errors (missing argument, bad option value)
also exit with 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CppGuard CLI.

    Attributes:
        SUCCESS: The scan completed (errors, if any, were logged).
        WOULD_CHANGE: Check mode found headers missing their guards.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
    """

    SUCCESS = 0
    WOULD_CHANGE = 2
    USAGE_ERROR = 64  # EX_USAGE
