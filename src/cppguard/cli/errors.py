# cppguard:header:start
#
#   project      : CppGuard
#   file         : errors.py
#   file_relpath : src/cppguard/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Exceptions for the CppGuard CLI.

Raise these from commands to exit with a standardized message and exit code.
Per-file problems are never raised; they are logged and summarized.
"""

from __future__ import annotations

import click

from cppguard.cli.exit_codes import ExitCode


class CppGuardUsageError(click.UsageError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR
