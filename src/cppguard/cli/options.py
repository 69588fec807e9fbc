# cppguard:header:start
#
#   project      : CppGuard
#   file         : options.py
#   file_relpath : src/cppguard/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Common CLI option utilities.

Centralizes the verbosity options and their mapping to logging levels so the
command itself stays thin.
"""

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from cppguard.cli.errors import CppGuardUsageError
from cppguard.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The logging level as an integer.

    Raises:
        CppGuardUsageError: If both verbose and quiet flags are used.

    Behavior:
        Two or more -v flags set TRACE level.
        One -v flag sets DEBUG level.
        One -q flag sets WARNING level.
        Two or more -q flags set ERROR level.
        Default level is INFO, so every modified file is reported.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CppGuardUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 2:  # -vv
        return TRACE_LEVEL
    if verbose_count == 1:  # -v
        return logging.DEBUG
    if quiet_count >= 2:  # -qq
        return logging.ERROR
    if quiet_count == 1:  # -q
        return logging.WARNING
    return logging.INFO


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify twice for TRACE output.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Reduce log output. Specify twice to only show errors.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False),
        help="Read settings from this TOML file (repeatable; later files win).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Ignore pyproject.toml and cppguard.toml in the scanned root.",
    )(f)
    return f
