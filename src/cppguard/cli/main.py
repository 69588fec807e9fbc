# cppguard:header:start
#
#   project      : CppGuard
#   file         : main.py
#   file_relpath : src/cppguard/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Click entry point for CppGuard.

``cppguard ROOT`` walks ``ROOT`` and adds C++ linkage guards to every ``.h``
file that lacks them. Errors on individual files or directories are logged to
stderr and never abort the scan; the command exits with ``SUCCESS`` unless
``--check`` finds headers to fix.

Examples:
  Fix every header below ``include/``:

    $ cppguard include

  Only report headers missing their guards (exit code 2 if any):

    $ cppguard --check include

  Skip generated and third-party code:

    $ cppguard --exclude 'build/' --exclude 'third_party/' .
"""

from __future__ import annotations

from pathlib import Path

import click

from cppguard.cli.console import ClickConsole
from cppguard.cli.exit_codes import ExitCode
from cppguard.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from cppguard.cli.utils import render_per_file, render_summary_counts
from cppguard.config import Config, MutableConfig, resolve_config
from cppguard.config.logging import get_logger, resolve_env_log_level, setup_logging
from cppguard.constants import CPPGUARD_VERSION
from cppguard.pipeline.outcomes import RunResult
from cppguard.pipeline.runner import process_tree
from cppguard.pipeline.status import FileStatus

logger = get_logger(__name__)


@click.command(
    name="cppguard",
    context_settings=CONTEXT_SETTINGS,
    help="Add C++ linkage guards (extern \"C\") to C header files under ROOT.",
)
@click.argument("root", type=click.Path(path_type=Path))
@common_verbose_options
@common_config_options
@click.option(
    "--check/--no-check",
    "check",
    default=None,
    help="Only report headers missing guards; do not modify files.",
)
@click.option(
    "--exclude",
    "-e",
    "exclude_patterns",
    multiple=True,
    help="Skip files and directories matching this gitignore-style pattern (repeatable).",
)
@click.option(
    "--relative-to",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Reporting: show paths relative to this directory.",
)
@click.option(
    "--summary/--no-summary",
    "summary",
    default=True,
    help="Print per-outcome counts when done.",
)
@click.option(
    "--color/--no-color",
    "color",
    default=None,
    help="Force or disable colored output (default: auto).",
)
@click.version_option(CPPGUARD_VERSION, "--version", prog_name="cppguard")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    root: Path,
    verbose: int,
    quiet: int,
    config_paths: tuple[str, ...],
    no_config: bool,
    check: bool | None,
    exclude_patterns: tuple[str, ...],
    relative_to: Path | None,
    summary: bool,
    color: bool | None,
) -> None:
    """Scan ROOT and add missing C++ linkage guards to its headers."""
    level: int = resolve_verbosity(verbose, quiet)
    setup_logging(level=resolve_env_log_level() or level)

    console = ClickConsole(enable_color=color)
    ctx.color = color

    overrides = MutableConfig(
        check=check,
        exclude_patterns=list(exclude_patterns),
        relative_to=relative_to,
    )
    config: Config = resolve_config(
        root,
        config_paths=tuple(Path(p) for p in config_paths),
        no_config=no_config,
        overrides=overrides,
    )

    result: RunResult = process_tree(config)
    if not config.check:
        logger.info("Modified %d of %d header file(s)", result.modified, len(result.files))

    if config.check:
        render_per_file(
            console,
            result,
            relative_to=config.relative_to,
            statuses=(FileStatus.WOULD_INSERT,),
        )
    if summary:
        render_summary_counts(console, result)

    if config.check and result.would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)
    ctx.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
