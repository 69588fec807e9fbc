# cppguard:header:start
#
#   project      : CppGuard
#   file         : constants.py
#   file_relpath : src/cppguard/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""CppGuard Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    CPPGUARD_VERSION: str = get_version("cppguard")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    CPPGUARD_VERSION = "0.0.0"

#: Case-sensitive file name suffix selecting C/C++ headers.
HEADER_SUFFIX: str = ".h"

#: Environment variable overriding the log level (name or number).
LOG_LEVEL_ENV_VAR: str = "CPPGUARD_LOG_LEVEL"

#: Config file looked up in the scanned root.
CONFIG_FILE_NAME: str = "cppguard.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "cppguard"

#: Terminator used for every inserted line, whatever the file's own style.
INSERTED_NEWLINE: str = "\n"

#: Lines emitted right after the first ``#define`` directive.
OPENING_GUARD_LINES: tuple[str, ...] = (
    INSERTED_NEWLINE,
    "#ifdef __cplusplus" + INSERTED_NEWLINE,
    'extern "C" {' + INSERTED_NEWLINE,
    "#endif" + INSERTED_NEWLINE,
)

#: Lines emitted right before the last ``#endif`` directive.
CLOSING_GUARD_LINES: tuple[str, ...] = (
    "#ifdef __cplusplus" + INSERTED_NEWLINE,
    "}" + INSERTED_NEWLINE,
    "#endif" + INSERTED_NEWLINE,
    INSERTED_NEWLINE,
)

#: Encoding used to map file bytes to lines and back without loss.
FILE_ENCODING: str = "utf-8"
FILE_ENCODING_ERRORS: str = "surrogateescape"

#: Size of each incremental read when splitting files into lines.
READ_CHUNK_SIZE: int = 64 * 1024
