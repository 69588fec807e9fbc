# cppguard:header:start
#
#   project      : CppGuard
#   file         : io.py
#   file_relpath : src/cppguard/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""TOML I/O helpers for CppGuard configuration.

Reads ``cppguard.toml`` files and the ``[tool.cppguard]`` table of
``pyproject.toml``. Parsing is done with `tomlkit` and returned as plain
``dict`` structures; failures are logged and yield an empty table so a broken
config file never aborts a scan.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cppguard.config.logging import get_logger
from cppguard.constants import PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from cppguard.config.logging import CppGuardLogger

logger: CppGuardLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Return True if ``obj`` is a TOML table with string keys."""
    return isinstance(obj, dict) and all(isinstance(k, str) for k in cast("dict[Any, Any]", obj))


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content, or an empty dict on failure.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if is_toml_table(data_any) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_pyproject_table(data: TomlTable) -> TomlTable:
    """Return the ``[tool.cppguard]`` table of a parsed ``pyproject.toml``.

    Args:
        data (TomlTable): The whole ``pyproject.toml`` document.

    Returns:
        TomlTable: The nested table, or an empty dict when absent or not a table.
    """
    tool: object = data.get("tool")
    if not is_toml_table(tool):
        return {}
    table: object = tool.get(PYPROJECT_TOOL_TABLE)
    return table if is_toml_table(table) else {}


def get_string_list_value(table: TomlTable, key: str) -> list[str] | None:
    """Return ``table[key]`` as a list of strings.

    A single string is accepted and wrapped in a list. Non-string entries are
    dropped with a warning.

    Args:
        table (TomlTable): The table to read from.
        key (str): The key to look up.

    Returns:
        list[str] | None: The values, or ``None`` when the key is missing or has
        an unsupported type.
    """
    if key not in table:
        return None
    raw: object = table[key]
    if isinstance(raw, str):
        return [raw]
    if not isinstance(raw, list):
        logger.warning("Ignoring config key %r: expected a list of strings, got %r", key, raw)
        return None
    out: list[str] = []
    for item in cast("list[object]", raw):
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string entry %r in config key %r", item, key)
    return out


def get_bool_value(table: TomlTable, key: str) -> bool | None:
    """Return ``table[key]`` if it is a boolean, else ``None`` (with a warning if set)."""
    if key not in table:
        return None
    raw: object = table[key]
    if isinstance(raw, bool):
        return raw
    logger.warning("Ignoring config key %r: expected a boolean, got %r", key, raw)
    return None
