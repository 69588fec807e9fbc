# cppguard:header:start
#
#   project      : CppGuard
#   file         : __init__.py
#   file_relpath : src/cppguard/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Configuration for CppGuard.

Re-exports the configuration model so callers can write
``from cppguard.config import Config, MutableConfig``.
"""

from __future__ import annotations

from cppguard.config.model import (
    Config,
    MutableConfig,
    discover_config_files,
    resolve_config,
)

__all__ = [
    "Config",
    "MutableConfig",
    "discover_config_files",
    "resolve_config",
]
