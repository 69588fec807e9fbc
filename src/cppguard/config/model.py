# cppguard:header:start
#
#   project      : CppGuard
#   file         : model.py
#   file_relpath : src/cppguard/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Configuration model for CppGuard.

Two classes split the configuration lifecycle:

* `MutableConfig` is a builder. Layers (defaults, ``pyproject.toml``,
  ``cppguard.toml``, an explicit ``--config`` file, CLI flags) are each turned
  into a `MutableConfig` and combined with `MutableConfig.merge_with` (last
  wins).
* `Config` is the frozen snapshot consumed by the walker and the pipeline.

Unset builder fields are ``None`` so that a layer only overrides what it sets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from cppguard.config.io import (
    extract_pyproject_table,
    get_bool_value,
    get_string_list_value,
    load_toml_dict,
)
from cppguard.config.logging import get_logger
from cppguard.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from cppguard.config.io import TomlTable
    from cppguard.config.logging import CppGuardLogger

logger: CppGuardLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        root (Path): Directory (or single header file) to scan.
        check (bool): Report files that lack guards without writing them.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns, relative to
            ``root``, removing files and directories from the walk.
        relative_to (Path | None): Base directory for paths shown in reports.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    root: Path
    check: bool = False
    exclude_patterns: tuple[str, ...] = ()
    relative_to: Path | None = None
    config_files: tuple[Path, ...] = ()


@dataclass
class MutableConfig:
    """Mutable configuration draft used while merging config layers."""

    root: Path | None = None
    check: bool | None = None
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    relative_to: Path | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the built-in defaults (scan the current directory, apply changes)."""
        return cls(root=Path("."), check=False)

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, source: Path | None = None) -> MutableConfig:
        """Build a draft from a ``cppguard`` TOML table.

        Recognized keys are ``exclude`` (list of patterns) and ``check`` (bool).
        Unknown keys are reported and ignored.

        Args:
            table (TomlTable): The ``cppguard`` table (already extracted from
                ``pyproject.toml`` when applicable).
            source (Path | None): File the table was read from, recorded in
                ``config_files``.

        Returns:
            MutableConfig: The draft holding only the keys present in ``table``.
        """
        draft = cls()
        for key in sorted(set(table) - {"exclude", "check"}):
            logger.warning("Unknown config key %r in %s", key, source or "<config>")
        draft.exclude_patterns = get_string_list_value(table, "exclude") or []
        draft.check = get_bool_value(table, "check")
        if source is not None:
            draft.config_files.append(source)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``cppguard.toml`` or ``pyproject.toml``.

        Args:
            path (Path): The file to read. A file named ``pyproject.toml`` is
                read from its ``[tool.cppguard]`` table.

        Returns:
            MutableConfig | None: The draft, or ``None`` when the file holds no
            CppGuard settings or cannot be read.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            data = extract_pyproject_table(data)
        if not data:
            logger.debug("No CppGuard settings in %s", path)
            return None
        logger.debug("Loaded CppGuard settings from %s: %s", path, data)
        return cls.from_toml_dict(data, source=path)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The layer taking precedence.

        Returns:
            MutableConfig: The merged draft.
        """
        return MutableConfig(
            root=other.root if other.root is not None else self.root,
            check=other.check if other.check is not None else self.check,
            exclude_patterns=self.exclude_patterns + other.exclude_patterns,
            relative_to=other.relative_to if other.relative_to is not None else self.relative_to,
            config_files=self.config_files + other.config_files,
        )

    def freeze(self) -> Config:
        """Freeze this draft into an immutable `Config`."""
        return Config(
            root=self.root if self.root is not None else Path("."),
            check=bool(self.check),
            # Preserve first-seen order while dropping duplicates
            exclude_patterns=tuple(dict.fromkeys(self.exclude_patterns)),
            relative_to=self.relative_to,
            config_files=tuple(self.config_files),
        )


def discover_config_files(root: Path) -> list[Path]:
    """Return the config files found for a scan root, lowest precedence first.

    Looks for ``pyproject.toml`` then ``cppguard.toml`` in ``root`` (or in its
    parent directory when ``root`` is a file).

    Args:
        root (Path): The scan root.

    Returns:
        list[Path]: Existing config files in merge order.
    """
    base: Path = root if root.is_dir() else root.parent
    candidates: list[Path] = [base / PYPROJECT_FILE_NAME, base / CONFIG_FILE_NAME]
    return [p for p in candidates if p.is_file()]


def resolve_config(
    root: Path,
    *,
    config_paths: tuple[Path, ...] = (),
    no_config: bool = False,
    overrides: MutableConfig | None = None,
) -> Config:
    """Merge all configuration layers into a frozen `Config`.

    Precedence, lowest first: built-in defaults, discovered ``pyproject.toml``
    and ``cppguard.toml`` (skipped with ``no_config``), explicit
    ``config_paths``, then ``overrides`` (typically CLI flags).

    Args:
        root (Path): The scan root.
        config_paths (tuple[Path, ...]): Explicit config files, in order.
        no_config (bool): Skip discovery of config files in ``root``.
        overrides (MutableConfig | None): Highest precedence layer.

    Returns:
        Config: The effective configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.root = root

    layers: list[Path] = [] if no_config else discover_config_files(root)
    layers.extend(config_paths)
    for path in layers:
        layer: MutableConfig | None = MutableConfig.from_toml_file(path)
        if layer is not None:
            draft = draft.merge_with(layer)

    if overrides is not None:
        draft = draft.merge_with(overrides)

    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
