# cppguard:header:start
#
#   project      : CppGuard
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The CppGuard Authors
#
# cppguard:header:end

"""Pytest configuration for the CppGuard test suite.

Sets up TRACE logging for the whole run, keeps the developer's environment
from leaking into tests, and provides small typed helpers shared by the
suites (header fixtures, config builders, typed pytest decorators).

Notes:
    Build configs with `cppguard.config.MutableConfig` and ``freeze()`` them.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from cppguard.config import MutableConfig
from cppguard.config import logging as cppguard_logging
from cppguard.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from cppguard.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def clear_cppguard_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the log level is not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``CPPGUARD_LOG_LEVEL``.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything down to TRACE while the suite runs.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    cppguard_logging.setup_logging(level=cppguard_logging.TRACE_LEVEL)


# A header with an include guard and no C++ linkage guards.
PLAIN_HEADER: str = "#ifndef FOO_H\n#define FOO_H\n\nint foo(void);\n\n#endif\n"

# ``PLAIN_HEADER`` after guard insertion.
GUARDED_HEADER: str = (
    "#ifndef FOO_H\n"
    "#define FOO_H\n"
    "\n"
    "#ifdef __cplusplus\n"
    'extern "C" {\n'
    "#endif\n"
    "\n"
    "int foo(void);\n"
    "\n"
    "#ifdef __cplusplus\n"
    "}\n"
    "#endif\n"
    "\n"
    "#endif\n"
)


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` into lines, keeping terminators (like the file reader).

    Unlike `str.splitlines`, only ``\n`` ends a line.
    """
    lines: list[str] = []
    start = 0
    while (nl := text.find("\n", start)) >= 0:
        lines.append(text[start : nl + 1])
        start = nl + 1
    if start < len(text):
        lines.append(text[start:])
    return lines


def write_bytes(path: Path, data: bytes | str) -> Path:
    """Create ``path`` (and its parents) with the given content, byte for byte."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data.encode("utf-8") if isinstance(data, str) else data)
    return path


def make_config(root: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` for ``root`` built from defaults and overrides.

    Args:
        root (Path): The scan root.
        **overrides (Any): `MutableConfig` attributes to set before freezing.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.root = root
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def deny_directory_listing(monkeypatch: pytest.MonkeyPatch, blocked: Path) -> None:
    """Make `os.scandir` fail with `PermissionError` for one directory.

    ``chmod`` cannot take read access away when the suite runs as root, so the
    denial is simulated where `os.walk` lists directories.

    Args:
        monkeypatch (pytest.MonkeyPatch): The test's monkeypatch fixture.
        blocked (Path): Directory whose listing is denied.
    """
    real_scandir = os.scandir
    denied: str = os.fspath(blocked)

    def _scandir(path: Any = ".") -> Any:
        if os.fspath(path) == denied:
            raise PermissionError(13, "Permission denied", denied)
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", _scandir)
