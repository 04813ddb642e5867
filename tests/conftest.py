# topmark:header:start
#
#   project      : PoshKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PoshKit test suite.

Sets up TRACE logging for test runs, keeps the developer's shell environment
from leaking into tests, and provides fixtures for a fake home directory, a
fake PowerShell installation and the profile locations derived from them.

Notes:
    Tests should respect the immutable/mutable settings split: build settings
    with `poshkit.config.MutableSettings` (or `Settings.thaw()`), then
    `freeze()` them before passing them to the code under test.
"""

from __future__ import annotations

import logging as std_logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from poshkit.config import MutableSettings, logging
from poshkit.platform import MacCapabilities, PosixCapabilities, WindowsCapabilities
from poshkit.profiles.locations import ProfileLocations

if TYPE_CHECKING:
    from pathlib import Path

    from poshkit.config import Settings

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_poshkit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's ``POSHKIT_LOG_LEVEL`` does not leak into tests."""
    monkeypatch.delenv("POSHKIT_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def restore_root_log_level() -> Iterator[None]:
    """Undo root-logger level changes made by CLI invocations (`setup_logging`)."""
    root = std_logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during the test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_settings(**overrides: Any) -> Settings:
    """Return frozen `Settings` built from the defaults and ``overrides``."""
    draft = MutableSettings()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def write_bytes(path: Path, data: bytes) -> Path:
    """Write ``data`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def write_text(path: Path, text: str) -> Path:
    """Write UTF-8 ``text`` to ``path`` without newline translation."""
    return write_bytes(path, text.encode("utf-8"))


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Return an empty fake home directory."""
    d: Path = tmp_path / "home"
    d.mkdir()
    return d


@pytest.fixture
def pshome(tmp_path: Path) -> Path:
    """Return an empty fake PowerShell installation directory."""
    d: Path = tmp_path / "pshome"
    d.mkdir()
    return d


@pytest.fixture
def ps_env(pshome: Path) -> dict[str, str]:
    """Return a minimal environment pointing ``PSHOME`` at the fake installation."""
    return {"PSHOME": str(pshome), "PSModulePath": ""}


@pytest.fixture
def caps() -> PosixCapabilities:
    """Return a case-sensitive provider for a non-elevated process."""
    return PosixCapabilities(admin=False)


@pytest.fixture
def admin_caps() -> PosixCapabilities:
    """Return a case-sensitive provider for an elevated process."""
    return PosixCapabilities(admin=True)


@pytest.fixture
def mac_caps() -> MacCapabilities:
    """Return a case-insensitive POSIX provider."""
    return MacCapabilities(admin=False)


@pytest.fixture
def windows_caps() -> WindowsCapabilities:
    """Return the Windows provider (pure path semantics only)."""
    return WindowsCapabilities(admin=False)


@pytest.fixture
def locations(caps: PosixCapabilities, home: Path, ps_env: dict[str, str]) -> ProfileLocations:
    """Return the four profile locations inside the fake home and installation."""
    return ProfileLocations.from_environment(caps, env=ps_env, home=home)
