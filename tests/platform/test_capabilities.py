# topmark:header:start
#
#   project      : PoshKit
#   file         : test_capabilities.py
#   file_relpath : tests/platform/test_capabilities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for the OS capability providers.

Path comparison operates on pure paths, so the Windows and macOS semantics are
exercised on any host.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from poshkit.platform import (
    MacCapabilities,
    PosixCapabilities,
    WindowsCapabilities,
    detect_capabilities,
)
from tests.conftest import parametrize


@parametrize(
    "system, expected",
    [
        ("Windows", WindowsCapabilities),
        ("Darwin", MacCapabilities),
        ("Linux", PosixCapabilities),
        ("FreeBSD", PosixCapabilities),
    ],
)
def test_detect_capabilities_maps_system_names(system: str, expected: type[object]) -> None:
    """Each ``platform.system()`` value selects its provider; unknown ones fall back to POSIX."""
    assert type(detect_capabilities(system)) is expected


def test_admin_override_is_honored() -> None:
    """An explicit admin flag replaces the OS query."""
    assert PosixCapabilities(admin=True).is_admin() is True
    assert WindowsCapabilities(admin=False).is_admin() is False


def test_posix_admin_follows_effective_uid(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an override, root is the administrator."""
    monkeypatch.setattr("os.geteuid", lambda: 0, raising=False)
    assert PosixCapabilities().is_admin() is True
    monkeypatch.setattr("os.geteuid", lambda: 1000, raising=False)
    assert PosixCapabilities().is_admin() is False


def test_windows_admin_without_windll_is_false(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hosts without ``ctypes.windll`` are never elevated."""
    monkeypatch.delattr("ctypes.windll", raising=False)
    assert WindowsCapabilities().is_admin() is False


def test_posix_comparison_is_case_sensitive(caps: PosixCapabilities) -> None:
    """``/Home/User`` and ``/home/user`` are different paths on Linux."""
    assert not caps.paths_equal("/Home/User", "/home/user")
    assert caps.paths_equal("/home/user/", "/home/user")


def test_mac_comparison_is_case_insensitive(mac_caps: MacCapabilities) -> None:
    """macOS compares case-insensitively but keeps POSIX separators."""
    assert mac_caps.paths_equal("/Users/Alice/Documents", "/users/alice/documents")
    assert mac_caps.module_path_separator == ":"


def test_windows_comparison_ignores_case_and_separator_style(
    windows_caps: WindowsCapabilities,
) -> None:
    """Windows paths compare case-insensitively and accept both separators."""
    assert windows_caps.paths_equal(r"C:\Users\Alice", "c:/users/alice/")
    assert windows_caps.module_path_separator == ";"


def test_is_within_matches_whole_components(caps: PosixCapabilities) -> None:
    """A prefix only matches on component boundaries."""
    assert caps.is_within("/home/alice/src", "/home/alice")
    assert caps.is_within("/home/alice", "/home/alice")
    assert not caps.is_within("/home/alice", "/home/al")
    assert not caps.is_within("/home", "/home/alice")


def test_relative_parts_keep_original_spelling(windows_caps: WindowsCapabilities) -> None:
    """The trailing components keep their case even when matching ignores it."""
    parts = windows_caps.relative_parts(r"C:\USERS\alice\Src\App", r"c:\users\Alice")
    assert parts == ("Src", "App")
    assert windows_caps.relative_parts(r"D:\data", r"C:\data") is None


def test_user_profile_dir_posix_honors_xdg(caps: PosixCapabilities, tmp_path: Path) -> None:
    """``XDG_CONFIG_HOME`` relocates the user profile directory."""
    home = tmp_path / "home"
    assert caps.user_profile_dir(home, {}) == home / ".config" / "powershell"
    xdg = tmp_path / "xdg"
    assert caps.user_profile_dir(home, {"XDG_CONFIG_HOME": str(xdg)}) == xdg / "powershell"


def test_user_profile_dir_windows(windows_caps: WindowsCapabilities, tmp_path: Path) -> None:
    """Windows keeps user profiles under ``Documents\\PowerShell``."""
    assert windows_caps.user_profile_dir(tmp_path, {}) == tmp_path / "Documents" / "PowerShell"


def test_windows_default_pshome_requires_existing_directory(
    windows_caps: WindowsCapabilities, tmp_path: Path
) -> None:
    """``%ProgramFiles%\\PowerShell\\7`` is only reported when it exists."""
    env = {"ProgramFiles": str(tmp_path)}
    assert windows_caps.default_pshome(env) is None
    (tmp_path / "PowerShell" / "7").mkdir(parents=True)
    assert windows_caps.default_pshome(env) == tmp_path / "PowerShell" / "7"
    assert windows_caps.default_pshome({}) is None
