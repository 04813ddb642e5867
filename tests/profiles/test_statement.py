# topmark:header:start
#
#   project      : PoshKit
#   file         : test_statement.py
#   file_relpath : tests/profiles/test_statement.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for the module search path and the form of the import statement."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from poshkit.profiles.statement import (
    build_import_statement,
    is_in_module_path,
    module_search_path,
    quote_single,
)

if TYPE_CHECKING:
    from poshkit.platform import PosixCapabilities, WindowsCapabilities


def test_module_search_path_splits_on_provider_separator(
    caps: PosixCapabilities, windows_caps: WindowsCapabilities
) -> None:
    """Entries are split on the platform separator; empty entries are dropped."""
    assert module_search_path(caps, {"PSModulePath": "/a::/b: "}) == ["/a", "/b"]
    env = {"PSModulePath": r"C:\Modules;;D:\More Modules"}
    assert module_search_path(windows_caps, env) == [r"C:\Modules", r"D:\More Modules"]
    assert module_search_path(caps, {}) == []


def test_is_in_module_path(caps: PosixCapabilities) -> None:
    """The base must lie within an entry and must not be a ``src`` checkout."""
    paths = ["/usr/share/modules", "/opt/tools"]
    assert is_in_module_path(Path("/opt/tools/posh-git"), paths, caps)
    assert is_in_module_path(Path("/opt/tools"), paths, caps)
    assert not is_in_module_path(Path("/opt/tools/posh-git/src"), paths, caps)
    assert not is_in_module_path(Path("/opt/toolsets/posh-git"), paths, caps)
    assert not is_in_module_path(Path("/opt/tools/posh-git"), [], caps)


def test_is_in_module_path_windows_ignores_case(windows_caps: WindowsCapabilities) -> None:
    """On Windows the containment check ignores case."""
    base = Path(r"C:\Users\Alice\Documents\PowerShell\Modules\posh-git")
    assert is_in_module_path(base, [r"c:\users\alice\documents\powershell\modules"], windows_caps)


def test_bare_statement_when_importable_by_name(caps: PosixCapabilities) -> None:
    """A module inside the search path is imported by name."""
    statement = build_import_statement(
        Path("/opt/tools/posh-git"),
        module_name="posh-git",
        caps=caps,
        env={"PSModulePath": "/opt/tools"},
    )
    assert statement == "Import-Module posh-git"


def test_manifest_statement_outside_search_path(caps: PosixCapabilities) -> None:
    """Anything else is imported by its quoted manifest path."""
    statement = build_import_statement(
        Path("/home/o'neil/src/posh-git/src"),
        module_name="posh-git",
        caps=caps,
        env={"PSModulePath": "/opt/tools"},
    )
    assert statement == "Import-Module '/home/o''neil/src/posh-git/src/posh-git.psd1'"


def test_quote_single_doubles_quotes() -> None:
    """PowerShell escapes a single quote by doubling it."""
    assert quote_single("it's") == "'it''s'"
    assert quote_single("") == "''"
