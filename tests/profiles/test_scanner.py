# topmark:header:start
#
#   project      : PoshKit
#   file         : test_scanner.py
#   file_relpath : tests/profiles/test_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for import detection, signature detection and profile inspection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from poshkit.profiles.encoding import encode
from poshkit.profiles.scanner import (
    find_existing_import,
    has_signature_block,
    inspect_locations,
    is_imported_in_script,
    is_signed,
    unique_candidates,
)
from tests.conftest import write_bytes, write_text

if TYPE_CHECKING:
    from pathlib import Path

    from poshkit.platform import MacCapabilities, PosixCapabilities
    from poshkit.profiles.locations import ProfileLocations

SIGNATURE = [
    "# SIG # Begin signature block",
    "# SIG # MIIFuQYJKoZIhvcNAQcCoIIFqjCCBaYCAQExCzAJBgUrDgMCGgUAMGkGCisGAQQB",
    "# SIG # End signature block",
]


def test_marker_search_is_literal_and_case_sensitive(tmp_path: Path) -> None:
    """The marker is a plain substring; case matters."""
    f = write_text(tmp_path / "p.ps1", "# import Posh-Git later\nImport-Module oh-my-posh\n")
    assert not is_imported_in_script(f, "posh-git")
    write_text(f, "Import-Module 'C:\\tools\\posh-git\\src\\posh-git.psd1'\n")
    assert is_imported_in_script(f, "posh-git")


def test_marker_in_comment_counts(tmp_path: Path) -> None:
    """Any mention of the marker counts as an existing import."""
    f = write_text(tmp_path / "p.ps1", "# Import-Module posh-git\n")
    assert is_imported_in_script(f, "posh-git")


def test_marker_search_in_utf16_profile(tmp_path: Path) -> None:
    """Profiles saved as UTF-16 are decoded before scanning."""
    f = write_bytes(tmp_path / "p.ps1", encode("Import-Module posh-git\r\n", "utf-16-le"))
    assert is_imported_in_script(f, "posh-git")


def test_missing_script_is_not_imported(tmp_path: Path) -> None:
    """Missing files and unset paths never match."""
    assert not is_imported_in_script(tmp_path / "missing.ps1", "posh-git")
    assert not is_imported_in_script(None, "posh-git")


def test_signature_block_detection() -> None:
    """Begin and end markers with a payload between them make a signature."""
    assert has_signature_block(["Import-Module foo", *SIGNATURE])
    # Markers without payload.
    assert not has_signature_block([SIGNATURE[0], SIGNATURE[2]])
    # End before begin.
    assert not has_signature_block([SIGNATURE[2], SIGNATURE[1], SIGNATURE[0]])
    assert not has_signature_block(["Import-Module foo"])


def test_is_signed_reads_file(tmp_path: Path) -> None:
    """`is_signed` is False for missing files and True for signed ones."""
    assert not is_signed(tmp_path / "missing.ps1")
    f = write_text(tmp_path / "signed.ps1", "\r\n".join(["Set-Location ~", *SIGNATURE]) + "\r\n")
    assert is_signed(f)


def test_unique_candidates_drops_none_and_duplicates(
    tmp_path: Path, caps: PosixCapabilities
) -> None:
    """Candidates keep their order without None entries or equal paths."""
    a = tmp_path / "a.ps1"
    b = tmp_path / "b.ps1"
    assert unique_candidates([a, None, b, tmp_path / "." / "a.ps1", None], caps) == [a, b]


def test_unique_candidates_case_insensitive(tmp_path: Path, mac_caps: MacCapabilities) -> None:
    """Paths differing only in case are duplicates on a case-insensitive platform."""
    a = tmp_path / "Profile.ps1"
    assert unique_candidates([a, tmp_path / "profile.ps1"], mac_caps) == [a]


def test_find_existing_import_returns_first_match(tmp_path: Path, caps: PosixCapabilities) -> None:
    """Scanning stops at the first script that mentions the marker."""
    first = write_text(tmp_path / "first.ps1", "Set-Alias g git\n")
    second = write_text(tmp_path / "second.ps1", "Import-Module posh-git\n")
    third = write_text(tmp_path / "third.ps1", "Import-Module posh-git\n")
    assert find_existing_import([None, first, second, third], "posh-git", caps) == second
    assert find_existing_import([first, tmp_path / "missing.ps1"], "posh-git", caps) is None


def test_inspect_locations_reports_each_location(locations: ProfileLocations) -> None:
    """The report lists existence, encoding, line endings, import and signature state."""
    cuch = locations.current_user_current_host
    auah = locations.all_users_all_hosts
    assert cuch is not None and auah is not None
    write_bytes(cuch, encode("Import-Module posh-git\r\n", "utf-8-sig"))
    write_text(auah, "\n".join(["Set-Location ~", *SIGNATURE]) + "\n")

    reports = inspect_locations(locations, "posh-git")
    assert [r.exists for r in reports] == [True, False, False, True]

    assert reports[0].encoding == "utf-8-sig"
    assert reports[0].newline_name == "CRLF"
    assert reports[0].imported and not reports[0].signed

    assert reports[3].signed and not reports[3].imported
    assert reports[3].to_dict()["newline"] == "LF"

    missing = reports[1].to_dict()
    assert missing["location"] == "CurrentUserAllHosts"
    assert missing["encoding"] is None
    assert missing["exists"] is False
