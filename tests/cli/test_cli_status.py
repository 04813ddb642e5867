# topmark:header:start
#
#   project      : PoshKit
#   file         : test_cli_status.py
#   file_relpath : tests/cli/test_cli_status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for ``poshkit status``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import write_bytes, write_text

if TYPE_CHECKING:
    from pathlib import Path


def test_status_lists_four_locations(tmp_path: Path, cli_obj: dict[str, Any]) -> None:
    result = run_cli_in(tmp_path, ["--no-config", "status"], obj=cli_obj)

    assert_SUCCESS(result)
    for label in (
        "CurrentUserCurrentHost",
        "CurrentUserAllHosts",
        "AllUsersCurrentHost",
        "AllUsersAllHosts",
    ):
        assert label in result.output
    assert "(missing)" in result.output


def test_status_text_shows_file_details(
    tmp_path: Path, home: Path, cli_obj: dict[str, Any]
) -> None:
    write_text(home / ".config" / "powershell" / "profile.ps1", "Import-Module posh-git\r\n")

    result = run_cli_in(tmp_path, ["--no-config", "status"], obj=cli_obj)

    assert_SUCCESS(result)
    assert "utf-8, CRLF, imported" in result.output


def test_status_json(
    tmp_path: Path, home: Path, pshome: Path, cli_obj: dict[str, Any]
) -> None:
    write_bytes(
        pshome / "profile.ps1",
        b"\xef\xbb\xbfImport-Module posh-git\n"
        b"# SIG # Begin signature block\n"
        b"# SIG # MIIFuQYJKoZIhvcNAQcCoIIFqjCCBaYCAQExCzAJBgUrDgMCGgUAMGkGCisGAQQB\n"
        b"# SIG # End signature block\n",
    )

    result = run_cli_in(tmp_path, ["--no-config", "status", "--format", "json"], obj=cli_obj)

    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload["module_name"] == "posh-git"
    assert payload["admin"] is False
    by_location = {p["location"]: p for p in payload["profiles"]}
    assert list(by_location) == [
        "CurrentUserCurrentHost",
        "CurrentUserAllHosts",
        "AllUsersCurrentHost",
        "AllUsersAllHosts",
    ]
    assert by_location["CurrentUserCurrentHost"]["exists"] is False
    assert by_location["CurrentUserCurrentHost"]["encoding"] is None
    all_hosts = by_location["AllUsersAllHosts"]
    assert all_hosts["path"] == str(pshome / "profile.ps1")
    assert all_hosts["encoding"] == "utf-8-sig"
    assert all_hosts["newline"] == "LF"
    assert all_hosts["imported"] is True
    assert all_hosts["signed"] is True


def test_status_marker_from_config(
    tmp_path: Path, home: Path, cli_obj: dict[str, Any]
) -> None:
    write_text(home / ".config" / "powershell" / "profile.ps1", "Import-Module posh-git\n")
    write_text(tmp_path / "poshkit.toml", 'import_marker = "oh-my-posh"\n')

    result = run_cli_in(tmp_path, ["status", "--format", "json"], obj=cli_obj)

    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload["import_marker"] == "oh-my-posh"
    assert not any(p["imported"] for p in payload["profiles"])
