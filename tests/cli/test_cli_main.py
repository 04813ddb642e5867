# topmark:header:start
#
#   project      : PoshKit
#   file         : test_cli_main.py
#   file_relpath : tests/cli/test_cli_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the command group, ``version`` and the shared options."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from poshkit.cli.exit_codes import ExitCode
from poshkit.constants import POSHKIT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_no_subcommand_prints_hint_and_help(tmp_path: Path, cli_obj: dict[str, Any]) -> None:
    result = run_cli_in(tmp_path, ["--no-config"], obj=cli_obj)

    assert_SUCCESS(result)
    assert "poshkit install" in result.output
    for name in ("install", "uninstall", "status", "prompt-path", "config", "version"):
        assert name in result.output


def test_version_text(tmp_path: Path, cli_obj: dict[str, Any]) -> None:
    result = run_cli_in(tmp_path, ["--no-config", "version"], obj=cli_obj)

    assert_SUCCESS(result)
    assert result.output == f"{POSHKIT_VERSION}\n"


def test_version_verbose_shows_platform(tmp_path: Path, cli_obj: dict[str, Any]) -> None:
    result = run_cli_in(tmp_path, ["--no-config", "-v", "version"], obj=cli_obj)

    assert_SUCCESS(result)
    assert "platform: posix" in result.output


def test_version_json(tmp_path: Path, cli_obj: dict[str, Any]) -> None:
    result = run_cli_in(tmp_path, ["--no-config", "version", "--format", "json"], obj=cli_obj)

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": POSHKIT_VERSION, "platform": "posix"}


def test_verbose_and_quiet_are_exclusive(tmp_path: Path, cli_obj: dict[str, Any]) -> None:
    result = run_cli_in(tmp_path, ["--no-config", "-v", "-q", "version"], obj=cli_obj)

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
    assert "mutually exclusive" in result.output


def test_unknown_format_is_rejected(tmp_path: Path, cli_obj: dict[str, Any]) -> None:
    result = run_cli_in(tmp_path, ["--no-config", "version", "--format", "xml"], obj=cli_obj)

    assert result.exit_code != ExitCode.SUCCESS


@parametrize(
    "argv, colored",
    [
        (["--color", "always"], True),
        (["--color", "never"], False),
        (["--no-color"], False),
        ([], False),
    ],
)
def test_color_mode_selection(
    tmp_path: Path, cli_obj: dict[str, Any], argv: list[str], colored: bool
) -> None:
    result = run_cli_in(
        tmp_path, ["--no-config", *argv, "-v", "version"], obj=cli_obj, color=colored
    )

    assert_SUCCESS(result)
    assert cli_obj["color_enabled"] is colored
    assert ("\x1b[" in result.output) is colored
