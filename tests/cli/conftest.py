# topmark:header:start
#
#   project      : PoshKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running PoshKit in a controlled environment.

`run_cli_in` changes the working directory to ``tmp_path`` (so project config
discovery only sees files created by the test) and seeds the Click context
object with an isolated environment, home directory and capability provider.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from poshkit.cli.exit_codes import ExitCode
from poshkit.cli.main import cli
from poshkit.platform import PosixCapabilities

if TYPE_CHECKING:
    from pathlib import Path


def make_obj(
    home: Path,
    env: dict[str, str],
    *,
    admin: bool = False,
) -> dict[str, Any]:
    """Return a Click context object isolating the CLI from the real host.

    Args:
        home (Path): Fake home directory.
        env (dict[str, str]): Environment seen by the CLI.
        admin (bool): Whether the fake process is elevated.

    Returns:
        dict[str, Any]: Initial ``ctx.obj`` for `CliRunner.invoke`.
    """
    return {"home": home, "env": env, "caps": PosixCapabilities(admin=admin)}


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    obj: dict[str, Any] | None = None,
    input_text: str | bytes | IO[Any] | None = None,
    color: bool = False,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.
        obj (dict[str, Any] | None): Initial context object (see `make_obj`).
        input_text (str | bytes | IO[Any] | None): Standard input for prompts.
        color (bool): Keep ANSI escapes in the captured output.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text, obj=obj, color=color)
    finally:
        os.chdir(cwd)


@pytest.fixture
def cli_obj(home: Path, ps_env: dict[str, str]) -> dict[str, Any]:
    """Return a context object for a non-elevated process."""
    return make_obj(home, ps_env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that a dry run found work to do (code 2, not a Click usage error)."""
    assert result.exception is None or isinstance(result.exception, SystemExit), result.output
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
