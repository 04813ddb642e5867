# topmark:header:start
#
#   project      : PoshKit
#   file         : options.py
#   file_relpath : src/poshkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution logic.

Centralizes the group-level options (verbosity, color, configuration) and the
profile selection flags shared by ``install`` and ``uninstall``, so that
commands stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Mapping, ParamSpec, TypeVar

import click

from poshkit.cli.errors import PoshkitUsageError
from poshkit.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS: dict[str, int] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: A logging-style level. ``-vvv`` TRACE, ``-vv`` DEBUG, ``-v`` INFO,
        ``-q`` ERROR, WARNING otherwise.

    Raises:
        PoshkitUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PoshkitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:
        return LOG_LEVELS["ERROR"]
    return LOG_LEVELS["WARNING"]


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    env: Mapping[str, str] | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit mode from ``--color``/``--no-color``.
        env (Mapping[str, str] | None): Environment; defaults to ``os.environ``.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected when None.

    Returns:
        bool: True if color output should be enabled. Honors ``FORCE_COLOR``
        and ``NO_COLOR`` in ``AUTO`` mode.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    environ: Mapping[str, str] = os.environ if env is None else env
    force_color: str | None = environ.get("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if environ.get("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config`` and ``--no-config`` options."""
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        multiple=True,
        help="Additional TOML config file, applied after the discovered ones. Repeatable.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Ignore the user and project config files.",
    )(f)
    return f


def profile_selection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the flags that select the target profile and the dry-run switch."""
    f = click.option(
        "--all-hosts",
        is_flag=True,
        help="Target the profile loaded by every PowerShell host.",
    )(f)
    f = click.option(
        "--all-users",
        is_flag=True,
        help="Target the profile of all users (requires administrative rights).",
    )(f)
    f = click.option(
        "--profile",
        "profile_override",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Use this script instead of the selected standard profile.",
    )(f)
    f = click.option(
        "--apply",
        "apply_changes",
        is_flag=True,
        help="Write changes to the profile (dry run by default).",
    )(f)
    f = click.option(
        "--confirm",
        "confirm_changes",
        is_flag=True,
        help="Ask before each change when applying.",
    )(f)
    return f
