# topmark:header:start
#
#   project      : PoshKit
#   file         : cmd_common.py
#   file_relpath : src/poshkit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the PoshKit subcommands.

The group callback in `poshkit.cli.main` stores the per-invocation state on
``ctx.obj``; these accessors read it back with the right types, and
`run_installer` maps domain and filesystem errors onto CLI errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, cast

import click

from poshkit.cli.errors import PoshkitPermissionDeniedError, from_os_error
from poshkit.cli.exit_codes import ExitCode
from poshkit.config.logging import get_logger
from poshkit.errors import ProfilePermissionError
from poshkit.profiles.installer import InstallOutcome, ProfileInstaller
from poshkit.profiles.locations import ProfileLocations

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from poshkit.cli.console_api import ConsoleLike
    from poshkit.config.logging import PoshkitLogger
    from poshkit.config.model import Settings
    from poshkit.platform.base import PlatformCapabilities
    from poshkit.profiles.installer import InstallRequest, InstallResult, PlannedAction

logger: PoshkitLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the project console stored on the context."""
    return cast("ConsoleLike", ctx.obj["console"])


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level resolved from ``-v``/``-q``."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def get_settings(ctx: click.Context) -> Settings:
    """Return the runtime settings loaded by the group callback."""
    return cast("Settings", ctx.obj["settings"])


def get_caps(ctx: click.Context) -> PlatformCapabilities:
    """Return the platform capability provider."""
    return cast("PlatformCapabilities", ctx.obj["caps"])


def get_env(ctx: click.Context) -> Mapping[str, str]:
    """Return the environment mapping used for this invocation."""
    return cast("Mapping[str, str]", ctx.obj["env"])


def get_home(ctx: click.Context) -> Path:
    """Return the user's home directory for this invocation."""
    return cast("Path", ctx.obj["home"])


def build_locations(ctx: click.Context) -> ProfileLocations:
    """Resolve the four profile locations from the invocation state."""
    return ProfileLocations.from_environment(get_caps(ctx), env=get_env(ctx), home=get_home(ctx))


def prompt_confirm(action: PlannedAction) -> bool:
    """Ask the user whether ``action`` may proceed."""
    return click.confirm(f"{action.describe()}?", default=True)


def make_installer(ctx: click.Context, *, confirm: bool) -> ProfileInstaller:
    """Build a `ProfileInstaller` wired to the invocation state."""
    return ProfileInstaller(
        get_caps(ctx),
        build_locations(ctx),
        get_settings(ctx),
        env=get_env(ctx),
        confirm=prompt_confirm if confirm else None,
    )


def run_installer(
    operation: Callable[[InstallRequest], InstallResult],
    request: InstallRequest,
) -> InstallResult:
    """Run an install or uninstall operation and map its errors to CLI errors.

    Raises:
        PoshkitPermissionDeniedError: Missing administrative rights.
        PoshkitCliError: A filesystem error (see `from_os_error`).
    """
    try:
        return operation(request)
    except ProfilePermissionError as e:
        raise PoshkitPermissionDeniedError(str(e)) from e
    except OSError as e:
        logger.error("Profile update failed: %s", e)
        raise from_os_error(e) from e


def report_result(ctx: click.Context, result: InstallResult, *, command: str) -> ExitCode:
    """Print ``result`` and return the exit code it maps to.

    Args:
        ctx (click.Context): Current Click context.
        result (InstallResult): Outcome of the operation.
        command (str): Subcommand name used in the ``--apply`` hint.

    Returns:
        ExitCode: `ExitCode.WOULD_CHANGE` for dry runs that found work,
        `ExitCode.FAILURE` when a change was declined, `ExitCode.SUCCESS` otherwise.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    outcome: InstallOutcome = result.outcome

    if outcome.is_skip:
        if vlevel < logging.ERROR:
            console.warn(result.message)
        return ExitCode.SUCCESS

    label: str = outcome.render(console.enable_color)
    console.print(f"{label}: {result.message}")
    if vlevel <= logging.INFO or outcome.would_change:
        for action in result.actions:
            console.print(f"  - {action.describe()}")

    if outcome.would_change:
        if vlevel < logging.ERROR:
            console.print(
                console.styled(f"Run 'poshkit {command} --apply' to write the change.", dim=True)
            )
        return ExitCode.WOULD_CHANGE
    if outcome is InstallOutcome.DECLINED:
        return ExitCode.FAILURE
    return ExitCode.SUCCESS
