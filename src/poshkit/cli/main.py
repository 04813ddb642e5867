# topmark:header:start
#
#   project      : PoshKit
#   file         : main.py
#   file_relpath : src/poshkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit command-line entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``console``: the `ClickConsole` for program output;
- ``verbosity_level``: program-output level from ``-v``/``-q``;
- ``caps``: the platform capability provider;
- ``env`` and ``home``: the environment and home directory used to locate
  profiles and config files;
- ``settings``: the frozen `Settings` built from the config layers.

Callers (tests, embedding tools) may pre-seed ``caps``, ``env`` and ``home``
through ``obj``; the group keeps values it finds there.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import click

from poshkit.cli.commands.config import config_command
from poshkit.cli.commands.install import install_command
from poshkit.cli.commands.prompt_path import prompt_path_command
from poshkit.cli.commands.status import status_command
from poshkit.cli.commands.uninstall import uninstall_command
from poshkit.cli.commands.version import version_command
from poshkit.cli.console import ClickConsole
from poshkit.cli.errors import PoshkitConfigError
from poshkit.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from poshkit.config.io import load_settings
from poshkit.config.logging import get_logger, resolve_env_log_level, setup_logging
from poshkit.errors import ConfigError
from poshkit.platform import detect_capabilities

if TYPE_CHECKING:
    from collections.abc import Mapping

    from poshkit.cli.console_api import ConsoleLike
    from poshkit.config.logging import PoshkitLogger

logger: PoshkitLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Initialize shared state on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed.
        config_files (tuple[Path, ...]): Explicit config files.
        no_config (bool): Skip the discovered config files.

    Raises:
        PoshkitConfigError: If a config source is malformed or invalid.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    env: Mapping[str, str] = ctx.obj.setdefault("env", os.environ)
    setup_logging(level=resolve_env_log_level(env) or logging.CRITICAL)

    effective_mode: ColorMode | None = (
        ColorMode.NEVER if no_color else (ColorMode(color_mode) if color_mode else None)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode, env=env)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    home: Path = ctx.obj.setdefault("home", Path.home())
    if "caps" not in ctx.obj:
        ctx.obj["caps"] = detect_capabilities()
    logger.debug("Platform capabilities: %r", ctx.obj["caps"])

    try:
        ctx.obj["settings"] = load_settings(
            home=home,
            env=env,
            extra_files=config_files,
            no_config=no_config,
        )
    except ConfigError as e:
        raise PoshkitConfigError(str(e)) from e


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Install and inspect the PowerShell prompt module import, and render prompt paths.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the PoshKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'poshkit install' to add the module import to your profile.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(status_command)

cli.add_command(install_command)

cli.add_command(uninstall_command)

cli.add_command(prompt_path_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
