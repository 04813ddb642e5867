# topmark:header:start
#
#   project      : PoshKit
#   file         : config.py
#   file_relpath : src/poshkit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit ``config`` command.

Prints the effective settings as TOML. The files that contributed to them are
listed as comments, in the order they were applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from poshkit.cli.cmd_common import get_console, get_settings
from poshkit.config.io import render_settings_toml

if TYPE_CHECKING:
    from poshkit.cli.console_api import ConsoleLike


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@click.pass_context
def config_command(ctx: click.Context) -> None:
    """Print the effective settings."""
    console: ConsoleLike = get_console(ctx)
    settings = get_settings(ctx)
    if settings.config_files:
        for path in settings.config_files:
            console.print(f"# source: {path}")
    else:
        console.print("# source: built-in defaults")
    console.print(render_settings_toml(settings), nl=False)
