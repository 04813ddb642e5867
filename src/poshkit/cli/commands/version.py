# topmark:header:start
#
#   project      : PoshKit
#   file         : version.py
#   file_relpath : src/poshkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit ``version`` command."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from poshkit.cli.cli_types import EnumChoiceParam, OutputFormat
from poshkit.cli.cmd_common import get_caps, get_console, get_effective_verbosity
from poshkit.constants import POSHKIT_VERSION

if TYPE_CHECKING:
    from poshkit.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the installed version of PoshKit.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """Print the PoshKit version (with the detected platform when verbose)."""
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": POSHKIT_VERSION, "platform": get_caps(ctx).name}))
        return

    console.print(POSHKIT_VERSION)
    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled(f"platform: {get_caps(ctx).name}", dim=True))
