# topmark:header:start
#
#   project      : PoshKit
#   file         : status.py
#   file_relpath : src/poshkit/cli/commands/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit ``status`` command.

Lists the four standard profile locations with their existence, encoding, line
endings, import and signature state. Read-only.

Examples:
  $ poshkit status
  $ poshkit status --format json
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from poshkit.cli.cli_types import EnumChoiceParam, OutputFormat
from poshkit.cli.cmd_common import build_locations, get_caps, get_console, get_settings
from poshkit.profiles.scanner import inspect_locations

if TYPE_CHECKING:
    from poshkit.cli.console_api import ConsoleLike
    from poshkit.profiles.scanner import ProfileReport


def _describe(report: ProfileReport, console: ConsoleLike) -> str:
    if report.target.path is None:
        return console.styled("(unavailable)", dim=True)
    if not report.exists:
        return console.styled("(missing)", dim=True)
    flags: list[str] = [report.encoding or "?"]
    if report.newline_name:
        flags.append(report.newline_name)
    if report.imported:
        flags.append(console.styled("imported", fg="green"))
    if report.signed:
        flags.append(console.styled("signed", fg="yellow"))
    return ", ".join(flags)


@click.command(
    name="status",
    help="Show the standard profile locations and whether they import the module.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def status_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """Show the state of the four profile locations.

    Args:
        ctx (click.Context): Click context holding the invocation state.
        output_format (OutputFormat | None): Output format (default text or JSON).
    """
    console: ConsoleLike = get_console(ctx)
    settings = get_settings(ctx)
    reports = inspect_locations(build_locations(ctx), settings.import_marker)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt is OutputFormat.JSON:
        payload: dict[str, object] = {
            "module_name": settings.module_name,
            "import_marker": settings.import_marker,
            "admin": get_caps(ctx).is_admin(),
            "profiles": [r.to_dict() for r in reports],
        }
        console.print(json.dumps(payload, indent=2))
        return

    width: int = max(len(r.target.label) for r in reports)
    for report in reports:
        label: str = console.styled(report.target.label.ljust(width), bold=True)
        path: str = str(report.target.path) if report.target.path else "-"
        console.print(f"{label}  {path}")
        console.print(f"{' ' * width}  {_describe(report, console)}")
