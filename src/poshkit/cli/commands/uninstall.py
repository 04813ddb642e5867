# topmark:header:start
#
#   project      : PoshKit
#   file         : uninstall.py
#   file_relpath : src/poshkit/cli/commands/uninstall.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit ``uninstall`` command.

Removes the module's ``Import-Module`` lines from one profile script, keeping
its encoding and line endings. Performs a dry run by default.

Exit codes:
  - SUCCESS (0): The import was removed, or the profile was skipped.
  - WOULD_CHANGE (2): Dry run found import lines to remove.
  - FAILURE (1): The change was declined at the ``--confirm`` prompt.
  - PERMISSION_DENIED (77): ``--all-users`` without administrative rights.
  - IO_ERROR (74): The profile could not be read or written.
"""

from __future__ import annotations

from pathlib import Path

import click

from poshkit.cli.cmd_common import make_installer, report_result, run_installer
from poshkit.cli.exit_codes import ExitCode
from poshkit.cli.options import profile_selection_options
from poshkit.profiles.installer import InstallRequest


@click.command(
    name="uninstall",
    help="Remove the module import from a PowerShell profile (dry run unless --apply).",
)
@profile_selection_options
@click.pass_context
def uninstall_command(
    ctx: click.Context,
    *,
    all_hosts: bool,
    all_users: bool,
    profile_override: Path | None,
    apply_changes: bool,
    confirm_changes: bool,
) -> None:
    """Remove the module import from the selected profile script."""
    request = InstallRequest(
        module_base=Path.cwd(),
        all_hosts=all_hosts,
        all_users=all_users,
        apply=apply_changes,
        profile_override=profile_override,
    )
    installer = make_installer(ctx, confirm=confirm_changes)
    result = run_installer(installer.uninstall, request)
    code: ExitCode = report_result(ctx, result, command="uninstall")
    if code is not ExitCode.SUCCESS:
        ctx.exit(code)
