# topmark:header:start
#
#   project      : PoshKit
#   file         : install.py
#   file_relpath : src/poshkit/cli/commands/install.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit ``install`` command.

Adds the module import to one profile script. Performs a dry run by default and
writes only when ``--apply`` is given.

Input:
  - The profile selected by ``--all-users``/``--all-hosts`` (or ``--profile``).
  - The module base directory (``--module-base``), which must hold the
    ``<module_name>.psd1`` manifest.

Output:
  - The planned or performed change, or a warning explaining why the profile
    was left alone.

Exit codes:
  - SUCCESS (0): The import was added, or the profile was skipped.
  - WOULD_CHANGE (2): Dry run found a profile to modify.
  - FAILURE (1): A change was declined at the ``--confirm`` prompt.
  - PERMISSION_DENIED (77): ``--all-users`` without administrative rights.
  - USAGE_ERROR (64): The module base holds no module manifest.
  - IO_ERROR (74): The profile or its directory could not be written.

Examples:
  $ poshkit install --module-base ~/src/posh-git/src
  $ poshkit install --apply --all-hosts --module-base ~/src/posh-git/src
"""

from __future__ import annotations

from pathlib import Path

import click

from poshkit.cli.cmd_common import get_settings, make_installer, report_result, run_installer
from poshkit.cli.errors import PoshkitUsageError
from poshkit.cli.exit_codes import ExitCode
from poshkit.cli.options import profile_selection_options
from poshkit.profiles.installer import InstallRequest
from poshkit.profiles.statement import manifest_path


@click.command(
    name="install",
    help="Add the module import to a PowerShell profile (dry run unless --apply).",
)
@profile_selection_options
@click.option(
    "--force",
    is_flag=True,
    help="Skip the check for an existing import in the standard profiles.",
)
@click.option(
    "--module-base",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the module manifest (<module_name>.psd1); required.",
)
@click.pass_context
def install_command(
    ctx: click.Context,
    *,
    all_hosts: bool,
    all_users: bool,
    profile_override: Path | None,
    apply_changes: bool,
    confirm_changes: bool,
    force: bool,
    module_base: Path | None,
) -> None:
    """Add the module import to the selected profile script.

    Args:
        ctx (click.Context): Click context holding the invocation state.
        all_hosts (bool): Target the all-hosts profile.
        all_users (bool): Target the all-users profile.
        profile_override (Path | None): Explicit script to modify.
        apply_changes (bool): Write the change; otherwise perform a dry run.
        confirm_changes (bool): Ask before each change.
        force (bool): Skip the existing-import scan.
        module_base (Path | None): Module base directory.

    Raises:
        PoshkitUsageError: If ``--module-base`` is missing or holds no module manifest.
    """
    if module_base is None:
        raise PoshkitUsageError(
            "Missing option '--module-base' (the directory holding the module manifest)."
        )
    manifest: Path = manifest_path(module_base.resolve(), get_settings(ctx).module_name)
    if not manifest.is_file():
        raise PoshkitUsageError(
            f"No module manifest {manifest.name!r} in {module_base}; "
            "pass the module's base directory with --module-base."
        )

    request = InstallRequest(
        module_base=module_base,
        all_hosts=all_hosts,
        all_users=all_users,
        force=force,
        apply=apply_changes,
        profile_override=profile_override,
    )
    installer = make_installer(ctx, confirm=confirm_changes)
    result = run_installer(installer.install, request)
    code: ExitCode = report_result(ctx, result, command="install")
    if code is not ExitCode.SUCCESS:
        ctx.exit(code)
