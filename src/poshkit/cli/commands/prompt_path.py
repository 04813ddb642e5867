# topmark:header:start
#
#   project      : PoshKit
#   file         : prompt_path.py
#   file_relpath : src/poshkit/cli/commands/prompt_path.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit ``prompt-path`` command.

Prints the abbreviated form of a directory as shown in the prompt, prefixed
with ``[user@host]: `` inside SSH sessions.

Examples:
  $ poshkit prompt-path
  ~/src/posh-git
  $ poshkit prompt-path --git ~/src/posh-git/src
  posh-git:/src
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import click

from poshkit.cli.cmd_common import get_caps, get_console, get_env, get_home, get_settings
from poshkit.prompt.path import connection_info
from poshkit.session.context import PromptSession

if TYPE_CHECKING:
    from poshkit.cli.console_api import ConsoleLike
    from poshkit.config.model import MutableSettings


@click.command(
    name="prompt-path",
    help="Print the abbreviated prompt form of PATH (default: current directory).",
)
@click.argument(
    "path",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--home/--no-home",
    "abbreviate_home",
    default=None,
    help="Replace the home directory with '~' (default from config).",
)
@click.option(
    "--git/--no-git",
    "abbreviate_git",
    default=None,
    help="Render the path relative to its repository as '<repo>:<rest>' (default from config).",
)
@click.option(
    "--show-errors",
    is_flag=True,
    help="Print the errors captured while rendering.",
)
@click.pass_context
def prompt_path_command(
    ctx: click.Context,
    *,
    path: Path | None,
    abbreviate_home: bool | None,
    abbreviate_git: bool | None,
    show_errors: bool,
) -> None:
    """Print the prompt rendering of ``path``.

    Args:
        ctx (click.Context): Click context holding the invocation state.
        path (Path | None): Directory to render; the current directory if omitted.
        abbreviate_home (bool | None): Override ``abbreviate_home_directory``.
        abbreviate_git (bool | None): Override ``abbreviate_git_directory``.
        show_errors (bool): Print the session's captured errors to stderr.
    """
    console: ConsoleLike = get_console(ctx)

    draft: MutableSettings = get_settings(ctx).thaw()
    if abbreviate_home is not None:
        draft.abbreviate_home_directory = abbreviate_home
    if abbreviate_git is not None:
        draft.abbreviate_git_directory = abbreviate_git

    session = PromptSession(draft.freeze(), get_caps(ctx))
    # normpath collapses ".." lexically; symlinks are kept as typed.
    cwd: Path = Path(os.path.normpath((path or Path.cwd()).absolute()))
    text: str = session.prompt_path(cwd, home=get_home(ctx))
    console.print(connection_info(get_env(ctx)) + text)

    if show_errors:
        for record in session.errors:
            console.warn(record.format())
