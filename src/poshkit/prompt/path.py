# topmark:header:start
#
#   project      : PoshKit
#   file         : path.py
#   file_relpath : src/poshkit/prompt/path.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Abbreviated working-directory rendering for the shell prompt.

`prompt_path` turns the current directory into the short form shown in the
prompt:

- ``posh-git:/src/prompt`` when repository abbreviation is enabled and the
  directory is inside a repository named ``posh-git``;
- ``~/projects`` when home abbreviation is enabled and the directory is inside
  the home directory;
- the full path otherwise.

Prefix matching is component-wise and follows the platform's case
sensitivity, so ``/home/al`` never abbreviates ``/home/alice``.
"""

from __future__ import annotations

import os
import socket
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from poshkit.config.logging import get_logger
from poshkit.constants import ENV_SSH_CONNECTION

if TYPE_CHECKING:
    from collections.abc import Mapping

    from poshkit.config.logging import PoshkitLogger
    from poshkit.config.model import Settings
    from poshkit.platform.base import PlatformCapabilities
    from poshkit.session.context import PromptSession

logger: PoshkitLogger = get_logger(__name__)

RepoRootFinder = Callable[[Path], Path | None]

GIT_DIR_NAME = ".git"
HOME_ABBREVIATION = "~"


def find_repo_root(start: Path) -> Path | None:
    """Walk up from ``start`` to the first directory containing ``.git``.

    A ``.git`` file (worktrees, submodules) counts as well as a directory.

    Args:
        start (Path): Directory to start from.

    Returns:
        Path | None: The repository root, or None when ``start`` is not inside
        a repository.
    """
    for candidate in (start, *start.parents):
        if (candidate / GIT_DIR_NAME).exists():
            return candidate
    return None


def _join(prefix: str, parts: tuple[str, ...], sep: str) -> str:
    return prefix + "".join(sep + part for part in parts)


def abbreviate_repo(cwd: Path, root: Path, caps: PlatformCapabilities) -> str | None:
    """Return ``"<repo name>:<rest>"`` for ``cwd`` inside ``root``, else None."""
    rest: tuple[str, ...] | None = caps.relative_parts(cwd, root)
    if rest is None:
        return None
    name: str = root.name or str(root)
    sep: str = caps.path_separator
    if not rest:
        return f"{name}:{sep}"
    return _join(f"{name}:", rest, sep)


def abbreviate_home(cwd: Path, home: Path, caps: PlatformCapabilities) -> str | None:
    """Return ``cwd`` with the ``home`` prefix replaced by ``~``, else None."""
    rest: tuple[str, ...] | None = caps.relative_parts(cwd, home)
    if rest is None:
        return None
    return _join(HOME_ABBREVIATION, rest, caps.path_separator)


def prompt_path(
    cwd: Path,
    *,
    home: Path,
    caps: PlatformCapabilities,
    settings: Settings,
    repo_root_finder: RepoRootFinder = find_repo_root,
    session: PromptSession | None = None,
) -> str:
    """Return the prompt rendering of ``cwd``.

    Args:
        cwd (Path): Directory to render.
        home (Path): The user's home directory.
        caps (PlatformCapabilities): Provider used for prefix matching.
        settings (Settings): Supplies the two abbreviation switches.
        repo_root_finder (RepoRootFinder): Returns the repository root for a
            directory, or None.
        session (PromptSession | None): Receives finder failures; without a
            session they are only logged.

    Returns:
        str: The abbreviated path.
    """
    if settings.abbreviate_git_directory:
        root: Path | None = None
        try:
            root = repo_root_finder(cwd)
        except Exception as exc:
            if session is not None:
                session.capture(exc, f"repository lookup for {cwd}")
            else:
                logger.warning("Repository lookup failed for %s: %s", cwd, exc)
        if root is not None:
            text: str | None = abbreviate_repo(cwd, root, caps)
            if text is not None:
                return text
            logger.debug("Repository root %s does not contain %s", root, cwd)

    if settings.abbreviate_home_directory:
        text = abbreviate_home(cwd, home, caps)
        if text is not None:
            return text

    return str(cwd)


def connection_info(env: Mapping[str, str] | None = None) -> str:
    """Return the ``[user@host]: `` prompt prefix for SSH sessions.

    Args:
        env (Mapping[str, str] | None): Environment; defaults to ``os.environ``.

    Returns:
        str: The prefix when ``SSH_CONNECTION`` is set, otherwise ``""``.
    """
    environ: Mapping[str, str] = os.environ if env is None else env
    if not environ.get(ENV_SSH_CONNECTION):
        return ""
    user: str = environ.get("USER") or environ.get("USERNAME") or "unknown"
    host: str = environ.get("HOSTNAME") or environ.get("COMPUTERNAME") or _hostname()
    return f"[{user}@{host}]: "


def _hostname() -> str:
    return socket.gethostname().split(".")[0]
