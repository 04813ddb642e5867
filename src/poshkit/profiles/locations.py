# topmark:header:start
#
#   project      : PoshKit
#   file         : locations.py
#   file_relpath : src/poshkit/profiles/locations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The four standard PowerShell profile locations.

PowerShell runs up to four startup scripts, identified by who they apply to
(`ProfileScope`) and which hosts load them (`HostBreadth`):

| scope       | breadth        | file                                        |
| ----------- | -------------- | ------------------------------------------- |
| `USER`      | `CURRENT_HOST` | user dir / `Microsoft.PowerShell_profile.ps1` |
| `USER`      | `ALL_HOSTS`    | user dir / `profile.ps1`                    |
| `ALL_USERS` | `CURRENT_HOST` | `$PSHOME` / `Microsoft.PowerShell_profile.ps1` |
| `ALL_USERS` | `ALL_HOSTS`    | `$PSHOME` / `profile.ps1`                   |

The all-users paths are unset when the PowerShell installation directory cannot
be determined.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from poshkit.config.logging import get_logger
from poshkit.constants import ALL_HOSTS_PROFILE_NAME, CURRENT_HOST_PROFILE_NAME, ENV_PSHOME

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from poshkit.config.logging import PoshkitLogger
    from poshkit.platform.base import PlatformCapabilities

logger: PoshkitLogger = get_logger(__name__)


class ProfileScope(str, Enum):
    """Who a profile script applies to."""

    USER = "user"
    ALL_USERS = "all_users"


class HostBreadth(str, Enum):
    """Which PowerShell hosts load a profile script."""

    CURRENT_HOST = "current_host"
    ALL_HOSTS = "all_hosts"


@dataclass(frozen=True)
class ProfileTarget:
    """One of the four standard startup-script locations.

    Attributes:
        scope (ProfileScope): Current user or all users.
        breadth (HostBreadth): Current host or all hosts.
        path (Path | None): Resolved script path; None when the environment does
            not define it.
    """

    scope: ProfileScope
    breadth: HostBreadth
    path: Path | None

    @property
    def label(self) -> str:
        """Return the PowerShell-style name of the location (e.g. ``CurrentUserAllHosts``)."""
        who = "CurrentUser" if self.scope is ProfileScope.USER else "AllUsers"
        hosts = "CurrentHost" if self.breadth is HostBreadth.CURRENT_HOST else "AllHosts"
        return f"{who}{hosts}"


@dataclass(frozen=True)
class ProfileLocations:
    """The four profile locations of one environment.

    Attributes:
        current_user_current_host (Path | None): Current user, current host.
        current_user_all_hosts (Path | None): Current user, all hosts.
        all_users_current_host (Path | None): All users, current host.
        all_users_all_hosts (Path | None): All users, all hosts.
    """

    current_user_current_host: Path | None
    current_user_all_hosts: Path | None
    all_users_current_host: Path | None
    all_users_all_hosts: Path | None

    @classmethod
    def from_environment(
        cls,
        caps: PlatformCapabilities,
        *,
        env: Mapping[str, str] | None = None,
        home: Path | None = None,
    ) -> ProfileLocations:
        """Resolve the standard locations for the running environment.

        Args:
            caps (PlatformCapabilities): Capability provider for the host OS.
            env (Mapping[str, str] | None): Environment; defaults to ``os.environ``.
            home (Path | None): Home directory; defaults to ``Path.home()``.

        Returns:
            ProfileLocations: The resolved locations. The all-users entries are
            None when ``PSHOME`` is unset and no default installation exists.
        """
        environ: Mapping[str, str] = os.environ if env is None else env
        user_home: Path = home if home is not None else Path.home()

        user_dir: Path = caps.user_profile_dir(user_home, environ)

        pshome_raw: str | None = environ.get(ENV_PSHOME)
        pshome: Path | None = Path(pshome_raw) if pshome_raw else caps.default_pshome(environ)
        if pshome is None:
            logger.info("PowerShell home is unknown; all-users profiles are unavailable")

        return cls(
            current_user_current_host=user_dir / CURRENT_HOST_PROFILE_NAME,
            current_user_all_hosts=user_dir / ALL_HOSTS_PROFILE_NAME,
            all_users_current_host=pshome / CURRENT_HOST_PROFILE_NAME if pshome else None,
            all_users_all_hosts=pshome / ALL_HOSTS_PROFILE_NAME if pshome else None,
        )

    def select(self, *, all_users: bool, all_hosts: bool) -> ProfileTarget:
        """Return the single target selected by the scope flags.

        Args:
            all_users (bool): Select the all-users scope.
            all_hosts (bool): Select the all-hosts breadth.

        Returns:
            ProfileTarget: The selected target (its path may be None).
        """
        scope = ProfileScope.ALL_USERS if all_users else ProfileScope.USER
        breadth = HostBreadth.ALL_HOSTS if all_hosts else HostBreadth.CURRENT_HOST
        return self.target(scope, breadth)

    def target(self, scope: ProfileScope, breadth: HostBreadth) -> ProfileTarget:
        """Return the target for an explicit ``(scope, breadth)`` pair."""
        table: dict[tuple[ProfileScope, HostBreadth], Path | None] = {
            (ProfileScope.USER, HostBreadth.CURRENT_HOST): self.current_user_current_host,
            (ProfileScope.USER, HostBreadth.ALL_HOSTS): self.current_user_all_hosts,
            (ProfileScope.ALL_USERS, HostBreadth.CURRENT_HOST): self.all_users_current_host,
            (ProfileScope.ALL_USERS, HostBreadth.ALL_HOSTS): self.all_users_all_hosts,
        }
        return ProfileTarget(scope=scope, breadth=breadth, path=table[(scope, breadth)])

    def __iter__(self) -> Iterator[ProfileTarget]:
        """Yield the four targets in PowerShell's precedence order."""
        yield self.target(ProfileScope.USER, HostBreadth.CURRENT_HOST)
        yield self.target(ProfileScope.USER, HostBreadth.ALL_HOSTS)
        yield self.target(ProfileScope.ALL_USERS, HostBreadth.CURRENT_HOST)
        yield self.target(ProfileScope.ALL_USERS, HostBreadth.ALL_HOSTS)
