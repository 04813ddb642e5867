# topmark:header:start
#
#   project      : PoshKit
#   file         : posix.py
#   file_relpath : src/poshkit/platform/posix.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capability providers for Linux and macOS."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, ClassVar

from poshkit.config.logging import get_logger
from poshkit.platform.base import BaseCapabilities

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import PurePath

    from poshkit.config.logging import PoshkitLogger

logger: PoshkitLogger = get_logger(__name__)


class PosixCapabilities(BaseCapabilities):
    """Linux and other POSIX hosts: case-sensitive paths, root is the administrator."""

    name: ClassVar[str] = "posix"
    case_sensitive: ClassVar[bool] = True
    module_path_separator: ClassVar[str] = ":"
    pure_path: ClassVar[type[PurePath]] = PurePosixPath

    # Default install location of the PowerShell packages.
    pshome_default: ClassVar[str] = "/opt/microsoft/powershell/7"

    def _query_admin(self) -> bool:
        geteuid = getattr(os, "geteuid", None)
        if geteuid is None:
            return False
        return geteuid() == 0

    def default_pshome(self, env: Mapping[str, str]) -> Path | None:
        """Return the PowerShell installation directory when it exists."""
        candidate = Path(self.pshome_default)
        if candidate.is_dir():
            return candidate
        logger.debug("No PowerShell installation at %s", candidate)
        return None

    def user_profile_dir(self, home: Path, env: Mapping[str, str]) -> Path:
        """Return ``$XDG_CONFIG_HOME/powershell`` (default ``~/.config/powershell``)."""
        xdg: str | None = env.get("XDG_CONFIG_HOME")
        config_home: Path = Path(xdg) if xdg else home / ".config"
        return config_home / "powershell"


class MacCapabilities(PosixCapabilities):
    """macOS: POSIX layout on a case-insensitive (but case-preserving) filesystem."""

    name: ClassVar[str] = "macos"
    case_sensitive: ClassVar[bool] = False
    pshome_default: ClassVar[str] = "/usr/local/microsoft/powershell/7"
