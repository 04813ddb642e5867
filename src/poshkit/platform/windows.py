# topmark:header:start
#
#   project      : PoshKit
#   file         : windows.py
#   file_relpath : src/poshkit/platform/windows.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capability provider for Windows."""

from __future__ import annotations

import ctypes
from pathlib import Path, PureWindowsPath
from typing import TYPE_CHECKING, ClassVar

from poshkit.config.logging import get_logger
from poshkit.platform.base import BaseCapabilities

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import PurePath

    from poshkit.config.logging import PoshkitLogger

logger: PoshkitLogger = get_logger(__name__)


class WindowsCapabilities(BaseCapabilities):
    """Windows: case-insensitive paths, ``;``-separated module path, UAC elevation."""

    name: ClassVar[str] = "windows"
    case_sensitive: ClassVar[bool] = False
    module_path_separator: ClassVar[str] = ";"
    path_separator: ClassVar[str] = "\\"
    pure_path: ClassVar[type[PurePath]] = PureWindowsPath

    def _query_admin(self) -> bool:
        windll = getattr(ctypes, "windll", None)
        if windll is None:
            return False
        try:
            return bool(windll.shell32.IsUserAnAdmin())
        except (AttributeError, OSError) as exc:
            logger.debug("IsUserAnAdmin failed: %s", exc)
            return False

    def default_pshome(self, env: Mapping[str, str]) -> Path | None:
        """Return ``%ProgramFiles%\\PowerShell\\7`` when it exists."""
        program_files: str | None = env.get("ProgramFiles") or env.get("PROGRAMFILES")
        if not program_files:
            return None
        candidate = Path(program_files) / "PowerShell" / "7"
        if candidate.is_dir():
            return candidate
        logger.debug("No PowerShell installation at %s", candidate)
        return None

    def user_profile_dir(self, home: Path, env: Mapping[str, str]) -> Path:
        """Return ``~\\Documents\\PowerShell``."""
        return home / "Documents" / "PowerShell"
