# topmark:header:start
#
#   project      : PoshKit
#   file         : __init__.py
#   file_relpath : src/poshkit/profiles/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PowerShell profile discovery, inspection and idempotent import installation."""

from __future__ import annotations

from poshkit.profiles.installer import (
    InstallOutcome,
    InstallRequest,
    InstallResult,
    PlannedAction,
    ProfileInstaller,
)
from poshkit.profiles.locations import HostBreadth, ProfileLocations, ProfileScope, ProfileTarget

__all__ = [
    "HostBreadth",
    "InstallOutcome",
    "InstallRequest",
    "InstallResult",
    "PlannedAction",
    "ProfileInstaller",
    "ProfileLocations",
    "ProfileScope",
    "ProfileTarget",
]
