# topmark:header:start
#
#   project      : PoshKit
#   file         : __init__.py
#   file_relpath : src/poshkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit configuration: settings model, TOML sources and logging."""

from __future__ import annotations

from poshkit.config.io import load_settings, render_settings_toml
from poshkit.config.model import MutableSettings, Settings

__all__ = [
    "MutableSettings",
    "Settings",
    "load_settings",
    "render_settings_toml",
]
