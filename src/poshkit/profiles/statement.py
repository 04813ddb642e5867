# topmark:header:start
#
#   project      : PoshKit
#   file         : statement.py
#   file_relpath : src/poshkit/profiles/statement.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module search path handling and import-statement construction.

A module installed under one of the ``PSModulePath`` directories can be
imported by name. A module anywhere else, or a development checkout whose base
directory is ``src``, must be imported through the absolute path of its
manifest.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from poshkit.config.logging import get_logger
from poshkit.constants import ENV_MODULE_PATH, MODULE_MANIFEST_SUFFIX, SOURCE_DIR_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from poshkit.config.logging import PoshkitLogger
    from poshkit.platform.base import PlatformCapabilities

logger: PoshkitLogger = get_logger(__name__)


def module_search_path(
    caps: PlatformCapabilities,
    env: Mapping[str, str] | None = None,
) -> list[str]:
    """Return the entries of ``PSModulePath``.

    Args:
        caps (PlatformCapabilities): Provider that knows the list separator.
        env (Mapping[str, str] | None): Environment; defaults to ``os.environ``.

    Returns:
        list[str]: Non-empty entries in their original order.
    """
    environ: Mapping[str, str] = os.environ if env is None else env
    raw: str = environ.get(ENV_MODULE_PATH, "")
    return [entry.strip() for entry in raw.split(caps.module_path_separator) if entry.strip()]


def is_in_module_path(
    module_base: Path,
    search_path: Sequence[str],
    caps: PlatformCapabilities,
) -> bool:
    """Return True when ``module_base`` can be imported by name.

    Args:
        module_base (Path): The module's base directory.
        search_path (Sequence[str]): Entries of the module search path.
        caps (PlatformCapabilities): Provider used for path comparison.

    Returns:
        bool: True if ``module_base`` lies within one of the entries and its
        leaf directory is not ``src``.
    """
    if not any(caps.is_within(module_base, entry) for entry in search_path):
        return False
    if module_base.name == SOURCE_DIR_NAME:
        logger.warning(
            "Module base %s is a source checkout inside the module search path; "
            "importing it by manifest path",
            module_base,
        )
        return False
    return True


def manifest_path(module_base: Path, module_name: str) -> Path:
    """Return the path of the module manifest inside ``module_base``."""
    return module_base / f"{module_name}{MODULE_MANIFEST_SUFFIX}"


def quote_single(text: str) -> str:
    """Return ``text`` as a PowerShell single-quoted string literal."""
    return "'" + text.replace("'", "''") + "'"


def build_import_statement(
    module_base: Path,
    *,
    module_name: str,
    caps: PlatformCapabilities,
    env: Mapping[str, str] | None = None,
) -> str:
    """Return the import statement to add to a profile.

    Args:
        module_base (Path): The module's base directory.
        module_name (str): Name used for the bare import.
        caps (PlatformCapabilities): Provider used for path comparison.
        env (Mapping[str, str] | None): Environment holding ``PSModulePath``.

    Returns:
        str: ``Import-Module <name>`` when the module is importable by name,
        otherwise ``Import-Module '<base>/<name>.psd1'``.
    """
    search_path: list[str] = module_search_path(caps, env)
    if is_in_module_path(module_base, search_path, caps):
        return f"Import-Module {module_name}"
    return f"Import-Module {quote_single(str(manifest_path(module_base, module_name)))}"
