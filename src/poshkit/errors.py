# topmark:header:start
#
#   project      : PoshKit
#   file         : errors.py
#   file_relpath : src/poshkit/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions for PoshKit.

These exceptions are framework-agnostic; the CLI maps them onto Click
exceptions with exit codes (see `poshkit.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class PoshkitError(Exception):
    """Base class for all PoshKit domain errors."""


class ProfilePermissionError(PoshkitError):
    """An all-users profile operation was attempted without administrative rights.

    Attributes:
        path (Path | None): The all-users profile path that was targeted, if resolved.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(PoshkitError):
    """A configuration source holds a value of the wrong type or cannot be parsed."""
