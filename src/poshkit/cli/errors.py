# topmark:header:start
#
#   project      : PoshKit
#   file         : errors.py
#   file_relpath : src/poshkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click exceptions for the PoshKit CLI.

Raise these in commands to report failures with a standardized exit code. They
print through the project console when one is present on the Click context and
fall back to Click's default display otherwise.
"""

from __future__ import annotations

import errno
from typing import IO, Any

import click

from poshkit.cli.exit_codes import ExitCode


class PoshkitCliError(click.ClickException):
    """Base class for all PoshKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later by `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class PoshkitUsageError(PoshkitCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class PoshkitConfigError(PoshkitCliError):
    """Missing, malformed or invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class PoshkitFileNotFoundError(PoshkitCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PoshkitPermissionDeniedError(PoshkitCliError):
    """Missing administrative rights or file permissions."""

    exit_code = ExitCode.PERMISSION_DENIED


class PoshkitIOError(PoshkitCliError):
    """Reading or writing a profile script failed."""

    exit_code = ExitCode.IO_ERROR


class PoshkitUnexpectedError(PoshkitCliError):
    """Unhandled error (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def from_os_error(exc: OSError) -> PoshkitCliError:
    """Map a filesystem error onto the matching CLI error.

    Args:
        exc (OSError): The error raised by a filesystem operation.

    Returns:
        PoshkitCliError: `PoshkitPermissionDeniedError` for permission
        failures, `PoshkitFileNotFoundError` for missing paths, and
        `PoshkitIOError` otherwise.
    """
    where: str = f" ({exc.filename})" if exc.filename else ""
    text: str = f"{exc.strerror or exc}{where}"
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return PoshkitPermissionDeniedError(f"Permission denied: {text}")
    if isinstance(exc, FileNotFoundError):
        return PoshkitFileNotFoundError(f"No such file or directory: {text}")
    return PoshkitIOError(f"I/O error: {text}")
