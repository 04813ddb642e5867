# topmark:header:start
#
#   project      : PoshKit
#   file         : exit_codes.py
#   file_relpath : src/poshkit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the PoshKit CLI.

PoshKit aligns with the BSD `sysexits` convention where practical. The one
deliberate divergence is `WOULD_CHANGE=2`, returned by a dry run that found a
profile to modify. Click's own usage errors also exit with 2, so tests must
assert ``result.exception is None`` to tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PoshKit CLI.

    Attributes:
        SUCCESS: The request completed (including skips such as an existing import).
        FAILURE: Generic failure; prefer a more specific code if available.
        WOULD_CHANGE: Dry run: a profile would be modified with ``--apply``.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors ``EX_NOINPUT (66)``.
        IO_ERROR: Reading or writing a profile failed. Mirrors ``EX_IOERR (74)``.
        PERMISSION_DENIED: Missing administrative rights or file permissions.
            Mirrors ``EX_NOPERM (77)``.
        CONFIG_ERROR: Malformed or invalid configuration. Mirrors ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
