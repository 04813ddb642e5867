# topmark:header:start
#
#   project      : PoshKit
#   file         : scanner.py
#   file_relpath : src/poshkit/profiles/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read-only inspection of profile scripts.

Detects whether a profile already references the managed module (import marker
search), whether a profile carries an Authenticode signature, and builds the
per-location report used by ``poshkit status``.

Import detection is a literal, case-sensitive substring search over the
script's lines; it also matches comments and absolute-path imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from poshkit.config.logging import get_logger
from poshkit.constants import SIGNATURE_BLOCK_END, SIGNATURE_BLOCK_START
from poshkit.profiles.encoding import detect_newline, read_lines, read_text

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from poshkit.config.logging import PoshkitLogger
    from poshkit.platform.base import PlatformCapabilities
    from poshkit.profiles.locations import ProfileLocations, ProfileTarget

logger: PoshkitLogger = get_logger(__name__)

_SIGNATURE_LINE_PREFIX = "# SIG # "


def lines_contain_marker(lines: Iterable[str], marker: str) -> bool:
    """Return True when any line contains ``marker`` (literal, case-sensitive)."""
    return any(marker in line for line in lines)


def is_imported_in_script(path: Path | None, marker: str) -> bool:
    """Return True when the script at ``path`` mentions the import marker.

    Args:
        path (Path | None): Script to scan; None or a missing file yields False.
        marker (str): Literal substring identifying the module.

    Returns:
        bool: True if any line of the script contains ``marker``.
    """
    if path is None or not path.is_file():
        return False
    return lines_contain_marker(read_lines(path), marker)


def has_signature_block(lines: Sequence[str]) -> bool:
    """Return True when ``lines`` hold a non-empty Authenticode signature block.

    A block counts only when the begin and end markers are present in order and
    at least one signature payload line sits between them.
    """
    stripped: list[str] = [line.strip() for line in lines]
    try:
        start: int = stripped.index(SIGNATURE_BLOCK_START)
        end: int = stripped.index(SIGNATURE_BLOCK_END, start + 1)
    except ValueError:
        return False
    payload: list[str] = stripped[start + 1 : end]
    return any(
        line.startswith(_SIGNATURE_LINE_PREFIX) and line[len(_SIGNATURE_LINE_PREFIX) :].strip()
        for line in payload
    )


def is_signed(path: Path | None) -> bool:
    """Return True when the script at ``path`` exists and carries a signature.

    Args:
        path (Path | None): Script to inspect.

    Returns:
        bool: True if the file exists and holds a non-empty signature block.
    """
    if path is None or not path.is_file():
        return False
    return has_signature_block(read_lines(path))


def unique_candidates(
    paths: Iterable[Path | None],
    caps: PlatformCapabilities,
) -> list[Path]:
    """Return ``paths`` without None entries and without platform-equal duplicates.

    Args:
        paths (Iterable[Path | None]): Candidate paths in priority order.
        caps (PlatformCapabilities): Provider used to compare paths.

    Returns:
        list[Path]: The candidates in their original order.
    """
    out: list[Path] = []
    for p in paths:
        if p is None:
            continue
        if any(caps.paths_equal(p, seen) for seen in out):
            continue
        out.append(p)
    return out


def find_existing_import(
    candidates: Iterable[Path | None],
    marker: str,
    caps: PlatformCapabilities,
) -> Path | None:
    """Return the first candidate script that already mentions the import marker.

    Scanning stops at the first match.

    Args:
        candidates (Iterable[Path | None]): Scripts to scan, in priority order.
        marker (str): Literal substring identifying the module.
        caps (PlatformCapabilities): Provider used to de-duplicate candidates.

    Returns:
        Path | None: The matching script, or None when none mentions the marker.
    """
    for path in unique_candidates(candidates, caps):
        logger.trace("Scanning %s for %r", path, marker)
        if is_imported_in_script(path, marker):
            logger.debug("Found existing import marker %r in %s", marker, path)
            return path
    return None


@dataclass(frozen=True)
class ProfileReport:
    """Inspection result for one profile location.

    Attributes:
        target (ProfileTarget): The inspected location.
        exists (bool): Whether the script file exists.
        encoding (str | None): Detected encoding, None when the file is missing.
        newline (str | None): Dominant line terminator, None when the file is missing.
        imported (bool): Whether the script mentions the import marker.
        signed (bool): Whether the script carries a signature block.
    """

    target: ProfileTarget
    exists: bool
    encoding: str | None = None
    newline: str | None = None
    imported: bool = False
    signed: bool = False

    @property
    def newline_name(self) -> str | None:
        """Return ``LF``, ``CRLF`` or ``CR`` for the detected line terminator."""
        return _NEWLINE_NAMES.get(self.newline) if self.newline else None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable mapping of this report."""
        return {
            "location": self.target.label,
            "scope": self.target.scope.value,
            "breadth": self.target.breadth.value,
            "path": str(self.target.path) if self.target.path else None,
            "exists": self.exists,
            "encoding": self.encoding,
            "newline": self.newline_name,
            "imported": self.imported,
            "signed": self.signed,
        }


_NEWLINE_NAMES: dict[str, str] = {"\n": "LF", "\r\n": "CRLF", "\r": "CR"}


def inspect_target(target: ProfileTarget, marker: str) -> ProfileReport:
    """Inspect one profile location.

    Args:
        target (ProfileTarget): Location to inspect.
        marker (str): Literal substring identifying the module.

    Returns:
        ProfileReport: The inspection result. An unreadable file is reported as
        existing with no further details.
    """
    path: Path | None = target.path
    if path is None or not path.is_file():
        return ProfileReport(target=target, exists=False)
    try:
        text, encoding = read_text(path)
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return ProfileReport(target=target, exists=True)
    lines: list[str] = text.splitlines()
    return ProfileReport(
        target=target,
        exists=True,
        encoding=encoding,
        newline=detect_newline(text),
        imported=lines_contain_marker(lines, marker),
        signed=has_signature_block(lines),
    )


def inspect_locations(locations: ProfileLocations, marker: str) -> list[ProfileReport]:
    """Inspect all four profile locations in precedence order."""
    return [inspect_target(target, marker) for target in locations]
