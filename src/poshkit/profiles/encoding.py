# topmark:header:start
#
#   project      : PoshKit
#   file         : encoding.py
#   file_relpath : src/poshkit/profiles/encoding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoding and newline sniffing for profile scripts.

PowerShell writes profile scripts in several encodings depending on the editor
and PowerShell edition (Windows PowerShell 5.1 defaults to UTF-16 LE for
``Set-Content``). The helpers here recognize the byte order mark of a file so
it can be read and rewritten without changing its encoding.

The sniff is bytes-level and bounded: only the first four bytes decide the
encoding; files without a BOM are treated as UTF-8.
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING, Final

from poshkit.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from poshkit.config.logging import PoshkitLogger

logger: PoshkitLogger = get_logger(__name__)

DEFAULT_ENCODING: Final[str] = "utf-8"

# Order matters: UTF-32 LE starts with the UTF-16 LE BOM.
_BOMS: Final[tuple[tuple[bytes, str], ...]] = (
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
)

# BOM encodings that may end in UTF-8 lines appended by install.
_WIDE_ENCODINGS: Final[frozenset[str]] = frozenset(
    {"utf-16-le", "utf-16-be", "utf-32-le", "utf-32-be"}
)


def encoding_from_prefix(prefix: bytes) -> str:
    """Return the encoding announced by the byte order mark in ``prefix``.

    Args:
        prefix (bytes): The first bytes of a file (four are enough).

    Returns:
        str: A Python codec name; ``utf-8`` when no BOM is present.
    """
    for bom, name in _BOMS:
        if prefix.startswith(bom):
            return name
    return DEFAULT_ENCODING


def bom_for(encoding: str) -> bytes:
    """Return the BOM bytes written for ``encoding`` (empty for BOM-less encodings).

    Args:
        encoding (str): A codec name returned by `encoding_from_prefix`.

    Returns:
        bytes: The byte order mark, or ``b""``.
    """
    if encoding == "utf-8-sig":
        # The utf-8-sig codec emits its own BOM on encode.
        return b""
    for bom, name in _BOMS:
        if name == encoding:
            return bom
    return b""


def split_utf8_tail(data: bytes) -> tuple[bytes, list[str]]:
    """Split UTF-8 lines appended to the end of a UTF-16 or UTF-32 file.

    ``poshkit install`` always appends ``"\\n" + statement`` in UTF-8, so a wide
    profile may end in UTF-8 lines. A trailing segment after the last ``\\n``
    byte counts as such a line when it decodes strictly as UTF-8 and holds no
    NUL; wide text in the ASCII range always holds NUL bytes.

    Args:
        data (bytes): Raw file content.

    Returns:
        tuple[bytes, list[str]]: The wide part and the appended lines in file order.
    """
    tail: list[str] = []
    while True:
        idx: int = data.rfind(b"\n")
        if idx < 0:
            break
        try:
            line: str = data[idx + 1 :].decode("utf-8")
        except UnicodeDecodeError:
            break
        if not line or "\x00" in line:
            break
        tail.insert(0, line)
        data = data[:idx]
    return data, tail


def decode(data: bytes, encoding: str | None = None) -> str:
    """Decode ``data`` using ``encoding`` or the encoding announced by its BOM.

    The BOM itself is not part of the returned text. Invalid byte sequences are
    replaced rather than raising, so a damaged profile can still be scanned.
    UTF-8 lines appended to a UTF-16 or UTF-32 file (see `split_utf8_tail`)
    are decoded as UTF-8 and joined back with ``\\n``.

    Args:
        data (bytes): Raw file content.
        encoding (str | None): Codec name; sniffed from ``data`` when None.

    Returns:
        str: The decoded text.
    """
    enc: str = encoding or encoding_from_prefix(data[:4])
    tail: list[str] = []
    if enc in _WIDE_ENCODINGS:
        data, tail = split_utf8_tail(data)
        if tail:
            logger.debug("Found %d UTF-8 line(s) after %s content", len(tail), enc)
    bom: bytes = bom_for(enc)
    if bom and data.startswith(bom):
        data = data[len(bom) :]
    return data.decode(enc, errors="replace") + "".join("\n" + line for line in tail)


def encode(text: str, encoding: str) -> bytes:
    """Encode ``text`` in ``encoding``, prefixing the BOM when the encoding carries one.

    Args:
        text (str): Text to encode.
        encoding (str): Codec name returned by `encoding_from_prefix`.

    Returns:
        bytes: The encoded content, ready to be written in binary mode.
    """
    return bom_for(encoding) + text.encode(encoding)


def read_text(path: Path) -> tuple[str, str]:
    """Read the file at ``path`` and return ``(text, encoding)``.

    Args:
        path (Path): File to read.

    Returns:
        tuple[str, str]: The decoded text and the detected encoding.

    Raises:
        OSError: If the file cannot be read.
    """
    data: bytes = path.read_bytes()
    encoding: str = encoding_from_prefix(data[:4])
    return decode(data, encoding), encoding


def read_lines(path: Path) -> list[str]:
    """Return the lines of the file at ``path`` without line terminators.

    Args:
        path (Path): File to read.

    Returns:
        list[str]: The lines; empty when the file does not exist or cannot be read.
    """
    try:
        text, _ = read_text(path)
    except FileNotFoundError:
        return []
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return []
    return text.splitlines()


def detect_newline(text: str) -> str:
    """Return the dominant line terminator of ``text``.

    Args:
        text (str): Decoded file content.

    Returns:
        str: ``"\\n"``, ``"\\r\\n"`` or ``"\\r"``; ``"\\n"`` when the text has no
        terminators. Ties prefer CRLF, then LF.
    """
    crlf: int = text.count("\r\n")
    lf: int = text.count("\n") - crlf
    cr: int = text.count("\r") - crlf
    hist: dict[str, int] = {"\r\n": crlf, "\n": lf, "\r": cr}
    if not any(hist.values()):
        return "\n"
    # max() keeps the first of equal counts, hence the dict order above.
    return max(hist.items(), key=lambda kv: kv[1])[0]
