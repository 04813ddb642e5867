# topmark:header:start
#
#   project      : PoshKit
#   file         : error_buffer.py
#   file_relpath : src/poshkit/session/error_buffer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded ring buffer of errors captured while rendering a prompt.

The buffer is owned by a `poshkit.session.context.PromptSession`; nothing is
stored at module level.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ErrorRecord:
    """One captured error.

    Attributes:
        message (str): Human-readable description, including the capture context.
        exception_type (str): Qualified name of the exception class.
        timestamp (datetime): When the error was captured (UTC).
    """

    message: str
    exception_type: str
    timestamp: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_exception(cls, exc: BaseException, context: str = "") -> ErrorRecord:
        """Build a record from ``exc``, prefixing the message with ``context``."""
        kind: type[BaseException] = type(exc)
        name: str = kind.__qualname__
        if kind.__module__ not in ("builtins", "__main__"):
            name = f"{kind.__module__}.{name}"
        text: str = str(exc) or name
        return cls(message=f"{context}: {text}" if context else text, exception_type=name)

    def format(self) -> str:
        """Return a one-line rendering of the record."""
        stamp: str = self.timestamp.isoformat(timespec="seconds")
        return f"[{stamp}] {self.exception_type}: {self.message}"


class ErrorBuffer:
    """Fixed-capacity buffer that keeps the newest `ErrorRecord` objects.

    Args:
        capacity (int): Maximum number of records kept; must be positive.

    Raises:
        ValueError: If ``capacity`` is less than 1.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._records: deque[ErrorRecord] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Return the maximum number of records kept."""
        maxlen: int | None = self._records.maxlen
        assert maxlen is not None
        return maxlen

    def add(self, record: ErrorRecord) -> None:
        """Append ``record``, evicting the oldest one when the buffer is full."""
        self._records.append(record)

    def truncate(self, n: int) -> None:
        """Keep only the newest ``n`` records.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"cannot truncate to a negative size: {n}")
        while len(self._records) > n:
            self._records.popleft()

    def clear(self) -> None:
        """Remove all records."""
        self._records.clear()

    def __iter__(self) -> Iterator[ErrorRecord]:
        """Iterate oldest first."""
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __repr__(self) -> str:
        return f"ErrorBuffer(capacity={self.capacity}, size={len(self)})"
