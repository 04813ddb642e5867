# topmark:header:start
#
#   project      : PoshKit
#   file         : colored_enum.py
#   file_relpath : src/poshkit/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum whose members carry a display text and a colorizer.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        DONE = ("done", chalk.green)
        SKIPPED = ("skipped", chalk.yellow)

    print(Outcome.DONE.value)            # 'done'
    print(Outcome.DONE.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display (compatible with ``yachalk``)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the decorated concatenation of ``args``."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The member stays a plain ``str`` for hashing, equality and serialization;
    the colorizer is stored separately and exposed via `color`.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member from its display text and colorizer."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the display text of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def render(self, enable_color: bool = True) -> str:
        """Return the display text, colorized when ``enable_color`` is True."""
        return self._color(self._value_) if enable_color else self._value_
