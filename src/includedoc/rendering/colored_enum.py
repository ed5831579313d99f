# topmark:header:start
#
#   project      : IncludeDoc
#   file         : colored_enum.py
#   file_relpath : src/includedoc/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware string enums for human-facing status labels.

`ColoredStrEnum` members are plain strings (their label) that additionally
carry a colorizer, typically a `yachalk` style:

    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)
        FAILED = ("failed", chalk.red_bright)

    Outcome.OK.value           # 'ok'
    Outcome.OK.color("hello")  # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join ``args`` into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a display label and that carries a colorizer.

    The colorizer is stored next to `_value_` so Enum semantics (hashing,
    equality, ``repr``) stay those of a plain ``str`` enum.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual label of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def render(self, *, color: bool = False) -> str:
        """Return the label, colorized when ``color`` is True."""
        return self.color(self.value) if color else self.value
