# topmark:header:start
#
#   project      : IncludeDoc
#   file         : ranges.py
#   file_relpath : src/includedoc/engine/ranges.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve which part of an included file a directive pair selects.

The start directive's argument gives the lower bound, the end directive's
argument the upper bound:

| Argument           | lower bound (start)          | upper bound (end)            |
|--------------------|------------------------------|------------------------------|
| none               | 0                            | ``len(text)``                |
| ``(N)``            | first char of line ``N``     | first char of line ``N``     |
| ``(-N)``           | ``N``-th newline from end    | ``N``-th newline from end    |
| ``("TEXT")``       | first occurrence of TEXT     | last occurrence of TEXT      |

The selected slice is trimmed of leading and trailing whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from includedoc.config.logging import get_logger
from includedoc.engine.directive import AnchorText, LineFromEnd, LineFromStart, NoArgument
from includedoc.engine.errors import AnchorNotFoundError, InvertedRangeError

if TYPE_CHECKING:
    from includedoc.config.logging import IncludeDocLogger
    from includedoc.engine.directive import Argument, Directive
    from includedoc.engine.pairing import DirectivePair

logger: IncludeDocLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedRange:
    """Trimmed ``[start, end)`` range into the included text."""

    start: int
    end: int

    def slice(self, text: str) -> str:
        """Return the selected text."""
        return text[self.start : self.end]


def line_start_offset(text: str, line: int) -> int:
    """Return the offset of the first character of 1-based ``line``.

    Lines at or before the first map to 0; lines past the last map to ``len(text)``.
    """
    offset: int = 0
    for _ in range(line - 1):
        nl: int = text.find("\n", offset)
        if nl < 0:
            return len(text)
        offset = nl + 1
    return offset


def line_from_end_offset(text: str, count: int) -> int:
    """Return the offset of the ``count``-th newline counted back from the end.

    ``count == 0`` maps to ``len(text)``; running out of newlines maps to 0.
    """
    offset: int = len(text)
    for _ in range(count):
        nl: int = text.rfind("\n", 0, offset)
        if nl < 0:
            return 0
        offset = nl
    return offset


def _bound(text: str, argument: Argument, directive: Directive, *, upper: bool) -> int:
    if isinstance(argument, NoArgument):
        return len(text) if upper else 0
    if isinstance(argument, LineFromStart):
        return line_start_offset(text, argument.line)
    if isinstance(argument, LineFromEnd):
        return line_from_end_offset(text, argument.count)
    if isinstance(argument, AnchorText):
        found: int = text.rfind(argument.text) if upper else text.find(argument.text)
        if found < 0:
            raise AnchorNotFoundError(directive, argument.text)
        return found
    raise TypeError(f"Unsupported directive argument: {argument!r}")


def lower_bound(text: str, start: Directive) -> int:
    """Return the untrimmed lower bound selected by a start directive."""
    return _bound(text, start.argument, start, upper=False)


def upper_bound(text: str, end: Directive) -> int:
    """Return the untrimmed upper bound selected by an end directive."""
    return _bound(text, end.argument, end, upper=True)


def trim_range(text: str, start: int, end: int) -> ResolvedRange:
    """Shrink ``[start, end)`` past leading and trailing whitespace."""
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return ResolvedRange(start=start, end=end)


def resolve_range(text: str, pair: DirectivePair) -> ResolvedRange:
    """Resolve the trimmed range of ``text`` selected by ``pair``.

    Args:
        text (str): Full text of the included file.
        pair (DirectivePair): The directive pair whose arguments select the range.

    Returns:
        ResolvedRange: The whitespace-trimmed range.

    Raises:
        AnchorNotFoundError: an anchor text does not occur in ``text``.
        InvertedRangeError: the lower bound lies after the upper bound.
    """
    lower: int = lower_bound(text, pair.start)
    upper: int = upper_bound(text, pair.end)
    logger.trace("Range for %s: [%d, %d) of %d", pair.source_path, lower, upper, len(text))
    if lower > upper:
        raise InvertedRangeError(pair.start, pair.end, lower, upper)
    return trim_range(text, lower, upper)
