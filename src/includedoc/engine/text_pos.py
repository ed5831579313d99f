# topmark:header:start
#
#   project      : IncludeDoc
#   file         : text_pos.py
#   file_relpath : src/includedoc/engine/text_pos.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable positions (line/column) for offsets into a text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextPos:
    """1-based line and column of an offset in a text.

    Columns count characters, not bytes.
    """

    line: int
    column: int

    @classmethod
    def from_offset(cls, text: str, offset: int) -> TextPos:
        """Return the position of ``offset`` in ``text``.

        Offsets past the end of ``text`` resolve to the position right after the
        last character.

        Args:
            text (str): The text the offset points into.
            offset (int): Character offset.

        Returns:
            TextPos: The 1-based line/column pair.
        """
        head: str = text[: max(offset, 0)]
        line: int = head.count("\n") + 1
        last_nl: int = head.rfind("\n")
        column: int = len(head) - last_nl
        return cls(line=line, column=column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


def to_line(text: str, offset: int) -> int:
    """Return the 1-based line number of ``offset`` in ``text``."""
    return TextPos.from_offset(text, offset).line
