# topmark:header:start
#
#   project      : IncludeDoc
#   file         : errors.py
#   file_relpath : src/includedoc/engine/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errors raised by the directive engine.

Every error is scoped to the file being processed and aborts that file. Each
exception carries the directives (and therefore the offsets) it concerns so it
can be rendered as a positioned message against the containing text:

    error: mismatched include path.
    --> src/lib.rs:3:1
     3 | // #[include_doc("a.md", start)]
     9 | // #[include_doc("b.md", end)]
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from includedoc.diagnostic.render import fmt_headline, fmt_link, fmt_source
from includedoc.engine.text_pos import TextPos, to_line

if TYPE_CHECKING:
    from pathlib import Path

    from includedoc.engine.directive import Directive, MalformedDirective


class ErrorKind(Enum):
    """Category of an engine failure."""

    MALFORMED_DIRECTIVE = "malformed directive"
    UNMATCHED_START = "unmatched start"
    UNMATCHED_END = "unmatched end"
    MISMATCHED_PAIR = "mismatched pair"
    ANCHOR_NOT_FOUND = "anchor not found"
    INVERTED_RANGE = "inverted range"
    SOURCE_READ_FAILURE = "source read failure"
    GENERATED_CONTENT_POLLUTION = "generated content pollution"


class MismatchField(Enum):
    """Which attribute differs between a start and an end directive."""

    VISIBILITY = "visibility"
    PATH = "path"

    @property
    def message(self) -> str:
        """Return the user-facing description of the mismatch."""
        if self is MismatchField.VISIBILITY:
            return "mismatched directive visibility (`#` vs `#!`)."
        return "mismatched include path."


class IncludeDocError(Exception):
    """Base class for all engine errors.

    Subclasses set `kind` and implement `message`, `offset` and `spans`. The
    spans are the lines of the containing text quoted under the headline.
    """

    kind: ErrorKind

    @property
    def message(self) -> str:
        """Return the one-line description of the error."""
        raise NotImplementedError

    @property
    def offset(self) -> int:
        """Offset in the containing text the error points at."""
        raise NotImplementedError

    def spans(self) -> list[tuple[int, int]]:
        """Spans of the containing text quoted in the rendered message."""
        raise NotImplementedError

    def line(self, text: str) -> int:
        """Return the 1-based line of the error in ``text``."""
        return to_line(text, self.offset)

    def position(self, text: str) -> TextPos:
        """Return the line/column of the error in ``text``."""
        return TextPos.from_offset(text, self.offset)

    def render(self, rel_path: Path | str, text: str, *, color: bool = False) -> str:
        """Render the error as a positioned, multi-line message.

        Args:
            rel_path (Path | str): Display path of the containing file.
            text (str): Full text of the containing file.
            color (bool): Whether to emit ANSI colors.

        Returns:
            str: Headline, ``--> file:line:column`` link and quoted source lines.
        """
        pos: TextPos = self.position(text)
        parts: list[str] = [
            fmt_headline("error", self.message, color=color),
            fmt_link(rel_path, pos.line, pos.column),
            fmt_source(
                [(to_line(text, start), text[start:end]) for start, end in self.spans()],
                color=color,
            ),
        ]
        return "\n".join(parts)

    def __str__(self) -> str:
        return self.message


class _SingleDirectiveError(IncludeDocError):
    """Error attached to one directive (or malformed directive line)."""

    def __init__(self, directive: Directive | MalformedDirective) -> None:
        super().__init__()
        self.directive: Directive | MalformedDirective = directive

    @property
    def offset(self) -> int:
        return self.directive.start

    def spans(self) -> list[tuple[int, int]]:
        return [self.directive.span]


class MalformedDirectiveError(_SingleDirectiveError):
    """A line looks like a directive but does not parse."""

    kind = ErrorKind.MALFORMED_DIRECTIVE

    @property
    def message(self) -> str:
        return "invalid directive."


class UnmatchedStartError(_SingleDirectiveError):
    """A start directive has no matching end directive."""

    kind = ErrorKind.UNMATCHED_START

    @property
    def message(self) -> str:
        return "missing matching `end` directive."


class UnmatchedEndError(_SingleDirectiveError):
    """An end directive has no preceding start directive."""

    kind = ErrorKind.UNMATCHED_END

    @property
    def message(self) -> str:
        return "missing matching `start` directive."


class MismatchedPairError(IncludeDocError):
    """A start and end directive disagree on visibility or path."""

    kind = ErrorKind.MISMATCHED_PAIR

    def __init__(self, start: Directive, end: Directive, field: MismatchField) -> None:
        super().__init__()
        self.start: Directive = start
        self.end: Directive = end
        self.field: MismatchField = field

    @property
    def message(self) -> str:
        return self.field.message

    @property
    def offset(self) -> int:
        return self.start.start

    def spans(self) -> list[tuple[int, int]]:
        return [self.start.span, self.end.span]


class AnchorNotFoundError(_SingleDirectiveError):
    """An anchor text does not occur in the included file."""

    kind = ErrorKind.ANCHOR_NOT_FOUND

    def __init__(self, directive: Directive, anchor: str) -> None:
        super().__init__(directive)
        self.source_path: str = directive.source_path
        self.anchor: str = anchor

    @property
    def message(self) -> str:
        return f'text "{self.anchor}" not found in "{self.source_path}".'


class InvertedRangeError(IncludeDocError):
    """The resolved start bound lies after the resolved end bound."""

    kind = ErrorKind.INVERTED_RANGE

    def __init__(self, start: Directive, end: Directive, lower: int, upper: int) -> None:
        super().__init__()
        self.start: Directive = start
        self.end: Directive = end
        self.lower: int = lower
        self.upper: int = upper

    @property
    def message(self) -> str:
        return (
            f'range start (offset {self.lower}) is after range end (offset {self.upper}) '
            f'in "{self.start.source_path}".'
        )

    @property
    def offset(self) -> int:
        return self.start.start

    def spans(self) -> list[tuple[int, int]]:
        return [self.start.span, self.end.span]


class SourceReadError(_SingleDirectiveError):
    """The included file is missing, unreadable or outside the root."""

    kind = ErrorKind.SOURCE_READ_FAILURE

    def __init__(self, directive: Directive, reason: str) -> None:
        super().__init__(directive)
        self.source_path: str = directive.source_path
        self.reason: str = reason

    @property
    def message(self) -> str:
        return f'cannot read "{self.source_path}": {self.reason}'


class GeneratedContentPollutionError(_SingleDirectiveError):
    """The included text itself contains a directive-shaped line."""

    kind = ErrorKind.GENERATED_CONTENT_POLLUTION

    def __init__(
        self,
        directive: Directive,
        source_display: str,
        source_line: int,
        excerpt: str,
    ) -> None:
        super().__init__(directive)
        self.source_display: str = source_display
        self.source_line: int = source_line
        self.excerpt: str = excerpt

    @property
    def message(self) -> str:
        return "included text contains a directive."

    def render(self, rel_path: Path | str, text: str, *, color: bool = False) -> str:
        """Render the directive location followed by the offending included line."""
        head: str = super().render(rel_path, text, color=color)
        return "\n".join(
            [
                head,
                fmt_link(self.source_display, self.source_line),
                fmt_source([(self.source_line, self.excerpt)], color=color),
            ]
        )
