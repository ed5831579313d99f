# topmark:header:start
#
#   project      : IncludeDoc
#   file         : directive.py
#   file_relpath : src/includedoc/engine/directive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive data model and the marker comment matcher.

A directive is a single line comment shaped like a Rust attribute:

    // #[include_doc("../README.md", start)]
    // #![include_doc("../README.md", end("## License"))]

`DirectivePattern` scans a text and yields, in document order, either a parsed
`Directive` or a `MalformedDirective` for every line that *looks like* a
directive (comment marker followed by ``#[include_doc ...]``) but does not match
the detailed grammar. Malformed lines are reported rather than skipped so that
typos surface as errors.

Directives keep offsets into their owning text; substrings are only taken when
a message or block is rendered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, Union

from includedoc.config.logging import get_logger
from includedoc.constants import DIRECTIVE_NAME, INNER_DOC_PREFIX, OUTER_DOC_PREFIX

if TYPE_CHECKING:
    from collections.abc import Iterator

    from includedoc.config.logging import IncludeDocLogger

logger: IncludeDocLogger = get_logger(__name__)

Span = tuple[int, int]


class Visibility(Enum):
    """Which doc comment flavour the rendered block uses."""

    INNER = "inner"
    OUTER = "outer"

    @property
    def doc_comment_prefix(self) -> str:
        """Return the per-line prefix for rendered doc comments."""
        return INNER_DOC_PREFIX if self is Visibility.INNER else OUTER_DOC_PREFIX


class Action(Enum):
    """Role of a directive within a start/end pair."""

    START = "start"
    END = "end"


@dataclass(frozen=True, slots=True)
class NoArgument:
    """No boundary argument: whole-file bound."""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class LineFromStart:
    """Boundary at the first character of 1-based line ``line``."""

    line: int

    def __str__(self) -> str:
        return f"({self.line})"


@dataclass(frozen=True, slots=True)
class LineFromEnd:
    """Boundary ``count`` newlines back from the end of the text."""

    count: int

    def __str__(self) -> str:
        return f"(-{self.count})"


@dataclass(frozen=True, slots=True)
class AnchorText:
    """Boundary at an occurrence of a literal text fragment."""

    text: str

    def __str__(self) -> str:
        return f'("{self.text}")'


Argument = Union[NoArgument, LineFromStart, LineFromEnd, AnchorText]

NO_ARGUMENT: Final[NoArgument] = NoArgument()


@dataclass(frozen=True, slots=True)
class Directive:
    """One recognized marker comment.

    Attributes:
        span (Span): Offsets of the whole marker line (indentation included,
            newline excluded) in the containing text.
        source_path (str): Path written inside the marker, relative to the
            directory of the containing file.
        visibility (Visibility): Inner (``#!``) or outer (``#``) attribute.
        action (Action): Start or end of the inclusion region.
        argument (Argument): Boundary selector for the included text.
    """

    span: Span
    source_path: str
    visibility: Visibility
    action: Action
    argument: Argument = NO_ARGUMENT

    @property
    def start(self) -> int:
        """Offset of the first character of the marker line."""
        return self.span[0]

    @property
    def end(self) -> int:
        """Offset right after the marker line (before its newline)."""
        return self.span[1]

    def excerpt(self, text: str) -> str:
        """Return the marker line as it appears in ``text``."""
        return text[self.start : self.end]

    def __str__(self) -> str:
        bang: str = "!" if self.visibility is Visibility.INNER else ""
        return (
            f'// #{bang}[{DIRECTIVE_NAME}("{self.source_path}", '
            f"{self.action.value}{self.argument})]"
        )


@dataclass(frozen=True, slots=True)
class MalformedDirective:
    """A line shaped like a directive that failed the detailed grammar."""

    span: Span

    @property
    def start(self) -> int:
        """Offset of the first character of the offending line."""
        return self.span[0]

    @property
    def end(self) -> int:
        """Offset right after the offending line."""
        return self.span[1]

    def excerpt(self, text: str) -> str:
        """Return the offending line as it appears in ``text``."""
        return text[self.start : self.end]


MatchResult = Union[Directive, MalformedDirective]

_WS: Final[str] = r"[ \t]*"

DIRECTIVE_REGEX: Final[str] = (
    rf"^{_WS}//{_WS}#(?P<bang>!?)\[{_WS}{DIRECTIVE_NAME}"
    r"(?:"
    rf"{_WS}\({_WS}\"(?P<path>[^\"]*)\"{_WS},{_WS}(?P<action>start|end){_WS}"
    rf"(?:\({_WS}(?:\"(?P<text>[^\"]*)\"|(?P<neg>-)?(?P<num>[0-9]+)){_WS}\){_WS})?"
    rf"\){_WS}"
    r"|.*"
    rf")\]{_WS}$"
)


class DirectivePattern:
    """Compiled directive grammar.

    Build one instance and pass it to whoever needs to scan text; the module-level
    `DEFAULT_PATTERN` is the shared instance used by the engine.
    """

    __slots__ = ("_regex",)

    def __init__(self, regex: str = DIRECTIVE_REGEX) -> None:
        self._regex: re.Pattern[str] = re.compile(regex, re.MULTILINE)

    @property
    def regex(self) -> re.Pattern[str]:
        """The compiled regular expression."""
        return self._regex

    def find_iter(self, text: str) -> Iterator[MatchResult]:
        """Yield a parse result for every directive-shaped line in ``text``.

        Args:
            text (str): Full text of one source file.

        Yields:
            MatchResult: A `Directive` for well-formed lines, a `MalformedDirective`
                for lines that look like directives but do not parse.
        """
        for m in self._regex.finditer(text):
            directive: Directive | None = _directive_from_match(m)
            if directive is None:
                logger.debug("Malformed directive at %d..%d: %r", m.start(), m.end(), m.group(0))
                yield MalformedDirective(span=m.span())
            else:
                logger.trace("Directive at %d..%d: %s", m.start(), m.end(), directive)
                yield directive

    def probe(self, text: str) -> Span | None:
        """Return the span of the first directive-shaped line in ``text``, if any."""
        m: re.Match[str] | None = self._regex.search(text)
        return m.span() if m else None


def _directive_from_match(m: re.Match[str]) -> Directive | None:
    path: str | None = m.group("path")
    action: str | None = m.group("action")
    if path is None or action is None:
        return None

    argument: Argument
    if m.group("text") is not None:
        argument = AnchorText(m.group("text"))
    elif m.group("num") is not None:
        value = int(m.group("num"))
        argument = LineFromEnd(value) if m.group("neg") else LineFromStart(value)
    else:
        argument = NO_ARGUMENT

    return Directive(
        span=m.span(),
        source_path=path,
        visibility=Visibility.INNER if m.group("bang") else Visibility.OUTER,
        action=Action(action),
        argument=argument,
    )


DEFAULT_PATTERN: Final[DirectivePattern] = DirectivePattern()


def find_directives(
    text: str, pattern: DirectivePattern = DEFAULT_PATTERN
) -> Iterator[MatchResult]:
    """Shortcut for ``pattern.find_iter(text)``."""
    return pattern.find_iter(text)


def probe_directive(text: str, pattern: DirectivePattern = DEFAULT_PATTERN) -> Span | None:
    """Shortcut for ``pattern.probe(text)``."""
    return pattern.probe(text)
