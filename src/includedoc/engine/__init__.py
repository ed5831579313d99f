# topmark:header:start
#
#   project      : IncludeDoc
#   file         : __init__.py
#   file_relpath : src/includedoc/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The directive engine: matching, pairing, range resolution and substitution.

The engine is pure with respect to the file being processed: it receives the
file's text and returns the substituted text. Included files are read through a
caller-supplied callable.
"""

from __future__ import annotations

from includedoc.engine.directive import (
    DEFAULT_PATTERN,
    Action,
    AnchorText,
    Argument,
    Directive,
    DirectivePattern,
    LineFromEnd,
    LineFromStart,
    MalformedDirective,
    MatchResult,
    NoArgument,
    Visibility,
    find_directives,
    probe_directive,
)
from includedoc.engine.errors import (
    AnchorNotFoundError,
    ErrorKind,
    GeneratedContentPollutionError,
    IncludeDocError,
    InvertedRangeError,
    MalformedDirectiveError,
    MismatchedPairError,
    MismatchField,
    SourceReadError,
    UnmatchedEndError,
    UnmatchedStartError,
)
from includedoc.engine.pairing import DirectivePair, DirectivePairer, pair_directives
from includedoc.engine.ranges import ResolvedRange, resolve_range
from includedoc.engine.render import render_block
from includedoc.engine.substitution import (
    PairLogEntry,
    SubstitutionEngine,
    SubstitutionOutcome,
    read_text_file,
    substitute,
)
from includedoc.engine.text_pos import TextPos

__all__ = [
    "DEFAULT_PATTERN",
    "Action",
    "AnchorNotFoundError",
    "AnchorText",
    "Argument",
    "Directive",
    "DirectivePair",
    "DirectivePairer",
    "DirectivePattern",
    "ErrorKind",
    "GeneratedContentPollutionError",
    "IncludeDocError",
    "InvertedRangeError",
    "LineFromEnd",
    "LineFromStart",
    "MalformedDirective",
    "MalformedDirectiveError",
    "MatchResult",
    "MismatchField",
    "MismatchedPairError",
    "NoArgument",
    "PairLogEntry",
    "ResolvedRange",
    "SourceReadError",
    "SubstitutionEngine",
    "SubstitutionOutcome",
    "TextPos",
    "UnmatchedEndError",
    "UnmatchedStartError",
    "Visibility",
    "find_directives",
    "pair_directives",
    "probe_directive",
    "read_text_file",
    "render_block",
    "resolve_range",
    "substitute",
]
