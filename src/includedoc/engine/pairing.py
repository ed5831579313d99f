# topmark:header:start
#
#   project      : IncludeDoc
#   file         : pairing.py
#   file_relpath : src/includedoc/engine/pairing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pair start and end directives in document order.

The pairer is a two-state machine:

* ``Idle``: no pending start.
* ``AwaitingEnd(start)``: a start directive waits for its end.

Any deviation (malformed line, start while a start is pending, end without
start, end that disagrees with its start, start left open at end of input)
raises the matching `IncludeDocError` subclass. The first error wins; callers
abort processing of the file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from includedoc.config.logging import get_logger
from includedoc.engine.directive import Action, Directive, MalformedDirective
from includedoc.engine.errors import (
    MalformedDirectiveError,
    MismatchedPairError,
    MismatchField,
    UnmatchedEndError,
    UnmatchedStartError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from includedoc.config.logging import IncludeDocLogger
    from includedoc.engine.directive import MatchResult

logger: IncludeDocLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DirectivePair:
    """A start directive and its matching end directive."""

    start: Directive
    end: Directive

    @property
    def source_path(self) -> str:
        """Path of the included file, as written in both directives."""
        return self.start.source_path


def mismatch(start: Directive, end: Directive) -> MismatchField | None:
    """Return which field differs between ``start`` and ``end``, if any.

    Visibility is checked before the path.
    """
    if start.visibility != end.visibility:
        return MismatchField.VISIBILITY
    if start.source_path != end.source_path:
        return MismatchField.PATH
    return None


class DirectivePairer:
    """Incremental pairing state machine.

    Feed parse results with `feed()` in document order, then call `finish()`.
    """

    def __init__(self) -> None:
        self._pending: Directive | None = None

    @property
    def pending(self) -> Directive | None:
        """The start directive awaiting its end, or None when idle."""
        return self._pending

    def feed(self, item: MatchResult) -> DirectivePair | None:
        """Consume one parse result.

        Args:
            item (MatchResult): Next directive (or malformed line) in document order.

        Returns:
            DirectivePair | None: The completed pair when ``item`` closes one.

        Raises:
            MalformedDirectiveError: ``item`` is a malformed directive line.
            UnmatchedStartError: a start arrives while another start is pending.
            UnmatchedEndError: an end arrives while idle.
            MismatchedPairError: the end disagrees with the pending start.
        """
        if isinstance(item, MalformedDirective):
            raise MalformedDirectiveError(item)

        if item.action is Action.START:
            if self._pending is not None:
                logger.debug(
                    "Start at %d while start at %d is pending", item.start, self._pending.start
                )
                raise UnmatchedStartError(self._pending)
            self._pending = item
            return None

        start: Directive | None = self._pending
        if start is None:
            raise UnmatchedEndError(item)

        field: MismatchField | None = mismatch(start, item)
        if field is not None:
            raise MismatchedPairError(start, item, field)

        self._pending = None
        return DirectivePair(start=start, end=item)

    def finish(self) -> None:
        """Check the terminal state.

        Raises:
            UnmatchedStartError: a start directive is still pending.
        """
        if self._pending is not None:
            raise UnmatchedStartError(self._pending)


def pair_directives(results: Iterable[MatchResult]) -> Iterator[DirectivePair]:
    """Yield directive pairs from ``results`` in document order.

    Errors are raised lazily, at the point of the stream where they occur.
    """
    pairer = DirectivePairer()
    for item in results:
        pair: DirectivePair | None = pairer.feed(item)
        if pair is not None:
            logger.trace("Paired %s with %s", pair.start, pair.end)
            yield pair
    pairer.finish()
