# topmark:header:start
#
#   project      : IncludeDoc
#   file         : model.py
#   file_relpath : src/includedoc/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for IncludeDoc.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable structured diagnostic payload (level + message).
    * DiagnosticLog: mutable per-file collection with helpers for
      adding and querying diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from includedoc.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from includedoc.config.logging import IncludeDocLogger


logger: IncludeDocLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during processing.

    Levels map to terminal colors and are ordered by importance: ERROR > INFO.
    """

    INFO = "info"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message.

    ``detail`` carries an optional pre-rendered, multi-line explanation (location
    link and source excerpt) shown below the message in human output.
    """

    level: DiagnosticLevel
    message: str
    detail: str | None = None


@dataclass
class DiagnosticLog:
    """Mutable, per-file collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str, detail: str | None = None) -> None:
        """Add an ``info`` diagnostic to the log."""
        self._add(Diagnostic(DiagnosticLevel.INFO, message, detail))

    def add_error(self, message: str, detail: str | None = None) -> None:
        """Add an ``error`` diagnostic to the log.

        Args:
            message: The diagnostic message.
            detail: Optional rendered location/excerpt block.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message, detail))

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
