# topmark:header:start
#
#   project      : IncludeDoc
#   file         : context.py
#   file_relpath : src/includedoc/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context model for the IncludeDoc pipeline.

A `ProcessingContext` carries the complete, mutable state of one file as it
flows through the pipeline steps: configuration, the original and updated
text, per-axis status, the engine outcome or error, the diff and the collected
diagnostics.

`FlowControl` lets a step request early, graceful termination of the pipeline
for the current file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from includedoc.config.logging import get_logger
from includedoc.diagnostic.model import DiagnosticLog
from includedoc.pipeline.status import ProcessingStatus, SubstitutionStatus, WriteStatus

if TYPE_CHECKING:
    from pathlib import Path

    from includedoc.config import Config
    from includedoc.config.logging import IncludeDocLogger
    from includedoc.engine.errors import IncludeDocError
    from includedoc.engine.substitution import SubstitutionOutcome
    from includedoc.pipeline.steps.base import BaseStep

logger: IncludeDocLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "ProcessingContext",
]


@dataclass
class FlowControl:
    """Execution flow control for the current file."""

    halt: bool = False
    reason: str = ""
    at_step: str = ""


@dataclass
class ProcessingContext:
    """State of a single file in the IncludeDoc pipeline.

    Attributes:
        path (Path): The file to process.
        config (Config): Effective configuration at the time of processing.
        steps (list[BaseStep]): Steps executed so far, in order.
        status (ProcessingStatus): Per-axis status of the file.
        flow (FlowControl): Halt flag and reason.
        text (str | None): Original file text (set by the reader).
        outcome (SubstitutionOutcome | None): Engine result (set by the substituter).
        error (IncludeDocError | None): Engine error that aborted the file, if any.
        diff (str | None): Unified diff between original and updated text.
        diagnostics (DiagnosticLog): Diagnostics collected while processing.
    """

    path: Path
    config: Config
    steps: list[BaseStep] = field(default_factory=lambda: [])
    status: ProcessingStatus = field(default_factory=ProcessingStatus)
    flow: FlowControl = field(default_factory=FlowControl)

    text: str | None = None
    outcome: SubstitutionOutcome | None = None
    error: IncludeDocError | None = None
    diff: str | None = None

    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def bootstrap(cls, *, path: Path, config: Config) -> ProcessingContext:
        """Create a fresh context for ``path``."""
        return cls(path=path, config=config)

    @property
    def root(self) -> Path:
        """Root directory included files must live in."""
        return self.config.root

    @property
    def rel_path(self) -> str:
        """Display path of the file relative to the root (POSIX style)."""
        try:
            return self.path.resolve().relative_to(self.root).as_posix()
        except ValueError:
            return self.path.as_posix()

    @property
    def is_halted(self) -> bool:
        """Return True if a step requested the pipeline to stop."""
        return self.flow.halt

    def request_halt(self, reason: str, at_step: BaseStep) -> None:
        """Stop the pipeline for this file after the current step."""
        self.flow.halt = True
        self.flow.reason = reason
        self.flow.at_step = at_step.name
        logger.debug("Halt requested by %s for %s: %s", at_step.name, self.path, reason)

    @property
    def updated_text(self) -> str | None:
        """The substituted text when it differs from the original, else None."""
        if self.outcome is None or not self.outcome.modified:
            return None
        return self.outcome.text

    @property
    def would_change(self) -> bool:
        """Return True if the file needs rewriting."""
        return self.status.substitution == SubstitutionStatus.CHANGED

    @property
    def failed(self) -> bool:
        """Return True if reading, substituting or writing the file failed."""
        return self.diagnostics.has_error()

    @property
    def changed_sources(self) -> list[str]:
        """Included paths (as written) whose block changed."""
        return self.outcome.changed_sources if self.outcome is not None else []

    @property
    def updated(self) -> bool:
        """Return True if the file was (or, in dry-run, would be) rewritten."""
        return self.status.write in (WriteStatus.WRITTEN, WriteStatus.PREVIEWED)

    # ------------------------------ Diagnostics ------------------------------
    def info(self, message: str) -> None:
        """Add an info diagnostic."""
        self.diagnostics.add_info(message)

    def error_diagnostic(self, message: str, detail: str | None = None) -> None:
        """Add an error diagnostic and log it."""
        logger.error("%s: %s", self.rel_path, message)
        self.diagnostics.add_error(message, detail)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly summary of the context."""
        return {
            "path": self.rel_path,
            "status": {
                "content": self.status.content.name,
                "substitution": self.status.substitution.name,
                "write": self.status.write.name,
            },
            "changed_sources": self.changed_sources,
            "diagnostics": [
                {"level": d.level.value, "message": d.message} for d in self.diagnostics
            ],
        }
