# topmark:header:start
#
#   project      : IncludeDoc
#   file         : writer.py
#   file_relpath : src/includedoc/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step for committing updated content to a sink.

This step is the single place where IncludeDoc writes results. It selects a
sink from the configuration:

- `FileSystemSink`: writes in place (UTF-8, newlines preserved exactly).
- `NullSink`: no-op (dry-run); the write status becomes ``PREVIEWED``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from includedoc.config.logging import get_logger
from includedoc.pipeline.status import Axis, WriteStatus
from includedoc.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from includedoc.config.logging import IncludeDocLogger
    from includedoc.pipeline.context import ProcessingContext

logger: IncludeDocLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for write sinks used by the writer step."""

    def write(self, *, ctx: ProcessingContext, text: str) -> WriteResult:
        """Write ``text`` for ``ctx`` to the target sink."""
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, ctx: ProcessingContext, text: str) -> WriteResult:
        """No-op write for dry-run mode."""
        return WriteResult(status=WriteStatus.PREVIEWED, bytes_written=0)


class FileSystemSink:
    """Filesystem sink that writes in place to ``ctx.path``."""

    def write(self, *, ctx: ProcessingContext, text: str) -> WriteResult:
        """Write ``text`` to ``ctx.path`` as UTF-8 without newline translation."""
        with open(ctx.path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        bytes_written: int = len(text.encode("utf-8"))
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, ctx.path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=bytes_written)


def select_sink(ctx: ProcessingContext) -> WriteSink:
    """Return `NullSink` in dry-run mode, else `FileSystemSink`."""
    if ctx.config.dry_run:
        logger.debug("Selected NULL sink (dry run)")
        return NullSink()
    return FileSystemSink()


class WriterStep(BaseStep):
    """Commit the substituted text.

    Axes written:
      - write

    Sets:
      - WriteStatus: {SKIPPED, PREVIEWED, WRITTEN, FAILED}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.WRITE,
            axes_written=(Axis.WRITE,),
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Write the updated text when the file changed.

        Args:
            ctx (ProcessingContext): The processing context for the current file.
        """
        updated: str | None = ctx.updated_text
        if updated is None:
            ctx.status.write = WriteStatus.SKIPPED
            return

        sink: WriteSink = select_sink(ctx)
        try:
            result: WriteResult = sink.write(ctx=ctx, text=updated)
        except OSError as e:
            ctx.status.write = WriteStatus.FAILED
            ctx.error_diagnostic(f"cannot write file: {e.strerror or e}")
            ctx.request_halt(reason=WriteStatus.FAILED.value, at_step=self)
            return
        ctx.status.write = result.status
        logger.trace("Writer result for %s: %s", ctx.rel_path, ctx.to_dict())
