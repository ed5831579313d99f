# topmark:header:start
#
#   project      : IncludeDoc
#   file         : reader.py
#   file_relpath : src/includedoc/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File reader step for the IncludeDoc pipeline.

Loads the file as strict UTF-8 text with native newlines preserved, so that
unchanged regions are written back byte for byte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from includedoc.config.logging import get_logger
from includedoc.engine.substitution import read_text_file
from includedoc.pipeline.status import Axis, ContentStatus
from includedoc.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from includedoc.config.logging import IncludeDocLogger
    from includedoc.pipeline.context import ProcessingContext

logger: IncludeDocLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Load the file text and set `ContentStatus`.

    Axes written:
      - content

    Sets:
      - ContentStatus: {OK, NOT_FOUND, NO_READ_PERMISSION, UNICODE_DECODE_ERROR, UNREADABLE}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.CONTENT,
            axes_written=(Axis.CONTENT,),
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Read ``ctx.path`` into ``ctx.text``; halt on failure.

        Args:
            ctx (ProcessingContext): The processing context for the current file.
        """
        try:
            ctx.text = read_text_file(ctx.path)
        except FileNotFoundError:
            self._fail(ctx, ContentStatus.NOT_FOUND, "file not found")
            return
        except PermissionError:
            self._fail(ctx, ContentStatus.NO_READ_PERMISSION, "permission denied")
            return
        except UnicodeDecodeError as e:
            self._fail(ctx, ContentStatus.UNICODE_DECODE_ERROR, f"not valid UTF-8 ({e.reason})")
            return
        except OSError as e:
            self._fail(ctx, ContentStatus.UNREADABLE, e.strerror or str(e))
            return

        ctx.status.content = ContentStatus.OK
        logger.trace("Read %d characters from %s", len(ctx.text), ctx.path)

    def _fail(self, ctx: ProcessingContext, status: ContentStatus, reason: str) -> None:
        ctx.status.content = status
        ctx.error_diagnostic(f"cannot read file: {reason}")
        ctx.request_halt(reason=status.value, at_step=self)
