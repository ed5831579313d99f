# topmark:header:start
#
#   project      : IncludeDoc
#   file         : patcher.py
#   file_relpath : src/includedoc/pipeline/steps/patcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Patch (diff) generation step for the IncludeDoc pipeline.

Compares the original text with the substituted text and attaches a unified
diff to the context. Performs no I/O.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from includedoc.config.logging import get_logger
from includedoc.pipeline.steps.base import BaseStep
from includedoc.utils.diff import render_patch

if TYPE_CHECKING:
    from includedoc.config.logging import IncludeDocLogger
    from includedoc.pipeline.context import ProcessingContext

logger: IncludeDocLogger = get_logger(__name__)


class PatcherStep(BaseStep):
    """Attach a unified diff of pending changes to ``ctx.diff``.

    Writes no status axis.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, primary_axis=None)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only when the substituter found changes."""
        return not ctx.is_halted and ctx.would_change

    def run(self, ctx: ProcessingContext) -> None:
        """Compute the diff between ``ctx.text`` and the updated text.

        Args:
            ctx (ProcessingContext): The processing context for the current file.
        """
        assert ctx.text is not None, "context.text not defined"
        updated: str | None = ctx.updated_text
        if updated is None:
            ctx.diff = None
            return

        patch_lines: list[str] = list(
            difflib.unified_diff(
                ctx.text.splitlines(keepends=True),
                updated.splitlines(keepends=True),
                fromfile=f"{ctx.rel_path} (current)",
                tofile=f"{ctx.rel_path} (updated)",
                n=3,
            )
        )
        if not patch_lines:
            ctx.diff = None
            return

        ctx.diff = "".join(patch_lines)
        logger.trace("Patch (rendered):\n%s", render_patch(patch_lines))
