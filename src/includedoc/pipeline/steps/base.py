# topmark:header:start
#
#   project      : IncludeDoc
#   file         : base.py
#   file_relpath : src/includedoc/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → hint
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from includedoc.config.logging import get_logger

if TYPE_CHECKING:
    from includedoc.config.logging import IncludeDocLogger
    from includedoc.pipeline.context import ProcessingContext
    from includedoc.pipeline.status import Axis

logger: IncludeDocLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``,
    ``run()``, and optionally ``hint()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
        primary_axis (Axis | None): The axis this step represents in summaries.
        axes_written (tuple[Axis, ...]): Status axes this step is allowed to write.
    """

    name: str
    primary_axis: Axis | None
    axes_written: tuple[Axis, ...] = ()

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (ProcessingContext): The mutable processing context for the current file.

        Returns:
            ProcessingContext: The same context instance after mutation/hints.
        """
        ctx.steps.append(self)

        if self.may_proceed(ctx):
            logger.debug("Pipeline step %s - running for %s", self.name, ctx.path)
            self.run(ctx)
            if ctx.is_halted:
                logger.debug("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.trace("Pipeline step %s may not proceed", self.name)

        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context.

        Default: run unless the pipeline was halted.
        """
        return not ctx.is_halted

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        raise NotImplementedError

    def hint(self, ctx: ProcessingContext) -> None:
        """Attach non-binding hints/telemetry to ``ctx`` (optional)."""
