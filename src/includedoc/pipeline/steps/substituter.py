# topmark:header:start
#
#   project      : IncludeDoc
#   file         : substituter.py
#   file_relpath : src/includedoc/pipeline/steps/substituter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Substitution step: run the directive engine on the file text.

Engine errors abort the file: the error is kept on the context, rendered into
an error diagnostic and the pipeline halts so nothing is written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from includedoc.config.logging import get_logger
from includedoc.engine.errors import IncludeDocError
from includedoc.engine.substitution import SubstitutionEngine
from includedoc.pipeline.status import Axis, ContentStatus, SubstitutionStatus
from includedoc.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from includedoc.config.logging import IncludeDocLogger
    from includedoc.engine.substitution import SubstitutionOutcome
    from includedoc.pipeline.context import ProcessingContext

logger: IncludeDocLogger = get_logger(__name__)


class SubstituterStep(BaseStep):
    """Substitute every directive pair of the file.

    Axes written:
      - substitution

    Sets:
      - SubstitutionStatus: {NO_DIRECTIVES, UNCHANGED, CHANGED, FAILED}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.SUBSTITUTION,
            axes_written=(Axis.SUBSTITUTION,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only when the file text was read."""
        return (
            not ctx.is_halted and ctx.status.content == ContentStatus.OK and ctx.text is not None
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Run the engine and record the outcome (or the error) on ``ctx``.

        Args:
            ctx (ProcessingContext): The processing context for the current file.
        """
        assert ctx.text is not None, "context.text not defined"

        engine = SubstitutionEngine(ctx.root)
        try:
            outcome: SubstitutionOutcome = engine.substitute(ctx.text, ctx.path)
        except IncludeDocError as e:
            ctx.error = e
            ctx.status.substitution = SubstitutionStatus.FAILED
            ctx.error_diagnostic(e.message, detail=e.render(ctx.rel_path, ctx.text))
            ctx.request_halt(reason=e.kind.value, at_step=self)
            return

        ctx.outcome = outcome
        if not outcome.log:
            ctx.status.substitution = SubstitutionStatus.NO_DIRECTIVES
        elif outcome.modified:
            ctx.status.substitution = SubstitutionStatus.CHANGED
            for source in outcome.changed_sources:
                ctx.info(f"{source} changed")
        else:
            ctx.status.substitution = SubstitutionStatus.UNCHANGED
        logger.debug("%s: %s", ctx.rel_path, ctx.status.substitution.value)
