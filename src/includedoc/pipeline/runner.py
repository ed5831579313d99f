# topmark:header:start
#
#   project      : IncludeDoc
#   file         : runner.py
#   file_relpath : src/includedoc/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the IncludeDoc pipeline for one file or for a list of files.

Files are processed sequentially and independently: a failure in one file
never affects another. With ``fail_fast`` the run stops after the first file
that failed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from includedoc.config.logging import get_logger
from includedoc.pipeline.context import ProcessingContext

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from includedoc.config import Config
    from includedoc.config.logging import IncludeDocLogger
    from includedoc.pipeline.steps.base import BaseStep

logger: IncludeDocLogger = get_logger(__name__)


@dataclass
class PipelineRun:
    """Processing contexts of a run, in processing order.

    Attributes:
        contexts (list[ProcessingContext]): One context per processed file.
        stopped_early (bool): True if ``fail_fast`` cut the run short.
    """

    contexts: list[ProcessingContext] = field(default_factory=lambda: [])
    stopped_early: bool = False

    @property
    def updated(self) -> list[ProcessingContext]:
        """Files that were (or would be) rewritten."""
        return [c for c in self.contexts if c.updated]

    @property
    def failed(self) -> list[ProcessingContext]:
        """Files that failed."""
        return [c for c in self.contexts if c.failed]

    @property
    def unchanged(self) -> list[ProcessingContext]:
        """Files that neither changed nor failed."""
        return [c for c in self.contexts if not c.updated and not c.failed]


def run(ctx: ProcessingContext, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Execute the pipeline sequentially on one context.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered sequence of pipeline steps.

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    for step in steps:
        ctx = step(ctx)
    return ctx


def run_files(
    config: Config,
    files: Iterable[Path],
    steps: Sequence[BaseStep],
) -> PipelineRun:
    """Run ``steps`` on every file in order.

    Args:
        config (Config): Effective configuration.
        files (Iterable[Path]): Files to process.
        steps (Sequence[BaseStep]): The pipeline to run per file.

    Returns:
        PipelineRun: All contexts, with ``stopped_early`` set when ``config.fail_fast``
        stopped the run.
    """
    result = PipelineRun()
    for path in files:
        ctx: ProcessingContext = run(ProcessingContext.bootstrap(path=path, config=config), steps)
        result.contexts.append(ctx)
        if ctx.failed and config.fail_fast:
            logger.info("Stopping after first failure (fail-fast): %s", ctx.rel_path)
            result.stopped_early = True
            break
    logger.debug(
        "Run finished: %d updated, %d unchanged, %d failed",
        len(result.updated),
        len(result.unchanged),
        len(result.failed),
    )
    return result
