# topmark:header:start
#
#   project      : IncludeDoc
#   file         : pipelines.py
#   file_relpath : src/includedoc/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants (immutable step sequences).

- ``UPDATE``: read → substitute → write
- ``UPDATE_PATCH``: read → substitute → patch → write
"""

from __future__ import annotations

from typing import Final

from includedoc.pipeline.steps.base import BaseStep
from includedoc.pipeline.steps.patcher import PatcherStep
from includedoc.pipeline.steps.reader import ReaderStep
from includedoc.pipeline.steps.substituter import SubstituterStep
from includedoc.pipeline.steps.writer import WriterStep

UPDATE_PIPELINE: Final[tuple[BaseStep, ...]] = (
    ReaderStep(),
    SubstituterStep(),
    WriterStep(),
)

UPDATE_PATCH_PIPELINE: Final[tuple[BaseStep, ...]] = (
    ReaderStep(),
    SubstituterStep(),
    PatcherStep(),
    WriterStep(),
)

PIPELINES: Final[dict[str, tuple[BaseStep, ...]]] = {
    "update": UPDATE_PIPELINE,
    "update-patch": UPDATE_PATCH_PIPELINE,
}


def select_pipeline(*, show_diff: bool) -> tuple[BaseStep, ...]:
    """Return the pipeline for the requested output."""
    return PIPELINES["update-patch" if show_diff else "update"]
