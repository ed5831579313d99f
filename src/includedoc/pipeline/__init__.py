# topmark:header:start
#
#   project      : IncludeDoc
#   file         : __init__.py
#   file_relpath : src/includedoc/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file processing pipeline: read → substitute → patch → write."""

from __future__ import annotations

from includedoc.pipeline.context import FlowControl, ProcessingContext
from includedoc.pipeline.pipelines import PIPELINES, select_pipeline
from includedoc.pipeline.runner import PipelineRun, run, run_files
from includedoc.pipeline.status import ContentStatus, SubstitutionStatus, WriteStatus

__all__ = [
    "ContentStatus",
    "FlowControl",
    "PIPELINES",
    "ProcessingContext",
    "PipelineRun",
    "SubstitutionStatus",
    "WriteStatus",
    "run",
    "run_files",
    "select_pipeline",
]
