# topmark:header:start
#
#   project      : IncludeDoc
#   file         : api.py
#   file_relpath : src/includedoc/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public IncludeDoc API (stable surface).

This module exposes a **small, typed API** for integrations that want to run
IncludeDoc programmatically without going through the CLI:

- `process_text`: substitute the directives of one in-memory text.
- `build_config`: resolve the layered configuration for a root directory.
- `run`: process every file selected by a `Config`.
- `update`: `build_config` followed by `run`.

Writes are performed exclusively by the pipeline writer step; the API only
reports the statuses the pipeline determined.

```python
from includedoc import api

result = api.update("path/to/crate", dry_run=True)
for f in result.files:
    print(f.rel_path, f.outcome.value)
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from includedoc.config import Config, MutableConfig
from includedoc.config.logging import get_logger
from includedoc.constants import INCLUDEDOC_VERSION
from includedoc.engine.substitution import SubstitutionEngine
from includedoc.file_resolver import resolve_file_list
from includedoc.pipeline.pipelines import select_pipeline
from includedoc.pipeline.runner import run_files
from includedoc.pipeline.status import SubstitutionStatus

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from includedoc.config.logging import IncludeDocLogger
    from includedoc.diagnostic.model import Diagnostic
    from includedoc.engine.errors import ErrorKind
    from includedoc.engine.substitution import ReadSource, SubstitutionOutcome
    from includedoc.pipeline.context import ProcessingContext
    from includedoc.pipeline.runner import PipelineRun

logger: IncludeDocLogger = get_logger(__name__)

__all__ = [
    "FileResult",
    "Outcome",
    "RunResult",
    "build_config",
    "process_text",
    "run",
    "update",
    "version",
]


class Outcome(str, Enum):
    """Per-file outcome bucket.

    Values mirror CLI semantics:
      - ``UNCHANGED``: every block is up to date (or the file has no directives).
      - ``WOULD_CHANGE``: dry run detected pending changes.
      - ``CHANGED``: the file was rewritten.
      - ``ERROR``: the file failed to process; nothing was written.
    """

    UNCHANGED = "unchanged"
    WOULD_CHANGE = "would_change"
    CHANGED = "changed"
    ERROR = "error"


@dataclass(frozen=True)
class FileResult:
    """Result for a single file.

    Attributes:
        path (Path): Path of the processed file.
        rel_path (str): Path relative to the root, POSIX style.
        outcome (Outcome): High-level outcome bucket.
        changed_sources (tuple[str, ...]): Included paths (as written in the
            directives) whose block changed.
        diff (str | None): Unified diff when requested and applicable.
        diagnostics (tuple[Diagnostic, ...]): Diagnostics collected for the file.
        error_kind (ErrorKind | None): Category of the engine error, if any.
        substitution (SubstitutionStatus): Engine status of the file (why it
            is unchanged, for instance).
    """

    path: Path
    rel_path: str
    outcome: Outcome
    changed_sources: tuple[str, ...] = ()
    diff: str | None = None
    diagnostics: tuple[Diagnostic, ...] = ()
    error_kind: ErrorKind | None = None
    substitution: SubstitutionStatus = SubstitutionStatus.PENDING


@dataclass(frozen=True)
class RunResult:
    """Aggregate result of a run.

    Attributes:
        files (Sequence[FileResult]): Per-file results in processing order.
        summary (Mapping[str, int]): Count per `Outcome` value.
        had_errors (bool): True if any file failed.
        stopped_early (bool): True if fail-fast stopped the run.
        dry_run (bool): Whether the run was a dry run.
    """

    files: Sequence[FileResult]
    summary: Mapping[str, int] = field(default_factory=lambda: {})
    had_errors: bool = False
    stopped_early: bool = False
    dry_run: bool = False

    @property
    def would_change(self) -> bool:
        """Return True if a dry run found pending changes."""
        return any(f.outcome == Outcome.WOULD_CHANGE for f in self.files)

    @property
    def written(self) -> int:
        """Number of files rewritten."""
        return sum(1 for f in self.files if f.outcome == Outcome.CHANGED)


def classify_outcome(ctx: ProcessingContext, *, dry_run: bool) -> Outcome:
    """Map a processing context to its public `Outcome`."""
    if ctx.failed:
        return Outcome.ERROR
    if ctx.updated:
        return Outcome.WOULD_CHANGE if dry_run else Outcome.CHANGED
    return Outcome.UNCHANGED


def to_file_result(ctx: ProcessingContext, *, dry_run: bool) -> FileResult:
    """Convert a processing context into a public `FileResult`."""
    return FileResult(
        path=ctx.path,
        rel_path=ctx.rel_path,
        outcome=classify_outcome(ctx, dry_run=dry_run),
        changed_sources=tuple(ctx.changed_sources),
        diff=ctx.diff,
        diagnostics=tuple(ctx.diagnostics),
        error_kind=ctx.error.kind if ctx.error is not None else None,
        substitution=ctx.status.substitution,
    )


def summarize(files: Iterable[FileResult]) -> dict[str, int]:
    """Return the number of files per outcome (every bucket present)."""
    counts: dict[str, int] = {o.value: 0 for o in Outcome}
    for f in files:
        counts[f.outcome.value] += 1
    return counts


def process_text(
    text: str,
    *,
    path: Path | str,
    root: Path | str,
    read_source: ReadSource | None = None,
) -> SubstitutionOutcome:
    """Substitute the directives of ``text`` as if it were the file at ``path``.

    Args:
        text (str): Content to process.
        path (Path | str): Location of the text; included paths are relative to its directory.
        root (Path | str): Directory every included file must live in.
        read_source (ReadSource | None): Optional reader for included files.

    Returns:
        SubstitutionOutcome: The substituted text and per-pair log.

    Raises:
        IncludeDocError: On the first directive, range or source failure.
    """
    engine = (
        SubstitutionEngine(Path(root))
        if read_source is None
        else SubstitutionEngine(Path(root), read_source=read_source)
    )
    return engine.substitute(text, Path(path))


def build_config(
    root: Path | str,
    *,
    config_files: Iterable[Path | str] = (),
    discover: bool = True,
    config: Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Config:
    """Resolve the effective configuration for ``root``.

    Layers (later wins): defaults → discovered config files in ``root`` →
    ``config_files`` → the ``config`` mapping (TOML shape) → keyword overrides
    (``MutableConfig`` field names, ``None`` meaning "not set").

    Raises:
        ConfigError: A config file cannot be read or parsed.
    """
    root_path: Path = Path(root)
    draft: MutableConfig = MutableConfig.load_merged(
        root_path,
        extra_config_files=[Path(p) for p in config_files],
        discover=discover,
    )
    if config is not None:
        draft.merge_with(MutableConfig.from_toml_dict(dict(config)))
        draft.root = root_path
    draft.apply_overrides(**overrides)
    return draft.freeze()


def run(config: Config, files: Iterable[Path] | None = None) -> RunResult:
    """Process the files selected by ``config`` (or the given ``files``).

    Args:
        config (Config): Effective configuration.
        files (Iterable[Path] | None): Explicit file list; discovered from
            ``config`` when None.

    Returns:
        RunResult: Per-file outcomes and counts.
    """
    file_list: list[Path] = list(files) if files is not None else resolve_file_list(config)
    logger.info("Processing %d file(s) under %s", len(file_list), config.root)
    pipeline_run: PipelineRun = run_files(
        config, file_list, select_pipeline(show_diff=config.show_diff)
    )
    results: list[FileResult] = [
        to_file_result(ctx, dry_run=config.dry_run) for ctx in pipeline_run.contexts
    ]
    return RunResult(
        files=results,
        summary=summarize(results),
        had_errors=any(r.outcome == Outcome.ERROR for r in results),
        stopped_early=pipeline_run.stopped_early,
        dry_run=config.dry_run,
    )


def update(
    root: Path | str,
    *,
    dry_run: bool = False,
    diff: bool = False,
    fail_fast: bool = False,
    config: Mapping[str, Any] | None = None,
) -> RunResult:
    """Update every include_doc block below ``root``.

    This is the programmatic equivalent of ``includedoc update ROOT``.
    """
    cfg: Config = build_config(
        root,
        config=config,
        dry_run=dry_run or None,
        show_diff=diff or None,
        fail_fast=fail_fast or None,
    )
    return run(cfg)


def version() -> str:
    """Return the installed IncludeDoc version."""
    return INCLUDEDOC_VERSION
