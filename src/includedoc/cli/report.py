# topmark:header:start
#
#   project      : IncludeDoc
#   file         : report.py
#   file_relpath : src/includedoc/cli/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable report of an ``includedoc update`` run.

Per file::

    update : src/lib.rs
      <- ../README.md (changed)

Errors go to stderr with their positioned detail. A final summary line counts
updated, unchanged and failed files.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from yachalk import chalk

from includedoc.api import Outcome
from includedoc.diagnostic.model import DiagnosticLevel
from includedoc.utils.diff import render_patch

if TYPE_CHECKING:
    from includedoc.api import FileResult, RunResult
    from includedoc.cli.console import ConsoleLike


def _label(outcome: Outcome) -> str:
    match outcome:
        case Outcome.CHANGED:
            return "update"
        case Outcome.WOULD_CHANGE:
            return "would update"
        case Outcome.ERROR:
            return "error"
        case _:
            return "unchanged"


def format_file_line(result: FileResult, *, color: bool = False) -> str:
    """Return the ``<label> : <path>`` line for one file."""
    label: str = _label(result.outcome)
    if color:
        if result.outcome == Outcome.ERROR:
            label = DiagnosticLevel.ERROR.color(label)
        elif result.outcome == Outcome.UNCHANGED:
            label = chalk.gray(label)
        else:
            label = chalk.green(label)
    return f"{label} : {result.rel_path}"


def format_summary(result: RunResult) -> str:
    """Return the final ``N file(s): ...`` summary line."""
    n_changed: int = sum(
        1 for f in result.files if f.outcome in (Outcome.CHANGED, Outcome.WOULD_CHANGE)
    )
    n_unchanged: int = result.summary.get(Outcome.UNCHANGED.value, 0)
    n_failed: int = result.summary.get(Outcome.ERROR.value, 0)
    verb: str = "would update" if result.dry_run else "updated"
    line: str = (
        f"{len(result.files)} file(s): {n_changed} {verb}, "
        f"{n_unchanged} unchanged, {n_failed} failed"
    )
    if result.stopped_early:
        line += " (stopped after first failure)"
    return line


def emit_file(console: ConsoleLike, result: FileResult, *, verbosity: int) -> None:
    """Print the report lines for one file."""
    color: bool = console.enable_color
    if result.outcome == Outcome.ERROR:
        console.error(format_file_line(result))
        for diag in result.diagnostics:
            if diag.level != DiagnosticLevel.ERROR:
                continue
            console.note(diag.detail or f"error: {diag.message}")
        return

    if result.outcome == Outcome.UNCHANGED:
        if verbosity <= logging.INFO:
            reason: str = result.substitution.render(color=color)
            console.print(f"{format_file_line(result, color=color)} ({reason})")
        return

    if verbosity > logging.WARNING:
        return
    console.print(format_file_line(result, color=color))
    for source in result.changed_sources:
        console.print(f"  <- {source} (changed)")
    if result.diff:
        console.print(render_patch(result.diff, color=color), nl=False)


def emit_report(console: ConsoleLike, result: RunResult, *, verbosity: int) -> None:
    """Print the per-file lines followed by the summary."""
    for file_result in result.files:
        emit_file(console, file_result, verbosity=verbosity)
    if verbosity <= logging.WARNING:
        console.print(format_summary(result))
