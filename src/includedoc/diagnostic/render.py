# topmark:header:start
#
#   project      : IncludeDoc
#   file         : render.py
#   file_relpath : src/includedoc/diagnostic/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable rendering of source locations and excerpts.

Messages follow a compiler-like layout:

    error: missing matching `end` directive.
    --> src/lib.rs:3
     3 | // #[include_doc("../README.md", start)]

Colors (via `yachalk`) are opt-in so that callers writing to files or running
under test get plain text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


def fmt_link(rel_path: Path | str, line: int, column: int | None = None) -> str:
    """Return a ``--> path:line[:column]`` location link."""
    shown: str = rel_path if isinstance(rel_path, str) else rel_path.as_posix()
    if column is None:
        return f"--> {shown}:{line}"
    return f"--> {shown}:{line}:{column}"


def fmt_source(rows: Iterable[tuple[object, str]], *, color: bool = False) -> str:
    """Render excerpt rows with a right-aligned gutter.

    Args:
        rows (Iterable[tuple[object, str]]): ``(label, content)`` pairs; the label is
            usually a line number. Use ``""`` to omit the gutter label.
        color (bool): Whether to colorize the gutter separator.

    Returns:
        str: The rendered rows joined by newlines (no trailing newline).
    """
    labelled: list[tuple[str, str]] = [(str(label), content) for label, content in rows]
    width: int = max((len(label) for label, _ in labelled), default=0)
    sep: str = chalk.cyan.bold("|") if color else "|"

    out: list[str] = []
    for label, content in labelled:
        gutter: str = f" {label.rjust(width)} " if width else " "
        out.append(f"{gutter}{sep} {content}")
    return "\n".join(out)


def fmt_headline(category: str, message: str, *, color: bool = False) -> str:
    """Return the first line of a rendered diagnostic (``category: message``)."""
    head: str = f"{category}:"
    if color:
        head = chalk.red_bright.bold(head)
    return f"{head} {message}"
