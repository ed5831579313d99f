# topmark:header:start
#
#   project      : IncludeDoc
#   file         : diff.py
#   file_relpath : src/includedoc/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorized rendering of unified diffs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def render_patch(patch: Sequence[str] | str, *, color: bool = True) -> str:
    """Render a unified diff for display.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        color: Whether to colorize added/removed lines and hunk headers.

    Returns:
        The diff, one display line per diff line, newline-terminated.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines()
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        if not color or not line:
            return line
        match line[0]:
            case "-" if not line.startswith("---"):
                return chalk.red(line)
            case "+" if not line.startswith("+++"):
                return chalk.green(line)
            case "@":
                return chalk.cyan(line)
            case _:
                return chalk.bold(line) if line.startswith(("---", "+++")) else line

    return "".join(f"{process_line(line)}\n" for line in lines)
