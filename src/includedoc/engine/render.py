# topmark:header:start
#
#   project      : IncludeDoc
#   file         : render.py
#   file_relpath : src/includedoc/engine/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render included text as a doc comment block."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from includedoc.engine.directive import Visibility


def render_lines(text: str) -> list[str]:
    """Split ``text`` into lines without terminators (LF or CRLF)."""
    if not text:
        return []
    return [line.removesuffix("\r") for line in text.split("\n")]


def render_block(text: str, visibility: Visibility) -> str:
    """Render ``text`` as newline-terminated doc comment lines.

    Empty lines get the bare prefix (``///`` / ``//!``) so the block carries no
    trailing whitespace.

    Args:
        text (str): Resolved range text from the included file.
        visibility (Visibility): Selects the ``//!`` or ``///`` prefix.

    Returns:
        str: The rendered block; empty when ``text`` is empty.
    """
    prefix: str = visibility.doc_comment_prefix
    bare: str = prefix.rstrip()
    return "".join(f"{prefix}{line}\n" if line else f"{bare}\n" for line in render_lines(text))
