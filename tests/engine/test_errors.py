# topmark:header:start
#
#   project      : IncludeDoc
#   file         : test_errors.py
#   file_relpath : tests/engine/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for positioned rendering of engine errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from includedoc.engine.directive import find_directives
from includedoc.engine.errors import (
    GeneratedContentPollutionError,
    IncludeDocError,
    MalformedDirectiveError,
    MismatchedPairError,
    UnmatchedStartError,
)
from includedoc.engine.pairing import pair_directives
from includedoc.engine.substitution import substitute
from tests.conftest import mark_engine, write_tree

if TYPE_CHECKING:
    from pathlib import Path


def _pairing_error(text: str) -> IncludeDocError:
    with pytest.raises(IncludeDocError) as excinfo:
        list(pair_directives(find_directives(text)))
    return excinfo.value


@mark_engine
def test_render_single_directive_error() -> None:
    """Single-directive errors show headline, link and the quoted marker line."""
    text = 'fn a() {}\n// #[include_doc("a.md", start)]\n'

    err: IncludeDocError = _pairing_error(text)

    assert isinstance(err, UnmatchedStartError)
    assert err.line(text) == 2
    assert str(err.position(text)) == "2:1"
    assert err.render("src/lib.rs", text) == (
        "error: missing matching `end` directive.\n"
        "--> src/lib.rs:2:1\n"
        ' 2 | // #[include_doc("a.md", start)]'
    )


@mark_engine
def test_render_pair_error_quotes_both_lines() -> None:
    """Pair errors quote start and end lines with an aligned gutter."""
    lines: list[str] = ['// #[include_doc("a.md", start)]'] + ["//"] * 8
    lines.append('// #[include_doc("b.md", end)]')
    text: str = "\n".join(lines) + "\n"

    err: IncludeDocError = _pairing_error(text)

    assert isinstance(err, MismatchedPairError)
    assert err.render("lib.rs", text).splitlines() == [
        "error: mismatched include path.",
        "--> lib.rs:1:1",
        '  1 | // #[include_doc("a.md", start)]',
        ' 10 | // #[include_doc("b.md", end)]',
    ]


@mark_engine
def test_malformed_directive_str_is_message() -> None:
    """`str(error)` is the one-line message."""
    err: IncludeDocError = _pairing_error("// #[include_doc(oops)]\n")

    assert isinstance(err, MalformedDirectiveError)
    assert str(err) == "invalid directive."


@mark_engine
def test_render_pollution_points_into_included_file(tmp_path: Path) -> None:
    """Pollution errors add the location of the offending included line."""
    write_tree(tmp_path, {"lib.txt": 'a\nb\n// #[include_doc("z", end)]\n'})
    text = '// #[include_doc("lib.txt", start)]\n// #[include_doc("lib.txt", end)]\n'

    with pytest.raises(GeneratedContentPollutionError) as excinfo:
        substitute(text, path=tmp_path / "lib.rs", root=tmp_path)

    assert excinfo.value.render("lib.rs", text).splitlines() == [
        "error: included text contains a directive.",
        "--> lib.rs:1:1",
        ' 1 | // #[include_doc("lib.txt", start)]',
        "--> lib.txt:3",
        ' 3 | // #[include_doc("z", end)]',
    ]


@mark_engine
def test_render_with_color_keeps_text() -> None:
    """Colored rendering still contains the plain message and excerpt."""
    text = '// #[include_doc("a.md", end)]\n'

    rendered: str = _pairing_error(text).render("lib.rs", text, color=True)

    assert "missing matching `start` directive." in rendered
    assert '// #[include_doc("a.md", end)]' in rendered
