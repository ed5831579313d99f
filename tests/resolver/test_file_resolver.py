# topmark:header:start
#
#   project      : IncludeDoc
#   file         : test_file_resolver.py
#   file_relpath : tests/resolver/test_file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for file discovery (`includedoc.file_resolver`).

The resolver walks the root in sorted order, skips hidden entries, honors
``.gitignore`` files at every level and applies extension and include/exclude
filters relative to the root.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from includedoc.file_resolver import load_patterns_from_file, resolve_file_list, walk_files
from tests.conftest import make_config, write_tree

if TYPE_CHECKING:
    from pathlib import Path

    from includedoc.config import Config


def _rel(root: Path, paths: list[Path]) -> list[str]:
    return [p.relative_to(root.resolve()).as_posix() for p in paths]


def _tree(root: Path) -> Path:
    return write_tree(
        root,
        {
            "src/lib.rs": "",
            "src/main.rs": "",
            "src/notes.md": "",
            "src/nested/mod.rs": "",
            "examples/demo.rs": "",
            "target/debug/build.rs": "",
            ".hidden/skip.rs": "",
            ".dot.rs": "",
            "README.md": "",
        },
    )


def test_default_selects_rust_files_in_sorted_order(tmp_path: Path) -> None:
    """Only `.rs` files are selected; hidden entries are skipped."""
    _tree(tmp_path)

    files: list[Path] = resolve_file_list(make_config(tmp_path))

    assert _rel(tmp_path, files) == [
        "examples/demo.rs",
        "src/lib.rs",
        "src/main.rs",
        "src/nested/mod.rs",
        "target/debug/build.rs",
    ]


def test_gitignore_is_honored(tmp_path: Path) -> None:
    """Root and nested .gitignore files exclude matching entries."""
    _tree(tmp_path)
    write_tree(tmp_path, {".gitignore": "# build output\n/target\n", "src/.gitignore": "main.rs\n"})

    files: list[Path] = resolve_file_list(make_config(tmp_path))

    assert _rel(tmp_path, files) == ["examples/demo.rs", "src/lib.rs", "src/nested/mod.rs"]


def test_gitignore_can_be_disabled(tmp_path: Path) -> None:
    """With respect_gitignore off, ignored files are processed."""
    _tree(tmp_path)
    write_tree(tmp_path, {".gitignore": "target/\n"})

    files: list[Path] = resolve_file_list(make_config(tmp_path, respect_gitignore=False))

    assert "target/debug/build.rs" in _rel(tmp_path, files)


def test_extensions_filter(tmp_path: Path) -> None:
    """Configured extensions replace the default `.rs`."""
    _tree(tmp_path)

    files: list[Path] = resolve_file_list(make_config(tmp_path, extensions=[".md"]))

    assert _rel(tmp_path, files) == ["README.md", "src/notes.md"]


def test_include_and_exclude_patterns(tmp_path: Path) -> None:
    """Include keeps matching files only; exclude then removes matches."""
    _tree(tmp_path)

    files: list[Path] = resolve_file_list(
        make_config(tmp_path, include_patterns=["src/"], exclude_patterns=["nested/"])
    )

    assert _rel(tmp_path, files) == ["src/lib.rs", "src/main.rs"]


def test_exclude_glob(tmp_path: Path) -> None:
    """Exclude patterns use gitignore glob syntax."""
    _tree(tmp_path)

    cfg: Config = make_config(tmp_path, exclude_patterns=["main.rs", "/target"])
    files: list[Path] = resolve_file_list(cfg)

    assert _rel(tmp_path, files) == ["examples/demo.rs", "src/lib.rs", "src/nested/mod.rs"]


def test_missing_root_yields_nothing(tmp_path: Path) -> None:
    """A root that is not a directory selects no files."""
    assert resolve_file_list(make_config(tmp_path / "missing")) == []


def test_walk_files_sorted_and_depth_first(tmp_path: Path) -> None:
    """`walk_files` yields every visible file depth-first in name order."""
    write_tree(tmp_path, {"b.txt": "", "a/z.txt": "", "a/b/c.txt": "", "c.txt": ""})

    walked: list[Path] = list(walk_files(tmp_path.resolve()))

    assert _rel(tmp_path, walked) == ["a/b/c.txt", "a/z.txt", "b.txt", "c.txt"]


def test_load_patterns_skips_comments_and_blanks(tmp_path: Path) -> None:
    """Comment and blank lines in pattern files are ignored."""
    write_tree(tmp_path, {"patterns": "# comment\n\n  target/  \n*.bak\n"})

    assert load_patterns_from_file(tmp_path / "patterns") == ["target/", "*.bak"]
    assert load_patterns_from_file(tmp_path / "absent") == []


def test_walk_does_not_follow_directory_links(tmp_path: Path) -> None:
    """A directory link looping back to an ancestor is not descended into."""
    write_tree(tmp_path, {"src/lib.rs": ""})
    (tmp_path / "src" / "up").symlink_to(tmp_path, target_is_directory=True)

    walked: list[Path] = list(walk_files(tmp_path.resolve()))

    assert _rel(tmp_path, walked) == ["src/lib.rs"]


def test_links_out_of_root_are_not_selected(tmp_path: Path) -> None:
    """Linked files and directories outside the root are never selected."""
    root: Path = tmp_path / "crate"
    write_tree(tmp_path, {"outside/mod.rs": "", "other.rs": "", "crate/src/lib.rs": ""})
    (root / "src" / "ext").symlink_to(tmp_path / "outside", target_is_directory=True)
    (root / "src" / "other.rs").symlink_to(tmp_path / "other.rs")

    files: list[Path] = resolve_file_list(make_config(root))

    assert _rel(root, files) == ["src/lib.rs"]
