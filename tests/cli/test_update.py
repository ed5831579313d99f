# topmark:header:start
#
#   project      : IncludeDoc
#   file         : test_update.py
#   file_relpath : tests/cli/test_update.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `includedoc update`: report lines, writes and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_FAILURE,
    assert_SUCCESS,
    assert_WOULD_CHANGE,
    run_cli_in,
)
from tests.conftest import mark_cli, read_file, write_tree

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

START = '// #[include_doc("../README.md", start)]'
END = '// #[include_doc("../README.md", end)]'
STALE: str = f"{START}\n/// old\n{END}\npub fn f() {{}}\n"
FRESH: str = f"{START}\n/// Hello.\n{END}\npub fn f() {{}}\n"
BROKEN = '// #[include_doc("../README.md", start)]\n'


def _crate(root: Path, **extra: str) -> Path:
    files: dict[str, str] = {"README.md": "Hello.\n", "src/lib.rs": STALE}
    files.update(extra)
    return write_tree(root, files)


@mark_cli
def test_update_rewrites_stale_blocks(tmp_path: Path) -> None:
    """Changed files are rewritten and reported with the changed sources."""
    _crate(tmp_path)

    result: Result = run_cli_in(tmp_path, ["update"])

    assert_SUCCESS(result)
    assert "update : src/lib.rs" in result.output
    assert "  <- ../README.md (changed)" in result.output
    assert "1 file(s): 1 updated, 0 unchanged, 0 failed" in result.output
    assert read_file(tmp_path / "src" / "lib.rs") == FRESH


@mark_cli
def test_update_twice_is_a_no_op(tmp_path: Path) -> None:
    """A second run finds everything up to date and lists nothing by default."""
    _crate(tmp_path)
    run_cli_in(tmp_path, ["update"])

    result: Result = run_cli_in(tmp_path, ["update", "."])

    assert_SUCCESS(result)
    assert "update : " not in result.output
    assert "1 file(s): 0 updated, 1 unchanged, 0 failed" in result.output


@mark_cli
def test_verbose_lists_unchanged_files_with_reason(tmp_path: Path) -> None:
    """With -v, unchanged files are listed with the reason."""
    _crate(tmp_path, **{"src/lib.rs": FRESH, "src/main.rs": "fn main() {}\n"})

    result: Result = run_cli_in(tmp_path, ["-v", "update"])

    assert_SUCCESS(result)
    assert "unchanged : src/lib.rs (up to date)" in result.output
    assert "unchanged : src/main.rs (no directives)" in result.output


@mark_cli
def test_dry_run_reports_and_exits_2(tmp_path: Path) -> None:
    """--dry-run writes nothing and exits with WOULD_CHANGE."""
    _crate(tmp_path)

    result: Result = run_cli_in(tmp_path, ["update", "--dry-run"])

    assert_WOULD_CHANGE(result)
    assert "would update : src/lib.rs" in result.output
    assert "1 file(s): 1 would update, 0 unchanged, 0 failed" in result.output
    assert read_file(tmp_path / "src" / "lib.rs") == STALE


@mark_cli
def test_dry_run_clean_tree_exits_0(tmp_path: Path) -> None:
    """--dry-run on an up-to-date tree succeeds."""
    _crate(tmp_path, **{"src/lib.rs": FRESH})

    assert_SUCCESS(run_cli_in(tmp_path, ["update", "--dry-run"]))


@mark_cli
def test_diff_output(tmp_path: Path) -> None:
    """--diff prints a unified diff of the pending change."""
    _crate(tmp_path)

    result: Result = run_cli_in(tmp_path, ["--no-color", "update", "--dry-run", "--diff"])

    assert_WOULD_CHANGE(result)
    assert "--- src/lib.rs (current)" in result.output
    assert "+++ src/lib.rs (updated)" in result.output
    assert "-/// old" in result.output
    assert "+/// Hello." in result.output


@mark_cli
def test_error_is_reported_with_location(tmp_path: Path) -> None:
    """A failing file is reported with its positioned error; others still update."""
    _crate(tmp_path, **{"src/broken.rs": f"fn a() {{}}\n{BROKEN}"})

    result: Result = run_cli_in(tmp_path, ["update"])

    assert_FAILURE(result)
    assert "error : src/broken.rs" in result.output
    assert "error: missing matching `end` directive." in result.output
    assert "--> src/broken.rs:2:1" in result.output
    assert "2 file(s): 1 updated, 0 unchanged, 1 failed" in result.output
    assert read_file(tmp_path / "src" / "lib.rs") == FRESH
    assert read_file(tmp_path / "src" / "broken.rs") == f"fn a() {{}}\n{BROKEN}"


@mark_cli
def test_failure_wins_over_would_change(tmp_path: Path) -> None:
    """A dry run with both pending changes and a failure exits with FAILURE."""
    _crate(tmp_path, **{"src/broken.rs": BROKEN})

    assert_FAILURE(run_cli_in(tmp_path, ["update", "--dry-run"]))


@mark_cli
def test_fail_fast_stops_at_first_failure(tmp_path: Path) -> None:
    """--fail-fast stops after the first failing file in sorted order."""
    _crate(tmp_path, **{"src/a_broken.rs": BROKEN})

    result: Result = run_cli_in(tmp_path, ["update", "--fail-fast"])

    assert_FAILURE(result)
    assert "(stopped after first failure)" in result.output
    assert "1 file(s): 0 updated, 0 unchanged, 1 failed" in result.output
    assert read_file(tmp_path / "src" / "lib.rs") == STALE


@mark_cli
def test_quiet_suppresses_summary_but_not_errors(tmp_path: Path) -> None:
    """-q hides the per-file and summary lines; errors are still shown."""
    _crate(tmp_path, **{"src/broken.rs": BROKEN})

    result: Result = run_cli_in(tmp_path, ["-q", "update"])

    assert_FAILURE(result)
    assert "file(s):" not in result.output
    assert "update : src/lib.rs" not in result.output
    assert "error : src/broken.rs" in result.output


@mark_cli
def test_filters_and_extensions(tmp_path: Path) -> None:
    """--exclude and --ext select which files are scanned."""
    _crate(
        tmp_path,
        **{
            "src/broken.rs": BROKEN,
            "docs/guide.txt": f"{START}\n{END}\n",
        },
    )

    result: Result = run_cli_in(
        tmp_path, ["update", "--exclude", "broken.rs", "--ext", ".rs", "--ext", "txt"]
    )

    assert_SUCCESS(result)
    assert "update : docs/guide.txt" in result.output
    assert "update : src/lib.rs" in result.output
    assert read_file(tmp_path / "docs" / "guide.txt") == f"{START}\n/// Hello.\n{END}\n"


@mark_cli
def test_gitignore_respected_unless_disabled(tmp_path: Path) -> None:
    """Ignored files are skipped unless --no-gitignore is given."""
    _crate(tmp_path, **{".gitignore": "src/\n"})

    ignored: Result = run_cli_in(tmp_path, ["update", "--dry-run"])
    included: Result = run_cli_in(tmp_path, ["update", "--dry-run", "--no-gitignore"])

    assert_SUCCESS(ignored)
    assert "No matching files found" in ignored.output
    assert_WOULD_CHANGE(included)


@mark_cli
def test_config_file_settings_apply(tmp_path: Path) -> None:
    """Settings from includedoc.toml in ROOT are honored."""
    _crate(tmp_path, **{"includedoc.toml": "dry_run = true\n"})

    result: Result = run_cli_in(tmp_path, ["update"])

    assert_WOULD_CHANGE(result)
    assert read_file(tmp_path / "src" / "lib.rs") == STALE


@mark_cli
def test_explicit_root_argument(tmp_path: Path) -> None:
    """ROOT can be given explicitly; paths are reported relative to it."""
    _crate(tmp_path / "crate")

    result: Result = run_cli_in(tmp_path, ["update", "crate"])

    assert_SUCCESS(result)
    assert "update : src/lib.rs" in result.output
