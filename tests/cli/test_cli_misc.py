# topmark:header:start
#
#   project      : IncludeDoc
#   file         : test_cli_misc.py
#   file_relpath : tests/cli/test_cli_misc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for usage/config errors, `version`, `dump-config` and the bare group."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from includedoc.constants import INCLUDEDOC_VERSION
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli, parametrize, write_tree

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_version_command() -> None:
    """`version` prints the installed version only."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output == f"{INCLUDEDOC_VERSION}\n"


@mark_cli
def test_bare_group_prints_hint_and_help() -> None:
    """Without a subcommand a hint and the help text are printed."""
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert "includedoc update [ROOT]" in result.output
    assert "update" in result.output and "dump-config" in result.output


@mark_cli
@parametrize(
    "argv",
    [
        ["update", "--no-such-option"],
        ["--no-such-option", "update"],
        ["no-such-command"],
        ["--color", "sometimes", "update"],
        ["-v", "-q", "update"],
        ["update", "missing-dir"],
    ],
)
def test_usage_errors_exit_64(tmp_path: Path, argv: list[str]) -> None:
    """Invocation errors, Click's own included, exit with USAGE_ERROR."""
    assert_USAGE_ERROR(run_cli_in(tmp_path, argv))


@mark_cli
@parametrize("command", ["update", "dump-config"])
def test_root_must_be_a_directory(tmp_path: Path, command: str) -> None:
    """A file given as ROOT is rejected by the argument type itself."""
    write_tree(tmp_path, {"lib.rs": ""})

    result: Result = run_cli_in(tmp_path, [command, "lib.rs"])

    assert_USAGE_ERROR(result)
    assert "is a file" in result.output


@mark_cli
def test_missing_config_file_exits_78(tmp_path: Path) -> None:
    """An explicit --config file that does not exist is a config error."""
    result: Result = run_cli_in(tmp_path, ["update", "--config", "nope.toml"])

    assert_CONFIG_ERROR(result)
    assert "Config file not found" in result.output


@mark_cli
def test_malformed_config_exits_78(tmp_path: Path) -> None:
    """A malformed discovered config file is a config error."""
    write_tree(tmp_path, {"includedoc.toml": "extensions = [\n"})

    result: Result = run_cli_in(tmp_path, ["update"])

    assert_CONFIG_ERROR(result)
    assert "Invalid config file" in result.output


@mark_cli
def test_no_config_skips_discovery(tmp_path: Path) -> None:
    """--no-config ignores config files found in ROOT."""
    write_tree(tmp_path, {"includedoc.toml": "extensions = [\n"})

    assert_SUCCESS(run_cli_in(tmp_path, ["update", "--no-config"]))


@mark_cli
def test_dump_config_reflects_files_and_overrides(tmp_path: Path) -> None:
    """`dump-config` prints the merged configuration as TOML."""
    write_tree(tmp_path, {"includedoc.toml": 'exclude = ["target/"]\n'})

    result: Result = run_cli_in(tmp_path, ["dump-config", "--ext", "md", "--exclude", "vendor/"])

    assert_SUCCESS(result)
    assert "# Effective IncludeDoc configuration ([tool.includedoc])" in result.output
    assert "# source: includedoc.toml" in result.output
    data: Any = tomlkit.parse(result.output).unwrap()
    assert data["extensions"] == [".md"]
    assert data["exclude"] == ["target/", "vendor/"]
    assert data["respect_gitignore"] is True
    assert data["dry_run"] is False


@mark_cli
def test_dump_config_defaults(tmp_path: Path) -> None:
    """Without config files the defaults are printed."""
    result: Result = run_cli_in(tmp_path, ["dump-config", "--no-gitignore"])

    assert_SUCCESS(result)
    data: Any = tomlkit.parse(result.output).unwrap()
    assert data["extensions"] == [".rs"]
    assert data["respect_gitignore"] is False
    assert "# source:" not in result.output
