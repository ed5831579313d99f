# topmark:header:start
#
#   project      : IncludeDoc
#   file         : update.py
#   file_relpath : src/includedoc/cli/commands/update.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeDoc `update` command.

Walks ROOT, regenerates every ``include_doc`` block and rewrites the files
whose blocks changed.

Exit codes:
    0  every file processed, nothing failed
    1  at least one file failed
    2  ``--dry-run`` found pending changes
    64 invalid invocation
    78 invalid configuration

Examples:
  Update every ``.rs`` file below the current directory:

    $ includedoc update .

  Check in CI that generated docs are up to date:

    $ includedoc update --dry-run --diff .
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from includedoc.api import run
from includedoc.cli.cmd_common import (
    build_config_common,
    exit_code_for,
    get_console,
    get_effective_verbosity,
    validate_root,
)
from includedoc.cli.options import common_config_options, common_file_and_filtering_options
from includedoc.cli.report import emit_report
from includedoc.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from includedoc.api import RunResult
    from includedoc.cli.console import ConsoleLike
    from includedoc.cli.exit_codes import ExitCode
    from includedoc.config import Config
    from includedoc.config.logging import IncludeDocLogger

logger: IncludeDocLogger = get_logger(__name__)


@click.command(
    name="update",
    help="Regenerate include_doc blocks in the source files below ROOT.",
)
@click.argument("root", default=".", type=click.Path(file_okay=False, dir_okay=True))
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Report what would change without writing (exit code 2 when changes are pending).",
)
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    help="Show a unified diff of every pending change.",
)
@click.option(
    "--fail-fast",
    "fail_fast",
    is_flag=True,
    help="Stop at the first file that fails.",
)
@common_config_options
@common_file_and_filtering_options
def update_command(
    *,
    root: str,
    dry_run: bool,
    show_diff: bool,
    fail_fast: bool,
    config_files: tuple[str, ...],
    no_config: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    extensions: tuple[str, ...],
    no_gitignore: bool,
) -> None:
    """Run the update pipeline on ROOT and print a report.

    Args:
        root (str): Directory to scan; included files must live below it.
        dry_run (bool): Report only, never write.
        show_diff (bool): Print unified diffs of pending changes.
        fail_fast (bool): Stop at the first failing file.
        config_files (tuple[str, ...]): Extra TOML config files.
        no_config (bool): Skip config discovery in ROOT.
        include_patterns (tuple[str, ...]): Include globs.
        exclude_patterns (tuple[str, ...]): Exclude globs.
        extensions (tuple[str, ...]): File extensions to scan.
        no_gitignore (bool): Do not honor .gitignore files.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    verbosity: int = get_effective_verbosity(ctx)

    root_path: Path = validate_root(root)
    config: Config = build_config_common(
        root_path,
        config_files=config_files,
        no_config=no_config,
        dry_run=dry_run or None,
        show_diff=show_diff or None,
        fail_fast=fail_fast or None,
        include_patterns=include_patterns or None,
        exclude_patterns=exclude_patterns or None,
        extensions=extensions or None,
        respect_gitignore=False if no_gitignore else None,
    )

    result: RunResult = run(config)
    if not result.files:
        console.warn(f"No matching files found under {root_path}.")

    emit_report(console, result, verbosity=verbosity)

    code: ExitCode = exit_code_for(result)
    logger.debug("update finished with exit code %s", code.name)
    ctx.exit(int(code))
