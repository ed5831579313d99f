# topmark:header:start
#
#   project      : IncludeDoc
#   file         : dump_config.py
#   file_relpath : src/includedoc/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeDoc `dump-config` command.

Prints the effective configuration for ROOT (defaults, discovered config
files, ``--config`` files and CLI overrides merged) as a TOML document.

Examples:
    $ includedoc dump-config .
    $ includedoc dump-config --ext .rs --ext .md --exclude 'target/' .
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from includedoc.cli.cmd_common import build_config_common, get_console, validate_root
from includedoc.cli.options import common_config_options, common_file_and_filtering_options
from includedoc.constants import PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from includedoc.cli.console import ConsoleLike
    from includedoc.config import Config


@click.command(
    name="dump-config",
    help="Print the effective configuration for ROOT as TOML.",
)
@click.argument("root", default=".", type=click.Path(file_okay=False, dir_okay=True))
@common_config_options
@common_file_and_filtering_options
def dump_config_command(
    *,
    root: str,
    config_files: tuple[str, ...],
    no_config: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    extensions: tuple[str, ...],
    no_gitignore: bool,
) -> None:
    """Print the merged configuration as a ``[tool.includedoc]`` table."""
    console: ConsoleLike = get_console(click.get_current_context())
    root_path: Path = validate_root(root)
    config: Config = build_config_common(
        root_path,
        config_files=config_files,
        no_config=no_config,
        include_patterns=include_patterns or None,
        exclude_patterns=exclude_patterns or None,
        extensions=extensions or None,
        respect_gitignore=False if no_gitignore else None,
    )
    console.print(f"# Effective IncludeDoc configuration ([tool.{PYPROJECT_TOOL_SECTION}])")
    for path in config.config_files:
        console.print(f"# source: {path}")
    console.print(config.to_toml(), nl=False)
