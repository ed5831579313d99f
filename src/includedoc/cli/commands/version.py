# topmark:header:start
#
#   project      : IncludeDoc
#   file         : version.py
#   file_relpath : src/includedoc/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeDoc `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from includedoc.cli.cmd_common import get_console
from includedoc.constants import INCLUDEDOC_VERSION

if TYPE_CHECKING:
    from includedoc.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of IncludeDoc.",
)
def version_command() -> None:
    """Print the IncludeDoc version installed in the current environment."""
    console: ConsoleLike = get_console(click.get_current_context())
    console.print(INCLUDEDOC_VERSION)
