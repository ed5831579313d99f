# topmark:header:start
#
#   project      : IncludeDoc
#   file         : main.py
#   file_relpath : src/includedoc/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeDoc command line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import Any

import click

from includedoc.cli.commands.dump_config import dump_config_command
from includedoc.cli.commands.update import update_command
from includedoc.cli.commands.version import version_command
from includedoc.cli.console import ClickConsole
from includedoc.cli.exit_codes import ExitCode
from includedoc.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from includedoc.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


class IncludeDocGroup(click.Group):
    """Click group that reports invocation errors with ``ExitCode.USAGE_ERROR``.

    Click exits with 2 on usage errors, which would be indistinguishable from
    ``WOULD_CHANGE``.
    """

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        """Parse the group's own arguments."""
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = ExitCode.USAGE_ERROR
            raise

    def invoke(self, ctx: click.Context) -> Any:
        """Resolve and run the subcommand (whose arguments are parsed here)."""
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = ExitCode.USAGE_ERROR
            raise


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # INCLUDEDOC_LOG_LEVEL wins over -v/-q for internal logging
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=IncludeDocGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="IncludeDoc: keep doc comments in sync with the files they include.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the IncludeDoc CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'includedoc update [ROOT]' to regenerate include_doc blocks.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(update_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
