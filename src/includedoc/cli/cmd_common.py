# topmark:header:start
#
#   project      : IncludeDoc
#   file         : cmd_common.py
#   file_relpath : src/includedoc/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by IncludeDoc subcommands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from includedoc.api import build_config
from includedoc.cli.errors import IncludeDocConfigError, IncludeDocUsageError
from includedoc.cli.exit_codes import ExitCode
from includedoc.config.io import ConfigError
from includedoc.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from includedoc.api import RunResult
    from includedoc.cli.console import ConsoleLike
    from includedoc.config import Config
    from includedoc.config.logging import IncludeDocLogger

logger: IncludeDocLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console created by the group callback."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity level (a `logging` level, default WARNING)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def validate_root(root: str) -> Path:
    """Return ``root`` as a Path, refusing anything that is not a directory.

    Raises:
        IncludeDocUsageError: ``root`` does not exist or is not a directory.
    """
    path = Path(root)
    if not path.exists():
        raise IncludeDocUsageError(f"ROOT does not exist: {root}")
    if not path.is_dir():
        raise IncludeDocUsageError(f"ROOT is not a directory: {root}")
    return path


def build_config_common(
    root: Path,
    *,
    config_files: Iterable[str],
    no_config: bool,
    **overrides: Any,
) -> Config:
    """Resolve the effective config for a command, mapping errors to CLI errors.

    Raises:
        IncludeDocConfigError: A config file is missing, unreadable or malformed.
    """
    extra: list[Path] = [Path(p) for p in config_files]
    for p in extra:
        if not p.is_file():
            raise IncludeDocConfigError(f"Config file not found: {p}")
    try:
        config: Config = build_config(
            root, config_files=extra, discover=not no_config, **overrides
        )
    except ConfigError as e:
        raise IncludeDocConfigError(f"Invalid config file {e.path}: {e.reason}") from e
    logger.debug("Effective config: %s", config)
    return config


def exit_code_for(result: RunResult) -> ExitCode:
    """Map a run result to the process exit code."""
    if result.had_errors:
        return ExitCode.FAILURE
    if result.dry_run and result.would_change:
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS
