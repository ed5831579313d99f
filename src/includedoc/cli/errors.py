# topmark:header:start
#
#   project      : IncludeDoc
#   file         : errors.py
#   file_relpath : src/includedoc/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the IncludeDoc CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. When a project console is present on the Click context it is used for
display; otherwise Click's default error display applies.
"""

from __future__ import annotations

from typing import IO, Any

import click

from includedoc.cli.exit_codes import ExitCode


class IncludeDocCliError(click.ClickException):
    """Base class for all IncludeDoc CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (styling is applied in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class IncludeDocUsageError(IncludeDocCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class IncludeDocConfigError(IncludeDocCliError):
    """Error for configuration errors (unreadable or malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
