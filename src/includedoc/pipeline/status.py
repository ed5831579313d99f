# topmark:header:start
#
#   project      : IncludeDoc
#   file         : status.py
#   file_relpath : src/includedoc/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis of the IncludeDoc pipeline.

Each enum captures one phase (content, substitution, write). Steps only write
to the axis they declare in ``axes_written``.

Conventions:
  * All enums are `ColoredStrEnum`s so the CLI can colorize them.
  * Values are human-readable strings used in reports; prefer equality (``==``)
    over identity checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from yachalk import chalk

from includedoc.rendering.colored_enum import ColoredStrEnum


class Axis(str, Enum):
    """Status axes of the pipeline."""

    CONTENT = "content"
    SUBSTITUTION = "substitution"
    WRITE = "write"


class ContentStatus(ColoredStrEnum):
    """Outcome of reading the file."""

    # Value format: (description: str, color_renderer: ChalkBuilder)
    PENDING = ("file content pending", chalk.gray)
    OK = ("ok", chalk.green)
    NOT_FOUND = ("not found", chalk.red)
    NO_READ_PERMISSION = ("no read permission", chalk.red_bright)
    UNICODE_DECODE_ERROR = ("Unicode decode error", chalk.yellow)
    UNREADABLE = ("read error", chalk.red_bright)


class SubstitutionStatus(ColoredStrEnum):
    """Outcome of running the directive engine on the file."""

    PENDING = ("substitution pending", chalk.gray)
    NO_DIRECTIVES = ("no directives", chalk.gray)
    UNCHANGED = ("up to date", chalk.green)
    CHANGED = ("changes found", chalk.yellow)
    FAILED = ("substitution failed", chalk.red_bright)


class WriteStatus(ColoredStrEnum):
    """Outcome of committing the updated text."""

    PENDING = ("write pending", chalk.gray)
    PREVIEWED = ("would update", chalk.yellow)
    WRITTEN = ("update", chalk.green)
    SKIPPED = ("no write needed", chalk.gray)
    FAILED = ("write failed", chalk.red_bright)


@dataclass
class ProcessingStatus:
    """Per-axis status of one file."""

    content: ContentStatus = ContentStatus.PENDING
    substitution: SubstitutionStatus = SubstitutionStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING

