# topmark:header:start
#
#   project      : IncludeDoc
#   file         : exit_codes.py
#   file_relpath : src/includedoc/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the IncludeDoc CLI.

Codes 64 and 78 follow the BSD ``sysexits.h`` conventions (``EX_USAGE`` and
``EX_CONFIG``).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the IncludeDoc CLI.

    Attributes:
        SUCCESS (int): Every file processed; nothing failed.
        FAILURE (int): At least one file failed.
        WOULD_CHANGE (int): Dry run found pending changes (and nothing failed).
        USAGE_ERROR (int): Invalid command line invocation.
        CONFIG_ERROR (int): A configuration file is missing, unreadable or malformed.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2
    USAGE_ERROR = 64
    CONFIG_ERROR = 78
