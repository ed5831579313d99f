# topmark:header:start
#
#   project      : IncludeDoc
#   file         : __init__.py
#   file_relpath : src/includedoc/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeDoc subcommands."""
