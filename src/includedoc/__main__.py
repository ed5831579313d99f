# topmark:header:start
#
#   project      : IncludeDoc
#   file         : __main__.py
#   file_relpath : src/includedoc/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m includedoc``."""

from includedoc.cli.main import cli

if __name__ == "__main__":
    cli()
