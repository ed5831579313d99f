# topmark:header:start
#
#   project      : IncludeDoc
#   file         : constants.py
#   file_relpath : src/includedoc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeDoc Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

INCLUDEDOC_VERSION: str = get_version("includedoc")

# Name of the directive attribute recognized in marker comments
DIRECTIVE_NAME: str = "include_doc"

# Doc comment line prefixes for rendered blocks
INNER_DOC_PREFIX: str = "//! "
OUTER_DOC_PREFIX: str = "/// "

# Default source file extensions scanned for directives
DEFAULT_EXTENSIONS: tuple[str, ...] = (".rs",)

# Config file names looked up in the root directory
PYPROJECT_TOML_NAME: str = "pyproject.toml"
INCLUDEDOC_TOML_NAME: str = "includedoc.toml"
PYPROJECT_TOOL_SECTION: str = "includedoc"

GITIGNORE_NAME: str = ".gitignore"
