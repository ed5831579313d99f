# topmark:header:start
#
#   project      : IncludeDoc
#   file         : __init__.py
#   file_relpath : src/includedoc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeDoc: splice ranges of other files into doc comments.

Source files carry paired marker comments::

    // #[include_doc("../README.md", start)]
    // #[include_doc("../README.md", end)]

``includedoc update`` replaces whatever sits between the markers with the
referenced content, rendered as ``///`` (or ``//!``) doc comments.
"""

from includedoc.constants import INCLUDEDOC_VERSION

__version__ = INCLUDEDOC_VERSION
