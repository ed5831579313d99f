# topmark:header:start
#
#   project      : IncludeDoc
#   file         : __init__.py
#   file_relpath : src/includedoc/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Diagnostics are represented by immutable `Diagnostic` instances.
    - During processing, diagnostics are accumulated in a mutable `DiagnosticLog`
      attached to each file's processing context.
    - Positioned, human-readable excerpts are produced by the helpers in
      [`includedoc.diagnostic.render`][includedoc.diagnostic.render].
"""

from __future__ import annotations

from includedoc.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
)
from includedoc.diagnostic.render import fmt_headline, fmt_link, fmt_source

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "fmt_headline",
    "fmt_link",
    "fmt_source",
]
