# topmark:header:start
#
#   project      : PDFMinion
#   file         : __init__.py
#   file_relpath : src/pdfminion/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across PDFMinion.

The ``pdfminion.core`` package provides small, reusable building blocks that are
safe to import from anywhere in the codebase (CLI, config, tests) without
pulling in user-interface concerns.

Included modules:

- ``diagnostics``
  Internal diagnostic types and helpers (levels, messages, aggregation) used
  to collect and report info, warnings, and errors consistently.
"""

from __future__ import annotations
