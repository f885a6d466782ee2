# topmark:header:start
#
#   project      : PDFMinion
#   file         : __init__.py
#   file_relpath : src/pdfminion/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for PDFMinion.

Modules:
    - ``locales``: the read-only locale text table (default display strings).
    - ``model``: `MinionConfig`, `ConfigOverride` and the merge policy.
    - ``io``: YAML loading of ``pdfminion.yaml`` and YAML rendering.
    - ``validation``: path checks that set the ``*_valid`` flags.
    - ``keys``: canonical config-file keys and flag names.
    - ``errors``: configuration exceptions.
    - ``logging``: TRACE-aware, colored logging setup.

This package module intentionally imports nothing: ``pdfminion.core`` depends on
``pdfminion.config.logging``, and eager re-exports here would create an import cycle.
Import from the submodules (or from the top-level ``pdfminion`` package).
"""

from __future__ import annotations
