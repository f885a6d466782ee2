# topmark:header:start
#
#   project      : PDFMinion
#   file         : __init__.py
#   file_relpath : src/pdfminion/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for PDFMinion.

The entry point is `pdfminion.cli.main.cli`. Commands live in
``pdfminion.cli.commands``; shared options, console output and error types
live alongside in this package.
"""

from __future__ import annotations
