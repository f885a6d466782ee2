# topmark:header:start
#
#   project      : PDFMinion
#   file         : __init__.py
#   file_relpath : src/pdfminion/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PDFMinion CLI subcommands."""

from __future__ import annotations
