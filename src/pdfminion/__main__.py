# topmark:header:start
#
#   project      : PDFMinion
#   file         : __main__.py
#   file_relpath : src/pdfminion/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PDFMinion via ``python -m pdfminion``.

Equivalent to running the ``pdfminion`` console script.
"""

from __future__ import annotations

from pdfminion.cli.main import cli

if __name__ == "__main__":
    cli()
