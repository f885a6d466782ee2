# topmark:header:start
#
#   project      : PDFMinion
#   file         : version.py
#   file_relpath : src/pdfminion/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PDFMinion `version` command.

Prints the current PDFMinion version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdfminion.constants import PDFMINION_VERSION

if TYPE_CHECKING:
    from pdfminion.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of PDFMinion.",
)
def version_command() -> None:
    """Show the current version of PDFMinion."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("PDFMinion version:", bold=True))
        console.print(f"    {PDFMINION_VERSION}")
    else:
        console.print(PDFMINION_VERSION)
