# topmark:header:start
#
#   project      : PDFMinion
#   file         : console.py
#   file_relpath : src/pdfminion/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output of the PDFMinion CLI.

Settings tables, diagnostics and error messages go through `ClickConsole`;
internal logging (``pdfminion.config.logging``) stays on its own stderr handler.
"""

from __future__ import annotations

from typing import Any

import click


class ClickConsole:
    """Writes program output with click, optionally without colors.

    Streams are looked up at write time, so output follows whatever
    ``sys.stdout`` / ``sys.stderr`` are then (for instance under `CliRunner`).
    """

    def __init__(self, *, enable_color: bool = True) -> None:
        self.enable_color = enable_color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        click.echo(text, nl=nl, color=self.enable_color)

    def error(self, text: str) -> None:
        """Write ``text`` to stderr in red."""
        click.secho(text, err=True, fg="bright_red", color=self.enable_color)

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` with `click.style` applied, or unchanged without colors."""
        return click.style(text, **style) if self.enable_color else text
