# topmark:header:start
#
#   project      : PDFMinion
#   file         : errors.py
#   file_relpath : src/pdfminion/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PDFMinion CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Config-layer exceptions
    (``pdfminion.config.errors``) are translated into these at the CLI boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from pdfminion.cli.exit_codes import ExitCode


class MinionError(click.ClickException):
    """Base class for all PDFMinion CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class MinionUsageError(MinionError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class MinionConfigError(MinionError):
    """Error for configuration errors (unreadable/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class MinionFileNotFoundError(MinionError):
    """Error when an explicitly given config file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
