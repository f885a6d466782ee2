# topmark:header:start
#
#   project      : PDFMinion
#   file         : main.py
#   file_relpath : src/pdfminion/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PDFMinion command-line entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` for the subcommands, together with the program-output console.
Internal logging is configured from ``PDFMINION_LOG_LEVEL``.
"""

from __future__ import annotations

import click

from pdfminion.cli.commands.settings import settings_command
from pdfminion.cli.commands.version import version_command
from pdfminion.cli.console import ClickConsole
from pdfminion.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from pdfminion.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)
    logger.debug("verbosity_level=%d, color=%s", ctx.obj["verbosity_level"], ctx.color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PDFMinion: add page numbers, chapter numbers and running headers to PDF files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the PDFMinion CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'pdfminion settings' to show the effective settings.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(settings_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
