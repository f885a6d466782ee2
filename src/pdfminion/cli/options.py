# topmark:header:start
#
#   project      : PDFMinion
#   file         : options.py
#   file_relpath : src/pdfminion/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based PDFMinion CLI.

This module centralizes reusable options (verbosity, color, configuration
overrides) and their resolution logic, so commands and groups can stay thin.

Boolean configuration flags are declared as ``--flag/--no-flag`` pairs with
``default=None``: Click then passes ``None`` when the user gave neither form,
which maps directly onto the tri-state flags of `ConfigOverride`.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from pdfminion.cli.errors import MinionUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``verbose_count`` if positive, ``-quiet_count`` if positive, else 0.

    Raises:
        MinionUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise MinionUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    ``-v`` also sets the ``verbose`` configuration flag explicitly.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Decrease verbosity.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --no-color option to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output.",
    )(f)
    return f


def config_override_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the options that override configuration values.

    Parameter names equal the `ConfigOverride` attribute names, so the
    collected values can be passed to `ConfigOverride.from_args` as-is.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    # Config file selection
    f = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="Read settings from this YAML file instead of ./pdfminion.yaml.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Ignore config files; use defaults and command-line options only.",
    )(f)

    # Paths
    f = click.option(
        "--source",
        "-s",
        "source_dir",
        default=None,
        help="Directory containing the input PDF files.",
    )(f)
    f = click.option(
        "--target",
        "-t",
        "target_dir",
        default=None,
        help="Directory receiving the processed files.",
    )(f)

    # Processing flags
    f = click.option(
        "--force/--no-force",
        "force",
        default=None,
        help="Overwrite existing files in the target directory.",
    )(f)
    f = click.option(
        "--evenify/--no-evenify",
        "evenify",
        default=None,
        help="Append a blank page to files with an odd number of pages.",
    )(f)
    f = click.option(
        "--merge/--no-merge",
        "merge",
        default=None,
        help="Merge all processed files into a single file.",
    )(f)
    f = click.option(
        "--merge-file",
        "merge_file_name",
        default=None,
        help="File name of the merged output.",
    )(f)
    f = click.option(
        "--personal/--no-personal",
        "personal_touch",
        default=None,
        hidden=True,
        help="Add a personal touch to some pages.",
    )(f)

    # Locale and page texts
    f = click.option(
        "--language",
        "-l",
        "locale",
        default=None,
        help="Language of the page texts (e.g. 'en', 'de').",
    )(f)
    f = click.option(
        "--running-header",
        default=None,
        help="Running header printed on every page.",
    )(f)
    f = click.option(
        "--chapter-prefix",
        default=None,
        help="Prefix before the chapter number.",
    )(f)
    f = click.option(
        "--separator",
        default=None,
        help="Separator between chapter and page information.",
    )(f)
    f = click.option(
        "--page-prefix",
        "page_nr_prefix",
        default=None,
        help="Prefix before the page number.",
    )(f)
    f = click.option(
        "--page-count-prefix",
        default=None,
        help="Word between page number and page count.",
    )(f)
    f = click.option(
        "--blank-page-text",
        default=None,
        help="Text printed on inserted blank pages.",
    )(f)
    return f
