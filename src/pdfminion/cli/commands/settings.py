# topmark:header:start
#
#   project      : PDFMinion
#   file         : settings.py
#   file_relpath : src/pdfminion/cli/commands/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PDFMinion `settings` command.

Shows the effective configuration after merging defaults, the config file
and the command-line options, including whether the configured paths are
usable. With ``--format yaml`` the settings are printed as a YAML document
that can be saved as ``pdfminion.yaml``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

import click

from pdfminion.cli.config_resolver import explicit_args, resolve_config_from_click
from pdfminion.cli.options import config_override_options
from pdfminion.config.io import to_yaml
from pdfminion.config.validation import validate_config

if TYPE_CHECKING:
    from pdfminion.cli.console import ClickConsole
    from pdfminion.config.model import MinionConfig
    from pdfminion.core.diagnostics import DiagnosticLog


class SettingsFormat(str, Enum):
    """Output formats of the `settings` command."""

    TEXT = "text"
    YAML = "yaml"


# (label, attribute, validity attribute)
_ROWS: tuple[tuple[str, str, str | None], ...] = (
    ("Config file", "config_file_name", "config_file_valid"),
    ("Language", "locale", None),
    ("Verbose", "verbose", None),
    ("Source directory", "source_dir", "source_dir_valid"),
    ("Target directory", "target_dir", "target_dir_valid"),
    ("Force overwrite", "force", None),
    ("Evenify", "evenify", None),
    ("Merge", "merge", None),
    ("Merge file name", "merge_file_name", None),
    ("Running header", "running_header", None),
    ("Chapter prefix", "chapter_prefix", None),
    ("Separator", "separator", None),
    ("Page prefix", "page_nr_prefix", None),
    ("Page count prefix", "page_count_prefix", None),
    ("Blank page text", "blank_page_text", None),
)


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return repr(value) if value == "" or value != value.strip() else value


def render_settings(console: ClickConsole, config: MinionConfig) -> None:
    """Print ``config`` as an aligned table with validity marks for paths."""
    width: int = max(len(label) for label, _, _ in _ROWS)
    console.print(console.styled("PDFMinion settings", bold=True, underline=True))
    for label, attr, valid_attr in _ROWS:
        value: Any = getattr(config, attr)
        shown: str = "(none)" if attr == "config_file_name" and not value else _render_value(value)
        line: str = f"  {label.ljust(width)} : {shown}"
        if valid_attr is not None:
            if getattr(config, valid_attr):
                line += "  " + console.styled("[ok]", fg="green")
            else:
                line += "  " + console.styled("[invalid]", fg="red")
        console.print(line)


def render_diagnostics(console: ClickConsole, diagnostics: DiagnosticLog) -> None:
    """Print each diagnostic as ``[level] message``, colored by level."""
    for d in diagnostics:
        text: str = f"[{d.level.value}] {d.message}"
        console.print(d.level.color(text) if console.enable_color else text)


@click.command(
    name="settings",
    help="Show the effective settings (defaults, config file and options merged).",
)
@config_override_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in SettingsFormat]),
    default=SettingsFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
def settings_command(
    *,
    config_path: str | None,
    no_config: bool,
    output_format: str,
    **overrides: Any,
) -> None:
    """Show the effective settings.

    Args:
        config_path (str | None): Explicit config file (``--config``).
        no_config (bool): Ignore config files.
        output_format (str): ``text`` or ``yaml``.
        **overrides (Any): Configuration override options, keyed by attribute name.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    cli_args: dict[str, Any] = explicit_args(ctx, overrides)
    if vlevel > 0:
        cli_args["verbose"] = True

    config, diagnostics = resolve_config_from_click(
        cli_args=cli_args,
        config_path=config_path,
        no_config=no_config,
    )
    diagnostics.extend(validate_config(config))

    if SettingsFormat(output_format) == SettingsFormat.YAML:
        console.print(to_yaml(config), nl=False)
        return

    render_settings(console, config)
    if vlevel > 0 and diagnostics:
        console.print()
        render_diagnostics(console, diagnostics)
