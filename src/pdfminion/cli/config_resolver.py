# topmark:header:start
#
#   project      : PDFMinion
#   file         : config_resolver.py
#   file_relpath : src/pdfminion/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Utilities for resolving PDFMinion configuration from Click parameters.

This module bridges CLI parsing and the configuration layer: it detects the
system locale, builds the default configuration, merges the config file and
then the command-line overrides.
"""

from __future__ import annotations

import locale as _locale
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from click.core import ParameterSource

from pdfminion.cli.errors import MinionConfigError, MinionFileNotFoundError
from pdfminion.config.errors import ConfigFileError, ConfigFileNotFoundError
from pdfminion.config.io import find_config_file, override_from_yaml_file
from pdfminion.config.logging import get_logger
from pdfminion.config.model import FLAG_NAMES, ConfigOverride, MinionConfig
from pdfminion.constants import ORIGIN_CLI
from pdfminion.core.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Mapping

    import click

    from pdfminion.config.logging import MinionLogger

logger: MinionLogger = get_logger(__name__)

# Environment variables consulted for the system locale, in priority order.
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")


def detect_system_locale() -> str | None:
    """Return the system language tag (``de_DE.UTF-8`` -> ``de_DE``), or None.

    The POSIX locale environment is consulted first, then `locale.getlocale`.
    The ``C`` and ``POSIX`` locales carry no language and yield None.
    """
    raw: str | None = None
    for var in LOCALE_ENV_VARS:
        value: str | None = os.environ.get(var)
        if value:
            raw = value
            break
    if raw is None:
        raw = _locale.getlocale()[0]
    if not raw:
        return None
    tag: str = raw.split(".", 1)[0].split("@", 1)[0]
    if tag.upper() in ("C", "POSIX"):
        return None
    logger.debug("Detected system locale: %s", tag)
    return tag


def explicit_args(ctx: click.Context, params: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``params`` with boolean flags the user did not give mapped to None.

    A flag counts as given when its value came from the command line or the
    environment, not from its declared default.
    """
    args: dict[str, Any] = dict(params)
    for name in FLAG_NAMES:
        if name not in args:
            continue
        source: ParameterSource | None = ctx.get_parameter_source(name)
        if source not in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT):
            args[name] = None
    return args


def resolve_config_from_click(
    *,
    cli_args: Mapping[str, Any],
    config_path: str | None,
    no_config: bool,
    system_locale: str | None = None,
) -> tuple[MinionConfig, DiagnosticLog]:
    """Build the effective `MinionConfig` from defaults, config file and CLI options.

    Resolution order (lowest → highest precedence):
      1. **Defaults** for the system locale (unsupported locales fall back to English).
      2. **Config file**: ``--config PATH`` if given, else ``./pdfminion.yaml`` if present.
         Skipped entirely with ``--no-config``.
      3. **CLI overrides** (flags/options), applied last.

    Args:
        cli_args (Mapping[str, Any]): Override values keyed by `ConfigOverride` attribute.
        config_path (str | None): Explicit config file path (``--config``).
        no_config (bool): If True, do not read any config file.
        system_locale (str | None): Locale for the defaults; detected when None.

    Returns:
        tuple[MinionConfig, DiagnosticLog]: The merged configuration and all diagnostics
            collected from the layers.

    Raises:
        MinionFileNotFoundError: If ``config_path`` does not exist.
        MinionConfigError: If the config file cannot be read or parsed.
    """
    requested_locale: str | None = (
        system_locale if system_locale is not None else detect_system_locale()
    )

    # (1) defaults
    config: MinionConfig = MinionConfig.from_defaults(requested_locale)
    diagnostics: DiagnosticLog = DiagnosticLog.from_iterable(config.diagnostics)

    # (2) config file
    path: Path | None = None
    if no_config:
        logger.info("Skipping config files (--no-config)")
    else:
        path = Path(config_path) if config_path else find_config_file()
        if path is not None:
            logger.info("Loading config: %s", path)
            try:
                file_override: ConfigOverride = override_from_yaml_file(path)
            except ConfigFileNotFoundError as exc:
                raise MinionFileNotFoundError(str(exc)) from exc
            except ConfigFileError as exc:
                raise MinionConfigError(str(exc)) from exc
            config.merge_with(file_override)
            diagnostics.extend(file_override.diagnostics)

    if path is None:
        # An empty name records that no config file is in use
        config.config_file_name = ""

    # (3) CLI overrides last
    cli_override: ConfigOverride = ConfigOverride.from_args(cli_args, origin=ORIGIN_CLI)
    config.merge_with(cli_override)

    logger.debug("Effective configuration: %s", config)
    return config, diagnostics
