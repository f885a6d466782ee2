# topmark:header:start
#
#   project      : PDFMinion
#   file         : io.py
#   file_relpath : src/pdfminion/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render PDFMinion YAML configuration.

This module provides I/O helpers for ``pdfminion.yaml``:
    - `load_yaml_dict` reads a file into a plain ``dict`` (PyYAML ``safe_load``).
    - `override_from_yaml_file` turns a file into a `ConfigOverride`.
    - `find_config_file` locates ``pdfminion.yaml`` in a directory (no upward search).
    - `to_yaml_dict` / `to_yaml` render a `MinionConfig` with canonical keys, so
      the output can be saved and loaded again as a config file.

Errors are raised as `ConfigFileError` (or `ConfigFileNotFoundError`); the
merge layer itself never sees I/O failures.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from pdfminion.config.errors import ConfigFileError, ConfigFileNotFoundError
from pdfminion.config.keys import Yaml
from pdfminion.config.logging import get_logger
from pdfminion.config.model import ConfigOverride
from pdfminion.constants import CONFIG_FILE_NAME

if TYPE_CHECKING:
    from pdfminion.config.logging import MinionLogger
    from pdfminion.config.model import MinionConfig

logger: MinionLogger = get_logger(__name__)

# `MinionConfig` attribute -> canonical config-file key (``config_file_name`` is never written).
_ATTR_TO_YAML_KEY: dict[str, str] = {
    "source_dir": Yaml.KEY_SOURCE,
    "target_dir": Yaml.KEY_TARGET,
    "force": Yaml.KEY_FORCE,
    "evenify": Yaml.KEY_EVENIFY,
    "merge": Yaml.KEY_MERGE,
    "merge_file_name": Yaml.KEY_MERGE_FILE_NAME,
    "locale": Yaml.KEY_LANGUAGE,
    "verbose": Yaml.KEY_VERBOSE,
    "running_header": Yaml.KEY_RUNNING_HEADER,
    "chapter_prefix": Yaml.KEY_CHAPTER_PREFIX,
    "separator": Yaml.KEY_SEPARATOR,
    "page_nr_prefix": Yaml.KEY_PAGE_PREFIX,
    "page_count_prefix": Yaml.KEY_PAGE_COUNT_PREFIX,
    "blank_page_text": Yaml.KEY_BLANK_PAGE_TEXT,
    "personal_touch": Yaml.KEY_PERSONAL_TOUCH,
}


def load_yaml_dict(path: Path) -> dict[str, Any]:
    """Load a YAML config file from disk.

    Args:
        path (Path): Path to the YAML file.

    Returns:
        dict[str, Any]: The parsed top-level mapping (empty for an empty file).

    Raises:
        ConfigFileNotFoundError: If the file does not exist.
        ConfigFileError: If the file cannot be read, is not valid YAML, or its
            top level is not a mapping.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data: Any = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ConfigFileError(path, f"invalid YAML: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFileError(path, f"cannot read file: {exc}") from exc

    if data is None:
        logger.debug("Config file %s is empty", path)
        return {}
    if not isinstance(data, dict):
        raise ConfigFileError(path, f"expected a mapping at top level, got {type(data).__name__}")
    return data


def override_from_yaml_file(path: Path) -> ConfigOverride:
    """Create an override from a YAML config file.

    The resulting override records ``path`` as its ``config_file_name``, so the
    merged configuration shows which file was applied.

    Args:
        path (Path): Path to the YAML file.

    Returns:
        ConfigOverride: The override, with key/value warnings in its diagnostics.
    """
    logger.debug("Creating ConfigOverride from YAML config: %s", path)
    data: dict[str, Any] = load_yaml_dict(path)
    draft: ConfigOverride = ConfigOverride.from_mapping(data, origin=str(path))
    override: ConfigOverride = replace(draft, config_file_name=str(path))
    logger.debug("Generated ConfigOverride: %s", override)
    return override


def find_config_file(directory: Path | None = None) -> Path | None:
    """Return ``pdfminion.yaml`` in ``directory`` (default: CWD) if it is a file."""
    base: Path = directory if directory is not None else Path.cwd()
    candidate: Path = base / CONFIG_FILE_NAME
    if candidate.is_file():
        logger.debug("Found config file: %s", candidate)
        return candidate
    logger.debug("No %s in %s", CONFIG_FILE_NAME, base)
    return None


def to_yaml_dict(config: MinionConfig) -> dict[str, Any]:
    """Return the settable values of ``config`` keyed by canonical config-file keys.

    Validity flags, diagnostics and the config file name are not included.
    """
    return {
        _ATTR_TO_YAML_KEY[attr]: value
        for attr, value in config.settable_items()
        if attr in _ATTR_TO_YAML_KEY
    }


def to_yaml(config: MinionConfig) -> str:
    """Render ``config`` as a ``pdfminion.yaml`` document.

    Args:
        config (MinionConfig): The configuration to render.

    Returns:
        str: YAML text; loading it back yields an override equal to ``config``'s values.
    """
    return yaml.safe_dump(
        to_yaml_dict(config),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
