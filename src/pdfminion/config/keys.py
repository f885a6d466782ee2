# topmark:header:start
#
#   project      : PDFMinion
#   file         : keys.py
#   file_relpath : src/pdfminion/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical config-file keys and flag names for PDFMinion configuration.

This module defines the authoritative string constants used when reading and
writing ``pdfminion.yaml`` and when reporting which boolean flags a source
explicitly set.

Design notes:
    - Keys defined here represent *external configuration API*.
      Renaming or removing a key is a breaking change.
    - Config-file keys are matched case-insensitively, ignoring ``_`` and ``-``
      (see `normalize_key`), so ``mergeFileName``, ``merge_file_name`` and
      ``MERGEFILENAME`` all address the same setting.
    - CLI option names are defined separately in ``pdfminion.cli.options``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final


class Yaml:
    """Top-level keys in ``pdfminion.yaml``, in their canonical spelling.

    The canonical spelling is what `pdfminion.config.io.to_yaml` writes.
    """

    KEY_SOURCE: Final[str] = "source"
    KEY_TARGET: Final[str] = "target"
    KEY_FORCE: Final[str] = "force"
    KEY_EVENIFY: Final[str] = "evenify"
    KEY_MERGE: Final[str] = "merge"
    KEY_MERGE_FILE_NAME: Final[str] = "mergeFileName"
    KEY_LANGUAGE: Final[str] = "language"
    KEY_VERBOSE: Final[str] = "verbose"
    KEY_RUNNING_HEADER: Final[str] = "runningHeader"
    KEY_CHAPTER_PREFIX: Final[str] = "chapterPrefix"
    KEY_SEPARATOR: Final[str] = "separator"
    KEY_PAGE_PREFIX: Final[str] = "pagePrefix"
    KEY_PAGE_COUNT_PREFIX: Final[str] = "pageCountPrefix"
    KEY_BLANK_PAGE_TEXT: Final[str] = "blankPageText"
    KEY_PERSONAL_TOUCH: Final[str] = "personalTouch"


class Flag:
    """Fixed lowercase names of the boolean flags a source can explicitly set.

    These are the keys of `ConfigOverride.set_fields` and of the legacy
    explicit-set registry accepted by `ConfigOverride.from_set_fields`.
    """

    VERBOSE: Final[str] = "verbose"
    FORCE: Final[str] = "force"
    EVENIFY: Final[str] = "evenify"
    MERGE: Final[str] = "merge"
    PERSONAL: Final[str] = "personal"


def normalize_key(key: str) -> str:
    """Return the lookup form of a config-file key (lowercase, no ``_``/``-``)."""
    return key.strip().lower().replace("_", "").replace("-", "")


# Normalized config-file key -> `ConfigOverride` attribute name.
_KEY_TO_ATTR: dict[str, str] = {
    Yaml.KEY_SOURCE: "source_dir",
    "sourcedir": "source_dir",
    Yaml.KEY_TARGET: "target_dir",
    "targetdir": "target_dir",
    Yaml.KEY_FORCE: "force",
    Yaml.KEY_EVENIFY: "evenify",
    Yaml.KEY_MERGE: "merge",
    Yaml.KEY_MERGE_FILE_NAME: "merge_file_name",
    Yaml.KEY_LANGUAGE: "locale",
    "locale": "locale",
    Yaml.KEY_VERBOSE: "verbose",
    Yaml.KEY_RUNNING_HEADER: "running_header",
    Yaml.KEY_CHAPTER_PREFIX: "chapter_prefix",
    Yaml.KEY_SEPARATOR: "separator",
    Yaml.KEY_PAGE_PREFIX: "page_nr_prefix",
    "pagenrprefix": "page_nr_prefix",
    Yaml.KEY_PAGE_COUNT_PREFIX: "page_count_prefix",
    Yaml.KEY_BLANK_PAGE_TEXT: "blank_page_text",
    Yaml.KEY_PERSONAL_TOUCH: "personal_touch",
    "personal": "personal_touch",
}

CONFIG_KEY_TO_ATTR: Final[MappingProxyType[str, str]] = MappingProxyType(
    {normalize_key(k): v for k, v in _KEY_TO_ATTR.items()}
)
