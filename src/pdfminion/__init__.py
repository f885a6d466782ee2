# topmark:header:start
#
#   project      : PDFMinion
#   file         : __init__.py
#   file_relpath : src/pdfminion/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PDFMinion package.

PDFMinion adds page numbers, chapter numbers and running headers to PDF
files. This package holds its configuration layer: locale-aware defaults,
config-file and command-line overrides, and the merge that combines them.

Typical use::

    from pdfminion import ConfigOverride, MinionConfig

    config = MinionConfig.from_defaults("de")
    config.merge_with(ConfigOverride(target_dir="/out", merge=True))
"""

from __future__ import annotations

from pdfminion.config.locales import (
    DEFAULT_LOCALE,
    LocaleResolution,
    LocaleTexts,
    is_supported,
    lookup,
    resolve_locale,
)
from pdfminion.config.model import ConfigOverride, MinionConfig, build_default

__all__ = [
    "DEFAULT_LOCALE",
    "ConfigOverride",
    "LocaleResolution",
    "LocaleTexts",
    "MinionConfig",
    "build_default",
    "is_supported",
    "lookup",
    "resolve_locale",
]
