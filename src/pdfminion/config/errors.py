# topmark:header:start
#
#   project      : PDFMinion
#   file         : errors.py
#   file_relpath : src/pdfminion/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the PDFMinion configuration layer.

The merge core itself absorbs irregular input (unsupported locale, absent
override, empty values) and does not raise. These exceptions cover I/O on
the config file and the reserved merge-failure path. The CLI translates them
into click exceptions with sysexits-aligned exit codes.
"""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base class for all configuration errors."""


class ConfigFileError(ConfigError):
    """A config file could not be read or does not hold a YAML mapping."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ConfigFileNotFoundError(ConfigFileError):
    """An explicitly requested config file does not exist."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, "config file not found")


class ConfigMergeError(ConfigError):
    """Merging an override into a base configuration failed.

    Reserved: no merge rule currently fails.
    """
