# topmark:header:start
#
#   project      : PDFMinion
#   file         : validation.py
#   file_relpath : src/pdfminion/config/validation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path validation for a merged `MinionConfig`.

Sets the ``config_file_valid``, ``source_dir_valid`` and ``target_dir_valid``
flags. Several operations still work with invalid paths (showing settings,
for instance), so nothing here raises: each failed check adds a warning to
the returned log and leaves the flag False.

Checks only look at the named paths themselves; directory contents are not
inspected.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pdfminion.config.errors import ConfigFileError
from pdfminion.config.io import load_yaml_dict
from pdfminion.config.logging import get_logger
from pdfminion.core.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from pdfminion.config.logging import MinionLogger
    from pdfminion.config.model import MinionConfig

logger: MinionLogger = get_logger(__name__)


def validate_source_dir(config: MinionConfig, diagnostics: DiagnosticLog) -> bool:
    """Check that ``config.source_dir`` is an existing, readable directory."""
    path = Path(config.source_dir)
    valid: bool = False
    if not path.exists():
        diagnostics.add_warning(f"Source directory does not exist: {path}")
    elif not path.is_dir():
        diagnostics.add_warning(f"Source is not a directory: {path}")
    elif not os.access(path, os.R_OK | os.X_OK):
        diagnostics.add_warning(f"Source directory is not readable: {path}")
    else:
        valid = True
    config.source_dir_valid = valid
    logger.debug("source_dir %s valid=%s", path, valid)
    return valid


def validate_target_dir(config: MinionConfig, diagnostics: DiagnosticLog) -> bool:
    """Check that ``config.target_dir`` is writable or can be created.

    A missing target directory is valid when its nearest existing ancestor
    is a writable directory.
    """
    path = Path(config.target_dir)
    valid: bool = False
    if path.exists():
        if not path.is_dir():
            diagnostics.add_warning(f"Target is not a directory: {path}")
        elif not os.access(path, os.W_OK | os.X_OK):
            diagnostics.add_warning(f"Target directory is not writable: {path}")
        else:
            valid = True
    else:
        ancestor: Path = path.absolute().parent
        while not ancestor.exists() and ancestor != ancestor.parent:
            ancestor = ancestor.parent
        if ancestor.is_dir() and os.access(ancestor, os.W_OK | os.X_OK):
            valid = True
        else:
            diagnostics.add_warning(f"Target directory cannot be created: {path}")
    config.target_dir_valid = valid
    logger.debug("target_dir %s valid=%s", path, valid)
    return valid


def validate_config_file(config: MinionConfig, diagnostics: DiagnosticLog) -> bool:
    """Check that ``config.config_file_name`` exists and holds a YAML mapping.

    An empty name means no config file is in use; the flag stays False.
    """
    if not config.config_file_name:
        diagnostics.add_info("No config file in use")
        config.config_file_valid = False
        return False
    path = Path(config.config_file_name)
    valid: bool = False
    if not path.is_file():
        diagnostics.add_info(f"No config file found: {path}")
    else:
        try:
            load_yaml_dict(path)
            valid = True
        except ConfigFileError as exc:
            diagnostics.add_warning(str(exc))
    config.config_file_valid = valid
    logger.debug("config_file %s valid=%s", path, valid)
    return valid


def validate_config(config: MinionConfig) -> DiagnosticLog:
    """Run all path checks on ``config`` and set its ``*_valid`` flags.

    Args:
        config (MinionConfig): The merged configuration; updated in place.

    Returns:
        DiagnosticLog: One entry per failed check.
    """
    diagnostics = DiagnosticLog()
    validate_config_file(config, diagnostics)
    validate_source_dir(config, diagnostics)
    validate_target_dir(config, diagnostics)
    return diagnostics
