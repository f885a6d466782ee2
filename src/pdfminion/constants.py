# topmark:header:start
#
#   project      : PDFMinion
#   file         : constants.py
#   file_relpath : src/pdfminion/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PDFMinion constants and built-in configuration defaults."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

PDFMINION_VERSION: str = get_version("pdfminion")

CONFIG_FILE_NAME: Final[str] = "pdfminion.yaml"

DEFAULT_SOURCE_DIR: Final[str] = "_pdfs"
DEFAULT_TARGET_DIR: Final[str] = "_target"
DEFAULT_SEPARATOR: Final[str] = " - "
DEFAULT_MERGE_FILE_NAME: Final[str] = "merged.pdf"

DEFAULT_VERBOSE: Final[bool] = False
DEFAULT_FORCE: Final[bool] = False
DEFAULT_EVENIFY: Final[bool] = True
DEFAULT_MERGE: Final[bool] = False
DEFAULT_PERSONAL_TOUCH: Final[bool] = False

# Provenance labels for overrides that do not come from a file
ORIGIN_CLI: Final[str] = "<CLI overrides>"
ORIGIN_API: Final[str] = "<API overrides>"
