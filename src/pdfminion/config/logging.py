# topmark:header:start
#
#   project      : PDFMinion
#   file         : logging.py
#   file_relpath : src/pdfminion/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for PDFMinion.

Adds a ``TRACE`` level below ``DEBUG`` (used for per-field merge detail),
a logger class exposing ``trace()``, and a formatter that colors records
with yachalk. Log output goes to stderr and is silent (CRITICAL) unless
``PDFMINION_LOG_LEVEL`` says otherwise; program output goes through
``pdfminion.cli.console`` instead.
"""

from __future__ import annotations

import logging
import os
import sys
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "PDFMINION_LOG_LEVEL"

# Names accepted in PDFMINION_LOG_LEVEL (besides plain numbers).
_LEVEL_BY_NAME: Final[MappingProxyType[str, int]] = MappingProxyType(
    {
        "TRACE": TRACE_LEVEL,
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
)


class MinionLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(MinionLogger)


# Lowest level first; a record takes the style of the highest threshold it reaches.
_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, cast("Callable[[str], str]", chalk.blue)),
    (logging.DEBUG, cast("Callable[[str], str]", chalk.gray)),
    (logging.INFO, cast("Callable[[str], str]", chalk.green)),
    (logging.WARNING, cast("Callable[[str], str]", chalk.yellow)),
    (logging.ERROR, cast("Callable[[str], str]", chalk.red_bright)),
)

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        text: str = super().format(record)
        style: Callable[[str], str] | None = None
        for threshold, candidate in _STYLES:
            if record.levelno >= threshold:
                style = candidate
        return style(text) if style is not None else text


def resolve_env_log_level() -> int | None:
    """Return the level named by ``PDFMINION_LOG_LEVEL``, or None.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``) and
    numbers (``10``). Unset or unrecognized values give None.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if raw.isdigit():
        return int(raw)
    return _LEVEL_BY_NAME.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Route all logging to one colored stderr handler at ``level``.

    Without ``level`` the environment decides, and the default is CRITICAL.
    Earlier handlers on the root logger are replaced.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> MinionLogger:
    """Return the `MinionLogger` called ``name``."""
    return cast("MinionLogger", logging.getLogger(name))
