# topmark:header:start
#
#   project      : PDFMinion
#   file         : diagnostics.py
#   file_relpath : src/pdfminion/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Non-fatal notices collected while building a configuration.

A locale fallback, an unknown config-file key or a missing source directory
does not stop PDFMinion. Such irregularities are recorded as `Diagnostic`
entries in a `DiagnosticLog`; the CLI prints them in verbose mode.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from pdfminion.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from pdfminion.config.logging import MinionLogger


logger: MinionLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """How serious a diagnostic is: ``info`` notices or ``warning`` problems."""

    INFO = "info"
    WARNING = "warning"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the yachalk style used when printing this level."""
        style = chalk.blue if self is DiagnosticLevel.INFO else chalk.yellow
        return cast("Callable[[str], str]", style)


@dataclass(frozen=True)
class Diagnostic:
    """One notice: a level and a human-readable message."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Ordered list of diagnostics.

    `MinionConfig` and `ConfigOverride` each own one. `merge_with` leaves them
    alone; ``pdfminion.cli.config_resolver`` gathers the logs of every layer.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Return a new log holding ``diagnostics`` in order."""
        return cls(items=list(diagnostics))

    def add(self, diagnostic: Diagnostic) -> None:
        """Append ``diagnostic``."""
        self.items.append(diagnostic)
        logger.trace("Diagnostic [%s]: %s", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str) -> None:
        """Append an ``info`` diagnostic with ``message``."""
        self.add(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Append a ``warning`` diagnostic with ``message``."""
        self.add(Diagnostic(DiagnosticLevel.WARNING, message))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append all of ``diagnostics`` in order."""
        for d in diagnostics:
            self.add(d)

    def has_warning(self) -> bool:
        """Return True if any entry is a warning."""
        return any(d.level is DiagnosticLevel.WARNING for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
