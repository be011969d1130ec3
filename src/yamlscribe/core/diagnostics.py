# topmark:header:start
#
#   project      : YamlScribe
#   file         : diagnostics.py
#   file_relpath : src/yamlscribe/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading configuration.

Loading a config file never stops at the first problem: every malformed key is
recorded in a `DiagnosticLog` (and logged), so the CLI can report all of them
at once before deciding whether to abort.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from yamlscribe.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from yamlscribe.config.logging import YamlScribeLogger

logger: YamlScribeLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = True) -> str:
        """Return ``"<level>: <message>"``, optionally colored."""
        prefix: str = f"{self.level.value}:"
        if color:
            prefix = self.level.color(prefix)
        return f"{prefix} {self.message}"


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.ERROR, message))

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def errors(self) -> list[str]:
        """Return the messages of all error diagnostics, in insertion order."""
        return [d.message for d in self.items if d.level == DiagnosticLevel.ERROR]
