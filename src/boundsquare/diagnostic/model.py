# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : model.py
#   file_relpath : src/boundsquare/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Diagnostics collected while scanning input.

The scanner never raises on I/O faults: it degrades to end-of-file and records
what happened here. The CLI renders the collected diagnostics on stderr once
the run is over, and reports an input error that follows one as an I/O error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from boundsquare.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from boundsquare.config.logging import BoundsquareLogger


logger: BoundsquareLogger = get_logger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic: an error message recorded by the scanner."""

    message: str

    def render(self) -> str:
        """Return the ``[error] message`` line shown on stderr."""
        return f"[error] {self.message}"


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics emitted during a single run."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def add_error(self, message: str) -> None:
        """Add an error diagnostic to the log."""
        self.items.append(Diagnostic(message))
        logger.trace("Adding [error]: %r", message)

    def has_error(self) -> bool:
        """Return True if any error was recorded."""
        return bool(self.items)
