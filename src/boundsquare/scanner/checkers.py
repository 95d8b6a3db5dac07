# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : checkers.py
#   file_relpath : src/boundsquare/scanner/checkers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Token-character classifiers for the line scanner.

A checker decides whether a single character belongs to a token. Any callable
``(str) -> bool`` satisfies `TokenChecker`; the named checkers below are the
ones selectable from configuration.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from boundsquare.scanner.integers import digit_value


class TokenChecker(Protocol):
    """Structural interface for token-character classifiers."""

    def __call__(self, ch: str) -> bool:
        """Return True if ``ch`` is part of a token."""
        ...


def is_not_whitespace(ch: str) -> bool:
    """Default checker: every non-whitespace character is a token character."""
    return not ch.isspace()


def is_word_char(ch: str) -> bool:
    """Letters, digits, underscores, apostrophes and dashes form tokens."""
    return ch.isalnum() or ch in "_'-"


def is_int_char(ch: str) -> bool:
    """Characters that may appear in a decimal or ``0x`` hexadecimal literal."""
    return ch in "+-xX" or digit_value(ch, 16) is not None


class CheckerName(str, Enum):
    """Named checkers selectable from the CLI and configuration."""

    WHITESPACE = "whitespace"
    WORD = "word"
    INTEGER = "integer"

    @property
    def checker(self) -> TokenChecker:
        """Return the classifier function for this name."""
        return {
            CheckerName.WHITESPACE: is_not_whitespace,
            CheckerName.WORD: is_word_char,
            CheckerName.INTEGER: is_int_char,
        }[self]
