# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : errors.py
#   file_relpath : src/boundsquare/scanner/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Exceptions raised by the line scanner.

I/O faults are never raised: the scanner records them as diagnostics and treats
the stream as closed. Everything below propagates to the caller.
"""

from __future__ import annotations


class ScannerError(Exception):
    """Base class for all scanner errors."""


class InputMismatchError(ScannerError, ValueError):
    """A value was requested but the input has none to give."""


class EndOfInputError(InputMismatchError, EOFError):
    """A value was requested after the stream was exhausted."""

    def __init__(self, message: str = "reading after end of input") -> None:
        super().__init__(message)


class LineExhaustedError(InputMismatchError):
    """A value was requested from a line whose tokens are all consumed."""

    def __init__(self, message: str = "reading in ended line") -> None:
        super().__init__(message)


class TokenFormatError(ScannerError, ValueError):
    """A token does not parse as a 32-bit integer.

    Attributes:
        token (str): The offending token.
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"For input string: {token!r}")
