# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : __init__.py
#   file_relpath : src/boundsquare/scanner/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Line-bounded tokenizing scanner and its integer parsing rules."""

from __future__ import annotations

from boundsquare.scanner.checkers import CheckerName, TokenChecker, is_not_whitespace
from boundsquare.scanner.errors import (
    EndOfInputError,
    InputMismatchError,
    LineExhaustedError,
    ScannerError,
    TokenFormatError,
)
from boundsquare.scanner.integers import parse_token_int
from boundsquare.scanner.line_scanner import LineScanner

__all__ = [
    "CheckerName",
    "EndOfInputError",
    "InputMismatchError",
    "LineExhaustedError",
    "LineScanner",
    "ScannerError",
    "TokenChecker",
    "TokenFormatError",
    "is_not_whitespace",
    "parse_token_int",
]
