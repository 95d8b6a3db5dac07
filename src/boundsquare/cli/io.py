# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : io.py
#   file_relpath : src/boundsquare/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Input acquisition for CLI commands.

Input is opened with ``newline=""`` so line terminators reach the scanner
untranslated, and with ``errors="replace"`` so undecodable bytes become U+FFFD
instead of aborting the read.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, TYPE_CHECKING

import click

from boundsquare.cli.errors import BoundsquareFileNotFoundError, BoundsquareIOError
from boundsquare.config.logging import get_logger
from boundsquare.scanner.line_scanner import LineScanner

if TYPE_CHECKING:
    from boundsquare.config import Config
    from boundsquare.config.logging import BoundsquareLogger
    from boundsquare.diagnostic.model import DiagnosticLog

logger: BoundsquareLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def open_input(input_path: str, encoding: str) -> IO[str]:
    """Open ``input_path`` (or STDIN for ``-``) as an untranslated text stream.

    Raises:
        BoundsquareFileNotFoundError: If the path does not exist or is a directory.
        BoundsquareIOError: If the file cannot be opened.
    """
    if input_path == STDIN_MARKER:
        logger.debug("Reading input from STDIN (encoding=%s)", encoding)
        return io.TextIOWrapper(
            click.get_binary_stream("stdin"),
            encoding=encoding,
            errors="replace",
            newline="",
        )

    path = Path(input_path)
    logger.debug("Reading input from %s (encoding=%s)", path, encoding)
    try:
        return path.open(encoding=encoding, errors="replace", newline="")
    except (FileNotFoundError, IsADirectoryError) as e:
        logger.error("Cannot open input %s: %s", path, e)
        raise BoundsquareFileNotFoundError(f"Input not found: {input_path}") from e
    except OSError as e:
        logger.error("Cannot open input %s: %s", path, e)
        raise BoundsquareIOError(f"Cannot read input {input_path}: {e}") from e


def open_scanner(input_path: str, config: Config, diagnostics: DiagnosticLog) -> LineScanner:
    """Return a `LineScanner` over the configured input."""
    stream: IO[str] = open_input(input_path, config.encoding)
    return LineScanner(stream, config.checker.checker, diagnostics=diagnostics)
