# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : cmd_common.py
#   file_relpath : src/boundsquare/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the commands: configuration resolution, mapping of
scanner errors to CLI errors, and rendering of collected diagnostics.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import click

from boundsquare.cli.errors import (
    BoundsquareConfigError,
    BoundsquareDataError,
    BoundsquareIOError,
)
from boundsquare.config import ConfigLoadError, MutableConfig
from boundsquare.config.logging import get_logger
from boundsquare.scanner.errors import ScannerError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from boundsquare.cli.console import ConsoleLike
    from boundsquare.config import Config
    from boundsquare.config.logging import BoundsquareLogger
    from boundsquare.diagnostic.model import DiagnosticLog

logger: BoundsquareLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def resolve_config(ctx: click.Context, **overrides: Any) -> Config:
    """Merge defaults, the group-level ``--config`` file and command overrides.

    Raises:
        BoundsquareConfigError: If the config file or an override is invalid.
    """
    ctx.ensure_object(dict)
    config_file: Path | None = ctx.obj.get("config_file")
    try:
        draft = MutableConfig.load_merged(config_file=config_file, args=overrides)
        config = draft.freeze()
    except ConfigLoadError as e:
        raise BoundsquareConfigError(str(e)) from e
    logger.debug("Effective config: %s", config)
    return config


def emit_diagnostics(console: ConsoleLike, diagnostics: DiagnosticLog) -> None:
    """Print collected diagnostics to stderr, one per line."""
    for diag in diagnostics:
        console.error(diag.render())


@contextmanager
def scanner_errors(console: ConsoleLike, diagnostics: DiagnosticLog) -> Iterator[None]:
    """Translate scanner errors into CLI errors and flush diagnostics on exit.

    A scanner error that follows a recorded I/O fault is reported as an I/O error,
    since the fault is what cut the input short.

    Raises:
        BoundsquareIOError: If input ran out after an I/O fault.
        BoundsquareDataError: If the input is malformed.
    """
    try:
        yield
    except ScannerError as e:
        logger.error("Input error: %s", e)
        if diagnostics.has_error():
            raise BoundsquareIOError(f"Input truncated by I/O error: {e}") from e
        raise BoundsquareDataError(f"Malformed input: {e}") from e
    finally:
        emit_diagnostics(console, diagnostics)
