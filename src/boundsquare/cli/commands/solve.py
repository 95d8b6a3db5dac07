# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : solve.py
#   file_relpath : src/boundsquare/cli/commands/solve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""BoundSquare `solve` command.

Reads ``n`` followed by ``n`` lines of ``x y h`` and prints the center and
half-width of the smallest enclosing axis-aligned square as ``x y h``. This is
also the default action when no subcommand is given.

Input/Output policy:
  * The default format writes the bare ``x y h`` line with no trailing newline.
  * ``--format json`` writes ``{"x": .., "y": .., "h": ..}`` followed by a newline.
  * Diagnostics and errors go to stderr.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from boundsquare.cli.cli_types import EnumChoiceParam
from boundsquare.cli.cmd_common import get_console, resolve_config, scanner_errors
from boundsquare.cli.io import open_scanner
from boundsquare.cli.options import common_input_options
from boundsquare.config.logging import get_logger
from boundsquare.diagnostic.model import DiagnosticLog
from boundsquare.formats import OutputFormat
from boundsquare.geometry import BoundingSquareComputer

if TYPE_CHECKING:
    from boundsquare.config.logging import BoundsquareLogger
    from boundsquare.geometry import BoundingSquare
    from boundsquare.scanner.checkers import CheckerName

logger: BoundsquareLogger = get_logger(__name__)


@click.command(
    name="solve",
    help="Print the smallest axis-aligned square enclosing the input squares.",
)
@common_input_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def solve_command(
    *,
    input_path: str = "-",
    encoding: str | None = None,
    checker: CheckerName | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Solve the enclosing-square problem read from the input.

    Args:
        input_path (str): Input file path, or ``-`` for STDIN.
        encoding (str | None): Input encoding override.
        checker (CheckerName | None): Token character class override.
        output_format (OutputFormat | None): Output format override.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = resolve_config(
        ctx,
        encoding=encoding,
        checker=checker,
        output_format=output_format,
    )

    diagnostics = DiagnosticLog()
    with scanner_errors(console, diagnostics):
        with open_scanner(input_path, config, diagnostics) as scanner:
            result: BoundingSquare = BoundingSquareComputer(config.sentinel_bound).solve(scanner)

    logger.info("Enclosing square: %s", result)
    if config.output_format == OutputFormat.JSON:
        console.print(json.dumps(result.to_dict()))
    else:
        console.print(result.render(), nl=False)
