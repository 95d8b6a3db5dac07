# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : tokens.py
#   file_relpath : src/boundsquare/cli/commands/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""BoundSquare `tokens` command.

Shows how the line scanner splits the input: one output line per input line,
holding that line's tokens separated by single spaces. Useful to check how a
given input (CRLF endings, unusual whitespace, a non-default ``--checker``) is
tokenized before feeding it to `solve`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from boundsquare.cli.cli_types import EnumChoiceParam
from boundsquare.cli.cmd_common import get_console, resolve_config, scanner_errors
from boundsquare.cli.io import open_scanner
from boundsquare.cli.options import common_input_options
from boundsquare.diagnostic.model import DiagnosticLog
from boundsquare.formats import OutputFormat

if TYPE_CHECKING:
    from boundsquare.scanner.checkers import CheckerName
    from boundsquare.scanner.line_scanner import LineScanner


def read_token_lines(scanner: LineScanner) -> list[list[str]]:
    """Return the tokens of every line; a trailing empty line is dropped."""
    lines: list[list[str]] = []
    while scanner.has_next_line():
        tokens = list(scanner.iter_line_tokens())
        if tokens or scanner.has_next_line():
            lines.append(tokens)
        scanner.go_to_next_line()
    return lines


@click.command(
    name="tokens",
    help="Print the tokens of each input line as seen by the scanner.",
)
@common_input_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def tokens_command(
    *,
    input_path: str = "-",
    encoding: str | None = None,
    checker: CheckerName | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Dump the scanner's view of the input, line by line."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = resolve_config(ctx, encoding=encoding, checker=checker, output_format=output_format)

    diagnostics = DiagnosticLog()
    with scanner_errors(console, diagnostics):
        with open_scanner(input_path, config, diagnostics) as scanner:
            lines = read_token_lines(scanner)

    if config.output_format == OutputFormat.JSON:
        console.print(json.dumps(lines))
        return
    for tokens in lines:
        console.print(" ".join(tokens))
