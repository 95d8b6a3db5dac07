# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : version.py
#   file_relpath : src/boundsquare/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""BoundSquare `version` command.

Prints the current BoundSquare version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from boundsquare.cli.cli_types import EnumChoiceParam
from boundsquare.cli.cmd_common import get_console
from boundsquare.constants import BOUNDSQUARE_VERSION
from boundsquare.formats import OutputFormat


@click.command(
    name="version",
    help="Show the current version of BoundSquare.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of BoundSquare.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    console = get_console(click.get_current_context())

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": BOUNDSQUARE_VERSION}))
    else:
        console.print(console.styled(BOUNDSQUARE_VERSION, bold=True))
