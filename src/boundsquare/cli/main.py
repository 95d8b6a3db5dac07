# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : main.py
#   file_relpath : src/boundsquare/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Click CLI with a default action plus real subcommands.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Without a subcommand the group runs `solve` on STDIN, so
  ``boundsquare < input.txt`` prints the answer directly.
"""

from __future__ import annotations

from pathlib import Path

import click

from boundsquare.cli.commands.solve import solve_command
from boundsquare.cli.commands.tokens import tokens_command
from boundsquare.cli.commands.version import version_command
from boundsquare.cli.console import ClickConsole
from boundsquare.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from boundsquare.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Initialize shared state (logging, color, console, config path) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (Path | None): Path given with ``--config``.
    """
    ctx.ensure_object(dict)

    # BOUNDSQUARE_LOG_LEVEL wins; -v/-q only apply when given
    level_cli = resolve_verbosity(verbose, quiet)
    level_env = resolve_env_log_level()
    level = level_env if level_env is not None else (level_cli if verbose or quiet else None)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_file"] = config_file


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Compute the smallest axis-aligned square enclosing a set of squares.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML config file ([boundsquare] table, or [tool.boundsquare] in pyproject.toml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Entry point for the BoundSquare CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_file=config_file,
    )

    if ctx.invoked_subcommand is None:
        logger.debug("No subcommand given, running 'solve' on STDIN")
        ctx.invoke(solve_command)


cli.add_command(solve_command)

cli.add_command(tokens_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
