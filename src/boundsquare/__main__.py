# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : __main__.py
#   file_relpath : src/boundsquare/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

r"""Module entry point for running BoundSquare via ``python -m boundsquare``.

Delegates to :func:`boundsquare.cli.main.cli`, the single authoritative CLI
entry point.

Examples:
    Solve a problem read from standard input::

        printf '1\n0 0 5\n' | python -m boundsquare
"""

from __future__ import annotations

from boundsquare.cli.main import cli

if __name__ == "__main__":
    cli()
