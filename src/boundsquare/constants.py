# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : constants.py
#   file_relpath : src/boundsquare/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""BoundSquare Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

BOUNDSQUARE_VERSION: str = get_version("boundsquare")

# Exceeds any valid coordinate magnitude (|x|, |y|, h <= 10**8).
SENTINEL_BOUND: Final[int] = 2 * 100_000_000 + 1
