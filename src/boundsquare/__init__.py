# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : __init__.py
#   file_relpath : src/boundsquare/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""BoundSquare package.

BoundSquare computes the smallest axis-aligned square enclosing a set of
squares read from line-oriented integer input. It exposes a Click CLI and a
small typed API (`boundsquare.geometry`, `boundsquare.scanner`).
"""

from __future__ import annotations
