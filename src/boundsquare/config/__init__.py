# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : __init__.py
#   file_relpath : src/boundsquare/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Configuration handling for BoundSquare.

Re-exports the configuration model and the TOML loading errors. The logging
helpers live in `boundsquare.config.logging` and are imported from there
directly.
"""

from __future__ import annotations

from boundsquare.config.io import ConfigLoadError
from boundsquare.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "ConfigLoadError",
    "MutableConfig",
]
