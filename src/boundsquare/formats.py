# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : formats.py
#   file_relpath : src/boundsquare/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Output format vocabulary shared by the CLI and the configuration layer.

Kept free of Click and console dependencies so the config layer can parse it.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        DEFAULT: The bare ``x y h`` line, without a trailing newline.
        JSON: A single JSON object ``{"x": ..., "y": ..., "h": ...}``.
    """

    DEFAULT = "default"
    JSON = "json"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt == OutputFormat.JSON
