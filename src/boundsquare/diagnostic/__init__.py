# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : __init__.py
#   file_relpath : src/boundsquare/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Diagnostics collected during a BoundSquare run."""

from __future__ import annotations

from boundsquare.diagnostic.model import Diagnostic, DiagnosticLog

__all__ = [
    "Diagnostic",
    "DiagnosticLog",
]
