# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : __init__.py
#   file_relpath : src/boundsquare/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""BoundSquare command line interface (Click)."""
