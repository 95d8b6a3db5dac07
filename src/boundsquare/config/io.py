# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : io.py
#   file_relpath : src/boundsquare/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Load TOML configuration sources and extract typed values.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Two
layouts are recognized:

- a dedicated file with a top-level ``[boundsquare]`` table;
- a ``pyproject.toml`` with a ``[tool.boundsquare]`` table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from boundsquare.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from boundsquare.config.logging import BoundsquareLogger

logger: BoundsquareLogger = get_logger(__name__)

TomlTable = dict[str, Any]

SECTION: Final[str] = "boundsquare"


class ConfigLoadError(Exception):
    """A configuration file is missing, unreadable, or malformed."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigLoadError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigLoadError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_section(data: TomlTable, path: Path) -> TomlTable:
    """Return the BoundSquare table from a parsed TOML document.

    Raises:
        ConfigLoadError: If the expected table is missing or not a table.
    """
    if path.name == "pyproject.toml":
        tool: Any = data.get("tool", {})
        section: Any = tool.get(SECTION) if isinstance(tool, dict) else None
        where = f"[tool.{SECTION}]"
    else:
        section = data.get(SECTION)
        where = f"[{SECTION}]"

    if not isinstance(section, dict):
        logger.error("%s section missing or malformed in %s", where, path)
        raise ConfigLoadError(f"{where} section missing or malformed in {path}")
    return cast("TomlTable", section)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Raises:
        ConfigLoadError: If the key is present but not a string.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigLoadError(f"'{key}' must be a string, got {type(value).__name__}")


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Raises:
        ConfigLoadError: If the key is present but not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigLoadError(f"'{key}' must be an integer, got {type(value).__name__}")
    return value
