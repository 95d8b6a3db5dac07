# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : model.py
#   file_relpath : src/boundsquare/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the commands.
    - `MutableConfig`: a mutable builder used while loading and merging; it
      is frozen into `Config` once all sources are applied.

Precedence (lowest to highest): built-in defaults, the ``--config`` file, CLI
options. ``None`` on a `MutableConfig` field means "inherit".
"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from boundsquare.config.io import (
    ConfigLoadError,
    TomlTable,
    extract_section,
    get_int_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
)
from boundsquare.config.logging import BoundsquareLogger, get_logger
from boundsquare.constants import SENTINEL_BOUND
from boundsquare.formats import OutputFormat
from boundsquare.scanner.checkers import CheckerName
from boundsquare.scanner.integers import INT32_MAX

# Generic mapping accepted by `MutableConfig.apply_cli_args` (CLI namespaces and plain dicts).
ArgsLike = Mapping[str, Any]

logger: BoundsquareLogger = get_logger(__name__)

DEFAULT_ENCODING: str = "utf-8"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        encoding (str): Text encoding used to decode the input.
        output_format (OutputFormat): How the result is rendered.
        sentinel_bound (int): Magnitude seeding the running extrema.
        checker (CheckerName): Token-character classifier used by the scanner.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    encoding: str
    output_format: OutputFormat
    sentinel_bound: int
    checker: CheckerName
    config_files: tuple[Path, ...]


@dataclass
class MutableConfig:
    """Mutable configuration draft used while loading and merging."""

    encoding: str | None = None
    output_format: OutputFormat | None = None
    sentinel_bound: int | None = None
    checker: CheckerName | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the built-in defaults."""
        return cls(
            encoding=DEFAULT_ENCODING,
            output_format=OutputFormat.DEFAULT,
            sentinel_bound=SENTINEL_BOUND,
            checker=CheckerName.WHITESPACE,
        )

    @classmethod
    def from_toml_dict(cls, table: TomlTable) -> MutableConfig:
        """Build a draft from the contents of a ``[boundsquare]`` table.

        Raises:
            ConfigLoadError: If a key holds a value of the wrong type or an
                unknown choice.
        """
        draft = cls(
            encoding=get_string_value_or_none(table, "encoding"),
            sentinel_bound=get_int_value_or_none(table, "sentinel_bound"),
        )

        fmt = get_string_value_or_none(table, "output_format")
        if fmt is not None:
            draft.output_format = _parse_choice(OutputFormat, "output_format", fmt)

        checker = get_string_value_or_none(table, "checker")
        if checker is not None:
            draft.checker = _parse_choice(CheckerName, "checker", checker)

        unknown = sorted(set(table) - {"encoding", "sentinel_bound", "output_format", "checker"})
        if unknown:
            logger.warning("Ignoring unknown config key(s): %s", ", ".join(unknown))
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a draft from a TOML file.

        Supports both a dedicated file (``[boundsquare]``) and ``pyproject.toml``
        (``[tool.boundsquare]``).

        Raises:
            ConfigLoadError: If the file is unreadable, malformed, or lacks the section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        draft = cls.from_toml_dict(extract_section(data, path))
        draft.config_files = [path]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        args: ArgsLike | None = None,
    ) -> MutableConfig:
        """Merge defaults, an optional config file and CLI arguments."""
        draft = cls.from_defaults()
        if config_file is not None:
            draft = draft.merge_with(cls.from_toml_file(config_file))
        if args is not None:
            draft = draft.apply_cli_args(args)
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where ``other``'s set fields override this one's."""
        return MutableConfig(
            encoding=other.encoding if other.encoding is not None else self.encoding,
            output_format=(
                other.output_format if other.output_format is not None else self.output_format
            ),
            sentinel_bound=(
                other.sentinel_bound if other.sentinel_bound is not None else self.sentinel_bound
            ),
            checker=other.checker if other.checker is not None else self.checker,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides; keys whose value is ``None`` are ignored."""
        overrides = MutableConfig(
            encoding=args.get("encoding"),
            output_format=args.get("output_format"),
            sentinel_bound=args.get("sentinel_bound"),
            checker=args.get("checker"),
        )
        return self.merge_with(overrides)

    def freeze(self) -> Config:
        """Validate and return an immutable `Config`; unset fields take defaults.

        Raises:
            ConfigLoadError: If the encoding is unknown or the bound is out of range.
        """
        encoding = self.encoding or DEFAULT_ENCODING
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ConfigLoadError(f"Unknown encoding: {encoding!r}") from e

        bound = self.sentinel_bound if self.sentinel_bound is not None else SENTINEL_BOUND
        if not 0 < bound <= INT32_MAX:
            raise ConfigLoadError(f"sentinel_bound must be in 1..{INT32_MAX}, got {bound}")

        return Config(
            encoding=encoding,
            output_format=self.output_format or OutputFormat.DEFAULT,
            sentinel_bound=bound,
            checker=self.checker or CheckerName.WHITESPACE,
            config_files=tuple(self.config_files),
        )


def _parse_choice(enum_cls: Any, key: str, value: str) -> Any:
    try:
        return enum_cls(value.lower())
    except ValueError as e:
        choices = ", ".join(m.value for m in enum_cls)
        raise ConfigLoadError(f"Invalid {key} {value!r}. Must be one of: {choices}") from e
