# topmark:header:start
#
#   project      : elm-enums
#   file         : io.py
#   file_relpath : src/elm_enums/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading elm-enums configuration from
on-disk TOML files (``elm-enums.toml`` / ``pyproject.toml``) and typed getters
for the values in the resulting tables.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from elm_enums.config.logging import get_logger
from elm_enums.constants import PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from elm_enums.config.logging import ElmEnumsLogger

logger: ElmEnumsLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigLoadError(ValueError):
    """A config file cannot be parsed or holds a value of the wrong type."""


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
        raise ConfigLoadError(f"cannot read config file {path}: {e.strerror or e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigLoadError(f"invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the elm-enums table from a parsed config document.

    For ``pyproject.toml`` this is ``[tool.elm-enums]`` (``None`` when absent);
    for any other file the whole document is the table.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool_any: Any = data.get("tool", {})
    if not isinstance(tool_any, dict):
        return None
    section: Any = cast("dict[str, Any]", tool_any).get(PYPROJECT_TOOL_SECTION)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigLoadError(f"[tool.{PYPROJECT_TOOL_SECTION}] in {path} must be a table")
    return cast("TomlTable", section)


def get_string_value_or_none(table: TomlTable, key: str, *, source: Path | None = None) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        source (Path | None): Config file the table came from (for error messages).

    Returns:
        str | None: The value, or ``None`` when the key is missing.

    Raises:
        ConfigLoadError: If the key is present but not a string.
    """
    if key not in table:
        return None
    value: Any = table[key]
    if not isinstance(value, str):
        raise ConfigLoadError(
            f"'{key}' must be a string, got {type(value).__name__}" + _where(source)
        )
    return value


def get_bool_value_or_none(table: TomlTable, key: str, *, source: Path | None = None) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        source (Path | None): Config file the table came from (for error messages).

    Returns:
        bool | None: The value, or ``None`` when the key is missing.

    Raises:
        ConfigLoadError: If the key is present but not a boolean.
    """
    if key not in table:
        return None
    value: Any = table[key]
    if not isinstance(value, bool):
        raise ConfigLoadError(
            f"'{key}' must be a boolean, got {type(value).__name__}" + _where(source)
        )
    return value


def _where(source: Path | None) -> str:
    return f" (in {source})" if source is not None else ""
