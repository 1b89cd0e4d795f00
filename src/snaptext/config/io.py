# topmark:header:start
#
#   project      : SnapText
#   file         : io.py
#   file_relpath : src/snaptext/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load SnapText configuration from TOML sources.

Configuration is read from ``snaptext.toml`` or from the ``[tool.snaptext]``
table of ``pyproject.toml``. Parsing is done with `tomlkit` and returned as
plain `dict` structures; value extraction goes through small getters that log
instead of raising on user mistakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from snaptext.config.keys import Toml
from snaptext.config.logging import get_logger
from snaptext.constants import DEFAULT_EXPAND_DEPTH, PYPROJECT_TOML_NAME, SNAPTEXT_TOML_NAME

if TYPE_CHECKING:
    from snaptext.config.logging import SnaptextLogger

logger: SnaptextLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_defaults_dict() -> TomlTable:
    """Return SnapText's runtime defaults as a TOML-table-compatible dict.

    Notes:
        ``two_level_grouping`` is unset by default: the snapshot decides.
    """
    return {
        Toml.KEY_EXPAND_DEPTH: DEFAULT_EXPAND_DEPTH,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table`` (empty dict when missing or not a table)."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected a table for %r, got %r; ignoring", key, value)
    return {}


def get_int_value_or_none(table: TomlTable, key: str, *, minimum: int = 0) -> int | None:
    """Extract an optional integer value, rejecting booleans and values below ``minimum``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        minimum (int): Smallest accepted value.

    Returns:
        int | None: The value, or ``None`` when absent or invalid (a warning is logged).
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Ignoring %s = %r: expected an integer", key, value)
        return None
    if value < minimum:
        logger.warning("Ignoring %s = %r: must be >= %d", key, value, minimum)
        return None
    return value


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value (``None`` when absent or invalid)."""
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        logger.warning("Ignoring %s = %r: expected a boolean", key, value)
        return None
    return value


def extract_snaptext_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the SnapText settings of a parsed TOML document.

    ``pyproject.toml`` files contribute their ``[tool.snaptext]`` table (or
    ``None`` when it is absent); any other file is a SnapText config as a whole.
    """
    if path.name == PYPROJECT_TOML_NAME:
        tool_tbl: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
        if Toml.SECTION_SNAPTEXT not in tool_tbl:
            return None
        return get_table_value(tool_tbl, Toml.SECTION_SNAPTEXT)
    return data


def find_config_file(start: Path) -> Path | None:
    """Locate the nearest SnapText config, walking up from ``start``.

    In each directory ``snaptext.toml`` wins over a ``pyproject.toml`` with a
    ``[tool.snaptext]`` table.

    Args:
        start (Path): Directory to start from.

    Returns:
        Path | None: The config file, or ``None`` if no directory holds one.
    """
    current: Path = start.resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / SNAPTEXT_TOML_NAME
        if candidate.is_file():
            logger.debug("Found config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if (
            pyproject.is_file()
            and extract_snaptext_table(load_toml_dict(pyproject), pyproject) is not None
        ):
            logger.debug("Found [tool.snaptext] in %s", pyproject)
            return pyproject
    return None
