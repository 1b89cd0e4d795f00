# topmark:header:start
#
#   project      : SnapText
#   file         : constants.py
#   file_relpath : src/snaptext/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapText Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SNAPTEXT_VERSION: str = get_version("snaptext")

# Config file names looked up in the working directory:
SNAPTEXT_TOML_NAME: str = "snaptext.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Environment variable holding the internal log level:
LOG_LEVEL_ENV_VAR: str = "SNAPTEXT_LOG_LEVEL"

DEFAULT_EXPAND_DEPTH: int = 1

INDENT_WIDTH: int = 4

DIVIDER: str = "-" * 65

# File extensions the readable serializer produces:
VALID_FILE_EXTENSIONS: tuple[str, ...] = ("txt",)

# Attribute names that describe where an entity lives, not what it is:
STRUCTURAL_ATTRIBUTE_NAMES: frozenset[str] = frozenset({"name", "schema", "group", "catalog"})

VALUE_NOT_SET: str = "<not set>"
