# topmark:header:start
#
#   project      : SnapText
#   file         : keys.py
#   file_relpath : src/snaptext/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for SnapText configuration.

Keys defined here represent the *external configuration API* as it appears in
``snaptext.toml`` and in ``[tool.snaptext]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML table and key names used by SnapText configuration."""

    # [tool] table in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_SNAPTEXT: Final[str] = "snaptext"

    KEY_EXPAND_DEPTH: Final[str] = "expand_depth"
    KEY_TWO_LEVEL_GROUPING: Final[str] = "two_level_grouping"
