# topmark:header:start
#
#   project      : SnapText
#   file         : text.py
#   file_relpath : src/snaptext/serializer/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text assembly helpers for the readable serializer.

Pure string manipulation: block indentation, the divider line and newline
normalization. No business logic lives here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from snaptext.constants import DIVIDER, INDENT_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterable


def indent(text: str, width: int = INDENT_WIDTH) -> str:
    """Indent every line of a multi-line block, the first one included.

    Args:
        text (str): Block to indent.
        width (int): Number of spaces per indentation level.

    Returns:
        str: The indented block. Blank lines, including a trailing one, are padded too.
    """
    padding: str = " " * width
    return "\n".join(padding + line for line in text.split("\n"))


def divider() -> str:
    """Return the divider line (without newline)."""
    return DIVIDER


def normalize_newlines(text: str) -> str:
    r"""Convert ``\r\n`` and bare ``\r`` line endings to ``\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def join_lines(lines: Iterable[str]) -> str:
    """Join lines with ``\\n`` (no trailing newline)."""
    return "\n".join(lines)


def ensure_final_newline(text: str) -> str:
    """Terminate ``text`` with a newline unless it already ends with one."""
    return text if text.endswith("\n") else text + "\n"
