# topmark:header:start
#
#   project      : SnapText
#   file         : __init__.py
#   file_relpath : src/snaptext/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapText CLI subcommands."""

from __future__ import annotations
