# topmark:header:start
#
#   project      : SnapText
#   file         : __init__.py
#   file_relpath : src/snaptext/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapText package.

SnapText renders an in-memory snapshot of structured objects (a graph of typed,
named entities) as deterministic, indented plain text suitable for diffing and
review. It exposes a small typed API and a Click-based CLI.
"""

from __future__ import annotations
