# topmark:header:start
#
#   project      : SnapText
#   file         : __main__.py
#   file_relpath : src/snaptext/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SnapText via ``python -m snaptext``.

It delegates directly to :func:`snaptext.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how SnapText is launched.

Examples:
    Render a snapshot document::

        python -m snaptext render snapshot.json
"""

from __future__ import annotations

from snaptext.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
