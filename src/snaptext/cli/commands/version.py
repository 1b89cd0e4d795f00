# topmark:header:start
#
#   project      : SnapText
#   file         : version.py
#   file_relpath : src/snaptext/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapText `version` command.

Prints the SnapText version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snaptext.constants import SNAPTEXT_VERSION

if TYPE_CHECKING:
    from snaptext.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SnapText.",
)
def version_command() -> None:
    """Show the current version of SnapText."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(console.styled(SNAPTEXT_VERSION, bold=True))
