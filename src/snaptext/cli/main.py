# topmark:header:start
#
#   project      : SnapText
#   file         : main.py
#   file_relpath : src/snaptext/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapText Click CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the shared console from there.
"""

from __future__ import annotations

import click

from snaptext.cli.commands.render import render_command
from snaptext.cli.commands.version import version_command
from snaptext.cli.console import ClickConsole
from snaptext.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from snaptext.config.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    # Explicit flags win; otherwise SNAPTEXT_LOG_LEVEL (or silence) applies
    level: int | None = resolve_verbosity(verbose, quiet) if (verbose or quiet) else None
    setup_logging(level=level)
    ctx.obj["log_level"] = level

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SnapText: render structured object snapshots as readable text.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the SnapText CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'snaptext render SNAPSHOT.json' to render a snapshot.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
