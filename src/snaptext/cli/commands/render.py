# topmark:header:start
#
#   project      : SnapText
#   file         : render.py
#   file_relpath : src/snaptext/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapText `render` command.

Loads a JSON snapshot document, resolves the effective configuration
(defaults → ``snaptext.toml`` / ``[tool.snaptext]`` → CLI options) and writes
the readable rendering to stdout or to a file.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import click

from snaptext.cli.errors import (
    SnaptextConfigError,
    SnaptextDataError,
    SnaptextFileNotFoundError,
    SnaptextIOError,
    SnaptextRenderError,
)
from snaptext.config import MutableConfig, resolve_config
from snaptext.config.logging import get_logger
from snaptext.errors import SnapshotLoadError, SnaptextError
from snaptext.serializer.readable import ReadableSnapshotSerializer
from snaptext.snapshot.loaders import load_snapshot

if TYPE_CHECKING:
    from snaptext.cli.console import ConsoleLike
    from snaptext.config import Config
    from snaptext.config.logging import SnaptextLogger
    from snaptext.snapshot.model import Snapshot

logger: SnaptextLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render a JSON snapshot document as readable text.",
)
@click.argument(
    "snapshot_path",
    metavar="SNAPSHOT",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--expand-depth",
    "expand_depth",
    type=click.IntRange(min=0),
    default=None,
    help="Expand referenced entities while the reference path is at most this long "
    "(default: 1, or the configured value).",
)
@click.option(
    "--two-level/--one-level",
    "two_level_grouping",
    default=None,
    help="Label groups as 'catalog / schema' or as 'catalog' only "
    "(default: as declared by the snapshot).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of discovering one.",
)
@click.option(
    "--output",
    "-o",
    "output",
    type=str,
    default="-",
    show_default=True,
    help="Destination file ('-' writes to stdout).",
)
def render_command(
    *,
    snapshot_path: Path,
    expand_depth: int | None,
    two_level_grouping: bool | None,
    config_path: Path | None,
    output: str,
) -> None:
    """Render a snapshot document.

    Args:
        snapshot_path (Path): JSON snapshot document.
        expand_depth (int | None): CLI override of the expansion depth.
        two_level_grouping (bool | None): CLI override of the group label style.
        config_path (Path | None): Explicit config file.
        output (str): Destination path, or ``-`` for stdout.

    Raises:
        SnaptextFileNotFoundError: If the snapshot or config file does not exist.
        SnaptextConfigError: If the explicit config path is not a file.
        SnaptextDataError: If the snapshot document is malformed.
        SnaptextRenderError: If the snapshot cannot be rendered.
        SnaptextIOError: If reading or writing fails.
    """
    if not snapshot_path.exists():
        raise SnaptextFileNotFoundError(f"Snapshot file not found: {snapshot_path}")
    if config_path is not None and not config_path.is_file():
        raise SnaptextConfigError(f"Config file not found: {config_path}")

    config: Config = resolve_config(
        cwd=Path.cwd(),
        config_path=config_path,
        overrides=MutableConfig(
            expand_depth=expand_depth,
            two_level_grouping=two_level_grouping,
        ),
    )
    serializer: ReadableSnapshotSerializer = ReadableSnapshotSerializer.from_config(config)

    try:
        snapshot: Snapshot = load_snapshot(snapshot_path)
    except SnapshotLoadError as exc:
        raise SnaptextDataError(str(exc)) from exc
    except OSError as exc:
        raise SnaptextIOError(f"Cannot read {snapshot_path}: {exc}") from exc

    # Render fully before touching the destination: no partial documents
    buffer = io.BytesIO()
    try:
        serializer.write(snapshot, buffer)
    except SnaptextError as exc:
        raise SnaptextRenderError(str(exc)) from exc

    try:
        if output == "-":
            stdout: BinaryIO = click.get_binary_stream("stdout")
            stdout.write(buffer.getvalue())
            stdout.flush()
        else:
            destination = Path(output)
            if destination.suffix.lstrip(".") not in serializer.valid_file_extensions:
                console: ConsoleLike = click.get_current_context().obj["console"]
                console.warn(
                    f"Warning: {output} does not end in "
                    + ", ".join(f".{ext}" for ext in serializer.valid_file_extensions)
                )
            destination.write_bytes(buffer.getvalue())
            logger.info("Wrote %s", output)
    except OSError as exc:
        raise SnaptextIOError(f"Cannot write {output}: {exc}") from exc
