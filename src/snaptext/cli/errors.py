# topmark:header:start
#
#   project      : SnapText
#   file         : errors.py
#   file_relpath : src/snaptext/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SnapText CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. They prefer the project console if one is present in the Click context
(see `show()`), and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from snaptext.cli.exit_codes import ExitCode


class SnaptextCliError(click.ClickException):
    """Base class for all SnapText CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class SnaptextUsageError(SnaptextCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SnaptextDataError(SnaptextCliError):
    """Error for malformed snapshot documents."""

    exit_code = ExitCode.DATA_ERROR


class SnaptextFileNotFoundError(SnaptextCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SnaptextRenderError(SnaptextCliError):
    """Error for snapshots the serializer cannot render."""

    exit_code = ExitCode.INTERNAL_ERROR


class SnaptextIOError(SnaptextCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class SnaptextConfigError(SnaptextCliError):
    """Error for configuration errors (missing/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
