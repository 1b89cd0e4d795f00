# topmark:header:start
#
#   project      : SnapText
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SnapText in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so that relative paths and config discovery
(``snaptext.toml`` / ``pyproject.toml``) resolve against the temporary
test directory.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from snaptext.cli.exit_codes import ExitCode
from snaptext.cli.main import cli
from snaptext.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

# A table with one column that points back at it
USERS_DOCUMENT: dict[str, Any] = {
    "source": {
        "url": "jdbc:h2:mem:app",
        "product_name": "H2",
        "product_version": "2.2",
        "user": "sa",
    },
    "supports_two_level_grouping": True,
    "included_types": ["core.Table", "core.Column"],
    "leaf_type": "core.Column",
    "entities": [
        {
            "id": "users",
            "type": "core.Table",
            "name": "users",
            "group": {"catalog": "app", "schema": "public"},
            "attributes": {"columns": {"refs": ["users.id"]}, "remarks": "Accounts"},
        },
        {
            "id": "users.id",
            "type": "core.Column",
            "name": "id",
            "group": {"catalog": "app", "schema": "public"},
            "attributes": {"relation": {"ref": "users"}, "nullable": False},
        },
    ],
}

USERS_HEADER: str = (
    "Database snapshot for jdbc:h2:mem:app\n"
    "-----------------------------------------------------------------\n"
    "Database type: H2\n"
    "Database version: 2.2\n"
    "Database user: sa\n"
    "Included types:\n"
    "    core.Column\n"
    "    core.Table\n"
    "\n"
)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall the test logging setup after each CLI run.

    The CLI configures the root logger against the runner's temporary streams.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_snapshot(tmp_path: Path, document: Any = None, name: str = "snapshot.json") -> Path:
    """Write a JSON snapshot document (``USERS_DOCUMENT`` by default) into ``tmp_path``.

    Args:
        tmp_path (Path): Target directory.
        document (Any): JSON-serializable document.
        name (str): File name.

    Returns:
        Path: The written file.
    """
    path: Path = tmp_path / name
    payload: Any = USERS_DOCUMENT if document is None else document
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["render", "s.json"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text, obj={})
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files created in
    ``tmp_path`` (e.g., ``--help`` / ``version``) or when all provided paths are
    absolute.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
