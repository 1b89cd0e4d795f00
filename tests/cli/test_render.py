# topmark:header:start
#
#   project      : SnapText
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `render` output, option/config precedence and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    USERS_HEADER,
    assert_CONFIG_ERROR,
    assert_DATA_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli_in,
    write_snapshot,
)
from tests.conftest import mark_cli, mark_integration

if TYPE_CHECKING:
    from pathlib import Path

EXPANDED_USERS: str = USERS_HEADER + (
    "Catalog & Schema: app / public\n"
    "    core.Table:\n"
    "        users\n"
    "            columns: \n"
    "                id\n"
    "                    nullable: False\n"
    "            remarks: Accounts\n"
)

FLAT_USERS: str = USERS_HEADER + (
    "Catalog & Schema: app / public\n"
    "    core.Table:\n"
    "        users\n"
    "            columns: [id]\n"
    "            remarks: Accounts\n"
)


@mark_cli
@mark_integration
def test_render_to_stdout(tmp_path: Path) -> None:
    """The document is written to stdout with the default expansion depth."""
    write_snapshot(tmp_path)
    result = run_cli_in(tmp_path, ["render", "snapshot.json"])
    assert_SUCCESS(result)
    assert result.output == EXPANDED_USERS


@mark_cli
def test_render_expand_depth_zero(tmp_path: Path) -> None:
    """`--expand-depth 0` prints references by their raw representation."""
    write_snapshot(tmp_path)
    result = run_cli_in(tmp_path, ["render", "--expand-depth", "0", "snapshot.json"])
    assert_SUCCESS(result)
    assert result.output == FLAT_USERS


@mark_cli
def test_render_one_level_overrides_snapshot(tmp_path: Path) -> None:
    """`--one-level` labels sections by catalog only."""
    write_snapshot(tmp_path)
    result = run_cli_in(tmp_path, ["render", "--one-level", "snapshot.json"])
    assert_SUCCESS(result)
    assert "Catalog: app\n" in result.output
    assert "Catalog & Schema" not in result.output


@mark_cli
def test_render_to_file(tmp_path: Path) -> None:
    """`--output` writes the document to a file and nothing to stdout."""
    write_snapshot(tmp_path)
    result = run_cli_in(tmp_path, ["render", "snapshot.json", "-o", "out.txt"])
    assert_SUCCESS(result)
    assert result.output == ""
    assert (tmp_path / "out.txt").read_bytes() == EXPANDED_USERS.encode("utf-8")


@mark_cli
def test_render_discovers_snaptext_toml(tmp_path: Path) -> None:
    """Settings are discovered from snaptext.toml in the working directory."""
    write_snapshot(tmp_path)
    (tmp_path / "snaptext.toml").write_text("expand_depth = 0\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "snapshot.json"])
    assert_SUCCESS(result)
    assert result.output == FLAT_USERS


@mark_cli
def test_render_cli_option_beats_config(tmp_path: Path) -> None:
    """Command-line options override discovered settings."""
    write_snapshot(tmp_path)
    (tmp_path / "pyproject.toml").write_text(
        "[tool.snaptext]\nexpand_depth = 0\n", encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["render", "--expand-depth", "1", "snapshot.json"])
    assert_SUCCESS(result)
    assert result.output == EXPANDED_USERS


@mark_cli
def test_render_explicit_config(tmp_path: Path) -> None:
    """`--config` reads settings from the given file."""
    write_snapshot(tmp_path)
    (tmp_path / "custom.toml").write_text("two_level_grouping = false\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "--config", "custom.toml", "snapshot.json"])
    assert_SUCCESS(result)
    assert "Catalog: app\n" in result.output


@mark_cli
def test_render_missing_snapshot(tmp_path: Path) -> None:
    """A missing snapshot file exits with FILE_NOT_FOUND."""
    result = run_cli_in(tmp_path, ["render", "absent.json"])
    assert_FILE_NOT_FOUND(result)
    assert "not found" in result.output


@mark_cli
def test_render_missing_config(tmp_path: Path) -> None:
    """A missing explicit config file exits with CONFIG_ERROR."""
    write_snapshot(tmp_path)
    result = run_cli_in(tmp_path, ["render", "--config", "absent.toml", "snapshot.json"])
    assert_CONFIG_ERROR(result)


@mark_cli
def test_render_invalid_json(tmp_path: Path) -> None:
    """Unparseable JSON exits with DATA_ERROR."""
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "broken.json"])
    assert_DATA_ERROR(result)
    assert "invalid JSON" in result.output


@mark_cli
def test_render_unknown_reference(tmp_path: Path) -> None:
    """References to unknown entity ids exit with DATA_ERROR and write nothing."""
    document = {
        "included_types": ["core.Table"],
        "entities": [
            {"type": "core.Table", "name": "t", "attributes": {"parent": {"ref": "nope"}}}
        ],
    }
    write_snapshot(tmp_path, document)
    result = run_cli_in(tmp_path, ["render", "snapshot.json", "-o", "out.txt"])
    assert_DATA_ERROR(result)
    assert "unknown entity id 'nope'" in result.output
    assert not (tmp_path / "out.txt").exists()


@mark_cli
def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    """`-v` and `-q` together are a usage error."""
    write_snapshot(tmp_path)
    result = run_cli_in(tmp_path, ["-v", "-q", "render", "snapshot.json"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_no_subcommand_prints_help(tmp_path: Path) -> None:
    """Without a subcommand the CLI prints a hint and the help text."""
    result = run_cli_in(tmp_path, ["--no-color"])
    assert_SUCCESS(result)
    assert "snaptext render" in result.output
    assert "render" in result.output and "version" in result.output


@mark_cli
def test_render_warns_on_unusual_extension(tmp_path: Path) -> None:
    """Writing to a non-text extension warns but still writes the document."""
    write_snapshot(tmp_path)
    result = run_cli_in(tmp_path, ["--no-color", "render", "snapshot.json", "-o", "out.md"])
    assert_SUCCESS(result)
    assert "out.md does not end in .txt" in result.output
    assert (tmp_path / "out.md").read_bytes() == EXPANDED_USERS.encode("utf-8")
