# topmark:header:start
#
#   project      : SnapText
#   file         : __init__.py
#   file_relpath : src/snaptext/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapText configuration.

Configuration is assembled from layers (runtime defaults, a discovered or
explicit TOML file, CLI overrides) with a mutable builder,
[`MutableConfig`][snaptext.config.MutableConfig], and frozen into an immutable
[`Config`][snaptext.config.Config] before it reaches the serializer.

Build → merge → freeze.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from snaptext.config.io import (
    extract_snaptext_table,
    find_config_file,
    get_bool_value_or_none,
    get_int_value_or_none,
    load_defaults_dict,
    load_toml_dict,
)
from snaptext.config.keys import Toml
from snaptext.config.logging import get_logger
from snaptext.constants import DEFAULT_EXPAND_DEPTH

if TYPE_CHECKING:
    from pathlib import Path

    from snaptext.config.io import TomlTable
    from snaptext.config.logging import SnaptextLogger

logger: SnaptextLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        expand_depth (int): Expansion depth for referenced entities.
        two_level_grouping (bool | None): Override of the snapshot's grouping capability.
        config_files (tuple[str, ...]): Config sources that contributed, in merge order.
    """

    expand_depth: int = DEFAULT_EXPAND_DEPTH
    two_level_grouping: bool | None = None
    config_files: tuple[str, ...] = ()


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means *inherit*: the value of a lower layer (or the runtime default)
    is kept when merging or freezing.

    Attributes:
        expand_depth (int | None): Expansion depth for referenced entities.
        two_level_grouping (bool | None): Override of the snapshot's grouping capability.
        config_files (list[str]): Config sources that contributed.
    """

    expand_depth: int | None = None
    two_level_grouping: bool | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed SnapText TOML table.

        Invalid values are logged and ignored.

        Args:
            data (TomlTable): SnapText settings (top level of ``snaptext.toml`` or
                ``[tool.snaptext]``).
            config_file (Path | None): Source file, recorded in ``config_files``.

        Returns:
            MutableConfig: The resulting draft.
        """
        logger.trace("TOML settings: %s", data)
        return cls(
            expand_depth=get_int_value_or_none(data, Toml.KEY_EXPAND_DEPTH),
            two_level_grouping=get_bool_value_or_none(data, Toml.KEY_TWO_LEVEL_GROUPING),
            config_files=[str(config_file)] if config_file else [],
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Create a draft holding SnapText's runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_file(cls, path: Path) -> MutableConfig:
        """Create a draft from a ``snaptext.toml`` or ``pyproject.toml`` file.

        A ``pyproject.toml`` without ``[tool.snaptext]`` yields an empty draft.
        """
        data: TomlTable = load_toml_dict(path)
        table: TomlTable | None = extract_snaptext_table(data, path)
        if table is None:
            logger.debug("No [tool.snaptext] table in %s", path)
            return cls(config_files=[str(path)])
        return cls.from_toml_dict(table, config_file=path)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            expand_depth=other.expand_depth
            if other.expand_depth is not None
            else self.expand_depth,
            two_level_grouping=other.two_level_grouping
            if other.two_level_grouping is not None
            else self.two_level_grouping,
            config_files=self.config_files + other.config_files,
        )

    def freeze(self) -> Config:
        """Return the immutable [`Config`][snaptext.config.Config] for this draft."""
        return Config(
            expand_depth=self.expand_depth
            if self.expand_depth is not None
            else DEFAULT_EXPAND_DEPTH,
            two_level_grouping=self.two_level_grouping,
            config_files=tuple(self.config_files),
        )


def resolve_config(
    *,
    cwd: Path,
    config_path: Path | None = None,
    overrides: MutableConfig | None = None,
) -> Config:
    """Resolve the effective configuration: defaults → TOML file → overrides.

    Args:
        cwd (Path): Directory where config discovery starts.
        config_path (Path | None): Explicit config file; disables discovery.
        overrides (MutableConfig | None): Highest-precedence layer (e.g. CLI options).

    Returns:
        Config: The frozen, effective configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    source: Path | None = config_path or find_config_file(cwd)
    if source is not None:
        draft = draft.merge_with(MutableConfig.from_file(source))
    if overrides is not None:
        draft = draft.merge_with(overrides)
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


__all__ = ["Config", "MutableConfig", "resolve_config"]
