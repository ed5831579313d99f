# topmark:header:start
#
#   project      : IncludeDoc
#   file         : __init__.py
#   file_relpath : src/includedoc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for the IncludeDoc tool.

This module defines the immutable `Config` snapshot and its mutable builder
`MutableConfig`. Layers are merged in this order (later wins):

1. runtime defaults (`load_defaults_dict`),
2. ``pyproject.toml`` (``[tool.includedoc]``) and ``includedoc.toml`` found in
   the root directory,
3. extra config files given explicitly,
4. CLI overrides.

Scalar settings left unset (``None``) in a layer do not override earlier
layers. Include/exclude patterns accumulate across layers; the extension list
is replaced by the last layer that sets it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from includedoc.config.io import (
    KEY_DRY_RUN,
    KEY_EXCLUDE,
    KEY_EXTENSIONS,
    KEY_FAIL_FAST,
    KEY_INCLUDE,
    KEY_RESPECT_GITIGNORE,
    KEY_ROOT,
    ConfigError,
    TomlTable,
    get_bool_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from includedoc.config.logging import get_logger
from includedoc.constants import (
    DEFAULT_EXTENSIONS,
    INCLUDEDOC_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from includedoc.config.logging import IncludeDocLogger

logger: IncludeDocLogger = get_logger(__name__)

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
    "normalize_extension",
]


def normalize_extension(ext: str) -> str:
    """Return ``ext`` lower-cased with a leading dot (``"rs"`` -> ``".rs"``)."""
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for IncludeDoc.

    Produced by `MutableConfig.freeze` after merging all layers. Use `thaw` to
    obtain a mutable builder for edits.

    Attributes:
        timestamp (str): ISO-formatted timestamp when the snapshot was built.
        root (Path): Scan boundary; included files must live below it.
        dry_run (bool): Report only, never write.
        fail_fast (bool): Stop the run at the first failing file.
        show_diff (bool): Print unified diffs of pending changes.
        extensions (tuple[str, ...]): File suffixes scanned for directives.
        include_patterns (tuple[str, ...]): Gitignore-style globs to include
            (relative to root); empty means everything.
        exclude_patterns (tuple[str, ...]): Gitignore-style globs to exclude.
        respect_gitignore (bool): Honor ``.gitignore`` files during discovery.
        config_files (tuple[Path, ...]): Config sources merged into this snapshot.
    """

    timestamp: str
    root: Path
    dry_run: bool
    fail_fast: bool
    show_diff: bool
    extensions: tuple[str, ...]
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    respect_gitignore: bool
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            timestamp=self.timestamp,
            root=self.root,
            dry_run=self.dry_run,
            fail_fast=self.fail_fast,
            show_diff=self.show_diff,
            extensions=list(self.extensions),
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            respect_gitignore=self.respect_gitignore,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the effective settings as a ``[tool.includedoc]``-shaped table."""
        return {
            KEY_ROOT: self.root.as_posix(),
            KEY_EXTENSIONS: list(self.extensions),
            KEY_INCLUDE: list(self.include_patterns),
            KEY_EXCLUDE: list(self.exclude_patterns),
            KEY_RESPECT_GITIGNORE: self.respect_gitignore,
            KEY_DRY_RUN: self.dry_run,
            KEY_FAIL_FAST: self.fail_fast,
        }

    def to_toml(self) -> str:
        """Render the effective settings as TOML text."""
        return to_toml(self.to_toml_dict())


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` marks a setting as unset in this layer (see `merge_with`).
    """

    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    root: Path | None = None
    dry_run: bool | None = None
    fail_fast: bool | None = None
    show_diff: bool | None = None
    extensions: list[str] | None = None
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    respect_gitignore: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze the draft into an immutable `Config` snapshot.

        Unset settings fall back to the runtime defaults; an unset root falls
        back to the current working directory.
        """
        root: Path = (self.root or Path.cwd()).resolve()
        extensions: Iterable[str] = (
            self.extensions if self.extensions is not None else DEFAULT_EXTENSIONS
        )
        return Config(
            timestamp=self.timestamp,
            root=root,
            dry_run=bool(self.dry_run),
            fail_fast=bool(self.fail_fast),
            show_diff=bool(self.show_diff),
            extensions=tuple(dict.fromkeys(normalize_extension(e) for e in extensions)),
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            respect_gitignore=True if self.respect_gitignore is None else self.respect_gitignore,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Merge ``other`` on top of this draft in place and return ``self``.

        Scalars set in ``other`` win; patterns accumulate; extensions are
        replaced when ``other`` sets them.
        """
        if other.root is not None:
            self.root = other.root
        if other.dry_run is not None:
            self.dry_run = other.dry_run
        if other.fail_fast is not None:
            self.fail_fast = other.fail_fast
        if other.show_diff is not None:
            self.show_diff = other.show_diff
        if other.respect_gitignore is not None:
            self.respect_gitignore = other.respect_gitignore
        if other.extensions is not None:
            self.extensions = list(other.extensions)
        self.include_patterns.extend(other.include_patterns)
        self.exclude_patterns.extend(other.exclude_patterns)
        self.config_files.extend(other.config_files)
        return self

    def apply_overrides(self, **overrides: Any) -> MutableConfig:
        """Apply non-``None`` keyword overrides (e.g. from the CLI) and return ``self``.

        ``include_patterns`` / ``exclude_patterns`` extend the existing lists;
        other keys replace the current value.
        """
        layer = MutableConfig()
        for key, value in overrides.items():
            if value is None:
                continue
            if not hasattr(layer, key):
                raise TypeError(f"Unknown config override: {key}")
            setattr(layer, key, list(value) if isinstance(value, (tuple, list)) else value)
        return self.merge_with(layer)

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed ``[tool.includedoc]``-shaped table.

        A relative ``root`` is resolved against the config file's directory.

        Args:
            data (TomlTable): The parsed TOML data.
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft = cls()
        cfg_dir: Path | None = config_file.parent.resolve() if config_file else None

        raw_root: str | None = get_string_value_or_none(data, KEY_ROOT)
        if raw_root:
            root = Path(raw_root)
            if not root.is_absolute() and cfg_dir is not None:
                root = cfg_dir / root
            draft.root = root

        draft.extensions = get_string_list_or_none(data, KEY_EXTENSIONS)
        draft.include_patterns = get_string_list_or_none(data, KEY_INCLUDE) or []
        draft.exclude_patterns = get_string_list_or_none(data, KEY_EXCLUDE) or []
        draft.respect_gitignore = get_bool_value_or_none(data, KEY_RESPECT_GITIGNORE)
        draft.dry_run = get_bool_value_or_none(data, KEY_DRY_RUN)
        draft.fail_fast = get_bool_value_or_none(data, KEY_FAIL_FAST)
        if config_file is not None:
            draft.config_files = [config_file]

        logger.trace("MutableConfig from %s: %s", config_file or "<defaults>", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` the ``[tool.includedoc]`` table is used; files
        without that table yield ``None``.

        Raises:
            ConfigError: The file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
            if not data:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_config_files(cls, root: Path) -> list[Path]:
        """Return the config files present in ``root`` (pyproject first).

        When both exist, ``includedoc.toml`` comes last so it wins on merge.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, INCLUDEDOC_TOML_NAME):
            p: Path = root / name
            if p.is_file():
                logger.debug("Discovered config file: %s", p)
                found.append(p)
        return found

    @classmethod
    def load_merged(
        cls,
        root: Path,
        *,
        extra_config_files: Iterable[Path] = (),
        discover: bool = True,
    ) -> MutableConfig:
        """Merge defaults, discovered and explicit config files for ``root``.

        Args:
            root (Path): Root directory (also where config files are discovered).
            extra_config_files (Iterable[Path]): Explicit config files, merged last.
            discover (bool): Whether to look for config files in ``root``.

        Returns:
            MutableConfig: The merged draft with ``root`` set.

        Raises:
            ConfigError: A config file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()
        draft.root = root
        sources: list[Path] = cls.discover_config_files(root) if discover else []
        sources.extend(extra_config_files)
        for path in sources:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                draft.merge_with(layer)
        # The CLI/API root argument wins over any root declared in a config file.
        draft.root = root
        return draft
