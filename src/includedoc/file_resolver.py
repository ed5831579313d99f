# topmark:header:start
#
#   project      : IncludeDoc
#   file         : file_resolver.py
#   file_relpath : src/includedoc/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the files IncludeDoc scans for directives.

The root directory is walked recursively in sorted order. Hidden entries
(names starting with a dot) are skipped, ``.gitignore`` files are honored at
every directory level (unless disabled), files are kept when their suffix is
one of the configured extensions, and include/exclude globs (gitignore syntax,
relative to the root) are applied last. The result is a deterministic, sorted
list of files to process.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from includedoc.config.logging import get_logger
from includedoc.constants import GITIGNORE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from includedoc.config import Config
    from includedoc.config.logging import IncludeDocLogger

logger: IncludeDocLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class IgnoreSpec:
    """Gitignore patterns that apply below ``base``."""

    base: Path
    spec: PathSpec

    def matches(self, path: Path, *, is_dir: bool) -> bool:
        """Return True if ``path`` is ignored by this spec."""
        rel: str = path.relative_to(self.base).as_posix()
        if is_dir:
            rel += "/"
        return self.spec.match_file(rel)


def load_patterns_from_file(path: Path) -> list[str]:
    """Load non-empty, non-comment patterns from a gitignore-style file.

    Args:
        path (Path): The pattern file.

    Returns:
        list[str]: Patterns as strings (empty when the file cannot be read).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Cannot read patterns from '%s': %s", path, e)
        return []
    patterns: list[str] = []
    for line in text.splitlines():
        s: str = line.strip()
        if not s or s.startswith("#"):
            continue
        patterns.append(s)
    logger.debug("Loaded %d pattern(s) from %s", len(patterns), path)
    return patterns


def _load_gitignore(directory: Path) -> IgnoreSpec | None:
    path: Path = directory / GITIGNORE_NAME
    if not path.is_file():
        return None
    patterns: list[str] = load_patterns_from_file(path)
    if not patterns:
        return None
    return IgnoreSpec(base=directory, spec=PathSpec.from_lines(GitWildMatchPattern, patterns))


def _is_ignored(path: Path, specs: Iterable[IgnoreSpec], *, is_dir: bool) -> bool:
    return any(s.matches(path, is_dir=is_dir) for s in specs)


def walk_files(root: Path, *, respect_gitignore: bool = True) -> Iterator[Path]:
    """Yield every non-hidden, non-ignored file below ``root`` in sorted order.

    Symbolic links are not followed, so the walk never leaves ``root``.

    Args:
        root (Path): Directory to walk.
        respect_gitignore (bool): Honor ``.gitignore`` files found while walking.

    Yields:
        Path: Files in depth-first, name-sorted order.
    """

    def _walk(directory: Path, specs: tuple[IgnoreSpec, ...]) -> Iterator[Path]:
        if respect_gitignore:
            local: IgnoreSpec | None = _load_gitignore(directory)
            if local is not None:
                specs = (*specs, local)
        try:
            entries: list[Path] = sorted(directory.iterdir())
        except OSError as e:
            logger.warning("Cannot list directory %s: %s", directory, e)
            return
        for entry in entries:
            if entry.name.startswith("."):
                continue
            if entry.is_symlink():
                logger.trace("Skipped symbolic link: %s", entry)
                continue
            if entry.is_dir():
                if _is_ignored(entry, specs, is_dir=True):
                    logger.trace("Ignored directory: %s", entry)
                    continue
                yield from _walk(entry, specs)
            elif entry.is_file():
                if _is_ignored(entry, specs, is_dir=False):
                    logger.trace("Ignored file: %s", entry)
                    continue
                yield entry

    yield from _walk(root, ())


def resolve_file_list(config: Config) -> list[Path]:
    """Return the files to process under ``config.root``.

    The resolver implements these semantics:
      1. **Walk**: collect files below the root, skipping hidden entries and,
         when enabled, anything matched by a ``.gitignore``.
      2. **Extension filter**: keep files whose suffix is in ``config.extensions``.
      3. **Include intersection**: if include patterns are given, keep only
         files matching any of them (relative to the root).
      4. **Exclude subtraction**: drop files matching any exclude pattern.
      5. Returns a **sorted** list of Path objects for deterministic output.

    Args:
        config (Config): Configuration values influencing discovery.

    Returns:
        list[Path]: Sorted list of files selected for processing.
    """
    root: Path = config.root
    if not root.is_dir():
        logger.warning("Root is not a directory: %s", root)
        return []

    extensions: frozenset[str] = frozenset(config.extensions)
    include_spec: PathSpec | None = (
        PathSpec.from_lines(GitWildMatchPattern, config.include_patterns)
        if config.include_patterns
        else None
    )
    exclude_spec: PathSpec | None = (
        PathSpec.from_lines(GitWildMatchPattern, config.exclude_patterns)
        if config.exclude_patterns
        else None
    )

    selected: list[Path] = []
    for path in walk_files(root, respect_gitignore=config.respect_gitignore):
        if path.suffix.lower() not in extensions:
            continue
        rel: str = path.relative_to(root).as_posix()
        if include_spec is not None and not include_spec.match_file(rel):
            continue
        if exclude_spec is not None and exclude_spec.match_file(rel):
            continue
        selected.append(path)

    logger.trace("Files to process: %d -- %s", len(selected), selected)
    return sorted(selected)
