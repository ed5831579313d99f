# topmark:header:start
#
#   project      : IncludeDoc
#   file         : substitution.py
#   file_relpath : src/includedoc/engine/substitution.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Substitute included content between paired directives of one file.

For a file's text the engine:

1. scans directives and pairs them (any pairing error aborts the file);
2. for each pair, resolves the included path relative to the file's directory,
   refuses paths escaping the root, reads the included text and resolves the
   selected range;
3. refuses ranges that themselves contain directive-shaped lines, since splicing
   them would create nested or confusing inclusion regions;
4. renders the range as a doc comment block and compares ``"\\n" + block`` with
   the text currently between the two marker lines;
5. splices the new blocks in and reports whether anything changed.

The engine performs no writes. Reading included files goes through a
``read_source`` callable so callers (and tests) control I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from includedoc.config.logging import get_logger
from includedoc.engine.directive import DEFAULT_PATTERN
from includedoc.engine.errors import GeneratedContentPollutionError, SourceReadError
from includedoc.engine.pairing import pair_directives
from includedoc.engine.ranges import resolve_range
from includedoc.engine.render import render_block
from includedoc.engine.text_pos import to_line

if TYPE_CHECKING:
    from collections.abc import Callable

    from includedoc.config.logging import IncludeDocLogger
    from includedoc.engine.directive import Directive, DirectivePattern, Span
    from includedoc.engine.pairing import DirectivePair
    from includedoc.engine.ranges import ResolvedRange

    ReadSource = Callable[[Path], str]

logger: IncludeDocLogger = get_logger(__name__)


def read_text_file(path: Path) -> str:
    """Read ``path`` as strict UTF-8, preserving newlines."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


@dataclass(frozen=True, slots=True)
class PairLogEntry:
    """What one directive pair did to the file.

    Attributes:
        source_path (str): Path as written in the directives.
        resolved_path (Path): Canonical path of the included file.
        changed (bool): Whether the block between the markers changed.
    """

    source_path: str
    resolved_path: Path
    changed: bool


@dataclass(frozen=True, slots=True)
class SubstitutionOutcome:
    """Result of substituting one file.

    ``text`` equals the input when ``modified`` is False.
    """

    text: str
    modified: bool
    log: tuple[PairLogEntry, ...] = ()

    @property
    def changed_sources(self) -> list[str]:
        """Included paths (as written) whose block changed, in document order."""
        return [entry.source_path for entry in self.log if entry.changed]


class SubstitutionEngine:
    """Per-file substitution bound to a root directory.

    Args:
        root (Path): Directory every included file must live in.
        read_source (ReadSource): Reads an included file as text.
        pattern (DirectivePattern): Compiled directive grammar.
    """

    def __init__(
        self,
        root: Path,
        *,
        read_source: ReadSource = read_text_file,
        pattern: DirectivePattern = DEFAULT_PATTERN,
    ) -> None:
        self.root: Path = root.resolve()
        self.read_source: ReadSource = read_source
        self.pattern: DirectivePattern = pattern

    def resolve_source(self, directive: Directive, base_dir: Path) -> Path:
        """Return the canonical path of the file a directive includes.

        Raises:
            SourceReadError: the path escapes the root directory.
        """
        candidate: Path = (base_dir / directive.source_path).resolve()
        if not candidate.is_relative_to(self.root):
            raise SourceReadError(directive, f"path is outside of the root directory {self.root}")
        return candidate

    def load_source(self, directive: Directive, path: Path) -> str:
        """Read an included file, mapping I/O failures to `SourceReadError`."""
        try:
            return self.read_source(path)
        except FileNotFoundError as e:
            raise SourceReadError(directive, "file not found") from e
        except IsADirectoryError as e:
            raise SourceReadError(directive, "is a directory") from e
        except PermissionError as e:
            raise SourceReadError(directive, "permission denied") from e
        except UnicodeDecodeError as e:
            raise SourceReadError(directive, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise SourceReadError(directive, e.strerror or str(e)) from e

    def display_path(self, path: Path) -> str:
        """Return ``path`` relative to the root, POSIX style."""
        return path.relative_to(self.root).as_posix()

    def check_pollution(
        self,
        pair: DirectivePair,
        source: str,
        selected: ResolvedRange,
        resolved: Path,
        block: str,
    ) -> None:
        """Refuse included content that contains directive-shaped lines.

        Both the selected range and the rendered block are probed; offending
        lines are reported with their line number in the included file.

        Raises:
            GeneratedContentPollutionError: a directive-shaped line was found.
        """
        excerpt_text: str = selected.slice(source)
        hit: Span | None = self.pattern.probe(excerpt_text)
        if hit is not None:
            start, end = hit
            raise GeneratedContentPollutionError(
                pair.start,
                source_display=self.display_path(resolved),
                source_line=to_line(source, selected.start + start),
                excerpt=excerpt_text[start:end],
            )

        hit = self.pattern.probe(block)
        if hit is not None:
            start, end = hit
            block_line: int = block.count("\n", 0, start)
            raise GeneratedContentPollutionError(
                pair.start,
                source_display=self.display_path(resolved),
                source_line=to_line(source, selected.start) + block_line,
                excerpt=block[start:end],
            )

    def substitute(self, text: str, path: Path) -> SubstitutionOutcome:
        """Substitute every directive pair of one file.

        Args:
            text (str): Current text of the file.
            path (Path): Location of the file; included paths are relative to its directory.

        Returns:
            SubstitutionOutcome: The new text, whether it differs, and a per-pair log.

        Raises:
            IncludeDocError: on the first pairing, resolution or pollution failure.
        """
        pairs: list[DirectivePair] = list(pair_directives(self.pattern.find_iter(text)))
        logger.debug("%s: %d directive pair(s)", path, len(pairs))

        base_dir: Path = path.parent
        out: list[str] = []
        log: list[PairLogEntry] = []
        cursor: int = 0
        modified: bool = False

        for pair in pairs:
            resolved: Path = self.resolve_source(pair.start, base_dir)
            source: str = self.load_source(pair.start, resolved)
            selected: ResolvedRange = resolve_range(source, pair)
            block: str = render_block(selected.slice(source), pair.start.visibility)
            self.check_pollution(pair, source, selected, resolved, block)

            replacement: str = "\n" + block
            current: str = text[pair.start.end : pair.end.start]
            changed: bool = replacement != current
            modified = modified or changed
            logger.debug(
                "%s:%d: %s %s",
                path,
                to_line(text, pair.start.start),
                pair.source_path,
                "changed" if changed else "unchanged",
            )

            out.append(text[cursor : pair.start.end])
            out.append(replacement)
            cursor = pair.end.start
            log.append(
                PairLogEntry(source_path=pair.source_path, resolved_path=resolved, changed=changed)
            )

        if not modified:
            return SubstitutionOutcome(text=text, modified=False, log=tuple(log))

        out.append(text[cursor:])
        return SubstitutionOutcome(text="".join(out), modified=True, log=tuple(log))


def substitute(
    text: str,
    *,
    path: Path,
    root: Path,
    read_source: ReadSource = read_text_file,
    pattern: DirectivePattern = DEFAULT_PATTERN,
) -> SubstitutionOutcome:
    """Substitute every directive pair of one file (functional shortcut).

    See `SubstitutionEngine.substitute`.
    """
    engine = SubstitutionEngine(root, read_source=read_source, pattern=pattern)
    return engine.substitute(text, path)
