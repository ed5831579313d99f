# topmark:header:start
#
#   project      : IncludeDoc
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the IncludeDoc test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `includedoc.config.MutableConfig` (mutable), then
      `freeze()` into a `includedoc.config.Config` for pipeline and API calls.
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from includedoc.config import MutableConfig
from includedoc.config.logging import LOG_LEVEL_ENV_VAR, TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from includedoc.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.engine`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_engine: DecoratorType[Any] = as_typed_mark(pytest.mark.engine)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_includedoc_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure IncludeDoc's runtime log level and colors are not forced via env.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    INCLUDEDOC_LOG_LEVEL in their shell, and keeps CLI output free of ANSI codes
    when FORCE_COLOR is set.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the IncludeDoc log level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    setup_logging(level=TRACE_LEVEL)


def write_tree(root: Path, files: Mapping[str, str]) -> Path:
    """Create ``files`` (relative POSIX path -> text) below ``root``.

    Text is written verbatim (no newline translation).

    Args:
        root (Path): Directory to populate.
        files (Mapping[str, str]): Files to create.

    Returns:
        Path: ``root``, for chaining.
    """
    for rel, text in files.items():
        path: Path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    return root


def read_file(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def make_config(root: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` for ``root`` built from defaults and overrides.

    Args:
        root (Path): Root directory of the run.
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    return make_mutable_config(root, **overrides).freeze()


def make_mutable_config(root: Path, **overrides: Any) -> MutableConfig:
    """Return a mutable builder for scenarios that need staged edits.

    Args:
        root (Path): Root directory of the run.
        **overrides (Any): Attributes set verbatim on the builder.

    Returns:
        MutableConfig: A mutable configuration object ready to be frozen or further edited.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    m.root = root
    for k, v in overrides.items():
        setattr(m, k, v)
    return m
