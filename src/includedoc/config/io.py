# topmark:header:start
#
#   project      : IncludeDoc
#   file         : io.py
#   file_relpath : src/includedoc/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

This module provides I/O helpers for reading IncludeDoc configuration from
on-disk TOML files (``includedoc.toml`` / ``pyproject.toml``) and the in-code
runtime defaults. Parsing is done with `tomlkit` and returned as plain `dict`
structures.

Getters never raise on shape mismatches: they log and fall back to a default so
a typo in a config file degrades to the built-in behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from includedoc.config.logging import get_logger
from includedoc.constants import DEFAULT_EXTENSIONS

if TYPE_CHECKING:
    from pathlib import Path

    from includedoc.config.logging import IncludeDocLogger

TomlTable = dict[str, Any]

logger: IncludeDocLogger = get_logger(__name__)

KEY_EXTENSIONS = "extensions"
KEY_INCLUDE = "include"
KEY_EXCLUDE = "exclude"
KEY_RESPECT_GITIGNORE = "respect_gitignore"
KEY_DRY_RUN = "dry_run"
KEY_FAIL_FAST = "fail_fast"
KEY_ROOT = "root"


class ConfigError(Exception):
    """A configuration source exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


def load_defaults_dict() -> TomlTable:
    """Return IncludeDoc's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**. The returned value is a new
    dict so callers can mutate it safely.
    """
    return {
        KEY_EXTENSIONS: list(DEFAULT_EXTENSIONS),
        KEY_INCLUDE: [],
        KEY_EXCLUDE: [],
        KEY_RESPECT_GITIGNORE: True,
        KEY_DRY_RUN: False,
        KEY_FAIL_FAST: False,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``includedoc.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        ConfigError: The file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(path, e.strerror or str(e)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(path, str(e)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table stored under ``key``, or an empty dict."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected table for key %s, got %r; ignoring", key, value)
    return {}


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Integers are coerced via ``bool(value)``. Missing or non-coercible values
    yield ``None``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.warning("Cannot coerce %r to bool for key %s; ignoring", value, key)
    return None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    logger.warning("Cannot coerce %r to string for key %s; ignoring", value, key)
    return None


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Non-string items are dropped with a warning. A scalar string is accepted
    as a one-element list.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Expected list for key %s, got %r; ignoring", key, value)
        return None
    out: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string item %r in %s", item, key)
    return out


def to_toml(data: TomlTable) -> str:
    """Serialize a TOML table to text."""
    return tomlkit.dumps(data)
