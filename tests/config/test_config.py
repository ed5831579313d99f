# topmark:header:start
#
#   project      : IncludeDoc
#   file         : test_config.py
#   file_relpath : tests/config/test_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for layered configuration (`includedoc.config`).

Covers defaults, discovery of ``pyproject.toml`` / ``includedoc.toml`` in the
root, merge precedence, overrides and the TOML export used by ``dump-config``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import tomlkit

from includedoc.config import Config, ConfigError, MutableConfig, normalize_extension
from tests.conftest import make_config, make_mutable_config, parametrize, write_tree


def test_defaults(tmp_path: Path) -> None:
    """Defaults scan `.rs` files, honor .gitignore and write in place."""
    cfg: Config = MutableConfig.load_merged(tmp_path).freeze()

    assert cfg.root == tmp_path.resolve()
    assert cfg.extensions == (".rs",)
    assert cfg.respect_gitignore is True
    assert cfg.dry_run is False
    assert cfg.fail_fast is False
    assert cfg.show_diff is False
    assert cfg.include_patterns == ()
    assert cfg.exclude_patterns == ()
    assert cfg.config_files == ()


@parametrize("raw, expected", [("rs", ".rs"), (".RS", ".rs"), (" md ", ".md")])
def test_normalize_extension(raw: str, expected: str) -> None:
    """Extensions are lower-cased and get a leading dot."""
    assert normalize_extension(raw) == expected


def test_pyproject_section_is_used(tmp_path: Path) -> None:
    """Settings under [tool.includedoc] in pyproject.toml are applied."""
    write_tree(
        tmp_path,
        {
            "pyproject.toml": (
                '[project]\nname = "demo"\n\n'
                "[tool.includedoc]\n"
                'extensions = ["rs", ".txt"]\n'
                'exclude = ["target/"]\n'
                "respect_gitignore = false\n"
            )
        },
    )

    cfg: Config = MutableConfig.load_merged(tmp_path).freeze()

    assert cfg.extensions == (".rs", ".txt")
    assert cfg.exclude_patterns == ("target/",)
    assert cfg.respect_gitignore is False
    assert cfg.config_files == (tmp_path / "pyproject.toml",)


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    """A pyproject.toml without [tool.includedoc] contributes nothing."""
    write_tree(tmp_path, {"pyproject.toml": '[project]\nname = "demo"\n'})

    assert MutableConfig.from_toml_file(tmp_path / "pyproject.toml") is None
    assert MutableConfig.load_merged(tmp_path).freeze().config_files == ()


def test_includedoc_toml_wins_over_pyproject(tmp_path: Path) -> None:
    """includedoc.toml is merged after pyproject.toml; patterns accumulate."""
    write_tree(
        tmp_path,
        {
            "pyproject.toml": (
                "[tool.includedoc]\n"
                'extensions = [".rs"]\n'
                'include = ["src/"]\n'
                "fail_fast = true\n"
            ),
            "includedoc.toml": 'extensions = [".md"]\ninclude = ["examples/"]\n',
        },
    )

    cfg: Config = MutableConfig.load_merged(tmp_path).freeze()

    assert cfg.extensions == (".md",)
    assert cfg.include_patterns == ("src/", "examples/")
    assert cfg.fail_fast is True
    assert [p.name for p in cfg.config_files] == ["pyproject.toml", "includedoc.toml"]


def test_discovery_can_be_disabled(tmp_path: Path) -> None:
    """With discovery off, config files in the root are ignored."""
    write_tree(tmp_path, {"includedoc.toml": "dry_run = true\n"})

    cfg: Config = MutableConfig.load_merged(tmp_path, discover=False).freeze()

    assert cfg.dry_run is False


def test_extra_config_files_merge_last(tmp_path: Path) -> None:
    """Explicit config files override discovered ones."""
    write_tree(
        tmp_path,
        {
            "includedoc.toml": "dry_run = true\n",
            "ci/strict.toml": "dry_run = false\nfail_fast = true\n",
        },
    )

    cfg: Config = MutableConfig.load_merged(
        tmp_path, extra_config_files=[tmp_path / "ci" / "strict.toml"]
    ).freeze()

    assert cfg.dry_run is False
    assert cfg.fail_fast is True


def test_root_argument_wins_over_config_root(tmp_path: Path) -> None:
    """A `root` key in a config file never moves the scan boundary."""
    write_tree(tmp_path, {"includedoc.toml": 'root = "elsewhere"\n'})

    cfg: Config = MutableConfig.load_merged(tmp_path).freeze()

    assert cfg.root == tmp_path.resolve()


def test_relative_root_in_file_is_relative_to_the_file(tmp_path: Path) -> None:
    """When read on its own, a relative root resolves against the config file."""
    write_tree(tmp_path, {"cfg/includedoc.toml": 'root = "../crate"\n'})

    draft: MutableConfig | None = MutableConfig.from_toml_file(tmp_path / "cfg" / "includedoc.toml")

    assert draft is not None
    assert draft.root is not None
    assert draft.root.resolve() == (tmp_path / "crate").resolve()


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    """Malformed TOML surfaces as `ConfigError` naming the file."""
    write_tree(tmp_path, {"includedoc.toml": "extensions = [\n"})

    with pytest.raises(ConfigError) as excinfo:
        MutableConfig.load_merged(tmp_path)

    assert excinfo.value.path == tmp_path / "includedoc.toml"


def test_missing_config_file_raises_config_error(tmp_path: Path) -> None:
    """An explicit config file that cannot be read is a `ConfigError`."""
    with pytest.raises(ConfigError):
        MutableConfig.load_merged(tmp_path, extra_config_files=[tmp_path / "nope.toml"])


def test_wrongly_typed_values_fall_back_to_defaults(tmp_path: Path) -> None:
    """Values of the wrong type are ignored rather than failing the run."""
    write_tree(
        tmp_path,
        {"includedoc.toml": 'dry_run = "yes"\nextensions = [".md", 3]\nexclude = "target/"\n'},
    )

    cfg: Config = MutableConfig.load_merged(tmp_path).freeze()

    assert cfg.dry_run is False
    assert cfg.extensions == (".md",)
    assert cfg.exclude_patterns == ("target/",)


def test_overrides_none_means_unset(tmp_path: Path) -> None:
    """`None` overrides keep earlier layers; set values win; patterns extend."""
    draft: MutableConfig = make_mutable_config(
        tmp_path, dry_run=True, include_patterns=["src/"]
    )

    draft.apply_overrides(dry_run=None, fail_fast=True, include_patterns=("tests/",))
    cfg: Config = draft.freeze()

    assert cfg.dry_run is True
    assert cfg.fail_fast is True
    assert cfg.include_patterns == ("src/", "tests/")


def test_unknown_override_is_rejected(tmp_path: Path) -> None:
    """Typos in override names are programming errors."""
    with pytest.raises(TypeError):
        make_mutable_config(tmp_path).apply_overrides(dryrun=True)


def test_freeze_dedupes_extensions(tmp_path: Path) -> None:
    """Normalized duplicate extensions collapse, keeping first-seen order."""
    cfg: Config = make_config(tmp_path, extensions=["RS", ".md", ".rs"])

    assert cfg.extensions == (".rs", ".md")


def test_thaw_freeze_roundtrip(tmp_path: Path) -> None:
    """Thawing and re-freezing yields an equal snapshot."""
    cfg: Config = make_config(tmp_path, exclude_patterns=["target/"], dry_run=True)

    assert cfg.thaw().freeze() == cfg


def test_to_toml_is_loadable(tmp_path: Path) -> None:
    """The exported TOML parses back into the same effective settings."""
    cfg: Config = make_config(tmp_path, extensions=[".rs", ".md"], exclude_patterns=["target/"])

    data: Any = tomlkit.parse(cfg.to_toml()).unwrap()
    again: Config = MutableConfig.from_toml_dict(data).freeze()

    assert data["extensions"] == [".rs", ".md"]
    assert again.extensions == cfg.extensions
    assert again.exclude_patterns == cfg.exclude_patterns
    assert Path(data["root"]) == cfg.root
