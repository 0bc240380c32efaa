"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from api_reference_index.compute_config_hash import compute_config_hash
from api_reference_index.deep_merge import deep_merge
from api_reference_index.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    merged = deep_merge({"output": {"indent": 2, "x": 1}}, {"output": {"indent": 4}})
    assert merged == {"output": {"indent": 4, "x": 1}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3]}) == {"arr": [3]}


def test_deep_merge_specifications_additive() -> None:
    """Verify that the specifications list keeps order and appends new entries."""
    merged = deep_merge(
        {"specifications": ["delivery", "management"]},
        {"specifications": ["management", "migration"]},
    )
    assert merged["specifications"] == ["delivery", "management", "migration"]


def test_compute_config_hash_stability() -> None:
    """Verify that config hash is stable regardless of key order."""
    config1 = {"b": 2, "a": 1, "nested": {"y": 2, "x": 1}}
    config2 = {"a": 1, "b": 2, "nested": {"x": 1, "y": 2}}
    assert compute_config_hash(config1) == compute_config_hash(config2)


def test_compute_config_hash_ignores_logging() -> None:
    """Verify that diagnostics settings do not change the hash."""
    quiet = {"output": {"indent": 2}, "logging": {"level": "INFO"}}
    loud = {"output": {"indent": 2}, "logging": {"level": "DEBUG"}}
    assert compute_config_hash(quiet) == compute_config_hash(loud)
    assert compute_config_hash(quiet) != compute_config_hash({"output": {"indent": 4}})


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["output"]["indent"] = 8
    assert DEFAULT_CONFIG["output"]["indent"] == 2


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that an explicitly given config file must exist."""
    with pytest.raises(SystemExit, match="Config file not found"):
        load_config(str(tmp_path / "missing.yml"))


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump({"output": {"indent": 4}, "specifications": ["delivery"]}),
        encoding="utf-8",
    )

    loaded = load_config(str(config_file))
    assert loaded["output"]["indent"] == 4
    assert loaded["output"]["ensure_ascii"] is False  # Default
    assert loaded["specifications"] == ["delivery"]
