# Copyright 2026 Scanlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration module."""

from pathlib import Path

import pytest

from scanlex.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    OutputFormat,
    ScanlexConfig,
    load_config,
    save_config,
)
from scanlex.lexer.scanner import LineTracking

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    """A default config continues line numbers across sources and prints text."""
    config = ScanlexConfig()
    assert config.line_tracking is LineTracking.CONTINUOUS
    assert config.output_format is OutputFormat.TEXT


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    """An empty config file is treated as all defaults."""
    config = load_config(_write_config(tmp_path, ""))
    assert config == ScanlexConfig()


def test_full_config(tmp_path: Path) -> None:
    """Both options are read from their kebab-case keys."""
    content = """\
line-tracking: per-source
output-format: json
"""
    config = load_config(_write_config(tmp_path, content))
    assert config.line_tracking is LineTracking.PER_SOURCE
    assert config.output_format is OutputFormat.JSON


def test_partial_config(tmp_path: Path) -> None:
    """Omitted keys keep their defaults."""
    config = load_config(_write_config(tmp_path, "output-format: json\n"))
    assert config.line_tracking is LineTracking.CONTINUOUS
    assert config.output_format is OutputFormat.JSON


def test_save_then_load(tmp_path: Path) -> None:
    """A saved config loads back to an equal model."""
    path = tmp_path / CONFIG_FILE_NAME
    original = ScanlexConfig(line_tracking=LineTracking.PER_SOURCE)
    save_config(original, path)
    assert "line-tracking: per-source" in path.read_text(encoding="utf-8")
    assert load_config(path) == original


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    """A nonexistent config file raises ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    """Malformed YAML raises ConfigError."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "line-tracking: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    """A top-level list is rejected."""
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write_config(tmp_path, "- a\n- b\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    """Unknown keys are rejected rather than ignored."""
    with pytest.raises(ConfigError, match="Invalid config file"):
        load_config(_write_config(tmp_path, "colour: red\n"))


def test_unknown_line_tracking_value_raises(tmp_path: Path) -> None:
    """Only the defined line tracking modes are accepted."""
    with pytest.raises(ConfigError):
        load_config(_write_config(tmp_path, "line-tracking: sometimes\n"))


def test_save_to_missing_directory_raises(tmp_path: Path) -> None:
    """Writing into a nonexistent directory raises ConfigError."""
    with pytest.raises(ConfigError, match="Cannot write"):
        save_config(ScanlexConfig(), tmp_path / "missing" / CONFIG_FILE_NAME)
