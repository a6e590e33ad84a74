# Copyright 2026 Scanlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the scanlex configuration file."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scanlex.lexer.scanner import LineTracking

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".scanlex.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read, written, or is invalid."""


class OutputFormat(Enum):
    """Rendering used by ``scanlex lex`` for the token listing."""

    TEXT = "text"
    JSON = "json"


class ScanlexConfig(BaseModel):
    """Options for a lexing run.

    Attributes:
        line_tracking: Whether line/column numbers continue across sources
            or restart for each one.
        output_format: Token listing format for the command line.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    line_tracking: LineTracking = Field(alias="line-tracking", default=LineTracking.CONTINUOUS)
    output_format: OutputFormat = Field(alias="output-format", default=OutputFormat.TEXT)


def load_config(path: Path) -> ScanlexConfig:
    """Load and validate a scanlex configuration file.

    An empty file is treated as a configuration with all defaults.

    Args:
        path: Path to the ``.scanlex.yaml`` file.

    Returns:
        A validated ScanlexConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ScanlexConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def save_config(config: ScanlexConfig, path: Path) -> None:
    """Write *config* to *path* as YAML.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = config.model_dump(by_alias=True, mode="json")
    try:
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=True), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot write config file '{path}': {exc}") from exc
