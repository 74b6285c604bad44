# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the dfalex driver configuration file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".dfalex.yaml"

DEFAULT_SOURCE_SUFFIXES = [".lang"]
DEFAULT_REPORT_DIRECTORY = "dfalex-reports"


class DriverConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class DriverConfig(BaseModel):
    """Settings for discovering sources and writing reports.

    Attributes:
        source_suffixes: File suffixes picked up when a directory is scanned.
        report_directory: Directory that receives report files, relative to
            the working directory unless absolute.
        include_comments: Whether COMMENT tokens are listed in reports.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source_suffixes: list[str] = Field(
        alias="source-suffixes",
        default_factory=lambda: list(DEFAULT_SOURCE_SUFFIXES),
    )
    report_directory: str = Field(alias="report-directory", default=DEFAULT_REPORT_DIRECTORY)
    include_comments: bool = Field(alias="include-comments", default=True)

    @field_validator("source_suffixes")
    @classmethod
    def check_source_suffixes(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one source suffix is required")
        for suffix in value:
            if not suffix.startswith(".") or len(suffix) < 2:
                raise ValueError(f"source suffix '{suffix}' must look like '.ext'")
        return value


def load_driver_config(path: Path) -> DriverConfig:
    """Load and validate a driver configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the `.dfalex.yaml` file.

    Returns:
        A validated DriverConfig instance.

    Raises:
        DriverConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DriverConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise DriverConfigError(f"Cannot read config file '{path}': {exc}") from exc

    return parse_driver_config(text, source_label=str(path))


def parse_driver_config(text: str, source_label: str = "<string>") -> DriverConfig:
    """Parse configuration YAML text into a DriverConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        DriverConfigError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DriverConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DriverConfigError(f"{source_label}: config must be a YAML mapping")

    try:
        return DriverConfig.model_validate(data)
    except ValidationError as exc:
        raise DriverConfigError(f"Invalid config {source_label}: {exc}") from exc


def dump_driver_config(config: DriverConfig) -> str:
    """Serialize a configuration back to YAML using the file's key names."""
    data = config.model_dump(by_alias=True)
    return yaml.dump(data, default_flow_style=False, sort_keys=True)
