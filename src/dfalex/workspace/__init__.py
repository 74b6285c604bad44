# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Driver configuration for dfalex."""

from dfalex.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_REPORT_DIRECTORY,
    DEFAULT_SOURCE_SUFFIXES,
    DriverConfig,
    DriverConfigError,
    dump_driver_config,
    load_driver_config,
    parse_driver_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_REPORT_DIRECTORY",
    "DEFAULT_SOURCE_SUFFIXES",
    "DriverConfig",
    "DriverConfigError",
    "dump_driver_config",
    "load_driver_config",
    "parse_driver_config",
]
