# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Batch driving of the scanner over source files."""

from dfalex.driver.batch import (
    REPORT_SUFFIX,
    ReportWriteError,
    SourceReadError,
    discover_sources,
    report_path_for,
    scan_file,
    scan_files,
    write_report,
)

__all__ = [
    "REPORT_SUFFIX",
    "ReportWriteError",
    "SourceReadError",
    "discover_sources",
    "report_path_for",
    "scan_file",
    "scan_files",
    "write_report",
]
