# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Human-readable rendering of scan results."""

from dfalex.report.render import (
    NO_ERRORS_MESSAGE,
    ScanStatistics,
    compute_statistics,
    format_diagnostic,
    format_registry_entry,
    format_statistics,
    format_token,
    render_report,
)

__all__ = [
    "NO_ERRORS_MESSAGE",
    "ScanStatistics",
    "compute_statistics",
    "format_diagnostic",
    "format_registry_entry",
    "format_statistics",
    "format_token",
    "render_report",
]
