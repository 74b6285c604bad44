# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Multi-file driving: source discovery, file scanning and report writing.

The scanner engine never touches the filesystem. This module is the layer
that reads source files, runs one independent scanner per file and writes
the rendered reports.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from dfalex.report.render import render_report
from dfalex.scanner.engine import ScanResult, scan

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

REPORT_SUFFIX = "_report.txt"


class SourceReadError(Exception):
    """Raised when a source file cannot be read or decoded."""


class ReportWriteError(Exception):
    """Raised when a report file cannot be written."""


def discover_sources(paths: Iterable[Path], suffixes: Iterable[str]) -> list[Path]:
    """Expand the given paths into the list of source files to scan.

    Files are kept as given regardless of their suffix. Directories are
    searched recursively for files whose suffix is in *suffixes*; matches
    within one directory are sorted. Duplicates are dropped, keeping the
    first occurrence.

    Raises:
        SourceReadError: If a path does not exist.
    """
    wanted = set(suffixes)
    found: dict[Path, None] = {}
    for path in paths:
        if path.is_dir():
            matches = sorted(p for p in path.rglob("*") if p.is_file() and p.suffix in wanted)
            logger.debug("Found %d source file(s) under %s", len(matches), path)
            for match in matches:
                found.setdefault(match.resolve(), None)
        elif path.is_file():
            found.setdefault(path.resolve(), None)
        else:
            raise SourceReadError(f"Source path does not exist: {path}")
    return list(found)


def scan_file(path: Path) -> ScanResult:
    """Read one UTF-8 source file and scan it.

    Raises:
        SourceReadError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SourceReadError(f"Source file '{path}' is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise SourceReadError(f"Cannot read source file '{path}': {exc}") from exc

    result = scan(source)
    logger.debug(
        "Scanned %s: %d token(s), %d diagnostic(s)",
        path,
        len(result.tokens),
        result.diagnostics.count(),
    )
    return result


def scan_files(paths: Iterable[Path]) -> dict[Path, ScanResult]:
    """Scan every file, returning results keyed by path in input order.

    Raises:
        SourceReadError: On the first file that cannot be read.
    """
    results: dict[Path, ScanResult] = {}
    for path in paths:
        results[path] = scan_file(path)
    return results


def report_path_for(source_path: Path, report_dir: Path) -> Path:
    """Return where the report for *source_path* is written."""
    return report_dir / f"{source_path.stem}{REPORT_SUFFIX}"


def write_report(
    source_path: Path,
    result: ScanResult,
    report_dir: Path,
    include_comments: bool = True,
) -> Path:
    """Render and write the report for one scanned file.

    The report directory is created if needed.

    Returns:
        The path of the written report.

    Raises:
        ReportWriteError: If the directory or file cannot be written.
    """
    target = report_path_for(source_path, report_dir)
    text = render_report(result, include_comments=include_comments)
    try:
        report_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Cannot write report '{target}': {exc}") from exc
    logger.info("Wrote report %s", target)
    return target
