# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for batch source discovery, scanning and report writing."""

from pathlib import Path

import pytest

from dfalex.driver import (
    ReportWriteError,
    SourceReadError,
    discover_sources,
    report_path_for,
    scan_file,
    scan_files,
    write_report,
)
from dfalex.scanner import TokenKind

# ###############
# Helpers
# ###############


def _write(path: Path, content: str = "declare X;\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Discovery
# ###############


def test_directory_is_searched_recursively_by_suffix(tmp_path: Path) -> None:
    a = _write(tmp_path / "b.lang")
    b = _write(tmp_path / "nested" / "a.lang")
    _write(tmp_path / "notes.txt")

    found = discover_sources([tmp_path], [".lang"])

    assert found == sorted([a.resolve(), b.resolve()])


def test_explicit_file_is_kept_regardless_of_suffix(tmp_path: Path) -> None:
    source = _write(tmp_path / "program.txt")
    assert discover_sources([source], [".lang"]) == [source.resolve()]


def test_duplicates_are_dropped(tmp_path: Path) -> None:
    source = _write(tmp_path / "main.lang")
    found = discover_sources([source, tmp_path], [".lang"])
    assert found == [source.resolve()]


def test_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError, match="does not exist"):
        discover_sources([tmp_path / "nope.lang"], [".lang"])


# ###############
# Scanning
# ###############


def test_scan_file(tmp_path: Path) -> None:
    result = scan_file(_write(tmp_path / "main.lang", "declare Count = 42;"))
    assert [t.kind for t in result.tokens][-1] == TokenKind.EOF
    assert result.registry.size() == 1


def test_scan_file_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "bad.lang"
    path.write_bytes(b"\xff\xfe\x00X")
    with pytest.raises(SourceReadError, match="UTF-8"):
        scan_file(path)


def test_scan_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError):
        scan_file(tmp_path / "missing.lang")


def test_scan_files_keeps_input_order(tmp_path: Path) -> None:
    second = _write(tmp_path / "z.lang", "Zed")
    first = _write(tmp_path / "a.lang", "Alpha")

    results = scan_files([second, first])

    assert list(results) == [second, first]
    assert results[second].registry.lookup("Zed") is not None
    assert results[first].registry.lookup("Zed") is None


# ###############
# Reports
# ###############


def test_write_report_creates_directory(tmp_path: Path) -> None:
    source = _write(tmp_path / "main.lang", "## hi\nX = @;")
    report_dir = tmp_path / "reports" / "nested"

    written = write_report(source, scan_file(source), report_dir)

    assert written == report_dir / "main_report.txt"
    assert written == report_path_for(source, report_dir)
    text = written.read_text(encoding="utf-8")
    assert "[LEXICAL ERROR] INVALID_CHARACTER" in text
    assert "<COMMENT," in text


def test_write_report_without_comments(tmp_path: Path) -> None:
    source = _write(tmp_path / "main.lang", "## hi\nX;")
    written = write_report(source, scan_file(source), tmp_path / "out", include_comments=False)
    assert "<COMMENT," not in written.read_text(encoding="utf-8")


def test_write_report_failure_raises(tmp_path: Path) -> None:
    source = _write(tmp_path / "main.lang")
    blocker = _write(tmp_path / "blocker", "")
    with pytest.raises(ReportWriteError):
        write_report(source, scan_file(source), blocker)
