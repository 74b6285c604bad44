# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the diagnostics log."""

from dfalex.scanner.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticsLog,
    invalid_identifier,
    malformed_float,
)

# ###############
# Public Interface
# ###############


def test_new_log_is_empty() -> None:
    """A fresh log has no errors."""
    log = DiagnosticsLog()
    assert not log.has_errors()
    assert log.count() == 0
    assert list(log) == []


def test_report_appends_in_order() -> None:
    """Diagnostics are kept in the order they were reported."""
    log = DiagnosticsLog()
    log.report(DiagnosticKind.UNKNOWN, 1, 1, "a", "first")
    log.report_invalid_character(2, 5, "@")
    log.report_unterminated_comment(3, 1)

    assert log.has_errors()
    assert log.count() == 3
    assert len(log) == 3
    assert [d.kind for d in log] == [
        DiagnosticKind.UNKNOWN,
        DiagnosticKind.INVALID_CHARACTER,
        DiagnosticKind.UNTERMINATED_COMMENT,
    ]


def test_dump_is_a_snapshot() -> None:
    """The ordered dump cannot be used to mutate the log."""
    log = DiagnosticsLog()
    log.report_malformed_float(1, 1, "3.")
    dump = log.diagnostics
    assert isinstance(dump, tuple)
    log.report_malformed_float(1, 5, "4.")
    assert len(dump) == 1
    assert log.count() == 2


def test_convenience_reasons_are_fixed_per_kind() -> None:
    """Each convenience constructor uses its standard reason text."""
    log = DiagnosticsLog()
    log.report_unterminated_string(1, 1, '"ab')
    log.report_unterminated_char(1, 1, "'")
    log.report_invalid_char_literal(1, 1, "'a")
    log.report_invalid_escape(1, 3, "\\q")
    log.report_invalid_escape(1, 3, "'\\", in_char_literal=True)
    log.report_unterminated_comment(1, 1)

    assert [d.reason for d in log] == [
        "String literal has no closing double-quote",
        "Character literal has no closing single-quote",
        "Character literal must contain exactly one character",
        "Invalid escape sequence in string literal",
        "Invalid escape sequence in char literal",
        "Multi-line comment opened but never closed",
    ]


def test_unterminated_comment_lexeme_is_opening_marker() -> None:
    log = DiagnosticsLog()
    log.report_unterminated_comment(4, 2)
    assert log.diagnostics[0].lexeme == "#*"


def test_invalid_identifier_reason_depends_on_length() -> None:
    """Over-long identifiers and lowercase words get different reasons."""
    short = invalid_identifier(1, 1, "count")
    long = invalid_identifier(1, 1, "A" + "b" * 31)
    assert short.reason == "Identifier must start with an uppercase letter [A-Z]"
    assert long.reason == "Identifier exceeds maximum length of 31 characters"


def test_diagnostic_rendering() -> None:
    """A diagnostic renders as a single [LEXICAL ERROR] line."""
    diag = malformed_float(2, 7, "3.")
    assert str(diag) == (
        '[LEXICAL ERROR] MALFORMED_FLOAT at Line: 2, Col: 7 | lexeme: "3." | '
        "Float has more than 6 decimal places or missing fraction digits"
    )


def test_append_prebuilt_diagnostic() -> None:
    log = DiagnosticsLog()
    diag = Diagnostic(DiagnosticKind.MALFORMED_INTEGER, 1, 1, "1,000", "Integer is malformed")
    log.append(diag)
    assert log.diagnostics == (diag,)
