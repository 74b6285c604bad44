# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recoverable lexical diagnostics and the append-only log that collects them.

Nothing in this module raises. The scanner reports a diagnostic and keeps
going; deciding how severe a diagnostic is belongs to the caller.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

MAX_IDENTIFIER_LENGTH = 31


class DiagnosticKind(enum.Enum):
    """Categories of recoverable lexical errors."""

    INVALID_CHARACTER = "INVALID_CHARACTER"
    MALFORMED_FLOAT = "MALFORMED_FLOAT"
    MALFORMED_INTEGER = "MALFORMED_INTEGER"
    UNTERMINATED_STRING = "UNTERMINATED_STRING"
    UNTERMINATED_CHAR = "UNTERMINATED_CHAR"
    INVALID_CHAR_LITERAL = "INVALID_CHAR_LITERAL"
    INVALID_ESCAPE = "INVALID_ESCAPE"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    UNTERMINATED_COMMENT = "UNTERMINATED_COMMENT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Diagnostic:
    """A single lexical error.

    Attributes:
        kind: The error category.
        line: 1-based line number of the offending text.
        column: 1-based column number of the offending text.
        lexeme: The offending or partial source text.
        reason: Human-readable explanation, fixed per category.
    """

    kind: DiagnosticKind
    line: int
    column: int
    lexeme: str
    reason: str

    def __str__(self) -> str:
        return (
            f"[LEXICAL ERROR] {self.kind.value} at Line: {self.line}, Col: {self.column}"
            f' | lexeme: "{self.lexeme}" | {self.reason}'
        )


def invalid_character(line: int, column: int, char: str) -> Diagnostic:
    """Build the diagnostic for a character that cannot start any token."""
    return Diagnostic(
        DiagnosticKind.INVALID_CHARACTER,
        line,
        column,
        char,
        f"Character '{char}' is not a valid token start",
    )


def malformed_float(line: int, column: int, lexeme: str) -> Diagnostic:
    """Build the diagnostic for a float with a bad fraction or exponent."""
    return Diagnostic(
        DiagnosticKind.MALFORMED_FLOAT,
        line,
        column,
        lexeme,
        "Float has more than 6 decimal places or missing fraction digits",
    )


def unterminated_string(line: int, column: int, partial: str) -> Diagnostic:
    """Build the diagnostic for a string literal with no closing quote."""
    return Diagnostic(
        DiagnosticKind.UNTERMINATED_STRING,
        line,
        column,
        partial,
        "String literal has no closing double-quote",
    )


def unterminated_char(line: int, column: int, partial: str) -> Diagnostic:
    """Build the diagnostic for a character literal with no content or closing quote."""
    return Diagnostic(
        DiagnosticKind.UNTERMINATED_CHAR,
        line,
        column,
        partial,
        "Character literal has no closing single-quote",
    )


def invalid_char_literal(line: int, column: int, partial: str) -> Diagnostic:
    """Build the diagnostic for a character literal holding more than one character."""
    return Diagnostic(
        DiagnosticKind.INVALID_CHAR_LITERAL,
        line,
        column,
        partial,
        "Character literal must contain exactly one character",
    )


def invalid_escape(line: int, column: int, sequence: str, *, in_char_literal: bool = False) -> Diagnostic:
    """Build the diagnostic for an unrecognised backslash escape."""
    where = "char literal" if in_char_literal else "string literal"
    return Diagnostic(
        DiagnosticKind.INVALID_ESCAPE,
        line,
        column,
        sequence,
        f"Invalid escape sequence in {where}",
    )


def invalid_identifier(line: int, column: int, lexeme: str) -> Diagnostic:
    """Build the diagnostic for an over-long or lowercase-initial identifier."""
    if len(lexeme) > MAX_IDENTIFIER_LENGTH:
        reason = f"Identifier exceeds maximum length of {MAX_IDENTIFIER_LENGTH} characters"
    else:
        reason = "Identifier must start with an uppercase letter [A-Z]"
    return Diagnostic(DiagnosticKind.INVALID_IDENTIFIER, line, column, lexeme, reason)


def unterminated_comment(line: int, column: int) -> Diagnostic:
    """Build the diagnostic for a block comment that reaches end of input."""
    return Diagnostic(
        DiagnosticKind.UNTERMINATED_COMMENT,
        line,
        column,
        "#*",
        "Multi-line comment opened but never closed",
    )


class DiagnosticsLog:
    """Append-only, detection-ordered collection of lexical diagnostics."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def report(self, kind: DiagnosticKind, line: int, column: int, lexeme: str, reason: str) -> None:
        """Append a diagnostic built from its parts."""
        self._diagnostics.append(Diagnostic(kind, line, column, lexeme, reason))

    def append(self, diagnostic: Diagnostic) -> None:
        """Append an already built diagnostic."""
        self._diagnostics.append(diagnostic)

    def report_invalid_character(self, line: int, column: int, char: str) -> None:
        self.append(invalid_character(line, column, char))

    def report_malformed_float(self, line: int, column: int, lexeme: str) -> None:
        self.append(malformed_float(line, column, lexeme))

    def report_unterminated_string(self, line: int, column: int, partial: str) -> None:
        self.append(unterminated_string(line, column, partial))

    def report_unterminated_char(self, line: int, column: int, partial: str) -> None:
        self.append(unterminated_char(line, column, partial))

    def report_invalid_char_literal(self, line: int, column: int, partial: str) -> None:
        self.append(invalid_char_literal(line, column, partial))

    def report_invalid_escape(self, line: int, column: int, sequence: str, *, in_char_literal: bool = False) -> None:
        self.append(invalid_escape(line, column, sequence, in_char_literal=in_char_literal))

    def report_invalid_identifier(self, line: int, column: int, lexeme: str) -> None:
        self.append(invalid_identifier(line, column, lexeme))

    def report_unterminated_comment(self, line: int, column: int) -> None:
        self.append(unterminated_comment(line, column))

    def has_errors(self) -> bool:
        """Return True if at least one diagnostic was reported."""
        return len(self._diagnostics) > 0

    def count(self) -> int:
        """Return the number of diagnostics reported so far."""
        return len(self._diagnostics)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """All diagnostics in detection order."""
        return tuple(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._diagnostics))
