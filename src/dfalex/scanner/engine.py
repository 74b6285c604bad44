# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""DFA-driven scanner engine.

Converts raw source text into a classified, EOF-terminated token stream while
building the identifier registry and the diagnostics log. Scanning is total:
malformed input is reported through diagnostics, never through exceptions,
and every dispatch consumes at least one character.
"""

from dataclasses import dataclass

from dfalex.scanner.cursor import Cursor
from dfalex.scanner.diagnostics import DiagnosticsLog
from dfalex.scanner.recognizers import (
    DIGITS,
    LOWERCASE,
    OPERATOR_START,
    PUNCTUATORS,
    UPPERCASE,
    WHITESPACE,
    Recognition,
    discard_invalid_character,
    scan_block_comment,
    scan_char_literal,
    scan_identifier,
    scan_line_comment,
    scan_lowercase_word,
    scan_number,
    scan_operator,
    scan_punctuator,
    scan_string,
)
from dfalex.scanner.registry import IdentifierRegistry
from dfalex.scanner.tokens import EOF_LEXEME, Token, TokenKind

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ScanResult:
    """The three artifacts produced by one scan.

    Attributes:
        tokens: Every token in source order; the last one is always EOF.
        registry: Identifiers seen, in first-seen order.
        diagnostics: Lexical errors, in detection order.
    """

    tokens: tuple[Token, ...]
    registry: IdentifierRegistry
    diagnostics: DiagnosticsLog

    @property
    def has_errors(self) -> bool:
        """Return True if any lexical error was reported."""
        return self.diagnostics.has_errors()


def scan(source: str) -> ScanResult:
    """Scan a complete source text.

    Args:
        source: The full text of one source unit.

    Returns:
        A ScanResult holding the token stream, identifier registry and
        diagnostics log.
    """
    return Scanner(source).scan()


def recognize(source: str, cursor: Cursor) -> Recognition:
    """Dispatch on the character under ``cursor`` to exactly one recognizer.

    The cursor must not sit on whitespace or at end of input.
    """
    ch = cursor.current(source)
    if ch == "#" and cursor.peek(source) == "*":
        return scan_block_comment(source, cursor)
    if ch == "#" and cursor.peek(source) == "#":
        return scan_line_comment(source, cursor)
    if ch == '"':
        return scan_string(source, cursor)
    if ch == "'":
        return scan_char_literal(source, cursor)
    if ch in OPERATOR_START:
        return scan_operator(source, cursor)
    if ch in UPPERCASE:
        return scan_identifier(source, cursor)
    if ch in LOWERCASE:
        return scan_lowercase_word(source, cursor)
    if ch in DIGITS:
        return scan_number(source, cursor)
    if ch in PUNCTUATORS:
        return scan_punctuator(source, cursor)
    return discard_invalid_character(source, cursor)


class Scanner:
    """Single-use scanner over one source text.

    Each instance owns its cursor and output collections; distinct instances
    share nothing and may run in parallel on distinct sources. Calling
    ``scan`` more than once returns the same result.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._registry = IdentifierRegistry()
        self._diagnostics = DiagnosticsLog()
        self._result: ScanResult | None = None

    def scan(self) -> ScanResult:
        """Run the scanner to completion and return its artifacts."""
        if self._result is not None:
            return self._result

        cursor = Cursor()
        while True:
            cursor = cursor.advance_while(self._source, WHITESPACE)
            if cursor.at_end(self._source):
                break
            recognition = recognize(self._source, cursor)
            self._accept(recognition)
            cursor = recognition.cursor

        self._tokens.append(Token(TokenKind.EOF, EOF_LEXEME, cursor.line, cursor.column))
        self._result = ScanResult(tuple(self._tokens), self._registry, self._diagnostics)
        return self._result

    def _accept(self, recognition: Recognition) -> None:
        """Log diagnostics and keep the token, registering identifiers."""
        for diagnostic in recognition.diagnostics:
            self._diagnostics.append(diagnostic)
        if recognition.token is not None:
            self._registry.record(recognition.token)
            self._tokens.append(recognition.token)
