# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sub-recognizers for each token family.

Every recognizer is a pure function ``(source, start) -> Recognition``. It
walks forward from ``start`` as far as its grammar allows and returns the new
cursor together with the token it produced (if any) and the diagnostics it
detected. Recognizers never touch shared state, so each one can be exercised
in isolation from any cursor position.

Callers must only invoke a recognizer when the character under ``start``
belongs to its family; the engine's dispatcher guarantees this.
"""

from typing import NamedTuple

from dfalex.scanner.cursor import Cursor
from dfalex.scanner.diagnostics import (
    MAX_IDENTIFIER_LENGTH,
    Diagnostic,
    invalid_char_literal,
    invalid_character,
    invalid_escape,
    invalid_identifier,
    malformed_float,
    unterminated_char,
    unterminated_comment,
    unterminated_string,
)
from dfalex.scanner.tokens import Token, TokenKind

# ###############
# Public Interface
# ###############

KEYWORDS: frozenset[str] = frozenset(
    {
        "start",
        "finish",
        "loop",
        "condition",
        "declare",
        "output",
        "input",
        "function",
        "return",
        "break",
        "continue",
        "else",
    }
)

LOWERCASE_BOOLEANS: frozenset[str] = frozenset({"true", "false"})
UPPERCASE_BOOLEANS: frozenset[str] = frozenset({"TRUE", "FALSE"})

MAX_FRACTION_DIGITS = 6

DIGITS = frozenset("0123456789")
UPPERCASE = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
LOWERCASE = frozenset("abcdefghijklmnopqrstuvwxyz")
WORD_CONTINUE = LOWERCASE | DIGITS | {"_"}
WHITESPACE = frozenset(" \t\r\n")
PUNCTUATORS = frozenset("(){}[],;:")
OPERATOR_START = frozenset("+-*/%=!<>&|")
VALID_ESCAPES = frozenset("\"'\\ntr")


class Recognition(NamedTuple):
    """Outcome of running one recognizer.

    Attributes:
        cursor: Position just past the consumed characters.
        token: The emitted token, or None when the input was discarded.
        diagnostics: Diagnostics detected while consuming, in detection order.
    """

    cursor: Cursor
    token: Token | None
    diagnostics: tuple[Diagnostic, ...] = ()


def scan_block_comment(source: str, start: Cursor) -> Recognition:
    """Recognize ``#* ... *#``; an unclosed comment becomes an ERROR token."""
    cursor = start.advance_by(source, 2)
    after_star = False
    while not cursor.at_end(source):
        ch = cursor.current(source)
        cursor = cursor.advance(source)
        if after_star and ch == "#":
            return Recognition(cursor, _token(TokenKind.COMMENT, source, start, cursor))
        after_star = ch == "*"

    return Recognition(
        cursor,
        _token(TokenKind.ERROR, source, start, cursor),
        (unterminated_comment(start.line, start.column),),
    )


def scan_line_comment(source: str, start: Cursor) -> Recognition:
    """Recognize ``##`` through the end of the line, newline included."""
    cursor = start.advance_by(source, 2)
    while not cursor.at_end(source) and cursor.current(source) != "\n":
        cursor = cursor.advance(source)
    if cursor.current(source) == "\n":
        cursor = cursor.advance(source)
    return Recognition(cursor, _token(TokenKind.COMMENT, source, start, cursor))


def scan_string(source: str, start: Cursor) -> Recognition:
    """Recognize a double-quoted string literal.

    Invalid escapes are reported but consumed. A raw newline or end of input
    before the closing quote ends the literal as an ERROR token; the newline
    itself is left for the whitespace skipper.
    """
    cursor = start.advance(source)
    diagnostics: list[Diagnostic] = []
    while not cursor.at_end(source):
        ch = cursor.current(source)
        if ch == "\n":
            break
        if ch == "\\":
            cursor = cursor.advance(source)
            if cursor.at_end(source):
                break
            escaped = cursor.current(source)
            if escaped not in VALID_ESCAPES:
                diagnostics.append(invalid_escape(cursor.line, cursor.column, "\\" + escaped))
            cursor = cursor.advance(source)
            continue
        cursor = cursor.advance(source)
        if ch == '"':
            return Recognition(cursor, _token(TokenKind.STRING, source, start, cursor), tuple(diagnostics))

    partial = source[start.pos : cursor.pos]
    diagnostics.append(unterminated_string(start.line, start.column, partial))
    return Recognition(cursor, _token(TokenKind.ERROR, source, start, cursor), tuple(diagnostics))


def scan_char_literal(source: str, start: Cursor) -> Recognition:
    """Recognize a single-quoted literal holding exactly one character or escape.

    Surplus content is consumed up to the next quote (inclusive) or newline
    (exclusive) and the whole span becomes an ERROR token.
    """
    cursor = start.advance(source)
    content = cursor.current(source)
    if content in ("", "\n", "'"):
        return Recognition(
            cursor,
            _token(TokenKind.ERROR, source, start, cursor),
            (unterminated_char(start.line, start.column, "'"),),
        )

    diagnostics: list[Diagnostic] = []
    if content == "\\":
        cursor = cursor.advance(source)
        if cursor.current(source) in VALID_ESCAPES:
            cursor = cursor.advance(source)
        else:
            partial = source[start.pos : cursor.pos]
            diagnostics.append(invalid_escape(cursor.line, cursor.column, partial, in_char_literal=True))
    else:
        cursor = cursor.advance(source)

    if cursor.current(source) == "'":
        cursor = cursor.advance(source)
        return Recognition(cursor, _token(TokenKind.CHAR_LITERAL, source, start, cursor), tuple(diagnostics))

    diagnostics.append(invalid_char_literal(start.line, start.column, source[start.pos : cursor.pos]))
    while not cursor.at_end(source) and cursor.current(source) not in ("'", "\n"):
        cursor = cursor.advance(source)
    if cursor.current(source) == "'":
        cursor = cursor.advance(source)
    return Recognition(cursor, _token(TokenKind.ERROR, source, start, cursor), tuple(diagnostics))


def scan_operator(source: str, start: Cursor) -> Recognition:
    """Recognize an operator, preferring two-character forms.

    A ``+`` or ``-`` directly followed by a digit starts a signed number
    instead, so ``X+5`` yields an identifier and the integer ``+5``. A lone
    ``&`` or ``|`` is discarded with an invalid-character diagnostic.
    """
    ch = start.current(source)
    pair = ch + start.peek(source)

    kind = _TWO_CHAR_OPERATORS.get(pair)
    if kind is not None:
        cursor = start.advance_by(source, 2)
        return Recognition(cursor, _token(kind, source, start, cursor))

    if ch in ("+", "-") and start.peek(source) in DIGITS:
        return scan_number(source, start)

    kind = _ONE_CHAR_OPERATORS.get(ch)
    cursor = start.advance(source)
    if kind is None:
        return Recognition(cursor, None, (invalid_character(start.line, start.column, ch),))
    return Recognition(cursor, _token(kind, source, start, cursor))


def scan_number(source: str, start: Cursor) -> Recognition:
    """Recognize an integer, float or exponent float with an optional sign.

    Edge cases:

    * ``3.`` emits INTEGER ``3`` plus a malformed-float diagnostic and leaves
      the ``.`` unconsumed for the next dispatch.
    * More than six fraction digits still emit a FLOAT with the full lexeme,
      plus a malformed-float diagnostic; no exponent is read after it.
    * An exponent marker with no digits yields an ERROR token.
    """
    cursor = start
    if cursor.current(source) in ("+", "-"):
        cursor = cursor.advance(source)
    if cursor.current(source) not in DIGITS:
        # Only reachable for a bare sign; the dispatcher never routes one here.
        return Recognition(cursor, _token(TokenKind.ARITH_OP, source, start, cursor))

    cursor = cursor.advance_while(source, DIGITS)
    if cursor.current(source) != ".":
        return Recognition(cursor, _token(TokenKind.INTEGER, source, start, cursor))

    if cursor.peek(source) not in DIGITS:
        digits = source[start.pos : cursor.pos]
        return Recognition(
            cursor,
            _token(TokenKind.INTEGER, source, start, cursor),
            (malformed_float(start.line, start.column, digits + "."),),
        )

    cursor = cursor.advance(source)
    fraction_start = cursor.pos
    cursor = cursor.advance_while(source, DIGITS)
    fraction_digits = cursor.pos - fraction_start
    lexeme = source[start.pos : cursor.pos]
    if fraction_digits == 0:
        return Recognition(
            cursor,
            _token(TokenKind.ERROR, source, start, cursor),
            (malformed_float(start.line, start.column, lexeme),),
        )
    if fraction_digits > MAX_FRACTION_DIGITS:
        return Recognition(
            cursor,
            _token(TokenKind.FLOAT, source, start, cursor),
            (malformed_float(start.line, start.column, lexeme),),
        )

    if cursor.current(source) not in ("e", "E"):
        return Recognition(cursor, _token(TokenKind.FLOAT, source, start, cursor))

    cursor = cursor.advance(source)
    if cursor.current(source) in ("+", "-"):
        cursor = cursor.advance(source)
    if cursor.current(source) not in DIGITS:
        return Recognition(
            cursor,
            _token(TokenKind.ERROR, source, start, cursor),
            (malformed_float(start.line, start.column, source[start.pos : cursor.pos]),),
        )
    cursor = cursor.advance_while(source, DIGITS)
    return Recognition(cursor, _token(TokenKind.FLOAT_EXP, source, start, cursor))


def scan_identifier(source: str, start: Cursor) -> Recognition:
    """Recognize an uppercase-initial identifier or the literal TRUE / FALSE.

    While the text read so far is a prefix of an uppercase boolean spelling,
    matching uppercase letters extend it. The moment a full spelling is read
    a BOOLEAN is emitted without looking at what follows, so ``TRUEx`` gives
    ``TRUE`` and leaves ``x`` for the next dispatch.
    """
    first = start.current(source)
    cursor = start.advance(source)
    spelling: str | None = first if first in _BOOLEAN_PREFIXES else None

    while not cursor.at_end(source):
        ch = cursor.current(source)
        if spelling is not None and spelling + ch in _BOOLEAN_PREFIXES:
            cursor = cursor.advance(source)
            spelling += ch
            if spelling in UPPERCASE_BOOLEANS:
                return Recognition(cursor, _token(TokenKind.BOOLEAN, source, start, cursor))
        elif ch in WORD_CONTINUE:
            cursor = cursor.advance(source)
            spelling = None
        else:
            break

    token = _token(TokenKind.IDENTIFIER, source, start, cursor)
    if len(token.lexeme) > MAX_IDENTIFIER_LENGTH:
        return Recognition(cursor, token, (invalid_identifier(start.line, start.column, token.lexeme),))
    return Recognition(cursor, token)


def scan_lowercase_word(source: str, start: Cursor) -> Recognition:
    """Recognize a keyword or lowercase boolean; any other lowercase word is an ERROR."""
    cursor = start.advance_while(source, WORD_CONTINUE)
    word = source[start.pos : cursor.pos]
    if word in KEYWORDS:
        return Recognition(cursor, _token(TokenKind.KEYWORD, source, start, cursor))
    if word in LOWERCASE_BOOLEANS:
        return Recognition(cursor, _token(TokenKind.BOOLEAN, source, start, cursor))
    return Recognition(
        cursor,
        _token(TokenKind.ERROR, source, start, cursor),
        (invalid_identifier(start.line, start.column, word),),
    )


def scan_punctuator(source: str, start: Cursor) -> Recognition:
    """Recognize a single punctuation character."""
    cursor = start.advance(source)
    return Recognition(cursor, _token(TokenKind.PUNCTUATOR, source, start, cursor))


def discard_invalid_character(source: str, start: Cursor) -> Recognition:
    """Drop the character under ``start`` and report it."""
    return Recognition(
        start.advance(source),
        None,
        (invalid_character(start.line, start.column, start.current(source)),),
    )


# ################
# Implementation
# ################

_TWO_CHAR_OPERATORS: dict[str, TokenKind] = {
    "++": TokenKind.INC_DEC,
    "--": TokenKind.INC_DEC,
    "+=": TokenKind.ASSIGN_OP,
    "-=": TokenKind.ASSIGN_OP,
    "*=": TokenKind.ASSIGN_OP,
    "/=": TokenKind.ASSIGN_OP,
    "**": TokenKind.ARITH_OP,
    "==": TokenKind.REL_OP,
    "!=": TokenKind.REL_OP,
    "<=": TokenKind.REL_OP,
    ">=": TokenKind.REL_OP,
    "&&": TokenKind.LOGICAL_OP,
    "||": TokenKind.LOGICAL_OP,
}

_ONE_CHAR_OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.ARITH_OP,
    "-": TokenKind.ARITH_OP,
    "*": TokenKind.ARITH_OP,
    "/": TokenKind.ARITH_OP,
    "%": TokenKind.ARITH_OP,
    "=": TokenKind.ASSIGN_OP,
    "<": TokenKind.REL_OP,
    ">": TokenKind.REL_OP,
    "!": TokenKind.LOGICAL_OP,
}

# Every non-empty prefix of an uppercase boolean spelling: T, TR, TRU, TRUE, F, FA, ...
_BOOLEAN_PREFIXES: frozenset[str] = frozenset(
    spelling[:length] for spelling in UPPERCASE_BOOLEANS for length in range(1, len(spelling) + 1)
)


def _token(kind: TokenKind, source: str, start: Cursor, end: Cursor) -> Token:
    """Build a token spanning ``start`` up to (not including) ``end``."""
    return Token(kind, source[start.pos : end.pos], start.line, start.column)
