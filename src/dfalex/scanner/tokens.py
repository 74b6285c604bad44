# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token kinds and the immutable token record produced by the scanner."""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

EOF_LEXEME = "<EOF>"


class TokenKind(enum.Enum):
    """All token kinds produced by the scanner."""

    # Literals and words
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    FLOAT_EXP = "FLOAT_EXP"
    STRING = "STRING"
    CHAR_LITERAL = "CHAR_LITERAL"
    BOOLEAN = "BOOLEAN"

    # Operators
    ARITH_OP = "ARITH_OP"
    REL_OP = "REL_OP"
    LOGICAL_OP = "LOGICAL_OP"
    ASSIGN_OP = "ASSIGN_OP"
    INC_DEC = "INC_DEC"

    # Structure
    PUNCTUATOR = "PUNCTUATOR"
    COMMENT = "COMMENT"

    # Special
    ERROR = "ERROR"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A classified lexeme with its source location.

    Attributes:
        kind: The kind of token.
        lexeme: The verbatim source text of the token, delimiters included.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    kind: TokenKind
    lexeme: str
    line: int
    column: int

    def __str__(self) -> str:
        return f'<{self.kind.value}, "{self.lexeme}", Line: {self.line}, Col: {self.column}>'
