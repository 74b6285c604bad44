# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Immutable read position over a source buffer."""

from __future__ import annotations

from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Cursor:
    """A position in the source text.

    The cursor never mutates. Every step returns a new cursor, so recognizers
    can be run from any position and compared without side effects.

    Attributes:
        pos: 0-based character index into the source.
        line: 1-based line number of ``pos``.
        column: 1-based column number of ``pos``.
    """

    pos: int = 0
    line: int = 1
    column: int = 1

    def at_end(self, source: str) -> bool:
        """Return True if no characters remain."""
        return self.pos >= len(source)

    def current(self, source: str) -> str:
        """Return the character under the cursor, or '' at end of input."""
        if self.pos < len(source):
            return source[self.pos]
        return ""

    def peek(self, source: str, offset: int = 1) -> str:
        """Return the character ``offset`` positions ahead, or '' past the end."""
        index = self.pos + offset
        if index < len(source):
            return source[index]
        return ""

    def advance(self, source: str) -> Cursor:
        """Return the cursor one character further on, tracking line and column."""
        if source[self.pos] == "\n":
            return Cursor(self.pos + 1, self.line + 1, 1)
        return Cursor(self.pos + 1, self.line, self.column + 1)

    def advance_by(self, source: str, count: int) -> Cursor:
        """Return the cursor ``count`` characters further on."""
        cursor = self
        for _ in range(count):
            cursor = cursor.advance(source)
        return cursor

    def advance_while(self, source: str, chars: str | frozenset[str]) -> Cursor:
        """Return the cursor past the longest run of characters drawn from ``chars``."""
        cursor = self
        while cursor.pos < len(source) and source[cursor.pos] in chars:
            cursor = cursor.advance(source)
        return cursor
