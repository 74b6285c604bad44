# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier registry built while scanning."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from dfalex.scanner.tokens import Token, TokenKind

# ###############
# Public Interface
# ###############

UNKNOWN_TYPE = "UNKNOWN"


@dataclass
class RegistryEntry:
    """Bookkeeping for one distinct identifier.

    Attributes:
        name: The exact, case-sensitive identifier text.
        inferred_type: Type assigned by a later stage; ``UNKNOWN`` until then.
        first_line: Line of the first occurrence.
        first_column: Column of the first occurrence.
        frequency: Number of occurrences seen so far.
    """

    name: str
    first_line: int
    first_column: int
    inferred_type: str = UNKNOWN_TYPE
    frequency: int = 1

    def __str__(self) -> str:
        return (
            f"{self.name} | {self.inferred_type} | "
            f"Line: {self.first_line}, Col: {self.first_column} | Freq: {self.frequency}"
        )


class IdentifierRegistry:
    """Insertion-ordered map from identifier text to its registry entry.

    Only IDENTIFIER tokens are recorded. Keywords and booleans never create an
    entry, even when their text would otherwise look like an identifier.
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}

    def record(self, token: Token) -> None:
        """Register one sighting of an identifier token."""
        if token.kind != TokenKind.IDENTIFIER:
            return
        entry = self._entries.get(token.lexeme)
        if entry is None:
            self._entries[token.lexeme] = RegistryEntry(token.lexeme, token.line, token.column)
        else:
            entry.frequency += 1

    def set_type(self, name: str, inferred_type: str) -> None:
        """Set the inferred type of a known identifier; unknown names are ignored."""
        entry = self._entries.get(name)
        if entry is not None:
            entry.inferred_type = inferred_type

    def lookup(self, name: str) -> RegistryEntry | None:
        """Return the entry for ``name``, or None if it was never seen."""
        return self._entries.get(name)

    def size(self) -> int:
        """Return the number of distinct identifiers."""
        return len(self._entries)

    @property
    def entries(self) -> list[RegistryEntry]:
        """All entries in first-seen order."""
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(list(self._entries.values()))
