# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the identifier registry."""

import pytest

from dfalex.scanner import UNKNOWN_TYPE, IdentifierRegistry, Token, TokenKind

# ###############
# Helpers
# ###############


def _ident(name: str, line: int = 1, column: int = 1) -> Token:
    return Token(TokenKind.IDENTIFIER, name, line, column)


# ###############
# Public Interface
# ###############


def test_first_sighting_creates_entry() -> None:
    registry = IdentifierRegistry()
    registry.record(_ident("Count", 3, 5))

    entry = registry.lookup("Count")
    assert entry is not None
    assert entry.name == "Count"
    assert entry.inferred_type == UNKNOWN_TYPE
    assert (entry.first_line, entry.first_column, entry.frequency) == (3, 5, 1)


def test_repeat_sighting_increments_frequency_only() -> None:
    registry = IdentifierRegistry()
    registry.record(_ident("Count", 1, 1))
    registry.record(_ident("Count", 4, 9))

    entry = registry.lookup("Count")
    assert entry is not None
    assert entry.frequency == 2
    assert (entry.first_line, entry.first_column) == (1, 1)
    assert registry.size() == 1


@pytest.mark.parametrize(
    "kind",
    [TokenKind.KEYWORD, TokenKind.BOOLEAN, TokenKind.ERROR, TokenKind.STRING, TokenKind.COMMENT],
)
def test_non_identifier_tokens_are_ignored(kind: TokenKind) -> None:
    registry = IdentifierRegistry()
    registry.record(Token(kind, "TRUE", 1, 1))
    assert registry.size() == 0


def test_names_are_case_sensitive() -> None:
    registry = IdentifierRegistry()
    registry.record(_ident("Count"))
    registry.record(_ident("Count_"))
    registry.record(_ident("Counter"))
    assert len(registry) == 3


def test_set_type_on_known_name() -> None:
    registry = IdentifierRegistry()
    registry.record(_ident("Pi"))
    registry.set_type("Pi", "FLOAT")
    entry = registry.lookup("Pi")
    assert entry is not None
    assert entry.inferred_type == "FLOAT"


def test_set_type_on_unknown_name_is_noop() -> None:
    registry = IdentifierRegistry()
    registry.set_type("Missing", "INT")
    assert registry.lookup("Missing") is None
    assert registry.size() == 0


def test_iteration_follows_insertion_order() -> None:
    registry = IdentifierRegistry()
    for name in ["B", "A", "B", "C"]:
        registry.record(_ident(name))
    assert [entry.name for entry in registry] == ["B", "A", "C"]
    assert [entry.name for entry in registry.entries] == ["B", "A", "C"]
    assert "A" in registry
    assert "D" not in registry


def test_entry_rendering() -> None:
    registry = IdentifierRegistry()
    registry.record(_ident("Count", 1, 9))
    registry.record(_ident("Count", 2, 1))
    entry = registry.lookup("Count")
    assert str(entry) == "Count | UNKNOWN | Line: 1, Col: 9 | Freq: 2"
