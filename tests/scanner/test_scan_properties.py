# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property-based tests for stream-wide scanner invariants."""

from collections.abc import Callable

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from dfalex.scanner import DiagnosticKind, ScanResult, TokenKind, scan

# ###############
# Strategies
# ###############

# Characters that exercise every recognizer and most of their edge cases.
_LEXICAL_ALPHABET = list("#*\"'\\+-/%=!<>&|.eE0159AFTRUELSaftrxyz_(){};: \n\t@")

_lexical_text = st.text(alphabet=st.sampled_from(_LEXICAL_ALPHABET), max_size=80)
_any_text = st.one_of(st.text(max_size=200), _lexical_text)

_VALID_LEXEMES = [
    "declare",
    "loop",
    "else",
    "Count",
    "Total_1",
    "TRUE",
    "false",
    "42",
    "-7",
    "3.14",
    "2.5e-3",
    '"hi there"',
    r'"tab\t"',
    "'x'",
    r"'\n'",
    "++",
    "+=",
    "**",
    "==",
    "&&",
    "!",
    "=",
    "<",
    "(",
    ")",
    ";",
    "## note\n",
    "#* block *#",
]


def _index_of(source: str) -> Callable[[int, int], int]:
    """Return a function mapping a 1-based (line, column) to a source index."""
    line_starts = [0] + [i + 1 for i, ch in enumerate(source) if ch == "\n"]

    def index(line: int, column: int) -> int:
        return line_starts[line - 1] + column - 1

    return index


# ###############
# Invariants
# ###############


class TestStreamInvariants:
    @given(_any_text)
    @settings(max_examples=200)
    def test_stream_ends_with_single_eof(self, source: str) -> None:
        tokens = scan(source).tokens
        assert len(tokens) >= 1
        assert tokens[-1].kind == TokenKind.EOF
        assert sum(1 for t in tokens if t.kind == TokenKind.EOF) == 1

    @given(_any_text)
    @settings(max_examples=200)
    def test_positions_are_non_decreasing(self, source: str) -> None:
        positions = [(t.line, t.column) for t in scan(source).tokens]
        assert positions == sorted(positions)

    @given(_any_text)
    @settings(max_examples=300)
    def test_every_character_is_accounted_for(self, source: str) -> None:
        """Tokens, discarded characters and whitespace tile the input exactly."""
        result = scan(source)
        index = _index_of(source)
        covered = [False] * len(source)

        for token in result.tokens[:-1]:
            start = index(token.line, token.column)
            assert source[start : start + len(token.lexeme)] == token.lexeme
            for i in range(start, start + len(token.lexeme)):
                assert not covered[i]
                covered[i] = True

        for diag in result.diagnostics:
            if diag.kind != DiagnosticKind.INVALID_CHARACTER:
                continue
            i = index(diag.line, diag.column)
            assert source[i] == diag.lexeme
            assert not covered[i]
            covered[i] = True

        for i, ch in enumerate(source):
            if not covered[i]:
                assert ch in " \t\r\n"

    @given(_any_text)
    @settings(max_examples=200)
    def test_every_error_token_has_a_diagnostic(self, source: str) -> None:
        result = scan(source)
        reported = {(d.line, d.column) for d in result.diagnostics}
        for token in result.tokens:
            if token.kind == TokenKind.ERROR:
                assert (token.line, token.column) in reported

    @given(_any_text)
    @settings(max_examples=200)
    def test_registry_matches_distinct_identifiers(self, source: str) -> None:
        result = scan(source)
        names = [t.lexeme for t in result.tokens if t.kind == TokenKind.IDENTIFIER]
        assert result.registry.size() == len(set(names))
        for name in set(names):
            entry = result.registry.lookup(name)
            assert entry is not None
            assert entry.frequency == names.count(name)


class TestRoundTrip:
    @given(
        st.lists(st.sampled_from(_VALID_LEXEMES), max_size=30),
        st.sampled_from([" ", "\n", "\t", "  \n"]),
    )
    @settings(max_examples=200)
    def test_rescanning_joined_lexemes_keeps_kinds(self, lexemes: list[str], separator: str) -> None:
        first = scan(separator.join(lexemes))
        assume(not first.has_errors)

        def significant(result: ScanResult) -> list[TokenKind]:
            return [t.kind for t in result.tokens if t.kind not in (TokenKind.COMMENT, TokenKind.EOF)]

        rejoined = " ".join(
            t.lexeme for t in first.tokens if t.kind not in (TokenKind.COMMENT, TokenKind.EOF)
        )
        assert significant(scan(rejoined)) == significant(first)
