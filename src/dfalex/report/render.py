# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Plain-text rendering of scan results.

All functions here are pure and return strings; writing them anywhere is the
caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dfalex.scanner.diagnostics import Diagnostic
from dfalex.scanner.engine import ScanResult
from dfalex.scanner.registry import RegistryEntry
from dfalex.scanner.tokens import Token, TokenKind

# ###############
# Public Interface
# ###############

NO_ERRORS_MESSAGE = "No lexical errors detected."


@dataclass(frozen=True)
class ScanStatistics:
    """Aggregate figures for one scan.

    Attributes:
        total_tokens: Number of tokens, EOF included.
        lines_processed: Line number the scan finished on.
        comment_count: Number of COMMENT tokens.
        identifier_count: Number of distinct identifiers.
        error_count: Number of diagnostics.
        kind_counts: Token count per kind, only kinds that occurred, in
            enumeration order.
    """

    total_tokens: int
    lines_processed: int
    comment_count: int
    identifier_count: int
    error_count: int
    kind_counts: dict[TokenKind, int] = field(default_factory=dict)


def format_token(token: Token) -> str:
    """Render a token as ``<KIND, "lexeme", Line: L, Col: C>``."""
    return str(token)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic as a ``[LEXICAL ERROR] ...`` line."""
    return str(diagnostic)


def format_registry_entry(entry: RegistryEntry) -> str:
    """Render a registry entry as ``name | type | Line: L, Col: C | Freq: N``."""
    return str(entry)


def compute_statistics(result: ScanResult) -> ScanStatistics:
    """Collect aggregate figures from a scan result."""
    seen: dict[TokenKind, int] = {}
    for token in result.tokens:
        seen[token.kind] = seen.get(token.kind, 0) + 1
    kind_counts = {kind: seen[kind] for kind in TokenKind if kind in seen}
    return ScanStatistics(
        total_tokens=len(result.tokens),
        lines_processed=result.tokens[-1].line,
        comment_count=kind_counts.get(TokenKind.COMMENT, 0),
        identifier_count=result.registry.size(),
        error_count=result.diagnostics.count(),
        kind_counts=kind_counts,
    )


def format_statistics(stats: ScanStatistics) -> list[str]:
    """Render statistics as report lines."""
    lines = [
        f"Total tokens produced : {stats.total_tokens}",
        f"Lines processed       : {stats.lines_processed}",
        f"Comments              : {stats.comment_count}",
        f"Unique identifiers    : {stats.identifier_count}",
        f"Lexical errors        : {stats.error_count}",
        "",
        "Per-kind breakdown:",
    ]
    for kind, count in stats.kind_counts.items():
        lines.append(f"  {kind.value:<20}  {count}")
    return lines


def render_report(result: ScanResult, include_comments: bool = True) -> str:
    """Render the full human-readable report for one scan.

    Args:
        result: The scan to describe.
        include_comments: When False, COMMENT tokens are left out of the token
            listing. Statistics always count them.

    Returns:
        The report text, newline terminated.
    """
    lines: list[str] = []

    lines.extend(_section("TOKEN STREAM"))
    for token in result.tokens:
        if token.kind == TokenKind.COMMENT and not include_comments:
            continue
        lines.append(format_token(token))

    lines.extend(_section("STATISTICS"))
    lines.extend(format_statistics(compute_statistics(result)))

    lines.extend(_section("IDENTIFIER REGISTRY"))
    for entry in result.registry:
        lines.append(format_registry_entry(entry))

    lines.extend(_section("LEXICAL ERRORS"))
    if result.diagnostics.has_errors():
        for diagnostic in result.diagnostics:
            lines.append(format_diagnostic(diagnostic))
        lines.append(f"Total errors: {result.diagnostics.count()}")
    else:
        lines.append(NO_ERRORS_MESSAGE)

    return "\n".join(lines) + "\n"


# ################
# Implementation
# ################

_RULE = "=" * 60


def _section(title: str) -> list[str]:
    return ["", _RULE, title, _RULE]
