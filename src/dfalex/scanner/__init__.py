# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner: tokens, diagnostics, identifier registry and the engine."""

from dfalex.scanner.cursor import Cursor
from dfalex.scanner.diagnostics import Diagnostic, DiagnosticKind, DiagnosticsLog
from dfalex.scanner.engine import Scanner, ScanResult, recognize, scan
from dfalex.scanner.registry import UNKNOWN_TYPE, IdentifierRegistry, RegistryEntry
from dfalex.scanner.tokens import EOF_LEXEME, Token, TokenKind

__all__ = [
    # Tokens
    "EOF_LEXEME",
    "Token",
    "TokenKind",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticsLog",
    # Registry
    "UNKNOWN_TYPE",
    "IdentifierRegistry",
    "RegistryEntry",
    # Engine
    "Cursor",
    "ScanResult",
    "Scanner",
    "recognize",
    "scan",
]
