# Copyright 2026 Scanlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model and scanner."""

from scanlex.lexer.scanner import (
    LexErrorKind,
    Lexer,
    LexerError,
    LexerUsageError,
    LineTracking,
    tokenize,
    tokenize_sources,
)
from scanlex.lexer.tokens import KEYWORDS, OPERATORS, Token, TokenKind, match_identifier

__all__ = [
    "KEYWORDS",
    "LexErrorKind",
    "Lexer",
    "LexerError",
    "LexerUsageError",
    "LineTracking",
    "OPERATORS",
    "Token",
    "TokenKind",
    "match_identifier",
    "tokenize",
    "tokenize_sources",
]
