# Copyright 2026 Scanlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the token model."""

import pytest

from scanlex.lexer import KEYWORDS, OPERATORS, Token, TokenKind, match_identifier


@pytest.mark.parametrize(
    ("text", "expected_kind"),
    [
        ("fn", TokenKind.KW_FUNCTION),
        ("var", TokenKind.KW_VARIABLE),
        ("function", TokenKind.IDENTIFIER),
        ("variable", TokenKind.IDENTIFIER),
        ("", TokenKind.IDENTIFIER),
    ],
)
def test_match_identifier(text: str, expected_kind: TokenKind) -> None:
    assert match_identifier(text) == expected_kind


def test_keyword_table_is_closed() -> None:
    assert set(KEYWORDS) == {"fn", "var"}


def test_operator_table_covers_single_character_operators() -> None:
    assert OPERATORS == {
        "+": TokenKind.OPERATOR_PLUS,
        "-": TokenKind.OPERATOR_MINUS,
        "/": TokenKind.OPERATOR_DIVIDE,
        "*": TokenKind.OPERATOR_MULTIPLY,
    }


def test_kind_values_are_display_names() -> None:
    assert TokenKind.NUM_LITERAL.value == "NumLiteral"
    assert TokenKind.KW_FUNCTION.value == "KwFunction"
    assert TokenKind("Dummy") is TokenKind.DUMMY


def test_tokens_compare_by_value() -> None:
    assert Token("1", TokenKind.NUM_LITERAL) == Token("1", TokenKind.NUM_LITERAL)
    assert Token("1", TokenKind.NUM_LITERAL) != Token("1", TokenKind.STR_LITERAL)
    assert hash(Token("a", TokenKind.IDENTIFIER)) == hash(Token("a", TokenKind.IDENTIFIER))
