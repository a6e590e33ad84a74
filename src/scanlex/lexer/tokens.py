# Copyright 2026 Scanlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token kinds and the token record produced by the scanner."""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token kinds produced by the scanlex lexer."""

    # Placeholder, never part of a finished token sequence
    DUMMY = "Dummy"

    # Literals
    NUM_LITERAL = "NumLiteral"
    STR_LITERAL = "StrLiteral"
    IDENTIFIER = "Identifier"

    # Operators
    OPERATOR_PLUS = "OperatorPlus"
    OPERATOR_MINUS = "OperatorMinus"
    OPERATOR_DIVIDE = "OperatorDivide"
    OPERATOR_MULTIPLY = "OperatorMultiply"

    # Keywords
    KW_FUNCTION = "KwFunction"
    KW_VARIABLE = "KwVariable"


@dataclass(frozen=True)
class Token:
    """A classified lexeme.

    Attributes:
        raw: The token text. Bare digits for numbers, the escape-decoded
            contents (without quotes) for strings, the bare text for
            identifiers and keywords, the single character for operators.
        kind: The kind of token.
    """

    raw: str
    kind: TokenKind


KEYWORDS: dict[str, TokenKind] = {
    "fn": TokenKind.KW_FUNCTION,
    "var": TokenKind.KW_VARIABLE,
}

OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.OPERATOR_PLUS,
    "-": TokenKind.OPERATOR_MINUS,
    "/": TokenKind.OPERATOR_DIVIDE,
    "*": TokenKind.OPERATOR_MULTIPLY,
}


def match_identifier(text: str) -> TokenKind:
    """Return the keyword kind for *text*, or IDENTIFIER if it is not a keyword."""
    return KEYWORDS.get(text, TokenKind.IDENTIFIER)
