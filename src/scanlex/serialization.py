# Copyright 2026 Scanlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Text and JSON renderings of a token sequence.

The JSON form is compact and versioned so consumers can detect schema changes.
"""

from __future__ import annotations

import json
from typing import Any

from scanlex.lexer.tokens import Token

# ###############
# Public Interface
# ###############

TOKENS_FORMAT_VERSION = "1"


def format_tokens(tokens: list[Token]) -> str:
    """Render tokens one per line as ``<Kind> <raw>``, with raw shown as a Python literal."""
    return "\n".join(f"{token.kind.value} {token.raw!r}" for token in tokens)


def serialize(tokens: list[Token]) -> str:
    """Serialize tokens to a compact JSON string."""
    obj = {
        "v": TOKENS_FORMAT_VERSION,
        "tokens": [_token_to_dict(token) for token in tokens],
    }
    return json.dumps(obj, separators=(",", ":"))


# ################
# Implementation
# ################


def _token_to_dict(token: Token) -> dict[str, Any]:
    return {"kind": token.kind.value, "raw": token.raw}

