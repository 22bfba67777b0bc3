# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model and scanner for Lox source text."""

from loxscan.scanner.scanner import (
    UNEXPECTED_CHARACTER,
    UNTERMINATED_BLOCK_COMMENT,
    UNTERMINATED_STRING,
    LexicalError,
    Scanner,
    scan,
)
from loxscan.scanner.tokens import KEYWORDS, Token, TokenType

__all__ = [
    "KEYWORDS",
    "UNEXPECTED_CHARACTER",
    "UNTERMINATED_BLOCK_COMMENT",
    "UNTERMINATED_STRING",
    "LexicalError",
    "Scanner",
    "Token",
    "TokenType",
    "scan",
]
