# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""loxscan: lexical scanner for the Lox scripting language."""

from loxscan.scanner import LexicalError, Scanner, Token, TokenType, scan

__all__ = [
    "LexicalError",
    "Scanner",
    "Token",
    "TokenType",
    "scan",
]
