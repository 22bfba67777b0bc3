# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token kinds and the immutable token record produced by the scanner."""

import enum
from dataclasses import dataclass
from types import MappingProxyType

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token kinds produced by the Lox scanner."""

    # Single-character punctuation
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two character operators
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FOR = "for"
    FUN = "fun"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    # End of input
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source line.

    Attributes:
        kind: The kind of token.
        lexeme: The exact source text of the token (empty for EOF).
        literal: Decoded value: a float for NUMBER, the unquoted text for
            STRING, None for every other kind.
        line: 1-based line number where the lexeme starts.
    """

    kind: TokenType
    lexeme: str
    literal: float | str | None
    line: int

    def __str__(self) -> str:
        literal = "" if self.literal is None else str(self.literal)
        return f"{self.kind.name} {self.lexeme} {literal}"


KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)
