# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Lox source text.

Converts raw source text into a sequence of tokens for a later parsing stage.
Lexical problems never abort the scan: they are collected as LexicalError
records and optionally forwarded to a caller-supplied callback.
"""

import string
from collections.abc import Callable
from dataclasses import dataclass

from loxscan.scanner.tokens import KEYWORDS, Token, TokenType

# ###############
# Public Interface
# ###############

UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."
UNTERMINATED_BLOCK_COMMENT = "Unterminated block comment."


@dataclass(frozen=True)
class LexicalError:
    """A lexical problem detected while scanning.

    Attributes:
        line: 1-based line number where the problem was detected.
        message: Human-readable description of the problem.
    """

    line: int
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


ErrorCallback = Callable[[LexicalError], None]


def scan(source: str, on_error: ErrorCallback | None = None) -> list[Token]:
    """Scan Lox source text into a sequence of tokens.

    Whitespace and comments are consumed and not included in the output.
    Lexical errors are reported through ``on_error`` and scanning continues
    with the rest of the input.

    Args:
        source: The full text of one source unit (a file or a REPL line).
        on_error: Optional callback invoked once per lexical error, in order.

    Returns:
        A list of Token objects ending with a single EOF token.
    """
    return Scanner(source, on_error).scan_tokens()


class Scanner:
    """Single-use scanner state machine for one source unit.

    Attributes:
        errors: Every lexical error signalled so far, in source order.
    """

    def __init__(self, source: str, on_error: ErrorCallback | None = None) -> None:
        self._source = source
        self._on_error = on_error
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self.errors: list[LexicalError] = []

    def scan_tokens(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while not self._is_at_end():
            # Beginning of the next lexeme.
            self._start = self._current
            self._start_line = self._line
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        """Return the current character, or '' at end of input."""
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    # ------------------------------------------------------------------
    # Token emission and error signalling
    # ------------------------------------------------------------------

    def _add_token(self, kind: TokenType, literal: float | str | None = None) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(kind, lexeme, literal, self._start_line))

    def _error(self, message: str) -> None:
        error = LexicalError(self._line, message)
        self.errors.append(error)
        if self._on_error is not None:
            self._on_error(error)

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Consume one character and dispatch on its class."""
        ch = self._advance()

        if ch in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[ch])
        elif ch in _OPERATOR_TOKENS:
            one_char, two_char = _OPERATOR_TOKENS[ch]
            self._add_token(two_char if self._match("=") else one_char)
        elif ch == "/":
            if self._match("/"):
                self._skip_line_comment()
            elif self._match("*"):
                self._skip_block_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif ch in " \r\t":
            pass
        elif ch == "\n":
            self._line += 1
        elif ch == '"':
            self._scan_string()
        elif ch in _DIGITS:
            self._scan_number()
        elif ch in _ALPHA:
            self._scan_identifier_or_keyword()
        else:
            self._error(UNEXPECTED_CHARACTER)

    # ------------------------------------------------------------------
    # Comment skipping
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        """Consume up to, but not including, the next newline."""
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    def _skip_block_comment(self) -> None:
        """Consume through the first '*/'. Block comments do not nest."""
        while not self._is_at_end():
            if self._peek() == "*" and self._peek_next() == "/":
                self._advance()  # *
                self._advance()  # /
                return
            if self._peek() == "\n":
                self._line += 1
            self._advance()
        self._error(UNTERMINATED_BLOCK_COMMENT)

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal; backslashes are not escapes."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._error(UNTERMINATED_STRING)
            return

        self._advance()  # closing "
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _scan_number(self) -> None:
        """Scan digits with an optional fractional part.

        The '.' belongs to the number only when a digit follows it.
        """
        while self._peek() in _DIGITS:
            self._advance()

        if self._peek() == "." and self._peek_next() in _DIGITS:
            self._advance()  # consume the '.'
            while self._peek() in _DIGITS:
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._source[self._start : self._current]))

    def _scan_identifier_or_keyword(self) -> None:
        """Scan an identifier and map it to a keyword kind if it is reserved."""
        while self._peek() in _ALPHA_NUMERIC:
            self._advance()
        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


# ################
# Implementation
# ################

_DIGITS = frozenset(string.digits)
_ALPHA = frozenset(string.ascii_letters + "_")
_ALPHA_NUMERIC = _DIGITS | _ALPHA

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Maps an operator prefix to its (one-character, two-character '=' form) kinds.
_OPERATOR_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}
