# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the token model."""

import dataclasses

import pytest

from loxscan.scanner import Token, TokenType


def test_token_is_immutable() -> None:
    token = Token(TokenType.IDENTIFIER, "x", None, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.line = 2  # type: ignore[misc]


def test_tokens_compare_by_value() -> None:
    assert Token(TokenType.NUMBER, "1", 1.0, 3) == Token(TokenType.NUMBER, "1", 1.0, 3)


def test_str_without_literal() -> None:
    assert str(Token(TokenType.LEFT_PAREN, "(", None, 1)) == "LEFT_PAREN ( "


def test_str_with_string_literal() -> None:
    assert str(Token(TokenType.STRING, '"hi"', "hi", 1)) == 'STRING "hi" hi'


def test_str_with_number_literal() -> None:
    assert str(Token(TokenType.NUMBER, "2.5", 2.5, 1)) == "NUMBER 2.5 2.5"


def test_str_eof() -> None:
    assert str(Token(TokenType.EOF, "", None, 7)) == "EOF  "


def test_fixed_token_values_are_lexemes() -> None:
    assert TokenType.BANG_EQUAL.value == "!="
    assert TokenType.WHILE.value == "while"
