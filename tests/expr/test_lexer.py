from __future__ import annotations

import pytest

from semver_expr.errors import LexerError
from semver_expr.expr.lexer import Lexer, Token, TokenType


def _types(text: str) -> list[TokenType]:
    return [token.type for token in Lexer().tokenize(text)]


def test_tokenizes_every_token_type() -> None:
    assert _types("1.0-=!=>>=<<=~*^&|!()") == [
        TokenType.NUMERIC,
        TokenType.DOT,
        TokenType.NUMERIC,
        TokenType.HYPHEN,
        TokenType.EQUAL,
        TokenType.NOT_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.TILDE,
        TokenType.WILDCARD,
        TokenType.CARET,
        TokenType.AND,
        TokenType.OR,
        TokenType.NOT,
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.EOI,
    ]


def test_drops_whitespace_and_records_positions() -> None:
    tokens = Lexer().tokenize(">= 1.10 ").remaining()

    assert tokens == [
        Token(TokenType.GREATER_EQUAL, ">=", 0),
        Token(TokenType.NUMERIC, "1", 3),
        Token(TokenType.DOT, ".", 4),
        Token(TokenType.NUMERIC, "10", 5),
        Token(TokenType.EOI, "", 8),
    ]


@pytest.mark.parametrize("text", ["*", "x", "X"])
def test_wildcards(text: str) -> None:
    assert _types(text) == [TokenType.WILDCARD, TokenType.EOI]


def test_leading_zero_splits_numeric_tokens() -> None:
    assert [t.lexeme for t in Lexer().tokenize("01")] == ["0", "1", ""]


@pytest.mark.parametrize(
    ("text", "residual"),
    [
        ("1.0.0 @ 2", "@ 2"),
        ("1.0.0-alpha", "alpha"),
        ("#", "#"),
    ],
)
def test_rejects_illegal_characters(text: str, residual: str) -> None:
    with pytest.raises(LexerError) as excinfo:
        Lexer().tokenize(text)

    assert excinfo.value.expr == residual
    assert str(excinfo.value) == f"Illegal character near '{residual}'"


def test_token_str() -> None:
    assert str(Token(TokenType.NUMERIC, "12", 3)) == "NUMERIC(12) at position 3"


def test_token_type_matching() -> None:
    token = Token(TokenType.AND, "&", 0)

    assert TokenType.AND.is_matched_by(token)
    assert not TokenType.OR.is_matched_by(token)
    assert not TokenType.EOI.is_matched_by(None)
