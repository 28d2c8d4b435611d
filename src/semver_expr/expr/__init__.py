"""Range expressions: lexer, parser, expression tree and builder helpers."""

from __future__ import annotations

from .composite import eq, gt, gte, lt, lte, neq, not_
from .lexer import Lexer, Token, TokenType
from .nodes import (
    And,
    Equal,
    Expression,
    Greater,
    GreaterOrEqual,
    Less,
    LessOrEqual,
    Not,
    NotEqual,
    Or,
)
from .parser import ExpressionParser, parse

__all__ = [
    # Tree
    "And",
    "Equal",
    "Expression",
    "Greater",
    "GreaterOrEqual",
    "Less",
    "LessOrEqual",
    "Not",
    "NotEqual",
    "Or",
    # Builder helpers
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "neq",
    "not_",
    # Parsing
    "ExpressionParser",
    "Lexer",
    "Token",
    "TokenType",
    "parse",
]
