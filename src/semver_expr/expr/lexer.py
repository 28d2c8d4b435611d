"""Regex-driven tokenizer for range expressions."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from ..errors import LexerError
from ..util.stream import Stream

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token kinds, in the order their patterns are tried.

    ``>``, ``<`` and ``!`` use negative lookahead so they never swallow the
    first character of ``>=``, ``<=`` or ``!=``.
    """

    NUMERIC = r"0|[1-9][0-9]*"
    DOT = r"\."
    HYPHEN = r"-"
    EQUAL = r"="
    NOT_EQUAL = r"!="
    GREATER = r">(?!=)"
    GREATER_EQUAL = r">="
    LESS = r"<(?!=)"
    LESS_EQUAL = r"<="
    TILDE = r"~"
    WILDCARD = r"[*xX]"
    CARET = r"\^"
    AND = r"&"
    OR = r"\|"
    NOT = r"!(?!=)"
    LEFT_PAREN = r"\("
    RIGHT_PAREN = r"\)"
    WHITESPACE = r"\s+"
    EOI = None

    def is_matched_by(self, token: Token | None) -> bool:
        return token is not None and token.type is self

    def __str__(self) -> str:
        return self.name


_PATTERNS = [
    (token_type, re.compile(token_type.value))
    for token_type in TokenType
    if token_type.value is not None
]


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    position: int

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme}) at position {self.position}"


class Lexer:
    def tokenize(self, text: str) -> Stream[Token]:
        """Split ``text`` into tokens, dropping whitespace and appending ``EOI``."""
        tokens: list[Token] = []
        position = 0
        while position < len(text):
            for token_type, pattern in _PATTERNS:
                match = pattern.match(text, position)
                if match is not None and match.end() > position:
                    if token_type is not TokenType.WHITESPACE:
                        tokens.append(Token(token_type, match.group(), position))
                    position = match.end()
                    break
            else:
                raise LexerError(text[position:])
        tokens.append(Token(TokenType.EOI, "", position))
        logger.debug("Tokenized %r into %d tokens", text, len(tokens))
        return Stream(tokens)
