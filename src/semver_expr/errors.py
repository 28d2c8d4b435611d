"""Exception types raised by the version and range-expression parsers.

Parse failures propagate to the caller untouched; nothing in the package
catches or logs them. ``ParseError`` subclasses ``ValueError`` so callers that
only care about "bad input" can catch that, while the structured subclasses
expose the culprit for precise reporting.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .parsers.char_type import CharType

if TYPE_CHECKING:
    from .expr.lexer import Token, TokenType


class ParseError(ValueError):
    """Raised when input does not follow the grammar."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnexpectedCharacterError(ParseError):
    """A character (or end of input) that the version grammar does not allow."""

    def __init__(
        self,
        unexpected_character: str | None,
        position: int,
        expected_char_types: Sequence[CharType],
        reason: str | None = None,
    ) -> None:
        self.unexpected_character = unexpected_character
        self.position = position
        self.expected_char_types = tuple(expected_char_types)
        self.reason = reason
        super().__init__(self._render())

    def _render(self) -> str:
        char_type = CharType.for_character(self.unexpected_character)
        shown = "" if self.unexpected_character is None else self.unexpected_character
        message = f"Unexpected character '{char_type.name}({shown})' at position '{self.position}'"
        if self.expected_char_types:
            names = ", ".join(t.name for t in self.expected_char_types)
            message += f", expecting '[{names}]'"
        if self.reason:
            return f"{self.reason} ({message})"
        return message


class UnexpectedTokenError(ParseError):
    """A token that the range-expression grammar does not allow at its position."""

    def __init__(self, unexpected_token: Token, expected_token_types: Sequence[TokenType]) -> None:
        self.unexpected_token = unexpected_token
        self.expected_token_types = tuple(expected_token_types)
        message = f"Unexpected token '{unexpected_token}'"
        if self.expected_token_types:
            names = ", ".join(t.name for t in self.expected_token_types)
            message += f", expecting '[{names}]'"
        super().__init__(message)


class LexerError(ParseError):
    """Raised when part of a range expression cannot be tokenized."""

    def __init__(self, expr: str) -> None:
        self.expr = expr
        super().__init__(f"Illegal character near '{expr}'")


class MetadataIncrementError(RuntimeError):
    """Raised when incrementing a pre-release or build metadata that is absent."""
