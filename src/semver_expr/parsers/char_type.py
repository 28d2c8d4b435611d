"""Character classes recognised by the version grammar."""

from __future__ import annotations

from enum import Enum


class CharType(Enum):
    """Character classes; ``None`` stands for the end of input."""

    DIGIT = "digit"
    LETTER = "letter"
    SPACE = "space"
    DOT = "dot"
    HYPHEN = "hyphen"
    PLUS = "plus"
    UNDER_SCORE = "underscore"
    EOI = "eoi"
    ILLEGAL = "illegal"

    def is_matched_by(self, char: str | None) -> bool:
        if self is CharType.EOI:
            return char is None
        if char is None:
            return False
        if self is CharType.ILLEGAL:
            return all(not t.is_matched_by(char) for t in CharType if t is not CharType.ILLEGAL)
        if self is CharType.DIGIT:
            return "0" <= char <= "9"
        if self is CharType.LETTER:
            return "a" <= char <= "z" or "A" <= char <= "Z"
        return char == _LITERALS[self]

    @classmethod
    def for_character(cls, char: str | None) -> CharType:
        for char_type in cls:
            if char_type.is_matched_by(char):
                return char_type
        return cls.ILLEGAL

    def __str__(self) -> str:
        return self.name


_LITERALS = {
    CharType.SPACE: " ",
    CharType.DOT: ".",
    CharType.HYPHEN: "-",
    CharType.PLUS: "+",
    CharType.UNDER_SCORE: "_",
}
