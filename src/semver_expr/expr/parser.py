"""Recursive-descent parser for range expressions.

Grammar::

    semver-expr  ::= primary ( ("&" | "|") primary )*
    primary      ::= "(" semver-expr ")" | "!" "(" semver-expr ")" | range
    range        ::= tilde | caret | wildcard | hyphen | partial | comparison
    comparison   ::= [ "=" | "!=" | ">" | ">=" | "<" | "<=" ] version
    version      ::= major [ "." minor [ "." patch ] ]

``&`` and ``|`` share one precedence level and fold left to right, so
``a & b | c`` means ``(a & b) | c``. Use parentheses to group otherwise.

The range sugar desugars into comparisons:

    ``~1.2.3``         >=1.2.3 & <1.3.0
    ``^0.2.3``         >=0.2.3 & <0.3.0
    ``1.*`` / ``1``    >=1.0.0 & <2.0.0
    ``1.0 - 2.0``      >=1.0.0 & <=2.0.0
"""

from __future__ import annotations

import logging

from ..errors import ParseError, UnexpectedTokenError
from ..models.normal_version import MAX_NUMBER
from ..models.version import Version
from ..util.stream import Stream, UnexpectedElementError
from .composite import eq, gt, gte, lt, lte, neq, not_
from .lexer import Lexer, Token, TokenType
from .nodes import Expression

logger = logging.getLogger(__name__)

# how far ahead a bare "1" or "1.2" is recognised as a partial version range
PARTIAL_RANGE_HORIZON = 5

_VERSION_TOKENS = frozenset({TokenType.NUMERIC, TokenType.DOT})
_NON_VERSION_TOKENS = tuple(t for t in TokenType if t not in _VERSION_TOKENS)


class ExpressionParser:
    def __init__(self, lexer: Lexer | None = None) -> None:
        self.lexer = lexer or Lexer()
        self._tokens: Stream[Token] = Stream(())

    def parse(self, text: str) -> Expression:
        if text is None:
            raise ValueError("Expression is None")
        if not isinstance(text, str):
            raise TypeError(f"Expression must be a string, got {type(text).__name__}")
        if not text:
            raise ValueError("Expression is empty")
        self._tokens = self.lexer.tokenize(text)
        expr = self._parse_semver_expression()
        self._consume(TokenType.EOI)
        logger.debug("Parsed expression %r", text)
        return expr

    # ---- productions --------------------------------------------------------------------

    def _parse_semver_expression(self) -> Expression:
        expr = self._parse_primary()
        while True:
            if self._tokens.positive_lookahead(TokenType.AND):
                self._tokens.consume()
                expr = expr.and_(self._parse_primary())
            elif self._tokens.positive_lookahead(TokenType.OR):
                self._tokens.consume()
                expr = expr.or_(self._parse_primary())
            else:
                return expr

    def _parse_primary(self) -> Expression:
        if self._tokens.positive_lookahead(TokenType.NOT):
            self._tokens.consume()
            self._consume(TokenType.LEFT_PAREN)
            expr = not_(self._parse_semver_expression())
            self._consume(TokenType.RIGHT_PAREN)
            return expr
        if self._tokens.positive_lookahead(TokenType.LEFT_PAREN):
            self._consume(TokenType.LEFT_PAREN)
            expr = self._parse_semver_expression()
            self._consume(TokenType.RIGHT_PAREN)
            return expr
        return self._parse_range()

    def _parse_range(self) -> Expression:
        if self._tokens.positive_lookahead(TokenType.TILDE):
            return self._parse_tilde_range()
        if self._tokens.positive_lookahead(TokenType.CARET):
            return self._parse_caret_range()
        if self._is_version_followed_by(TokenType.WILDCARD):
            return self._parse_wildcard_range()
        if self._is_version_followed_by(TokenType.HYPHEN):
            return self._parse_hyphen_range()
        if self._is_partial_version_range():
            return self._parse_partial_version_range()
        return self._parse_comparison_range()

    def _parse_tilde_range(self) -> Expression:
        self._consume(TokenType.TILDE)
        major = self._number()
        if not self._tokens.positive_lookahead(TokenType.DOT):
            return gte(_version_for(major)).and_(lt(_version_for(major + 1)))
        self._consume(TokenType.DOT)
        minor = self._number()
        if not self._tokens.positive_lookahead(TokenType.DOT):
            return gte(_version_for(major, minor)).and_(lt(_version_for(major, minor + 1)))
        self._consume(TokenType.DOT)
        patch = self._number()
        return gte(_version_for(major, minor, patch)).and_(lt(_version_for(major, minor + 1)))

    def _parse_caret_range(self) -> Expression:
        self._consume(TokenType.CARET)
        major = self._number()
        if not self._tokens.positive_lookahead(TokenType.DOT):
            return gte(_version_for(major)).and_(lt(_version_for(major + 1)))
        self._consume(TokenType.DOT)
        minor = self._number()
        if not self._tokens.positive_lookahead(TokenType.DOT):
            lower = _version_for(major, minor)
            upper = _version_for(major + 1) if major > 0 else _version_for(major, minor + 1)
            return gte(lower).and_(lt(upper))
        self._consume(TokenType.DOT)
        patch = self._number()
        version = _version_for(major, minor, patch)
        if major > 0:
            return gte(version).and_(lt(_version_for(major + 1)))
        if minor > 0:
            return gte(version).and_(lt(_version_for(major, minor + 1)))
        if patch > 0:
            return gte(version).and_(lt(_version_for(major, minor, patch + 1)))
        return eq(version)

    def _parse_wildcard_range(self) -> Expression:
        if self._tokens.positive_lookahead(TokenType.WILDCARD):
            self._tokens.consume()
            return gte(_version_for(0, 0, 0))
        major = self._number()
        self._consume(TokenType.DOT)
        if self._tokens.positive_lookahead(TokenType.WILDCARD):
            self._tokens.consume()
            return gte(_version_for(major)).and_(lt(_version_for(major + 1)))
        minor = self._number()
        self._consume(TokenType.DOT)
        self._consume(TokenType.WILDCARD)
        return gte(_version_for(major, minor)).and_(lt(_version_for(major, minor + 1)))

    def _parse_hyphen_range(self) -> Expression:
        lower = gte(self._parse_version())
        self._consume(TokenType.HYPHEN)
        return lower.and_(lte(self._parse_version()))

    def _parse_partial_version_range(self) -> Expression:
        major = self._number()
        if not self._tokens.positive_lookahead(TokenType.DOT):
            return gte(_version_for(major)).and_(lt(_version_for(major + 1)))
        self._consume(TokenType.DOT)
        minor = self._number()
        return gte(_version_for(major, minor)).and_(lt(_version_for(major, minor + 1)))

    def _parse_comparison_range(self) -> Expression:
        token = self._tokens.lookahead()
        builder = _COMPARISONS.get(token.type if token is not None else None)
        if builder is None:
            return eq(self._parse_version())
        self._tokens.consume()
        return builder(self._parse_version())

    def _parse_version(self) -> Version:
        major = self._number()
        minor = 0
        if self._tokens.positive_lookahead(TokenType.DOT):
            self._tokens.consume()
            minor = self._number()
        patch = 0
        if self._tokens.positive_lookahead(TokenType.DOT):
            self._tokens.consume()
            patch = self._number()
        return _version_for(major, minor, patch)

    # ---- lookahead ----------------------------------------------------------------------

    def _is_version_followed_by(self, token_type: TokenType) -> bool:
        """Skip the run of NUMERIC/DOT tokens and test what comes right after it."""
        following = None
        for token in self._tokens:
            following = token
            if token.type not in _VERSION_TOKENS:
                break
        return token_type.is_matched_by(following)

    def _is_partial_version_range(self) -> bool:
        if not self._tokens.positive_lookahead(TokenType.NUMERIC):
            return False
        return self._tokens.positive_lookahead_until(PARTIAL_RANGE_HORIZON, *_NON_VERSION_TOKENS)

    # ---- helpers ------------------------------------------------------------------------

    def _number(self) -> int:
        token = self._consume(TokenType.NUMERIC)
        value = int(token.lexeme)
        if value > MAX_NUMBER:
            raise ParseError(f"Numeric token '{token}' exceeds the maximum of {MAX_NUMBER}")
        return value

    def _consume(self, *expected: TokenType) -> Token:
        try:
            token = self._tokens.consume(*expected)
        except UnexpectedElementError as exc:
            raise UnexpectedTokenError(exc.unexpected_element, exc.expected_element_types) from None
        return token


_COMPARISONS = {
    TokenType.EQUAL: eq,
    TokenType.NOT_EQUAL: neq,
    TokenType.GREATER: gt,
    TokenType.GREATER_EQUAL: gte,
    TokenType.LESS: lt,
    TokenType.LESS_EQUAL: lte,
}


def _version_for(major: int, minor: int = 0, patch: int = 0) -> Version:
    # upper bounds are derived by adding one, which may overflow
    try:
        return Version.of(major, minor, patch)
    except ValueError as exc:
        raise ParseError(f"Range bound out of range: {exc}") from exc


def parse(text: str) -> Expression:
    """Parse a range expression such as ``>=1.0.0 & <2.0.0``."""
    return ExpressionParser().parse(text)
