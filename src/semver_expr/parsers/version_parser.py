"""Recursive-descent parser for version strings.

The accepted grammar is SemVer 2.0.0 with a few relaxations so that real-world
version strings still parse:

- minor and patch may be omitted (``1``, ``1.2``);
- a short core may run straight into build metadata (``4.1Final``);
- a ``.`` after the core introduces build metadata (``4.1.50.Final``);
- ``_`` may introduce the pre-release instead of ``-`` (``4.1_alpha``).

With ``strict=True`` none of the relaxations apply.
"""

from __future__ import annotations

import logging

from ..errors import ParseError, UnexpectedCharacterError
from ..models.metadata_version import MetadataVersion
from ..models.normal_version import MAX_NUMBER, NormalVersion
from ..models.version import Version
from ..util.stream import Stream, UnexpectedElementError
from .char_type import CharType

logger = logging.getLogger(__name__)

_IDENTIFIER_CHARS = (CharType.DIGIT, CharType.LETTER, CharType.HYPHEN)


class VersionParser:
    """Parses one input string; create a new instance per input."""

    def __init__(self, text: str, *, strict: bool = False) -> None:
        if text is None:
            raise ValueError("Input string is None")
        if not isinstance(text, str):
            raise TypeError(f"Input must be a string, got {type(text).__name__}")
        if not text:
            raise ValueError("Input string is empty")
        self.strict = strict
        self._chars: Stream[str] = Stream(text)

    # ---- grammar productions ------------------------------------------------------------

    def parse_valid_semver(self) -> Version:
        normal = self.parse_version_core()
        pre_release: MetadataVersion | None = None
        build: MetadataVersion | None = None

        if not self.strict:
            if not (normal.minor_specified and normal.patch_specified):
                if self._check_next(CharType.LETTER, CharType.DIGIT):
                    # short core running into metadata, e.g. 4.1Final
                    build = self.parse_build()

                if not self._check_next(CharType.HYPHEN, CharType.PLUS, CharType.UNDER_SCORE, CharType.EOI):
                    # report the most specific failure
                    if not normal.minor_specified and self._check_next(CharType.SPACE):
                        self._consume(CharType.DOT)
                    self._consume(CharType.DIGIT)

            if self._check_next(CharType.DOT):
                # dotted build, e.g. 4.1.50.Final or 4.5.4.201711221230-r
                self._consume(CharType.DOT)
                build = self.parse_build()

        if self._check_next(CharType.SPACE):
            self._consume(CharType.DIGIT)

        if self.strict:
            following = self._consume(CharType.HYPHEN, CharType.PLUS, CharType.EOI)
        else:
            following = self._consume(CharType.HYPHEN, CharType.PLUS, CharType.UNDER_SCORE, CharType.EOI)
        if CharType.HYPHEN.is_matched_by(following) or CharType.UNDER_SCORE.is_matched_by(following):
            pre_release = self.parse_pre_release()
            following = self._consume(CharType.PLUS, CharType.EOI)
        if CharType.PLUS.is_matched_by(following):
            build = self.parse_build()
        self._consume(CharType.EOI)
        return Version(normal, pre_release, build)

    def parse_version_core(self) -> NormalVersion:
        major = self._version_number()
        if self.strict:
            self._consume(CharType.DOT)
            minor = self._version_number()
            self._consume(CharType.DOT)
            return NormalVersion(major, minor, self._version_number())

        if not self._check_next(CharType.DOT):
            return NormalVersion(major)
        self._consume(CharType.DOT)
        minor = self._version_number()
        if self._check_next(CharType.DOT):
            self._consume(CharType.DOT)
            if self._check_next(CharType.DIGIT):
                return NormalVersion(major, minor, self._version_number())
            if self._check_next(CharType.EOI):
                raise UnexpectedCharacterError(
                    None,
                    self._chars.current_offset,
                    (CharType.DIGIT,),
                    reason="Unexpected end of information",
                )
        return NormalVersion(major, minor)

    def parse_pre_release(self) -> MetadataVersion:
        if self.strict:
            self._ensure_valid_lookahead(*_IDENTIFIER_CHARS)
        else:
            self._ensure_valid_lookahead(*_IDENTIFIER_CHARS, CharType.UNDER_SCORE)
        identifiers = [self._pre_release_identifier()]
        while self._chars.positive_lookahead(CharType.DOT):
            self._consume(CharType.DOT)
            identifiers.append(self._pre_release_identifier())
        return MetadataVersion.from_iterable(identifiers)

    def parse_build(self) -> MetadataVersion:
        self._ensure_valid_lookahead(*_IDENTIFIER_CHARS)
        identifiers = [self._build_identifier()]
        while self._chars.positive_lookahead(CharType.DOT):
            self._consume(CharType.DOT)
            identifiers.append(self._build_identifier())
        return MetadataVersion.from_iterable(identifiers)

    def expect_end(self) -> None:
        """Require that the whole input has been consumed."""
        self._consume(CharType.EOI)

    # ---- identifiers --------------------------------------------------------------------

    def _pre_release_identifier(self) -> str:
        self._check_for_empty_identifier()
        boundary = self._nearest_char_type(CharType.DOT, CharType.PLUS, CharType.EOI)
        if self._chars.positive_lookahead_before(boundary, CharType.LETTER, CharType.HYPHEN):
            return self._alphanumeric_identifier()
        return self._numeric_identifier()

    def _build_identifier(self) -> str:
        self._check_for_empty_identifier()
        boundary = self._nearest_char_type(CharType.DOT, CharType.EOI)
        if self._chars.positive_lookahead_before(boundary, CharType.LETTER, CharType.HYPHEN):
            return self._alphanumeric_identifier()
        # build identifiers may keep leading zeroes
        return self._digits()

    def _alphanumeric_identifier(self) -> str:
        chars = [self._consume(*_IDENTIFIER_CHARS)]
        while self._chars.positive_lookahead(*_IDENTIFIER_CHARS):
            chars.append(self._consume(*_IDENTIFIER_CHARS))
        return "".join(chars)

    def _version_number(self) -> int:
        digits = self._numeric_identifier()
        value = int(digits)
        if value > MAX_NUMBER:
            raise ParseError(f"Numeric identifier '{digits}' exceeds the maximum of {MAX_NUMBER}")
        return value

    def _numeric_identifier(self) -> str:
        self._check_for_leading_zeroes()
        return self._digits()

    def _digits(self) -> str:
        chars = [self._consume(CharType.DIGIT)]
        while self._chars.positive_lookahead(CharType.DIGIT):
            chars.append(self._consume(CharType.DIGIT))
        return "".join(chars)

    # ---- checks -------------------------------------------------------------------------

    def _check_for_empty_identifier(self) -> None:
        lookahead = self._chars.lookahead(1)
        if (
            CharType.DOT.is_matched_by(lookahead)
            or CharType.PLUS.is_matched_by(lookahead)
            or CharType.EOI.is_matched_by(lookahead)
        ):
            raise UnexpectedCharacterError(
                lookahead,
                self._chars.current_offset,
                _IDENTIFIER_CHARS,
                reason="Identifiers MUST NOT be empty",
            )

    def _check_for_leading_zeroes(self) -> None:
        first = self._chars.lookahead(1)
        second = self._chars.lookahead(2)
        if first == "0" and CharType.DIGIT.is_matched_by(second):
            raise ParseError("Numeric identifier MUST NOT contain leading zeroes")

    def _ensure_valid_lookahead(self, *expected: CharType) -> None:
        if not self._chars.positive_lookahead(*expected):
            raise UnexpectedCharacterError(
                self._chars.lookahead(1),
                self._chars.current_offset,
                expected,
            )

    def _nearest_char_type(self, *types: CharType) -> CharType:
        for char in self._chars:
            for char_type in types:
                if char_type.is_matched_by(char):
                    return char_type
        return CharType.EOI

    def _check_next(self, *expected: CharType) -> bool:
        return self._chars.positive_lookahead(*expected)

    def _consume(self, *expected: CharType) -> str | None:
        try:
            return self._chars.consume(*expected)
        except UnexpectedElementError as exc:
            raise UnexpectedCharacterError(
                exc.unexpected_element,
                exc.position,
                exc.expected_element_types,
            ) from None


def parse_valid_semver(text: str, *, strict: bool = False) -> Version:
    """Parse a full version string such as ``1.0.0-rc.1+build.5``."""
    version = VersionParser(text, strict=strict).parse_valid_semver()
    logger.debug("Parsed version %r from %r", version, text)
    return version


def parse_version_core(text: str, *, strict: bool = False) -> NormalVersion:
    parser = VersionParser(text, strict=strict)
    normal = parser.parse_version_core()
    parser.expect_end()
    return normal


def parse_pre_release(text: str) -> MetadataVersion:
    """Parse the identifiers that follow ``-``; the whole of ``text`` must match."""
    parser = VersionParser(text)
    pre_release = parser.parse_pre_release()
    parser.expect_end()
    return pre_release


def parse_build(text: str) -> MetadataVersion:
    parser = VersionParser(text)
    build = parser.parse_build()
    parser.expect_end()
    return build
