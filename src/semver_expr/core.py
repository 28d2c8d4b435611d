"""Core entrypoints.

Thin wrappers over the version and expression parsers so host applications
(build tools, dependency resolvers, compatibility checks) have one import
surface. Nothing here performs I/O.
"""

from __future__ import annotations

from .expr.nodes import Expression
from .expr.parser import ExpressionParser
from .models.version import Version
from .parsers.version_parser import parse_valid_semver


def parse_version(text: str, *, strict: bool = False) -> Version:
    """Parse a version string.

    Params:
        text: the version, e.g. ``1.2.3-rc.1+build.5`` or the relaxed ``4.1_alpha``
        strict: reject the relaxed grammar extensions

    Raises ``ValueError`` for empty input and ``ParseError`` (a ``ValueError``
    subclass) for grammar violations.
    """
    return parse_valid_semver(text, strict=strict)


def parse_expression(text: str) -> Expression:
    """Parse a range expression such as ``^1.2.3`` or ``>=1.0.0 & <2.0.0``."""
    return ExpressionParser().parse(text)


def satisfies(version: Version | str, expr: Expression | str, *, strict: bool = False) -> bool:
    """Return whether ``version`` falls inside the range ``expr``."""
    if isinstance(version, str):
        version = parse_version(version, strict=strict)
    return version.satisfies(expr)
