"""semver-expr: version parsing, precedence and range expressions.

This package parses version strings (SemVer plus a few relaxations seen in the
wild), orders them by precedence and evaluates range expressions such as
``^1.2.3``, ``~1.2`` or ``>=1.0.0 & <2.0.0`` against them.
"""

import logging

from .core import parse_expression, parse_version, satisfies
from .errors import (
    LexerError,
    MetadataIncrementError,
    ParseError,
    UnexpectedCharacterError,
    UnexpectedTokenError,
)
from .expr import Expression, eq, gt, gte, lt, lte, neq, not_
from .models import BUILD_AWARE_ORDER, Builder, MetadataVersion, NormalVersion, Version, compare_with_builds
from .validators.version_document import DocumentError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "2.4.0"

__all__ = [
    # Entry points
    "parse_expression",
    "parse_version",
    "satisfies",
    # Values
    "BUILD_AWARE_ORDER",
    "Builder",
    "MetadataVersion",
    "NormalVersion",
    "Version",
    "compare_with_builds",
    # Expressions
    "Expression",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "neq",
    "not_",
    # Errors
    "DocumentError",
    "LexerError",
    "MetadataIncrementError",
    "ParseError",
    "UnexpectedCharacterError",
    "UnexpectedTokenError",
]
