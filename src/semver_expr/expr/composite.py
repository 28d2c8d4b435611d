"""Functional helpers for building expressions in code.

    >>> from semver_expr.expr.composite import gte, lt
    >>> gte("1.0.0").and_(lt("2.0.0")).interpret("1.5.0")
    True

Each helper accepts a ``Version`` or its string form and returns a fresh
expression node, so partial expressions can be shared and reused freely.
"""

from __future__ import annotations

from ..models.version import Version
from .nodes import Equal, Expression, Greater, GreaterOrEqual, Less, LessOrEqual, Not, NotEqual


def _version(version: Version | str) -> Version:
    if isinstance(version, Version):
        return version
    return Version.parse(version)


def eq(version: Version | str) -> Expression:
    return Equal(_version(version))


def neq(version: Version | str) -> Expression:
    return NotEqual(_version(version))


def gt(version: Version | str) -> Expression:
    return Greater(_version(version))


def gte(version: Version | str) -> Expression:
    return GreaterOrEqual(_version(version))


def lt(version: Version | str) -> Expression:
    return Less(_version(version))


def lte(version: Version | str) -> Expression:
    return LessOrEqual(_version(version))


def not_(expr: Expression) -> Expression:
    return Not(expr)
