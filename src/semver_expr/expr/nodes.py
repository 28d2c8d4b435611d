"""Expression tree evaluated against candidate versions.

Every node is an immutable value. Combining nodes (``a.and_(b)``, ``a & b``,
``a | b``, ``~a``) builds a new tree and leaves the operands untouched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..models.version import Version


class Expression(ABC):
    @abstractmethod
    def interpret(self, version: Version | str) -> bool:
        """Return whether ``version`` satisfies this expression."""

    def __call__(self, version: Version | str) -> bool:
        return self.interpret(version)

    def and_(self, other: Expression) -> Expression:
        return And(self, other)

    def or_(self, other: Expression) -> Expression:
        return Or(self, other)

    def __and__(self, other: Expression) -> Expression:
        if not isinstance(other, Expression):
            return NotImplemented
        return And(self, other)

    def __or__(self, other: Expression) -> Expression:
        if not isinstance(other, Expression):
            return NotImplemented
        return Or(self, other)

    def __invert__(self) -> Expression:
        return Not(self)


def _as_version(version: Version | str) -> Version:
    if isinstance(version, Version):
        return version
    return Version.parse(version)


@dataclass(frozen=True)
class Equal(Expression):
    version: Version

    def interpret(self, version: Version | str) -> bool:
        return _as_version(version) == self.version


@dataclass(frozen=True)
class NotEqual(Expression):
    version: Version

    def interpret(self, version: Version | str) -> bool:
        return _as_version(version) != self.version


@dataclass(frozen=True)
class Greater(Expression):
    version: Version

    def interpret(self, version: Version | str) -> bool:
        return _as_version(version).greater_than(self.version)


@dataclass(frozen=True)
class GreaterOrEqual(Expression):
    version: Version

    def interpret(self, version: Version | str) -> bool:
        return _as_version(version).greater_than_or_equal_to(self.version)


@dataclass(frozen=True)
class Less(Expression):
    version: Version

    def interpret(self, version: Version | str) -> bool:
        return _as_version(version).less_than(self.version)


@dataclass(frozen=True)
class LessOrEqual(Expression):
    version: Version

    def interpret(self, version: Version | str) -> bool:
        return _as_version(version).less_than_or_equal_to(self.version)


@dataclass(frozen=True)
class And(Expression):
    left: Expression
    right: Expression

    def interpret(self, version: Version | str) -> bool:
        version = _as_version(version)
        return self.left.interpret(version) and self.right.interpret(version)


@dataclass(frozen=True)
class Or(Expression):
    left: Expression
    right: Expression

    def interpret(self, version: Version | str) -> bool:
        version = _as_version(version)
        return self.left.interpret(version) or self.right.interpret(version)


@dataclass(frozen=True)
class Not(Expression):
    expr: Expression

    def interpret(self, version: Version | str) -> bool:
        return not self.expr.interpret(_as_version(version))
