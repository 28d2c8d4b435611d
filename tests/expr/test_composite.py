from __future__ import annotations

from semver_expr.expr.composite import eq, gt, gte, lt, lte, neq, not_
from semver_expr.expr.nodes import And, Equal, GreaterOrEqual, Less, Or
from semver_expr.models import Version


def test_helpers_accept_strings_and_versions() -> None:
    assert eq("1.2.3") == Equal(Version.parse("1.2.3"))
    assert eq(Version.parse("1.2.3")) == Equal(Version.parse("1.2.3"))


def test_build_range() -> None:
    expr = gte("1.0.0").and_(lt("2.0.0"))

    assert expr == And(GreaterOrEqual(Version.parse("1.0.0")), Less(Version.parse("2.0.0")))
    assert expr.interpret("1.5.0")
    assert not expr.interpret("2.0.0")


def test_combinators_do_not_mutate_operands() -> None:
    base = gte("1.0.0")
    narrowed = base.and_(lt("1.5.0"))
    widened = base.or_(eq("0.9.0"))

    assert base == gte("1.0.0")
    assert isinstance(widened, Or)
    assert not narrowed.interpret("1.6.0")
    assert widened.interpret("1.6.0")
    assert widened.interpret("0.9.0")


def test_remaining_helpers() -> None:
    assert neq("1.0.0").interpret("1.0.1")
    assert gt("1.0.0").interpret("1.0.1")
    assert lte("1.0.0").interpret("1.0.0")
    assert not_(eq("1.0.0")).interpret("2.0.0")
    assert not not_(eq("1.0.0")).interpret("1.0.0")
