from __future__ import annotations

import logging

import pytest

import semver_expr
from semver_expr import (
    Expression,
    ParseError,
    UnexpectedCharacterError,
    Version,
    parse_expression,
    parse_version,
    satisfies,
)


def test_parse_version() -> None:
    version = parse_version("1.2.3-rc.1+build.5")

    assert isinstance(version, Version)
    assert str(version) == "1.2.3-rc.1+build.5"


def test_parse_version_strict_keyword() -> None:
    assert str(parse_version("4.1_alpha")) == "4.1-alpha"

    with pytest.raises(UnexpectedCharacterError):
        parse_version("4.1_alpha", strict=True)
    with pytest.raises(UnexpectedCharacterError):
        parse_version("4.1", strict=True)


def test_parse_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        parse_version("not-a-version")
    with pytest.raises(ParseError):
        parse_expression(">= &")


def test_parse_expression() -> None:
    expr = parse_expression("^1.2.3")

    assert isinstance(expr, Expression)
    assert expr.interpret("1.9.9")
    assert not expr.interpret("2.0.0")


@pytest.mark.parametrize(
    ("version", "expr", "expected"),
    [
        ("1.5.0", ">=1.0.0 & <2.0.0", True),
        (Version.parse("1.3.0"), "~1.2.3", False),
        ("1.9.9", parse_expression("1.*"), True),
        ("2.0.0", parse_expression("1.*"), False),
    ],
)
def test_satisfies(version: Version | str, expr: Expression | str, expected: bool) -> None:
    assert satisfies(version, expr) is expected


def test_parsing_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="semver_expr"):
        parse_version("1.0.0")
        parse_expression(">=1.0.0")

    messages = [record.getMessage() for record in caplog.records]
    assert "Parsed version Version('1.0.0') from '1.0.0'" in messages
    assert "Parsed expression '>=1.0.0'" in messages


def test_package_exports() -> None:
    assert semver_expr.__version__ == "2.4.0"
    for name in semver_expr.__all__:
        assert hasattr(semver_expr, name)


def test_satisfies_strict_keyword() -> None:
    assert satisfies("1.2", "^1")
    with pytest.raises(UnexpectedCharacterError):
        satisfies("1.2", "^1", strict=True)
