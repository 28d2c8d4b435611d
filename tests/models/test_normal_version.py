from __future__ import annotations

import pytest

from semver_expr.models import NormalVersion


@pytest.mark.parametrize(
    ("normal", "expected"),
    [
        (NormalVersion(1), "1"),
        (NormalVersion(1, 2), "1.2"),
        (NormalVersion(1, 2, 0), "1.2.0"),
        (NormalVersion(1, 0, 0), "1.0.0"),
        (NormalVersion(1, 2, 3), "1.2.3"),
    ],
)
def test_renders_only_specified_components(normal: NormalVersion, expected: str) -> None:
    assert str(normal) == expected


def test_unspecified_components_are_zero() -> None:
    normal = NormalVersion(7)

    assert (normal.major, normal.minor, normal.patch) == (7, 0, 0)
    assert not normal.minor_specified
    assert not normal.patch_specified


def test_increments() -> None:
    normal = NormalVersion(1, 2, 3)

    assert str(normal.increment_major()) == "2.0"
    assert str(normal.increment_minor()) == "1.3"
    assert str(normal.increment_patch()) == "1.2.4"
    assert str(NormalVersion(1, 0, 0).increment_minor()) == "1.1"
    assert str(normal) == "1.2.3"


def test_equality_ignores_specified_flags() -> None:
    assert NormalVersion(1) == NormalVersion(1, 0, 0)
    assert hash(NormalVersion(1, 2)) == hash(NormalVersion(1, 2, 0))


def test_ordering() -> None:
    assert NormalVersion(1, 2, 3).compare_to(NormalVersion(1, 2, 3)) == 0
    assert NormalVersion(1, 2, 3).compare_to(NormalVersion(1, 3, 0)) == -1
    assert NormalVersion(2).compare_to(NormalVersion(1, 9, 9)) == 1
    assert NormalVersion(1, 10) > NormalVersion(1, 9)


@pytest.mark.parametrize("args", [(-1,), (1, -1), (1, 0, -1)])
def test_rejects_negative_numbers(args: tuple[int, ...]) -> None:
    with pytest.raises(ValueError, match="non-negative"):
        NormalVersion(*args)


def test_rejects_non_integers() -> None:
    with pytest.raises(TypeError):
        NormalVersion("1")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        NormalVersion(True)


def test_is_immutable() -> None:
    normal = NormalVersion(1, 2, 3)

    with pytest.raises(AttributeError):
        normal.major = 2  # type: ignore[misc]
