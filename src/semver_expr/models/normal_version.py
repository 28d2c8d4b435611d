"""The ``major.minor.patch`` core of a version."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_NUMBER = 2**63 - 1


def check_number(value: object, label: str) -> int:
    """Return ``value`` if it is a usable version number, else raise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} version must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError("Major, minor and patch versions MUST be non-negative integers.")
    if value > MAX_NUMBER:
        raise ValueError(f"{label} version {value} exceeds the maximum of {MAX_NUMBER}")
    return value


@dataclass(frozen=True, order=True, init=False)
class NormalVersion:
    """Immutable version core.

    ``NormalVersion(1)``, ``NormalVersion(1, 2)`` and ``NormalVersion(1, 2, 3)``
    record which components were given; omitted ones are zero. The
    ``*_specified`` flags only affect rendering, never equality or ordering.
    """

    major: int
    minor: int
    patch: int
    minor_specified: bool = field(compare=False)
    patch_specified: bool = field(compare=False)

    def __init__(self, major: int, minor: int | None = None, patch: int | None = None) -> None:
        self._assign(
            check_number(major, "Major"),
            0 if minor is None else check_number(minor, "Minor"),
            0 if patch is None else check_number(patch, "Patch"),
            minor is not None,
            patch is not None,
        )

    @classmethod
    def _with_flags(
        cls,
        major: int,
        minor: int,
        patch: int,
        minor_specified: bool,
        patch_specified: bool,
    ) -> NormalVersion:
        instance = cls.__new__(cls)
        instance._assign(
            check_number(major, "Major"),
            check_number(minor, "Minor"),
            check_number(patch, "Patch"),
            minor_specified,
            patch_specified,
        )
        return instance

    def _assign(
        self,
        major: int,
        minor: int,
        patch: int,
        minor_specified: bool,
        patch_specified: bool,
    ) -> None:
        object.__setattr__(self, "major", major)
        object.__setattr__(self, "minor", minor)
        object.__setattr__(self, "patch", patch)
        object.__setattr__(self, "minor_specified", minor_specified)
        object.__setattr__(self, "patch_specified", patch_specified)

    def compare_to(self, other: NormalVersion) -> int:
        left = (self.major, self.minor, self.patch)
        right = (other.major, other.minor, other.patch)
        if left == right:
            return 0
        return -1 if left < right else 1

    def increment_major(self) -> NormalVersion:
        return NormalVersion._with_flags(self.major + 1, 0, 0, True, False)

    def increment_minor(self) -> NormalVersion:
        return NormalVersion._with_flags(self.major, self.minor + 1, 0, False, False)

    def increment_patch(self) -> NormalVersion:
        return NormalVersion._with_flags(self.major, self.minor, self.patch + 1, True, True)

    def __str__(self) -> str:
        if not self.minor_specified and not self.patch_specified and self.minor == 0 and self.patch == 0:
            return f"{self.major}"
        if not self.patch_specified and self.patch == 0:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.patch}"
