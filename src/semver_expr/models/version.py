"""Version value object: normal core, optional pre-release and build metadata."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .metadata_version import MetadataVersion, compare_metadata, increment_metadata
from .normal_version import NormalVersion

if TYPE_CHECKING:
    from ..expr.nodes import Expression

PRE_RELEASE_PREFIX = "-"
BUILD_PREFIX = "+"


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """Immutable semantic version.

    Equality, hashing and ordering follow version precedence and ignore build
    metadata entirely; use ``compare_with_builds_to`` or ``BUILD_AWARE_ORDER``
    when build metadata must break ties. Every "setter" and "incrementer"
    returns a new instance.

    Instances are normally produced by ``Version.parse``. Text written by
    ``str()`` always uses ``-`` and ``+`` separators even when the relaxed
    grammar accepted ``_`` or a trailing ``.`` on input.
    """

    normal: NormalVersion
    pre_release: MetadataVersion | None = None
    build: MetadataVersion | None = None

    # ---- construction -------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, *, strict: bool = False) -> Version:
        from ..parsers.version_parser import parse_valid_semver

        return parse_valid_semver(text, strict=strict)

    @classmethod
    def of(cls, major: int, minor: int | None = None, patch: int | None = None) -> Version:
        """Build a version from numbers; a lone major counts as ``major.0``."""
        return cls(NormalVersion(major, 0 if minor is None else minor, patch))

    @classmethod
    def from_float(cls, major_and_minor: float) -> Version:
        """Parse ``major.minor`` out of a float such as ``1.5``."""
        if isinstance(major_and_minor, bool) or not isinstance(major_and_minor, (int, float)):
            raise TypeError("major_and_minor must be a number")
        if not math.isfinite(major_and_minor) or major_and_minor < 0:
            raise ValueError("Major.minor number MUST be non-negative!")
        return cls.parse(repr(float(major_and_minor)))

    @staticmethod
    def builder(normal: str | None = None) -> Builder:
        return Builder(normal)

    # ---- accessors ----------------------------------------------------------------------

    @property
    def major(self) -> int:
        return self.normal.major

    @property
    def minor(self) -> int:
        return self.normal.minor

    @property
    def patch(self) -> int:
        return self.normal.patch

    @property
    def normal_version(self) -> str:
        return str(self.normal)

    @property
    def pre_release_version(self) -> str:
        return "" if self.pre_release is None else str(self.pre_release)

    @property
    def build_metadata(self) -> str:
        return "" if self.build is None else str(self.build)

    # ---- precedence ---------------------------------------------------------------------

    def compare_to(self, other: Version) -> int:
        result = self.normal.compare_to(other.normal)
        if result == 0:
            result = compare_metadata(self.pre_release, other.pre_release)
        return result

    def compare_with_builds_to(self, other: Version) -> int:
        return compare_with_builds(self, other)

    def greater_than(self, other: Version) -> bool:
        return self.compare_to(other) > 0

    def greater_than_or_equal_to(self, other: Version) -> bool:
        return self.compare_to(other) >= 0

    def less_than(self, other: Version) -> bool:
        return self.compare_to(other) < 0

    def less_than_or_equal_to(self, other: Version) -> bool:
        return self.compare_to(other) <= 0

    def is_major_version_compatible(self, other: Version) -> bool:
        return self.major == other.major

    def is_minor_version_compatible(self, other: Version) -> bool:
        return self.major == other.major and self.minor == other.minor

    def satisfies(self, expr: str | Expression) -> bool:
        """Evaluate a range expression (text or parsed tree) against this version."""
        if isinstance(expr, str):
            from ..expr.parser import ExpressionParser

            expr = ExpressionParser().parse(expr)
        return expr.interpret(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash((self.normal, self.pre_release))

    # ---- derivation ---------------------------------------------------------------------

    def set_pre_release_version(self, pre_release: str) -> Version:
        from ..parsers.version_parser import parse_pre_release

        return Version(self.normal, parse_pre_release(pre_release))

    def set_build_metadata(self, build: str) -> Version:
        from ..parsers.version_parser import parse_build

        return Version(self.normal, self.pre_release, parse_build(build))

    def increment_major_version(self, pre_release: str | None = None) -> Version:
        return self._incremented(self.normal.increment_major(), pre_release)

    def increment_minor_version(self, pre_release: str | None = None) -> Version:
        return self._incremented(self.normal.increment_minor(), pre_release)

    def increment_patch_version(self, pre_release: str | None = None) -> Version:
        return self._incremented(self.normal.increment_patch(), pre_release)

    def increment_pre_release_version(self) -> Version:
        return Version(self.normal, increment_metadata(self.pre_release, "Pre-release version"))

    def increment_build_metadata(self) -> Version:
        return Version(self.normal, self.pre_release, increment_metadata(self.build, "Build metadata"))

    @staticmethod
    def _incremented(normal: NormalVersion, pre_release: str | None) -> Version:
        if pre_release is None:
            return Version(normal)
        from ..parsers.version_parser import parse_pre_release

        return Version(normal, parse_pre_release(pre_release))

    # ---- rendering & serialization ------------------------------------------------------

    def __str__(self) -> str:
        text = self.normal_version
        if self.pre_release_version:
            text += PRE_RELEASE_PREFIX + self.pre_release_version
        if self.build_metadata:
            text += BUILD_PREFIX + self.build_metadata
        return text

    def __repr__(self) -> str:
        return f"Version('{self}')"

    def to_dict(self) -> dict[str, str]:
        return {
            "normal": self.normal_version,
            "preRelease": self.pre_release_version,
            "build": self.build_metadata,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Version:
        """Rebuild a version from ``to_dict`` output, validating the document first."""
        from ..validators.version_document import validate_document

        validate_document(data)
        return (
            cls.builder(data["normal"])
            .set_pre_release_version(data.get("preRelease", ""))
            .set_build_metadata(data.get("build", ""))
            .build()
        )


class Builder:
    """Assemble a version from its textual parts.

    The parts are concatenated with ``-``/``+`` and re-parsed on ``build()``,
    so builder output obeys exactly the grammar (and errors) of ``Version.parse``.
    """

    def __init__(self, normal: str | None = None) -> None:
        self._normal = normal
        self._pre_release: str | None = None
        self._build: str | None = None

    def set_normal_version(self, normal: str | None) -> Builder:
        self._normal = normal
        return self

    def set_pre_release_version(self, pre_release: str | None) -> Builder:
        self._pre_release = pre_release
        return self

    def set_build_metadata(self, build: str | None) -> Builder:
        self._build = build
        return self

    def build(self, *, strict: bool = False) -> Version:
        text = self._normal or ""
        if self._pre_release:
            text += PRE_RELEASE_PREFIX + self._pre_release
        if self._build:
            text += BUILD_PREFIX + self._build
        return Version.parse(text, strict=strict)


def compare_with_builds(left: Version, right: Version) -> int:
    """Precedence comparison that falls back to build metadata on ties.

    Unlike pre-release, having build metadata ranks *above* having none, so
    the natural metadata result is negated whenever one side lacks it.
    """
    result = left.compare_to(right)
    if result == 0:
        result = compare_metadata(left.build, right.build)
        if left.build is None or right.build is None:
            result = -result
    return result


BUILD_AWARE_ORDER = functools.cmp_to_key(compare_with_builds)
