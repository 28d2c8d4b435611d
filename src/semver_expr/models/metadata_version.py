"""Pre-release and build metadata identifiers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import MetadataIncrementError

_NUMERIC = re.compile(r"[0-9]+")
_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")


def _is_numeric(identifier: str) -> bool:
    return _NUMERIC.fullmatch(identifier) is not None


def _compare_identifiers(left: str, right: str) -> int:
    if _is_numeric(left) and _is_numeric(right):
        a, b = int(left), int(right)
    else:
        a, b = left, right
    if a == b:
        return 0
    return -1 if a < b else 1


@dataclass(frozen=True)
class MetadataVersion:
    """Dot-separated identifiers following ``-`` or ``+`` in a version.

    Absent metadata is represented by ``None`` at the ``Version`` level rather
    than by an instance of this class; see ``compare_metadata``.
    """

    identifiers: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.identifiers:
            raise ValueError("Metadata must contain at least one identifier")
        for identifier in self.identifiers:
            if not isinstance(identifier, str) or _IDENTIFIER.fullmatch(identifier) is None:
                raise ValueError(f"Invalid metadata identifier: {identifier!r}")

    @classmethod
    def from_iterable(cls, identifiers: Iterable[str]) -> MetadataVersion:
        return cls(identifiers=tuple(identifiers))

    def compare_to(self, other: MetadataVersion) -> int:
        for left, right in zip(self.identifiers, other.identifiers):
            result = _compare_identifiers(left, right)
            if result != 0:
                return result
        size = len(self.identifiers) - len(other.identifiers)
        return (size > 0) - (size < 0)

    def increment(self) -> MetadataVersion:
        """Bump the trailing numeric identifier, or append ``1`` when there is none."""
        *head, last = self.identifiers
        if _is_numeric(last):
            return MetadataVersion(identifiers=(*head, str(int(last) + 1)))
        return MetadataVersion(identifiers=(*self.identifiers, "1"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetadataVersion):
            return NotImplemented
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        # numeric identifiers compare by value, so "01" and "1" must hash alike
        return hash(tuple(str(int(i)) if _is_numeric(i) else i for i in self.identifiers))

    def __lt__(self, other: MetadataVersion) -> bool:
        if not isinstance(other, MetadataVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self) -> str:
        return ".".join(self.identifiers)


def compare_metadata(left: MetadataVersion | None, right: MetadataVersion | None) -> int:
    """Natural comparison where absent metadata ranks above any identifiers.

    This is the pre-release rule: ``1.0.0-rc.1 < 1.0.0``. Build metadata needs
    the opposite ranking, which callers get by negating the result when either
    side is absent.
    """
    if left is None:
        return 0 if right is None else 1
    if right is None:
        return -1
    return left.compare_to(right)


def increment_metadata(metadata: MetadataVersion | None, label: str) -> MetadataVersion:
    if metadata is None:
        raise MetadataIncrementError(f"{label} is not set and cannot be incremented")
    return metadata.increment()
