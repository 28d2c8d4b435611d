"""Lookahead stream over characters or tokens.

Both the version grammar parser and the range-expression parser walk their
input through a ``Stream``. The stream owns a private copy of its elements and
a cursor; reading past the end yields ``None``, which element types may treat
as an end-of-input marker.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, Protocol, TypeVar

E = TypeVar("E")
E_contra = TypeVar("E_contra", contravariant=True)


class ElementType(Protocol[E_contra]):
    """Classifies stream elements; used to filter lookahead and consumption."""

    def is_matched_by(self, element: E_contra | None) -> bool: ...


class UnexpectedElementError(Exception):
    """Raised when the next element is not of any of the expected types."""

    def __init__(
        self,
        unexpected_element: object | None,
        position: int,
        expected_element_types: Sequence[object],
    ) -> None:
        self.unexpected_element = unexpected_element
        self.position = position
        self.expected_element_types = tuple(expected_element_types)
        super().__init__(str(self))

    def __str__(self) -> str:
        message = f"Unexpected element '{self.unexpected_element}' at position '{self.position}'"
        if self.expected_element_types:
            names = ", ".join(_type_name(t) for t in self.expected_element_types)
            message += f", expecting '[{names}]'"
        return message


def _type_name(element_type: object) -> str:
    return str(getattr(element_type, "name", element_type))


class Stream(Generic[E]):
    """Array-backed stream with bounded lookahead and single-step push back."""

    def __init__(self, elements: Iterable[E]) -> None:
        self._elements: tuple[E, ...] = tuple(elements)
        self._offset = 0

    @property
    def current_offset(self) -> int:
        return self._offset

    def consume(self, *expected: ElementType[E]) -> E | None:
        """Consume the next element.

        With no ``expected`` types the next element is returned unconditionally
        (``None`` once the stream is exhausted). Otherwise the next element must
        match one of the types or ``UnexpectedElementError`` is raised carrying
        the element, the current offset and the expected types.
        """
        if not expected:
            if self._offset >= len(self._elements):
                return None
            element = self._elements[self._offset]
            self._offset += 1
            return element

        lookahead = self.lookahead(1)
        for element_type in expected:
            if element_type.is_matched_by(lookahead):
                return self.consume()
        raise UnexpectedElementError(lookahead, self._offset, expected)

    def lookahead(self, position: int = 1) -> E | None:
        """Return the element ``position`` steps ahead without consuming it."""
        index = self._offset + position - 1
        if index < len(self._elements):
            return self._elements[index]
        return None

    def positive_lookahead(self, *expected: ElementType[E]) -> bool:
        lookahead = self.lookahead(1)
        return any(element_type.is_matched_by(lookahead) for element_type in expected)

    def positive_lookahead_before(self, before: ElementType[E], *expected: ElementType[E]) -> bool:
        """Check for an element of the expected types ahead of the first ``before`` element."""
        for i in range(1, len(self._elements) + 1):
            lookahead = self.lookahead(i)
            if before.is_matched_by(lookahead):
                break
            for element_type in expected:
                if element_type.is_matched_by(lookahead):
                    return True
        return False

    def positive_lookahead_until(self, until: int, *expected: ElementType[E]) -> bool:
        """Check for an element of the expected types within the next ``until`` positions."""
        for i in range(1, until + 1):
            lookahead = self.lookahead(i)
            for element_type in expected:
                if element_type.is_matched_by(lookahead):
                    return True
        return False

    def push_back(self) -> None:
        if self._offset > 0:
            self._offset -= 1

    def remaining(self) -> list[E]:
        """Return a copy of the elements not yet consumed."""
        return list(self._elements[self._offset :])

    def __iter__(self) -> Iterator[E]:
        # Iterates what is left without moving the cursor.
        return iter(self._elements[self._offset :])

    def __len__(self) -> int:
        return len(self._elements) - self._offset
