"""Shared parsing utilities."""

from .stream import ElementType, Stream, UnexpectedElementError

__all__ = [
    "ElementType",
    "Stream",
    "UnexpectedElementError",
]
