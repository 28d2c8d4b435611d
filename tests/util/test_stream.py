from __future__ import annotations

import pytest

from semver_expr.util.stream import Stream, UnexpectedElementError


class _Is:
    def __init__(self, char: str) -> None:
        self.char = char

    def is_matched_by(self, element: str | None) -> bool:
        return element == self.char


class _Never:
    def is_matched_by(self, element: str | None) -> bool:
        return False


def test_stream_is_backed_by_a_copy_of_its_elements() -> None:
    source = ["a", "b", "c"]
    stream = Stream(source)
    remaining = stream.remaining()
    remaining[0] = "z"
    source[1] = "y"

    assert stream.remaining() == ["a", "b", "c"]


def test_consume_returns_elements_one_by_one_then_none() -> None:
    stream = Stream("abc")

    assert [stream.consume(), stream.consume(), stream.consume()] == ["a", "b", "c"]
    assert stream.consume() is None


def test_consume_with_expected_types_raises_structured_error() -> None:
    stream = Stream("abc")
    stream.consume()
    expected = _Never()

    with pytest.raises(UnexpectedElementError) as excinfo:
        stream.consume(expected)

    assert excinfo.value.unexpected_element == "b"
    assert excinfo.value.position == 1
    assert excinfo.value.expected_element_types == (expected,)
    assert stream.current_offset == 1


def test_consume_with_matching_type() -> None:
    stream = Stream("abc")

    assert stream.consume(_Never(), _Is("a")) == "a"


def test_keeps_track_of_current_offset() -> None:
    stream = Stream("abc")
    assert stream.current_offset == 0
    stream.consume()
    assert stream.current_offset == 1
    stream.consume()
    stream.consume()
    assert stream.current_offset == 3


def test_lookahead_does_not_consume() -> None:
    stream = Stream("abc")

    assert stream.lookahead() == "a"
    assert stream.lookahead() == "a"
    assert [stream.lookahead(1), stream.lookahead(2), stream.lookahead(3)] == ["a", "b", "c"]
    assert stream.lookahead(4) is None


def test_positive_lookahead() -> None:
    stream = Stream("abc")

    assert stream.positive_lookahead(_Is("a"))
    assert not stream.positive_lookahead(_Is("c"))


def test_positive_lookahead_before() -> None:
    stream = Stream("1.0.0")

    assert stream.positive_lookahead_before(_Is("."), _Is("1"))
    assert not stream.positive_lookahead_before(_Is("1"), _Is("."))


def test_positive_lookahead_until() -> None:
    stream = Stream("1.0.0")

    assert stream.positive_lookahead_until(3, _Is("0"))
    assert not stream.positive_lookahead_until(3, _Is("a"))
    assert not stream.positive_lookahead_until(2, _Is("0"))


def test_push_back_one_element_at_a_time_and_stops_at_start() -> None:
    stream = Stream("abc")
    assert stream.consume() == "a"
    stream.push_back()
    assert stream.consume() == "a"

    stream.consume()
    stream.consume()
    for _ in range(5):
        stream.push_back()
    assert stream.consume() == "a"


def test_iterates_only_remaining_elements_without_consuming() -> None:
    stream = Stream("abc")
    stream.consume()

    assert list(stream) == ["b", "c"]
    assert stream.current_offset == 1
    assert stream.remaining() == ["b", "c"]
