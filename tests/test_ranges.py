"""Tests for the span value types."""

from __future__ import annotations

import pytest

from spellscan.core.ranges import MisspellingRange, Token, WordSpan


def test_range_is_inclusive_and_normalised() -> None:
    item = MisspellingRange(9, 5)

    assert item.to_tuple() == (5, 9)
    assert item.length == 5
    assert item.contains(5) and item.contains(9)
    assert not item.contains(10)


def test_indices_below_one_are_clamped() -> None:
    assert MisspellingRange(0, -3).to_tuple() == (1, 1)


def test_range_behaves_like_a_pair() -> None:
    item = MisspellingRange(2, 4)

    start, end = item
    assert (start, end) == (2, 4)
    assert item[0] == 2 and item[1] == 4
    assert len(item) == 2
    with pytest.raises(IndexError):
        item[2]


def test_slice_of_and_to_dict() -> None:
    item = MisspellingRange(5, 9)

    assert item.slice_of("the quikc fox") == "quikc"
    assert item.to_dict() == {"start": 5, "end": 9}


@pytest.mark.parametrize(
    "value",
    [
        {"start": 3, "end": 4},
        [3, 4],
        (3, 4),
        WordSpan(3, 4, "ab"),
        MisspellingRange(3, 4),
    ],
)
def test_from_value(value: object) -> None:
    assert MisspellingRange.from_value(value) == MisspellingRange(3, 4)


@pytest.mark.parametrize("value", [{"start": 1}, [1, 2, 3], "12"])
def test_from_value_rejects_malformed_input(value: object) -> None:
    with pytest.raises((ValueError, TypeError)):
        MisspellingRange.from_value(value)


def test_non_integer_index_is_rejected() -> None:
    with pytest.raises(ValueError):
        MisspellingRange("a", 2)  # type: ignore[arg-type]


def test_token_and_span_conversions() -> None:
    token = Token(4, 6, "dog", potential_domain=True)

    assert token.to_span() == WordSpan(4, 6, "dog")
    assert token.to_span().to_range() == MisspellingRange(4, 6)
