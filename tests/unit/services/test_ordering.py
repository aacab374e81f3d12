from __future__ import annotations

from dataclasses import dataclass

import pytest

from reviewgate.services.ordering import order_for_session, parse_review_id


@dataclass
class DummyReview:
    id: int
    pinned: bool


def _ids(reviews):
    return [review.id for review in reviews]


# Base order as fetched: pinned newest-first, then unpinned newest-first.
BASE = [
    DummyReview(id=9, pinned=True),
    DummyReview(id=4, pinned=True),
    DummyReview(id=12, pinned=False),
    DummyReview(id=11, pinned=False),
    DummyReview(id=7, pinned=False),
]


def test_without_new_review_id_base_order_is_kept():
    assert _ids(order_for_session(BASE, None)) == [9, 4, 12, 11, 7]


def test_unpinned_new_review_moves_to_front():
    assert _ids(order_for_session(BASE, 11)) == [11, 9, 4, 12, 7]


def test_pinned_new_review_moves_to_front():
    assert _ids(order_for_session(BASE, 4)) == [4, 9, 12, 11, 7]


def test_unknown_new_review_id_returns_base_order():
    assert _ids(order_for_session(BASE, 999)) == [9, 4, 12, 11, 7]


def test_input_sequence_is_not_mutated():
    original = list(BASE)
    order_for_session(BASE, 7)
    assert BASE == original


def test_empty_input():
    assert order_for_session([], 3) == []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("", None),
        ("abc", None),
        ("42", 42),
        (" 42", 42),
        ("42abc", 42),
        ("-3", -3),
        (17, 17),
    ],
)
def test_parse_review_id(raw, expected):
    assert parse_review_id(raw) == expected
