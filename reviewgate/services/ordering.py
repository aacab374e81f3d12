"""Display ordering for approved reviews."""

from __future__ import annotations

import re
from collections.abc import Sequence

from reviewgate.models.review import Review

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_review_id(raw: str | int | None) -> int | None:
    """Read the leading integer of a query value; None when absent or non-numeric."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def order_for_session(reviews: Sequence[Review], new_review_id: int | None) -> list[Review]:
    """Surface the just-submitted review first, then pinned, then the rest.

    `reviews` must already be in base order (pinned desc, created_at desc).
    Relative order inside the pinned and unpinned groups is preserved. When
    the id is absent or not in `reviews`, the base order is returned as-is.
    """
    ordered = list(reviews)
    if new_review_id is None:
        return ordered

    highlighted = next((review for review in ordered if review.id == new_review_id), None)
    if highlighted is None:
        return ordered

    remaining = [review for review in ordered if review.id != new_review_id]
    pinned = [review for review in remaining if review.pinned]
    unpinned = [review for review in remaining if not review.pinned]
    return [highlighted, *pinned, *unpinned]
